import re

from sqlmodel import select

from app.db.schema import User, UserSettings
from app.services.password import verify_password
from app.services.user import UserService
from seed import DEMO_USER

EMAIL = "alice@factory.example.com"
PASSWORD = "correct-horse"


def _register(client, email=EMAIL, password=PASSWORD):
    return client.post("/api/register", json={"email": email, "password": password})


def _login(client, email=EMAIL, password=PASSWORD, remember=False):
    return client.post(
        "/api/login", json={"email": email, "password": password, "remember": remember})


def _auth_header(client):
    _register(client)
    token = _login(client).json()["token"]
    return {"Authorization": f"Bearer {token}"}


def test_register_hashes_password(client, session):
    response = _register(client)

    assert response.status_code == 201
    assert response.json() == {"message": "User registered successfully!"}

    user = session.exec(select(User)).one()
    assert user.hashed_password != PASSWORD
    assert verify_password(PASSWORD, user.hashed_password)


def test_register_duplicate_email(client):
    _register(client)

    response = _register(client, email=EMAIL.upper())

    assert response.status_code == 400
    assert response.json() == {"detail": "User already exists"}


def test_login(client):
    _register(client)

    response = _login(client, remember=True)

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful!"
    assert body["token"]


def test_login_unknown_user(client):
    assert _login(client).status_code == 404


def test_login_wrong_password(client):
    _register(client)

    response = _login(client, password="wrong-password")

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}


def test_get_user_profile_hides_password(client):
    _register(client)

    response = client.get(f"/api/user/{EMAIL}")

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == EMAIL
    assert body["firstName"] == ""
    assert "hashedPassword" not in body
    assert "password" not in body


def test_get_unknown_user(client):
    assert client.get("/api/user/nobody@factory.example.com").status_code == 404


def test_update_user_profile(client, session):
    _register(client)

    response = client.put(f"/api/user/{EMAIL}", json={
        "firstName": "Alice",
        "lastName": "Smith",
        "address": "1 Assembly Road",
    })

    assert response.status_code == 200
    profile = client.get(f"/api/user/{EMAIL}").json()
    assert profile["firstName"] == "Alice"
    assert profile["lastName"] == "Smith"
    assert profile["address"] == "1 Assembly Road"
    assert profile["birthday"] == ""


def test_update_unknown_user_profile(client):
    response = client.put("/api/user/nobody@factory.example.com", json={"firstName": "X"})
    assert response.status_code == 404


def test_forgot_and_reset_password(client, mailer):
    _register(client)

    response = client.post("/api/forgot-password", json={"email": EMAIL})

    assert response.status_code == 200
    assert len(mailer.sent) == 1
    assert mailer.sent[0]["to"] == EMAIL

    token = re.search(r"token=([\w\-\.]+)", mailer.sent[0]["html"]).group(1)
    response = client.post(
        "/api/reset-password", json={"token": token, "password": "new-password"})

    assert response.status_code == 200
    assert _login(client, password=PASSWORD).status_code == 401
    assert _login(client, password="new-password").status_code == 200


def test_forgot_password_unknown_user(client, mailer):
    response = client.post("/api/forgot-password", json={"email": "nobody@factory.example.com"})

    assert response.status_code == 404
    assert mailer.sent == []


def test_forgot_password_mail_failure(client, mailer):
    _register(client)
    mailer.fail = True

    response = client.post("/api/forgot-password", json={"email": EMAIL})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to send email"}


def test_reset_password_rejects_bad_token(client):
    response = client.post(
        "/api/reset-password", json={"token": "not-a-jwt", "password": "new-password"})
    assert response.status_code == 400


def test_login_token_cannot_reset_password(client):
    _register(client)
    token = _login(client).json()["token"]

    response = client.post(
        "/api/reset-password", json={"token": token, "password": "new-password"})

    assert response.status_code == 400


def test_settings_require_authentication(client):
    assert client.get("/api/settings").status_code == 401
    assert client.post("/api/settings", json={"darkMode": True}).status_code == 401


def test_settings_not_found_until_saved(client):
    headers = _auth_header(client)

    response = client.get("/api/settings", headers=headers)

    assert response.status_code == 404


def test_settings_upsert(client, session):
    headers = _auth_header(client)

    first = client.post("/api/settings", headers=headers, json={
        "pushNotifications": True, "darkMode": True,
        "emailNotifications": False, "autoLogout": False,
    })
    second = client.post("/api/settings", headers=headers, json={
        "pushNotifications": False, "darkMode": True,
        "emailNotifications": True, "autoLogout": True,
    })

    assert first.status_code == 200
    assert second.json() == {"message": "Settings saved successfully!"}
    assert len(session.exec(select(UserSettings)).all()) == 1

    saved = client.get("/api/settings", headers=headers).json()
    assert saved == {
        "user": EMAIL,
        "pushNotifications": False,
        "darkMode": True,
        "emailNotifications": True,
        "autoLogout": True,
    }


def test_upload_profile_picture(client):
    response = client.post(
        "/api/upload",
        files={"profilePicture": ("avatar.PNG", b"\x89PNG\r\n\x1a\n", "image/png")},
    )

    assert response.status_code == 200
    image_url = response.json()["imageUrl"]
    assert "/static/uploads/" in image_url
    assert image_url.endswith(".png")


def test_upload_rejects_non_image(client):
    response = client.post(
        "/api/upload",
        files={"profilePicture": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 400


def test_upload_without_file(client):
    assert client.post("/api/upload").status_code == 400


def test_seeded_demo_account_can_log_in(client, session):
    UserService(session).register(DEMO_USER["email"], DEMO_USER["password"])

    response = _login(client, email=DEMO_USER["email"], password=DEMO_USER["password"])

    assert response.status_code == 200
    assert response.json()["token"]
