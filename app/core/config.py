from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from pathlib import Path
import os


load_dotenv()


class Settings(BaseSettings):
    app_name: str = "Factory Operations API"
    debug: bool = False
    database_url: str = "sqlite:///./factory.db"
    host: str = "127.0.0.1"
    port: int = 5001
    secret_key: str = ""
    login_token_expire_minutes: int = 60 * 24
    remember_token_expire_minutes: int = 60 * 24 * 30
    reset_token_expire_minutes: int = 60
    allowed_hosts: str = ""
    static_dir: Path = Path(__file__).parent.parent.parent / "static"
    public_url: str = "http://localhost:5001"
    frontend_url: str = "http://localhost:5173"
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    email_user: str = ""
    email_pass: str = ""
    log_file: str = "logs/application.log"


settings = Settings()

if not settings.secret_key:
    raise RuntimeError("Secret key not configured.")


os.makedirs(settings.static_dir, exist_ok=True)
