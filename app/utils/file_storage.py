import os
import shutil
import uuid
from pathlib import Path
from fastapi import UploadFile
from loguru import logger

from app.core.config import settings
from app.core.exceptions import PersistenceError, ValidationError


# Define storage location (using Path for OS agnostic handling)
UPLOAD_DIR = Path(settings.static_dir) / "uploads"
UPLOAD_URL_PREFIX = "/static/uploads"

ALLOWED_IMAGE_EXTENSIONS = {
    "png", "jpg", "jpeg",
    "gif", "bmp", "webp",
}


def validate_image_extension(filename: str) -> str:
    """
    Returns the lower-cased extension of an uploaded image.
    Raises ValidationError if it is missing or not an image type.
    """
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""

    if ext not in ALLOWED_IMAGE_EXTENSIONS:
        raise ValidationError(
            f"File extension '.{ext}' is not allowed. Allowed extensions: "
            f"{', '.join(sorted(ALLOWED_IMAGE_EXTENSIONS))}"
        )
    return ext


def save_upload_file(upload_file: UploadFile) -> str:
    """
    Saves an uploaded image to the static uploads directory and returns its
    public URL.
    """
    ext = validate_image_extension(upload_file.filename or "")

    os.makedirs(UPLOAD_DIR, exist_ok=True)

    # Unique name so uploads never overwrite each other
    unique_name = f"{uuid.uuid4()}.{ext}"
    file_path = UPLOAD_DIR / unique_name

    try:
        with open(file_path, "wb") as buffer:
            shutil.copyfileobj(upload_file.file, buffer)
    except OSError:
        logger.exception(f"Saving upload {upload_file.filename} failed")
        raise PersistenceError("Failed to store upload")

    # e.g. http://localhost:5001/static/uploads/uuid.png
    return f"{settings.public_url}{UPLOAD_URL_PREFIX}/{unique_name}"
