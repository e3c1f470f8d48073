from __future__ import annotations
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

# Estensioni ammesse
IMAGE_FILE_EXTENSIONS = (".jpeg", ".png", ".gif", ".jpg")
DOCUMENT_EXTENSIONS = (".txt", ".md")

# Nomi ammessi per documenti/immagini (un solo componente di path)
ALLOWED_NAME_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9._ -]*$"

TEMPLATES_DIR: Path = Path(__file__).resolve().parent / "templates"
DEFAULT_SESSION_SECRET = "secret"

class Settings(BaseSettings):
    # CMS_DATA_DIR, CMS_IMAGES_DIR, ... (anche da .env)
    data_dir: Path = Path("data")
    images_dir: Path = Path("public/uploads")
    credentials_file: Path = Path("users.yml")
    session_secret: str = DEFAULT_SESSION_SECRET
    bcrypt_rounds: int = 12
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CMS_",
        env_file=".env",
        extra="ignore",
    )
