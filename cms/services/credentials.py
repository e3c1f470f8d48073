from __future__ import annotations
import logging
from typing import Dict, Optional

import bcrypt

from cms.config import Settings
from cms.models.user import SignupForm
from cms.utils.utils import atomic_write_yaml, credentials_file, read_yaml

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
MIN_USERNAME_LENGTH = 4
# bcrypt non accetta password oltre 72 byte
MAX_PASSWORD_BYTES = 72

def load_user_credentials(settings: Settings) -> Dict[str, str]:
    return read_yaml(credentials_file(settings)) or {}

def save_user_credentials(settings: Settings, users: Dict[str, str]) -> None:
    atomic_write_yaml(credentials_file(settings), users)

def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")

def verify_password(password: str, password_hash: str) -> bool:
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False

def valid_credentials(settings: Settings, username: str, password: str) -> bool:
    users = load_user_credentials(settings)
    if username not in users:
        return False
    return verify_password(password, str(users[username]))

def error_for_passwords(password1: str, password2: str) -> Optional[str]:
    if password1 != password2:
        return "Passwords do not match -- Please try again."
    if len(password1) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
    if len(password1.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return f"Password must be at most {MAX_PASSWORD_BYTES} bytes."
    if " " in password1:
        return "Please provide a password with no spaces."
    return None

def error_for_username(settings: Settings, username: str) -> Optional[str]:
    name = username.strip()
    if len(name) < MIN_USERNAME_LENGTH or any(c.isspace() for c in name):
        return f"Username must be at least {MIN_USERNAME_LENGTH} characters (no spaces)"
    if name in load_user_credentials(settings):
        return "Username is taken -- Please choose another."
    return None

def signup_error(settings: Settings, form: SignupForm) -> Optional[str]:
    return (error_for_passwords(form.password, form.verify_password)
            or error_for_username(settings, form.username))

def create_user(settings: Settings, username: str, password: str) -> str:
    """Registra l'utente e riscrive il file credenziali. Ritorna lo username normalizzato."""
    name = username.strip()
    users = load_user_credentials(settings)
    users[name] = hash_password(password, settings.bcrypt_rounds)
    save_user_credentials(settings, users)
    logger.info("Registered user %s", name)
    return name
