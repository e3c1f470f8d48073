from __future__ import annotations
import os
import re
import tempfile
from pathlib import Path
from typing import Any, List

import yaml

from cms.config import ALLOWED_NAME_PATTERN, Settings
from cms.errors import InvalidName

# ============================================================================
# Validazione nomi
# ============================================================================
_ALLOWED_NAME = re.compile(ALLOWED_NAME_PATTERN)

def sanitize_name(raw: str) -> str:
    s = (raw or "").strip()
    if not _ALLOWED_NAME.match(s) or ".." in s:
        raise InvalidName(s)
    return s

def extension_of(name: str) -> str:
    return Path(name).suffix.lower()

# ============================================================================
# FS helpers
# ============================================================================
def ensure_dir(p: Path) -> Path:
    p.mkdir(parents=True, exist_ok=True)
    return p

def _atomic_write(path: Path, write) -> None:
    """
    Scrittura atomica:
    - crea il tmp nella STESSA directory del file finale
    - sostituzione atomica con os.replace
    """
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(parent), suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fp:
            write(fp)
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise

def atomic_write_text(path: Path, text: str) -> None:
    _atomic_write(path, lambda fp: fp.write(text))

def atomic_write_yaml(path: Path, obj: Any) -> None:
    _atomic_write(path, lambda fp: yaml.safe_dump(obj, fp, default_flow_style=False, allow_unicode=True))

def read_yaml(path: Path) -> Any:
    if not path.exists():
        return None
    return yaml.safe_load(path.read_text("utf-8"))

def list_file_names(base_dir: Path) -> List[str]:
    if not base_dir.exists():
        return []
    return sorted(p.name for p in base_dir.iterdir() if p.is_file() and not p.name.endswith(".tmp"))

# ============================================================================
# Layout
#   <data_dir>/<document>
#   <images_dir>/<image>
# ============================================================================
def data_dir(settings: Settings) -> Path:
    return ensure_dir(Path(settings.data_dir))

def images_dir(settings: Settings) -> Path:
    return ensure_dir(Path(settings.images_dir))

def document_file(settings: Settings, name: str) -> Path:
    return data_dir(settings) / sanitize_name(name)

def image_file(settings: Settings, name: str) -> Path:
    return images_dir(settings) / sanitize_name(name)

def credentials_file(settings: Settings) -> Path:
    return Path(settings.credentials_file)
