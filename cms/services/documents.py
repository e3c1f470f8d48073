from __future__ import annotations
import logging
import re
import shutil
from pathlib import Path
from typing import List

import markdown

from cms.config import DOCUMENT_EXTENSIONS, Settings
from cms.errors import DocumentNotFound, InvalidName
from cms.models.document import Document
from cms.models.image import Image
from cms.utils.utils import atomic_write_text, data_dir, document_file, list_file_names, sanitize_name

logger = logging.getLogger(__name__)

_COPY_SUFFIX = re.compile(r"_copy_\d+$")

def render_markdown(text: str) -> str:
    return markdown.markdown(text)

def list_documents(settings: Settings) -> List[Document]:
    return [Document.from_name(n) for n in list_file_names(data_dir(settings))]

def existing_document(settings: Settings, name: str) -> Path:
    """Path del documento; DocumentNotFound se il nome non è valido o il file manca."""
    try:
        path = document_file(settings, name)
    except InvalidName:
        raise DocumentNotFound(name)
    if not path.is_file():
        raise DocumentNotFound(name)
    return path

def read_document(settings: Settings, name: str) -> str:
    return existing_document(settings, name).read_text("utf-8", errors="replace")

def create_document(settings: Settings, name: str, extension: str) -> str:
    """
    Crea un documento vuoto `<name><extension>` e ritorna il nome file.
    Lancia ValueError per estensioni non ammesse o file già esistenti,
    InvalidName per nomi non validi.
    """
    if extension not in DOCUMENT_EXTENSIONS:
        raise ValueError(f"Extension must be one of {', '.join(DOCUMENT_EXTENSIONS)}.")
    filename = sanitize_name(name) + extension
    path = document_file(settings, filename)
    if path.exists():
        raise ValueError(f"{filename} already exists.")
    path.touch()
    logger.info("Created document %s", filename)
    return filename

def update_document(settings: Settings, name: str, content: str) -> None:
    path = existing_document(settings, name)
    atomic_write_text(path, content)
    logger.info("Updated document %s (%d chars)", name, len(content))

def delete_document(settings: Settings, name: str) -> None:
    existing_document(settings, name).unlink()
    logger.info("Deleted document %s", name)

def base_name(stem: str) -> str:
    return _COPY_SUFFIX.sub("", stem)

def next_version(settings: Settings, base: str) -> int:
    """Numero della prossima copia di `base` (1 se non ce ne sono)."""
    pattern = re.compile(re.escape(base) + r"_copy_(\d+)$")
    versions = [0]
    for n in list_file_names(data_dir(settings)):
        m = pattern.match(Path(n).stem)
        if m:
            versions.append(int(m.group(1)))
    return max(versions) + 1

def duplicate_document(settings: Settings, name: str) -> str:
    src = existing_document(settings, name)
    base = base_name(src.stem)
    new_name = f"{base}_copy_{next_version(settings, base)}{src.suffix}"
    shutil.copyfile(src, data_dir(settings) / new_name)
    logger.info("Duplicated document %s as %s", name, new_name)
    return new_name

def append_image(settings: Settings, name: str, image: Image) -> None:
    path = existing_document(settings, name)
    content = path.read_text("utf-8", errors="replace") + "\n" + image.markdown
    atomic_write_text(path, content)
    logger.info("Added image %s to document %s", image.name, name)
