from __future__ import annotations
import logging
import shutil
from pathlib import Path
from typing import BinaryIO, List

from cms.config import IMAGE_FILE_EXTENSIONS, Settings
from cms.errors import ImageNotFound, InvalidName
from cms.models.image import Image
from cms.utils.utils import extension_of, image_file, images_dir, list_file_names

logger = logging.getLogger(__name__)

def is_image(filename: str) -> bool:
    return extension_of(filename) in IMAGE_FILE_EXTENSIONS

def list_images(settings: Settings) -> List[Image]:
    return [Image.from_name(n) for n in list_file_names(images_dir(settings)) if is_image(n)]

def get_image(settings: Settings, name: str) -> Image:
    try:
        path = image_file(settings, name)
    except InvalidName:
        raise ImageNotFound(name)
    if not path.is_file():
        raise ImageNotFound(name)
    return Image.from_name(path.name)

def save_image(settings: Settings, filename: str, stream: BinaryIO) -> Image:
    """
    Salva l'upload sotto il suo nome base (senza directory del client).
    Lancia InvalidName per nomi non validi.
    """
    name = Path(filename.replace("\\", "/")).name
    target = image_file(settings, name)
    with target.open("wb") as fp:
        shutil.copyfileobj(stream, fp)
    logger.info("Uploaded image %s", name)
    return Image.from_name(name)
