from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import HTMLResponse

from cms.config import Settings
from cms.dependencies import get_settings, require_signed_in_user
from cms.errors import InvalidName
from cms.services.images import is_image, list_images, save_image
from cms.templating import flash, redirect, render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Images"])

@router.get("/images", response_class=HTMLResponse)
def images_index(request: Request, settings: Settings = Depends(get_settings)):
    return render(request, "images.html", {"images": list_images(settings)})

@router.post("/upload", dependencies=[Depends(require_signed_in_user)])
def upload_image(request: Request,
                 file: Optional[UploadFile] = File(None),
                 settings: Settings = Depends(get_settings)):
    if file is None or not file.filename:
        flash(request, "You must choose a file.")
    elif not is_image(file.filename):
        logger.warning("Rejected upload %s: not an image", file.filename)
        flash(request, "File must be an image.")
    else:
        try:
            image = save_image(settings, file.filename, file.file)
            flash(request, f"{image.name} has been uploaded.")
        except InvalidName as exc:
            logger.warning("Rejected upload %s: invalid name", file.filename)
            flash(request, str(exc))
    return redirect("/images")
