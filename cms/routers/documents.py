from __future__ import annotations
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from cms.config import DOCUMENT_EXTENSIONS, Settings
from cms.dependencies import get_settings, require_signed_in_user
from cms.errors import InvalidName
from cms.models.document import Document
from cms.services.documents import (
    append_image, create_document, delete_document, duplicate_document,
    existing_document, list_documents, read_document, render_markdown, update_document,
)
from cms.services.images import get_image, list_images
from cms.templating import flash, redirect, render

router = APIRouter(tags=["Documents"])
signed_in = [Depends(require_signed_in_user)]

# ============================================================================
# Indice & creazione
# ============================================================================
@router.get("/", response_class=HTMLResponse)
def index(request: Request, settings: Settings = Depends(get_settings)):
    return render(request, "index.html", {"documents": list_documents(settings)})

@router.get("/new", response_class=HTMLResponse, dependencies=signed_in)
def new_document_form(request: Request):
    return render(request, "new_file.html", {"extensions": DOCUMENT_EXTENSIONS})

@router.post("/new", dependencies=signed_in)
def create_new_document(request: Request,
                        new_file: str = Form(""),
                        extension: str = Form(DOCUMENT_EXTENSIONS[0]),
                        settings: Settings = Depends(get_settings)):
    name = new_file.strip()
    if not name:
        error = "A name is required."
    else:
        try:
            filename = create_document(settings, name, extension)
            error = None
        except (ValueError, InvalidName) as exc:
            error = str(exc)
    if error:
        flash(request, error)
        return render(request, "new_file.html",
                      {"extensions": DOCUMENT_EXTENSIONS, "new_file": name, "extension": extension},
                      status_code=422)
    flash(request, f"{filename} has been created.")
    return redirect("/")

# ============================================================================
# Singolo documento
# ============================================================================
@router.get("/{filename}")
def view_document(request: Request, filename: str, settings: Settings = Depends(get_settings)):
    content = read_document(settings, filename)
    if Document.from_name(filename).is_markdown:
        return render(request, "document.html", {"filename": filename, "html": render_markdown(content)})
    return PlainTextResponse(content)

@router.get("/{filename}/edit", response_class=HTMLResponse, dependencies=signed_in)
def edit_document_form(request: Request, filename: str, settings: Settings = Depends(get_settings)):
    content = read_document(settings, filename)
    is_markdown = Document.from_name(filename).is_markdown
    return render(request, "edit_file.html", {
        "filename": filename,
        "content": content,
        "is_markdown": is_markdown,
        "images": list_images(settings) if is_markdown else [],
    })

@router.post("/{filename}/edit", dependencies=signed_in)
def update_existing_document(request: Request, filename: str,
                             content: str = Form(""),
                             settings: Settings = Depends(get_settings)):
    update_document(settings, filename, content)
    flash(request, f"{filename} has been updated")
    return redirect("/")

@router.post("/{filename}/add-image/{image}", dependencies=signed_in)
def add_image_to_document(request: Request, filename: str, image: str,
                          settings: Settings = Depends(get_settings)):
    existing_document(settings, filename)
    append_image(settings, filename, get_image(settings, image))
    flash(request, f"{image} has been added to {filename}.")
    return redirect(f"/{filename}/edit")

@router.post("/{filename}/delete", dependencies=signed_in)
def delete_existing_document(request: Request, filename: str, settings: Settings = Depends(get_settings)):
    delete_document(settings, filename)
    flash(request, f"{filename} has been deleted.")
    return redirect("/")

@router.post("/{filename}/duplicate", dependencies=signed_in)
def duplicate_existing_document(request: Request, filename: str, settings: Settings = Depends(get_settings)):
    duplicate_document(settings, filename)
    flash(request, f"{filename} has been duplicated.")
    return redirect("/")
