from __future__ import annotations
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from cms.config import DEFAULT_SESSION_SECRET, Settings
from cms.errors import CMSError
from cms.models.image import UPLOADS_URL_PREFIX
from cms.routers import documents, images, users
from cms.templating import flash, redirect

logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if settings.session_secret == DEFAULT_SESSION_SECRET:
        logger.warning("CMS_SESSION_SECRET not set: session cookies are signed with the default secret")

    app = FastAPI(
        title="Flat-file CMS",
        description="Documenti .txt/.md e immagini su filesystem, utenti in YAML.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.add_middleware(SessionMiddleware, secret_key=settings.session_secret)

    @app.exception_handler(CMSError)
    async def cms_error_handler(request: Request, exc: CMSError):
        flash(request, str(exc))
        return redirect("/")

    # la cartella viene creata al primo upload
    app.mount(UPLOADS_URL_PREFIX,
              StaticFiles(directory=str(settings.images_dir), check_dir=False),
              name="uploads")

    # users/images prima di documents: "/{filename}" cattura tutto il resto
    app.include_router(users.router)
    app.include_router(images.router)
    app.include_router(documents.router)

    return app

app = create_app()
