from __future__ import annotations
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from cms.config import TEMPLATES_DIR

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

def flash(request: Request, message: str) -> None:
    request.session["message"] = message

def render(request: Request, name: str, context: Optional[Dict[str, Any]] = None, status_code: int = 200):
    """Renderizza un template consumando l'eventuale messaggio flash in sessione."""
    ctx: Dict[str, Any] = {
        "username": request.session.get("username"),
        "message": request.session.pop("message", None),
    }
    ctx.update(context or {})
    return templates.TemplateResponse(request, name, ctx, status_code=status_code)

def redirect(url: str) -> RedirectResponse:
    # 302: il browser segue i redirect dei POST con una GET
    return RedirectResponse(url, status_code=302)
