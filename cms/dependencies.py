from __future__ import annotations
import logging
from typing import Optional

from fastapi import Request

from cms.config import Settings
from cms.errors import SignInRequired

logger = logging.getLogger(__name__)

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def current_user(request: Request) -> Optional[str]:
    return request.session.get("username")

def require_signed_in_user(request: Request) -> str:
    username = current_user(request)
    if username is None:
        logger.warning("Unauthenticated %s %s", request.method, request.url.path)
        raise SignInRequired()
    return username
