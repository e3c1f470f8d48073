from __future__ import annotations
import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from cms.config import Settings
from cms.dependencies import get_settings
from cms.models.user import SigninForm, SignupForm
from cms.services.credentials import create_user, signup_error, valid_credentials
from cms.templating import flash, redirect, render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])

@router.get("/signin", response_class=HTMLResponse)
def signin_form(request: Request):
    return render(request, "sign_in.html")

@router.post("/signin")
def signin(request: Request,
           username: str = Form(""),
           password: str = Form(""),
           settings: Settings = Depends(get_settings)):
    form = SigninForm(username=username.strip(), password=password)
    if valid_credentials(settings, form.username, form.password):
        request.session["username"] = form.username
        logger.info("User %s signed in", form.username)
        flash(request, "Welcome!")
        return redirect("/")
    logger.warning("Failed sign-in for %r", form.username)
    flash(request, "Invalid Credentials")
    return render(request, "sign_in.html", {"form": form}, status_code=422)

@router.get("/signup", response_class=HTMLResponse)
def signup_form(request: Request):
    return render(request, "sign_up.html")

@router.post("/signup")
def signup(request: Request,
           username: str = Form(""),
           password: str = Form(""),
           verify_password: str = Form(""),
           settings: Settings = Depends(get_settings)):
    form = SignupForm(username=username, password=password, verify_password=verify_password)
    error = signup_error(settings, form)
    if error:
        flash(request, error)
        return render(request, "sign_up.html", {"form": form}, status_code=422)
    name = create_user(settings, form.username, form.password)
    request.session["username"] = name
    flash(request, f"Welcome {name}!")
    return redirect("/")

@router.post("/signout")
def signout(request: Request):
    username = request.session.pop("username", None)
    if username:
        logger.info("User %s signed out", username)
    flash(request, "You have been signed out")
    return redirect("/")
