from __future__ import annotations
from pydantic import BaseModel, Field

class SignupForm(BaseModel):
    username: str = Field("", description="Nome utente (min. 4 caratteri, senza spazi)")
    password: str = Field("", description="Password (min. 6 caratteri, senza spazi)")
    verify_password: str = Field("", description="Conferma password")

class SigninForm(BaseModel):
    username: str = Field("")
    password: str = Field("")
