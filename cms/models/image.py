from __future__ import annotations
from pydantic import BaseModel, Field

UPLOADS_URL_PREFIX = "/uploads"

class Image(BaseModel):
    name: str = Field(..., description="Nome file immagine")
    url: str = Field(..., description="URL pubblico sotto /uploads")

    @classmethod
    def from_name(cls, name: str) -> "Image":
        return cls(name=name, url=f"{UPLOADS_URL_PREFIX}/{name}")

    @property
    def markdown(self) -> str:
        return f"![image]({self.url})"
