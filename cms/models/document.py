from __future__ import annotations
from pathlib import Path
from pydantic import BaseModel, Field

class Document(BaseModel):
    name: str = Field(..., description="Nome file, estensione inclusa")
    extension: str = Field("", description="Estensione in minuscolo (.txt, .md, ...)")

    @property
    def is_markdown(self) -> bool:
        return self.extension == ".md"

    @classmethod
    def from_name(cls, name: str) -> "Document":
        return cls(name=name, extension=Path(name).suffix.lower())
