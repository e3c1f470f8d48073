from __future__ import annotations


class CMSError(Exception):
    """Base class for errors that end in a flash message and a redirect."""


class SignInRequired(CMSError):
    def __init__(self) -> None:
        super().__init__("You must be signed in to do that.")


class DocumentNotFound(CMSError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} does not exist.")


class ImageNotFound(CMSError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} does not exist.")


class InvalidName(CMSError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "Names may only contain letters, digits, spaces, dots, dashes and underscores."
        )
