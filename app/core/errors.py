"""Erreurs métier de l'API manifest et leur rendu JSON."""

from typing import Optional

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class ManifestError(Exception):
    """Base : porte le code HTTP et le code machine renvoyé au client."""

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "server_error"
    default_text: Optional[str] = None

    def __init__(self, text: Optional[str] = None):
        self.text = text if text is not None else self.default_text
        super().__init__(self.text or self.code)

    def to_body(self) -> dict:
        body = {"error": self.code}
        if self.text:
            body["text"] = self.text
        return body


class Unauthorized(ManifestError):
    status_code = HTTP_401_UNAUTHORIZED
    code = "unauthorized"


class InvalidChapter(ManifestError):
    status_code = HTTP_400_BAD_REQUEST
    code = "invalid_chapter"
    default_text = "Invalid or missing chapter parameter (e.g., ch2)."


class NotFound(ManifestError):
    status_code = HTTP_404_NOT_FOUND
    code = "not_found"
    default_text = "No item with that id."


class BadManifestFormat(ManifestError):
    code = "bad_manifest_format"


class ServerError(ManifestError):
    default_text = "Server error"


class FetchError(ServerError):
    """La source distante a répondu avec un statut non 2xx."""

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"fetch_failed:{status}")


class ParseError(ServerError):
    """Le corps annoncé comme JSON n'est pas du JSON valide."""

    default_text = "json_parse_failed"
