"""Errores del dominio.

- `MissingParameterError` lo lanzan los servicios antes de cualquier I/O.
- `MusicBrainzError` y sus subclases las lanza el cliente del servicio web y
  atraviesan la capa de servicios sin cambios.
"""

from __future__ import annotations


class MissingParameterError(ValueError):
    """A required argument was empty or missing."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing parameter: '{name}' must be a non-empty string.")
        self.name = name


class MusicBrainzError(Exception):
    """Base error for MusicBrainz web-service failures."""


class MusicBrainzConnectionError(MusicBrainzError):
    """The request never produced an HTTP response (DNS, TLS, timeout...)."""


class MusicBrainzHTTPError(MusicBrainzError):
    """The web service answered with a non-success status."""

    def __init__(self, status_code: int, url: str, message: str | None = None) -> None:
        detail = message or "no error message"
        super().__init__(f"HTTP {status_code} for {url}: {detail}")
        self.status_code = status_code
        self.url = url
        self.message = message


class MusicBrainzResponseError(MusicBrainzError):
    """The body could not be decoded or did not match the expected model."""
