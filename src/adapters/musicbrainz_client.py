"""Cliente del servicio web MusicBrainz WS/2 (JSON).

Implementa `core.interfaces.client.MusicBrainzGateway`:
- construye las URLs de lookup/search/browse bajo la base configurada;
- hace los GET con un `httpx.AsyncClient` compartido;
- valida el JSON contra modelos pydantic.

Nota: sin reintentos, rate limiting ni caché. Los fallos se lanzan como
subclases de `MusicBrainzError`.
"""

from __future__ import annotations

import logging
from functools import cached_property
from typing import Any, Sequence, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import (
    MusicBrainzConnectionError,
    MusicBrainzHTTPError,
    MusicBrainzResponseError,
)
from core.services.artist_service import ArtistService

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _encode(value: Any) -> str:
    return quote(str(value), safe="")


def _include_query(includes: str | Sequence[str] | None) -> str:
    if isinstance(includes, str):
        includes = [includes]
    return "+".join(_encode(inc.strip()) for inc in includes or [] if inc and inc.strip())


def _query_string(params: list[tuple[str, Any]]) -> str:
    return "&".join(f"{_encode(key)}={value}" for key, value in params)


def _error_message(response: httpx.Response) -> str | None:
    try:
        data = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:200] or None
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return None


class MusicBrainzClient:
    """Async client for the MusicBrainz JSON web service.

    Either pass an `httpx.AsyncClient` (the caller closes it) or let the client
    build one from `settings` on first use (closed by `aclose()` or
    `async with`).
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._base_url = self._settings.base_url.rstrip("/")
        self._http = http_client
        self._owns_http = http_client is None

    @property
    def base_url(self) -> str:
        return self._base_url

    @cached_property
    def artists(self) -> ArtistService:
        """Artist service bound to this client."""

        return ArtistService(self)

    # URL building

    def create_lookup_url(self, entity: str, id: str, includes: str | Sequence[str] | None = None) -> str:
        params: list[tuple[str, Any]] = []
        inc = _include_query(includes)
        if inc:
            params.append(("inc", inc))
        params.append(("fmt", "json"))
        return f"{self._base_url}/{_encode(entity)}/{_encode(id)}?{_query_string(params)}"

    def create_search_template(self, entity: str, query: str, limit: int, offset: int) -> str:
        params: list[tuple[str, Any]] = [
            ("query", _encode(query)),
            ("limit", int(limit)),
            ("offset", int(offset)),
            ("fmt", "json"),
        ]
        return f"{self._base_url}/{_encode(entity)}?{_query_string(params)}"

    def create_browse_template(
        self,
        entity: str,
        related_entity: str,
        related_id: str,
        limit: int,
        offset: int,
        includes: str | Sequence[str] | None = None,
    ) -> str:
        params: list[tuple[str, Any]] = [
            (related_entity, _encode(related_id)),
            ("limit", int(limit)),
            ("offset", int(offset)),
        ]
        inc = _include_query(includes)
        if inc:
            params.append(("inc", inc))
        params.append(("fmt", "json"))
        return f"{self._base_url}/{_encode(entity)}?{_query_string(params)}"

    # Execution

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = build_async_client(self._settings)
        return self._http

    async def get(self, url: str, model: type[ModelT]) -> ModelT:
        """GET `url` and validate the JSON body into `model`."""

        logger.debug("GET %s", url)
        try:
            response = await self._client().get(url)
        except httpx.HTTPError as exc:
            logger.warning("MusicBrainz request failed: %s (%s)", url, exc)
            raise MusicBrainzConnectionError(f"Request to {url} failed: {exc}") from exc

        if not response.is_success:
            message = _error_message(response)
            logger.warning("MusicBrainz HTTP error: status=%s url=%s", response.status_code, url)
            raise MusicBrainzHTTPError(response.status_code, url, message)

        try:
            payload = response.json()
        except ValueError as exc:
            raise MusicBrainzResponseError(f"Invalid JSON from {url}: {exc}") from exc

        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise MusicBrainzResponseError(
                f"Unexpected {model.__name__} payload from {url}: {exc}"
            ) from exc

    async def aclose(self) -> None:
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> MusicBrainzClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
