"""Contrato del cliente del servicio web.

Por qué Protocol:
- Los servicios dependen de un contrato estructural, no del adaptador httpx.
- Los tests pueden pasar un fake que registra las URLs que se le piden.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


@runtime_checkable
class MusicBrainzGateway(Protocol):
    """URL building plus GET-and-deserialize for MusicBrainz entities."""

    def create_lookup_url(self, entity: str, id: str, includes: Sequence[str]) -> str:
        ...

    def create_search_template(self, entity: str, query: str, limit: int, offset: int) -> str:
        ...

    def create_browse_template(
        self,
        entity: str,
        related_entity: str,
        related_id: str,
        limit: int,
        offset: int,
        includes: Sequence[str],
    ) -> str:
        ...

    async def get(self, url: str, model: type[ModelT]) -> ModelT:
        """Perform the GET and validate the JSON body into `model`."""

        ...
