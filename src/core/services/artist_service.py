"""Artist lookup, search and browse.

The service only validates required inputs and builds URLs through the
shared client; transport, status handling and JSON decoding stay in the
client, and its errors propagate untouched.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.errors import MissingParameterError
from core.domain.models import Artist, ArtistList
from core.domain.query import QueryParameters
from core.interfaces.client import MusicBrainzGateway

DEFAULT_LIMIT = 25
DEFAULT_OFFSET = 0


def _include_list(includes: str | Sequence[str] | None) -> list[str]:
    if isinstance(includes, str):
        return [includes]
    return list(includes or [])


class ArtistService:
    """Stateless facade over a `MusicBrainzGateway` for artist requests.

    The client is owned by the caller; the service never opens or closes it.
    """

    def __init__(self, client: MusicBrainzGateway) -> None:
        self._client = client

    async def lookup(self, id: str | None, includes: str | Sequence[str] | None = None) -> Artist:
        """Lookup an artist by MBID.

        `includes` names sub-entities to embed (e.g. `aliases`, `tags`); a
        single name may be passed as a plain string.
        """

        if not id:
            raise MissingParameterError("id")

        url = self._client.create_lookup_url(Artist.ENTITY_NAME, id, _include_list(includes))
        return await self._client.get(url, Artist)

    async def search(
        self,
        query: str | None,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> ArtistList:
        """Search artists matching a free-text (Lucene) query."""

        if not query:
            raise MissingParameterError("query")

        url = self._client.create_search_template(Artist.ENTITY_NAME, query, limit, offset)
        return await self._client.get(url, ArtistList)

    async def search_query(
        self,
        parameters: QueryParameters[Artist],
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> ArtistList:
        """Search artists with a structured query."""

        return await self.search(str(parameters), limit, offset)

    async def browse(
        self,
        entity: str,
        id: str,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        includes: str | Sequence[str] | None = None,
    ) -> ArtistList:
        """Browse artists linked to another entity (e.g. a `label` or `recording`)."""

        url = self._client.create_browse_template(
            Artist.ENTITY_NAME,
            entity,
            id,
            limit,
            offset,
            _include_list(includes),
        )
        return await self._client.get(url, ArtistList)
