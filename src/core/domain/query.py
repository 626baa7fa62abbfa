"""Structured search queries.

`QueryParameters` collects field/value pairs for one entity type and renders
them as a MusicBrainz (Lucene) query string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from core.domain.errors import MissingParameterError

EntityT = TypeVar("EntityT")


@dataclass(frozen=True)
class QueryParameter:
    key: str
    value: str
    negate: bool = False


def _format_value(value: str) -> str:
    # Boolean sub-expressions are passed through as written, grouped.
    if " AND " in value or " OR " in value:
        if value.startswith("(") and value.endswith(")"):
            return value
        return f"({value})"
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value
    escaped = value.replace('"', '\\"')
    if any(ch.isspace() for ch in escaped):
        return f'"{escaped}"'
    return escaped


class QueryParameters(Generic[EntityT]):
    """Search query builder bound to an entity model.

    Usage:
        query = QueryParameters(Artist).add("artist", "Fred Again..").add("country", "GB")
        str(query)  # 'artist:"Fred Again.." AND country:GB'

    Field names are checked against `entity.SEARCH_FIELDS`.
    """

    def __init__(self, entity: type[EntityT]) -> None:
        self._entity = entity
        self._allowed: frozenset[str] = getattr(entity, "SEARCH_FIELDS", frozenset())
        self._items: list[QueryParameter] = []

    @property
    def entity(self) -> type[EntityT]:
        return self._entity

    def add(self, key: str, value: str, negate: bool = False) -> QueryParameters[EntityT]:
        """Append `key:value` (or `NOT key:value` when `negate`)."""

        key = (key or "").strip().lower()
        if key not in self._allowed:
            allowed = ", ".join(sorted(self._allowed))
            raise ValueError(f"Unknown search field '{key}'. Allowed: {allowed}")
        if value is None or not str(value).strip():
            raise MissingParameterError("value")

        self._items.append(QueryParameter(key=key, value=str(value).strip(), negate=negate))
        return self

    def __iter__(self) -> Iterator[QueryParameter]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        parts: list[str] = []
        for item in self._items:
            if parts:
                parts.append("NOT" if item.negate else "AND")
            elif item.negate:
                parts.append("NOT")
            parts.append(f"{item.key}:{_format_value(item.value)}")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"QueryParameters({getattr(self._entity, '__name__', self._entity)!r}, {str(self)!r})"
