"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El JSON de MusicBrainz usa claves con guiones; los alias las mapean a
  nombres Python.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import AliasChoices, BaseModel, Field
from pydantic.config import ConfigDict


class LifeSpan(BaseModel):
    model_config = ConfigDict(extra="ignore")

    begin: str | None = Field(default=None, description="Partial date (YYYY, YYYY-MM or YYYY-MM-DD).")
    end: str | None = Field(default=None, description="Partial date (YYYY, YYYY-MM or YYYY-MM-DD).")
    ended: bool | None = Field(default=None, description="Whether the span has ended.")


class Area(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(..., description="Area MBID.")
    name: str = Field(..., description="Area name.")
    sort_name: str | None = Field(default=None, alias="sort-name")
    type: str | None = None
    iso_3166_1_codes: list[str] = Field(default_factory=list, alias="iso-3166-1-codes")


class Alias(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(..., description="Alias text.")
    sort_name: str | None = Field(default=None, alias="sort-name")
    locale: str | None = Field(default=None, description="Locale (e.g. 'ja-Latn') if any.")
    type: str | None = None
    primary: bool | None = Field(default=None, description="Primary alias for its locale.")
    begin: str | None = None
    end: str | None = None


class Tag(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    count: int = 0


class Genre(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str
    count: int = 0


class Artist(BaseModel):
    """A MusicBrainz artist.

    Payloads added by lookup/browse includes (`releases`, `recordings`,
    `relations`...) are not modelled; they are kept as extra fields and can be
    read through `model_extra`.
    """

    ENTITY_NAME: ClassVar[str] = "artist"

    # Fields accepted by the artist search endpoint.
    SEARCH_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {
            "alias",
            "area",
            "arid",
            "artist",
            "artistaccent",
            "begin",
            "beginarea",
            "comment",
            "country",
            "end",
            "endarea",
            "ended",
            "gender",
            "ipi",
            "isni",
            "primary_alias",
            "sortname",
            "tag",
            "type",
        }
    )

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Artist MBID.",
    )
    name: str = Field(
        ...,
        description="Official artist name.",
    )
    sort_name: str | None = Field(
        default=None,
        alias="sort-name",
        description="Name used for sorting (e.g. 'Beatles, The').",
    )
    type: str | None = Field(
        default=None,
        description="Person, Group, Orchestra, Choir, Character or Other.",
    )
    type_id: str | None = Field(default=None, alias="type-id")
    gender: str | None = None
    country: str | None = Field(
        default=None,
        description="ISO 3166-1 code of the artist's main area, if it is a country.",
    )
    disambiguation: str | None = Field(
        default=None,
        description="Comment distinguishing artists with the same name.",
    )
    area: Area | None = None
    begin_area: Area | None = Field(default=None, alias="begin-area")
    end_area: Area | None = Field(default=None, alias="end-area")
    life_span: LifeSpan | None = Field(default=None, alias="life-span")
    aliases: list[Alias] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    genres: list[Genre] = Field(default_factory=list)
    isnis: list[str] = Field(default_factory=list)
    ipis: list[str] = Field(default_factory=list)
    score: int | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Search relevance (search results only).",
    )


class ArtistList(BaseModel):
    """One page of artists.

    Search responses use `count`/`offset`; browse responses use
    `artist-count`/`artist-offset`. Both are accepted.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    count: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("count", "artist-count"),
        description="Total number of matches on the server.",
    )
    offset: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("offset", "artist-offset"),
        description="Offset of this page within the full result set.",
    )
    artists: list[Artist] = Field(
        default_factory=list,
        description="Artists on this page.",
    )

