"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-contained documentation (Field) without coupling
  the Core to I/O libraries.
- The API payloads are nested and loosely shaped; models normalize them once,
  at the edge.

Note:
- These models describe *what* the data is, not *how* it is fetched.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class NamedResource(BaseModel):
    """A `{name, url}` pair, the API's universal reference shape."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(
        ...,
        min_length=1,
        description="Resource name (e.g. 'pikachu', 'electric').",
    )
    url: str | None = Field(
        default=None,
        description="Absolute URL of the resource (absent in hand-built payloads).",
    )


class CreatureListPage(BaseModel):
    """One page of the list endpoint. Only `results` is consumed."""

    model_config = ConfigDict(extra="ignore")

    count: int | None = None
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = Field(default_factory=list)


class TypeSlot(BaseModel):
    """Entry of `types`: `{slot, type: {name, url}}`."""

    model_config = ConfigDict(extra="ignore")

    slot: int | None = None
    type: NamedResource


class OfficialArtwork(BaseModel):
    model_config = ConfigDict(extra="ignore")

    front_default: str | None = None


class OtherSprites(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    official_artwork: OfficialArtwork = Field(
        default_factory=OfficialArtwork,
        alias="official-artwork",
    )


class Sprites(BaseModel):
    model_config = ConfigDict(extra="ignore")

    front_default: str | None = Field(
        default=None,
        description="Small thumbnail shown in the list.",
    )
    other: OtherSprites = Field(default_factory=OtherSprites)


class CreatureSpritePayload(BaseModel):
    """Detail endpoint read only for its thumbnail; `sprites` must be present."""

    model_config = ConfigDict(extra="ignore")

    sprites: Sprites

    @property
    def sprite_url(self) -> str | None:
        return self.sprites.front_default


class CreatureDetailPayload(BaseModel):
    """The subset of the detail endpoint that the viewer reads."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., ge=0)
    height: int = Field(..., ge=0, description="Height in decimeters.")
    weight: int = Field(..., ge=0, description="Weight in hectograms.")
    types: list[TypeSlot] = Field(default_factory=list)
    sprites: Sprites = Field(default_factory=Sprites)

    @property
    def sprite_url(self) -> str | None:
        return self.sprites.front_default

    @property
    def artwork_url(self) -> str | None:
        return self.sprites.other.official_artwork.front_default


class CreatureSummary(BaseModel):
    """A creature as held by the repository.

    Created from a list entry with `name` and `details_url`. The sprite URL
    is filled in when its list item renders, and the detail fields are merged
    onto the same object the first time it is opened.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    name: str = Field(
        ...,
        min_length=1,
        description="Creature name as returned by the API.",
    )
    details_url: str = Field(
        ...,
        min_length=1,
        alias="detailsUrl",
        description="Absolute URL of the detail endpoint.",
    )
    sprite_url: str | None = Field(
        default=None,
        description="Thumbnail URL, populated lazily per list item.",
    )

    id: int | None = None
    height: int | None = Field(default=None, description="Decimeters.")
    weight: int | None = Field(default=None, description="Hectograms.")
    types: list[TypeSlot] = Field(default_factory=list)
    artwork_url: str | None = None

    @property
    def has_details(self) -> bool:
        return self.id is not None and self.height is not None and self.weight is not None

    def merge_details(self, details: CreatureDetailPayload) -> None:
        """Copy detail fields onto this summary (in place)."""

        self.artwork_url = details.artwork_url
        self.id = details.id
        self.height = details.height
        self.weight = details.weight
        self.types = list(details.types)
