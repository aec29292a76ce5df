from enum import Enum
from typing import ClassVar

from pydantic import Field

from carriage.models.base import CarriageModel, PatchModel


class Tag(str, Enum):
    EAST = "east"
    CENTRAL = "central"
    NORTH = "north"
    WEST = "west"
    CTOWN = "ctown"
    DTOWN = "dtown"
    INACTIVE = "inactive"
    CUSTOM = "custom"


class LocationCreate(CarriageModel):
    name: str = Field(..., min_length=1, max_length=200)
    address: str = Field(..., min_length=1, max_length=500)
    tag: Tag = Tag.CUSTOM
    info: str | None = Field(default=None, max_length=1000)


class Location(LocationCreate):
    id: str


class LocationUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"info"})

    name: str | None = Field(default=None, min_length=1, max_length=200)
    address: str | None = Field(default=None, min_length=1, max_length=500)
    tag: Tag | None = None
    info: str | None = Field(default=None, max_length=1000)
