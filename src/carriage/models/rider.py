from datetime import date
from enum import Enum
from typing import ClassVar

from pydantic import Field, field_validator

from carriage.formatting import normalize_phone
from carriage.models.base import CarriageModel, PatchModel


class Organization(str, Enum):
    REDRUNNER = "RedRunner"
    CULIFT = "CULift"


class RiderCreate(CarriageModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str
    email: str = Field(..., min_length=3, max_length=320)
    pronouns: str = ""
    accessibility: str = ""
    description: str = ""
    join_date: date
    end_date: date | None = None
    address: str = Field(..., min_length=1, max_length=500)
    favorite_locations: list[str] = Field(default_factory=list)
    organization: Organization | None = None
    photo_link: str = ""
    active: bool = True

    @field_validator("phone_number")
    @classmethod
    def _phone(cls, value: str) -> str:
        return normalize_phone(value)

    @field_validator("favorite_locations")
    @classmethod
    def _dedupe(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))


class Rider(RiderCreate):
    id: str

    def profile(self) -> dict:
        return {
            "email": self.email,
            "phoneNumber": self.phone_number,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "pronouns": self.pronouns,
            "joinDate": self.join_date.isoformat(),
            "endDate": self.end_date.isoformat() if self.end_date else None,
        }


class RiderUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"end_date", "organization"})

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    phone_number: str | None = None
    email: str | None = Field(default=None, min_length=3, max_length=320)
    pronouns: str | None = None
    accessibility: str | None = None
    description: str | None = None
    join_date: date | None = None
    end_date: date | None = None
    address: str | None = Field(default=None, min_length=1, max_length=500)
    favorite_locations: list[str] | None = None
    organization: Organization | None = None
    photo_link: str | None = None
    active: bool | None = None

    @field_validator("phone_number")
    @classmethod
    def _phone(cls, value: str | None) -> str | None:
        return normalize_phone(value) if value is not None else None

    @field_validator("favorite_locations")
    @classmethod
    def _dedupe(cls, value: list[str] | None) -> list[str] | None:
        return list(dict.fromkeys(value)) if value is not None else None


class FavoriteRequest(CarriageModel):
    id: str = Field(..., min_length=1)
