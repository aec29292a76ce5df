from pydantic import Field, field_validator

from carriage.formatting import normalize_phone
from carriage.models.base import CarriageModel, PatchModel


class AdminCreate(CarriageModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str
    email: str = Field(..., min_length=3, max_length=320)
    is_dispatcher: bool = False

    @field_validator("phone_number")
    @classmethod
    def _phone(cls, value: str) -> str:
        return normalize_phone(value)


class Admin(AdminCreate):
    id: str


class AdminUpdate(PatchModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    phone_number: str | None = None
    email: str | None = Field(default=None, min_length=3, max_length=320)
    is_dispatcher: bool | None = None

    @field_validator("phone_number")
    @classmethod
    def _phone(cls, value: str | None) -> str | None:
        return normalize_phone(value) if value is not None else None
