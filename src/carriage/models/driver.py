from datetime import date, time
from enum import Enum
from typing import ClassVar

from pydantic import Field, field_validator, model_validator

from carriage.formatting import normalize_phone
from carriage.models.base import CarriageModel, PatchModel
from carriage.models.vehicle import Vehicle


class Weekday(str, Enum):
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    @classmethod
    def of(cls, day: date) -> "Weekday":
        return list(cls)[day.weekday()]


class Availability(CarriageModel):
    start_time: time
    end_time: time

    @model_validator(mode="after")
    def end_after_start(self) -> "Availability":
        if self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        return self

    def covers(self, start: time, end: time) -> bool:
        return self.start_time <= start and end <= self.end_time


class DriverCreate(CarriageModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str
    email: str = Field(..., min_length=3, max_length=320)
    start_date: date
    admin: bool = False
    availability: dict[Weekday, Availability | None] = Field(default_factory=dict)
    vehicle: Vehicle | None = None

    @field_validator("phone_number")
    @classmethod
    def _phone(cls, value: str) -> str:
        return normalize_phone(value)


class Driver(DriverCreate):
    id: str

    def available_for(self, day: date, start: time, end: time) -> bool:
        window = self.availability.get(Weekday.of(day))
        return window is not None and window.covers(start, end)

    def profile(self) -> dict:
        return self.model_dump(
            mode="json",
            by_alias=True,
            include={"first_name", "last_name", "email", "phone_number", "start_date", "availability", "vehicle"},
        )


class DriverUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"vehicle"})

    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    phone_number: str | None = None
    email: str | None = Field(default=None, min_length=3, max_length=320)
    start_date: date | None = None
    admin: bool | None = None
    availability: dict[Weekday, Availability | None] | None = None
    vehicle: Vehicle | None = None

    @field_validator("phone_number")
    @classmethod
    def _phone(cls, value: str | None) -> str | None:
        return normalize_phone(value) if value is not None else None
