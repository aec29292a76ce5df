from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import AwareDatetime, Field, model_validator

from carriage.models.base import CarriageModel, PatchModel


class RideType(str, Enum):
    UNSCHEDULED = "unscheduled"
    ACTIVE = "active"
    PAST = "past"


class RideStatus(str, Enum):
    NOT_STARTED = "not_started"
    ON_THE_WAY = "on_the_way"
    ARRIVED = "arrived"
    PICKED_UP = "picked_up"
    COMPLETED = "completed"
    NO_SHOW = "no_show"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (RideStatus.COMPLETED, RideStatus.NO_SHOW, RideStatus.CANCELLED)


class RideCreate(CarriageModel):
    type: RideType = RideType.UNSCHEDULED
    status: RideStatus = RideStatus.NOT_STARTED
    start_time: AwareDatetime
    end_time: AwareDatetime
    rider: str = Field(..., min_length=1)
    driver: str | None = None
    start_location: str = Field(..., min_length=1)
    end_location: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def end_after_start(self) -> "RideCreate":
        if self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        return self


class Ride(RideCreate):
    id: str

    def overlaps(self, start: datetime, end: datetime) -> bool:
        return self.start_time < end and start < self.end_time


class RideUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"driver"})

    type: RideType | None = None
    status: RideStatus | None = None
    start_time: AwareDatetime | None = None
    end_time: AwareDatetime | None = None
    driver: str | None = None
    start_location: str | None = Field(default=None, min_length=1)
    end_location: str | None = Field(default=None, min_length=1)
