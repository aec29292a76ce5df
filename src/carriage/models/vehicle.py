from pydantic import Field

from carriage.models.base import CarriageModel, PatchModel


class VehicleCreate(CarriageModel):
    name: str = Field(..., min_length=1, max_length=100)
    capacity: int = Field(..., ge=1, le=100)
    wheelchair_accessible: bool = False


class Vehicle(VehicleCreate):
    id: str


class VehicleUpdate(PatchModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    capacity: int | None = Field(default=None, ge=1, le=100)
    wheelchair_accessible: bool | None = None
