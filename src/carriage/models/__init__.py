"""
Pydantic models for Carriage records.
"""

from carriage.models.admin import Admin, AdminCreate, AdminUpdate
from carriage.models.driver import Availability, Driver, DriverCreate, DriverUpdate, Weekday
from carriage.models.location import Location, LocationCreate, LocationUpdate, Tag
from carriage.models.ride import Ride, RideCreate, RideStatus, RideType, RideUpdate
from carriage.models.rider import FavoriteRequest, Organization, Rider, RiderCreate, RiderUpdate
from carriage.models.vehicle import Vehicle, VehicleCreate, VehicleUpdate

__all__ = [
    "Admin",
    "AdminCreate",
    "AdminUpdate",
    "Availability",
    "Driver",
    "DriverCreate",
    "DriverUpdate",
    "FavoriteRequest",
    "Location",
    "LocationCreate",
    "LocationUpdate",
    "Organization",
    "Ride",
    "RideCreate",
    "RideStatus",
    "RideType",
    "RideUpdate",
    "Rider",
    "RiderCreate",
    "RiderUpdate",
    "Tag",
    "Vehicle",
    "VehicleCreate",
    "VehicleUpdate",
    "Weekday",
]
