"""Driver availability queries."""

from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from carriage.config import Config
from carriage.db import Condition, Store
from carriage.errors import ValidationError
from carriage.models import Driver, RideType


def available_drivers(store: Store, config: Config, day: date, start: time, end: time) -> list[Driver]:
    """Drivers whose weekday availability covers the window and who have no overlapping ride."""
    if end <= start:
        raise ValidationError("endTime must be after startTime")

    tz = ZoneInfo(config.timezone)
    window_start = datetime.combine(day, start, tzinfo=tz)
    window_end = datetime.combine(day, end, tzinfo=tz)

    busy = {
        ride.driver
        for ride in store.rides.scan(Condition().where("type").not_().eq(RideType.PAST))
        if ride.driver and ride.overlaps(window_start, window_end)
    }
    return [
        driver
        for driver in store.drivers.get_all()
        if driver.id not in busy and driver.available_for(day, start, end)
    ]
