from __future__ import annotations

from datetime import datetime, timezone as dt_timezone

from astral import Observer
from astral.sun import elevation
from django.utils import timezone


def sun_elevation(timestamp: datetime, latitude: float, longitude: float) -> float:
    """Geometric sun elevation in degrees; naive timestamps are taken as UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=dt_timezone.utc)
    observer = Observer(latitude=latitude, longitude=longitude)
    return elevation(observer, dateandtime=timestamp, with_refraction=False)


def is_night(timestamp: datetime, latitude: float, longitude: float) -> bool:
    return sun_elevation(timestamp, latitude, longitude) < 0.0


def is_dark_now(*, latitude: float, longitude: float) -> bool:
    return is_night(timezone.now(), latitude, longitude)
