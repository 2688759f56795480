"""Runtime settings for the Delivery domain.

Values are read from the environment at call time so tests and deployments
can change them without touching module state. Callers thread the returned
values into the operations that need them.
"""

import os
from datetime import timedelta

DEFAULT_DELIVERY_ZONE = 10.0

# Assumed vendor → customer travel time. Drives both ETA and live location.
TRANSIT_DURATION = timedelta(minutes=60)


def default_delivery_zone() -> float:
    """Radius given to vendors that are registered on first reference."""
    value = os.environ.get("DEFAULT_DELIVERY_ZONE")
    if value is None:
        return DEFAULT_DELIVERY_ZONE
    return float(value)


def transit_duration() -> timedelta:
    value = os.environ.get("TRANSIT_DURATION_MINUTES")
    if value is None:
        return TRANSIT_DURATION
    minutes = float(value)
    if minutes <= 0:
        raise ValueError(f"TRANSIT_DURATION_MINUTES must be positive, got {value!r}")
    return timedelta(minutes=minutes)
