"""Live location: where an in-transit order is estimated to be.

There is no device telemetry: the courier is assumed to travel the straight
segment from the vendor to the customer at constant speed, covering it in
``settings.TRANSIT_DURATION`` from the moment of pick-up.
"""

from datetime import UTC, datetime, timedelta

from delivery import settings
from delivery.delivery.delivery import as_utc
from delivery.delivery.helpers import load_delivery
from delivery.order.status import load_order
from delivery.shared.geometry import Coordinate, interpolate
from delivery.vendor.zone import get_vendor_location


def transit_fraction(pick_up_time: datetime, now: datetime, transit_duration: timedelta) -> float:
    """Share of the route covered since pick-up, clamped to [0, 1]."""
    elapsed = (as_utc(now) - as_utc(pick_up_time)) / transit_duration
    return min(max(elapsed, 0.0), 1.0)


def estimate_position(
    start: Coordinate,
    end: Coordinate,
    pick_up_time: datetime | None,
    now: datetime,
    transit_duration: timedelta | None = None,
) -> Coordinate:
    """Position along ``start → end`` at ``now`` for an order picked up at ``pick_up_time``."""
    pick_up_time, now = as_utc(pick_up_time), as_utc(now)
    if pick_up_time is None or pick_up_time > now:
        return start
    fraction = transit_fraction(pick_up_time, now, transit_duration or settings.transit_duration())
    return interpolate(start, end, fraction)


def calculate_live_location(order_id: str, now: datetime | None = None) -> Coordinate:
    """Estimated current position of the order."""
    dlv = load_delivery(order_id)
    order = load_order(order_id)
    start = get_vendor_location(dlv.vendor_id)
    return estimate_position(
        start,
        order.destination,
        dlv.time_record.pick_up_time,
        now or datetime.now(UTC),
    )
