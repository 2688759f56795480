"""Courier and vendor analytics over recorded deliveries.

Figures are computed on demand from the Delivery aggregates. A delivery
counts as completed once its delivered time is recorded; it counts as on
time when it arrived within ``settings.TRANSIT_DURATION`` of pick-up.
"""

from datetime import datetime

from protean.utils.globals import current_domain

from delivery import settings
from delivery.delivery.delivery import Delivery, as_utc
from delivery.exceptions import CourierNotFoundError
from delivery.vendor.couriers import is_courier
from delivery.vendor.registration import load_vendor


def _date_key(dt: datetime) -> str:
    return as_utc(dt).strftime("%Y-%m-%d")


def _deliveries(**filters) -> list[Delivery]:
    results = current_domain.repository_for(Delivery)._dao.query.filter(**filters).all()
    if not results or not results.items:
        return []
    return sorted(results.items, key=lambda dlv: as_utc(dlv.created_at))


def _courier_deliveries(courier_id: str) -> list[Delivery]:
    if not is_courier(courier_id):
        raise CourierNotFoundError(f"Courier with ID: {courier_id} not found.")
    return _deliveries(courier_id=str(courier_id))


def _completed(deliveries: list[Delivery]) -> list[Delivery]:
    return [dlv for dlv in deliveries if dlv.time_record.delivered_time is not None]


def _trip_durations(deliveries: list[Delivery]) -> list:
    """Pick-up to drop-off durations of deliveries with both timestamps recorded."""
    durations = []
    for dlv in _completed(deliveries):
        record = dlv.time_record
        if record.pick_up_time is not None:
            durations.append(as_utc(record.delivered_time) - as_utc(record.pick_up_time))
    return durations


def get_successful_deliveries(courier_id: str) -> int:
    """Number of deliveries the courier has completed."""
    return len(_completed(_courier_deliveries(courier_id)))


def get_deliveries_per_day(courier_id: str) -> int:
    """Average completed deliveries per active day, rounded to the nearest whole number."""
    completed = _completed(_courier_deliveries(courier_id))
    if not completed:
        return 0
    days = {_date_key(dlv.time_record.delivered_time) for dlv in completed}
    return round(len(completed) / len(days))


def get_courier_issues(courier_id: str) -> list[str]:
    """Reported issues on the courier's deliveries, oldest delivery first."""
    issues = []
    for dlv in _courier_deliveries(courier_id):
        if dlv.issue is not None:
            issues.append(dlv.issue.description or dlv.issue.issue_type)
    return issues


def get_courier_efficiency(courier_id: str) -> int:
    """Percentage of timed trips the courier finished within the transit duration."""
    durations = _trip_durations(_courier_deliveries(courier_id))
    if not durations:
        return 0
    limit = settings.transit_duration()
    on_time = sum(1 for duration in durations if duration <= limit)
    return round(100 * on_time / len(durations))


def get_vendor_average(vendor_id: str) -> int:
    """Average pick-up to drop-off time of the vendor's deliveries, in whole minutes."""
    load_vendor(vendor_id)
    durations = _trip_durations(_deliveries(vendor_id=str(vendor_id)))
    if not durations:
        return 0
    total_minutes = sum(duration.total_seconds() for duration in durations) / 60
    return round(total_minutes / len(durations))
