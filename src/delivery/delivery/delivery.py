"""Delivery aggregate (CQRS): tracking state for a single order.

A Delivery is created together with its Order and is paired with it 1:1
through ``order_id``. It holds the courier doing the run, the three
lifecycle timestamps and the most recent reported issue.

Timeline:
    ready_time ≤ pick_up_time ≤ delivered_time
Each timestamp is optional and may be recorded in any order, but whatever
is present must respect the ordering above.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, ValueObject

from delivery.delivery.events import (
    CourierAssignedToDelivery,
    DeliveredTimeRecorded,
    DeliveryCreated,
    IssueReported,
    PickUpTimeRecorded,
    ReadyTimeRecorded,
)
from delivery.domain import delivery

_TIMELINE = ("ready_time", "pick_up_time", "delivered_time")


def as_utc(value: datetime | None) -> datetime | None:
    """Timestamps without a timezone are taken to be UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@delivery.value_object(part_of="Delivery")
class TimeRecord:
    """Lifecycle timestamps of a delivery."""

    ready_time = DateTime()
    pick_up_time = DateTime()
    delivered_time = DateTime()

    @invariant.post
    def timestamps_must_be_in_lifecycle_order(self):
        recorded = [(name, getattr(self, name)) for name in _TIMELINE if getattr(self, name) is not None]
        for (earlier_name, earlier), (later_name, later) in zip(recorded, recorded[1:]):
            if as_utc(later) < as_utc(earlier):
                raise ValidationError({later_name: [f"{later_name} cannot be before {earlier_name}"]})

    def with_changes(self, **changes) -> "TimeRecord":
        values = {name: getattr(self, name) for name in _TIMELINE}
        values.update(changes)
        return TimeRecord(**values)


@delivery.value_object(part_of="Delivery")
class Issue:
    """A problem reported while delivering (traffic, wrong address, ...)."""

    issue_type = String(required=True, max_length=100)
    description = String(max_length=1000)


# ---------------------------------------------------------------------------
# Aggregate Root (CQRS)
# ---------------------------------------------------------------------------
@delivery.aggregate
class Delivery:
    order_id = Identifier(required=True)
    vendor_id = Identifier(required=True)
    courier_id = Identifier()
    time = ValueObject(TimeRecord)
    issue = ValueObject(Issue)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, order_id: str, vendor_id: str):
        """Start tracking the delivery of an order."""
        now = datetime.now(UTC)
        dlv = cls(
            order_id=order_id,
            vendor_id=vendor_id,
            time=TimeRecord(),
            created_at=now,
            updated_at=now,
        )
        dlv.raise_(
            DeliveryCreated(
                delivery_id=str(dlv.id),
                order_id=str(order_id),
                vendor_id=str(vendor_id),
                created_at=now,
            )
        )
        return dlv

    @property
    def time_record(self) -> TimeRecord:
        return self.time if self.time is not None else TimeRecord()

    # -------------------------------------------------------------------
    # Lifecycle timestamps
    # -------------------------------------------------------------------
    def record_ready_time(self, ready_time: datetime) -> None:
        ready_time = as_utc(ready_time)
        self.time = self.time_record.with_changes(ready_time=ready_time)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            ReadyTimeRecorded(
                delivery_id=str(self.id),
                order_id=str(self.order_id),
                ready_time=ready_time,
            )
        )

    def record_pick_up_time(self, pick_up_time: datetime) -> None:
        pick_up_time = as_utc(pick_up_time)
        self.time = self.time_record.with_changes(pick_up_time=pick_up_time)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            PickUpTimeRecorded(
                delivery_id=str(self.id),
                order_id=str(self.order_id),
                pick_up_time=pick_up_time,
            )
        )

    def record_delivered_time(self, delivered_time: datetime) -> None:
        delivered_time = as_utc(delivered_time)
        self.time = self.time_record.with_changes(delivered_time=delivered_time)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            DeliveredTimeRecorded(
                delivery_id=str(self.id),
                order_id=str(self.order_id),
                delivered_time=delivered_time,
            )
        )

    # -------------------------------------------------------------------
    # Issues
    # -------------------------------------------------------------------
    def report_issue(self, issue_type: str, description: str | None = None) -> None:
        """Record a problem; replaces any previously reported issue."""
        now = datetime.now(UTC)
        self.issue = Issue(issue_type=issue_type, description=description)
        self.updated_at = now
        self.raise_(
            IssueReported(
                delivery_id=str(self.id),
                order_id=str(self.order_id),
                issue_type=issue_type,
                description=description,
                reported_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Courier
    # -------------------------------------------------------------------
    def assign_courier(self, courier_id: str) -> None:
        now = datetime.now(UTC)
        self.courier_id = courier_id
        self.updated_at = now
        self.raise_(
            CourierAssignedToDelivery(
                delivery_id=str(self.id),
                order_id=str(self.order_id),
                courier_id=str(courier_id),
                assigned_at=now,
            )
        )
