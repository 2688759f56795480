"""Order aggregate: the status side of an order being delivered.

Orders are created by delivery creation (see ``delivery.delivery.creation``)
and only ever move forward through a linear pipeline with a single branch
at the start:

State Machine:
    PENDING → ACCEPTED → PREPARING → GIVEN_TO_COURIER → ON_TRANSIT → DELIVERED
    PENDING → REJECTED
    {REJECTED, DELIVERED} are terminal
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, String, ValueObject

from delivery.domain import delivery
from delivery.exceptions import InvalidTransitionError, UnrecognizedStatusError
from delivery.order.events import OrderPlaced, OrderStatusChanged
from delivery.shared.geometry import Coordinate


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    PREPARING = "preparing"
    GIVEN_TO_COURIER = "given_to_courier"
    ON_TRANSIT = "on_transit"
    DELIVERED = "delivered"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.ACCEPTED, OrderStatus.REJECTED},
    OrderStatus.ACCEPTED: {OrderStatus.PREPARING},
    OrderStatus.PREPARING: {OrderStatus.GIVEN_TO_COURIER},
    OrderStatus.GIVEN_TO_COURIER: {OrderStatus.ON_TRANSIT},
    OrderStatus.ON_TRANSIT: {OrderStatus.DELIVERED},
    OrderStatus.REJECTED: set(),  # terminal
    OrderStatus.DELIVERED: set(),  # terminal
}

TERMINAL_STATUSES = frozenset(status for status, targets in _VALID_TRANSITIONS.items() if not targets)


def parse_status(value: str) -> OrderStatus:
    """Map a status string from a remote caller onto ``OrderStatus``.

    Accepts the value or the name in any case, with spaces or hyphens in
    place of underscores ("On Transit", "given-to-courier", "DELIVERED").
    """
    if isinstance(value, OrderStatus):
        return value
    if not isinstance(value, str):
        raise UnrecognizedStatusError({"status": [f"Unrecognized order status: {value!r}"]})

    normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return OrderStatus(normalized)
    except ValueError:
        raise UnrecognizedStatusError({"status": [f"Unrecognized order status: {value!r}"]}) from None


def can_transition(old: OrderStatus, new: OrderStatus) -> bool:
    return new in _VALID_TRANSITIONS.get(old, set())


def assert_status_flow(old: OrderStatus, new: OrderStatus) -> None:
    """Raise ``InvalidTransitionError`` unless ``old → new`` is an edge of the pipeline."""
    if old in TERMINAL_STATUSES:
        raise InvalidTransitionError(
            {"status": [f"Order status can't change after being {old.name} (requested {new.name})"]}
        )
    if not can_transition(old, new):
        raise InvalidTransitionError({"status": [f"Order status can't change from {old.name} to {new.name}"]})


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@delivery.aggregate
class Order:
    order_id = Identifier(identifier=True, required=True)
    vendor_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    status = String(
        max_length=50,
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    destination = ValueObject(Coordinate)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(
        cls,
        order_id: str,
        vendor_id: str,
        customer_id: str,
        destination: Coordinate,
        within_zone: bool = True,
    ):
        """Create an order; orders outside the vendor's zone start REJECTED."""
        now = datetime.now(UTC)
        status = OrderStatus.PENDING if within_zone else OrderStatus.REJECTED
        order = cls(
            order_id=order_id,
            vendor_id=vendor_id,
            customer_id=customer_id,
            status=status.value,
            destination=destination,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.order_id),
                vendor_id=str(vendor_id),
                customer_id=str(customer_id),
                status=status.value,
                destination_latitude=destination.latitude,
                destination_longitude=destination.longitude,
                placed_at=now,
            )
        )
        return order

    @property
    def current_status(self) -> OrderStatus:
        return OrderStatus(self.status)

    @property
    def is_terminal(self) -> bool:
        return self.current_status in TERMINAL_STATUSES

    def change_status(self, new_status: OrderStatus, changed_by: str | None = None) -> None:
        """Move to ``new_status`` if the pipeline allows it."""
        previous = self.current_status
        assert_status_flow(previous, new_status)

        now = datetime.now(UTC)
        self.status = new_status.value
        self.updated_at = now
        self.raise_(
            OrderStatusChanged(
                order_id=str(self.order_id),
                previous_status=previous.value,
                new_status=new_status.value,
                changed_by=str(changed_by) if changed_by is not None else None,
                changed_at=now,
            )
        )
