"""Delivery timing: lifecycle timestamp commands, lookups and ETA."""

from datetime import UTC, datetime

import structlog
from protean import handle
from protean.fields import DateTime, Identifier
from protean.utils.globals import current_domain

from delivery import settings
from delivery.delivery.delivery import Delivery, as_utc
from delivery.delivery.helpers import load_delivery
from delivery.domain import delivery
from delivery.exceptions import OrderRejectedError
from delivery.order.order import OrderStatus
from delivery.order.status import load_order

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------
def get_ready_time(order_id: str) -> datetime | None:
    return load_delivery(order_id).time_record.ready_time


def get_pick_up_time(order_id: str) -> datetime | None:
    return load_delivery(order_id).time_record.pick_up_time


def get_delivered_time(order_id: str) -> datetime | None:
    return load_delivery(order_id).time_record.delivered_time


def get_eta(order_id: str, now: datetime | None = None) -> datetime:
    """Estimated arrival of the order at the customer.

    Once the courier has picked the order up, the estimate is anchored on
    the pick-up time; before that, the full transit still lies ahead.
    """
    pick_up_time = load_delivery(order_id).time_record.pick_up_time
    duration = settings.transit_duration()
    if pick_up_time is not None:
        return as_utc(pick_up_time) + duration
    return as_utc(now or datetime.now(UTC)) + duration


def _load_open_delivery(order_id: str) -> Delivery:
    """The order's delivery, refusing orders that were rejected at creation."""
    dlv = load_delivery(order_id)
    if load_order(order_id).current_status == OrderStatus.REJECTED:
        raise OrderRejectedError({"order_id": [f"Order {order_id} was rejected and cannot be timed"]})
    return dlv


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@delivery.command(part_of="Delivery")
class UpdateReadyTime:
    """Record when the order is (or will be) ready at the vendor."""

    order_id = Identifier(required=True)
    ready_time = DateTime(required=True)


@delivery.command(part_of="Delivery")
class UpdatePickUpTime:
    """Record when the courier picked the order up."""

    order_id = Identifier(required=True)
    pick_up_time = DateTime(required=True)


@delivery.command(part_of="Delivery")
class UpdateDeliveredTime:
    """Record when the order was delivered."""

    order_id = Identifier(required=True)
    delivered_time = DateTime(required=True)


@delivery.command_handler(part_of=Delivery)
class DeliveryTimingHandler:
    @handle(UpdateReadyTime)
    def update_ready_time(self, command):
        repo = current_domain.repository_for(Delivery)
        dlv = _load_open_delivery(command.order_id)
        dlv.record_ready_time(command.ready_time)
        repo.add(dlv)
        logger.info("Ready time recorded", order_id=str(command.order_id))

    @handle(UpdatePickUpTime)
    def update_pick_up_time(self, command):
        repo = current_domain.repository_for(Delivery)
        dlv = _load_open_delivery(command.order_id)
        dlv.record_pick_up_time(command.pick_up_time)
        repo.add(dlv)
        logger.info("Pick-up time recorded", order_id=str(command.order_id))

    @handle(UpdateDeliveredTime)
    def update_delivered_time(self, command):
        repo = current_domain.repository_for(Delivery)
        dlv = _load_open_delivery(command.order_id)
        dlv.record_delivered_time(command.delivered_time)
        repo.add(dlv)
        logger.info("Delivered time recorded", order_id=str(command.order_id))
