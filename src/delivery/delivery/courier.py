"""Courier on a delivery: binding a courier from the vendor's pool."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from delivery.delivery.delivery import Delivery
from delivery.delivery.helpers import load_delivery
from delivery.domain import delivery
from delivery.exceptions import CourierNotFoundError
from delivery.order.status import load_order
from delivery.vendor.registration import load_vendor

logger = structlog.get_logger(__name__)


def get_courier_for_order(order_id: str) -> str:
    """ID of the courier delivering the order."""
    load_order(order_id)
    dlv = load_delivery(order_id)
    if dlv.courier_id is None:
        raise CourierNotFoundError(f"No courier is assigned to order {order_id}")
    return str(dlv.courier_id)


@delivery.command(part_of="Delivery")
class AssignCourierToDelivery:
    """Give the delivery to one of the vendor's couriers."""

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)


@delivery.command_handler(part_of=Delivery)
class DeliveryCourierHandler:
    @handle(AssignCourierToDelivery)
    def assign_courier(self, command):
        repo = current_domain.repository_for(Delivery)
        dlv = load_delivery(command.order_id)

        vendor = load_vendor(dlv.vendor_id)
        if not vendor.has_courier(command.courier_id):
            raise CourierNotFoundError(
                f"Courier {command.courier_id} is not assigned to vendor {dlv.vendor_id}"
            )

        dlv.assign_courier(command.courier_id)
        repo.add(dlv)
        logger.info(
            "Courier assigned to delivery",
            order_id=str(command.order_id),
            courier_id=str(command.courier_id),
        )
