"""Delivery creation: command and handler.

Creating a delivery registers the vendor if needed, checks the destination
against the vendor's delivery zone and stores the Order and its Delivery
together. Destinations outside the zone are not an error: the order is
simply created as REJECTED.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier
from protean.utils.globals import current_domain

from delivery.delivery.delivery import Delivery
from delivery.domain import delivery
from delivery.exceptions import MicroserviceCommunicationError, OrderAlreadyExistsError
from delivery.order.order import Order
from delivery.shared.geometry import Coordinate
from delivery.vendor.registration import find_or_create_vendor
from delivery.vendor.zone import evaluate_delivery_zone

logger = structlog.get_logger(__name__)


def order_exists(order_id: str) -> bool:
    try:
        current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        return False
    return True


@delivery.command(part_of="Delivery")
class CreateDelivery:
    """Start delivering an order from a vendor to a customer."""

    order_id = Identifier(required=True)
    vendor_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    destination_latitude = Float(required=True)
    destination_longitude = Float(required=True)
    default_delivery_zone = Float()


@delivery.command_handler(part_of=Delivery)
class CreateDeliveryHandler:
    @handle(CreateDelivery)
    def create_delivery(self, command):
        vendor = find_or_create_vendor(command.vendor_id, command.default_delivery_zone)
        if vendor.address is None:
            raise MicroserviceCommunicationError(f"Vendor {command.vendor_id} has no known address")

        if order_exists(command.order_id):
            raise OrderAlreadyExistsError({"order_id": [f"Order {command.order_id} already has a delivery"]})

        destination = Coordinate(
            latitude=command.destination_latitude,
            longitude=command.destination_longitude,
        )
        evaluation = evaluate_delivery_zone(vendor.address, destination, vendor.delivery_zone)

        order = Order.place(
            order_id=command.order_id,
            vendor_id=command.vendor_id,
            customer_id=command.customer_id,
            destination=destination,
            within_zone=evaluation.within_zone,
        )
        dlv = Delivery.create(order_id=command.order_id, vendor_id=command.vendor_id)

        current_domain.repository_for(Order).add(order)
        current_domain.repository_for(Delivery).add(dlv)

        if evaluation.within_zone:
            logger.info(
                "Delivery created",
                order_id=str(command.order_id),
                delivery_id=str(dlv.id),
                distance=evaluation.distance,
            )
        else:
            logger.warning(
                "Destination outside delivery zone, order rejected",
                order_id=str(command.order_id),
                vendor_id=str(command.vendor_id),
                distance=evaluation.distance,
                delivery_zone=vendor.delivery_zone,
            )
        return str(dlv.id)
