"""Order status: command, handler and status lookup.

Status changes arrive as free-form strings from remote callers. They are
parsed, checked against the pipeline, mirrored to the Orders service and
only then committed locally.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from delivery.domain import delivery
from delivery.exceptions import MicroserviceCommunicationError, OrderNotFoundError
from delivery.external import get_orders_service
from delivery.order.order import Order, OrderStatus, assert_status_flow, parse_status

logger = structlog.get_logger(__name__)


def load_order(order_id: str) -> Order:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise OrderNotFoundError(f"Order with ID: {order_id} not found.") from None


def get_order_status(order_id: str) -> OrderStatus:
    """Current status of the order."""
    return load_order(order_id).current_status


def _propagate_status(order_id: str, actor_id: str, status: OrderStatus) -> None:
    try:
        acknowledged = get_orders_service().put_order_status(str(order_id), str(actor_id), status.value)
    except MicroserviceCommunicationError:
        raise
    except Exception as exc:
        raise MicroserviceCommunicationError(f"Order status for {order_id} could not be updated: {exc}") from exc

    if not acknowledged:
        raise MicroserviceCommunicationError(f"Order status for {order_id} could not be updated")


@delivery.command(part_of="Order")
class ChangeOrderStatus:
    """Move an order to the next status, on behalf of an actor."""

    order_id = Identifier(required=True)
    actor_id = Identifier(required=True)
    status = String(required=True, max_length=50)


@delivery.command_handler(part_of=Order)
class OrderStatusHandler:
    @handle(ChangeOrderStatus)
    def change_status(self, command):
        repo = current_domain.repository_for(Order)
        order = load_order(command.order_id)

        new_status = parse_status(command.status)
        assert_status_flow(order.current_status, new_status)

        try:
            _propagate_status(command.order_id, command.actor_id, new_status)
        except MicroserviceCommunicationError:
            logger.warning(
                "Orders service refused status change, not committed",
                order_id=str(command.order_id),
                status=new_status.value,
            )
            raise

        order.change_status(new_status, changed_by=command.actor_id)
        repo.add(order)
        logger.info(
            "Order status changed",
            order_id=str(command.order_id),
            status=new_status.value,
            actor_id=str(command.actor_id),
        )
        return new_status.value
