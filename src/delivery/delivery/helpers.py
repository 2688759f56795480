"""Shared lookups for delivery command handlers and queries."""

from protean.utils.globals import current_domain

from delivery.delivery.delivery import Delivery
from delivery.exceptions import OrderNotFoundError


def find_delivery(order_id: str) -> Delivery | None:
    """The delivery paired with ``order_id``, or None."""
    repo = current_domain.repository_for(Delivery)
    results = repo._dao.query.filter(order_id=str(order_id)).all()
    if not results or not results.items:
        return None
    return results.first


def load_delivery(order_id: str, missing=OrderNotFoundError) -> Delivery:
    """The delivery paired with ``order_id``; raises ``missing`` if there is none."""
    dlv = find_delivery(order_id)
    if dlv is None:
        if missing is OrderNotFoundError:
            raise OrderNotFoundError(f"Order with ID: {order_id} not found.")
        raise missing(f"Delivery with order id {order_id} was not found")
    return dlv


def get_delivery_id(order_id: str) -> str:
    return str(load_delivery(order_id).id)
