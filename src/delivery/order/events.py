"""Order domain events: immutable facts about order status."""

from protean.fields import DateTime, Float, Identifier, String

from delivery.domain import delivery


@delivery.event(part_of="Order")
class OrderPlaced:
    """An order entered the delivery domain, either pending or auto-rejected."""

    __version__ = 1

    order_id = Identifier(required=True)
    vendor_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    status = String(required=True)
    destination_latitude = Float(required=True)
    destination_longitude = Float(required=True)
    placed_at = DateTime(required=True)


@delivery.event(part_of="Order")
class OrderStatusChanged:
    """The order moved to the next status of the pipeline."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_by = Identifier()
    changed_at = DateTime(required=True)
