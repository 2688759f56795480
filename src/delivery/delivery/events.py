"""Delivery domain events: immutable facts about a delivery's progress."""

from protean.fields import DateTime, Identifier, String

from delivery.domain import delivery


@delivery.event(part_of="Delivery")
class DeliveryCreated:
    """A delivery started being tracked for an order."""

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    vendor_id = Identifier(required=True)
    created_at = DateTime(required=True)


@delivery.event(part_of="Delivery")
class ReadyTimeRecorded:
    """The vendor reported when the order is ready for pick-up."""

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    ready_time = DateTime(required=True)


@delivery.event(part_of="Delivery")
class PickUpTimeRecorded:
    """The courier collected the order from the vendor."""

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    pick_up_time = DateTime(required=True)


@delivery.event(part_of="Delivery")
class DeliveredTimeRecorded:
    """The order reached the customer."""

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    delivered_time = DateTime(required=True)


@delivery.event(part_of="Delivery")
class IssueReported:
    """A problem with the delivery was reported."""

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    issue_type = String(required=True)
    description = String()
    reported_at = DateTime(required=True)


@delivery.event(part_of="Delivery")
class CourierAssignedToDelivery:
    """A courier from the vendor's pool took on the delivery."""

    __version__ = 1

    delivery_id = Identifier(required=True)
    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    assigned_at = DateTime(required=True)
