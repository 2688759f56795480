"""Shared BDD fixtures and step definitions for the Delivery domain."""

import pytest
from delivery.delivery.creation import CreateDelivery
from delivery.order.order import OrderStatus
from delivery.order.status import ChangeOrderStatus, get_order_status
from protean import current_domain
from protean.exceptions import ProteanException
from pytest_bdd import given, parsers, then, when

_PLACE_ORDER = 'order "{placed_order}" is placed for delivery to ({latitude:g}, {longitude:g}) with a zone of {zone:g}'


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a vendor "{vendor}" located at ({latitude:g}, {longitude:g})'),
    target_fixture="vendor_id",
)
def vendor_located_at(users_service, vendor, latitude, longitude):
    users_service.register_vendor(vendor, latitude, longitude)
    return vendor


# ---------------------------------------------------------------------------
# Order placement (used as both a Given and a When)
# ---------------------------------------------------------------------------
@given(parsers.cfparse(_PLACE_ORDER), target_fixture="order_id")
@when(parsers.cfparse(_PLACE_ORDER), target_fixture="order_id")
def place_order(vendor_id, placed_order, latitude, longitude, zone):
    current_domain.process(
        CreateDelivery(
            order_id=placed_order,
            vendor_id=vendor_id,
            customer_id="cust-bdd",
            destination_latitude=latitude,
            destination_longitude=longitude,
            default_delivery_zone=zone,
        ),
        asynchronous=False,
    )
    return placed_order


@when(parsers.cfparse('the vendor moves the order to "{status}"'))
def vendor_moves_order(vendor_id, order_id, status, error):
    try:
        current_domain.process(
            ChangeOrderStatus(order_id=order_id, actor_id=vendor_id, status=status),
            asynchronous=False,
        )
    except ProteanException as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order_id, status):
    assert get_order_status(order_id) == OrderStatus(status)


@then("the status change succeeds")
def status_change_succeeds(error):
    assert error["exc"] is None, f"Unexpected error: {error['exc']!r}"


@then(parsers.cfparse("the status change fails with {error_type}"))
def status_change_fails(error, error_type):
    assert error["exc"] is not None, "Expected the status change to fail"
    assert type(error["exc"]).__name__ == error_type
