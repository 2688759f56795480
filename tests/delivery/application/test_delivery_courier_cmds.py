"""Application tests for binding couriers to deliveries."""

import pytest
from delivery.delivery.courier import AssignCourierToDelivery, get_courier_for_order
from delivery.delivery.helpers import get_delivery_id
from delivery.exceptions import CourierNotFoundError, OrderNotFoundError
from delivery.vendor.couriers import AssignCourier
from protean import current_domain


def _process(command):
    return current_domain.process(command, asynchronous=False)


@pytest.fixture()
def pooled_courier(create_delivery, users_service):
    create_delivery()
    users_service.register_user("c-1", "courier")
    _process(AssignCourier(vendor_id="ven-001", courier_id="c-1"))
    return "c-1"


class TestAssignCourierToDelivery:
    def test_assigns_courier_from_pool(self, pooled_courier):
        _process(AssignCourierToDelivery(order_id="ord-001", courier_id=pooled_courier))
        assert get_courier_for_order("ord-001") == pooled_courier

    def test_courier_outside_pool_is_refused(self, pooled_courier, users_service):
        users_service.register_user("c-2", "courier")
        with pytest.raises(CourierNotFoundError):
            _process(AssignCourierToDelivery(order_id="ord-001", courier_id="c-2"))

    def test_unknown_order(self):
        with pytest.raises(OrderNotFoundError):
            _process(AssignCourierToDelivery(order_id="ord-404", courier_id="c-1"))


class TestGetCourierForOrder:
    def test_no_courier_yet(self, create_delivery):
        create_delivery()
        with pytest.raises(CourierNotFoundError):
            get_courier_for_order("ord-001")

    def test_unknown_order(self):
        with pytest.raises(OrderNotFoundError):
            get_courier_for_order("ord-404")


class TestGetDeliveryId:
    def test_matches_created_delivery(self, create_delivery):
        delivery_id = create_delivery()
        assert get_delivery_id("ord-001") == delivery_id

    def test_unknown_order(self):
        with pytest.raises(OrderNotFoundError):
            get_delivery_id("ord-404")
