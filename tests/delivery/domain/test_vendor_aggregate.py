"""Tests for the Vendor aggregate: courier pool and delivery zone."""

import pytest
from delivery.exceptions import VendorHasNoCouriersError
from delivery.shared.geometry import Coordinate
from delivery.vendor.events import CourierAssigned, DeliveryZoneUpdated, VendorRegistered
from delivery.vendor.vendor import Vendor
from protean.exceptions import ValidationError


def _make_vendor(zone=10.0):
    return Vendor.register(
        vendor_id="ven-001",
        address=Coordinate(latitude=0.0, longitude=0.0),
        delivery_zone=zone,
    )


class TestRegistration:
    def test_new_vendor_has_empty_courier_pool(self):
        vendor = _make_vendor()
        assert vendor.courier_ids() == []
        assert not vendor.has_couriers()

    def test_registration_event(self):
        vendor = _make_vendor(zone=7.5)
        event = vendor._events[-1]
        assert isinstance(event, VendorRegistered)
        assert event.delivery_zone == 7.5
        assert event.address_latitude == 0.0

    def test_registration_event_at_origin_carries_address(self):
        vendor = Vendor.register(
            vendor_id="ven-origin",
            address=Coordinate(latitude=0.0, longitude=0.0),
            delivery_zone=10.0,
        )
        event = vendor._events[-1]
        assert event.address_latitude == 0.0
        assert event.address_longitude == 0.0
        assert event.address_latitude is not None
        assert event.address_longitude is not None

    def test_negative_radius_rejected(self):
        with pytest.raises(ValidationError):
            _make_vendor(zone=-1.0)


class TestCourierPool:
    def test_assign_keeps_insertion_order(self):
        vendor = _make_vendor()
        vendor.assign_courier("c-6")
        vendor.assign_courier("c-2")
        vendor.assign_courier("c-9")
        assert vendor.courier_ids() == ["c-6", "c-2", "c-9"]

    def test_assign_same_courier_twice_is_noop(self):
        vendor = _make_vendor()
        assert vendor.assign_courier("c-6") is True
        assert vendor.assign_courier("c-6") is False
        assert vendor.courier_ids() == ["c-6"]
        assert len([e for e in vendor._events if isinstance(e, CourierAssigned)]) == 1

    def test_has_courier(self):
        vendor = _make_vendor()
        vendor.assign_courier("c-6")
        assert vendor.has_courier("c-6")
        assert not vendor.has_courier("c-7")


class TestDeliveryZone:
    def test_update_with_couriers(self):
        vendor = _make_vendor()
        vendor.assign_courier("c-1")
        vendor.update_delivery_zone(25.0)
        assert vendor.delivery_zone == 25.0
        event = vendor._events[-1]
        assert isinstance(event, DeliveryZoneUpdated)
        assert event.previous_zone == 10.0

    @pytest.mark.parametrize("radius", [0.0, 5.0, 10.0, 1000.0])
    def test_update_without_couriers_always_refused(self, radius):
        vendor = _make_vendor()
        with pytest.raises(VendorHasNoCouriersError):
            vendor.update_delivery_zone(radius)
        assert vendor.delivery_zone == 10.0

    def test_negative_radius_refused(self):
        vendor = _make_vendor()
        vendor.assign_courier("c-1")
        with pytest.raises(ValidationError):
            vendor.update_delivery_zone(-3.0)
