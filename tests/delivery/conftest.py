import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def delivery_bed():
    from delivery.domain import delivery

    bed = DomainFixture(delivery)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(delivery_bed):
    with delivery_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def _services():
    """Fresh fake Users/Orders services for every test."""
    from delivery.external import reset_services

    reset_services()
    yield
    reset_services()


@pytest.fixture()
def users_service():
    from delivery.external import get_users_service

    return get_users_service()


@pytest.fixture()
def orders_service():
    from delivery.external import get_orders_service

    return get_orders_service()


@pytest.fixture()
def create_delivery(users_service):
    """Create a delivery for a vendor at ``vendor_location``; returns the delivery ID."""
    from delivery.delivery.creation import CreateDelivery
    from protean import current_domain

    def _create(
        order_id="ord-001",
        vendor_id="ven-001",
        destination=(3.0, 4.0),
        vendor_location=(0.0, 0.0),
        default_delivery_zone=10.0,
    ):
        users_service.register_vendor(vendor_id, *vendor_location)
        return current_domain.process(
            CreateDelivery(
                order_id=order_id,
                vendor_id=vendor_id,
                customer_id="cust-001",
                destination_latitude=destination[0],
                destination_longitude=destination[1],
                default_delivery_zone=default_delivery_zone,
            ),
            asynchronous=False,
        )

    return _create
