"""Fake remote service adapters: deterministic in-process stand-ins.

Used by default in development and tests. Their data and failure behavior
can be configured per test.
"""

from delivery.exceptions import MicroserviceCommunicationError
from delivery.external.port import OrdersPort, UsersPort
from delivery.shared.geometry import Coordinate


class FakeUsersService(UsersPort):
    """Users service backed by in-memory dictionaries."""

    def __init__(self):
        self.vendor_locations: dict[str, tuple[float, float]] = {}
        self.user_types: dict[str, str] = {}
        self.should_succeed = True

    def configure(self, should_succeed: bool = True):
        """Configure the fake service behavior for testing."""
        self.should_succeed = should_succeed

    def register_vendor(self, vendor_id: str, latitude: float, longitude: float) -> None:
        self.vendor_locations[str(vendor_id)] = (latitude, longitude)
        self.user_types[str(vendor_id)] = "vendor"

    def register_user(self, user_id: str, user_type: str) -> None:
        self.user_types[str(user_id)] = user_type

    def get_vendor_location(self, vendor_id: str) -> Coordinate | None:
        if not self.should_succeed:
            return None
        location = self.vendor_locations.get(str(vendor_id))
        if location is None:
            return None
        return Coordinate(latitude=location[0], longitude=location[1])

    def get_user_type(self, user_id: str) -> str | None:
        if not self.should_succeed:
            raise MicroserviceCommunicationError(f"Users service could not classify user {user_id}")
        return self.user_types.get(str(user_id))


class FakeOrdersService(OrdersPort):
    """Orders service that acknowledges every write by default."""

    def __init__(self):
        self.should_succeed = True
        self.calls: list[tuple[str, str, str]] = []

    def configure(self, should_succeed: bool = True):
        """Configure the fake service behavior for testing."""
        self.should_succeed = should_succeed

    def put_order_status(self, order_id: str, actor_id: str, status: str) -> bool:
        self.calls.append((str(order_id), str(actor_id), status))
        return self.should_succeed
