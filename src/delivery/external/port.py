"""Ports for the remote services the delivery domain depends on.

Domain code programs against these interfaces; adapters are selected via
configuration (see ``delivery.external``).
"""

from abc import ABC, abstractmethod

from delivery.shared.geometry import Coordinate


class UsersPort(ABC):
    """Identity and location lookups served by the Users service."""

    @abstractmethod
    def get_vendor_location(self, vendor_id: str) -> Coordinate | None:
        """Return the vendor's address, or None when the service has none."""
        ...

    @abstractmethod
    def get_user_type(self, user_id: str) -> str | None:
        """Return the user's classification ("courier", "vendor", ...), or None if unknown.

        Raises:
            MicroserviceCommunicationError: the service could not be reached.
        """
        ...


class OrdersPort(ABC):
    """Status propagation to the Orders service."""

    @abstractmethod
    def put_order_status(self, order_id: str, actor_id: str, status: str) -> bool:
        """Mirror a status change remotely.

        Returns:
            True when the Orders service acknowledged the write.
        """
        ...
