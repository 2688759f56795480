"""Remote service adapters: pluggable Users and Orders service integration."""

import os

_users_instance = None
_orders_instance = None


def get_users_service():
    """Return the configured Users service adapter (singleton).

    Uses FakeUsersService by default. In production, configure via
    USERS_SERVICE_ADAPTER environment variable.
    """
    global _users_instance
    if _users_instance is None:
        adapter = os.environ.get("USERS_SERVICE_ADAPTER", "fake")
        if adapter == "fake":
            from delivery.external.fake_adapter import FakeUsersService

            _users_instance = FakeUsersService()
        else:
            raise ValueError(f"Unknown users service adapter: {adapter}")
    return _users_instance


def get_orders_service():
    """Return the configured Orders service adapter (singleton).

    Uses FakeOrdersService by default. In production, configure via
    ORDERS_SERVICE_ADAPTER environment variable.
    """
    global _orders_instance
    if _orders_instance is None:
        adapter = os.environ.get("ORDERS_SERVICE_ADAPTER", "fake")
        if adapter == "fake":
            from delivery.external.fake_adapter import FakeOrdersService

            _orders_instance = FakeOrdersService()
        else:
            raise ValueError(f"Unknown orders service adapter: {adapter}")
    return _orders_instance


def reset_services():
    """Reset the adapter singletons (useful for testing)."""
    global _users_instance, _orders_instance
    _users_instance = None
    _orders_instance = None
