"""Delivery domain errors.

Three families, kept apart so callers can map them independently:

* not found: a referenced order, delivery, vendor or courier is absent
  (``ObjectNotFoundError`` subclasses);
* rule violations on an otherwise well-formed request
  (``ValidationError`` subclasses, carrying field-keyed messages);
* failures of the remote Users / Orders services
  (``MicroserviceCommunicationError``).
"""

from protean.exceptions import ObjectNotFoundError, ProteanException, ValidationError


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------
class OrderNotFoundError(ObjectNotFoundError):
    """No order (or no delivery for the order) exists for the given ID."""


class DeliveryNotFoundError(ObjectNotFoundError):
    """No delivery exists for the given order ID."""


class VendorNotFoundError(ObjectNotFoundError):
    """The vendor is not known to the delivery domain."""


class CourierNotFoundError(ObjectNotFoundError):
    """The user is not a courier, or no courier is bound where one is needed."""


# ---------------------------------------------------------------------------
# Rule violations
# ---------------------------------------------------------------------------
class InvalidTransitionError(ValidationError):
    """The requested order status does not follow the current one."""


class UnrecognizedStatusError(ValidationError):
    """A status string does not name any order status."""


class VendorHasNoCouriersError(ValidationError):
    """The vendor needs at least one courier for this operation."""


class OrderAlreadyExistsError(ValidationError):
    """A delivery was requested for an order that is already tracked."""


class OrderRejectedError(ValidationError):
    """The order was rejected, so it will never be prepared, picked up or delivered."""


# ---------------------------------------------------------------------------
# External dependencies
# ---------------------------------------------------------------------------
class MicroserviceCommunicationError(ProteanException):
    """A remote service did not answer, or refused the request."""
