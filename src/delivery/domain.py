"""Delivery bounded context: Delivery Lifecycle and Live Tracking.

Decides at creation time whether an order can be served from the vendor's
delivery zone, walks orders through a strict status pipeline, records the
ready / picked-up / delivered timestamps of each delivery and estimates
where an in-transit order currently is. Also owns the vendor → courier
assignments used to decide who may act on a delivery.
"""

from protean.domain import Domain

from delivery.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
delivery = Domain(name="delivery")
