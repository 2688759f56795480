"""Delivery issues: reporting and retrieval."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from delivery.delivery.delivery import Delivery, Issue
from delivery.delivery.helpers import load_delivery
from delivery.domain import delivery
from delivery.exceptions import DeliveryNotFoundError

logger = structlog.get_logger(__name__)


def retrieve_issue(order_id: str) -> Issue | None:
    """The latest issue reported for the order's delivery, if any."""
    return load_delivery(order_id, missing=DeliveryNotFoundError).issue


@delivery.command(part_of="Delivery")
class ReportIssue:
    """Report a problem with a delivery; replaces any earlier report."""

    order_id = Identifier(required=True)
    issue_type = String(required=True, max_length=100)
    description = String(max_length=1000)


@delivery.command_handler(part_of=Delivery)
class IssueHandler:
    @handle(ReportIssue)
    def report_issue(self, command):
        repo = current_domain.repository_for(Delivery)
        dlv = load_delivery(command.order_id, missing=DeliveryNotFoundError)
        dlv.report_issue(command.issue_type, command.description)
        repo.add(dlv)
        logger.info(
            "Delivery issue reported",
            order_id=str(command.order_id),
            issue_type=command.issue_type,
        )
