"""
Contact Service - Validates, records and delivers contact form submissions.
"""

from __future__ import annotations

import asyncio
import logging

from portfolio.config.errors import ErrorCode, InternalError, ValidationError

from .contracts import ContactNotifier
from .models import ContactReceipt, ContactRecord, ContactSubmission

logger = logging.getLogger(__name__)

__all__ = ["ContactService", "SimulatedNotifier"]


class SimulatedNotifier:
    """
    Stand-in delivery channel.

    Waits a fixed delay instead of sending email. The wait is not
    cancellable by the caller and never fails.
    """

    def __init__(self, delay_seconds: float = 1.0) -> None:
        self.delay_seconds = delay_seconds

    async def deliver(self, record: ContactRecord) -> None:
        await asyncio.sleep(self.delay_seconds)


class ContactService:
    """
    Contact form workflow.

    Order matters: validation happens before anything is logged, so a
    rejected submission leaves no record.
    """

    def __init__(self, notifier: ContactNotifier) -> None:
        self._notifier = notifier

    async def submit(self, submission: ContactSubmission) -> ContactReceipt:
        """
        Accept a contact submission.

        Raises:
            ValidationError: if name, email or message is missing or empty
            InternalError: if recording or delivery fails for any reason
        """
        missing = submission.missing_fields()
        if missing:
            raise ValidationError("All fields are required", {"missing": missing})

        try:
            record = ContactRecord.from_submission(submission)
            logger.info("Contact form submission: %s", record.model_dump())
            await self._notifier.deliver(record)
        except Exception as e:
            logger.exception("Contact form error: %s", e)
            raise InternalError(
                "Server error. Please try again later.",
                details={"cause": repr(e)},
                code=ErrorCode.CONTACT_SUBMISSION_FAILED,
            ) from e

        return ContactReceipt()
