"""
Tests for contact domain models and service.
"""

from __future__ import annotations

import logging
import time
from unittest.mock import AsyncMock, patch

import pytest

from portfolio.config.errors import ErrorCode, InternalError, ValidationError

from .contracts import ContactNotifier
from .models import ContactRecord, ContactSubmission
from .service import ContactService, SimulatedNotifier

SERVICE_LOGGER = "portfolio.domains.contact.service"


@pytest.fixture
def notifier() -> AsyncMock:
    """Create a mock delivery channel."""
    return AsyncMock(spec=SimulatedNotifier)


@pytest.fixture
def service(notifier: AsyncMock) -> ContactService:
    return ContactService(notifier)


def _submissions_logged(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [
        r
        for r in caplog.records
        if r.name == SERVICE_LOGGER and r.getMessage().startswith("Contact form submission")
    ]


# --- ContactSubmission Tests ---


def test_submission_complete() -> None:
    submission = ContactSubmission(name="Ana", email="a@example.com", message="Hi")
    assert submission.is_complete()
    assert submission.missing_fields() == []


def test_submission_missing_and_empty_fields() -> None:
    """Absent and empty values both count as missing."""
    submission = ContactSubmission(name="", message="Hi")
    assert not submission.is_complete()
    assert submission.missing_fields() == ["name", "email"]


def test_submission_no_format_check() -> None:
    """Email is only checked for presence."""
    submission = ContactSubmission(name="Ana", email="not-an-email", message=" ")
    assert submission.is_complete()


def test_record_has_iso_timestamp() -> None:
    record = ContactRecord.from_submission(
        ContactSubmission(name="Ana", email="a@example.com", message="Hi")
    )
    assert record.name == "Ana"
    assert record.timestamp.endswith("Z")
    assert "T" in record.timestamp


def test_simulated_notifier_satisfies_contract() -> None:
    assert isinstance(SimulatedNotifier(), ContactNotifier)


# --- ContactService Tests ---


async def test_submit_success(
    service: ContactService, notifier: AsyncMock, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger=SERVICE_LOGGER)

    receipt = await service.submit(
        ContactSubmission(name="Ana", email="a@example.com", message="Hi")
    )

    assert receipt.success is True
    assert receipt.message == "Message sent successfully!"
    notifier.deliver.assert_awaited_once()
    delivered = notifier.deliver.await_args.args[0]
    assert delivered.email == "a@example.com"
    assert len(_submissions_logged(caplog)) == 1


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": "", "email": "a@x.com", "message": "Hi"},
        {"name": "Ana", "email": "a@x.com"},
        {"name": "Ana", "email": None, "message": "Hi"},
    ],
)
async def test_submit_rejects_incomplete(
    service: ContactService,
    notifier: AsyncMock,
    caplog: pytest.LogCaptureFixture,
    payload: dict,
) -> None:
    caplog.set_level(logging.INFO, logger=SERVICE_LOGGER)

    with pytest.raises(ValidationError) as exc_info:
        await service.submit(ContactSubmission(**payload))

    assert exc_info.value.message == "All fields are required"
    assert exc_info.value.http_status == 400
    notifier.deliver.assert_not_awaited()
    assert _submissions_logged(caplog) == []


async def test_submit_delivery_failure_is_generic(
    service: ContactService, notifier: AsyncMock, caplog: pytest.LogCaptureFixture
) -> None:
    """Delivery errors are logged but the caller only sees a generic message."""
    notifier.deliver.side_effect = ConnectionError("smtp down")

    with pytest.raises(InternalError) as exc_info:
        await service.submit(
            ContactSubmission(name="Ana", email="a@example.com", message="Hi")
        )

    error = exc_info.value
    assert error.code == ErrorCode.CONTACT_SUBMISSION_FAILED
    assert error.http_status == 500
    assert error.to_dict() == {
        "success": False,
        "message": "Server error. Please try again later.",
    }
    assert "smtp down" not in str(error.to_dict())
    assert any("smtp down" in r.getMessage() for r in caplog.records)


async def test_simulated_notifier_waits() -> None:
    notifier = SimulatedNotifier(delay_seconds=0.05)
    record = ContactRecord(name="Ana", email="a@x.com", message="Hi", timestamp="t")

    start = time.perf_counter()
    await notifier.deliver(record)

    assert time.perf_counter() - start >= 0.05


async def test_submit_record_failure_is_generic(
    service: ContactService, notifier: AsyncMock
) -> None:
    """Failures after validation use the contact error message, not the catch-all."""
    with patch.object(
        ContactRecord, "from_submission", side_effect=ValueError("bad clock")
    ):
        with pytest.raises(InternalError) as exc_info:
            await service.submit(
                ContactSubmission(name="Ana", email="a@example.com", message="Hi")
            )

    assert exc_info.value.message == "Server error. Please try again later."
    assert exc_info.value.http_status == 500
    notifier.deliver.assert_not_awaited()
