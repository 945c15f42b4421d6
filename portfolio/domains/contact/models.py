"""
Contact Models - Data types for contact domain.
"""

from __future__ import annotations

from pydantic import BaseModel

from portfolio.domains.clock import utc_timestamp

REQUIRED_FIELDS = ("name", "email", "message")


class ContactSubmission(BaseModel):
    """Inbound contact form body. Fields are optional until validated."""

    name: str | None = None
    email: str | None = None
    message: str | None = None

    model_config = {"frozen": True}

    def missing_fields(self) -> list[str]:
        """Names of fields that are absent or empty."""
        return [field for field in REQUIRED_FIELDS if not getattr(self, field)]

    def is_complete(self) -> bool:
        return not self.missing_fields()


class ContactRecord(BaseModel):
    """A validated submission as written to the operator log."""

    name: str
    email: str
    message: str
    timestamp: str

    @classmethod
    def from_submission(cls, submission: ContactSubmission) -> ContactRecord:
        return cls(
            name=submission.name or "",
            email=submission.email or "",
            message=submission.message or "",
            timestamp=utc_timestamp(),
        )


class ContactReceipt(BaseModel):
    """Response body for an accepted submission."""

    success: bool = True
    message: str = "Message sent successfully!"
