"""
Contact Routes - Contact form endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from portfolio.domains.contact import ContactReceipt, ContactService, ContactSubmission
from portfolio.interfaces.api.deps import get_contact_service

router = APIRouter()


@router.post("", response_model=ContactReceipt)
async def submit_contact(
    submission: ContactSubmission | None = Body(default=None),
    service: ContactService = Depends(get_contact_service),
):
    """
    Accept a contact form submission.

    - **name**, **email**, **message**: all required and non-empty

    Returns 400 if any field is missing, 500 if delivery fails.
    """
    return await service.submit(submission or ContactSubmission())
