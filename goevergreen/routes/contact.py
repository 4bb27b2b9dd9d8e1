# goevergreen/routes/contact.py
from fastapi import APIRouter, BackgroundTasks, HTTPException, Request, status
import logging

from goevergreen.database.contact_repository import contact_repository
from goevergreen.models.api import SuccessResponse
from goevergreen.services.analytics_service import analytics_service
from goevergreen.utils.validation import (
    MAX_MESSAGE_LENGTH,
    MAX_NAME_LENGTH,
    normalize_email,
    read_submission,
    sanitize_text,
    validate_email,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/contact", tags=["contact"])

@router.api_route("", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], response_model=SuccessResponse)
async def submit_contact(request: Request, background_tasks: BackgroundTasks):
    """Store a contact form submission"""
    if request.method != "POST":
        raise HTTPException(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail="Method not allowed"
        )

    data = await read_submission(request)
    name = data.get("name", "")
    email = data.get("email", "")
    message = data.get("message", "")

    if not name.strip() or not email.strip() or not message.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="All fields are required"
        )

    if not validate_email(email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Valid email required"
        )

    result = await contact_repository.save_contact_submission(
        name=sanitize_text(name, MAX_NAME_LENGTH),
        email=normalize_email(email),
        message=sanitize_text(message, MAX_MESSAGE_LENGTH)
    )
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit. Please try again."
        )

    background_tasks.add_task(analytics_service.track_conversion, "contact_submission")

    return SuccessResponse(message="Thank you for contacting us! We'll get back to you soon.")
