# goevergreen/routes/newsletter.py
from fastapi import APIRouter, BackgroundTasks, HTTPException, Request, status
import logging

from goevergreen.database.subscriber_repository import subscriber_repository
from goevergreen.models.api import SuccessResponse
from goevergreen.services.analytics_service import analytics_service
from goevergreen.utils.validation import (
    MAX_NAME_LENGTH,
    normalize_email,
    read_submission,
    sanitize_text,
    validate_email,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["newsletter"])

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

async def handle_subscription(request: Request, background_tasks: BackgroundTasks) -> SuccessResponse:
    """Validate and store a newsletter subscription from a JSON or form body"""
    data = await read_submission(request)
    email = data.get("email", "")

    if not validate_email(email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Valid email required"
        )

    email = normalize_email(email)
    name = sanitize_text(data.get("name"), MAX_NAME_LENGTH)

    result = await subscriber_repository.subscribe(email, name)
    if not result.success:
        logger.error(f"Newsletter subscription error for {email}: {result.error}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Subscription failed. Please try again."
        )

    background_tasks.add_task(analytics_service.track_conversion, "newsletter_signup")

    logger.info(f"Newsletter subscription created: {email}")
    return SuccessResponse(message="Successfully subscribed to our wellness newsletter!")

@router.api_route("/api/newsletter", methods=ALL_METHODS, response_model=SuccessResponse)
async def newsletter_api(request: Request, background_tasks: BackgroundTasks):
    if request.method != "POST":
        raise HTTPException(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail="Method not allowed"
        )
    return await handle_subscription(request, background_tasks)

@router.post("/newsletter/subscribe", response_model=SuccessResponse)
async def newsletter_form_post(request: Request, background_tasks: BackgroundTasks):
    """Form-post endpoint used by the page's newsletter form when scripts are unavailable"""
    return await handle_subscription(request, background_tasks)
