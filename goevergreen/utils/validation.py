# goevergreen/utils/validation.py
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status

MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 100
MAX_MESSAGE_LENGTH = 1000

def validate_email(email: Optional[str]) -> bool:
    """Loose check: an '@' somewhere and no longer than 255 characters"""
    if not email:
        return False
    return "@" in email and len(email) <= MAX_EMAIL_LENGTH

def normalize_email(email: str) -> str:
    return email.strip().lower()

def sanitize_text(text: Optional[str], max_length: int) -> str:
    """Trim and cap free text. Storage-size control only; escaping happens at render time."""
    if not text:
        return ""
    return text.strip()[:max_length]

async def read_submission(request: Request) -> Dict[str, str]:
    """Read a JSON or URL-encoded form body into a dict of string fields"""
    content_type = request.headers.get("Content-Type", "")

    if "application/json" in content_type:
        try:
            data: Any = await request.json()
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid request body"
            )
        if not isinstance(data, dict):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid request body"
            )
    else:
        data = await request.form()

    return {key: value for key, value in data.items() if isinstance(value, str)}
