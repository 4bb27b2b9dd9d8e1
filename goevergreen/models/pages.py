# goevergreen/models/pages.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

class PageContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str
    title: str
    description: str
    route: str = "home"
    from_fallback: bool = False

class PageVisit(BaseModel):
    """Request facts captured before the response is sent, for background recording"""
    path: str
    client_address: str = "unknown"
    user_agent: str = ""
    country: str = "Unknown"
    referrer: str = ""
    timestamp: datetime
    session_id: Optional[str] = None
