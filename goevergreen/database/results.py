# goevergreen/database/results.py
from typing import Any, Optional
from pydantic import BaseModel

class StoreResult(BaseModel):
    """Outcome of a write against the store; repositories return this instead of raising"""
    success: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None) -> "StoreResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: str) -> "StoreResult":
        return cls(success=False, error=error)
