"""
Shared response models.
"""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    timestamp: datetime


class ErrorResponse(BaseModel):
    detail: str
