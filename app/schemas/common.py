"""
Common schemas used across the application.
"""
from pydantic import BaseModel
from typing import Optional


class Config(BaseModel):
    """Proxy configuration update."""
    url: Optional[str] = None


class ConfigResponse(BaseModel):
    status: str = "OK"


class ErrorResponse(BaseModel):
    """Envelope returned when forwarding fails."""
    status: int
    message: str
