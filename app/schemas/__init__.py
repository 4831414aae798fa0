"""
Schemas module for the RASA NLU proxy.
"""
from .common import Config, ConfigResponse, ErrorResponse
from .nlu import (
    Entity,
    Example,
    DataContainer,
    Payload,
    Message,
    Intent,
    ParseResponse
)

__all__ = [
    # Common
    "Config",
    "ConfigResponse",
    "ErrorResponse",
    # NLU
    "Entity",
    "Example",
    "DataContainer",
    "Payload",
    "Message",
    "Intent",
    "ParseResponse",
]
