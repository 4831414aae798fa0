"""
Utilities module for the RASA NLU proxy.
"""
from .exceptions import (
    RasaProxyException,
    UpstreamError,
    ValidationError,
    PayloadTooLargeError
)
from .request_body import read_payload

__all__ = [
    "RasaProxyException",
    "UpstreamError",
    "ValidationError",
    "PayloadTooLargeError",
    "read_payload",
]
