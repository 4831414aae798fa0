"""
Custom exceptions for the RASA NLU proxy.
"""


class RasaProxyException(Exception):
    """Base exception for the RASA NLU proxy."""
    pass


class UpstreamError(RasaProxyException):
    """Raised when a request to the upstream NLU service fails."""
    def __init__(self, message: str, url: str = ""):
        self.message = message
        self.url = url
        super().__init__(message)


class ValidationError(RasaProxyException):
    """Raised for malformed inbound bodies."""
    pass


class PayloadTooLargeError(RasaProxyException):
    """Raised when an inbound body exceeds the configured ceiling."""
    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Request body too large: {size} bytes (limit {limit})")
