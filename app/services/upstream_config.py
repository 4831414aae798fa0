"""
Holder for the upstream base URL.

The URL starts out as the environment default and may be replaced at
runtime through the config endpoint. Nothing is persisted: a restart
reverts to the default.
"""
import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)


class UpstreamConfig:
    """Thread-safe container for the current upstream base URL."""

    def __init__(self, default_url: str):
        self._default_url = default_url
        self._base_url = default_url
        self._lock = threading.Lock()

    @property
    def default_url(self) -> str:
        return self._default_url

    def get_base_url(self) -> str:
        """Return the base URL currently in effect."""
        with self._lock:
            return self._base_url

    def set_base_url(self, new_url: Optional[str] = None) -> str:
        """
        Replace the base URL, or reset it to the default when `new_url` is empty.

        Returns:
            The base URL now in effect.
        """
        with self._lock:
            self._base_url = new_url or self._default_url
            current = self._base_url
        logger.debug(f"Upstream base URL set to {current}")
        return current
