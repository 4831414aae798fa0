"""
Dependency injection container for the proxy.
"""
from typing import Optional
import logging

import httpx

from app.config.settings import get_settings
from app.services.upstream_config import UpstreamConfig
from app.services.nlu_forwarder import NLUForwarder


logger = logging.getLogger(__name__)


class Container:
    """Owns the upstream config holder, the shared HTTP client and the forwarder."""

    def __init__(self):
        self.settings = get_settings()
        self.upstream_config = UpstreamConfig(self.settings.rasa_server_url)

        self.http_client: Optional[httpx.AsyncClient] = None
        self.forwarder: Optional[NLUForwarder] = None

    async def initialize(self) -> None:
        """Open the upstream client (called at startup)."""
        logger.info("Initializing dependency container...")
        # No explicit timeout: the upstream may take minutes to train a model.
        self.http_client = httpx.AsyncClient(timeout=None)
        self.forwarder = NLUForwarder(self.upstream_config, self.http_client)
        logger.info(f"Forwarding to {self.upstream_config.get_base_url()}")

    async def shutdown(self) -> None:
        """Cleanup on shutdown."""
        logger.info("Shutting down dependency container...")
        if self.http_client is not None:
            await self.http_client.aclose()
            self.http_client = None
        self.forwarder = None
        logger.info("Dependency container shutdown complete")


# Global container instance
container = Container()


# Dependency functions for FastAPI
def get_container() -> Container:
    """Get the DI container."""
    return container


def get_upstream_config() -> UpstreamConfig:
    """Dependency for the upstream base URL holder."""
    return container.upstream_config


def get_forwarder() -> NLUForwarder:
    """Dependency for the NLU forwarder."""
    return container.forwarder
