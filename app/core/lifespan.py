"""
Application lifespan management.

Handles startup and shutdown events.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
import logging

from .dependencies import container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Opens the upstream client at startup and closes it at shutdown."""
    logger.info("Starting RASA NLU proxy...")
    await container.initialize()
    logger.info(f"RASA proxy server running on port: {container.settings.port}")

    yield

    logger.info("Shutting down RASA NLU proxy...")
    await container.shutdown()
    logger.info("RASA NLU proxy shutdown complete")
