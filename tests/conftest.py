"""
Shared fixtures.

Environment is set before the application package is imported, since the
dependency container reads settings at import time.
"""
import os
import tempfile

os.environ.setdefault("RASA_SERVER_URL", "http://rasa.test:5000")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="rasa_proxy_logs_"))
os.environ.setdefault("LOG_JSON", "false")

import pytest
from fastapi.testclient import TestClient

from app.core import create_app
from app.core.dependencies import container

DEFAULT_URL = os.environ["RASA_SERVER_URL"]


@pytest.fixture
def app():
    """Fresh application; the upstream URL is reset after each test."""
    application = create_app()
    yield application
    container.upstream_config.set_base_url(None)


@pytest.fixture
def client(app):
    """Test client with the lifespan (shared upstream client) running."""
    with TestClient(app) as test_client:
        yield test_client
