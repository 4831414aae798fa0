"""
Core module for the RASA NLU proxy application setup.
"""
from .app import create_app
from .dependencies import get_forwarder, get_upstream_config

__all__ = [
    "create_app",
    "get_forwarder",
    "get_upstream_config",
]
