"""
Routers module for the RASA NLU proxy.
"""
from . import config_router
from . import nlu_router

__all__ = [
    "config_router",
    "nlu_router",
]
