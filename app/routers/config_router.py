"""
Proxy configuration router.
"""
from typing import Any
import logging

from fastapi import APIRouter, Depends

from app.core.dependencies import get_upstream_config
from app.schemas import ConfigResponse
from app.services.upstream_config import UpstreamConfig
from app.utils.request_body import read_payload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Config"])


@router.post("/config", response_model=ConfigResponse)
async def update_config(
    payload: Any = Depends(read_payload),
    upstream_config: UpstreamConfig = Depends(get_upstream_config)
):
    """
    Update the configuration of this proxy.

    A missing, empty or non-string `url` resets the upstream to its default.
    """
    logger.info(f"received config: {payload}")
    url = payload.get("url") if isinstance(payload, dict) else None
    upstream_config.set_base_url(url if isinstance(url, str) else None)
    return ConfigResponse(status="OK")
