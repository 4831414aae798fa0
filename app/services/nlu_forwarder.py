"""
NLU forwarding service.

Relays inbound training and parse payloads to the upstream RASA NLU
service and hands back its JSON response untouched.
"""
import logging
from typing import Any

import httpx

from app.services.upstream_config import UpstreamConfig
from app.utils.exceptions import UpstreamError

logger = logging.getLogger(__name__)

UPSTREAM_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# RASA's model name is the literal "workspaceId", not the path parameter.
TRAIN_PATH = "/train?name=workspaceId"
PARSE_PATH = "/parse"

TRAIN_ERROR_MESSAGE = "Error posting training data"
PARSE_ERROR_MESSAGE = "Error posting query"


def _reject_constant(token: str):
    raise ValueError(f"{token} is not valid JSON")


class NLUForwarder:
    """Single-shot forwarder to the upstream NLU service."""

    def __init__(self, config: UpstreamConfig, client: httpx.AsyncClient):
        self.config = config
        self.client = client

    async def forward_train(self, workspace_id: str, payload: Any) -> Any:
        """Post training data upstream."""
        logger.info(f"Training request for workspace {workspace_id}")
        return await self._forward(TRAIN_PATH, payload, TRAIN_ERROR_MESSAGE)

    async def forward_parse(self, payload: Any) -> Any:
        """Post an utterance upstream for parsing."""
        return await self._forward(PARSE_PATH, payload, PARSE_ERROR_MESSAGE)

    async def _forward(self, path: str, payload: Any, error_message: str) -> Any:
        """
        POST `payload` to the current base URL + `path`.

        The upstream body is returned whatever its status code, as long as it
        parses as JSON.

        Raises:
            UpstreamError: on transport failure or a non-JSON response.
        """
        logger.info(f"received body: {payload}")
        url = self.config.get_base_url() + path

        try:
            resp = await self.client.post(url, json=payload, headers=UPSTREAM_HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"{error_message}; POST {url} failed: {type(e).__name__}: {e}")
            raise UpstreamError(error_message, url=url) from e

        try:
            body = resp.json(parse_constant=_reject_constant)
        except ValueError as e:
            logger.error(
                f"{error_message}; POST {url} returned {resp.status_code} with non-JSON body: {e}"
            )
            raise UpstreamError(error_message, url=url) from e

        if resp.status_code >= 400:
            logger.warning(f"Upstream returned {resp.status_code} for POST {url}, relaying body")
        return body
