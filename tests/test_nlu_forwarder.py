"""
Tests for NLUForwarder against a mocked upstream.
"""
import json

import httpx
import pytest
import respx

from app.services.nlu_forwarder import (
    NLUForwarder,
    PARSE_ERROR_MESSAGE,
    TRAIN_ERROR_MESSAGE,
)
from app.services.upstream_config import UpstreamConfig
from app.utils.exceptions import UpstreamError

BASE_URL = "http://rasa.local:5000"

TRAINING_PAYLOAD = {
    "rasa_nlu_data": {
        "common_examples": [
            {"text": "hello", "intent": "greet", "entities": []},
        ]
    }
}


@pytest.fixture
async def forwarder():
    async with httpx.AsyncClient() as client:
        yield NLUForwarder(UpstreamConfig(BASE_URL), client)


@pytest.mark.asyncio
@respx.mock
async def test_parse_relays_upstream_json(forwarder):
    upstream = {"text": "hi", "entities": [], "intent": {"name": "greet", "confidence": 0.9}}
    route = respx.post(f"{BASE_URL}/parse").mock(return_value=httpx.Response(200, json=upstream))

    result = await forwarder.forward_parse({"q": "hi"})

    assert result == upstream
    assert route.call_count == 1
    sent = route.calls.last.request
    assert json.loads(sent.content) == {"q": "hi"}
    assert sent.headers["content-type"] == "application/json"
    assert sent.headers["accept"] == "application/json"


@pytest.mark.asyncio
@respx.mock
async def test_train_uses_literal_model_name(forwarder):
    route = respx.post(f"{BASE_URL}/train").mock(return_value=httpx.Response(200, json={"info": "ok"}))

    result = await forwarder.forward_train("my-workspace", TRAINING_PAYLOAD)

    assert result == {"info": "ok"}
    sent = route.calls.last.request
    assert sent.url.params["name"] == "workspaceId"
    assert "my-workspace" not in str(sent.url)
    assert json.loads(sent.content) == TRAINING_PAYLOAD


@pytest.mark.asyncio
@respx.mock
async def test_upstream_error_status_is_relayed_when_body_is_json(forwarder):
    respx.post(f"{BASE_URL}/parse").mock(return_value=httpx.Response(404, json={"error": "no model"}))

    assert await forwarder.forward_parse({"q": "hi"}) == {"error": "no model"}


@pytest.mark.asyncio
@respx.mock
async def test_non_json_response_raises(forwarder):
    respx.post(f"{BASE_URL}/parse").mock(return_value=httpx.Response(502, text="<html>bad gateway</html>"))

    with pytest.raises(UpstreamError) as exc_info:
        await forwarder.forward_parse({"q": "hi"})
    assert exc_info.value.message == PARSE_ERROR_MESSAGE
    assert exc_info.value.url == f"{BASE_URL}/parse"


@pytest.mark.asyncio
@respx.mock
async def test_non_standard_json_constant_raises(forwarder):
    respx.post(f"{BASE_URL}/parse").mock(
        return_value=httpx.Response(
            200, content=b'{"confidence": Infinity}', headers={"Content-Type": "application/json"}
        )
    )

    with pytest.raises(UpstreamError) as exc_info:
        await forwarder.forward_parse({"q": "hi"})
    assert exc_info.value.message == PARSE_ERROR_MESSAGE


@pytest.mark.asyncio
@respx.mock
async def test_transport_failure_raises(forwarder):
    respx.post(f"{BASE_URL}/train").mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(UpstreamError) as exc_info:
        await forwarder.forward_train("ws", TRAINING_PAYLOAD)
    assert exc_info.value.message == TRAIN_ERROR_MESSAGE


@pytest.mark.asyncio
@respx.mock
async def test_timeout_raises(forwarder):
    respx.post(f"{BASE_URL}/parse").mock(side_effect=httpx.ReadTimeout("timed out"))

    with pytest.raises(UpstreamError):
        await forwarder.forward_parse({"q": "hi"})


@pytest.mark.asyncio
async def test_malformed_base_url_raises(forwarder):
    forwarder.config.set_base_url("not a url")

    with pytest.raises(UpstreamError) as exc_info:
        await forwarder.forward_parse({"q": "hi"})
    assert exc_info.value.message == PARSE_ERROR_MESSAGE


@pytest.mark.asyncio
@respx.mock
async def test_reads_current_base_url_per_call(forwarder):
    first = respx.post(f"{BASE_URL}/parse").mock(return_value=httpx.Response(200, json={"n": 1}))
    second = respx.post("http://other:5005/parse").mock(return_value=httpx.Response(200, json={"n": 2}))

    assert await forwarder.forward_parse({"q": "a"}) == {"n": 1}
    forwarder.config.set_base_url("http://other:5005")
    assert await forwarder.forward_parse({"q": "b"}) == {"n": 2}

    assert first.call_count == 1
    assert second.call_count == 1
