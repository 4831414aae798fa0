"""
Inbound body parsing.

Mirrors a body-parser setup: JSON and URL-encoded bodies are accepted up
to a size ceiling, anything else is read as an empty object.
"""
import json
from typing import Any, AsyncIterator, Dict

from fastapi import Depends, Request
from starlette.formparsers import FormParser

from app.config.settings import Settings, get_settings
from app.utils.exceptions import PayloadTooLargeError, ValidationError

JSON_TYPE = "application/json"
FORM_TYPE = "application/x-www-form-urlencoded"


def _media_type(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower()


def _form_to_dict(form) -> Dict[str, Any]:
    """Collapse form items into a dict; repeated keys become lists."""
    data: Dict[str, Any] = {}
    for key, value in form.multi_items():
        if key in data:
            if not isinstance(data[key], list):
                data[key] = [data[key]]
            data[key].append(value)
        else:
            data[key] = value
    return data


def _reject_constant(token: str):
    raise ValidationError(f"Malformed JSON body: {token} is not valid JSON")


async def _single_chunk(body: bytes) -> AsyncIterator[bytes]:
    yield body


async def _read_limited(request: Request, limit: int) -> bytes:
    """Read the body chunk by chunk, stopping as soon as it exceeds `limit`."""
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLargeError(len(body), limit)
    return bytes(body)


async def read_payload(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Any:
    """
    FastAPI dependency returning the parsed inbound body.

    Raises:
        PayloadTooLargeError: body exceeds `settings.max_body_size`.
        ValidationError: malformed JSON, or JSON that is not an object or array.
    """
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > settings.max_body_size:
        raise PayloadTooLargeError(int(declared), settings.max_body_size)

    body = await _read_limited(request, settings.max_body_size)

    media_type = _media_type(request)
    if not body:
        return {}

    if media_type == JSON_TYPE or media_type.endswith("+json"):
        try:
            payload = json.loads(body, parse_constant=_reject_constant)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValidationError(f"Malformed JSON body: {e}") from e
        if not isinstance(payload, (dict, list)):
            raise ValidationError("JSON body must be an object or an array")
        return payload

    if media_type == FORM_TYPE:
        form = await FormParser(request.headers, _single_chunk(body)).parse()
        return _form_to_dict(form)

    return {}
