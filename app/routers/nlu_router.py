"""
NLU forwarding router.

Thin router that hands inbound payloads to the NLUForwarder and relays
whatever JSON the upstream returns with status 200.
"""
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.dependencies import get_forwarder
from app.schemas import ErrorResponse
from app.services.nlu_forwarder import NLUForwarder
from app.utils.request_body import read_payload

router = APIRouter(tags=["NLU"])

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


@router.post("/train/{workspace_id}", responses=_ERROR_RESPONSES)
async def train(
    workspace_id: str,
    payload: Any = Depends(read_payload),
    forwarder: NLUForwarder = Depends(get_forwarder)
):
    """Deploy training examples to RASA."""
    result = await forwarder.forward_train(workspace_id, payload)
    return JSONResponse(content=result)


@router.post("/parse", responses=_ERROR_RESPONSES)
async def parse(
    payload: Any = Depends(read_payload),
    forwarder: NLUForwarder = Depends(get_forwarder)
):
    """Send a message to RASA."""
    result = await forwarder.forward_parse(payload)
    return JSONResponse(content=result)
