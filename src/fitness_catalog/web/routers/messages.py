"""Message pattern endpoint."""

from typing import Any

from fastapi import APIRouter, Body, Request

from ...messaging import MessageRouter

router = APIRouter(prefix="/messages", tags=["messages"])


def get_message_router(request: Request) -> MessageRouter:
    """Get the message router from app state."""
    return request.app.state.message_router


@router.get("")
async def list_patterns(request: Request):
    """List the registered message patterns."""
    return {"patterns": get_message_router(request).patterns}


@router.post("/{pattern}")
async def send_message(request: Request, pattern: str, payload: Any = Body(default=None)):
    """Dispatch a payload to the handler registered for pattern."""
    return await get_message_router(request).dispatch(pattern, payload)
