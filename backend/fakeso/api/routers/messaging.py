# fakeso/api/routers/messaging.py
import logging
from typing import List

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from fakeso.core.pubsub import Channel
from fakeso.core.result import Err
from fakeso.schemas.message import AddMessageRequest, MessageOut
from fakeso.services import message_service

logger = logging.getLogger("uvicorn.error")

def is_request_valid(body: AddMessageRequest) -> bool:
    """True when messageToAdd is present with non-empty msg, msgFrom and msgDateTime."""
    m = body.messageToAdd
    return bool(m and m.msg and m.msgFrom and m.msgDateTime)

def build_router(channel: Channel) -> APIRouter:
    """
    Build the /messaging router.

    Args:
        channel: Channel that receives a "messageUpdate" event for every stored message
    """
    router = APIRouter(prefix="/messaging", tags=["messaging"])

    @router.post("/addMessage", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
    async def add_message(body: AddMessageRequest):
        """
        Store a message and notify connected clients.

        The "messageUpdate" event is emitted after the write succeeds and
        before the response is returned.

        Returns:
            201 with the stored message
            400 if any of msg, msgFrom, msgDateTime is missing or empty
            500 if the message could not be stored (body carries the storage error)
        """
        if not is_request_valid(body):
            return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid message body"})
        try:
            result = await message_service.save_message(body.messageToAdd)
            if isinstance(result, Err):
                return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": result.error})
            saved = result.value
            await channel.emit("messageUpdate", {"msg": saved.model_dump(mode="json", by_alias=True)})
            return saved
        except Exception:
            logger.exception("[messaging] addMessage failed")
            return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Failed to save message"})

    @router.get("/getMessages", response_model=List[MessageOut])
    async def get_messages():
        """All messages ordered oldest first."""
        try:
            return await message_service.get_messages()
        except Exception:
            logger.exception("[messaging] getMessages failed")
            return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Failed to fetch messages"})

    return router
