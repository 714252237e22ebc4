# fakeso/services/message_service.py
"""
Message service.

``save_message`` follows the Ok/Err convention. ``get_messages`` never
fails: a storage error is logged and an empty list is returned, so the chat
view renders empty rather than erroring.
"""
import logging
from typing import List

from fakeso.core.result import Err, Ok, Result
from fakeso.models.message import Message
from fakeso.schemas.message import MessageIn, MessageOut

logger = logging.getLogger("uvicorn.error")

async def save_message(message: MessageIn) -> Result[MessageOut]:
    """Store a message and return it with its assigned id."""
    try:
        saved = await Message.create(
            msg=message.msg,
            msg_from=message.msgFrom,
            msg_date_time=message.msgDateTime,
        )
        return Ok(MessageOut.from_model(saved))
    except Exception as e:
        logger.warning("[message_service] save_message from %s failed: %r", message.msgFrom, e)
        return Err(str(e) or "Failed to save message")

async def get_messages() -> List[MessageOut]:
    """All messages, oldest first; equal timestamps keep insertion order."""
    try:
        rows = await Message.all().order_by("msg_date_time", "id")
        return [MessageOut.from_model(m) for m in rows]
    except Exception:
        logger.exception("[message_service] get_messages failed, returning empty list")
        return []
