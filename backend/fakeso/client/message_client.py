# fakeso/client/message_client.py
from typing import List

import httpx

from fakeso.schemas.message import MessageIn, MessageOut
from .config import ApiError, send

MESSAGE_API_URL = "/messaging"

async def add_message(message_to_add: MessageIn, api: httpx.AsyncClient | None = None) -> MessageOut:
    """
    Add a new message to the chat.

    Raises:
        ApiError: if the response status is not 200 or 201
    """
    body = {"messageToAdd": message_to_add.model_dump(mode="json", exclude_none=True)}
    res = await send(api, "POST", f"{MESSAGE_API_URL}/addMessage", json=body)
    if res.status_code not in (200, 201):
        raise ApiError("Error while adding a new message to a chat", res.status_code)
    return MessageOut.model_validate(res.json())

async def get_messages(api: httpx.AsyncClient | None = None) -> List[MessageOut]:
    """
    Fetch all messages, oldest first.

    Raises:
        ApiError: if the response status is not 200
    """
    res = await send(api, "GET", f"{MESSAGE_API_URL}/getMessages")
    if res.status_code != 200:
        raise ApiError("Error when fetching list of messages", res.status_code)
    return [MessageOut.model_validate(m) for m in res.json()]
