# fakeso/schemas/message.py
"""
Pydantic schemas for the messaging endpoints.
"""
import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import as_utc

__all__ = ["MessageIn", "AddMessageRequest", "MessageOut"]

class MessageIn(BaseModel):
    """
    Message as posted by a client.
    Fields are optional so the route can answer missing ones with a 400.
    """
    msg: Optional[str] = None  # Message text
    msgFrom: Optional[str] = None  # Username of the sender
    msgDateTime: Optional[dt.datetime] = None  # When the message was written

    @field_validator("msgDateTime", mode="before")
    @classmethod
    def empty_msg_date_time_is_missing(cls, value):
        # An empty string is a missing field, not an unparseable one
        return None if value == "" else value

    @field_validator("msgDateTime")
    @classmethod
    def normalize_msg_date_time(cls, value):
        return as_utc(value)

class AddMessageRequest(BaseModel):
    """Request body of POST /messaging/addMessage."""
    messageToAdd: Optional[MessageIn] = None

    @field_validator("messageToAdd", mode="before")
    @classmethod
    def non_object_message_is_missing(cls, value):
        # Left to the route's presence check so it answers "Invalid message body"
        if isinstance(value, (dict, MessageIn)):
            return value
        return None

class MessageOut(BaseModel):
    """Stored message as returned to clients and pushed over the WebSocket."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    msg: str
    msgFrom: str
    msgDateTime: dt.datetime

    @classmethod
    def from_model(cls, message) -> "MessageOut":
        """Build the response object from a fakeso.models.Message row."""
        return cls(
            _id=str(message.id),
            msg=message.msg,
            msgFrom=message.msg_from,
            msgDateTime=as_utc(message.msg_date_time),
        )
