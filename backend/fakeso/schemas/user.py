# fakeso/schemas/user.py
"""
Pydantic schemas for user endpoints and the user service.
Only SafeUser is ever returned to callers; it has no password field.
"""
import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import as_utc

__all__ = ["UserRequest", "UserCredentials", "UserCreate", "UserUpdate", "SafeUser"]

class UserRequest(BaseModel):
    """
    Request body for signup, login and password reset.
    Both fields are optional here so that missing values become a 400, not a 422.
    """
    username: Optional[str] = None
    password: Optional[str] = None

class UserCredentials(BaseModel):
    """Credentials checked by the login service."""
    username: str
    password: str  # Plain text as typed by the user, only compared against the stored hash

class UserCreate(BaseModel):
    """A new account as handed to the user service."""
    username: str
    password: str  # Plain text, hashed by the service before storage
    dateJoined: dt.datetime

    @field_validator("dateJoined")
    @classmethod
    def normalize_date_joined(cls, value):
        return as_utc(value)

class UserUpdate(BaseModel):
    """
    Partial update applied by the user service.
    Only fields that were explicitly set are written.
    """
    username: Optional[str] = None
    password: Optional[str] = None  # Re-hashed before storage
    dateJoined: Optional[dt.datetime] = None

    @field_validator("dateJoined")
    @classmethod
    def normalize_date_joined(cls, value):
        return as_utc(value)

class SafeUser(BaseModel):
    """
    Password-free projection of a stored user.
    Serialized as {"_id", "username", "dateJoined"}.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")  # User unique identifier
    username: str  # User login name
    dateJoined: dt.datetime  # Account creation timestamp (UTC)

    @classmethod
    def from_model(cls, user) -> "SafeUser":
        """Build the projection from a fakeso.models.User row."""
        return cls(_id=str(user.id), username=user.username, dateJoined=as_utc(user.date_joined))
