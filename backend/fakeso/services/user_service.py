# fakeso/services/user_service.py
"""
User service.

Wraps the User model. Every operation returns ``Ok(SafeUser)`` or
``Err(message)``; the password hash never leaves this module.
"""
import logging

from fakeso.core.result import Err, Ok, Result
from fakeso.core.security import hash_password, verify_password
from fakeso.models.user import User
from fakeso.schemas.user import SafeUser, UserCreate, UserCredentials, UserUpdate

logger = logging.getLogger("uvicorn.error")

async def save_user(user: UserCreate) -> Result[SafeUser]:
    """
    Store a new account.

    The password is hashed before it reaches the database. A duplicate
    username surfaces as the database's integrity error message.
    """
    try:
        created = await User.create(
            username=user.username,
            password_hash=hash_password(user.password),
            date_joined=user.dateJoined,
        )
        return Ok(SafeUser.from_model(created))
    except Exception as e:
        logger.warning("[user_service] save_user(%s) failed: %s", user.username, e)
        return Err(f"Error when saving user: {e}")

async def get_user_by_username(username: str) -> Result[SafeUser]:
    """Look up an account by its login name."""
    try:
        user = await User.get_or_none(username=username)
        if not user:
            return Err("User not found")
        return Ok(SafeUser.from_model(user))
    except Exception as e:
        logger.warning("[user_service] get_user_by_username(%s) failed: %s", username, e)
        return Err(f"Error when fetching user: {e}")

async def login_user(credentials: UserCredentials) -> Result[SafeUser]:
    """
    Check credentials against the stored hash.

    An unknown username and a wrong password produce different messages:
    "User not found." and "Invalid username or password." respectively.
    """
    try:
        user = await User.get_or_none(username=credentials.username)
        if not user:
            return Err("User not found.")
        if not verify_password(credentials.password, user.password_hash):
            return Err("Invalid username or password.")
        return Ok(SafeUser.from_model(user))
    except Exception as e:
        logger.warning("[user_service] login_user(%s) failed: %s", credentials.username, e)
        return Err(f"Error logging in user: {e}")

async def delete_user_by_username(username: str) -> Result[SafeUser]:
    """Remove an account and return what it looked like before deletion."""
    try:
        user = await User.get_or_none(username=username)
        if not user:
            return Err("User not found.")
        deleted = SafeUser.from_model(user)
        await user.delete()
        return Ok(deleted)
    except Exception as e:
        logger.warning("[user_service] delete_user_by_username(%s) failed: %s", username, e)
        return Err(f"Error deleting user: {e}")

async def update_user(username: str, updates: UserUpdate) -> Result[SafeUser]:
    """
    Apply a partial update to an account.

    Only fields explicitly set on ``updates`` are written; a new password is
    hashed first. Returns the account as it is after the update.
    """
    try:
        changes = {}
        fields_set = updates.model_dump(exclude_unset=True, exclude_none=True)
        if "username" in fields_set:
            changes["username"] = fields_set["username"]
        if "password" in fields_set:
            changes["password_hash"] = hash_password(fields_set["password"])
        if "dateJoined" in fields_set:
            changes["date_joined"] = fields_set["dateJoined"]

        user = await User.get_or_none(username=username)
        if not user:
            return Err("User not found.")
        if changes:
            user.update_from_dict(changes)
            await user.save(update_fields=list(changes))
        return Ok(SafeUser.from_model(user))
    except Exception as e:
        logger.warning("[user_service] update_user(%s) failed: %s", username, e)
        return Err(f"Error updating user: {e}")
