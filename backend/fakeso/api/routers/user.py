# fakeso/api/routers/user.py
import datetime as dt
import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from fakeso.core.result import Err
from fakeso.schemas.user import SafeUser, UserCreate, UserCredentials, UserRequest, UserUpdate
from fakeso.services import user_service

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/user", tags=["user"])

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})

def is_user_body_valid(body: UserRequest) -> bool:
    return bool(body.username) and bool(body.password)

@router.post("/signup", response_model=SafeUser, status_code=status.HTTP_201_CREATED)
async def create_user(body: UserRequest):
    """
    Create a new user account.

    Returns:
        201 with the SafeUser (no password) on success
        400 if username/password are missing or the account cannot be stored
            (e.g. the username is taken)
        500 on unexpected errors
    """
    if not is_user_body_valid(body):
        return error_response(status.HTTP_400_BAD_REQUEST, "Username and password are required.")
    try:
        result = await user_service.save_user(UserCreate(
            username=body.username,
            password=body.password,
            dateJoined=dt.datetime.now(dt.timezone.utc),
        ))
    except Exception:
        logger.exception("[user] signup failed for %s", body.username)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error.")
    if isinstance(result, Err):
        return error_response(status.HTTP_400_BAD_REQUEST, result.error)
    return result.value

@router.post("/login", response_model=SafeUser)
async def user_login(body: UserRequest):
    """
    Check a user's credentials.

    Returns:
        200 with the SafeUser on success
        400 if username/password are missing
        401 if the user does not exist or the password is wrong
        500 on unexpected errors
    """
    if not is_user_body_valid(body):
        return error_response(status.HTTP_400_BAD_REQUEST, "Username and password are required.")
    try:
        result = await user_service.login_user(UserCredentials(username=body.username, password=body.password))
    except Exception:
        logger.exception("[user] login failed for %s", body.username)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error.")
    if isinstance(result, Err):
        return error_response(status.HTTP_401_UNAUTHORIZED, result.error)
    return result.value

@router.patch("/resetPassword", response_model=SafeUser)
async def reset_password(body: UserRequest):
    """
    Replace a user's password.

    Returns:
        200 with the updated SafeUser
        400 if username/password are missing
        404 if the user does not exist
        500 on unexpected errors
    """
    if not is_user_body_valid(body):
        return error_response(status.HTTP_400_BAD_REQUEST, "Username and new password are required.")
    try:
        result = await user_service.update_user(body.username, UserUpdate(password=body.password))
    except Exception:
        logger.exception("[user] password reset failed for %s", body.username)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error.")
    if isinstance(result, Err):
        return error_response(status.HTTP_404_NOT_FOUND, result.error)
    return result.value

@router.get("/{username}", response_model=SafeUser)
async def get_user(username: str):
    """Fetch a user by username: 200 SafeUser, 404 if absent, 500 on unexpected errors."""
    try:
        result = await user_service.get_user_by_username(username)
    except Exception:
        logger.exception("[user] lookup failed for %s", username)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error.")
    if isinstance(result, Err):
        return error_response(status.HTTP_404_NOT_FOUND, result.error)
    return result.value

@router.delete("/{username}", response_model=SafeUser)
async def delete_user(username: str):
    """Delete a user by username: 200 with the deleted SafeUser, 404 if absent, 500 on unexpected errors."""
    try:
        result = await user_service.delete_user_by_username(username)
    except Exception:
        logger.exception("[user] delete failed for %s", username)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error.")
    if isinstance(result, Err):
        return error_response(status.HTTP_404_NOT_FOUND, result.error)
    return result.value
