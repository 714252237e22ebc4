# fakeso/client/user_client.py
import httpx

from fakeso.schemas.user import SafeUser
from .config import ApiError, send

USER_API_URL = "/user"

async def signup(username: str, password: str, api: httpx.AsyncClient | None = None) -> SafeUser:
    """Create an account. Raises ApiError unless the server answers 200/201."""
    res = await send(api, "POST", f"{USER_API_URL}/signup", json={"username": username, "password": password})
    if res.status_code not in (200, 201):
        raise ApiError("Error while creating a new user", res.status_code)
    return SafeUser.model_validate(res.json())

async def login(username: str, password: str, api: httpx.AsyncClient | None = None) -> SafeUser:
    """Check credentials. Raises ApiError unless the server answers 200."""
    res = await send(api, "POST", f"{USER_API_URL}/login", json={"username": username, "password": password})
    if res.status_code != 200:
        raise ApiError("Error while logging in", res.status_code)
    return SafeUser.model_validate(res.json())

async def get_user(username: str, api: httpx.AsyncClient | None = None) -> SafeUser:
    res = await send(api, "GET", f"{USER_API_URL}/{username}")
    if res.status_code != 200:
        raise ApiError("Error when fetching user", res.status_code)
    return SafeUser.model_validate(res.json())

async def delete_user(username: str, api: httpx.AsyncClient | None = None) -> SafeUser:
    res = await send(api, "DELETE", f"{USER_API_URL}/{username}")
    if res.status_code != 200:
        raise ApiError("Error when deleting user", res.status_code)
    return SafeUser.model_validate(res.json())

async def reset_password(username: str, new_password: str, api: httpx.AsyncClient | None = None) -> SafeUser:
    res = await send(api, "PATCH", f"{USER_API_URL}/resetPassword", json={"username": username, "password": new_password})
    if res.status_code != 200:
        raise ApiError("Error when resetting password", res.status_code)
    return SafeUser.model_validate(res.json())
