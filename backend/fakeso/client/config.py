# fakeso/client/config.py
import httpx

from fakeso.config import settings

class ApiError(Exception):
    """Raised when the server answers with a status the call does not expect."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

def create_api(base_url: str | None = None, **kwargs) -> httpx.AsyncClient:
    """AsyncClient pointed at the configured server (SERVER_URL)."""
    return httpx.AsyncClient(base_url=base_url or settings.server_url, **kwargs)

async def send(api: httpx.AsyncClient | None, method: str, url: str, **kwargs) -> httpx.Response:
    """
    Issue one request, either on the given client or on a short-lived one.
    """
    if api is not None:
        return await api.request(method, url, **kwargs)
    async with create_api() as own:
        return await own.request(method, url, **kwargs)
