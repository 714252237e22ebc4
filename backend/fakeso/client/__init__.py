# fakeso/client/__init__.py
"""
HTTP client for the FakeSO API.

Thin async wrappers issuing one request each. A non-expected status raises
ApiError; there is no retry, caching or batching.
"""
from .config import ApiError, create_api
from .message_client import add_message, get_messages
from .user_client import delete_user, get_user, login, reset_password, signup
