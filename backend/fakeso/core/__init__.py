# fakeso/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- pubsub: WebSocket push notification channel
- result: Ok / Err values returned by the service layer
- security: Password hashing and verification
"""
