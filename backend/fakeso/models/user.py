# fakeso/models/user.py
"""
Database model for users.
Represents a user account: login name, credential hash and join date.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - The hash never leaves the service layer; callers receive a SafeUser
    - Username must be unique across all users
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    username = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # User login name (must be unique, indexed for fast lookups)
    password_hash = fields.CharField(max_length=255)  # Argon2 hash of the password
    date_joined = fields.DatetimeField()  # When the account was created (set by the signup route)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
