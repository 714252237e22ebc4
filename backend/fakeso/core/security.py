# fakeso/core/security.py
"""
Security module for credential handling.
Passwords are only ever stored as salted one-way hashes and verified against them.
"""
from passlib.context import CryptContext

# Password hashing context
# Argon2 is a modern, salted, memory-hard password hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain: Plain text password to verify
        hashed: Hashed password from database

    Returns:
        True if password matches, False otherwise (including unreadable hashes)
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        # Stored value is not a hash this context recognises
        return False
