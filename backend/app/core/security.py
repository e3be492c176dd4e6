# app/core/security.py
"""
Security module for authentication.
Handles password hashing, session token creation/validation, and input sanitization.
"""
import datetime as dt
import html
import unicodedata

import jwt  # PyJWT
from passlib.context import CryptContext

from app.config import settings

# Password hashing context
# Argon2 is a salted, memory-hard password hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

# JWT configuration
JWT_SECRET = settings.jwt_secret  # Secret key for JWT signing (use strong secret in production)
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes  # Token lifetime, 24h by default
JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)

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

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain, hashed)

def dummy_verify() -> None:
    """
    Spend the time of a real verification without a stored hash.

    Called when the login name is unknown so that "no such user" and
    "wrong password" take comparable time.
    """
    pwd_context.dummy_verify()

def clean_input(value: str) -> str:
    """
    Trim surrounding whitespace and drop control characters.

    Length rules are checked on the cleaned value.
    """
    value = value.strip()
    return "".join(ch for ch in value if unicodedata.category(ch) != "Cc")

def escape_password(value: str) -> str:
    """
    Escape HTML-special characters in an already validated password.

    Applied identically on register and login so the stored hash and the
    login attempt see the same string.
    """
    return html.escape(value, quote=True)

def create_access_token(user_id: str, name: str) -> str:
    """
    Create a signed session token for an authenticated user.

    Args:
        user_id: Unique user identifier (UUID string)
        name: User name, carried so clients need no extra lookup

    Returns:
        Encoded JWT token string

    Token payload includes:
        - sub: Subject (user ID)
        - name: User name
        - iat: Issued at timestamp
        - exp: Expiration timestamp
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": user_id,
        "name": name,
        "iat": now,
        "exp": now + dt.timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)

def decode_access_token(token: str) -> dict:
    """
    Decode and validate a session token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALG])
