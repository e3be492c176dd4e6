# app/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Fields are optional at the parsing level so that missing values are reported
by the auth service together with every other field violation.
"""
from pydantic import BaseModel

class CredentialsIn(BaseModel):
    """
    Request body for register and login.
    """
    name: str | None = None  # Login name, 3-30 characters
    password: str | None = None  # Plain text password, at least 6 characters

class UserOut(BaseModel):
    """
    User information returned by /auth/me (never includes the password hash).
    """
    id: str
    name: str

class MessageOut(BaseModel):
    message: str
