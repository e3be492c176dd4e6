# app/models/user.py
"""
Database model for users.
Represents a registered account: a unique name and the hash of its password.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as an argon2 hash (never store plain text passwords)
    - Name must be unique across all users; the unique index makes a
      duplicate registration fail atomically in the store
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    name = fields.CharField(
        max_length=30,
        unique=True,
        index=True
    )  # Login name (must be unique, indexed for fast lookups)
    password_hash = fields.CharField(max_length=255)  # Hashed password, never plain text
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
