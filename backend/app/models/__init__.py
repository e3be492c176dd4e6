# app/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: User account and authentication model
- Potion: Potion catalog entry
"""
from .user import User
from .potion import Potion
