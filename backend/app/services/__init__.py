"""
Services Module

Business operations behind the HTTP routers:
- AuthService: registration, login and session lookup over the user store
- PotionService: CRUD and analytics over the potion store
"""

from .auth_service import AuthService, validate_credentials
from .potion_service import PotionService, validate_potion

__all__ = [
    "AuthService",
    "validate_credentials",
    "PotionService",
    "validate_potion",
]
