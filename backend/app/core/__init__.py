# app/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- errors: Error taxonomy and its mapping to HTTP responses
- security: Password hashing, session tokens and input sanitization
"""
