# app/services/auth_service.py
"""
Registration, login and session lookup.

Security properties kept deliberately:
- a duplicate name and any other failed write are reported identically;
- an unknown name and a wrong password are reported identically, and both
  paths run one password verification.
"""
import logging

import jwt
from fastapi.concurrency import run_in_threadpool
from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.exceptions import BaseORMException, IntegrityError

from app.core.errors import (
    AuthenticationError,
    ConflictError,
    FieldIssue,
    InternalError,
    ValidationError,
)
from app.core.security import (
    create_access_token,
    decode_access_token,
    clean_input,
    dummy_verify,
    escape_password,
    hash_password,
    verify_password,
)
from app.models.user import User

logger = logging.getLogger("uvicorn.error")

NAME_MIN, NAME_MAX = 3, 30
PASSWORD_MIN = 6


def validate_credentials(name: str | None, password: str | None) -> tuple[str, str]:
    """
    Clean and check register/login input.

    Lengths are checked on the trimmed value without control characters.
    Returns (name, password): the name as stored, the password escaped and
    ready for hashing. Raises ValidationError listing at most one issue per
    field, with every failing field included.
    """
    issues: list[FieldIssue] = []

    name = clean_input(name or "")
    if not name:
        issues.append(FieldIssue("name", "Name is required."))
    elif not NAME_MIN <= len(name) <= NAME_MAX:
        issues.append(FieldIssue("name", f"Must be between {NAME_MIN} and {NAME_MAX} characters."))

    password = clean_input(password or "")
    if not password:
        issues.append(FieldIssue("password", "Password is required."))
    elif len(password) < PASSWORD_MIN:
        issues.append(FieldIssue("password", f"Minimum {PASSWORD_MIN} characters."))

    if issues:
        raise ValidationError(issues)
    return name, escape_password(password)


class AuthService:
    """Auth workflows over the credential store reached through `db`."""

    def __init__(self, db: BaseDBAsyncClient):
        self.db = db

    async def register(self, name: str | None, password: str | None) -> User:
        name, password = validate_credentials(name, password)
        # argon2 is deliberately slow; keep it off the event loop
        password_hash = await run_in_threadpool(hash_password, password)
        try:
            user = await User.create(name=name, password_hash=password_hash, using_db=self.db)
        except IntegrityError as exc:
            logger.info("[auth] registration rejected for an existing name")
            raise ConflictError() from exc
        except BaseORMException as exc:
            logger.exception("[auth] registration failed")
            raise InternalError() from exc
        logger.info("[auth] registered user id=%s", user.id)
        return user

    async def login(self, name: str | None, password: str | None) -> str:
        """Check credentials and return a freshly signed session token."""
        name, password = validate_credentials(name, password)
        user = await User.filter(name=name).using_db(self.db).first()
        if user is None:
            await run_in_threadpool(dummy_verify)
            ok = False
        else:
            ok = await run_in_threadpool(verify_password, password, user.password_hash)
        if not ok:
            logger.warning("[auth] failed login attempt")
            raise AuthenticationError()
        return create_access_token(str(user.id), user.name)

    async def current_user(self, token: str | None) -> User:
        """Resolve a session token to its user, or raise AuthenticationError."""
        if not token:
            raise AuthenticationError("Authentication required")
        try:
            payload = decode_access_token(token)
        except jwt.InvalidTokenError as exc:
            raise AuthenticationError("Invalid or expired session") from exc
        user = await User.filter(id=payload.get("sub")).using_db(self.db).first()
        if user is None:
            raise AuthenticationError("Invalid or expired session")
        return user
