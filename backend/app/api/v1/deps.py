from fastapi import Depends, Header, Request
from tortoise.backends.base.client import BaseDBAsyncClient

from app.config import settings
from app.models.user import User
from app.services.auth_service import AuthService
from app.services.potion_service import PotionService

def get_db(request: Request) -> BaseDBAsyncClient:
    """
    FastAPI dependency returning the process-wide database connection.

    The connection is opened once at startup and stored on `app.state.db`;
    every service receives it from here.
    """
    return request.app.state.db

def get_auth_service(db: BaseDBAsyncClient = Depends(get_db)) -> AuthService:
    return AuthService(db)

def get_potion_service(db: BaseDBAsyncClient = Depends(get_db)) -> PotionService:
    return PotionService(db)

async def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
    auth: AuthService = Depends(get_auth_service),
) -> User:
    """
    FastAPI dependency to get the current authenticated user.

    The session token is read from:
    1. Authorization header (Bearer token)
    2. The HttpOnly session cookie (fallback)

    Raises:
        AuthenticationError (401): If no token is provided, the token is
            invalid or expired, or its user no longer exists
    """
    token = None
    # 1) Prioritize Authorization: Bearer xxx
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    # 2) Secondly HttpOnly session cookie
    if not token:
        token = request.cookies.get(settings.session_cookie_name)
    return await auth.current_user(token)
