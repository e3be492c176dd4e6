# app/api/v1/routers/auth.py
from fastapi import APIRouter, Depends, Response, status
from app.api.v1.deps import get_auth_service, get_current_user
from app.config import settings
from app.models.user import User
from app.schemas.auth import CredentialsIn, MessageOut, UserOut
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=MessageOut)
async def register(body: CredentialsIn, auth: AuthService = Depends(get_auth_service)):
    """
    Register a new user account.

    The name must be 3-30 characters and unique; the password at least 6
    characters after trimming. The password is hashed before storage.

    Returns:
        201 {"message": ...}

    Errors:
        400 {"error", "errors": [{param, msg, location}]}: every invalid field
        500 {"error": "System error"}: store failure, including a taken name
            (not distinguished, so names cannot be probed)
    """
    await auth.register(body.name, body.password)
    return {"message": "User created"}

@router.post("/login", response_model=MessageOut)
async def login(body: CredentialsIn, response: Response, auth: AuthService = Depends(get_auth_service)):
    """
    Authenticate a user and start a session.

    On success the signed session token is set as an HttpOnly,
    SameSite=Strict cookie valid for 24 hours. The token is not echoed in
    the response body.

    Errors:
        400: invalid input (same rules as register)
        401 {"error": "Invalid credentials"}: unknown name or wrong password
    """
    token = await auth.login(body.name, body.password)
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="strict",
    )
    return {"message": "Logged in successfully"}

@router.get("/logout", response_model=MessageOut)
async def logout(response: Response):
    """
    Log out by clearing the session cookie.

    Always succeeds, even when no cookie was present. The token itself stays
    valid until it expires; there is no server-side revocation.
    """
    response.delete_cookie(
        settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="strict",
    )
    return {"message": "Logged out"}

@router.get("/me", response_model=UserOut)
async def me(user: User = Depends(get_current_user)):
    """
    Return the user owning the current session.

    Errors:
        401: no session, invalid/expired token, or user gone
    """
    return {"id": str(user.id), "name": user.name}
