# app/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Potion Catalog API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for frontend (comma-separated in CORS_ORIGINS)
    CORS_ORIGINS: list[str] = [
        o.strip()
        for o in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,http://127.0.0.1:3000",
        ).split(",")
        if o.strip()
    ]

    # Store connection (Tortoise URL format)
    database_url: str = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
    # Create tables at startup instead of running aerich migrations
    generate_schemas: bool = _env_flag("GENERATE_SCHEMAS", "true" if os.getenv("ENV", "dev") == "dev" else "false")

    # Session token settings
    jwt_secret: str = os.getenv("JWT_SECRET", "dev-secret")  # use a strong secret outside dev
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(24 * 60)))

    # Session cookie settings
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "potion_session")
    # Secure flag defaults to on in prod (https only)
    session_cookie_secure: bool = _env_flag(
        "SESSION_COOKIE_SECURE", "true" if os.getenv("ENV", "dev") == "prod" else "false"
    )

settings = Settings()  # Instantiate configuration
