# app/core/errors.py
"""
Error taxonomy shared by services and its mapping to HTTP responses.

Services raise these exceptions; the handlers installed by
`register_exception_handlers` turn them into a status code and a JSON
body. Bodies never carry tracebacks or internal identifiers.
"""
import logging
from dataclasses import dataclass, asdict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from tortoise.exceptions import BaseORMException

logger = logging.getLogger("uvicorn.error")

SYSTEM_ERROR = "System error"
INTERNAL_ERROR = "Internal server error"


@dataclass
class FieldIssue:
    """One failing field: name, human-readable message, and where it came from."""
    param: str
    msg: str
    location: str = "body"


class ApiError(Exception):
    """Base class for errors that map to an HTTP response."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = INTERNAL_ERROR

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"error": self.message}


class ValidationError(ApiError):
    """Client data failed field constraints; every violation is reported."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"

    def __init__(self, issues: list[FieldIssue], message: str | None = None):
        self.issues = list(issues)
        if message is None and self.issues:
            message = "Validation failed: " + "; ".join(f"{i.param}: {i.msg}" for i in self.issues)
        super().__init__(message)

    def to_body(self) -> dict:
        return {"error": self.message, "errors": [asdict(i) for i in self.issues]}


class ConflictError(ApiError):
    """
    Uniqueness violation.

    Rendered exactly like a generic system error so a client cannot tell
    whether a user name is taken.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = SYSTEM_ERROR


class AuthenticationError(ApiError):
    """Bad credentials or missing/invalid session; causes are not distinguished."""
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class InternalError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = SYSTEM_ERROR


def issues_from_pydantic(errors: list[dict], default_location: str = "body") -> list[FieldIssue]:
    """Convert pydantic/FastAPI error dicts into FieldIssues."""
    issues = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ())]
        location = default_location
        # FastAPI prefixes request errors with their source ("body", "query", ...)
        if loc and loc[0] in ("body", "query", "path", "header", "cookie"):
            location = loc.pop(0)
        issues.append(FieldIssue(param=".".join(loc) or location, msg=err.get("msg", "Invalid value"), location=location))
    return issues


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(exc.to_body(), status_code=exc.status_code)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies are client errors: 400 with the same shape as ValidationError
    err = ValidationError(issues_from_pydantic(exc.errors()))
    return JSONResponse(err.to_body(), status_code=err.status_code)


async def _store_error_handler(request: Request, exc: BaseORMException) -> JSONResponse:
    logger.exception("[store] %s %s failed", request.method, request.url.path, exc_info=exc)
    return JSONResponse({"error": INTERNAL_ERROR}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(BaseORMException, _store_error_handler)
