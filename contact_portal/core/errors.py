"""Response helpers for the two error tiers: not found (404) and server error (500).

Server errors carry the raw underlying error text back to the caller.
"""

from fastapi import status
from fastapi.responses import JSONResponse


def not_found(resource: str) -> JSONResponse:
    """404 response for a missing record."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": f"{resource} not found"},
    )


def server_error(message: str, exc: Exception) -> JSONResponse:
    """500 response in the CRUD routes' `{error, details}` shape."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": message, "details": str(exc)},
    )


def auth_error(message: str, exc: Exception) -> JSONResponse:
    """500 response in the auth routes' `{message, error}` shape."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": message, "error": str(exc)},
    )

