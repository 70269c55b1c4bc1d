"""Centralized FastAPI dependency providers."""

from typing import Annotated

from fastapi import Header, HTTPException, status

_TRUTHY = {"1", "true", "yes", "on"}


def require_admin(
    x_admin: Annotated[str | None, Header()] = None,
) -> None:
    """Reject requests that do not carry a truthy ``X-Admin`` header."""
    if x_admin is None or x_admin.strip().lower() not in _TRUTHY:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden",
        )
