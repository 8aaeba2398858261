"""Caller identity resolution for API requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, HTTPException, Request, status

if TYPE_CHECKING:
    from food_registry.containers import AppContainer


async def require_caller(
    request: Request, x_api_token: str | None = Header(default=None)
) -> str:
    """Return the caller identity bound to the request's API token."""
    container: AppContainer = request.app.state.container
    caller = container.api_tokens.get(x_api_token) if x_api_token else None
    if caller is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or unknown API token",
        )
    return caller
