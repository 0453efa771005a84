"""
Bearer Token Middleware

Records whether a request carries an `Authorization: Bearer <token>` header.
Token contents are not validated here; routes decide whether a token is
required through AuthDependency.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import HTTPException, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)


@dataclass
class AuthContext:
    """Authentication state of a request"""
    is_authenticated: bool
    token: Optional[str] = None


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from a Bearer authorization header, if any"""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """Stores the bearer token (or its absence) in request state"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        token = extract_bearer_token(request.headers.get("Authorization"))
        request.state.auth_token = token

        if token:
            logger.debug(f"Bearer token present: {request.method} {request.url.path}")

        response = await call_next(request)
        return response


class AuthDependency:
    """
    FastAPI dependency exposing the request's AuthContext.

    Use require_auth on routes that act on behalf of a signed-in shopper.
    """

    def __init__(self, require_auth: bool = False):
        self.require_auth = require_auth

    async def __call__(self, request: Request) -> AuthContext:
        token = getattr(request.state, "auth_token", None)
        if token is None:
            # Middleware not installed
            token = extract_bearer_token(request.headers.get("Authorization"))

        if self.require_auth and not token:
            raise HTTPException(
                status_code=401,
                detail="This endpoint requires a bearer token",
                headers={"WWW-Authenticate": "Bearer"},
            )

        return AuthContext(is_authenticated=bool(token), token=token)


# Dependency instance
require_auth = AuthDependency(require_auth=True)
