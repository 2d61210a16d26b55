"""
Authentication gate for Workasana.
Validates bearer tokens issued by /auth/login.
"""
import logging
from typing import Callable, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from .exceptions import InvalidToken, Unauthorized
from ..utils.security import TokenService

# Configure logging
logger = logging.getLogger(__name__)

# Security scheme; missing or non-bearer headers are reported by the gate itself
security = HTTPBearer(
    scheme_name="Bearer Token",
    description="JWT bearer token from /auth/login",
    auto_error=False
)


class CurrentUser:
    """Represents the current authenticated user."""

    def __init__(self, user_id: int):
        self.user_id = user_id

    def __str__(self):
        return f"User(id={self.user_id})"

    def __repr__(self):
        return self.__str__()


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service)
) -> CurrentUser:
    """
    Dependency to get current authenticated user.

    The decoded identity is also stored on ``request.state.user``.

    Raises:
        Unauthorized: header missing or malformed, or token rejected
    """
    if credentials is None:
        logger.warning(f"Missing bearer token for {request.method} {request.url.path}")
        raise Unauthorized("token missing")

    try:
        payload = tokens.decode_token(credentials.credentials)
    except InvalidToken as e:
        logger.warning(f"Token verification failed: {e}")
        raise Unauthorized("Invalid token")

    current_user = CurrentUser(user_id=payload["userId"])
    request.state.user = current_user
    logger.debug(f"Authenticated user: {current_user}")
    return current_user


def authenticate(route: str) -> Callable[..., Optional[CurrentUser]]:
    """
    Build the auth gate for one route, e.g. ``authenticate("GET /tasks")``.

    Routes listed in ``Settings.public_routes`` pass through without a token
    and the gate yields None.
    """
    def gate(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
        tokens: TokenService = Depends(get_token_service)
    ) -> Optional[CurrentUser]:
        if request.app.state.settings.is_public(route):
            return None
        return get_current_user(request, credentials, tokens)

    return gate
