import typing as t

import structlog
from django.contrib.auth import get_user_model
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request

from accounts.errors import UnauthorizedError
from accounts.jwt import resolve_user_id

logger = structlog.get_logger(__name__)


class BearerSessionAuthentication(BaseAuthentication):
    """Authenticate ``Authorization: Bearer <token>`` against live sessions.

    A request without the header stays anonymous, so the permission layer
    answers 401. A header that does not resolve to a session fails outright.
    """

    keyword = "Bearer"

    def authenticate(self, request: Request) -> tuple[t.Any, str] | None:
        parts = get_authorization_header(request).split()
        if not parts or parts[0].lower() != self.keyword.lower().encode():
            return None
        if len(parts) != 2:
            raise AuthenticationFailed("Invalid authorization header.")

        try:
            token = parts[1].decode()
        except UnicodeError as e:
            raise AuthenticationFailed("Invalid authorization header.") from e

        try:
            user_id = resolve_user_id(token)
        except UnauthorizedError as e:
            raise AuthenticationFailed(e.message) from e

        user = get_user_model().objects.filter(pk=user_id, is_active=True).first()
        if user is None:
            logger.info("token_user_inactive", user_id=user_id)
            raise AuthenticationFailed("You must be signed in to continue")
        return user, token

    def authenticate_header(self, request: Request) -> str:
        return self.keyword
