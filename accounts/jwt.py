"""Bearer token issuance and verification.

Tokens are HS256 JWTs carrying the user id. A token is only honoured while a
``Session`` row holding that exact token exists, so deleting the row signs the
user out.
"""

import secrets
import typing as t

import jwt
import structlog
from django.conf import settings
from jwt.exceptions import InvalidTokenError

from accounts.errors import UnauthorizedError
from accounts.models import Session

logger = structlog.get_logger(__name__)


def issue_token(user: t.Any) -> str:
    """Sign a token for ``user`` and persist the session that backs it."""
    token = jwt.encode(
        {"userId": user.id, "jti": secrets.token_hex(8)},
        key=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )
    Session.objects.create(user=user, token=token)
    logger.info("session_created", user_id=user.id)
    return token


def resolve_user_id(token: str) -> int:
    """Verify ``token`` and return the id of the user it belongs to.

    Raises:
        UnauthorizedError: If the signature or payload is invalid, or no
            session holds this token.
    """
    try:
        payload = jwt.decode(
            token,
            key=settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except InvalidTokenError as e:
        logger.info("token_rejected", reason="invalid_signature_or_format")
        raise UnauthorizedError("invalid token") from e

    user_id = payload.get("userId")
    if not isinstance(user_id, int):
        logger.info("token_rejected", reason="missing_user_id")
        raise UnauthorizedError("missing user id")

    if not Session.objects.filter(token=token, user_id=user_id).exists():
        logger.info("token_rejected", reason="no_session", user_id=user_id)
        raise UnauthorizedError("no session")

    return user_id
