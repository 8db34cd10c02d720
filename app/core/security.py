"""
Bearer token handling.

Tokens are HS256 JWTs whose ``user_id`` claim names a row in ``users``;
the role and hostel come from that row, never from the token.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from app.config.settings import settings
from app.core.logging import get_logger
from app.services.common.errors import AuthenticationError

logger = get_logger(__name__)


class JWTManager:
    """
    JWT token manager for authentication.

    Issuance is kept for tooling and tests; the API itself only verifies.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        access_token_expire_minutes: Optional[int] = None,
    ):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.access_token_expire_minutes = (
            access_token_expire_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    def create_access_token(
        self,
        user_id: str,
        additional_claims: Optional[Dict[str, Any]] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.access_token_expire_minutes))

        payload = {
            "user_id": str(user_id),
            "token_type": "access",
            "iat": now,
            "exp": expire,
            "jti": secrets.token_hex(16),
        }
        if additional_claims:
            payload.update(additional_claims)

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Raises:
            AuthenticationError: expired, malformed or wrongly signed token
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as exc:
            logger.warning("Token verification failed: token expired")
            raise AuthenticationError("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            logger.warning(f"Token verification failed: {exc}")
            raise AuthenticationError("Invalid token") from exc

        if payload.get("token_type", "access") != "access" or not payload.get("user_id"):
            raise AuthenticationError("Invalid token")
        return payload

    def get_user_id_from_token(self, token: str) -> str:
        return str(self.verify_token(token)["user_id"])


jwt_manager = JWTManager()


__all__ = ["JWTManager", "jwt_manager"]
