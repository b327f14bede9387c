"""JWT bearer-token validation backed by PyJWT."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import jwt

from oriento.core.errors import Unauthenticated
from oriento.core.protocol import Identity
from oriento.utils.config import auth_settings
from oriento.utils.logging import get_logger

logger = get_logger(__name__)


class JwtAuthenticator:
    """
    Validate bearer tokens signed with a shared secret.

    Tokens must carry ``sub`` and ``exp``. Issuer and audience are checked
    only when configured.
    """

    def __init__(
        self,
        secret: str,
        algorithms: Iterable[str] = ("HS256",),
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
        leeway: int = 0,
    ):
        if not secret:
            raise ValueError("JWT secret must be a non-empty string.")
        self._secret = secret
        self.algorithms = list(algorithms)
        self.issuer = issuer
        self.audience = audience
        self.leeway = leeway

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "JwtAuthenticator":
        settings = auth_settings(config)
        if not settings["secret"]:
            raise EnvironmentError(
                "ORIENTO_JWT_SECRET is not set. "
                "Add it to your environment or to a .env file in the project root."
            )
        return cls(
            secret=settings["secret"],
            algorithms=settings["algorithms"],
            issuer=settings["issuer"],
            audience=settings["audience"],
            leeway=settings["leeway"],
        )

    def validate(self, credential: str) -> Identity:
        required = ["sub", "exp"]
        if self.issuer:
            required.append("iss")
        if self.audience:
            required.append("aud")

        try:
            claims = jwt.decode(
                credential,
                self._secret,
                algorithms=self.algorithms,
                issuer=self.issuer,
                audience=self.audience,
                leeway=self.leeway,
                options={"require": required},
            )
        except jwt.InvalidTokenError as exc:
            logger.debug("Token rejected: %s", exc)
            raise Unauthenticated(f"Invalid token: {exc}") from exc

        return Identity(subject=str(claims["sub"]), claims=claims)
