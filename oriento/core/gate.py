"""Request gate: authenticate the caller before anything reaches the delegator."""

from __future__ import annotations

from typing import Optional

from oriento.core.delegator import AnswerDelegator
from oriento.core.errors import Unauthenticated
from oriento.core.protocol import (
    AuthenticatedRequest,
    AuthenticationCollaborator,
    PersonaHint,
)
from oriento.utils.logging import get_logger

logger = get_logger(__name__)


class RequestGate:
    """Owns the answer delegator and only lets authenticated calls through."""

    def __init__(self, authenticator: AuthenticationCollaborator, delegator: AnswerDelegator):
        self.authenticator = authenticator
        self.delegator = delegator

    def authorize(self, credential: Optional[str]) -> AuthenticatedRequest:
        """
        Validate the bearer *credential*.

        Raises ``Unauthenticated`` when it is missing, blank or rejected.
        Rejections are expected traffic and are logged at info level.
        """
        if credential is None or not credential.strip():
            logger.info("Rejected request: missing bearer credential")
            raise Unauthenticated("Missing bearer credential")

        try:
            identity = self.authenticator.validate(credential)
        except Unauthenticated as exc:
            logger.info("Rejected request: %s", exc.reason)
            raise

        logger.debug("Authenticated subject=%s", identity.subject)
        return AuthenticatedRequest(identity=identity)

    def ask(
        self,
        authenticated: AuthenticatedRequest,
        question: str,
        persona_hint: PersonaHint = None,
    ) -> str:
        logger.debug("Ask on behalf of subject=%s", authenticated.identity.subject)
        return self.delegator.ask(question, persona_hint)
