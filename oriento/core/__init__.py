"""Core request-handling components for the Oriento ask operation"""

from .protocol import (
    AnsweringCollaborator,
    AuthenticatedRequest,
    AuthenticationCollaborator,
    Identity,
    PersonaHint,
)
from .errors import (
    MalformedRequest,
    OrientoError,
    Unauthenticated,
    UpstreamFailure,
)
from .delegator import AnswerDelegator
from .gate import RequestGate
from .auth import JwtAuthenticator

__all__ = [
    "AnsweringCollaborator",
    "AuthenticatedRequest",
    "AuthenticationCollaborator",
    "Identity",
    "PersonaHint",
    "MalformedRequest",
    "OrientoError",
    "Unauthenticated",
    "UpstreamFailure",
    "AnswerDelegator",
    "RequestGate",
    "JwtAuthenticator",
]
