"""
Collaborator contracts and per-request data structures.

The core depends only on these interfaces; concrete implementations live in
``oriento.agents`` (answering) and ``oriento.core.auth`` (authentication).
"""

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field

# Accepted on every ask call and intentionally unused.
PersonaHint = Optional[int]


class Identity(BaseModel):
    """Caller identity established by the authentication collaborator."""
    subject: str = Field(description="Token subject (user identifier)")
    claims: Dict[str, Any] = Field(default_factory=dict, description="Decoded token claims")


class AuthenticatedRequest(BaseModel):
    """A request that passed the gate; identity is kept for audit."""
    identity: Identity


@runtime_checkable
class AnsweringCollaborator(Protocol):
    def answer(self, question: str) -> str:
        """Return generated text for *question*, or raise on provider failure."""
        ...


@runtime_checkable
class AuthenticationCollaborator(Protocol):
    def validate(self, credential: str) -> Identity:
        """Return the caller identity, or raise ``Unauthenticated``."""
        ...
