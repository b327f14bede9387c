"""Error taxonomy for the ask operation.

Every failure is terminal for the current request. The HTTP layer maps:

    Unauthenticated   -> 401
    MalformedRequest  -> 400
    UpstreamFailure   -> 500
"""


class OrientoError(Exception):
    """Base class for errors raised by the Oriento core."""


class Unauthenticated(OrientoError):
    """The bearer credential is missing, malformed or was rejected."""

    def __init__(self, reason: str = "Not authenticated"):
        super().__init__(reason)
        self.reason = reason


class MalformedRequest(OrientoError):
    """The inbound call is structurally invalid."""


class UpstreamFailure(OrientoError):
    """The answering collaborator could not produce a response."""
