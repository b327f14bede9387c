"""The single business operation: answer a question via the collaborator."""

from __future__ import annotations

from oriento.core.errors import MalformedRequest, UpstreamFailure
from oriento.core.protocol import AnsweringCollaborator, PersonaHint
from oriento.utils.logging import get_logger

logger = get_logger(__name__)


class AnswerDelegator:
    """
    Forward a question to the answering collaborator and return its text.

    One call to :meth:`ask` makes exactly one collaborator call. The result is
    returned verbatim; there is no retry, caching or fallback text here.
    """

    def __init__(self, collaborator: AnsweringCollaborator):
        self.collaborator = collaborator

    def ask(self, question: str, persona_hint: PersonaHint = None) -> str:
        """
        Parameters
        ----------
        question : str
            Question text. Empty strings are forwarded as-is.
        persona_hint : int | None
            Accepted and ignored.

        Raises
        ------
        MalformedRequest
            If *question* is ``None``.
        UpstreamFailure
            If the collaborator raises or returns something other than text.
        """
        if question is None:
            raise MalformedRequest("Question must not be null.")

        logger.info("Question received (prompt present: %s, %d chars)", bool(question), len(question))
        logger.debug("Prompt: %r, persona: %s", question, persona_hint)
        if persona_hint is not None:
            logger.debug("Persona hint %s received (currently unused)", persona_hint)

        try:
            answer = self.collaborator.answer(question)
        except UpstreamFailure:
            logger.error("Answering collaborator failed", exc_info=True)
            raise
        except Exception as exc:
            logger.error("Answering collaborator failed: %s", exc, exc_info=True)
            raise UpstreamFailure(str(exc) or type(exc).__name__) from exc

        if not isinstance(answer, str):
            logger.error("Answering collaborator returned %s instead of text", type(answer).__name__)
            raise UpstreamFailure(f"Invalid response type: {type(answer).__name__}")

        logger.info("Answer generated (%d chars)", len(answer))
        logger.debug("Answer: %r", answer)
        return answer
