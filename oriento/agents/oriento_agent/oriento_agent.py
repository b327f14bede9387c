"""Answering collaborator backed by an OpenAI-compatible chat model."""

from typing import Any, Dict, Optional

from .client import get_client
from .prompts import SYSTEM_PROMPT
from oriento.utils.config import openai_settings
from oriento.utils.logging import get_logger
from oriento.utils.tracing import traceable

logger = get_logger(__name__)


class OrientoAgent:
    """
    Turn a question into an answer with a single chat-completions call.

    Retries and timeouts are handled by the OpenAI client (``max_retries``
    and ``timeout`` in the ``openai`` config section).
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None, client=None):
        self.settings = settings or openai_settings()
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = get_client(self.settings)
        return self._client

    @traceable(name="oriento_agent", run_type="llm", tags=["oriento", "finance"])
    def answer(self, question: str) -> str:
        """
        Answer *question* with the Oriento system prompt.

        The question is sent unchanged; empty text is not rejected here.

        Raises
        ------
        ValueError
            If the model response carries no message content.
        """
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": question},
        ]
        logger.debug("Calling model=%s", self.settings["model"])

        response = self.client.chat.completions.create(
            model=self.settings["model"],
            messages=messages,
            temperature=self.settings["temperature"],
        )

        if not response.choices:
            raise ValueError("Model response contained no choices.")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError("Model response contained no message content.")
        return content
