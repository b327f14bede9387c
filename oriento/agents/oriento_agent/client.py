"""OpenAI client initialisation for the Oriento agent."""

import os
from typing import Any, Dict, Optional

from openai import OpenAI

from oriento.utils.config import openai_settings


def get_client(settings: Optional[Dict[str, Any]] = None) -> OpenAI:
    """Return an OpenAI client (or any OpenAI-compatible endpoint via base_url)."""
    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        raise EnvironmentError(
            "OPENAI_API_KEY is not set. "
            "Add it to your environment or to a .env file in the project root."
        )
    settings = settings or openai_settings()
    return OpenAI(
        api_key=api_key,
        base_url=settings.get("base_url"),
        timeout=settings.get("timeout", 60.0),
        max_retries=settings.get("max_retries", 2),
    )
