"""Agents package: answering collaborators for the ask operation.

  OrientoAgent    oriento_agent    Financial-education answers for SMEs (OpenAI chat model)
"""

from .oriento_agent import OrientoAgent

__all__ = ["OrientoAgent"]
