from .oriento_agent import OrientoAgent

__all__ = ["OrientoAgent"]
