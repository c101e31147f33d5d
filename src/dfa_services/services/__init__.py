"""Generated DFA service types and their signatures."""

from .registry import DfaService

__all__ = ["DfaService"]
