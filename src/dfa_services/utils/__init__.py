"""Utilities for callers of DFA services."""

from .statement_builder import StatementBuilder

__all__ = ["StatementBuilder"]
