"""
Core components for formula parsing.

This submodule contains the fundamental building blocks for formula parsing:
types, tokenizer, and the validated formula representation.
"""

from .types import Token, TokenKind, ValidatorState
from .tokenizer import FormulaTokenizer
from .formula import Formula

__all__ = [
    "Formula",
    "FormulaTokenizer",
    "Token",
    "TokenKind",
    "ValidatorState",
]
