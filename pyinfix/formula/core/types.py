"""
Core types and data structures for formula parsing.

This module contains the fundamental data types used throughout the formula
parsing system: the token kinds recognized by the tokenizer, the token value
itself and the states of the grammar validator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, StrEnum

from ..utils import format_number


class TokenKind(StrEnum):
    """Types of formula tokens."""

    NUMBER = "number"
    VARIABLE = "variable"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    UNRECOGNIZED = "unrecognized"

    @property
    def is_value(self) -> bool:
        return self in (TokenKind.NUMBER, TokenKind.VARIABLE)


class ValidatorState(Enum):
    """States of the grammar validator."""

    START = "start"
    AFTER_VALUE = "after_value"
    AFTER_OPERATOR = "after_operator"
    AFTER_OPEN_PAREN = "after_open_paren"
    AFTER_CLOSE_PAREN = "after_close_paren"
    END = "end"


@dataclass(frozen=True)
class _Shape:
    number: re.Pattern = re.compile(
        r"(?:[0-9]+\.[0-9]*|[0-9]*\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?"
    )
    variable: re.Pattern = re.compile(r"[A-Za-z]+[0-9]+")
    operator: re.Pattern = re.compile(r"[-+*/]")


@dataclass(frozen=True)
class Token:
    """
    A single lexical unit of a formula.

    Attributes
    ----------
    kind : TokenKind
        What the token is.
    text : str
        The token text exactly as it appeared in the input.
    """

    kind: TokenKind
    text: str

    @property
    def is_value(self) -> bool:
        return self.kind.is_value

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    def has_valid_shape(self) -> bool:
        """
        Check that the token text matches the shape required by its kind.

        Returns
        -------
        bool
            False for unrecognized tokens and for any token whose text
            does not fit its kind.
        """
        if self.kind is TokenKind.NUMBER:
            return _Shape.number.fullmatch(self.text) is not None
        if self.kind is TokenKind.VARIABLE:
            return _Shape.variable.fullmatch(self.text) is not None
        if self.kind is TokenKind.OPERATOR:
            return _Shape.operator.fullmatch(self.text) is not None
        if self.kind is TokenKind.LEFT_PAREN:
            return self.text == "("
        if self.kind is TokenKind.RIGHT_PAREN:
            return self.text == ")"
        return False

    @property
    def canonical(self) -> str:
        """
        Canonical text of the token.

        Numbers are normalized to their double value and rendered minimally,
        variables have their letters upper-cased. Everything else is kept
        verbatim.

        Returns
        -------
        str
        """
        if self.kind is TokenKind.NUMBER:
            return format_number(float(self.text))
        if self.kind is TokenKind.VARIABLE:
            return self.text.upper()
        return self.text
