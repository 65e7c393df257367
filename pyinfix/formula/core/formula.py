"""
Validated formula representation.

This module contains the Formula class, the immutable value object that
wraps a token sequence known to satisfy the infix grammar.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from ..utils import check_precision
from ..validation.validators import FormulaValidator
from .tokenizer import FormulaTokenizer
from .types import Token, TokenKind


@dataclass(frozen=True, init=False, eq=False, repr=False)
class Formula:
    """
    Immutable representation of a syntactically valid infix formula.

    The allowed symbols are non-negative numbers written in double-precision
    floating-point syntax; variables made of one or more letters followed by
    one or more digits; parentheses; and the four operators +, -, * and /.
    Whitespace only separates tokens: "x23" is a single variable while
    "x 23" is the unrecognized token "x" followed by the number 23, and is
    rejected.

    Two formulas are equal when their canonical strings are equal, so
    ``Formula("x1 + 5.0") == Formula("X1+5")``.

    Parameters
    ----------
    formula : str
        The infix expression, e.g. "(x1 + 2) * y2".

    Attributes
    ----------
    tokens : Tuple[Token, ...]
        The validated tokens in input order, for downstream evaluators.

    Raises
    ------
    FormulaError
        If ``formula`` is not a valid infix expression. The exception's
        ``kind`` names the first rule violated.

    Examples
    --------
    >>> f = Formula("x1 + 5.0000")
    >>> f.canonical_string()
    'X1+5'
    >>> sorted(Formula("x1+y1*z1").variables())
    ['X1', 'Y1', 'Z1']
    """

    tokens: Tuple[Token, ...]
    _canonical: str = field(repr=False)
    _variables: FrozenSet[str] = field(repr=False)

    def __init__(self, formula: str):
        tokens = FormulaValidator.validate(FormulaTokenizer.tokenize(formula))
        for token in tokens:
            if token.kind is TokenKind.NUMBER:
                check_precision(token.text)

        object.__setattr__(self, "tokens", tokens)
        object.__setattr__(
            self, "_canonical", "".join(token.canonical for token in tokens)
        )
        object.__setattr__(
            self,
            "_variables",
            frozenset(
                token.canonical for token in tokens if token.kind is TokenKind.VARIABLE
            ),
        )

    def canonical_string(self) -> str:
        """
        Canonical form of the formula.

        The string contains no whitespace, variables are upper-cased and
        numbers are rendered minimally, e.g. "x1 + 5.0000" gives "X1+5".
        Passing it back to ``Formula`` yields a formula with the same
        canonical string.

        Returns
        -------
        str
        """
        return self._canonical

    def variables(self) -> FrozenSet[str]:
        """
        Names of the variables referenced by the formula.

        Each variable appears once, in canonical (upper-case) form:
        ``Formula("x1+X1").variables()`` is ``{"X1"}``.

        Returns
        -------
        FrozenSet[str]
        """
        return self._variables

    @property
    def fml(self) -> str:
        """Alias of ``canonical_string()``."""
        return self._canonical

    def __str__(self) -> str:
        return self._canonical

    def __repr__(self) -> str:
        return f"Formula({self._canonical!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Formula):
            return NotImplemented
        return self._canonical == other._canonical

    def __hash__(self) -> int:
        return hash(self._canonical)
