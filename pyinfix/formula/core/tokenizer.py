"""
Formula tokenizer for breaking formula strings into tokens.

This module is responsible for the low-level scanning of formula strings
into their constituent tokens (numbers, variables, operators and
parentheses). It never rejects input: anything it cannot recognize is
passed on as an unrecognized token for the validator to report.
"""

import re
from dataclasses import dataclass
from typing import List

from .types import Token, TokenKind, _Shape


@dataclass(frozen=True)
class _Pattern:
    # Alternatives are tried in order; the first that matches at a position wins.
    scanner: re.Pattern = re.compile(
        r"(?P<left_paren>\()"
        r"|(?P<right_paren>\))"
        rf"|(?P<operator>{_Shape.operator.pattern})"
        r"|(?P<word>[A-Za-z][A-Za-z0-9]*)"
        rf"|(?P<number>{_Shape.number.pattern})"
        r"|(?P<space>\s+)"
        r"|(?P<other>.)",
        re.DOTALL,
    )


class FormulaTokenizer:
    """
    Responsible for breaking formula strings into tokens.

    This class handles the scanning of formula strings using maximal munch:
    at each position the longest run matching the highest-priority pattern
    becomes the next token. It focuses purely on tokenization without
    performing validation.
    """

    @staticmethod
    def tokenize(formula: str) -> List[Token]:
        """
        Break a formula string into tokens.

        Whitespace separates tokens and is otherwise discarded. A run of
        letters and digits starting with a letter that is not a valid
        variable (e.g. ``x1y``) is kept whole as a single unrecognized token.
        A number ends where the longest numeric literal ends, so ``2x1``
        scans as the number ``2`` followed by the variable ``x1``.

        Parameters
        ----------
        formula : str
            Infix formula such as "1*B1/3.0".

        Returns
        -------
        List[Token]
            The tokens in the order they appear in ``formula``.

        Raises
        ------
        TypeError
            If ``formula`` is not a string.

        Examples
        --------
        >>> [t.text for t in FormulaTokenizer.tokenize("(x1 + 2.5)*y2")]
        ['(', 'x1', '+', '2.5', ')', '*', 'y2']
        >>> FormulaTokenizer.tokenize("x1y")[0].kind
        <TokenKind.UNRECOGNIZED: 'unrecognized'>
        """
        if not isinstance(formula, str):
            raise TypeError(
                f"Formula must be a string, got {type(formula).__name__}."
            )

        tokens: List[Token] = []
        for match in re.finditer(_Pattern.scanner, formula):
            token = FormulaTokenizer._to_token(match)
            if token is not None:
                tokens.append(token)
        return tokens

    @staticmethod
    def _to_token(match: re.Match) -> Token | None:
        text = match.group(0)
        group = match.lastgroup
        if group == "space":
            return None
        if group == "word":
            kind = (
                TokenKind.VARIABLE
                if _Shape.variable.fullmatch(text)
                else TokenKind.UNRECOGNIZED
            )
        elif group == "other":
            kind = TokenKind.UNRECOGNIZED
        else:
            kind = TokenKind(group)
        return Token(kind=kind, text=text)
