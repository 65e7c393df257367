"""
Validation logic for formula tokens.

This module contains the grammar check for infix formulas, separated from
the tokenizer so that scanning never rejects input and every rejection is
reported from a single place.
"""

from typing import Optional, Sequence, Tuple

from pyinfix.errors import FormulaError, FormulaErrorKind

from ..core.types import Token, TokenKind, ValidatorState
from ..utils import is_finite_literal

_STATE_AFTER = {
    TokenKind.NUMBER: ValidatorState.AFTER_VALUE,
    TokenKind.VARIABLE: ValidatorState.AFTER_VALUE,
    TokenKind.OPERATOR: ValidatorState.AFTER_OPERATOR,
    TokenKind.LEFT_PAREN: ValidatorState.AFTER_OPEN_PAREN,
    TokenKind.RIGHT_PAREN: ValidatorState.AFTER_CLOSE_PAREN,
}


class FormulaValidator:
    """
    Single-pass grammar validation for infix formulas.

    The validator walks the tokens once, left to right, as a state machine
    over the kind of the previous token (``START``, ``AFTER_VALUE``,
    ``AFTER_OPERATOR``, ``AFTER_OPEN_PAREN``, ``AFTER_CLOSE_PAREN``) while
    tracking parenthesis depth. A sequence is accepted iff it reaches
    ``END`` with depth zero. The first rule violated determines the reported
    error.
    """

    @staticmethod
    def validate(tokens: Sequence[Token]) -> Tuple[Token, ...]:
        """
        Validate a token sequence against the infix grammar.

        Parameters
        ----------
        tokens : Sequence[Token]
            Tokens as produced by ``FormulaTokenizer.tokenize``.

        Returns
        -------
        Tuple[Token, ...]
            The validated tokens, unchanged.

        Raises
        ------
        FormulaError
            The subclass matching the first violated rule, e.g.
            ``EmptyFormulaError`` for no tokens at all or
            ``ConsecutiveOperatorsError`` for ``2++3``.
        """
        tokens = tuple(tokens)
        if not tokens:
            raise FormulaError.from_kind(FormulaErrorKind.EMPTY_FORMULA)

        state = ValidatorState.START
        depth = 0
        last = len(tokens) - 1
        for position, token in enumerate(tokens):
            kind = FormulaValidator._check_token(token, state, depth, position, last)
            if kind is not None:
                raise FormulaError.from_kind(kind, token=token, position=position)
            if token.kind is TokenKind.LEFT_PAREN:
                depth += 1
            elif token.kind is TokenKind.RIGHT_PAREN:
                depth -= 1
            state = _STATE_AFTER[token.kind]

        if depth != 0:
            raise FormulaError.from_kind(FormulaErrorKind.UNBALANCED_PARENS)
        return tokens

    @staticmethod
    def _check_token(
        token: Token,
        state: ValidatorState,
        depth: int,
        position: int,
        last: int,
    ) -> Optional[FormulaErrorKind]:
        kind = token.kind

        if not token.has_valid_shape():
            return FormulaErrorKind.INVALID_TOKEN
        if kind is TokenKind.NUMBER and not is_finite_literal(token.text):
            return FormulaErrorKind.INVALID_TOKEN

        if state is ValidatorState.START and (
            kind is TokenKind.OPERATOR or kind is TokenKind.RIGHT_PAREN
        ):
            return FormulaErrorKind.INVALID_START

        if position == last and kind is TokenKind.OPERATOR:
            return FormulaErrorKind.INVALID_END
        # A trailing "(" can never be closed, so it is reported as unbalanced
        # rather than as an invalid end; this is what makes "((" unbalanced.
        if position == last and kind is TokenKind.LEFT_PAREN:
            return FormulaErrorKind.UNBALANCED_PARENS

        if kind is TokenKind.RIGHT_PAREN and depth == 0:
            return FormulaErrorKind.UNBALANCED_PARENS

        if state is ValidatorState.AFTER_OPERATOR and kind is TokenKind.OPERATOR:
            return FormulaErrorKind.CONSECUTIVE_OPERATORS

        if state is ValidatorState.AFTER_VALUE and kind.is_value:
            return FormulaErrorKind.MISSING_OPERATOR

        if state is ValidatorState.AFTER_OPEN_PAREN and (
            kind is TokenKind.OPERATOR or kind is TokenKind.RIGHT_PAREN
        ):
            return FormulaErrorKind.INVALID_AFTER_OPEN_PAREN

        if kind is TokenKind.RIGHT_PAREN and state in (
            ValidatorState.AFTER_OPERATOR,
            ValidatorState.AFTER_OPEN_PAREN,
        ):
            return FormulaErrorKind.INVALID_BEFORE_CLOSE_PAREN

        return None

    @staticmethod
    def diagnose(tokens: Sequence[Token]) -> Optional[FormulaErrorKind]:
        """
        Report why a token sequence would be rejected, without raising.

        Useful for debugging or for surfacing the failure reason in bulk
        checks.

        Parameters
        ----------
        tokens : Sequence[Token]
            Tokens to check.

        Returns
        -------
        Optional[FormulaErrorKind]
            The first violated rule, or None if the tokens form a valid
            formula.
        """
        try:
            FormulaValidator.validate(tokens)
        except FormulaError as e:
            return e.kind
        return None
