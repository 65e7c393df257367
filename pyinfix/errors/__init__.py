from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyinfix.formula.core.types import Token


class FormulaErrorKind(StrEnum):
    """Closed set of reasons for rejecting a formula."""

    EMPTY_FORMULA = "Empty formula"
    INVALID_TOKEN = "Invalid token"
    INVALID_START = "Invalid first token"
    INVALID_END = "Invalid last token"
    UNBALANCED_PARENS = "Mismatched parentheses"
    CONSECUTIVE_OPERATORS = "Consecutive operators"
    MISSING_OPERATOR = "Missing operator between values"
    INVALID_AFTER_OPEN_PAREN = "Invalid token after opening parenthesis"
    INVALID_BEFORE_CLOSE_PAREN = "Invalid token before closing parenthesis"


class FormulaError(Exception):
    """
    Raised when a string is not a well-formed infix formula.

    Attributes
    ----------
    kind : FormulaErrorKind
        The rule that was violated.
    token : Optional[Token]
        The token at which the violation was detected, if any.
    position : Optional[int]
        Index of ``token`` in the token sequence, if any.
    """

    kind: FormulaErrorKind

    def __init__(
        self,
        kind: FormulaErrorKind,
        token: Token | None = None,
        position: int | None = None,
    ):
        self.kind = kind
        self.token = token
        self.position = position
        message = kind.value
        if token is not None:
            message = f"{message}: '{token.text}' at position {position}"
        super().__init__(message)

    @classmethod
    def from_kind(
        cls,
        kind: FormulaErrorKind,
        token: Token | None = None,
        position: int | None = None,
    ) -> FormulaError:
        """Build the exception subclass registered for ``kind``."""
        return _ERRORS_BY_KIND[kind](token=token, position=position)


class _FixedKindError(FormulaError):
    _kind: FormulaErrorKind

    def __init__(self, token: Token | None = None, position: int | None = None):
        super().__init__(self._kind, token=token, position=position)


class EmptyFormulaError(_FixedKindError):  # noqa: D101
    _kind = FormulaErrorKind.EMPTY_FORMULA


class InvalidTokenError(_FixedKindError):  # noqa: D101
    _kind = FormulaErrorKind.INVALID_TOKEN


class InvalidStartError(_FixedKindError):  # noqa: D101
    _kind = FormulaErrorKind.INVALID_START


class InvalidEndError(_FixedKindError):  # noqa: D101
    _kind = FormulaErrorKind.INVALID_END


class UnbalancedParensError(_FixedKindError):  # noqa: D101
    _kind = FormulaErrorKind.UNBALANCED_PARENS


class ConsecutiveOperatorsError(_FixedKindError):  # noqa: D101
    _kind = FormulaErrorKind.CONSECUTIVE_OPERATORS


class MissingOperatorError(_FixedKindError):  # noqa: D101
    _kind = FormulaErrorKind.MISSING_OPERATOR


class InvalidAfterOpenParenError(_FixedKindError):  # noqa: D101
    _kind = FormulaErrorKind.INVALID_AFTER_OPEN_PAREN


class InvalidBeforeCloseParenError(_FixedKindError):  # noqa: D101
    _kind = FormulaErrorKind.INVALID_BEFORE_CLOSE_PAREN


class PrecisionLossWarning(UserWarning):  # noqa: D101
    pass


_ERRORS_BY_KIND: dict[FormulaErrorKind, type[_FixedKindError]] = {
    cls._kind: cls
    for cls in (
        EmptyFormulaError,
        InvalidTokenError,
        InvalidStartError,
        InvalidEndError,
        UnbalancedParensError,
        ConsecutiveOperatorsError,
        MissingOperatorError,
        InvalidAfterOpenParenError,
        InvalidBeforeCloseParenError,
    )
}


__all__ = [
    "FormulaErrorKind",
    "FormulaError",
    "EmptyFormulaError",
    "InvalidTokenError",
    "InvalidStartError",
    "InvalidEndError",
    "UnbalancedParensError",
    "ConsecutiveOperatorsError",
    "MissingOperatorError",
    "InvalidAfterOpenParenError",
    "InvalidBeforeCloseParenError",
    "PrecisionLossWarning",
]
