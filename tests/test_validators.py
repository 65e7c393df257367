"""
Tests for the grammar validator in pyinfix/formula/validation/validators.py.

This module contains:
- Part 1: Accepted token sequences
- Part 2: One test table per rejection reason
- Part 3: Error priority and error payload
"""

import pytest

from pyinfix.errors import (
    ConsecutiveOperatorsError,
    EmptyFormulaError,
    FormulaError,
    FormulaErrorKind,
    InvalidAfterOpenParenError,
    InvalidBeforeCloseParenError,
    InvalidEndError,
    InvalidStartError,
    InvalidTokenError,
    MissingOperatorError,
    UnbalancedParensError,
)
from pyinfix.formula import FormulaTokenizer, FormulaValidator, Token, TokenKind


def _validate(formula):
    return FormulaValidator.validate(FormulaTokenizer.tokenize(formula))


# =============================================================================
# Part 1: Accepted formulas
# =============================================================================


class TestAccepted:
    """Tests for well-formed formulas."""

    @pytest.mark.parametrize(
        "formula",
        [
            "1",
            "x1",
            "x1+5",
            "(x1+2)*y2",
            "((1))",
            "2*(3)",
            "1/.5",
            "a1-b22*(c3/4.0e2)",
            "  x1 +  y2 ",
            "(1)*(2)-((3)/4)",
        ],
    )
    def test_valid(self, formula):
        """Test that valid formulas pass and tokens come back unchanged."""
        tokens = FormulaTokenizer.tokenize(formula)
        assert FormulaValidator.validate(tokens) == tuple(tokens)

    def test_accepts_any_sequence(self):
        """Test that validate accepts a generator of tokens."""
        tokens = (t for t in FormulaTokenizer.tokenize("x1*2"))
        assert len(FormulaValidator.validate(tokens)) == 3


# =============================================================================
# Part 2: Rejections
# =============================================================================


class TestRejected:
    """Tests for each rejection reason."""

    @pytest.mark.parametrize(
        "formula,error",
        [
            # empty
            ("", EmptyFormulaError),
            ("   ", EmptyFormulaError),
            ("\n\t", EmptyFormulaError),
            # invalid tokens
            ("2x+5", InvalidTokenError),
            ("x1y", InvalidTokenError),
            ("x", InvalidTokenError),
            ("2 + $", InvalidTokenError),
            ("1e999", InvalidTokenError),
            ("x1 ^ 2", InvalidTokenError),
            # invalid start
            ("+2", InvalidStartError),
            ("*", InvalidStartError),
            (")2(", InvalidStartError),
            # invalid end
            ("2+", InvalidEndError),
            ("(2)*", InvalidEndError),
            # unbalanced parentheses
            ("((", UnbalancedParensError),
            ("(2+3", UnbalancedParensError),
            ("2+3)", UnbalancedParensError),
            ("(2))", UnbalancedParensError),
            ("((x1)", UnbalancedParensError),
            ("2*(", UnbalancedParensError),
            ("x1+(", UnbalancedParensError),
            # consecutive operators
            ("2++3", ConsecutiveOperatorsError),
            ("x1*/y1", ConsecutiveOperatorsError),
            # missing operator
            ("2 3", MissingOperatorError),
            ("x1 x2", MissingOperatorError),
            ("x1 5", MissingOperatorError),
            # text after a number is scanned as separate tokens
            ("1.2.3", MissingOperatorError),
            ("3.5.5", MissingOperatorError),
            ("2x1", MissingOperatorError),
            ("1e5x1", MissingOperatorError),
            ("x1.5", MissingOperatorError),
            # after open parenthesis
            ("()", InvalidAfterOpenParenError),
            ("(+2)", InvalidAfterOpenParenError),
            ("2*()", InvalidAfterOpenParenError),
            # before close parenthesis
            ("(2+)", InvalidBeforeCloseParenError),
            ("(x1*)+1", InvalidBeforeCloseParenError),
        ],
    )
    def test_invalid(self, formula, error):
        """Test that each malformed formula raises the matching error."""
        with pytest.raises(error):
            _validate(formula)

    def test_subclasses_share_base(self):
        """Test that every rejection can be caught as FormulaError."""
        with pytest.raises(FormulaError) as excinfo:
            _validate("2++3")
        assert excinfo.value.kind is FormulaErrorKind.CONSECUTIVE_OPERATORS
        assert isinstance(excinfo.value, ConsecutiveOperatorsError)

    def test_shape_is_rechecked(self):
        """Test that a mislabelled token is rejected as invalid."""
        tokens = [Token(kind=TokenKind.VARIABLE, text="1x")]
        with pytest.raises(InvalidTokenError):
            FormulaValidator.validate(tokens)

    def test_mislabelled_operator(self):
        """Test that operator tokens must be a single operator character."""
        tokens = [
            Token(kind=TokenKind.NUMBER, text="1"),
            Token(kind=TokenKind.OPERATOR, text="**"),
            Token(kind=TokenKind.NUMBER, text="2"),
        ]
        with pytest.raises(InvalidTokenError):
            FormulaValidator.validate(tokens)


# =============================================================================
# Part 3: Priority and payload
# =============================================================================


class TestErrorPriority:
    """Tests that the first violated rule in scan order is reported."""

    @pytest.mark.parametrize(
        "formula,expected_kind",
        [
            # the bad token comes before the unbalanced end
            ("(2x", FormulaErrorKind.INVALID_TOKEN),
            # the bad start comes before the bad token
            ("+$", FormulaErrorKind.INVALID_START),
            # a trailing operator is reported before adjacency
            ("2+*", FormulaErrorKind.INVALID_END),
            ("2+*3", FormulaErrorKind.CONSECUTIVE_OPERATORS),
            # adjacency is reported before the final balance check
            ("(2 3", FormulaErrorKind.MISSING_OPERATOR),
        ],
    )
    def test_first_rule_wins(self, formula, expected_kind):
        """Test deterministic error priority."""
        tokens = FormulaTokenizer.tokenize(formula)
        assert FormulaValidator.diagnose(tokens) is expected_kind

    def test_diagnose_valid(self):
        """Test that diagnose returns None for a valid formula."""
        assert FormulaValidator.diagnose(FormulaTokenizer.tokenize("x1*(2+y3)")) is None

    def test_error_payload(self):
        """Test that the offending token and its position are reported."""
        with pytest.raises(ConsecutiveOperatorsError) as excinfo:
            _validate("2 + + 3")
        error = excinfo.value
        assert error.token == Token(kind=TokenKind.OPERATOR, text="+")
        assert error.position == 2
        assert "Consecutive operators" in str(error)
        assert "position 2" in str(error)

    def test_error_without_token(self):
        """Test that end-of-input errors carry no token."""
        with pytest.raises(UnbalancedParensError) as excinfo:
            _validate("(2+3")
        assert excinfo.value.token is None
        assert excinfo.value.position is None
        assert str(excinfo.value) == "Mismatched parentheses"

    def test_from_kind(self):
        """Test that every kind maps to its own subclass."""
        for kind in FormulaErrorKind:
            error = FormulaError.from_kind(kind)
            assert error.kind is kind
            assert type(error) is not FormulaError
