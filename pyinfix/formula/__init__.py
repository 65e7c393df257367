"""
Formula parsing submodule for pyinfix.

This submodule validates infix formulas and exposes their canonical form,
with a clear separation between scanning and grammar checking.

Main Components
---------------
- Formula: Validated, immutable formula; the main entry point
- FormulaTokenizer: Low-level scanning of formula strings into tokens
- FormulaValidator: Single-pass grammar validation of token sequences

Examples
--------
>>> from pyinfix.formula import Formula
>>> Formula("x1 + 5.0000").canonical_string()
'X1+5'
"""

# Main public API
from .core import Formula

# Core components (for advanced users)
from .core import FormulaTokenizer, Token, TokenKind

# Validation (for testing and debugging)
from .validation import FormulaValidator


def is_valid(formula: str) -> bool:
    """
    Check whether a string is a valid infix formula.

    Parameters
    ----------
    formula : str
        The string to check.

    Returns
    -------
    bool
        True if ``Formula(formula)`` would succeed. Non-string input is
        never valid.
    """
    if not isinstance(formula, str):
        return False
    tokens = FormulaTokenizer.tokenize(formula)
    return FormulaValidator.diagnose(tokens) is None


__all__ = [
    # Main public interface
    "Formula",
    "is_valid",

    # Core components
    "FormulaTokenizer",
    "Token",
    "TokenKind",

    # Advanced components
    "FormulaValidator",
]
