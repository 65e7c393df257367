"""
Validation components for formula parsing.

This submodule contains the grammar check for token sequences, separated
from the tokenizer for better maintainability and testing.
"""

from .validators import FormulaValidator

__all__ = [
    "FormulaValidator",
]
