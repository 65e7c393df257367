# Import modules
from pyinfix import (
    errors,
    formula,
    options,
)
from pyinfix.errors import FormulaError, FormulaErrorKind

# Import frequently used functions and classes
from pyinfix.formula import Formula, is_valid
from pyinfix.options import get_option, option_context, set_option

__all__ = [
    "Formula",
    "FormulaError",
    "FormulaErrorKind",
    "errors",
    "formula",
    "get_option",
    "is_valid",
    "option_context",
    "options",
    "set_option",
]

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyinfix")
except PackageNotFoundError:
    __version__ = "unknown"
