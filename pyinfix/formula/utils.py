import math
import re
import warnings

import numpy as np

from pyinfix.errors import PrecisionLossWarning
from pyinfix.options import options
from pyinfix.utils._exceptions import find_stack_level

# A double holds at most 17 significant decimal digits.
_MAX_SIGNIFICANT_DIGITS = 17

# Magnitudes outside [_SCI_LOWER, _SCI_UPPER) render in scientific notation.
_SCI_UPPER = 1e15
_SCI_LOWER = 1e-5

_MANTISSA = re.compile(r"[eE]")


def format_number(value: float) -> str:
    """
    Render a double with the fewest digits that round-trip to the same value.

    Magnitudes inside ``[1e-5, 1e15)`` are written positionally,
    everything else in scientific notation. Integral values drop the
    trailing decimal point.

    Parameters
    ----------
    value : float
        A finite, non-negative double.

    Returns
    -------
    str
        Text that the tokenizer reads back as a number with the same value.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot render non-finite number {value!r}.")
    magnitude = abs(value)
    if magnitude == 0.0 or _SCI_LOWER <= magnitude < _SCI_UPPER:
        return np.format_float_positional(value, unique=True, trim="-")
    return np.format_float_scientific(value, unique=True, trim="-")


def _significant_digits(literal: str) -> int:
    mantissa = _MANTISSA.split(literal, maxsplit=1)[0]
    return len(mantissa.replace(".", "").strip("0"))


def check_precision(literal: str) -> None:
    """Warn when a numeric literal is rounded on conversion to a double."""
    if not options.warn_precision_loss:
        return
    if _significant_digits(literal) > _MAX_SIGNIFICANT_DIGITS:
        warnings.warn(
            f"The numeric literal '{literal}' has more significant digits than a double can hold "
            f"and is normalized to '{format_number(float(literal))}'.",
            PrecisionLossWarning,
            stacklevel=find_stack_level(),
        )


def is_finite_literal(literal: str) -> bool:
    """Check that a numeric literal does not overflow to infinity."""
    return math.isfinite(float(literal))
