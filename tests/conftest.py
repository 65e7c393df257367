"Pytest configuration for pyinfix tests."

import pytest

from pyinfix.options import options


@pytest.fixture(autouse=True)
def _restore_options():
    """Undo any `set_option` call made inside a test."""
    saved = options.to_dict()
    yield
    options.__dict__.update(saved)
