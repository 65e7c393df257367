from __future__ import annotations

from contextlib import contextmanager
from dataclasses import asdict, dataclass

__all__ = ["get_option", "option_context", "options", "set_option"]


@dataclass
class _Options:
    warn_precision_loss: bool = True

    # helpers ------------
    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise KeyError(f"Unknown option '{k}'")
            setattr(self, k, v)

    def to_dict(self):
        return asdict(self)


options = _Options()


def set_option(**kwargs):
    """Globally set default options."""
    options.update(**kwargs)


def get_option(name: str):
    if not hasattr(options, name):
        raise KeyError(f"Unknown option '{name}'")
    return getattr(options, name)


@contextmanager
def option_context(**kwargs):
    "Temporarily override options inside a `with` block."
    old = options.to_dict()
    try:
        options.update(**kwargs)
        yield
    finally:
        options.__dict__.update(old)
