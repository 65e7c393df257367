"""Internal helpers shared across pyinfix."""
