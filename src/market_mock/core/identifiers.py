"""Opaque identifier generation."""

import uuid


def new_id() -> str:
    """Return a fresh random identifier."""
    return str(uuid.uuid4())
