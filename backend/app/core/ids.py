from __future__ import annotations

from uuid import uuid4


def new_id() -> str:
    """Return a fresh opaque identity (random UUID4, never a counter)."""
    return str(uuid4())
