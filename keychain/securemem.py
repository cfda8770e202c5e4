"""Wiping of sensitive byte buffers."""

from __future__ import annotations


def zero(buffer) -> None:
    """Overwrite every byte of a writable buffer with zero, in place."""
    with memoryview(buffer) as view:
        if view.readonly:
            raise TypeError("cannot zero a read-only buffer")
        with view.cast("B") as flat:
            flat[:] = bytes(flat.nbytes)