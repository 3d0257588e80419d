"""Byte source and sink used by the path-based codec wrappers.

The codec itself only deals in ``bytes``; these two functions are the only
place the package touches the filesystem.  OS errors propagate unchanged.
"""

from __future__ import annotations

from pathlib import Path


def read_bytes(path: str | Path) -> bytes:
    """Return the full contents of *path*."""
    with open(path, "rb") as f:
        return f.read()


def write_bytes(path: str | Path, data: bytes) -> None:
    """Write *data* to *path*, replacing any existing file."""
    with open(path, "wb") as f:
        f.write(data)
