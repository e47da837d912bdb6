"""Reading files line by line or in fixed-size chunks."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

__all__ = ["read_lines", "read_chunks"]


def read_lines(file_path: str | os.PathLike[str], handler: Callable[[str], Any]) -> None:
    """Call ``handler`` with each line, without its line ending.

    An exception raised by the handler stops reading and propagates.
    """
    with open(file_path, "rb") as f:
        for raw in f:
            line = raw.removesuffix(b"\n").removesuffix(b"\r")
            handler(line.decode("utf-8", errors="replace"))


def read_chunks(
    file_path: str | os.PathLike[str], chunk_size: int, handler: Callable[[bytes], Any]
) -> None:
    """Call ``handler`` with successive pieces of at most ``chunk_size`` bytes."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            handler(chunk)