"""Read failure text from a file or from stdin."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Tuple


def read_text(path: str) -> Tuple[str, str]:
    """Read the whole text at *path*; ``"-"`` means standard input.

    Returns:
        A tuple of ``(text, source_description)``, e.g.
        ``("...", "file:out.log")``.

    Raises:
        RuntimeError: If *path* does not exist.
    """
    if path == "-":
        return sys.stdin.read(), "stdin"
    p = Path(path)
    if not p.exists():
        raise RuntimeError(f"File not found: {p}")
    return p.read_text(errors="ignore"), f"file:{path}"
