"""Console helpers for interactive output.

Test paths typed at the prompt may hold undecodable bytes, kept as
surrogate escapes so they reach the child process unchanged. These
helpers read such lines and render them without tripping a strict
stdout encoding.
"""

from __future__ import annotations

import os
import sys


def read_stdin_line(prompt: str = "") -> str:
    """Read one line from stdin like ``input()``, tolerating bad bytes.

    Bytes that are not valid in the filesystem encoding are decoded with
    surrogateescape, so ``subprocess`` re-encodes them byte for byte.

    Raises:
        EOFError: At end of input.
    """
    if prompt:
        sys.stdout.write(prompt)
        sys.stdout.flush()
    raw = sys.stdin.buffer.readline()
    if not raw:
        raise EOFError
    return os.fsdecode(raw.rstrip(b"\r\n"))


def printable(text: str, encoding: str | None = None) -> str:
    """Return ``text`` with anything ``encoding`` cannot hold backslash-escaped."""
    encoding = encoding or getattr(sys.stdout, "encoding", None) or "utf-8"
    return text.encode(encoding, errors="backslashreplace").decode(encoding)
