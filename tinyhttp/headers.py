"""Case-insensitive HTTP header storage and field-line parsing."""

from __future__ import annotations

import re
from typing import Iterable, Mapping

CRLF = b"\r\n"

_TOKEN_RE = re.compile(r"[A-Za-z0-9-]*")


class HeaderError(ValueError):
    """Raised when a header line is malformed."""


def is_valid_token(name: str) -> bool:
    """Return True if *name* holds only ASCII letters, digits and hyphens."""
    return _TOKEN_RE.fullmatch(name) is not None


class Headers(dict):
    """A mapping of lower-cased header names to their values."""

    def __init__(self, initial: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        super().__init__()
        items = initial.items() if isinstance(initial, Mapping) else initial
        for key, value in items:
            self.override(key, value)

    def parse(self, data: bytes) -> tuple[int, bool]:
        """Parse one field line from *data*.

        Returns the number of bytes consumed and whether the blank line that
        ends the header section was reached. Consumes nothing when *data*
        does not yet hold a full line.
        """
        idx = data.find(CRLF)
        if idx == -1:
            return 0, False
        if idx == 0:
            return len(CRLF), True

        line = data[:idx]
        if b":" not in line:
            raise HeaderError(f"malformed header line: {_decode(line)}")
        raw_key, raw_value = line.split(b":", 1)
        key = _decode(raw_key)

        if key != key.rstrip(" "):
            raise HeaderError(f"invalid header name: {key}")

        value = _decode(raw_value.strip())
        key = key.strip().lower()
        if not is_valid_token(key):
            raise HeaderError(f"invalid header token found: {key}")

        self.set(key, value)
        return idx + len(CRLF), False

    def set(self, key: str, value: str) -> None:
        """Add a value, joining it to any existing one with ', '."""
        key = key.lower()
        existing = super().get(key)
        if existing is not None:
            value = f"{existing}, {value}"
        self[key] = value

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, looked up case-insensitively."""
        return super().get(key.lower(), default)

    def override(self, key: str, value: str) -> None:
        """Replace any existing value for *key*."""
        self[key.lower()] = value


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="surrogateescape")