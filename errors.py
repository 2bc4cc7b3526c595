from __future__ import annotations


class CalcError(Exception):
    """Base class for calculator errors."""


class InvalidInput(CalcError):
    """Point text did not parse to a usable (non-zero) number."""

    def __init__(self, text: str, reason: str = "not a number"):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid point {text!r}: {reason}")


class PersistenceCorrupt(CalcError):
    """Stored history payload could not be decoded."""
