"""
Domain errors.

Every failure the invite run can hit is a `PartyError`, so the CLI has one place to
catch them. The input errors (distance, office name, customer line) are also
`ValueError`s.
"""

from __future__ import annotations


class PartyError(Exception):
    """Base class for all office-party failures."""


class InvalidDistance(PartyError, ValueError):
    """A human distance expression such as `1km100m` could not be parsed."""

    def __init__(self, text: str, reason: str = "invalid distance") -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text


class InvalidOffice(PartyError, ValueError):
    """The requested office is not in the office table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"office does not (yet) exist: {name!r}")
        self.name = name


class ParseFailure(PartyError, ValueError):
    """A customer line is malformed or carries non-numeric coordinate text."""

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class WriteFailure(PartyError):
    """The output sink rejected a write; `written` counts characters already emitted."""

    def __init__(self, message: str, *, written: int = 0) -> None:
        super().__init__(message)
        self.written = written


class ReadFailure(PartyError):
    """The customer list could not be opened."""
