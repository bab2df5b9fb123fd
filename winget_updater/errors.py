from __future__ import annotations


class ParseError(Exception):
    """Raised when package-manager output cannot be parsed."""

    pass


class HeaderFormatError(ParseError):
    """Raised when a header line was found but a column label is missing."""

    def __init__(self, label: str, header: str) -> None:
        self.label = label
        self.header = header
        super().__init__(
            f"Column '{label}' not found in header line: {header.strip()!r}"
        )
