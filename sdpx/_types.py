"""
Type definitions and exceptions for the SDP library.

This module centralizes the exception hierarchy raised by the parser and
the model accessors, the parser configuration, and common type aliases.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass
from typing import Optional

if typing.TYPE_CHECKING:
    from ._models import File


# =============================================================================
# Parser Configuration
# =============================================================================


@dataclass
class ParserConfig:
    """Configuration for the SDP parser."""

    # Decoding of bytes input
    encoding: str = "utf-8"
    errors: str = "strict"

    # Longest accepted line, terminator included
    max_line_length: int = 65535


# =============================================================================
# Exceptions
# =============================================================================


class SDPError(ValueError):
    """Base exception for SDP errors."""

    def __init__(self, message: str, *, line_number: Optional[int] = None) -> None:
        self.message = message
        self.line_number = line_number
        # Partially built document, attached by parse() for diagnostics only
        self.document: Optional[File] = None
        super().__init__(message)

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class SDPSyntaxError(SDPError):
    """Raised when the text violates the SDP structure."""

    pass


class SDPInvalidError(SDPError):
    """Raised when a well-formed field carries a disallowed value."""

    pass


class AttributeMissingError(SDPError, LookupError):
    """Raised when a required attribute is not present."""

    pass


# =============================================================================
# Type Aliases
# =============================================================================

# Anything parse() can read from
Source = typing.Union[str, bytes, typing.TextIO, typing.BinaryIO]


__all__ = [
    "ParserConfig",
    "SDPError",
    "SDPSyntaxError",
    "SDPInvalidError",
    "AttributeMissingError",
    "Source",
]
