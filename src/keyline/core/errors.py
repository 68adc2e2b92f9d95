#!/usr/bin/env python3
"""
KEYLINE ERRORS - The Failure Taxonomy
-------------------------------------
A closed set of parse-failure kinds. Every failure is a single ParseError
tagged with an ErrorKind and carrying only structured fields (line, key,
section, first use). Human-readable text is produced lazily by the
localization layer when the error is rendered.

Registration mistakes (duplicate sections or keys) are a different family:
they indicate a wrongly built parser, not a broken input file.

Author: KeyLine Team
Date: 2026-10-17
"""

from enum import Enum
from typing import Optional, Any


class ErrorKind(Enum):
    """Tag identifying which failure a ParseError describes."""
    UNKNOWN_SECTION = "unknown_section"
    UNKNOWN_KEY = "unknown_key"
    REPEATED_KEY = "repeated_key"
    MISSING_ARGUMENT = "missing_argument"
    ILLEGAL_LINE = "illegal_line"
    GENERIC = "generic"


class ParseError(Exception):
    """
    The single exception raised for any problem found in the parsed lines.

    Match on `kind` to tell failures apart. `line` is 1-based; handlers may
    leave it as None and the engine fills in the line it was processing.
    """

    def __init__(self, kind: ErrorKind, line: Optional[int] = None,
                 key: Optional[str] = None, section: Optional[str] = None,
                 first_line: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(kind, line)
        self.kind = kind
        self.line = line
        self.key = key
        self.section = section
        self.first_line = first_line
        self.detail = detail
        # Attached by the engine while the error propagates
        self.messages: Any = None

    # --- Variant constructors ---

    @classmethod
    def unknown_section(cls, line: int, section: str) -> "ParseError":
        return cls(ErrorKind.UNKNOWN_SECTION, line, section=section)

    @classmethod
    def unknown_key(cls, line: int, key: str, section: str) -> "ParseError":
        return cls(ErrorKind.UNKNOWN_KEY, line, key=key, section=section)

    @classmethod
    def repeated_key(cls, line: int, key: str, first_line: int) -> "ParseError":
        return cls(ErrorKind.REPEATED_KEY, line, key=key, first_line=first_line)

    @classmethod
    def missing_argument(cls, line: int, key: str) -> "ParseError":
        return cls(ErrorKind.MISSING_ARGUMENT, line, key=key)

    @classmethod
    def illegal_line(cls, line: Optional[int] = None, detail: Optional[str] = None) -> "ParseError":
        return cls(ErrorKind.ILLEGAL_LINE, line, detail=detail)

    @classmethod
    def generic(cls, detail: Optional[str] = None, line: Optional[int] = None) -> "ParseError":
        """Domain error raised by a handler for reasons of its own."""
        return cls(ErrorKind.GENERIC, line, detail=detail)

    def __str__(self) -> str:
        # Imported here: localization depends on this module
        from keyline.localization.messages import render_message
        return render_message(self, self.messages)

    def __repr__(self) -> str:
        fields = [f"line={self.line}"]
        for name in ("key", "section", "first_line", "detail"):
            value = getattr(self, name)
            if value is not None:
                fields.append(f"{name}={value!r}")
        return f"ParseError({self.kind.name}, {', '.join(fields)})"


class EndOfInput(Exception):
    """Raised when a cursor is asked for a line past the end of the input."""


class CursorStateError(RuntimeError):
    """Raised when a cursor mutation has no consumed line to act on."""


class ConfigError(ValueError):
    """Invalid parser configuration."""


class RegistrationError(Exception):
    """Base class for mistakes made while building a parser."""


class DuplicateSectionError(RegistrationError):
    def __init__(self, section_id: str):
        super().__init__(f"Section '{section_id}' is already registered.")
        self.section_id = section_id


class DuplicateKeyError(RegistrationError):
    def __init__(self, key: str, section_id: str = ""):
        where = f"section '{section_id}'" if section_id else "the global table"
        super().__init__(f"Key '{key}' is already registered in {where}.")
        self.key = key
        self.section_id = section_id


class UnknownSectionIdError(RegistrationError):
    def __init__(self, section_id: str):
        super().__init__(f"Section '{section_id}' was never registered.")
        self.section_id = section_id


class MissingHandlerError(RegistrationError):
    def __init__(self, key: str):
        super().__init__(f"Key '{key}' has no handler and does not override process().")
        self.key = key
