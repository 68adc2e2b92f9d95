"""
KeyLine - a dispatch engine for prefix-tagged, line-oriented text files.

Lines are classified by leading prefixes (comment, section switch, key)
and handed to handlers registered by the embedding application.
"""

from keyline.core.engine import LinearParser
from keyline.core.errors import (
    ConfigError,
    CursorStateError,
    DuplicateKeyError,
    DuplicateSectionError,
    EndOfInput,
    ErrorKind,
    MissingHandlerError,
    ParseError,
    RegistrationError,
    UnknownSectionIdError,
)
from keyline.core.models import ArgKeyProcessor, KeyProcessor, ParserConfig, Section
from keyline.localization.messages import DefaultMessageProvider, DictMessageProvider, render_message
from keyline.parsing.cursor import Cursor

__version__ = "1.0.0"

__all__ = [
    "ArgKeyProcessor",
    "ConfigError",
    "Cursor",
    "CursorStateError",
    "DefaultMessageProvider",
    "DictMessageProvider",
    "DuplicateKeyError",
    "DuplicateSectionError",
    "EndOfInput",
    "ErrorKind",
    "KeyProcessor",
    "LinearParser",
    "MissingHandlerError",
    "ParseError",
    "ParserConfig",
    "RegistrationError",
    "Section",
    "UnknownSectionIdError",
    "render_message",
]
