#!/usr/bin/env python3
"""
KEYLINE CORE MODELS
-------------------
Defines the fundamental data structures used across the KeyLine engine:
the parser configuration, the key processors handlers are wrapped in,
the sections that own them, and the classified form of a single line.

Author: KeyLine Team
Date: 2026-10-17
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, Dict, Optional

from keyline.core.errors import ConfigError, DuplicateKeyError, MissingHandlerError, ParseError
from keyline.parsing.cursor import Cursor

# Handler signatures supplied by the embedding application
KeyHandler = Callable[[Optional[str], Cursor], None]
Hook = Callable[[Cursor], None]
DefaultProcessor = Callable[[str, Cursor], bool]


@dataclass(frozen=True)
class ParserConfig:
    """
    Construction-time settings. Prefixes are matched literally, so any
    separator (e.g. a trailing space) must be part of the prefix itself.
    """
    key_prefix: str
    comment_prefix: Optional[str] = None    # None disables comments
    section_prefix: Optional[str] = None    # None disables section lines
    start_section: Optional[str] = None     # None starts in the global table
    skip_empty_lines: bool = True

    def __post_init__(self):
        if not isinstance(self.key_prefix, str) or not self.key_prefix:
            raise ConfigError("key_prefix must be a non-empty string")
        for name in ("comment_prefix", "section_prefix", "start_section"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"{name} must be a string or None, got {type(value).__name__}")
        for name in ("comment_prefix", "section_prefix"):
            if getattr(self, name) == "":
                raise ConfigError(f"{name} must not be empty (use None to disable it)")

    @property
    def ambiguous_sections(self) -> bool:
        """True when section lines are indistinguishable from key lines."""
        return self.section_prefix == self.key_prefix


@dataclass
class KeyProcessor:
    """
    Binds a key to the function handling its lines.

    Either pass `handler` or subclass and override `process`. A one-shot
    processor remembers the line of its first use and rejects any later one.
    Checks run in `__call__`, so an overridden `process` keeps them.
    """
    key: str
    handler: Optional[KeyHandler] = None
    one_shot: bool = False
    first_line: Optional[int] = field(default=None, init=False, compare=False)

    # Reject key lines without an argument before process() is reached
    requires_argument: ClassVar[bool] = False

    def __post_init__(self):
        if self.handler is None and type(self).process is KeyProcessor.process:
            raise MissingHandlerError(self.key)

    def __call__(self, argument: Optional[str], cursor: Cursor):
        line = cursor.line_number
        if self.one_shot:
            if self.first_line is not None:
                raise ParseError.repeated_key(line, self.key, self.first_line)
            self.first_line = line
        if self.requires_argument and argument is None:
            raise ParseError.missing_argument(line, self.key)
        self.process(argument, cursor)

    def process(self, argument: Optional[str], cursor: Cursor):
        self.handler(argument, cursor)

    def reset(self):
        self.first_line = None


@dataclass
class ArgKeyProcessor(KeyProcessor):
    """A key processor whose handler is only reached with a non-null argument."""
    requires_argument: ClassVar[bool] = True


@dataclass
class Section:
    """
    A named parsing mode. The global table is a Section with an empty id
    that is consulted everywhere but never entered or left.
    """
    id: str
    on_enter: Optional[Hook] = None
    on_leave: Optional[Hook] = None
    processors: Dict[str, KeyProcessor] = field(default_factory=dict)

    @property
    def is_global(self) -> bool:
        return self.id == ""

    def __contains__(self, key: str) -> bool:
        return key in self.processors

    def add(self, processor: KeyProcessor):
        if processor.key in self.processors:
            raise DuplicateKeyError(processor.key, self.id)
        self.processors[processor.key] = processor

    def get(self, key: str) -> Optional[KeyProcessor]:
        return self.processors.get(key)

    def enter(self, cursor: Cursor):
        if self.on_enter is not None:
            self.on_enter(cursor)

    def leave(self, cursor: Cursor):
        if self.on_leave is not None:
            self.on_leave(cursor)


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    SECTION = "section"
    KEY = "key"
    OTHER = "other"


@dataclass
class ClassifiedLine:
    """
    The result of matching one raw line against the configured prefixes.
    For SECTION lines `section_id` holds the candidate id; for KEY lines
    `key` and `argument` hold the split remainder.
    """
    line_no: int                    # 1-based position in the input
    kind: LineKind
    raw_line: str = ""
    key: Optional[str] = None
    argument: Optional[str] = None
    section_id: Optional[str] = None
