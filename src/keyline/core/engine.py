#!/usr/bin/env python3
"""
KEYLINE ENGINE - The Dispatcher
-------------------------------
LinearParser drives a Cursor through a sequence of lines, classifies each
line by its prefix, keeps track of the current section and hands key lines
to the registered KeyProcessors. The embedding application supplies all
semantics as handlers; the engine only owns classification, section
transitions, key lookup and error reporting.

Parsing is single-threaded and strictly sequential. The first failure
aborts the parse call; there is no partial result.

Author: KeyLine Team
Date: 2026-10-17
"""

import io
import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union, TextIO

from keyline.core.errors import EndOfInput, ParseError, UnknownSectionIdError
from keyline.core.models import (
    ArgKeyProcessor, DefaultProcessor, Hook, KeyHandler, KeyProcessor,
    LineKind, ParserConfig, Section,
)
from keyline.core.registry import SectionRegistry
from keyline.localization.messages import DefaultMessageProvider, MessageProvider
from keyline.parsing.classifier import LineClassifier
from keyline.parsing.cursor import Cursor

logger = logging.getLogger("keyline.engine")


def _stream_lines(stream: TextIO) -> Iterable[str]:
    return (line.rstrip("\r\n") for line in stream)


def split_lines(text: str) -> List[str]:
    """
    Splits text the way a file opened in text mode is read: only at \\n, \\r
    and \\r\\n. Other characters str.splitlines() treats as breaks (form
    feed, U+2028, ...) stay inside their line.
    """
    return list(_stream_lines(io.StringIO(text, newline=None)))


class LinearParser:
    """
    A reusable line parser built from sections and key processors.

    A single instance may run several parse calls one after another, but
    never concurrently: the current section and the one-shot markers live
    on the instance.
    """

    def __init__(self, config: ParserConfig, messages: Optional[MessageProvider] = None):
        self.config = config
        self.messages = messages if messages is not None else DefaultMessageProvider()
        self.registry = SectionRegistry()
        self.classifier = LineClassifier(config)
        self.default_processor: Optional[DefaultProcessor] = None

        # Parse-call state
        self._cursor: Optional[Cursor] = None
        self._section: Optional[Section] = None

    # --- Registration ---

    def add_section(self, section_id: str, on_enter: Optional[Hook] = None,
                    on_leave: Optional[Hook] = None) -> Section:
        return self.registry.add_section(section_id, on_enter, on_leave)

    def add_key_processor(self, processor: KeyProcessor, section_id: Optional[str] = None) -> KeyProcessor:
        """Registers globally, or for one section when `section_id` is given."""
        if section_id is None:
            self.registry.add_global_key_processor(processor)
        else:
            self.registry.add_section_key_processor(section_id, processor)
        return processor

    def set_default_processor(self, processor: Optional[DefaultProcessor]):
        self.default_processor = processor

    def key(self, name: str, section: Optional[str] = None, one_shot: bool = False,
            require_argument: bool = False) -> Callable[[KeyHandler], KeyHandler]:
        """
        Decorator registering a function as the handler of a key.

            @parser.key("title", one_shot=True, require_argument=True)
            def title(argument, cursor): ...
        """
        def decorator(handler: KeyHandler) -> KeyHandler:
            cls = ArgKeyProcessor if require_argument else KeyProcessor
            self.add_key_processor(cls(name, handler, one_shot=one_shot), section)
            return handler
        return decorator

    # --- Parse-call state ---

    @property
    def current_section(self) -> Optional[str]:
        """Id of the active section ('' for the global table), None outside a parse."""
        return self._section.id if self._section is not None else None

    @property
    def line_number(self) -> int:
        return self._cursor.line_number if self._cursor is not None else 0

    def change_section(self, section_id: str):
        """
        Switches sections: the current section's leave hook runs, then the
        new section's enter hook. May be called by handlers mid-parse.
        """
        if self._cursor is None or self._section is None:
            raise RuntimeError("change_section() is only available while parsing")

        target = self.registry.get(section_id)
        if target is None:
            raise ParseError.unknown_section(self._cursor.line_number, section_id)

        logger.debug(f"Line {self._cursor.line_number}: section '{self._section.id}' -> '{section_id}'")
        if not self._section.is_global:
            self._section.leave(self._cursor)
        self._section = target
        target.enter(self._cursor)

    # --- Entry points ---

    def parse(self, lines: Iterable[str]):
        """
        Parses a sequence of lines. Returns nothing; handlers accumulate
        results in state of their own. Raises ParseError on the first problem.
        """
        start = self._resolve_start_section()
        self.registry.reset_usage()
        cursor = Cursor(lines)
        self._cursor = cursor
        self._section = start
        logger.debug(f"Parsing {len(cursor)} lines, starting in section '{start.id}'")

        try:
            try:
                self._run(start, cursor)
            except EndOfInput as e:
                # A handler or hook read past the last line
                raise ParseError.generic("Unexpected end of input.", cursor.line_number) from e
        except ParseError as e:
            if e.line is None:
                e.line = cursor.line_number
            if e.messages is None:
                e.messages = self.messages
            logger.debug(f"Parse aborted: {e!r}")
            raise
        finally:
            self._cursor = None
            self._section = None

        logger.debug(f"Parse finished after {len(cursor)} lines")

    def parse_text(self, text: str):
        self.parse(split_lines(text))

    def parse_stream(self, stream: TextIO):
        self.parse(_stream_lines(stream))

    def parse_file(self, path: Union[str, Path], encoding: str = "utf-8-sig"):
        """Reads a file (BOM-aware by default) and parses its lines."""
        logger.info(f"Parsing {path}")
        with open(path, "r", encoding=encoding) as stream:
            self.parse_stream(stream)

    # --- Internals ---

    def _run(self, start: Section, cursor: Cursor):
        if not start.is_global:
            start.enter(cursor)

        while cursor.has_next():
            line = cursor.next()
            self._dispatch(line, cursor)

        if not self._section.is_global:
            self._section.leave(cursor)

    def _resolve_start_section(self) -> Section:
        start_id = self.config.start_section
        if start_id is None:
            return self.registry.global_table
        start = self.registry.get(start_id)
        if start is None:
            raise UnknownSectionIdError(start_id)
        return start

    def _dispatch(self, line: str, cursor: Cursor):
        classified = self.classifier.classify(line, cursor.line_number)
        kind = classified.kind

        if kind in (LineKind.BLANK, LineKind.COMMENT):
            return

        if kind is LineKind.SECTION:
            if classified.section_id in self.registry:
                self.change_section(classified.section_id)
                return
            if not self.config.ambiguous_sections:
                raise ParseError.unknown_section(cursor.line_number, classified.section_id)
            # Same prefix for sections and keys: read it as a key line instead
            kind = LineKind.KEY

        if kind is LineKind.KEY:
            key, argument = self.classifier.split_key(line)
            self._process_key(key, argument, cursor)
            return

        self._process_default(line, cursor)

    def _process_key(self, key: str, argument: Optional[str], cursor: Cursor):
        processor = self.registry.lookup(self._section, key)
        if processor is None:
            raise ParseError.unknown_key(cursor.line_number, key, self._section.id)
        logger.debug(f"Line {cursor.line_number}: key '{key}' in section '{self._section.id}'")
        processor(argument, cursor)

    def _process_default(self, line: str, cursor: Cursor):
        line_no = cursor.line_number
        if self.default_processor is None or not self.default_processor(line, cursor):
            raise ParseError.illegal_line(line_no)
