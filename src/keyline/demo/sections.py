#!/usr/bin/env python3
"""
KEYLINE DEMO - Section Tour
---------------------------
Reports every section entry and exit, plus a few keys that echo their
argument or the active section. Sections and keys share the '@' prefix,
so '@second' switches sections while '@print hi' is a key line.

Author: KeyLine Team
Date: 2026-10-17
"""

from typing import Iterable, List, Optional

from keyline.core.engine import LinearParser
from keyline.core.models import ArgKeyProcessor, KeyProcessor, ParserConfig
from keyline.parsing.cursor import Cursor

CONFIG = ParserConfig(key_prefix="@", comment_prefix="#", section_prefix="@", start_section="first")


class SectionTourParser:

    def __init__(self):
        self.events: List[str] = []
        self.parser = LinearParser(CONFIG)
        p = self.parser

        p.add_section("first", self._entered("FIRST"), self._left("FIRST"))
        p.add_section("second", self._entered("SECOND"), self._left("SECOND"))

        # Global keys first so section keys are checked against them
        p.add_key_processor(KeyProcessor("print", self._print))
        p.add_key_processor(ArgKeyProcessor("switchSection", self._switch))

        p.add_key_processor(KeyProcessor("printSection", self._print_section), "first")
        p.add_key_processor(KeyProcessor("printSection", self._print_section), "second")
        p.add_key_processor(KeyProcessor("printThisLine", self._print_this_line), "second")

    def _entered(self, name: str):
        def hook(cursor: Cursor):
            self.events.append(f"Entered section {name}, beginning on line {cursor.position + 1}")
        return hook

    def _left(self, name: str):
        def hook(cursor: Cursor):
            # At end of input the cursor sits after the last line of the section
            last = cursor.line_number if not cursor.has_next() else cursor.line_number - 1
            self.events.append(f"Left section {name} after line {last}")
        return hook

    def _print(self, argument: Optional[str], cursor: Cursor):
        self.events.append(f"*** {argument} ***")

    def _switch(self, argument: str, cursor: Cursor):
        self.events.append("### Manual switch section ###")
        self.parser.change_section(argument)

    def _print_section(self, argument: Optional[str], cursor: Cursor):
        self.events.append(f"Current section at line {cursor.line_number}: {self.parser.current_section.upper()}")

    def _print_this_line(self, argument: Optional[str], cursor: Cursor):
        self.events.append(f"Current line: {cursor.current}")

    def parse(self, lines: Iterable[str]) -> List[str]:
        self.events = []
        self.parser.parse(lines)
        return self.events
