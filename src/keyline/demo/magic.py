#!/usr/bin/env python3
"""
KEYLINE DEMO - Magic Words
--------------------------
Four numbered sections switched with '@sec <n>'. In each section a bare
'>> word' line (the empty key) is compared against that section's magic
word; once found, later words are simply echoed. Lines without a prefix
go to a default processor that never rejects them.

Author: KeyLine Team
Date: 2026-10-17
"""

from typing import Iterable, List, Optional

from keyline.core.engine import LinearParser
from keyline.core.models import ArgKeyProcessor, KeyProcessor, ParserConfig
from keyline.parsing.cursor import Cursor

CONFIG = ParserConfig(key_prefix=">>", comment_prefix="//", section_prefix="@sec ", start_section="0")

MAGIC_WORDS = {"1": "1", "2": "second", "3": "3rd"}


class MagicWordParser:

    def __init__(self):
        self.events: List[str] = []
        self.found = {}
        self.parser = LinearParser(CONFIG)
        p = self.parser

        p.add_section("0")
        for section_id in MAGIC_WORDS:
            p.add_section(section_id)

        p.add_key_processor(KeyProcessor("?", self._usage))
        p.add_key_processor(KeyProcessor("", self._echo), "0")
        p.add_key_processor(KeyProcessor("1", self._magic_key), "1")
        for section_id in MAGIC_WORDS:
            p.add_key_processor(ArgKeyProcessor("", self._guesser(section_id)), section_id)

        p.set_default_processor(self._not_understood)

    def _usage(self, argument: Optional[str], cursor: Cursor):
        self.events.append("Usage: How to use this tool.")

    def _echo(self, argument: Optional[str], cursor: Cursor):
        self.events.append(f">>> {argument}")

    def _magic_key(self, argument: Optional[str], cursor: Cursor):
        self.events.append(f"Magic found at line {cursor.line_number}")

    def _guesser(self, section_id: str):
        magic = MAGIC_WORDS[section_id]

        def guess(argument: str, cursor: Cursor):
            if argument == magic:
                self.found[section_id] = cursor.line_number
                self.events.append(f">>> Magic found at line {cursor.line_number}")
            elif section_id not in self.found:
                self.events.append(f'>>> It\'s not "{argument}"')
            else:
                self.events.append(f">>> {argument}")
        return guess

    def _not_understood(self, line: str, cursor: Cursor) -> bool:
        self.events.append(f'>>> I don\'t understand "{line}"')
        return True

    def parse(self, lines: Iterable[str]) -> List[str]:
        self.events = []
        self.found = {}
        self.parser.parse(lines)
        return self.events
