#!/usr/bin/env python3
"""
KEYLINE CLASSIFIER - Prefix Matching
------------------------------------
Decides what a raw line is (blank, comment, section switch, key line or
anything else) from the configured prefixes alone. It knows nothing about
which sections or keys are registered; resolving those is the engine's job.

Author: KeyLine Team
Date: 2026-10-17
"""

import re
from typing import Iterable, List, Optional, Tuple

from keyline.core.models import ClassifiedLine, LineKind, ParserConfig

_WHITESPACE = re.compile(r"\s")


class LineClassifier:
    """
    Applies the fixed priority order: blank, comment, section, key, other.
    """

    def __init__(self, config: ParserConfig):
        self.config = config

    def split_key(self, line: str) -> Tuple[str, Optional[str]]:
        """
        Splits a key line at the first whitespace character.
        Example: "@title Hello world" -> ("title", "Hello world")
        """
        remainder = line[len(self.config.key_prefix):]
        match = _WHITESPACE.search(remainder)
        if not match:
            return remainder, None
        # Everything after the separator is the argument, verbatim
        argument = remainder[match.end():]
        return remainder[:match.start()], argument or None

    def section_id(self, line: str) -> str:
        return line[len(self.config.section_prefix):]

    def classify(self, line: str, line_no: int = 0) -> ClassifiedLine:
        cfg = self.config

        if cfg.skip_empty_lines and not line.strip():
            return ClassifiedLine(line_no, LineKind.BLANK, line)

        if cfg.comment_prefix is not None and line.startswith(cfg.comment_prefix):
            return ClassifiedLine(line_no, LineKind.COMMENT, line)

        if cfg.section_prefix is not None and line.startswith(cfg.section_prefix):
            return ClassifiedLine(line_no, LineKind.SECTION, line, section_id=self.section_id(line))

        if line.startswith(cfg.key_prefix):
            key, argument = self.split_key(line)
            return ClassifiedLine(line_no, LineKind.KEY, line, key=key, argument=argument)

        return ClassifiedLine(line_no, LineKind.OTHER, line)

    def classify_all(self, lines: Iterable[str]) -> List[ClassifiedLine]:
        """Classifies a whole sequence without dispatching anything."""
        return [self.classify(line, i) for i, line in enumerate(lines, 1)]
