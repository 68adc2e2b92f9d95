#!/usr/bin/env python3
"""
KEYLINE SECTION REGISTRY
------------------------
Holds the named sections and the global key table. Everything is
registered before the first parse; during a parse the registry is read-only
apart from the one-shot markers kept inside the key processors.

Author: KeyLine Team
Date: 2026-10-17
"""

import logging
from typing import Dict, Iterator, Optional

from keyline.core.errors import DuplicateKeyError, DuplicateSectionError, UnknownSectionIdError
from keyline.core.models import Hook, KeyProcessor, Section

logger = logging.getLogger("keyline.registry")


class SectionRegistry:

    def __init__(self):
        self.global_table = Section("")
        self.sections: Dict[str, Section] = {}

    def __contains__(self, section_id: str) -> bool:
        return section_id in self.sections

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections.values())

    def get(self, section_id: str) -> Optional[Section]:
        return self.sections.get(section_id)

    def add_section(self, section_id: str, on_enter: Optional[Hook] = None,
                    on_leave: Optional[Hook] = None) -> Section:
        if section_id in self.sections:
            raise DuplicateSectionError(section_id)
        section = Section(section_id, on_enter, on_leave)
        self.sections[section_id] = section
        logger.debug(f"Registered section '{section_id}'")
        return section

    def add_global_key_processor(self, processor: KeyProcessor):
        self.global_table.add(processor)

    def add_section_key_processor(self, section_id: str, processor: KeyProcessor):
        """
        Global keys must be registered first: a key already present in the
        global table is rejected here, the reverse order is not checked.
        """
        section = self.sections.get(section_id)
        if section is None:
            raise UnknownSectionIdError(section_id)
        if processor.key in self.global_table:
            raise DuplicateKeyError(processor.key)
        section.add(processor)

    def lookup(self, section: Section, key: str) -> Optional[KeyProcessor]:
        """Current section first, then the global table."""
        processor = section.get(key)
        if processor is None:
            processor = self.global_table.get(key)
        return processor

    def reset_usage(self):
        """Forgets every one-shot first use."""
        for table in [self.global_table, *self.sections.values()]:
            for processor in table.processors.values():
                processor.reset()
