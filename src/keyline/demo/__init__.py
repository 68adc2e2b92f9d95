"""Demonstration parsers built on the KeyLine engine."""

from keyline.demo.magic import MagicWordParser
from keyline.demo.sections import SectionTourParser

DEMOS = {
    "sections": SectionTourParser,
    "magic": MagicWordParser,
}

__all__ = ["DEMOS", "MagicWordParser", "SectionTourParser"]
