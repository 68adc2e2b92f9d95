#!/usr/bin/env python3
"""
KEYLINE MESSAGES - Localized Error Text
---------------------------------------
Errors never carry message text of their own. When an error is rendered,
its kind selects a template from a MessageProvider and the error's fields
are substituted into it.

The bundled provider reads `messages.yaml` next to this module.

Author: KeyLine Team
Date: 2026-10-17
"""

import functools
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from ruamel.yaml import YAML

from keyline.core.errors import ConfigError, ErrorKind, ParseError

MESSAGES_PATH = Path(__file__).resolve().parent / "messages.yaml"
DEFAULT_LOCALE = "en"


class MessageProvider(Protocol):
    """Anything that maps a message name (e.g. 'UNKNOWN_KEY') to a template."""

    def template(self, name: str) -> str:
        ...


@functools.lru_cache(maxsize=None)
def _load_catalog(path: Path) -> Dict[str, Dict[str, str]]:
    yaml = YAML(typ="safe")
    data = yaml.load(path)
    if not isinstance(data, dict):
        raise ConfigError(f"Message catalog {path} is not a mapping")
    return data


class DefaultMessageProvider:
    """
    Serves templates from the bundled YAML catalog. Names missing from the
    requested locale fall back to English.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, path: Path = MESSAGES_PATH):
        catalog = _load_catalog(path)
        if locale not in catalog:
            raise ConfigError(f"Unsupported locale '{locale}' (available: {', '.join(sorted(catalog))})")
        self.locale = locale
        self._templates = catalog[locale]
        self._fallback = catalog.get(DEFAULT_LOCALE, {})

    def template(self, name: str) -> str:
        if name in self._templates:
            return self._templates[name]
        return self._fallback[name]


class DictMessageProvider:
    """In-memory templates, for embedding applications with their own catalogs."""

    def __init__(self, templates: Dict[str, str], fallback: Optional[MessageProvider] = None):
        self.templates = dict(templates)
        self.fallback = fallback

    def template(self, name: str) -> str:
        if name in self.templates:
            return self.templates[name]
        if self.fallback is not None:
            return self.fallback.template(name)
        raise KeyError(name)


def _template_name(error: ParseError) -> str:
    if error.kind is ErrorKind.UNKNOWN_KEY and not error.section:
        return "UNKNOWN_KEY_GLOBAL"
    return error.kind.name


def _fields(error: ParseError) -> Dict[str, Any]:
    return {
        "line": error.line if error.line is not None else "?",
        "key": error.key or "",
        "section": error.section or "",
        "first_line": error.first_line if error.first_line is not None else "?",
        "detail": error.detail or "",
    }


def render_message(error: ParseError, provider: Optional[MessageProvider] = None) -> str:
    """
    Builds "<error at line N>: <body>" for an error. A handler-supplied
    detail replaces the template body of ILLEGAL_LINE and GENERIC errors.
    """
    if provider is None:
        provider = DefaultMessageProvider()
    fields = _fields(error)

    if error.detail and error.kind in (ErrorKind.ILLEGAL_LINE, ErrorKind.GENERIC):
        body = error.detail
    else:
        body = provider.template(_template_name(error)).format(**fields)

    return f"{provider.template('ERROR_AT_LINE').format(**fields)}: {body}"
