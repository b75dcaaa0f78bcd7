"""
Built-in language tables.

Each module here exposes a module-level ``DESCRIPTOR`` (a LanguageDescriptor).
Modules are imported on first request, so a process that only deinflects
English never loads the Japanese table.
"""

from __future__ import annotations

import importlib

from deinflector.descriptor import LanguageDescriptor
from deinflector.errors import UnsupportedLanguageError

_BUILTIN = {
    "en": "deinflector.languages.en",
    "es": "deinflector.languages.es",
    "ja": "deinflector.languages.ja",
}


def available_languages() -> list[str]:
    return sorted(_BUILTIN)


def get_descriptor(language: str) -> LanguageDescriptor:
    """Descriptor for a built-in language code."""
    try:
        module_name = _BUILTIN[language]
    except KeyError:
        raise UnsupportedLanguageError(language, available_languages()) from None
    return importlib.import_module(module_name).DESCRIPTOR
