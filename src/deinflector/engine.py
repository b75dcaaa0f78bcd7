"""
Multi-language deinflection dispatcher with TOML-based configuration.

Holds one LanguageTransformer per language code.  Transformers are built
from their descriptors on first use, once, and shared afterwards.

Usage:
    from deinflector.engine import MultiLanguageTransformer

    mlt = MultiLanguageTransformer.default()            # built-in en, es, ja
    mlt.transform("ja", "食べました")                    # list[DeinflectionResult]
    mlt.lookup("xx", "foo").supported                   # False, no exception

    mlt = MultiLanguageTransformer.from_config()        # loads deinflector.toml

    # Or build manually:
    mlt = MultiLanguageTransformer()
    mlt.register(get_descriptor("en"))
    mlt.add_table("tables/de.json")
"""

from __future__ import annotations

import glob
import logging
import threading
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from deinflector.descriptor import LanguageDescriptor
from deinflector.errors import ConfigurationError, UnsupportedLanguageError
from deinflector.languages import available_languages, get_descriptor
from deinflector.transformer import (
    DEFAULT_MAX_RESULTS,
    DeinflectionResult,
    LanguageTransformer,
    check_max_results,
)

logger = logging.getLogger(__name__)

DescriptorFactory = Callable[[], LanguageDescriptor]


@dataclass(frozen=True, slots=True)
class Lookup:
    """Outcome of one dispatch, including "language not supported"."""

    language: str
    text: str
    results: tuple[DeinflectionResult, ...] = ()
    supported: bool = True

    def __bool__(self) -> bool:
        return self.supported

    @property
    def texts(self) -> list[str]:
        return [r.text for r in self.results]


@dataclass(slots=True)
class _Entry:
    factory: DescriptorFactory
    transformer: LanguageTransformer | None = None
    lock: threading.Lock = field(default_factory=threading.Lock)


class MultiLanguageTransformer:
    """Routes (language, text) requests to per-language transformers.

    Registration is not thread-safe and is expected to happen at startup.
    Lookups are: each language is built at most once, under its own lock,
    and already-built transformers are read without locking.
    """

    def __init__(self, *, max_results: int = DEFAULT_MAX_RESULTS):
        check_max_results(max_results)
        self.max_results = max_results
        self._entries: dict[str, _Entry] = {}

    # ── Construction helpers ─────────────────────────────────────────────

    def register(
        self,
        source: LanguageDescriptor | DescriptorFactory,
        *,
        language: str | None = None,
    ) -> None:
        """Register a descriptor, or a zero-argument factory returning one.

        A factory is only called when the language is first used, so
        ``language`` must be given alongside it.
        """
        if isinstance(source, LanguageDescriptor):
            descriptor = source
            code = language or descriptor.language
            factory: DescriptorFactory = lambda: descriptor
        elif callable(source):
            if language is None:
                raise ConfigurationError("register(factory) needs language=")
            code = language
            factory = source
        else:
            raise TypeError(f"Cannot register {type(source).__name__}")

        if code in self._entries:
            logger.info("Replacing registered language %r", code)
        self._entries[code] = _Entry(factory=factory)

    def add_builtin(self, *languages: str) -> None:
        """Register built-in tables by code (all of them if none are given)."""
        for code in languages or available_languages():
            if code not in available_languages():
                raise UnsupportedLanguageError(code, available_languages())
            self.register(lambda code=code: get_descriptor(code), language=code)

    def add_table(self, *paths: str | Path) -> None:
        """Register tables from .json / .toml files (globs allowed)."""
        for path in _expand_paths(paths):
            descriptor = LanguageDescriptor.from_file(path)
            logger.debug("Loaded table %s for %r", path, descriptor.language)
            self.register(descriptor)

    @classmethod
    def default(cls, *, max_results: int = DEFAULT_MAX_RESULTS) -> MultiLanguageTransformer:
        """Dispatcher with every built-in language registered."""
        mlt = cls(max_results=max_results)
        mlt.add_builtin()
        return mlt

    @classmethod
    def from_config(
        cls, config_path: str | Path = "deinflector.toml",
    ) -> MultiLanguageTransformer:
        """Build a dispatcher from a TOML config file.

        Paths in the config are resolved relative to the config file's
        directory.  Glob patterns in paths are expanded.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            try:
                cfg = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigurationError(f"{config_path}: {e}") from e

        base_dir = config_path.parent
        engine_cfg = cfg.get("engine", {})
        mlt = cls(max_results=engine_cfg.get("max_results", DEFAULT_MAX_RESULTS))

        # Built-in languages; an explicit empty list registers none
        languages = engine_cfg.get("languages")
        if languages is None:
            mlt.add_builtin()
        elif languages:
            mlt.add_builtin(*languages)

        # Extra tables
        table_paths = cfg.get("tables", {}).get("paths", [])
        if table_paths:
            resolved = _resolve_config_paths(table_paths, base_dir)
            if resolved:
                mlt.add_table(*resolved)

        if engine_cfg.get("preload", False):
            mlt.preload()

        return mlt

    # ── Dispatch ─────────────────────────────────────────────────────────

    def get(self, language: str) -> LanguageTransformer:
        """The transformer for ``language``, building it on first use."""
        entry = self._entries.get(language)
        if entry is None:
            raise UnsupportedLanguageError(language, self.languages)

        transformer = entry.transformer
        if transformer is None:
            with entry.lock:
                transformer = entry.transformer
                if transformer is None:
                    logger.info("Building transformer for %r", language)
                    transformer = LanguageTransformer.from_descriptor(
                        entry.factory(), max_results=self.max_results,
                    )
                    entry.transformer = transformer
        return transformer

    def transform(self, language: str, text: str) -> list[DeinflectionResult]:
        """Deinflect ``text``.  Raises UnsupportedLanguageError for unknown codes."""
        return self.get(language).transform(text)

    def lookup(self, language: str, text: str) -> Lookup:
        """Like transform(), but an unknown language is a value, not an error."""
        if language not in self._entries:
            logger.debug("lookup(%r, %r): language not supported", language, text)
            return Lookup(language=language, text=text, supported=False)
        return Lookup(
            language=language,
            text=text,
            results=tuple(self.get(language).transform(text)),
        )

    def preload(self) -> None:
        """Build every registered transformer now."""
        for language in self._entries:
            self.get(language)

    # ── Introspection ────────────────────────────────────────────────────

    @property
    def languages(self) -> list[str]:
        return sorted(self._entries)

    def is_supported(self, language: str) -> bool:
        return language in self._entries

    def is_built(self, language: str) -> bool:
        entry = self._entries.get(language)
        return entry is not None and entry.transformer is not None

    def __contains__(self, language: object) -> bool:
        return language in self._entries

    def summary(self) -> str:
        lines = [f"MultiLanguageTransformer with {len(self._entries)} language(s):"]
        for language in self.languages:
            entry = self._entries[language]
            if entry.transformer is None:
                lines.append(f"  [{language}] (not built)")
                continue
            lines.append(f"  [{language}]")
            # indent each transformer's own summary
            for sub_line in entry.transformer.summary().split("\n"):
                lines.append(f"    {sub_line}")
        return "\n".join(lines)


# ── Path helpers ─────────────────────────────────────────────────────────

def _expand_paths(paths) -> list[Path]:
    """Paths as given, with each glob pattern replaced by its sorted matches."""
    result = []
    for p in map(str, paths):
        if glob.has_magic(p):
            result.extend(Path(m) for m in sorted(glob.glob(p)))
        else:
            result.append(Path(p))
    return result


def _resolve_config_paths(raw_paths: list[str], base_dir: Path) -> list[Path]:
    """Config paths are relative to the config file's directory."""
    return _expand_paths(base_dir / p for p in raw_paths)
