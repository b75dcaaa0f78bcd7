"""Exception types raised by the deinflection engine.

Configuration errors are raised while a language table is turned into a
LanguageTransformer; nothing is deferred to search time.  The search itself
never raises: "no rule applies" is an ordinary, expected outcome.
"""

from __future__ import annotations


class DeinflectorError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(DeinflectorError, ValueError):
    """A language table is malformed and cannot be built."""


class UnknownTagError(ConfigurationError):
    """A rule (or lookup) references a condition tag the language never declared."""

    def __init__(self, tag: str, *, transform: str | None = None, rule_index: int | None = None):
        self.tag = tag
        self.transform = transform
        self.rule_index = rule_index
        where = ""
        if transform is not None:
            where = f" in {transform}.rules[{rule_index}]"
        super().__init__(f"Unknown condition tag {tag!r}{where}")


class ConditionCycleError(ConfigurationError):
    """Super-categories reference each other in a loop."""

    def __init__(self, tags: list[str]):
        self.tags = tags
        super().__init__(
            "Cycle in sub-condition declarations: " + " -> ".join(tags)
        )


class TooManyConditionsError(ConfigurationError):
    """More leaf conditions than bits in a condition mask."""


class RuleLengthError(ConfigurationError):
    """A rule could lengthen a word, or rewrites it in place without being marked."""


class UnsupportedLanguageError(DeinflectorError, LookupError):
    """No transformer is registered for the requested language code."""

    def __init__(self, language: str, available: list[str] | None = None):
        self.language = language
        self.available = available or []
        msg = f"Unsupported language: {language!r}"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        super().__init__(msg)
