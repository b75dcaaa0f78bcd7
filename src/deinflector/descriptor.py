"""
Declarative per-language deinflection tables.

A LanguageDescriptor is plain data: condition tags and an ordered list of
transforms, each an ordered list of suffix rules that name their conditions
by tag.  It is turned into a LanguageTransformer (bits instead of tags) by
LanguageTransformer.from_descriptor().

Tables can be written in Python with suffix_inflection(), or loaded from
JSON or TOML:

    from deinflector.descriptor import LanguageDescriptor

    desc = LanguageDescriptor.from_file("tables/de.toml")
    print(desc.language, len(desc.transforms))

File shape (JSON shown):

    {
      "language": "xx",
      "name": "Example",
      "conditions": {
        "v":  {"name": "Verb", "is_dictionary_form": true},
        "-t": {"name": "past stem"}
      },
      "transforms": [
        {"name": "past", "rules": [
          {"suffix_in": "ed", "suffix_out": "", "conditions_in": ["-t"], "conditions_out": ["v"]},
          {"suffix_in": "ied", "suffix_out": "y", "constraints": [[["-t"], ["v"]]]}
        ]}
      ]
    }
"""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from deinflector.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RuleDescriptor:
    """One suffix rewrite, conditions still named by tag."""

    suffix_in: str
    suffix_out: str
    # (from_tags, to_tags) pairs; an empty tag list on either side means "any"
    constraints: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = ()
    min_stem: int = 0
    rewrite: bool = False


@dataclass(frozen=True, slots=True)
class TransformDescriptor:
    id: str
    name: str
    rules: tuple[RuleDescriptor, ...]
    description: str | None = None


@dataclass(slots=True)
class LanguageDescriptor:
    """Complete deinflection table for one language."""

    language: str  # short code, e.g. "ja"
    name: str
    conditions: dict[str, dict[str, Any]]
    transforms: list[TransformDescriptor] = field(default_factory=list)
    example_text: str = ""

    @classmethod
    def from_file(cls, path: str | Path) -> LanguageDescriptor:
        """Load a table from a .json or .toml file.

        Raises OSError if the file cannot be read, ConfigurationError if it
        does not parse or is not a table.
        """
        path = Path(path)
        try:
            if path.suffix == ".toml":
                with path.open("rb") as f:
                    raw = tomllib.load(f)
            else:
                with path.open("r", encoding="utf-8") as f:
                    raw = json.load(f)
        except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"{path}: cannot parse table: {e}") from e
        return cls._from_raw(raw, source=str(path))

    @classmethod
    def from_dict(cls, raw: dict) -> LanguageDescriptor:
        """Load from an already-parsed dict."""
        return cls._from_raw(raw)

    @classmethod
    def _from_raw(cls, raw: dict, source: str = "<dict>") -> LanguageDescriptor:
        if not isinstance(raw, dict):
            raise ConfigurationError(f"{source}: expected a table, got {type(raw).__name__}")
        try:
            language = raw["language"]
        except KeyError:
            raise ConfigurationError(f"{source}: table has no 'language' key") from None

        try:
            return cls._build(raw, language)
        except KeyError as e:
            raise ConfigurationError(f"{source}: missing key {e.args[0]!r}") from None

    @classmethod
    def _build(cls, raw: dict, language: str) -> LanguageDescriptor:
        conditions = {tag: dict(spec) for tag, spec in raw.get("conditions", {}).items()}

        raw_transforms = raw.get("transforms", [])
        # An id → transform mapping is accepted as well as a list
        if isinstance(raw_transforms, dict):
            raw_transforms = [
                {"id": tid, **spec} for tid, spec in raw_transforms.items()
            ]

        transforms = []
        for t_raw in raw_transforms:
            rules = tuple(_rule_from_raw(r) for r in t_raw.get("rules", []))
            transforms.append(TransformDescriptor(
                id=t_raw.get("id", t_raw["name"]),
                name=t_raw["name"],
                description=t_raw.get("description"),
                rules=rules,
            ))

        return cls(
            language=language,
            name=raw.get("name", language),
            conditions=conditions,
            transforms=transforms,
            example_text=raw.get("example_text", ""),
        )

    def to_dict(self) -> dict:
        """Inverse of from_dict(); suitable for json.dump."""
        return {
            "language": self.language,
            "name": self.name,
            "example_text": self.example_text,
            "conditions": self.conditions,
            "transforms": [
                {
                    "id": t.id,
                    "name": t.name,
                    "description": t.description,
                    "rules": [
                        {
                            "suffix_in": r.suffix_in,
                            "suffix_out": r.suffix_out,
                            "constraints": [[list(a), list(b)] for a, b in r.constraints],
                            "min_stem": r.min_stem,
                            "rewrite": r.rewrite,
                        }
                        for r in t.rules
                    ],
                }
                for t in self.transforms
            ],
        }

    @property
    def rule_count(self) -> int:
        return sum(len(t.rules) for t in self.transforms)


def _rule_from_raw(r: dict) -> RuleDescriptor:
    if "constraints" in r:
        constraints = tuple(
            (tuple(from_tags), tuple(to_tags)) for from_tags, to_tags in r["constraints"]
        )
    elif "conditions_in" in r or "conditions_out" in r:
        constraints = ((
            tuple(r.get("conditions_in", ())),
            tuple(r.get("conditions_out", ())),
        ),)
    else:
        constraints = ()
    return RuleDescriptor(
        suffix_in=r["suffix_in"],
        suffix_out=r.get("suffix_out", ""),
        constraints=constraints,
        min_stem=int(r.get("min_stem", 0)),
        rewrite=bool(r.get("rewrite", False)),
    )


# ── Table-authoring helpers ──────────────────────────────────────────────

def suffix_inflection(
    inflected: str,
    deinflected: str,
    conditions_in: Iterable[str] = (),
    conditions_out: Iterable[str] = (),
    *,
    min_stem: int = 0,
) -> RuleDescriptor:
    """A rule that strips ``inflected`` and appends ``deinflected``."""
    return RuleDescriptor(
        suffix_in=inflected,
        suffix_out=deinflected,
        constraints=((tuple(conditions_in), tuple(conditions_out)),),
        min_stem=min_stem,
    )


def rewrite_inflection(
    inflected: str,
    deinflected: str,
    conditions_in: Iterable[str] = (),
    conditions_out: Iterable[str] = (),
    *,
    min_stem: int = 0,
) -> RuleDescriptor:
    """Same-length rewrite (e.g. た → る); may not be chained with itself."""
    return RuleDescriptor(
        suffix_in=inflected,
        suffix_out=deinflected,
        constraints=((tuple(conditions_in), tuple(conditions_out)),),
        min_stem=min_stem,
        rewrite=True,
    )


def doubled_consonant_inflections(
    consonants: str,
    suffix: str,
    conditions_in: Iterable[str] = (),
    conditions_out: Iterable[str] = (),
) -> list[RuleDescriptor]:
    """stopped → stop, running → run, ..."""
    conditions_in = tuple(conditions_in)
    conditions_out = tuple(conditions_out)
    return [
        suffix_inflection(f"{c}{c}{suffix}", c, conditions_in, conditions_out)
        for c in consonants
    ]


# Japanese verbs whose euphonic (て/た) stems break the regular godan pattern
IKU_VERBS = ("いく", "行く", "逝く", "往く")
GODAN_U_SPECIAL_VERBS = (
    "こう", "とう", "請う", "乞う", "恋う", "問う", "訪う",
    "宣う", "曰う", "給う", "賜う", "揺蕩う",
)
FU_VERB_TE_CONJUGATIONS = (
    ("のたまう", "のたもう"),
    ("たまう", "たもう"),
    ("たゆたう", "たゆとう"),
)


def irregular_verb_inflections(
    suffix: str,
    conditions_in: Iterable[str] = (),
    conditions_out: Iterable[str] = (),
) -> list[RuleDescriptor]:
    """行って → 行く, 問うて → 問う, のたもうて → のたまう, ...

    ``suffix`` is the euphonic ending (て, た, たら or たり).
    """
    conditions_in = tuple(conditions_in)
    conditions_out = tuple(conditions_out)
    rules = [
        suffix_inflection(f"{verb[0]}っ{suffix}", verb, conditions_in, conditions_out)
        for verb in IKU_VERBS
    ]
    rules += [
        suffix_inflection(f"{verb}{suffix}", verb, conditions_in, conditions_out)
        for verb in GODAN_U_SPECIAL_VERBS
    ]
    rules += [
        suffix_inflection(f"{te_root}{suffix}", verb, conditions_in, conditions_out)
        for verb, te_root in FU_VERB_TE_CONJUGATIONS
    ]
    return rules


def transform(
    name: str,
    rules: Iterable[RuleDescriptor],
    *,
    transform_id: str | None = None,
    description: str | None = None,
) -> TransformDescriptor:
    return TransformDescriptor(
        id=transform_id or name,
        name=name,
        rules=tuple(rules),
        description=description,
    )
