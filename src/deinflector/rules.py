"""
Compiled suffix rules and transforms.

These are the mask-based counterparts of the descriptors in descriptor.py:
tag names have been replaced by bits from the language's ConditionRegistry,
and every rule has passed the length check, so the search loop can apply
them without further validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from deinflector.conditions import ANY_MASK, ConditionRegistry
from deinflector.descriptor import RuleDescriptor, TransformDescriptor
from deinflector.errors import RuleLengthError, UnknownTagError


@dataclass(frozen=True, slots=True)
class Rule:
    """One suffix rewrite: ``...suffix_in`` → ``...suffix_out``."""

    suffix_in: str
    suffix_out: str
    constraints: tuple[tuple[int, int], ...] = ()  # (from_mask, to_mask)
    min_stem: int = 0
    rewrite: bool = False
    # union of every from_mask; precomputed for the compatibility test
    accepts: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        accepts = 0
        for from_mask, _to_mask in self.constraints:
            accepts |= from_mask
        object.__setattr__(self, "accepts", accepts if self.constraints else ANY_MASK)

    def apply(self, text: str, mask: int) -> tuple[str, int] | None:
        """Deinflect ``text``, or None if the rule does not fit."""
        if not text.endswith(self.suffix_in):
            return None
        stem_len = len(text) - len(self.suffix_in)
        if stem_len < self.min_stem:
            return None

        if self.constraints:
            if not mask & self.accepts:
                return None
            new_mask = 0
            for from_mask, to_mask in self.constraints:
                if mask & from_mask:
                    new_mask |= to_mask
            if not new_mask:
                return None
        else:
            new_mask = ANY_MASK

        new_text = text[:stem_len] + self.suffix_out
        if not new_text:
            return None
        return new_text, new_mask

    def accepts_mask(self, mask: int) -> bool:
        return bool(mask & self.accepts)

    @classmethod
    def compile(
        cls,
        desc: RuleDescriptor,
        registry: ConditionRegistry,
        *,
        transform: str = "?",
        index: int = 0,
    ) -> Rule:
        """Resolve tags to masks and check that the rule cannot grow the word."""
        where = f"{transform}.rules[{index}]"
        if not desc.suffix_in:
            raise RuleLengthError(f"{where}: empty suffix_in")
        if len(desc.suffix_out) > len(desc.suffix_in):
            raise RuleLengthError(
                f"{where}: {desc.suffix_in!r} -> {desc.suffix_out!r} lengthens the word"
            )
        if len(desc.suffix_out) == len(desc.suffix_in) and not desc.rewrite:
            raise RuleLengthError(
                f"{where}: {desc.suffix_in!r} -> {desc.suffix_out!r} keeps the length "
                f"but is not marked as a rewrite"
            )

        constraints = []
        for from_tags, to_tags in desc.constraints:
            try:
                pair = (registry.mask_for(from_tags), registry.mask_for(to_tags))
            except UnknownTagError as e:
                raise UnknownTagError(e.tag, transform=transform, rule_index=index) from None
            constraints.append(pair)

        return cls(
            suffix_in=desc.suffix_in,
            suffix_out=desc.suffix_out,
            constraints=tuple(constraints),
            min_stem=desc.min_stem,
            rewrite=desc.rewrite,
        )


@dataclass(frozen=True, slots=True)
class Transform:
    """A named grammatical operation: an ordered list of Rules."""

    id: str
    name: str
    rules: tuple[Rule, ...]
    description: str | None = None
    suffixes: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "suffixes", tuple({r.suffix_in: None for r in self.rules}))

    def apply(self, text: str, mask: int) -> Iterator[tuple[int, Rule, str, int]]:
        """Yield (rule_index, rule, new_text, new_mask) for every matching rule."""
        # one endswith() over all suffixes rules out most transforms at once
        if not text.endswith(self.suffixes):
            return
        for index, rule in enumerate(self.rules):
            out = rule.apply(text, mask)
            if out is not None:
                yield index, rule, out[0], out[1]

    @classmethod
    def compile(cls, desc: TransformDescriptor, registry: ConditionRegistry) -> Transform:
        rules = tuple(
            Rule.compile(r, registry, transform=desc.id, index=i)
            for i, r in enumerate(desc.rules)
        )
        return cls(id=desc.id, name=desc.name, rules=rules, description=desc.description)


@dataclass(frozen=True, slots=True)
class TraceFrame:
    """One applied rule, recorded in application order."""

    transform: str  # transform name
    suffix_in: str
    suffix_out: str
    text: str  # the text the rule was applied to
    transform_id: str = ""
    rule_index: int = 0

    def to_dict(self) -> dict:
        return {
            "transform": self.transform,
            "suffix_in": self.suffix_in,
            "suffix_out": self.suffix_out,
        }
