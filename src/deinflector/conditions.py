"""
Per-language registry of grammatical condition tags.

Each leaf tag (e.g. "v1", an ichidan verb) owns one bit of a 64-bit mask.
Super-categories (e.g. "v", any verb) are declared as a list of member tags
and own the union of their members' bits.

Usage:
    from deinflector.conditions import ConditionRegistry

    registry = ConditionRegistry.build({
        "v":  {"name": "Verb", "sub_conditions": ["v1", "v5"]},
        "v1": {"name": "Ichidan verb", "is_dictionary_form": True},
        "v5": {"name": "Godan verb", "is_dictionary_form": True},
    })
    registry.mask("v")               # 0b11
    registry.resolve(0b01)           # ("v1",)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from deinflector.errors import (
    ConditionCycleError,
    ConfigurationError,
    TooManyConditionsError,
    UnknownTagError,
)

MASK_WIDTH = 64
ANY_MASK = (1 << MASK_WIDTH) - 1


@dataclass(frozen=True, slots=True)
class Condition:
    """One declared condition tag."""

    tag: str
    name: str
    mask: int
    is_dictionary_form: bool = False
    sub_conditions: tuple[str, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.sub_conditions


@dataclass(frozen=True, slots=True)
class ConditionRegistry:
    """Immutable tag → mask mapping for one language."""

    conditions: Mapping[str, Condition] = field(default_factory=dict)

    # ── Construction ──────────────────────────────────────────────────────

    @classmethod
    def build(cls, raw: Mapping[str, Mapping]) -> ConditionRegistry:
        """Assign bits to leaf tags, then resolve super-categories.

        Leaves with an explicit ``bit`` are placed first; the others then
        take the lowest free bits in declaration order.  Super-categories are
        resolved in passes until nothing is left; a pass that makes no
        progress means a cycle.
        """
        masks: dict[str, int] = {}
        used_bits: set[int] = set()
        leaves = [tag for tag, spec in raw.items() if not spec.get("sub_conditions")]

        def place(tag: str, bit: int) -> None:
            if not 0 <= bit < MASK_WIDTH:
                raise TooManyConditionsError(
                    f"Condition {tag!r} needs bit {bit}; masks are {MASK_WIDTH} bits wide"
                )
            if bit in used_bits:
                raise ConfigurationError(f"Condition {tag!r} reuses bit {bit}")
            used_bits.add(bit)
            masks[tag] = 1 << bit

        for tag in leaves:
            if raw[tag].get("bit") is not None:
                place(tag, raw[tag]["bit"])

        next_bit = 0
        for tag in leaves:
            if tag in masks:
                continue
            while next_bit in used_bits:
                next_bit += 1
            place(tag, next_bit)

        pending = [tag for tag, spec in raw.items() if spec.get("sub_conditions")]
        while pending:
            unresolved = []
            for tag in pending:
                members = raw[tag]["sub_conditions"]
                for member in members:
                    if member not in raw:
                        raise UnknownTagError(member)
                if all(m in masks for m in members):
                    flags = 0
                    for member in members:
                        flags |= masks[member]
                    masks[tag] = flags
                else:
                    unresolved.append(tag)
            if len(unresolved) == len(pending):
                raise ConditionCycleError(unresolved)
            pending = unresolved

        conditions = {}
        for tag, spec in raw.items():
            conditions[tag] = Condition(
                tag=tag,
                name=spec.get("name", tag),
                mask=masks[tag],
                is_dictionary_form=bool(spec.get("is_dictionary_form", False)),
                sub_conditions=tuple(spec.get("sub_conditions") or ()),
            )
        return cls(conditions=MappingProxyType(conditions))

    # ── Lookup ────────────────────────────────────────────────────────────

    def __contains__(self, tag: object) -> bool:
        return tag in self.conditions

    def __len__(self) -> int:
        return len(self.conditions)

    def __iter__(self):
        return iter(self.conditions)

    def bit(self, tag: str) -> int:
        """Bit position of a leaf tag."""
        cond = self._get(tag)
        if not cond.is_leaf:
            raise ConfigurationError(
                f"{tag!r} is a super-category and has no single bit"
            )
        return cond.mask.bit_length() - 1

    def mask(self, tag: str) -> int:
        return self._get(tag).mask

    def mask_for(self, tags: Iterable[str]) -> int:
        """Strict union of tag masks.  An empty tag list means "any"."""
        flags = 0
        seen = False
        for tag in tags:
            seen = True
            flags |= self._get(tag).mask
        return flags if seen else ANY_MASK

    def flags_for(self, tags: Iterable[str]) -> int:
        """Lenient union: unknown tags contribute nothing."""
        flags = 0
        for tag in tags:
            cond = self.conditions.get(tag)
            if cond is not None:
                flags |= cond.mask
        return flags

    def part_of_speech_flags(self, parts_of_speech: Iterable[str]) -> int:
        """Union over tags that name a dictionary part of speech."""
        flags = 0
        for tag in parts_of_speech:
            cond = self.conditions.get(tag)
            if cond is not None and cond.is_dictionary_form:
                flags |= cond.mask
        return flags

    def resolve(self, mask: int) -> tuple[str, ...]:
        """Tags fully satisfied by ``mask``, in declaration order."""
        return tuple(
            tag for tag, cond in self.conditions.items()
            if cond.mask and mask & cond.mask == cond.mask
        )

    def describe(self, tag: str) -> str:
        return self._get(tag).name

    def _get(self, tag: str) -> Condition:
        try:
            return self.conditions[tag]
        except KeyError:
            raise UnknownTagError(tag) from None

    def summary(self) -> str:
        leaves = sum(1 for c in self.conditions.values() if c.is_leaf)
        groups = len(self.conditions) - leaves
        return f"Conditions:     {leaves} leaf, {groups} group"
