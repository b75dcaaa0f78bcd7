"""
Single-language deinflection search.

A LanguageTransformer is an immutable bundle of a ConditionRegistry and an
ordered tuple of Transforms.  transform() walks a growing work list of
(text, mask, trace) nodes breadth-first: every node is itself a result, and
every rule of every transform that fits it adds a new node at the end.

Usage:
    from deinflector.languages import get_descriptor
    from deinflector.transformer import LanguageTransformer

    lt = LanguageTransformer.from_descriptor(get_descriptor("ja"))
    for r in lt.transform("書かせられた"):
        print(r.text, lt.registry.resolve(r.conditions), r.inflection_chain)

Termination does not depend on the table: a branch is kept only if it is
strictly shorter than its parent, or it comes from a same-length rewrite
rule that has not already fired since the text last got shorter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from deinflector.conditions import ANY_MASK, ConditionRegistry
from deinflector.descriptor import LanguageDescriptor
from deinflector.errors import ConfigurationError
from deinflector.logging_config import TRACE
from deinflector.rules import TraceFrame, Transform

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10_000


@dataclass(frozen=True, slots=True)
class DeinflectionResult:
    """One candidate base form and the rules that led to it."""

    text: str
    conditions: int
    trace: tuple[TraceFrame, ...] = ()

    @property
    def is_identity(self) -> bool:
        return not self.trace

    @property
    def transform_names(self) -> list[str]:
        """Transform names in application order (surface form first)."""
        return [f.transform for f in self.trace]

    @property
    def inflection_chain(self) -> list[str]:
        """Transform names from base form to surface form."""
        return [f.transform for f in reversed(self.trace)]

    def tags(self, registry: ConditionRegistry) -> tuple[str, ...]:
        return registry.resolve(self.conditions)

    def to_dict(self, registry: ConditionRegistry) -> dict:
        return {
            "text": self.text,
            "tags": list(self.tags(registry)),
            "trace": [f.to_dict() for f in self.trace],
        }


@dataclass(frozen=True, slots=True)
class InflectionRule:
    """User-facing name and description of a transform."""

    name: str
    description: str | None = None


@dataclass(frozen=True, slots=True)
class LanguageTransformer:
    """Deinflector for one language.  Safe to share between threads."""

    language: str
    registry: ConditionRegistry
    transforms: tuple[Transform, ...]
    max_results: int = DEFAULT_MAX_RESULTS

    @classmethod
    def from_descriptor(
        cls,
        descriptor: LanguageDescriptor,
        *,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> LanguageTransformer:
        """Compile a table.  Any data error is raised here, never later."""
        check_max_results(max_results)
        registry = ConditionRegistry.build(descriptor.conditions)
        transforms = tuple(Transform.compile(t, registry) for t in descriptor.transforms)
        logger.debug(
            "Built %s transformer: %d conditions, %d transforms, %d rules",
            descriptor.language, len(registry), len(transforms),
            sum(len(t.rules) for t in transforms),
        )
        return cls(
            language=descriptor.language,
            registry=registry,
            transforms=transforms,
            max_results=max_results,
        )

    # ── Search ───────────────────────────────────────────────────────────

    def transform(self, source_text: str) -> list[DeinflectionResult]:
        """All deinflections of ``source_text``, identity first, in discovery order."""
        results = [DeinflectionResult(source_text, ANY_MASK, ())]
        # rewrite rules fired since the text last got shorter, per node
        runs: list[tuple[tuple[int, int], ...]] = [()]
        tracing = logger.isEnabledFor(TRACE)

        i = 0
        while i < len(results):
            node = results[i]
            run = runs[i]
            text = node.text
            if tracing:
                logger.log(TRACE, "node %d: %r [%#x] via %s",
                           i, text, node.conditions, node.transform_names)

            for t_index, transform in enumerate(self.transforms):
                for r_index, rule, new_text, new_mask in transform.apply(text, node.conditions):
                    if len(new_text) < len(text):
                        new_run = ()
                    elif (
                        rule.rewrite
                        and len(new_text) == len(text)
                        and (t_index, r_index) not in run
                    ):
                        new_run = run + ((t_index, r_index),)
                    else:
                        continue

                    frame = TraceFrame(
                        transform=transform.name,
                        suffix_in=rule.suffix_in,
                        suffix_out=rule.suffix_out,
                        text=text,
                        transform_id=transform.id,
                        rule_index=r_index,
                    )
                    results.append(DeinflectionResult(new_text, new_mask, node.trace + (frame,)))
                    runs.append(new_run)

            if len(results) > self.max_results:
                logger.warning(
                    "%s: %r produced %d candidates; stopping at max_results=%d",
                    self.language, source_text, len(results), self.max_results,
                )
                del results[self.max_results:]
                break
            i += 1

        return results

    # ── Condition helpers ────────────────────────────────────────────────

    @staticmethod
    def conditions_match(current: int, expected: int) -> bool:
        """True if the masks share a category, or either side is unconstrained."""
        if current == ANY_MASK or expected == ANY_MASK:
            return True
        return (current & expected) != 0

    def flags_for(self, condition_types: Iterable[str]) -> int:
        return self.registry.flags_for(condition_types)

    def part_of_speech_flags(self, parts_of_speech: Iterable[str]) -> int:
        return self.registry.part_of_speech_flags(parts_of_speech)

    # ── Introspection ────────────────────────────────────────────────────

    def get_transform(self, transform_id: str) -> Transform | None:
        for t in self.transforms:
            if t.id == transform_id:
                return t
        return None

    def get_user_facing_inflection_rules(
        self, transform_ids: Iterable[str],
    ) -> list[InflectionRule]:
        """Names and descriptions for a chain of transform ids."""
        rules = []
        for tid in transform_ids:
            t = self.get_transform(tid)
            if t is None:
                rules.append(InflectionRule(name=tid))
            else:
                rules.append(InflectionRule(name=t.name, description=t.description))
        return rules

    @property
    def rule_count(self) -> int:
        return sum(len(t.rules) for t in self.transforms)

    def summary(self) -> str:
        return "\n".join([
            f"Language:       {self.language}",
            self.registry.summary(),
            f"Transforms:     {len(self.transforms)}",
            f"Rules:          {self.rule_count}",
        ])


def check_max_results(max_results: int) -> None:
    """Raise ConfigurationError unless max_results is a positive int."""
    if isinstance(max_results, bool) or not isinstance(max_results, int) or max_results < 1:
        raise ConfigurationError(f"max_results must be a positive integer, got {max_results!r}")
