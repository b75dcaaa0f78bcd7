"""
Check a language table against a list of known inflected forms.

Each case says "this surface form should deinflect to this base form",
optionally with the tag the base form must carry and the inflection chain
that must lead to it.  The report tells us:
- What % of cases the table gets right
- Which cases fail, and whether the base form was missing entirely or was
  found with the wrong tag or the wrong chain
- Which transforms the passing cases exercised

Cases file (TSV, '#' starts a comment):

    # surface	expected	tag	chain
    食べました	食べる	v1	-ます, -た
    walked	walk	v

Usage:
    from deinflector import MultiLanguageTransformer
    from deinflector.coverage import check_coverage, load_cases

    lt = MultiLanguageTransformer.default().get("ja")
    report = check_coverage(lt, load_cases("tests/data/ja_cases.tsv"))
    print(report.summary())
"""

from __future__ import annotations

import csv
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from deinflector.transformer import DeinflectionResult, LanguageTransformer

logger = logging.getLogger(__name__)

CHAIN_SEPARATOR = ","


@dataclass(frozen=True, slots=True)
class CoverageCase:
    """One expected deinflection."""

    surface: str
    expected: str
    tag: str | None = None
    chain: tuple[str, ...] | None = None  # base form → surface form


@dataclass
class CaseResult:
    """Result of checking one case against the transformer."""

    case: CoverageCase
    passed: bool
    reason: str = ""  # "missing", "tag", "chain" or "" when passed
    match: DeinflectionResult | None = None
    candidates: list[str] = field(default_factory=list)  # chains of same-text results


@dataclass
class CoverageReport:
    """Aggregated coverage statistics."""

    language: str = ""
    total_cases: int = 0
    passed: int = 0
    text_found: int = 0  # expected text present, regardless of tag/chain

    failures_by_reason: Counter = field(default_factory=Counter)
    transforms_used: Counter = field(default_factory=Counter)  # over passing cases
    failures: list[CaseResult] = field(default_factory=list)

    def summary(self) -> str:
        if self.total_cases == 0:
            return "No cases checked."

        pct = lambda n, d: f"{100*n/d:.1f}%" if d > 0 else "N/A"

        lines = [
            f"═══ Coverage Report ({self.language}) ═══",
            "",
            f"Cases:          {self.total_cases}",
            f"Passed:         {self.passed:5d}  ({pct(self.passed, self.total_cases)})",
            f"Text found:     {self.text_found:5d}  ({pct(self.text_found, self.total_cases)})",
            f"Failed:         {len(self.failures):5d}  ({pct(len(self.failures), self.total_cases)})",
        ]
        for reason, count in sorted(self.failures_by_reason.items()):
            lines.append(f"  {reason:12s}  {count:5d}")

        if self.transforms_used:
            lines.append("")
            lines.append("─── Transforms used by passing cases ───")
            for name, count in self.transforms_used.most_common():
                lines.append(f"  {name:25s}  x{count}")

        if self.failures:
            lines.append("")
            lines.append("─── Sample failures ───")
            for fail in self.failures[:15]:
                c = fail.case
                lines.append(f"  {c.surface:20s}  expected {c.expected} ({fail.reason})")

        return "\n".join(lines)

    def write_mismatches(self, path: Path) -> None:
        """Write every failing case to a TSV file for manual review.

        Columns: reason, surface, expected, tag, chain, candidates
        """
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, delimiter="\t")
            writer.writerow(["reason", "surface", "expected", "tag", "chain", "candidates"])
            for fail in self.failures:
                c = fail.case
                writer.writerow([
                    fail.reason,
                    c.surface,
                    c.expected,
                    c.tag or "",
                    f"{CHAIN_SEPARATOR} ".join(c.chain) if c.chain is not None else "",
                    " | ".join(fail.candidates),
                ])


def load_cases(path: str | Path) -> list[CoverageCase]:
    """Read cases from a TSV file: surface, expected, [tag], [chain]."""
    cases = []
    with open(path, newline="", encoding="utf-8") as f:
        for row in csv.reader(f, delimiter="\t"):
            if not row or not row[0].strip() or row[0].startswith("#"):
                continue
            if len(row) < 2:
                raise ValueError(f"{path}: need at least surface and expected: {row!r}")
            tag = row[2].strip() if len(row) > 2 and row[2].strip() else None
            chain = None
            if len(row) > 3 and row[3].strip():
                chain = tuple(p.strip() for p in row[3].split(CHAIN_SEPARATOR))
            cases.append(CoverageCase(row[0].strip(), row[1].strip(), tag, chain))
    return cases


def check_case(transformer: LanguageTransformer, case: CoverageCase) -> CaseResult:
    results = [r for r in transformer.transform(case.surface) if r.text == case.expected]
    if not results:
        return CaseResult(case, passed=False, reason="missing")

    candidates = [" → ".join(r.inflection_chain) or "(identity)" for r in results]

    if case.tag is not None:
        expected_mask = transformer.registry.mask(case.tag)
        results = [
            r for r in results
            if LanguageTransformer.conditions_match(r.conditions, expected_mask)
        ]
        if not results:
            return CaseResult(case, passed=False, reason="tag", candidates=candidates)

    if case.chain is not None:
        results = [r for r in results if tuple(r.inflection_chain) == case.chain]
        if not results:
            return CaseResult(case, passed=False, reason="chain", candidates=candidates)

    return CaseResult(case, passed=True, match=results[0], candidates=candidates)


def check_coverage(
    transformer: LanguageTransformer,
    cases: Iterable[CoverageCase],
) -> CoverageReport:
    """
    Run every case through the transformer.

    Args:
        transformer: Built LanguageTransformer for the cases' language
        cases: Expected deinflections (see load_cases)
    """
    report = CoverageReport(language=transformer.language)

    for case in cases:
        report.total_cases += 1
        result = check_case(transformer, case)

        if result.reason != "missing":
            report.text_found += 1

        if result.passed:
            report.passed += 1
            report.transforms_used.update(result.match.transform_names)
        else:
            logger.debug("case %r failed: %s", case.surface, result.reason)
            report.failures_by_reason[result.reason] += 1
            report.failures.append(result)

    return report
