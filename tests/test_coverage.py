"""Tests for the known-forms checker (coverage.py)."""

import csv

import pytest

from deinflector.coverage import (
    CoverageCase,
    CoverageReport,
    check_case,
    check_coverage,
    load_cases,
)


# ── load_cases ────────────────────────────────────────────────────────────────

CASES_TSV = (
    "# surface\texpected\ttag\tchain\n"
    "\n"
    "食べました\t食べる\tv1\t-ます, -た\n"
    "walked\twalk\n"
    "来い\t来る\tvk\n"
    "買った\t買う\t\t-た\n"
)


def test_load_cases(tmp_path):
    path = tmp_path / "cases.tsv"
    path.write_text(CASES_TSV, encoding="utf-8")
    cases = load_cases(path)
    assert cases == [
        CoverageCase("食べました", "食べる", "v1", ("-ます", "-た")),
        CoverageCase("walked", "walk"),
        CoverageCase("来い", "来る", "vk"),
        CoverageCase("買った", "買う", None, ("-た",)),
    ]


def test_load_cases_short_row(tmp_path):
    path = tmp_path / "cases.tsv"
    path.write_text("walked\n", encoding="utf-8")
    with pytest.raises(ValueError, match="surface and expected"):
        load_cases(path)


# ── check_case ────────────────────────────────────────────────────────────────

def test_check_case_pass(ja):
    result = check_case(ja, CoverageCase("食べました", "食べる", "v1", ("-ます", "-た")))
    assert result.passed
    assert result.reason == ""
    assert result.match.inflection_chain == ["-ます", "-た"]


def test_check_case_text_only(en):
    assert check_case(en, CoverageCase("walked", "walk")).passed


def test_check_case_missing(en):
    result = check_case(en, CoverageCase("walked", "run"))
    assert not result.passed
    assert result.reason == "missing"
    assert result.candidates == []


def test_check_case_wrong_tag(en):
    result = check_case(en, CoverageCase("walked", "walk", "adj"))
    assert result.reason == "tag"
    assert "past" in result.candidates


def test_check_case_wrong_chain(ja):
    result = check_case(ja, CoverageCase("食べました", "食べる", "v1", ("-た",)))
    assert result.reason == "chain"
    assert "-ます → -た" in result.candidates


def test_check_case_identity(ja):
    result = check_case(ja, CoverageCase("食べる", "食べる", "v1"))
    assert result.passed
    assert result.match.is_identity
    assert result.candidates[0] == "(identity)"


# ── check_coverage ────────────────────────────────────────────────────────────

def test_check_coverage_counts(ja):
    cases = [
        CoverageCase("食べました", "食べる", "v1", ("-ます", "-た")),
        CoverageCase("書かせられた", "書く", "v5"),
        CoverageCase("食べました", "食べる", "v5"),
        CoverageCase("食べました", "飲む"),
    ]
    report = check_coverage(ja, cases)
    assert report.language == "ja"
    assert report.total_cases == 4
    assert report.passed == 2
    assert report.text_found == 3
    assert report.failures_by_reason == {"tag": 1, "missing": 1}
    assert [f.case.expected for f in report.failures] == ["食べる", "飲む"]
    assert report.transforms_used["-た"] == 2
    assert report.transforms_used["causative"] == 1


def test_summary(ja):
    report = check_coverage(ja, [
        CoverageCase("食べました", "食べる", "v1"),
        CoverageCase("食べました", "飲む"),
    ])
    text = report.summary()
    assert "Coverage Report (ja)" in text
    assert "Passed:             1  (50.0%)" in text
    assert "expected 飲む (missing)" in text


def test_summary_empty():
    assert CoverageReport().summary() == "No cases checked."


def test_write_mismatches(tmp_path, ja):
    report = check_coverage(ja, [
        CoverageCase("食べました", "食べる", "v1", ("-た",)),
        CoverageCase("walked", "walk"),
    ])
    out = tmp_path / "mismatches.tsv"
    report.write_mismatches(out)

    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f, delimiter="\t"))
    assert rows[0] == ["reason", "surface", "expected", "tag", "chain", "candidates"]
    assert rows[1][:5] == ["chain", "食べました", "食べる", "v1", "-た"]
    assert "-ます → -た" in rows[1][5]
    assert rows[2] == ["missing", "walked", "walk", "", "", ""]
