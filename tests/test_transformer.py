"""Tests for the single-language search (transformer.py)."""

import logging

import pytest

from conftest import build
from deinflector.conditions import ANY_MASK
from deinflector.descriptor import rewrite_inflection, suffix_inflection, transform
from deinflector.errors import ConfigurationError
from deinflector.logging_config import TRACE
from deinflector.transformer import DeinflectionResult, InflectionRule, LanguageTransformer


def _texts(results) -> list[str]:
    return [r.text for r in results]


def _find(results, text, chain=None):
    for r in results:
        if r.text == text and (chain is None or r.transform_names == chain):
            return r
    return None


# ── Identity and bounds ───────────────────────────────────────────────────────

@pytest.mark.parametrize("text", ["", "x", "walked", "書かせられた", "zzz"])
def test_identity_is_first_result(ja, text):
    first = ja.transform(text)[0]
    assert first == DeinflectionResult(text, ANY_MASK, ())
    assert first.is_identity


def test_no_rule_applies_returns_identity_only(en):
    assert en.transform("xyz") == [DeinflectionResult("xyz", ANY_MASK, ())]


@pytest.mark.parametrize("text", ["書かせられた", "食べさせられませんでした", "読まなかった", "来い"])
def test_results_never_longer_than_input_ja(ja, text):
    for r in ja.transform(text):
        assert len(r.text) <= len(text)
        assert r.text


@pytest.mark.parametrize("text", ["walked", "happiest", "stopping", "humbly", "cats'"])
def test_results_never_longer_than_input_en(en, text):
    for r in en.transform(text):
        assert len(r.text) <= len(text)


# ── Termination ───────────────────────────────────────────────────────────────

def test_rewrite_cycle_terminates():
    lt = build([
        transform("swap", [
            rewrite_inflection("a", "b"),
            rewrite_inflection("b", "a"),
        ]),
    ])
    assert _texts(lt.transform("xa")) == ["xa", "xb", "xa"]


def test_rewrite_cycle_across_transforms_terminates():
    lt = build([
        transform("ab", [rewrite_inflection("a", "b")]),
        transform("ba", [rewrite_inflection("b", "a")]),
    ])
    assert _texts(lt.transform("xa")) == ["xa", "xb", "xa"]


def test_self_rewrite_applies_once():
    lt = build([transform("noop", [rewrite_inflection("a", "a")])])
    assert _texts(lt.transform("xa")) == ["xa", "xa"]


def test_rewrite_allowed_again_after_shortening():
    lt = build([
        transform("t0", [rewrite_inflection("b", "a")]),
        transform("t1", [suffix_inflection("ca", "b")]),
    ])
    assert _texts(lt.transform("cb")) == ["cb", "ca", "b", "a"]


def test_max_results_caps_fan_out(caplog):
    lt = build(
        [transform(f"strip{i}", [suffix_inflection("a", "")]) for i in range(3)],
        max_results=50,
    )
    with caplog.at_level(logging.WARNING, logger="deinflector.transformer"):
        results = lt.transform("a" * 12)
    assert len(results) == 50
    assert results[0].is_identity
    assert any("max_results=50" in rec.getMessage() for rec in caplog.records)


@pytest.mark.parametrize("bad", [0, -1, True, "10", 2.5])
def test_max_results_must_be_positive_int(bad):
    with pytest.raises(ConfigurationError, match="max_results"):
        build([transform("strip", [suffix_inflection("s", "")])], max_results=bad)


def test_max_results_of_one_keeps_identity_only():
    lt = build([transform("strip", [suffix_inflection("s", "")])], max_results=1)
    assert _texts(lt.transform("cats")) == ["cats"]


def test_under_cap_no_warning(caplog, en):
    with caplog.at_level(logging.WARNING, logger="deinflector.transformer"):
        en.transform("walked")
    assert not caplog.records


# ── Ordering ──────────────────────────────────────────────────────────────────

def test_deterministic(ja):
    a = ja.transform("食べさせられませんでした")
    b = ja.transform("食べさせられませんでした")
    assert a == b
    assert [r.to_dict(ja.registry) for r in a] == [r.to_dict(ja.registry) for r in b]


def test_breadth_first_order(ja):
    depths = [len(r.trace) for r in ja.transform("書かせられた")]
    assert depths == sorted(depths)


def test_transform_then_rule_order():
    lt = build([
        transform("first", [
            suffix_inflection("ing", "", [], []),
            suffix_inflection("ing", "e", [], []),
        ]),
        transform("second", [suffix_inflection("g", "", [], [])]),
    ])
    assert _texts(lt.transform("making"))[:4] == ["making", "mak", "make", "makin"]


def test_duplicates_from_different_traces_kept():
    lt = build([
        transform("one", [suffix_inflection("s", "")]),
        transform("two", [suffix_inflection("s", "")]),
    ])
    results = lt.transform("cats")
    cats = [r for r in results if r.text == "cat"]
    assert [r.transform_names for r in cats] == [["one"], ["two"]]


# ── Conditions along a chain ──────────────────────────────────────────────────

def test_chain_validity(ja):
    """Replaying each trace from the surface form reproduces the result."""
    for result in ja.transform("食べさせられませんでした"):
        text, mask = "食べさせられませんでした", ANY_MASK
        for frame in result.trace:
            assert frame.text == text
            rule = ja.get_transform(frame.transform_id).rules[frame.rule_index]
            step = rule.apply(text, mask)
            assert step is not None
            text, mask = step
        assert (text, mask) == (result.text, result.conditions)


def test_intermediate_tag_blocks_incompatible_rule(ja):
    results = ja.transform("食べませんでした")
    assert _find(results, "食べる", ["-た", "negative", "-ます"]) is not None
    # でした leaves a -ません form, which the -ん rules (needing -ん) must not touch
    assert not [r for r in results if r.transform_names[:2] == ["-た", "-ん"]]


def test_incompatible_condition_blocks_rule():
    lt = build([
        transform("to-a", [suffix_inflection("x", "", [], ["a"])]),
        transform("needs-b", [suffix_inflection("y", "", ["b"], ["b"])]),
    ])
    # "zy" carries only "a", so the b-only rule must not fire
    assert _texts(lt.transform("zyx")) == ["zyx", "zy"]


def test_ambiguous_suffix_yields_one_branch_per_constraint():
    lt = build([
        transform("strip", [
            suffix_inflection("s", "", ["a"], ["a"]),
            suffix_inflection("s", "", ["b"], ["b"]),
        ]),
    ])
    results = lt.transform("cats")
    branches = [r for r in results if not r.is_identity]
    assert len(branches) == 2
    assert {r.text for r in branches} == {"cat"}
    assert branches[0].conditions != branches[1].conditions
    assert [r.tags(lt.registry) for r in branches] == [("a",), ("b",)]
    assert [r.trace[0].rule_index for r in branches] == [0, 1]
    assert branches[0].transform_names == branches[1].transform_names == ["strip"]


# ── Scenarios ─────────────────────────────────────────────────────────────────

def test_ja_causative_passive_past(ja):
    results = ja.transform("書かせられた")
    r = _find(results, "書く", ["-た", "potential or passive", "causative"])
    assert r is not None
    assert r.inflection_chain == ["causative", "potential or passive", "-た"]
    assert "v5" in r.tags(ja.registry)
    assert results[0].text == "書かせられた"


def test_ja_polite_past(ja):
    r = _find(ja.transform("食べました"), "食べる", ["-た", "-ます"])
    assert r is not None
    assert "v1" in r.tags(ja.registry)


def test_ja_negative_past(ja):
    r = _find(ja.transform("読まなかった"), "読む", ["-た", "negative"])
    assert r is not None
    assert "v5" in r.tags(ja.registry)


def test_ja_irregular_past(ja):
    r = _find(ja.transform("行った"), "行く", ["-た"])
    assert r is not None
    assert "v5" in r.tags(ja.registry)
    assert r.trace[0].to_dict() == {"transform": "-た", "suffix_in": "行った", "suffix_out": "行く"}


def test_ja_progressive_then_past(ja):
    r = _find(ja.transform("食べていた"), "食べる", ["-た", "-いる", "-て"])
    assert r is not None
    assert r.inflection_chain == ["-て", "-いる", "-た"]


def test_ja_rewrite_imperative(ja):
    r = _find(ja.transform("来い"), "来る", ["imperative"])
    assert r is not None
    assert r.tags(ja.registry) == ("vk",)


def test_en_simple_past(en):
    results = en.transform("walked")
    assert results[0].is_identity
    r = _find(results, "walk", ["past"])
    assert r is not None
    assert "v" in r.tags(en.registry)
    assert r.trace[0].to_dict() == {"transform": "past", "suffix_in": "ed", "suffix_out": ""}


def test_en_doubled_consonant(en):
    assert _find(en.transform("stopped"), "stop", ["past"]) is not None


def test_en_adverb_rewrite(en):
    r = _find(en.transform("humbly"), "humble", ["adverb"])
    assert r is not None
    assert r.tags(en.registry) == ("adj",)


# ── Cross-language isolation ──────────────────────────────────────────────────

def test_languages_do_not_share_transforms(ja, en):
    ja_names = {t.name for t in ja.transforms}
    for r in en.transform("walked") + en.transform("happiest"):
        assert not set(r.transform_names) & (ja_names - {t.name for t in en.transforms})
    assert en.transform("書かせられた") == [DeinflectionResult("書かせられた", ANY_MASK, ())]
    assert ja.transform("walked") == [DeinflectionResult("walked", ANY_MASK, ())]


def test_registries_are_independent(ja, en):
    assert "v5" in ja.registry and "v5" not in en.registry
    assert "adv" in en.registry and "adv" not in ja.registry


# ── Result helpers ────────────────────────────────────────────────────────────

def test_result_to_dict(en):
    r = _find(en.transform("walked"), "walk", ["past"])
    d = r.to_dict(en.registry)
    assert d["text"] == "walk"
    assert d["tags"] == ["v"]
    assert d["trace"] == [{"transform": "past", "suffix_in": "ed", "suffix_out": ""}]


def test_identity_to_dict_lists_every_tag(en):
    d = en.transform("xyz")[0].to_dict(en.registry)
    assert d == {"text": "xyz", "tags": list(en.registry), "trace": []}


# ── Helpers ───────────────────────────────────────────────────────────────────

def test_conditions_match():
    assert LanguageTransformer.conditions_match(0b011, 0b010)
    assert not LanguageTransformer.conditions_match(0b001, 0b010)
    assert LanguageTransformer.conditions_match(ANY_MASK, 0b010)
    assert LanguageTransformer.conditions_match(0b100, ANY_MASK)


def test_flags_passthroughs(ja):
    assert ja.flags_for(["v1", "nope"]) == ja.registry.mask("v1")
    assert ja.part_of_speech_flags(["v5", "-た"]) == ja.registry.mask("v5")


def test_user_facing_inflection_rules(ja):
    rules = ja.get_user_facing_inflection_rules(["-た", "no-such-transform"])
    assert rules[0].name == "-た"
    assert rules[0].description
    assert rules[1] == InflectionRule(name="no-such-transform")


def test_get_transform(ja):
    assert ja.get_transform("causative").name == "causative"
    assert ja.get_transform("nope") is None


def test_summary(ja):
    text = ja.summary()
    assert "Language:       ja" in text
    assert f"Transforms:     {len(ja.transforms)}" in text


def test_trace_logging(caplog):
    lt = build([transform("strip", [suffix_inflection("s", "")])])
    with caplog.at_level(TRACE, logger="deinflector.transformer"):
        lt.transform("cats")
    messages = [rec.getMessage() for rec in caplog.records if rec.levelno == TRACE]
    assert messages[0].startswith("node 0: 'cats'")
    assert len(messages) == 2


def test_from_descriptor_is_immutable(en):
    with pytest.raises(AttributeError):
        en.language = "xx"
