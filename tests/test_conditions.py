"""Tests for the condition registry (conditions.py)."""

import pytest

from deinflector.conditions import ANY_MASK, MASK_WIDTH, ConditionRegistry
from deinflector.errors import (
    ConditionCycleError,
    ConfigurationError,
    TooManyConditionsError,
    UnknownTagError,
)


# ── Fixture ───────────────────────────────────────────────────────────────────

RAW = {
    "v": {"name": "Verb", "sub_conditions": ["v1", "v5"]},
    "v1": {"name": "Ichidan verb", "is_dictionary_form": True},
    "v5": {"name": "Godan verb", "is_dictionary_form": True},
    "adj": {"name": "Adjective", "is_dictionary_form": True},
    "-te": {"name": "te form"},
}


@pytest.fixture
def reg() -> ConditionRegistry:
    return ConditionRegistry.build(RAW)


# ── Construction ──────────────────────────────────────────────────────────────

def test_leaf_bits_follow_declaration_order(reg):
    assert reg.bit("v1") == 0
    assert reg.bit("v5") == 1
    assert reg.bit("adj") == 2
    assert reg.bit("-te") == 3


def test_super_category_is_union_of_members(reg):
    assert reg.mask("v") == reg.mask("v1") | reg.mask("v5")


def test_nested_super_categories_resolve():
    reg = ConditionRegistry.build({
        "v": {"sub_conditions": ["v5"]},  # declared before its member group
        "v5": {"sub_conditions": ["v5d", "v5s"]},
        "v5d": {},
        "v5s": {"sub_conditions": ["v5ss", "v5sp"]},
        "v5ss": {},
        "v5sp": {},
    })
    assert reg.mask("v5s") == reg.mask("v5ss") | reg.mask("v5sp")
    assert reg.mask("v") == reg.mask("v5d") | reg.mask("v5ss") | reg.mask("v5sp")


def test_explicit_bit_is_kept_and_skipped_by_auto_assign():
    reg = ConditionRegistry.build({"a": {}, "b": {"bit": 1}, "c": {}})
    assert reg.bit("a") == 0
    assert reg.bit("b") == 1
    assert reg.bit("c") == 2


def test_explicit_bit_declared_later_is_reserved_first():
    reg = ConditionRegistry.build({"a": {}, "b": {"bit": 0}})
    assert reg.bit("a") == 1
    assert reg.bit("b") == 0


def test_explicit_bits_leave_gaps_for_auto_assign():
    reg = ConditionRegistry.build({"a": {}, "b": {}, "c": {"bit": 1}, "d": {"bit": 0}})
    assert [reg.bit(t) for t in "abcd"] == [2, 3, 1, 0]


def test_duplicate_explicit_bit_rejected():
    with pytest.raises(ConfigurationError):
        ConditionRegistry.build({"a": {"bit": 3}, "b": {"bit": 3}})


def test_bit_out_of_range_rejected():
    with pytest.raises(TooManyConditionsError):
        ConditionRegistry.build({"a": {"bit": MASK_WIDTH}})


def test_too_many_leaf_conditions_rejected():
    raw = {f"t{i}": {} for i in range(MASK_WIDTH + 1)}
    with pytest.raises(TooManyConditionsError):
        ConditionRegistry.build(raw)


def test_exactly_mask_width_leaves_fit():
    raw = {f"t{i}": {} for i in range(MASK_WIDTH)}
    reg = ConditionRegistry.build(raw)
    assert reg.bit(f"t{MASK_WIDTH - 1}") == MASK_WIDTH - 1


def test_unknown_sub_condition_rejected():
    with pytest.raises(UnknownTagError) as exc:
        ConditionRegistry.build({"v": {"sub_conditions": ["nope"]}})
    assert exc.value.tag == "nope"


def test_sub_condition_cycle_rejected():
    with pytest.raises(ConditionCycleError) as exc:
        ConditionRegistry.build({
            "x": {"sub_conditions": ["y"]},
            "y": {"sub_conditions": ["x"]},
        })
    assert set(exc.value.tags) == {"x", "y"}


def test_configuration_errors_are_value_errors():
    with pytest.raises(ValueError):
        ConditionRegistry.build({"v": {"sub_conditions": ["nope"]}})


def test_registry_is_read_only(reg):
    with pytest.raises(TypeError):
        reg.conditions["new"] = reg.conditions["v1"]


# ── Lookup ────────────────────────────────────────────────────────────────────

def test_mask_unknown_tag_raises(reg):
    with pytest.raises(UnknownTagError):
        reg.mask("nope")


def test_mask_for_unions_tags(reg):
    assert reg.mask_for(["v1", "adj"]) == reg.mask("v1") | reg.mask("adj")


def test_mask_for_empty_is_any(reg):
    assert reg.mask_for([]) == ANY_MASK


def test_mask_for_is_strict(reg):
    with pytest.raises(UnknownTagError):
        reg.mask_for(["v1", "nope"])


def test_flags_for_ignores_unknown(reg):
    assert reg.flags_for(["v1", "nope"]) == reg.mask("v1")
    assert reg.flags_for([]) == 0


def test_part_of_speech_flags_only_dictionary_forms(reg):
    assert reg.part_of_speech_flags(["v1", "-te"]) == reg.mask("v1")
    assert reg.part_of_speech_flags(["v"]) == 0  # not itself a dictionary form


def test_bit_of_super_category_rejected(reg):
    with pytest.raises(ConfigurationError):
        reg.bit("v")


def test_contains_and_len(reg):
    assert "v1" in reg
    assert "nope" not in reg
    assert len(reg) == len(RAW)
    assert list(reg) == list(RAW)


def test_describe(reg):
    assert reg.describe("v5") == "Godan verb"


def test_describe_defaults_to_tag():
    reg = ConditionRegistry.build({"a": {}})
    assert reg.describe("a") == "a"


# ── Resolve ───────────────────────────────────────────────────────────────────

def test_resolve_single_leaf(reg):
    assert reg.resolve(reg.mask("v1")) == ("v1",)


def test_resolve_includes_fully_covered_super_category(reg):
    assert reg.resolve(reg.mask("v")) == ("v", "v1", "v5")


def test_resolve_any_is_every_tag(reg):
    assert reg.resolve(ANY_MASK) == tuple(RAW)


def test_resolve_zero_is_empty(reg):
    assert reg.resolve(0) == ()


def test_summary(reg):
    assert "4 leaf, 1 group" in reg.summary()
