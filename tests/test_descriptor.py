"""Tests for language tables and their loaders (descriptor.py)."""

import json

import pytest

from deinflector.descriptor import (
    LanguageDescriptor,
    RuleDescriptor,
    doubled_consonant_inflections,
    irregular_verb_inflections,
    rewrite_inflection,
    suffix_inflection,
    transform,
)
from deinflector.errors import ConfigurationError
from deinflector.transformer import LanguageTransformer


# ── In-memory fixture ─────────────────────────────────────────────────────────

TABLE = {
    "language": "xx",
    "name": "Example",
    "example_text": "walked",
    "conditions": {
        "v": {"name": "Verb", "is_dictionary_form": True},
        "-t": {"name": "past stem"},
    },
    "transforms": [
        {
            "name": "past",
            "description": "Simple past",
            "rules": [
                {"suffix_in": "ed", "suffix_out": "", "conditions_in": ["-t"], "conditions_out": ["v"]},
                {"suffix_in": "ied", "suffix_out": "y", "constraints": [[["-t"], ["v"]]]},
                {"suffix_in": "d", "min_stem": 2},
            ],
        },
    ],
}

TOML_TABLE = """
language = "xx"
name = "Example"

[conditions.v]
name = "Verb"
is_dictionary_form = true

[transforms.past]
name = "past"
rules = [
  { suffix_in = "ed", suffix_out = "", conditions_in = ["v"], conditions_out = ["v"] },
  { suffix_in = "ie", suffix_out = "ei", rewrite = true },
]
"""


# ── from_dict ─────────────────────────────────────────────────────────────────

def test_from_dict_basic():
    desc = LanguageDescriptor.from_dict(TABLE)
    assert desc.language == "xx"
    assert desc.name == "Example"
    assert desc.example_text == "walked"
    assert list(desc.conditions) == ["v", "-t"]
    assert [t.name for t in desc.transforms] == ["past"]
    assert desc.transforms[0].description == "Simple past"
    assert desc.rule_count == 3


def test_from_dict_conditions_shorthand():
    rule = LanguageDescriptor.from_dict(TABLE).transforms[0].rules[0]
    assert rule == RuleDescriptor("ed", "", constraints=((("-t",), ("v",)),))


def test_from_dict_constraints_list():
    rule = LanguageDescriptor.from_dict(TABLE).transforms[0].rules[1]
    assert rule.constraints == ((("-t",), ("v",)),)


def test_from_dict_rule_defaults():
    rule = LanguageDescriptor.from_dict(TABLE).transforms[0].rules[2]
    assert rule.suffix_out == ""
    assert rule.constraints == ()
    assert rule.min_stem == 2
    assert rule.rewrite is False


def test_from_dict_id_defaults_to_name():
    desc = LanguageDescriptor.from_dict(TABLE)
    assert desc.transforms[0].id == "past"


def test_from_dict_transform_mapping():
    raw = dict(TABLE, transforms={"en.past": {"name": "past", "rules": []}})
    desc = LanguageDescriptor.from_dict(raw)
    assert desc.transforms[0].id == "en.past"
    assert desc.transforms[0].name == "past"


def test_from_dict_name_defaults_to_language():
    desc = LanguageDescriptor.from_dict({"language": "xx"})
    assert desc.name == "xx"
    assert desc.transforms == []


def test_from_dict_missing_language():
    with pytest.raises(ConfigurationError, match="language"):
        LanguageDescriptor.from_dict({"name": "No code"})


def test_from_dict_error_is_still_a_value_error():
    with pytest.raises(ValueError):
        LanguageDescriptor.from_dict({"name": "No code"})


def test_from_dict_transform_without_name():
    raw = dict(TABLE, transforms=[{"rules": []}])
    with pytest.raises(ConfigurationError, match="'name'"):
        LanguageDescriptor.from_dict(raw)


def test_from_dict_rule_without_suffix_in():
    raw = dict(TABLE, transforms=[{"name": "past", "rules": [{"suffix_out": "e"}]}])
    with pytest.raises(ConfigurationError, match="'suffix_in'"):
        LanguageDescriptor.from_dict(raw)


def test_from_dict_not_a_table():
    with pytest.raises(ConfigurationError, match="expected a table"):
        LanguageDescriptor.from_dict(["xx"])


def test_to_dict_reloads_to_equal_descriptor():
    desc = LanguageDescriptor.from_dict(TABLE)
    assert LanguageDescriptor.from_dict(desc.to_dict()) == desc


# ── from_file ─────────────────────────────────────────────────────────────────

def test_from_file_json(tmp_path):
    path = tmp_path / "xx.json"
    path.write_text(json.dumps(TABLE, ensure_ascii=False), encoding="utf-8")
    desc = LanguageDescriptor.from_file(path)
    assert desc == LanguageDescriptor.from_dict(TABLE)


def test_from_file_toml(tmp_path):
    path = tmp_path / "xx.toml"
    path.write_text(TOML_TABLE, encoding="utf-8")
    desc = LanguageDescriptor.from_file(path)
    assert desc.language == "xx"
    assert desc.transforms[0].id == "past"
    assert desc.transforms[0].rules[1].rewrite is True


def test_from_file_table_builds(tmp_path):
    path = tmp_path / "xx.toml"
    path.write_text(TOML_TABLE, encoding="utf-8")
    lt = LanguageTransformer.from_descriptor(LanguageDescriptor.from_file(path))
    texts = [r.text for r in lt.transform("walked")]
    assert texts == ["walked", "walk"]


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        LanguageDescriptor.from_file(tmp_path / "nope.json")


def test_from_file_bad_json(tmp_path):
    path = tmp_path / "xx.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="cannot parse"):
        LanguageDescriptor.from_file(path)


def test_from_file_bad_toml(tmp_path):
    path = tmp_path / "xx.toml"
    path.write_text("language = \n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="cannot parse"):
        LanguageDescriptor.from_file(path)


def test_from_file_error_names_the_file(tmp_path):
    path = tmp_path / "nolang.json"
    path.write_text(json.dumps({"name": "No code"}), encoding="utf-8")
    with pytest.raises(ConfigurationError, match="nolang.json"):
        LanguageDescriptor.from_file(path)


# ── Authoring helpers ─────────────────────────────────────────────────────────

def test_suffix_inflection():
    rule = suffix_inflection("ies", "y", ["v"], ["v"])
    assert rule == RuleDescriptor("ies", "y", constraints=((("v",), ("v",)),))


def test_rewrite_inflection_marks_rewrite():
    assert rewrite_inflection("ta", "ru", ["-ta"], ["v1"]).rewrite


def test_doubled_consonant_inflections():
    rules = doubled_consonant_inflections("bt", "ed", ["v"], ["v"])
    assert [(r.suffix_in, r.suffix_out) for r in rules] == [("bbed", "b"), ("tted", "t")]
    assert all(r.constraints == ((("v",), ("v",)),) for r in rules)


def test_irregular_verb_inflections():
    rules = irregular_verb_inflections("た", ["-た"], ["v5"])
    pairs = [(r.suffix_in, r.suffix_out) for r in rules]
    assert ("行った", "行く") in pairs
    assert ("いった", "いく") in pairs
    assert ("問うた", "問う") in pairs
    assert ("のたもうた", "のたまう") in pairs
    assert len(rules) == 4 + 12 + 3
    assert all(r.constraints == ((("-た",), ("v5",)),) for r in rules)


def test_irregular_verb_inflections_shorten():
    for suffix in ("て", "た", "たら", "たり"):
        for rule in irregular_verb_inflections(suffix):
            assert len(rule.suffix_out) < len(rule.suffix_in)
            assert not rule.rewrite


def test_transform_helper():
    t = transform("past", [suffix_inflection("ed", "")], description="Past")
    assert t.id == "past"
    assert t.description == "Past"
    assert isinstance(t.rules, tuple)
