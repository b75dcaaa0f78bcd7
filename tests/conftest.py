"""Shared test fixtures."""

import pytest

from deinflector.descriptor import LanguageDescriptor, suffix_inflection, transform
from deinflector.engine import MultiLanguageTransformer
from deinflector.languages import get_descriptor
from deinflector.transformer import LanguageTransformer


def make_descriptor(transforms, conditions=None, language="xx") -> LanguageDescriptor:
    """Small in-memory table; conditions default to two leaf tags a, b."""
    if conditions is None:
        conditions = {"a": {"name": "A"}, "b": {"name": "B"}}
    return LanguageDescriptor(
        language=language,
        name=language.upper(),
        conditions=conditions,
        transforms=list(transforms),
    )


def build(transforms, conditions=None, language="xx", **kwargs) -> LanguageTransformer:
    return LanguageTransformer.from_descriptor(
        make_descriptor(transforms, conditions, language), **kwargs,
    )


@pytest.fixture(scope="session")
def ja() -> LanguageTransformer:
    return LanguageTransformer.from_descriptor(get_descriptor("ja"))


@pytest.fixture(scope="session")
def en() -> LanguageTransformer:
    return LanguageTransformer.from_descriptor(get_descriptor("en"))


@pytest.fixture(scope="session")
def es() -> LanguageTransformer:
    return LanguageTransformer.from_descriptor(get_descriptor("es"))


@pytest.fixture
def mlt() -> MultiLanguageTransformer:
    return MultiLanguageTransformer.default()


@pytest.fixture
def toy_descriptor() -> LanguageDescriptor:
    """Verb-ish toy language: 'xed' past, 'xing' progressive."""
    return make_descriptor(
        [
            transform("past", [suffix_inflection("ed", "", ["-ed"], ["v"])]),
            transform("prog", [suffix_inflection("ing", "", ["-ing"], ["v"])]),
        ],
        conditions={
            "v": {"name": "Verb", "is_dictionary_form": True},
            "-ed": {"name": "past"},
            "-ing": {"name": "progressive"},
        },
        language="toy",
    )
