"""
English deinflection table.

Regular noun, verb and adjective suffixes.  Irregular stems (went, ran)
belong in the dictionary, not here.
"""

from deinflector.descriptor import (
    LanguageDescriptor,
    doubled_consonant_inflections as doubled,
    rewrite_inflection as rewrite,
    suffix_inflection as suffix,
    transform,
)

CONDITIONS = {
    "v": {"name": "Verb", "is_dictionary_form": True},
    "n": {"name": "Noun", "is_dictionary_form": True, "sub_conditions": ["np", "ns"]},
    "np": {"name": "Noun plural", "is_dictionary_form": True},
    "ns": {"name": "Noun singular", "is_dictionary_form": True},
    "adj": {"name": "Adjective", "is_dictionary_form": True},
    "adv": {"name": "Adverb", "is_dictionary_form": True},
}

TRANSFORMS = [
    transform("plural", [
        suffix("s", "", ["np"], ["ns"]),
    ], description="Plural form of a noun"),
    transform("possessive", [
        suffix("'s", "", ["n"], ["n"]),
        suffix("s'", "s", ["n"], ["n"]),
    ], description="Possessive form of a noun"),
    transform("past", [
        suffix("ed", "", ["v"], ["v"]),  # walked
        suffix("ed", "e", ["v"], ["v"]),  # hoped
        suffix("ied", "y", ["v"], ["v"]),  # tried
        suffix("cked", "c", ["v"], ["v"]),  # frolicked
        suffix("laid", "lay", ["v"], ["v"]),
        suffix("paid", "pay", ["v"], ["v"]),
        suffix("said", "say", ["v"], ["v"]),
        *doubled("bdgklmnprstz", "ed", ["v"], ["v"]),  # stopped
    ], description="Simple past tense of a verb"),
    transform("ing", [
        suffix("ing", "", ["v"], ["v"]),  # walking
        suffix("ing", "e", ["v"], ["v"]),  # driving
        suffix("ying", "ie", ["v"], ["v"]),  # lying
        suffix("cking", "c", ["v"], ["v"]),  # panicking
        *doubled("bdgklmnprstz", "ing", ["v"], ["v"]),  # running
    ], description="Present participle of a verb"),
    transform("3rd pers. sing. pres", [
        suffix("s", "", ["v"], ["v"]),  # walks
        suffix("es", "", ["v"], ["v"]),  # teaches
        suffix("ies", "y", ["v"], ["v"]),  # tries
    ], description="Third person singular present tense of a verb"),
    transform("archaic", [
        rewrite("'d", "ed", ["v"], ["v"]),
    ], description="Archaic form of a word"),
    transform("adverb", [
        suffix("ly", "", ["adv"], ["adj"]),  # quickly
        suffix("ily", "y", ["adv"], ["adj"]),  # happily
        rewrite("ly", "le", ["adv"], ["adj"]),  # humbly
    ], description="Adverb form of an adjective"),
    transform("comparative", [
        suffix("er", "", ["adj"], ["adj"]),  # faster
        suffix("er", "e", ["adj"], ["adj"]),  # nicer
        suffix("ier", "y", ["adj"], ["adj"]),  # happier
        *doubled("bdgmnt", "er", ["adj"], ["adj"]),  # bigger
    ], description="Comparative form of an adjective"),
    transform("superlative", [
        suffix("est", "", ["adj"], ["adj"]),  # fastest
        suffix("est", "e", ["adj"], ["adj"]),  # nicest
        suffix("iest", "y", ["adj"], ["adj"]),  # happiest
        *doubled("bdgmnt", "est", ["adj"], ["adj"]),  # biggest
    ], description="Superlative form of an adjective"),
    transform("-y", [
        suffix("y", "", ["adj"], ["n", "v"]),  # dirty, pushy
        rewrite("y", "e", ["adj"], ["n", "v"]),  # hazy
        *doubled("glmnprst", "y", ["adj"], ["n", "v"]),  # baggy
    ], description="Adjective formed from a verb or noun"),
    transform("-able", [
        suffix("able", "", ["adj"], ["v"]),
        suffix("able", "e", ["adj"], ["v"]),
        suffix("iable", "y", ["adj"], ["v"]),
        *doubled("bdgklmnprstz", "able", ["adj"], ["v"]),
    ], description="Adjective formed from a verb"),
]

DESCRIPTOR = LanguageDescriptor(
    language="en",
    name="English",
    conditions=CONDITIONS,
    transforms=TRANSFORMS,
    example_text="walked",
)
