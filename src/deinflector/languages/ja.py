"""
Japanese deinflection table.

Verb and i-adjective conjugations, written as suffix rules over kana, plus
the common contractions, slang sound changes and kansai-ben forms.
Intermediate tags (-て, -た, -ます, ...) let chains such as
食べさせられませんでした resolve one suffix at a time.

Rules that keep the length (た → る, ん → る) are rewrites; rules that
would lengthen the word (や → えば, 食べ → 食べる) are left out.
"""

from deinflector.descriptor import (
    LanguageDescriptor,
    irregular_verb_inflections as irregular,
    rewrite_inflection as rewrite,
    suffix_inflection as suffix,
    transform,
)

CONDITIONS = {
    "v": {"name": "Verb", "sub_conditions": ["v1", "v5", "vk", "vs", "vz"]},
    "v1": {"name": "Ichidan verb", "is_dictionary_form": True, "sub_conditions": ["v1d", "v1p"]},
    "v1d": {"name": "Ichidan verb, dictionary form"},
    "v1p": {"name": "Ichidan verb, progressive or perfect form"},
    "v5": {"name": "Godan verb", "is_dictionary_form": True, "sub_conditions": ["v5d", "v5s"]},
    "v5d": {"name": "Godan verb, dictionary form"},
    "v5s": {"name": "Godan verb, short causative form", "sub_conditions": ["v5ss", "v5sp"]},
    "v5ss": {"name": "Godan verb, short causative form having さす ending"},
    "v5sp": {"name": "Godan verb, short causative form not having さす ending"},
    "vk": {"name": "Kuru verb", "is_dictionary_form": True},
    "vs": {"name": "Suru verb", "is_dictionary_form": True},
    "vz": {"name": "Zuru verb", "is_dictionary_form": True},
    "adj-i": {"name": "Adjective with i ending", "is_dictionary_form": True},
    "-ます": {"name": "Polite -ます ending"},
    "-ません": {"name": "Polite negative -ません ending"},
    "-て": {"name": "Intermediate -て endings for progressive or perfect tense"},
    "-ば": {"name": "Intermediate -ば endings for conditional contraction"},
    "-く": {"name": "Intermediate -く endings for adverbs"},
    "-た": {"name": "-た form ending"},
    "-ん": {"name": "-ん negative ending"},
    "-なさい": {"name": "Intermediate -なさい ending (polite imperative)"},
    "-ゃ": {"name": "Intermediate -や ending (conditional contraction)"},
}

TRANSFORMS = [
    transform("-ば", [
        suffix("ければ", "い", ["-ば"], ["adj-i"]),
        suffix("えば", "う", ["-ば"], ["v5"]),
        suffix("けば", "く", ["-ば"], ["v5"]),
        suffix("げば", "ぐ", ["-ば"], ["v5"]),
        suffix("せば", "す", ["-ば"], ["v5"]),
        suffix("てば", "つ", ["-ば"], ["v5"]),
        suffix("ねば", "ぬ", ["-ば"], ["v5"]),
        suffix("べば", "ぶ", ["-ば"], ["v5"]),
        suffix("めば", "む", ["-ば"], ["v5"]),
        suffix("れば", "る", ["-ば"], ["v1", "v5", "vk", "vs", "vz"]),
        suffix("れば", "", ["-ば"], ["-ます"]),
    ], description=(
        "Conditional form; shows that the previous stated condition's establishment "
        "is the condition for the latter stated condition to occur.\n"
        "Usage: Attach ば to the hypothetical form (仮定形) of verbs and i-adjectives."
    )),
    transform("-ゃ", [
        rewrite("けりゃ", "ければ", ["-ゃ"], ["-ば"]),
        rewrite("きゃ", "けば", ["-ゃ"], ["-ば"]),
        rewrite("ぎゃ", "げば", ["-ゃ"], ["-ば"]),
        rewrite("しゃ", "せば", ["-ゃ"], ["-ば"]),
        rewrite("ちゃ", "てば", ["-ゃ"], ["-ば"]),
        rewrite("にゃ", "ねば", ["-ゃ"], ["-ば"]),
        rewrite("びゃ", "べば", ["-ゃ"], ["-ば"]),
        rewrite("みゃ", "めば", ["-ゃ"], ["-ば"]),
        rewrite("りゃ", "れば", ["-ゃ"], ["-ば"]),
    ], description="Contraction of -ば."),
    transform("-ちゃ", [
        suffix("ちゃ", "る", ["v5"], ["v1"]),
        suffix("いじゃ", "ぐ", ["v5"], ["v5"]),
        suffix("いちゃ", "く", ["v5"], ["v5"]),
        suffix("しちゃ", "す", ["v5"], ["v5"]),
        suffix("っちゃ", "う", ["v5"], ["v5"]),
        suffix("っちゃ", "く", ["v5"], ["v5"]),
        suffix("っちゃ", "つ", ["v5"], ["v5"]),
        suffix("っちゃ", "る", ["v5"], ["v5"]),
        suffix("んじゃ", "ぬ", ["v5"], ["v5"]),
        suffix("んじゃ", "ぶ", ["v5"], ["v5"]),
        suffix("んじゃ", "む", ["v5"], ["v5"]),
        suffix("じちゃ", "ずる", ["v5"], ["vz"]),
        suffix("しちゃ", "する", ["v5"], ["vs"]),
        suffix("為ちゃ", "為る", ["v5"], ["vs"]),
        suffix("きちゃ", "くる", ["v5"], ["vk"]),
        suffix("来ちゃ", "来る", ["v5"], ["vk"]),
        suffix("來ちゃ", "來る", ["v5"], ["vk"]),
    ], description=(
        "Contraction of ～ては.\n"
        "Explains how something always happens under the condition that it marks, "
        "or is used in \"must not\" patterns like ～てはいけない.\n"
        "Usage: Attach は after the て-form of verbs, contract ては into ちゃ."
    )),
    transform("-ちゃう", [
        suffix("ちゃう", "る", ["v5"], ["v1"]),
        suffix("いじゃう", "ぐ", ["v5"], ["v5"]),
        suffix("いちゃう", "く", ["v5"], ["v5"]),
        suffix("しちゃう", "す", ["v5"], ["v5"]),
        suffix("っちゃう", "う", ["v5"], ["v5"]),
        suffix("っちゃう", "く", ["v5"], ["v5"]),
        suffix("っちゃう", "つ", ["v5"], ["v5"]),
        suffix("っちゃう", "る", ["v5"], ["v5"]),
        suffix("んじゃう", "ぬ", ["v5"], ["v5"]),
        suffix("んじゃう", "ぶ", ["v5"], ["v5"]),
        suffix("んじゃう", "む", ["v5"], ["v5"]),
        suffix("じちゃう", "ずる", ["v5"], ["vz"]),
        suffix("しちゃう", "する", ["v5"], ["vs"]),
        suffix("為ちゃう", "為る", ["v5"], ["vs"]),
        suffix("きちゃう", "くる", ["v5"], ["vk"]),
        suffix("来ちゃう", "来る", ["v5"], ["vk"]),
        suffix("來ちゃう", "來る", ["v5"], ["vk"]),
    ], description=(
        "Contraction of -しまう.\n"
        "Shows completion of an action with regret or accidental completion.\n"
        "Usage: Attach しまう after the て-form of verbs, contract てしまう into ちゃう."
    )),
    transform("-ちまう", [
        suffix("ちまう", "る", ["v5"], ["v1"]),
        suffix("いじまう", "ぐ", ["v5"], ["v5"]),
        suffix("いちまう", "く", ["v5"], ["v5"]),
        suffix("しちまう", "す", ["v5"], ["v5"]),
        suffix("っちまう", "う", ["v5"], ["v5"]),
        suffix("っちまう", "く", ["v5"], ["v5"]),
        suffix("っちまう", "つ", ["v5"], ["v5"]),
        suffix("っちまう", "る", ["v5"], ["v5"]),
        suffix("んじまう", "ぬ", ["v5"], ["v5"]),
        suffix("んじまう", "ぶ", ["v5"], ["v5"]),
        suffix("んじまう", "む", ["v5"], ["v5"]),
        suffix("じちまう", "ずる", ["v5"], ["vz"]),
        suffix("しちまう", "する", ["v5"], ["vs"]),
        suffix("為ちまう", "為る", ["v5"], ["vs"]),
        suffix("きちまう", "くる", ["v5"], ["vk"]),
        suffix("来ちまう", "来る", ["v5"], ["vk"]),
        suffix("來ちまう", "來る", ["v5"], ["vk"]),
    ], description=(
        "Contraction of -しまう.\n"
        "Shows completion of an action with regret or accidental completion.\n"
        "Usage: Attach しまう after the て-form of verbs, contract てしまう into ちまう."
    )),
    transform("-しまう", [
        suffix("てしまう", "て", ["v5"], ["-て"]),
        suffix("でしまう", "で", ["v5"], ["-て"]),
    ], description=(
        "Shows completion of an action with regret or accidental completion.\n"
        "Usage: Attach しまう after the て-form of verbs."
    )),
    transform("-なさい", [
        suffix("なさい", "る", ["-なさい"], ["v1"]),
        suffix("いなさい", "う", ["-なさい"], ["v5"]),
        suffix("きなさい", "く", ["-なさい"], ["v5"]),
        suffix("ぎなさい", "ぐ", ["-なさい"], ["v5"]),
        suffix("しなさい", "す", ["-なさい"], ["v5"]),
        suffix("ちなさい", "つ", ["-なさい"], ["v5"]),
        suffix("になさい", "ぬ", ["-なさい"], ["v5"]),
        suffix("びなさい", "ぶ", ["-なさい"], ["v5"]),
        suffix("みなさい", "む", ["-なさい"], ["v5"]),
        suffix("りなさい", "る", ["-なさい"], ["v5"]),
        suffix("じなさい", "ずる", ["-なさい"], ["vz"]),
        suffix("しなさい", "する", ["-なさい"], ["vs"]),
        suffix("為なさい", "為る", ["-なさい"], ["vs"]),
        suffix("きなさい", "くる", ["-なさい"], ["vk"]),
        suffix("来なさい", "来る", ["-なさい"], ["vk"]),
        suffix("來なさい", "來る", ["-なさい"], ["vk"]),
    ], description=(
        "Polite imperative suffix.\n"
        "Usage: Attach なさい after the continuative form (連用形) of verbs."
    )),
    transform("-そう", [
        suffix("そう", "い", [], ["adj-i"]),
        suffix("そう", "る", [], ["v1"]),
        suffix("いそう", "う", [], ["v5"]),
        suffix("きそう", "く", [], ["v5"]),
        suffix("ぎそう", "ぐ", [], ["v5"]),
        suffix("しそう", "す", [], ["v5"]),
        suffix("ちそう", "つ", [], ["v5"]),
        suffix("にそう", "ぬ", [], ["v5"]),
        suffix("びそう", "ぶ", [], ["v5"]),
        suffix("みそう", "む", [], ["v5"]),
        suffix("りそう", "る", [], ["v5"]),
        suffix("じそう", "ずる", [], ["vz"]),
        suffix("しそう", "する", [], ["vs"]),
        suffix("為そう", "為る", [], ["vs"]),
        suffix("きそう", "くる", [], ["vk"]),
        suffix("来そう", "来る", [], ["vk"]),
        suffix("來そう", "來る", [], ["vk"]),
    ], description=(
        "Appearing that; looking like.\n"
        "Usage: Attach そう to the continuative form (連用形) of verbs, or to the "
        "stem of adjectives."
    )),
    transform("-すぎる", [
        suffix("すぎる", "い", ["v1"], ["adj-i"]),
        suffix("すぎる", "る", ["v1"], ["v1"]),
        suffix("いすぎる", "う", ["v1"], ["v5"]),
        suffix("きすぎる", "く", ["v1"], ["v5"]),
        suffix("ぎすぎる", "ぐ", ["v1"], ["v5"]),
        suffix("しすぎる", "す", ["v1"], ["v5"]),
        suffix("ちすぎる", "つ", ["v1"], ["v5"]),
        suffix("にすぎる", "ぬ", ["v1"], ["v5"]),
        suffix("びすぎる", "ぶ", ["v1"], ["v5"]),
        suffix("みすぎる", "む", ["v1"], ["v5"]),
        suffix("りすぎる", "る", ["v1"], ["v5"]),
        suffix("じすぎる", "ずる", ["v1"], ["vz"]),
        suffix("しすぎる", "する", ["v1"], ["vs"]),
        suffix("為すぎる", "為る", ["v1"], ["vs"]),
        suffix("きすぎる", "くる", ["v1"], ["vk"]),
        suffix("来すぎる", "来る", ["v1"], ["vk"]),
        suffix("來すぎる", "來る", ["v1"], ["vk"]),
    ], description=(
        "Shows something \"is too...\" or someone is doing something \"too much\".\n"
        "Usage: Attach すぎる to the continuative form (連用形) of verbs, or to the "
        "stem of adjectives."
    )),
    transform("-過ぎる", [
        suffix("過ぎる", "い", ["v1"], ["adj-i"]),
        suffix("過ぎる", "る", ["v1"], ["v1"]),
        suffix("い過ぎる", "う", ["v1"], ["v5"]),
        suffix("き過ぎる", "く", ["v1"], ["v5"]),
        suffix("ぎ過ぎる", "ぐ", ["v1"], ["v5"]),
        suffix("し過ぎる", "す", ["v1"], ["v5"]),
        suffix("ち過ぎる", "つ", ["v1"], ["v5"]),
        suffix("に過ぎる", "ぬ", ["v1"], ["v5"]),
        suffix("び過ぎる", "ぶ", ["v1"], ["v5"]),
        suffix("み過ぎる", "む", ["v1"], ["v5"]),
        suffix("り過ぎる", "る", ["v1"], ["v5"]),
        suffix("じ過ぎる", "ずる", ["v1"], ["vz"]),
        suffix("し過ぎる", "する", ["v1"], ["vs"]),
        suffix("為過ぎる", "為る", ["v1"], ["vs"]),
        suffix("き過ぎる", "くる", ["v1"], ["vk"]),
        suffix("来過ぎる", "来る", ["v1"], ["vk"]),
        suffix("來過ぎる", "來る", ["v1"], ["vk"]),
    ], description=(
        "Shows something \"is too...\" or someone is doing something \"too much\".\n"
        "Usage: Attach 過ぎる to the continuative form (連用形) of verbs, or to the "
        "stem of adjectives."
    )),
    transform("-たい", [
        suffix("たい", "る", ["adj-i"], ["v1"]),
        suffix("いたい", "う", ["adj-i"], ["v5"]),
        suffix("きたい", "く", ["adj-i"], ["v5"]),
        suffix("ぎたい", "ぐ", ["adj-i"], ["v5"]),
        suffix("したい", "す", ["adj-i"], ["v5"]),
        suffix("ちたい", "つ", ["adj-i"], ["v5"]),
        suffix("にたい", "ぬ", ["adj-i"], ["v5"]),
        suffix("びたい", "ぶ", ["adj-i"], ["v5"]),
        suffix("みたい", "む", ["adj-i"], ["v5"]),
        suffix("りたい", "る", ["adj-i"], ["v5"]),
        suffix("じたい", "ずる", ["adj-i"], ["vz"]),
        suffix("したい", "する", ["adj-i"], ["vs"]),
        suffix("為たい", "為る", ["adj-i"], ["vs"]),
        suffix("きたい", "くる", ["adj-i"], ["vk"]),
        suffix("来たい", "来る", ["adj-i"], ["vk"]),
        suffix("來たい", "來る", ["adj-i"], ["vk"]),
    ], description=(
        "Expresses the feeling of desire or hope.\n"
        "Usage: Attach たい to the continuative form (連用形) of verbs. "
        "たい itself conjugates as i-adjective."
    )),
    transform("-たら", [
        suffix("かったら", "い", [], ["adj-i"]),
        suffix("たら", "る", [], ["v1"]),
        suffix("いたら", "く", [], ["v5"]),
        suffix("いだら", "ぐ", [], ["v5"]),
        suffix("したら", "す", [], ["v5"]),
        suffix("ったら", "う", [], ["v5"]),
        suffix("ったら", "つ", [], ["v5"]),
        suffix("ったら", "る", [], ["v5"]),
        suffix("んだら", "ぬ", [], ["v5"]),
        suffix("んだら", "ぶ", [], ["v5"]),
        suffix("んだら", "む", [], ["v5"]),
        suffix("じたら", "ずる", [], ["vz"]),
        suffix("したら", "する", [], ["vs"]),
        suffix("為たら", "為る", [], ["vs"]),
        suffix("きたら", "くる", [], ["vk"]),
        suffix("来たら", "来る", [], ["vk"]),
        suffix("來たら", "來る", [], ["vk"]),
        *irregular("たら", [], ["v5"]),
        suffix("ましたら", "ます", [], ["-ます"]),
    ], description=(
        "Denotes the latter stated event is a continuation of the previous stated "
        "event, or assumes that a matter has been completed.\n"
        "Usage: Attach たら to the continuative form (連用形) of verbs after euphonic "
        "change form, かったら to the stem of i-adjectives."
    )),
    transform("-たり", [
        suffix("かったり", "い", [], ["adj-i"]),
        suffix("たり", "る", [], ["v1"]),
        suffix("いたり", "く", [], ["v5"]),
        suffix("いだり", "ぐ", [], ["v5"]),
        suffix("したり", "す", [], ["v5"]),
        suffix("ったり", "う", [], ["v5"]),
        suffix("ったり", "つ", [], ["v5"]),
        suffix("ったり", "る", [], ["v5"]),
        suffix("んだり", "ぬ", [], ["v5"]),
        suffix("んだり", "ぶ", [], ["v5"]),
        suffix("んだり", "む", [], ["v5"]),
        suffix("じたり", "ずる", [], ["vz"]),
        suffix("したり", "する", [], ["vs"]),
        suffix("為たり", "為る", [], ["vs"]),
        suffix("きたり", "くる", [], ["vk"]),
        suffix("来たり", "来る", [], ["vk"]),
        suffix("來たり", "來る", [], ["vk"]),
        *irregular("たり", [], ["v5"]),
    ], description=(
        "Shows two actions occurring back and forth, or gives examples of actions "
        "and states.\n"
        "Usage: Attach たり to the continuative form (連用形) of verbs after euphonic "
        "change form, かったり to the stem of i-adjectives."
    )),
    transform("-て", [
        suffix("くて", "い", ["-て"], ["adj-i"]),
        rewrite("て", "る", ["-て"], ["v1"]),
        suffix("いて", "く", ["-て"], ["v5"]),
        suffix("いで", "ぐ", ["-て"], ["v5"]),
        suffix("して", "す", ["-て"], ["v5"]),
        suffix("って", "う", ["-て"], ["v5"]),
        suffix("って", "つ", ["-て"], ["v5"]),
        suffix("って", "る", ["-て"], ["v5"]),
        suffix("んで", "ぬ", ["-て"], ["v5"]),
        suffix("んで", "ぶ", ["-て"], ["v5"]),
        suffix("んで", "む", ["-て"], ["v5"]),
        rewrite("じて", "ずる", ["-て"], ["vz"]),
        rewrite("して", "する", ["-て"], ["vs"]),
        rewrite("為て", "為る", ["-て"], ["vs"]),
        rewrite("きて", "くる", ["-て"], ["vk"]),
        rewrite("来て", "来る", ["-て"], ["vk"]),
        rewrite("來て", "來る", ["-て"], ["vk"]),
        *irregular("て", ["-て"], ["v5"]),
        suffix("まして", "ます", [], ["-ます"]),
    ], description=(
        "て-form. Primarily a conjunctive particle that connects two clauses.\n"
        "Usage: Attach て to the continuative form (連用形) of verbs after euphonic "
        "change form, くて to the stem of i-adjectives."
    )),
    transform("-ず", [
        rewrite("ず", "る", [], ["v1"]),
        suffix("かず", "く", [], ["v5"]),
        suffix("がず", "ぐ", [], ["v5"]),
        suffix("さず", "す", [], ["v5"]),
        suffix("たず", "つ", [], ["v5"]),
        suffix("なず", "ぬ", [], ["v5"]),
        suffix("ばず", "ぶ", [], ["v5"]),
        suffix("まず", "む", [], ["v5"]),
        suffix("らず", "る", [], ["v5"]),
        suffix("わず", "う", [], ["v5"]),
        rewrite("ぜず", "ずる", [], ["vz"]),
        rewrite("せず", "する", [], ["vs"]),
        rewrite("為ず", "為る", [], ["vs"]),
        rewrite("こず", "くる", [], ["vk"]),
        rewrite("来ず", "来る", [], ["vk"]),
        rewrite("來ず", "來る", [], ["vk"]),
    ], description=(
        "Negative form of verbs; also the continuative form (連用形) of the "
        "particle ぬ.\n"
        "Usage: Attach ず to the irrealis form (未然形) of verbs."
    )),
    transform("-ぬ", [
        rewrite("ぬ", "る", [], ["v1"]),
        suffix("かぬ", "く", [], ["v5"]),
        suffix("がぬ", "ぐ", [], ["v5"]),
        suffix("さぬ", "す", [], ["v5"]),
        suffix("たぬ", "つ", [], ["v5"]),
        suffix("なぬ", "ぬ", [], ["v5"]),
        suffix("ばぬ", "ぶ", [], ["v5"]),
        suffix("まぬ", "む", [], ["v5"]),
        suffix("らぬ", "る", [], ["v5"]),
        suffix("わぬ", "う", [], ["v5"]),
        rewrite("ぜぬ", "ずる", [], ["vz"]),
        rewrite("せぬ", "する", [], ["vs"]),
        rewrite("為ぬ", "為る", [], ["vs"]),
        rewrite("こぬ", "くる", [], ["vk"]),
        rewrite("来ぬ", "来る", [], ["vk"]),
        rewrite("來ぬ", "來る", [], ["vk"]),
    ], description=(
        "Negative form of verbs.\n"
        "Usage: Attach ぬ to the irrealis form (未然形) of verbs. する becomes せぬ."
    )),
    transform("-ん", [
        rewrite("ん", "る", ["-ん"], ["v1"]),
        suffix("かん", "く", ["-ん"], ["v5"]),
        suffix("がん", "ぐ", ["-ん"], ["v5"]),
        suffix("さん", "す", ["-ん"], ["v5"]),
        suffix("たん", "つ", ["-ん"], ["v5"]),
        suffix("なん", "ぬ", ["-ん"], ["v5"]),
        suffix("ばん", "ぶ", ["-ん"], ["v5"]),
        suffix("まん", "む", ["-ん"], ["v5"]),
        suffix("らん", "る", ["-ん"], ["v5"]),
        suffix("わん", "う", ["-ん"], ["v5"]),
        rewrite("ぜん", "ずる", ["-ん"], ["vz"]),
        rewrite("せん", "する", ["-ん"], ["vs"]),
        rewrite("為ん", "為る", ["-ん"], ["vs"]),
        rewrite("こん", "くる", ["-ん"], ["vk"]),
        rewrite("来ん", "来る", ["-ん"], ["vk"]),
        rewrite("來ん", "來る", ["-ん"], ["vk"]),
    ], description=(
        "Negative form of verbs; a sound change of ぬ.\n"
        "Usage: Attach ん to the irrealis form (未然形) of verbs."
    )),
    transform("-んばかり", [
        suffix("んばかり", "る", [], ["v1"]),
        suffix("かんばかり", "く", [], ["v5"]),
        suffix("がんばかり", "ぐ", [], ["v5"]),
        suffix("さんばかり", "す", [], ["v5"]),
        suffix("たんばかり", "つ", [], ["v5"]),
        suffix("なんばかり", "ぬ", [], ["v5"]),
        suffix("ばんばかり", "ぶ", [], ["v5"]),
        suffix("まんばかり", "む", [], ["v5"]),
        suffix("らんばかり", "る", [], ["v5"]),
        suffix("わんばかり", "う", [], ["v5"]),
        suffix("ぜんばかり", "ずる", [], ["vz"]),
        suffix("せんばかり", "する", [], ["vs"]),
        suffix("為んばかり", "為る", [], ["vs"]),
        suffix("こんばかり", "くる", [], ["vk"]),
        suffix("来んばかり", "来る", [], ["vk"]),
        suffix("來んばかり", "來る", [], ["vk"]),
    ], description=(
        "Shows an action or condition is on the verge of occurring, or an "
        "excessive degree.\n"
        "Usage: Attach んばかり to the irrealis form (未然形) of verbs."
    )),
    transform("-んとする", [
        suffix("んとする", "る", ["vs"], ["v1"]),
        suffix("かんとする", "く", ["vs"], ["v5"]),
        suffix("がんとする", "ぐ", ["vs"], ["v5"]),
        suffix("さんとする", "す", ["vs"], ["v5"]),
        suffix("たんとする", "つ", ["vs"], ["v5"]),
        suffix("なんとする", "ぬ", ["vs"], ["v5"]),
        suffix("ばんとする", "ぶ", ["vs"], ["v5"]),
        suffix("まんとする", "む", ["vs"], ["v5"]),
        suffix("らんとする", "る", ["vs"], ["v5"]),
        suffix("わんとする", "う", ["vs"], ["v5"]),
        suffix("ぜんとする", "ずる", ["vs"], ["vz"]),
        suffix("せんとする", "する", ["vs"], ["vs"]),
        suffix("為んとする", "為る", ["vs"], ["vs"]),
        suffix("こんとする", "くる", ["vs"], ["vk"]),
        suffix("来んとする", "来る", ["vs"], ["vk"]),
        suffix("來んとする", "來る", ["vs"], ["vk"]),
    ], description=(
        "Shows the speaker's will or intention, or that an action is on the verge "
        "of occurring.\n"
        "Usage: Attach んとする to the irrealis form (未然形) of verbs."
    )),
    transform("-む", [
        rewrite("む", "る", [], ["v1"]),
        suffix("かむ", "く", [], ["v5"]),
        suffix("がむ", "ぐ", [], ["v5"]),
        suffix("さむ", "す", [], ["v5"]),
        suffix("たむ", "つ", [], ["v5"]),
        suffix("なむ", "ぬ", [], ["v5"]),
        suffix("ばむ", "ぶ", [], ["v5"]),
        suffix("まむ", "む", [], ["v5"]),
        suffix("らむ", "る", [], ["v5"]),
        suffix("わむ", "う", [], ["v5"]),
        rewrite("ぜむ", "ずる", [], ["vz"]),
        rewrite("せむ", "する", [], ["vs"]),
        rewrite("為む", "為る", [], ["vs"]),
        rewrite("こむ", "くる", [], ["vk"]),
        rewrite("来む", "来る", [], ["vk"]),
        rewrite("來む", "來る", [], ["vk"]),
    ], description=(
        "Archaic. Shows an inference or the speaker's intention.\n"
        "Usage: Attach む to the irrealis form (未然形) of verbs."
    )),
    transform("-ざる", [
        suffix("ざる", "る", [], ["v1"]),
        suffix("かざる", "く", [], ["v5"]),
        suffix("がざる", "ぐ", [], ["v5"]),
        suffix("さざる", "す", [], ["v5"]),
        suffix("たざる", "つ", [], ["v5"]),
        suffix("なざる", "ぬ", [], ["v5"]),
        suffix("ばざる", "ぶ", [], ["v5"]),
        suffix("まざる", "む", [], ["v5"]),
        suffix("らざる", "る", [], ["v5"]),
        suffix("わざる", "う", [], ["v5"]),
        suffix("ぜざる", "ずる", [], ["vz"]),
        suffix("せざる", "する", [], ["vs"]),
        suffix("為ざる", "為る", [], ["vs"]),
        suffix("こざる", "くる", [], ["vk"]),
        suffix("来ざる", "来る", [], ["vk"]),
        suffix("來ざる", "來る", [], ["vk"]),
    ], description=(
        "Negative form of verbs.\n"
        "Usage: Attach ざる to the irrealis form (未然形) of verbs."
    )),
    transform("-ねば", [
        suffix("ねば", "る", ["-ば"], ["v1"]),
        suffix("かねば", "く", ["-ば"], ["v5"]),
        suffix("がねば", "ぐ", ["-ば"], ["v5"]),
        suffix("さねば", "す", ["-ば"], ["v5"]),
        suffix("たねば", "つ", ["-ば"], ["v5"]),
        suffix("なねば", "ぬ", ["-ば"], ["v5"]),
        suffix("ばねば", "ぶ", ["-ば"], ["v5"]),
        suffix("まねば", "む", ["-ば"], ["v5"]),
        suffix("らねば", "る", ["-ば"], ["v5"]),
        suffix("わねば", "う", ["-ば"], ["v5"]),
        suffix("ぜねば", "ずる", ["-ば"], ["vz"]),
        suffix("せねば", "する", ["-ば"], ["vs"]),
        suffix("為ねば", "為る", ["-ば"], ["vs"]),
        suffix("こねば", "くる", ["-ば"], ["vk"]),
        suffix("来ねば", "来る", ["-ば"], ["vk"]),
        suffix("來ねば", "來る", ["-ば"], ["vk"]),
    ], description=(
        "Shows a hypothetical negation (if not ...) or a must.\n"
        "Usage: Attach ねば to the irrealis form (未然形) of verbs."
    )),
    transform("-く", [
        rewrite("く", "い", ["-く"], ["adj-i"]),
    ], description="Adverbial form of i-adjectives."),
    transform("causative", [
        suffix("させる", "る", ["v1"], ["v1"]),
        suffix("かせる", "く", ["v1"], ["v5"]),
        suffix("がせる", "ぐ", ["v1"], ["v5"]),
        suffix("させる", "す", ["v1"], ["v5"]),
        suffix("たせる", "つ", ["v1"], ["v5"]),
        suffix("なせる", "ぬ", ["v1"], ["v5"]),
        suffix("ばせる", "ぶ", ["v1"], ["v5"]),
        suffix("ませる", "む", ["v1"], ["v5"]),
        suffix("らせる", "る", ["v1"], ["v5"]),
        suffix("わせる", "う", ["v1"], ["v5"]),
        suffix("じさせる", "ずる", ["v1"], ["vz"]),
        suffix("ぜさせる", "ずる", ["v1"], ["vz"]),
        suffix("させる", "する", ["v1"], ["vs"]),
        suffix("為せる", "為る", ["v1"], ["vs"]),
        suffix("せさせる", "する", ["v1"], ["vs"]),
        suffix("為させる", "為る", ["v1"], ["vs"]),
        suffix("こさせる", "くる", ["v1"], ["vk"]),
        suffix("来させる", "来る", ["v1"], ["vk"]),
        suffix("來させる", "來る", ["v1"], ["vk"]),
    ], description=(
        "Describes the intention to make someone do something.\n"
        "Usage: Attach させる to the irrealis form (未然形) of ichidan verbs and くる.\n"
        "Attach せる to the irrealis form (未然形) of godan verbs and する.\n"
        "It itself conjugates as an ichidan verb."
    )),
    transform("short causative", [
        suffix("さす", "る", ["v5ss"], ["v1"]),
        suffix("かす", "く", ["v5sp"], ["v5"]),
        suffix("がす", "ぐ", ["v5sp"], ["v5"]),
        suffix("さす", "す", ["v5ss"], ["v5"]),
        suffix("たす", "つ", ["v5sp"], ["v5"]),
        suffix("なす", "ぬ", ["v5sp"], ["v5"]),
        suffix("ばす", "ぶ", ["v5sp"], ["v5"]),
        suffix("ます", "む", ["v5sp"], ["v5"]),
        suffix("らす", "る", ["v5sp"], ["v5"]),
        suffix("わす", "う", ["v5sp"], ["v5"]),
        suffix("じさす", "ずる", ["v5ss"], ["vz"]),
        suffix("ぜさす", "ずる", ["v5ss"], ["vz"]),
        rewrite("さす", "する", ["v5ss"], ["vs"]),
        rewrite("為す", "為る", ["v5ss"], ["vs"]),
        suffix("こさす", "くる", ["v5ss"], ["vk"]),
        suffix("来さす", "来る", ["v5ss"], ["vk"]),
        suffix("來さす", "來る", ["v5ss"], ["vk"]),
    ], description=(
        "Contraction of the causative form.\n"
        "Usage: Attach す to the irrealis form (未然形) of godan verbs.\n"
        "Attach さす to the dictionary form (終止形) of ichidan verbs.\n"
        "It itself conjugates as a godan verb."
    )),
    transform("imperative", [
        rewrite("ろ", "る", [], ["v1"]),
        rewrite("よ", "る", [], ["v1"]),
        rewrite("え", "う", [], ["v5"]),
        rewrite("け", "く", [], ["v5"]),
        rewrite("げ", "ぐ", [], ["v5"]),
        rewrite("せ", "す", [], ["v5"]),
        rewrite("て", "つ", [], ["v5"]),
        rewrite("ね", "ぬ", [], ["v5"]),
        rewrite("べ", "ぶ", [], ["v5"]),
        rewrite("め", "む", [], ["v5"]),
        rewrite("れ", "る", [], ["v5"]),
        rewrite("じろ", "ずる", [], ["vz"]),
        rewrite("ぜよ", "ずる", [], ["vz"]),
        rewrite("しろ", "する", [], ["vs"]),
        rewrite("せよ", "する", [], ["vs"]),
        rewrite("為ろ", "為る", [], ["vs"]),
        rewrite("為よ", "為る", [], ["vs"]),
        rewrite("こい", "くる", [], ["vk"]),
        rewrite("来い", "来る", [], ["vk"]),
        rewrite("來い", "來る", [], ["vk"]),
    ], description="To give orders."),
    # Only the godan rows: the ichidan, くる and する stems are shorter than
    # their dictionary forms.
    transform("continuative", [
        rewrite("い", "う", [], ["v5"]),
        rewrite("き", "く", [], ["v5"]),
        rewrite("ぎ", "ぐ", [], ["v5"]),
        rewrite("し", "す", [], ["v5"]),
        rewrite("ち", "つ", [], ["v5"]),
        rewrite("に", "ぬ", [], ["v5"]),
        rewrite("び", "ぶ", [], ["v5"]),
        rewrite("み", "む", [], ["v5"]),
        rewrite("り", "る", [], ["v5"]),
    ], description=(
        "Used to indicate actions that are (being) carried out.\n"
        "Refers to 連用形, the part of the verb after conjugating with -ます and "
        "dropping ます."
    )),
    transform("negative", [
        suffix("くない", "い", ["adj-i"], ["adj-i"]),
        suffix("ない", "る", ["adj-i"], ["v1"]),
        suffix("かない", "く", ["adj-i"], ["v5"]),
        suffix("がない", "ぐ", ["adj-i"], ["v5"]),
        suffix("さない", "す", ["adj-i"], ["v5"]),
        suffix("たない", "つ", ["adj-i"], ["v5"]),
        suffix("なない", "ぬ", ["adj-i"], ["v5"]),
        suffix("ばない", "ぶ", ["adj-i"], ["v5"]),
        suffix("まない", "む", ["adj-i"], ["v5"]),
        suffix("らない", "る", ["adj-i"], ["v5"]),
        suffix("わない", "う", ["adj-i"], ["v5"]),
        suffix("じない", "ずる", ["adj-i"], ["vz"]),
        suffix("しない", "する", ["adj-i"], ["vs"]),
        suffix("為ない", "為る", ["adj-i"], ["vs"]),
        suffix("こない", "くる", ["adj-i"], ["vk"]),
        suffix("来ない", "来る", ["adj-i"], ["vk"]),
        suffix("來ない", "來る", ["adj-i"], ["vk"]),
        suffix("ません", "ます", ["-ません"], ["-ます"]),
    ], description=(
        "Negative form of verbs.\n"
        "Usage: Attach ない to the irrealis form (未然形) of verbs, くない to the stem "
        "of i-adjectives. ない itself conjugates as i-adjective. ます becomes ません."
    )),
    transform("-さ", [
        rewrite("さ", "い", [], ["adj-i"]),
    ], description=(
        "Nominalizing suffix of i-adjectives indicating nature, state, mind or degree.\n"
        "Usage: Attach さ to the stem of i-adjectives."
    )),
    transform("passive", [
        suffix("かれる", "く", ["v1"], ["v5"]),
        suffix("がれる", "ぐ", ["v1"], ["v5"]),
        suffix("される", "す", ["v1"], ["v5d", "v5sp"]),
        suffix("たれる", "つ", ["v1"], ["v5"]),
        suffix("なれる", "ぬ", ["v1"], ["v5"]),
        suffix("ばれる", "ぶ", ["v1"], ["v5"]),
        suffix("まれる", "む", ["v1"], ["v5"]),
        suffix("われる", "う", ["v1"], ["v5"]),
        suffix("られる", "る", ["v1"], ["v5"]),
        suffix("じされる", "ずる", ["v1"], ["vz"]),
        suffix("ぜされる", "ずる", ["v1"], ["vz"]),
        suffix("される", "する", ["v1"], ["vs"]),
        suffix("為れる", "為る", ["v1"], ["vs"]),
        suffix("こられる", "くる", ["v1"], ["vk"]),
        suffix("来られる", "来る", ["v1"], ["vk"]),
        suffix("來られる", "來る", ["v1"], ["vk"]),
    ], description=(
        "Indicates that the subject is affected by the action of the verb.\n"
        "Usage: Attach れる to the irrealis form (未然形) of godan verbs."
    )),
    transform("-た", [
        suffix("かった", "い", ["-た"], ["adj-i"]),
        rewrite("た", "る", ["-た"], ["v1"]),
        suffix("いた", "く", ["-た"], ["v5"]),
        suffix("いだ", "ぐ", ["-た"], ["v5"]),
        suffix("した", "す", ["-た"], ["v5"]),
        suffix("った", "う", ["-た"], ["v5"]),
        suffix("った", "つ", ["-た"], ["v5"]),
        suffix("った", "る", ["-た"], ["v5"]),
        suffix("んだ", "ぬ", ["-た"], ["v5"]),
        suffix("んだ", "ぶ", ["-た"], ["v5"]),
        suffix("んだ", "む", ["-た"], ["v5"]),
        rewrite("じた", "ずる", ["-た"], ["vz"]),
        rewrite("した", "する", ["-た"], ["vs"]),
        rewrite("為た", "為る", ["-た"], ["vs"]),
        rewrite("きた", "くる", ["-た"], ["vk"]),
        rewrite("来た", "来る", ["-た"], ["vk"]),
        rewrite("來た", "來る", ["-た"], ["vk"]),
        *irregular("た", ["-た"], ["v5"]),
        suffix("ました", "ます", ["-た"], ["-ます"]),
        suffix("でした", "", ["-た"], ["-ません"]),
        suffix("かった", "", ["-た"], ["-ません", "-ん"]),
    ], description=(
        "Indicates a reality that has happened in the past, or the completion "
        "of an action.\n"
        "Usage: Attach た to the continuative form (連用形) of verbs after euphonic "
        "change form, かった to the stem of i-adjectives."
    )),
    transform("-ます", [
        suffix("ます", "る", ["-ます"], ["v1"]),
        suffix("います", "う", ["-ます"], ["v5d"]),
        suffix("きます", "く", ["-ます"], ["v5d"]),
        suffix("ぎます", "ぐ", ["-ます"], ["v5d"]),
        suffix("します", "す", ["-ます"], ["v5d", "v5s"]),
        suffix("ちます", "つ", ["-ます"], ["v5d"]),
        suffix("にます", "ぬ", ["-ます"], ["v5d"]),
        suffix("びます", "ぶ", ["-ます"], ["v5d"]),
        suffix("みます", "む", ["-ます"], ["v5d"]),
        suffix("ります", "る", ["-ます"], ["v5d"]),
        suffix("じます", "ずる", ["-ます"], ["vz"]),
        suffix("します", "する", ["-ます"], ["vs"]),
        suffix("為ます", "為る", ["-ます"], ["vs"]),
        suffix("きます", "くる", ["-ます"], ["vk"]),
        suffix("来ます", "来る", ["-ます"], ["vk"]),
        suffix("來ます", "來る", ["-ます"], ["vk"]),
        suffix("くあります", "い", ["-ます"], ["adj-i"]),
    ], description=(
        "Polite conjugation of verbs and adjectives.\n"
        "Usage: Attach ます to the continuative form (連用形) of verbs."
    )),
    transform("potential", [
        suffix("れる", "る", ["v1"], ["v1", "v5d"]),
        suffix("える", "う", ["v1"], ["v5d"]),
        suffix("ける", "く", ["v1"], ["v5d"]),
        suffix("げる", "ぐ", ["v1"], ["v5d"]),
        suffix("せる", "す", ["v1"], ["v5d"]),
        suffix("てる", "つ", ["v1"], ["v5d"]),
        suffix("ねる", "ぬ", ["v1"], ["v5d"]),
        suffix("べる", "ぶ", ["v1"], ["v5d"]),
        suffix("める", "む", ["v1"], ["v5d"]),
        suffix("できる", "する", ["v1"], ["vs"]),
        suffix("出来る", "する", ["v1"], ["vs"]),
        suffix("これる", "くる", ["v1"], ["vk"]),
        suffix("来れる", "来る", ["v1"], ["vk"]),
        suffix("來れる", "來る", ["v1"], ["vk"]),
    ], description=(
        "Indicates a state of being (naturally) capable of doing an action.\n"
        "Usage: Attach (ら)れる to the irrealis form (未然形) of ichidan verbs.\n"
        "Attach る to the imperative form (命令形) of godan verbs."
    )),
    transform("potential or passive", [
        suffix("られる", "る", ["v1"], ["v1"]),
        suffix("ざれる", "ずる", ["v1"], ["vz"]),
        suffix("ぜられる", "ずる", ["v1"], ["vz"]),
        suffix("せられる", "する", ["v1"], ["vs"]),
        suffix("為られる", "為る", ["v1"], ["vs"]),
        suffix("こられる", "くる", ["v1"], ["vk"]),
        suffix("来られる", "来る", ["v1"], ["vk"]),
        suffix("來られる", "來る", ["v1"], ["vk"]),
    ], description=(
        "Indicates that the subject is affected by the action of the verb, or a "
        "state of being capable of doing an action.\n"
        "Usage: Attach られる to the irrealis form (未然形) of ichidan verbs."
    )),
    transform("volitional", [
        suffix("よう", "る", [], ["v1"]),
        suffix("おう", "う", [], ["v5"]),
        suffix("こう", "く", [], ["v5"]),
        suffix("ごう", "ぐ", [], ["v5"]),
        suffix("そう", "す", [], ["v5"]),
        suffix("とう", "つ", [], ["v5"]),
        suffix("のう", "ぬ", [], ["v5"]),
        suffix("ぼう", "ぶ", [], ["v5"]),
        suffix("もう", "む", [], ["v5"]),
        suffix("ろう", "る", [], ["v5"]),
        suffix("じよう", "ずる", [], ["vz"]),
        suffix("しよう", "する", [], ["vs"]),
        suffix("為よう", "為る", [], ["vs"]),
        suffix("こよう", "くる", [], ["vk"]),
        suffix("来よう", "来る", [], ["vk"]),
        suffix("來よう", "來る", [], ["vk"]),
        suffix("ましょう", "ます", [], ["-ます"]),
        suffix("かろう", "い", [], ["adj-i"]),
    ], description=(
        "Expresses speaker's will or intention, or an invitation to the other party.\n"
        "Usage: Attach よう to the irrealis form (未然形) of ichidan verbs.\n"
        "Attach う to the irrealis form (未然形) of godan verbs after -o euphonic "
        "change form."
    )),
    transform("volitional slang", [
        suffix("よっか", "る", [], ["v1"]),
        suffix("おっか", "う", [], ["v5"]),
        suffix("こっか", "く", [], ["v5"]),
        suffix("ごっか", "ぐ", [], ["v5"]),
        suffix("そっか", "す", [], ["v5"]),
        suffix("とっか", "つ", [], ["v5"]),
        suffix("のっか", "ぬ", [], ["v5"]),
        suffix("ぼっか", "ぶ", [], ["v5"]),
        suffix("もっか", "む", [], ["v5"]),
        suffix("ろっか", "る", [], ["v5"]),
        suffix("じよっか", "ずる", [], ["vz"]),
        suffix("しよっか", "する", [], ["vs"]),
        suffix("為よっか", "為る", [], ["vs"]),
        suffix("こよっか", "くる", [], ["vk"]),
        suffix("来よっか", "来る", [], ["vk"]),
        suffix("來よっか", "來る", [], ["vk"]),
        suffix("ましょっか", "ます", [], ["-ます"]),
    ], description=(
        "Contraction of volitional form + か.\n"
        "Usage: Replace final う with っ of volitional form then add か, "
        "e.g. 行こうか → 行こっか."
    )),
    transform("-まい", [
        suffix("まい", "", [], ["v"]),
        suffix("まい", "る", [], ["v1"]),
        suffix("じまい", "ずる", [], ["vz"]),
        suffix("しまい", "する", [], ["vs"]),
        suffix("為まい", "為る", [], ["vs"]),
        suffix("こまい", "くる", [], ["vk"]),
        suffix("来まい", "来る", [], ["vk"]),
        suffix("來まい", "來る", [], ["vk"]),
        suffix("まい", "", [], ["-ます"]),
    ], description=(
        "Negative volitional form of verbs; the speaker assumes something is "
        "likely not true, or will not do it.\n"
        "Usage: Attach まい to the dictionary form (終止形) of verbs, or to the "
        "irrealis form (未然形) of ichidan verbs."
    )),
    transform("-おく", [
        suffix("ておく", "て", ["v5"], ["-て"]),
        suffix("でおく", "で", ["v5"], ["-て"]),
        suffix("とく", "て", ["v5"], ["-て"]),
        suffix("どく", "で", ["v5"], ["-て"]),
        suffix("ないでおく", "ない", ["v5"], ["adj-i"]),
        suffix("ないどく", "ない", ["v5"], ["adj-i"]),
    ], description=(
        "To do certain things in advance in preparation of latter needs.\n"
        "Usage: Attach おく to the て-form of verbs, でおく after the ない negative "
        "form. Contracts to とく・どく in speech."
    )),
    transform("-いる", [
        suffix("ている", "て", ["v1"], ["-て"]),
        suffix("ておる", "て", ["v5"], ["-て"]),
        suffix("てる", "て", ["v1p"], ["-て"]),
        suffix("でいる", "で", ["v1"], ["-て"]),
        suffix("でおる", "で", ["v5"], ["-て"]),
        suffix("でる", "で", ["v1p"], ["-て"]),
        suffix("とる", "て", ["v5"], ["-て"]),
        suffix("ないでいる", "ない", ["v1"], ["adj-i"]),
    ], description=(
        "Indicates an action continues or progresses, or is completed and remains "
        "as is.\n"
        "Usage: Attach いる to the て-form of verbs. い can be dropped in speech.\n"
        "(Slang) Attach おる to the て-form of verbs. Contracts to とる・でる in speech."
    )),
    transform("-き", [
        rewrite("き", "い", [], ["adj-i"]),
    ], description=(
        "Attributive form (連体形) of i-adjectives. An archaic form that remains "
        "in modern Japanese."
    )),
    transform("-げ", [
        rewrite("げ", "い", [], ["adj-i"]),
        rewrite("気", "い", [], ["adj-i"]),
    ], description=(
        "Describes a person's appearance. Shows feelings of the person.\n"
        "Usage: Attach げ or 気 to the stem of i-adjectives."
    )),
    transform("-がる", [
        suffix("がる", "い", ["v5"], ["adj-i"]),
    ], description=(
        "Shows the subject's feelings, or that their behavior stands out.\n"
        "Usage: Attach がる to the stem of i-adjectives. It itself conjugates as a "
        "godan verb."
    )),
    transform("-え", [
        rewrite("ねえ", "ない", [], ["adj-i"]),
        rewrite("めえ", "むい", [], ["adj-i"]),
        rewrite("みい", "むい", [], ["adj-i"]),
        suffix("ちぇえ", "つい", [], ["adj-i"]),
        rewrite("ちい", "つい", [], ["adj-i"]),
        rewrite("せえ", "すい", [], ["adj-i"]),
        rewrite("ええ", "いい", [], ["adj-i"]),
        rewrite("ええ", "わい", [], ["adj-i"]),
        rewrite("ええ", "よい", [], ["adj-i"]),
        suffix("いぇえ", "よい", [], ["adj-i"]),
        suffix("うぇえ", "わい", [], ["adj-i"]),
        rewrite("けえ", "かい", [], ["adj-i"]),
        rewrite("げえ", "がい", [], ["adj-i"]),
        rewrite("げえ", "ごい", [], ["adj-i"]),
        rewrite("せえ", "さい", [], ["adj-i"]),
        rewrite("めえ", "まい", [], ["adj-i"]),
        rewrite("ぜえ", "ずい", [], ["adj-i"]),
        suffix("っぜえ", "ずい", [], ["adj-i"]),
        rewrite("れえ", "らい", [], ["adj-i"]),
        rewrite("ちぇえ", "ちゃい", [], ["adj-i"]),
        rewrite("でえ", "どい", [], ["adj-i"]),
        rewrite("れえ", "れい", [], ["adj-i"]),
        rewrite("べえ", "ばい", [], ["adj-i"]),
        rewrite("てえ", "たい", [], ["adj-i"]),
        rewrite("ねぇ", "ない", [], ["adj-i"]),
        rewrite("めぇ", "むい", [], ["adj-i"]),
        rewrite("みぃ", "むい", [], ["adj-i"]),
        rewrite("ちぃ", "つい", [], ["adj-i"]),
        rewrite("せぇ", "すい", [], ["adj-i"]),
        rewrite("けぇ", "かい", [], ["adj-i"]),
        rewrite("げぇ", "がい", [], ["adj-i"]),
        rewrite("げぇ", "ごい", [], ["adj-i"]),
        rewrite("せぇ", "さい", [], ["adj-i"]),
        rewrite("めぇ", "まい", [], ["adj-i"]),
        rewrite("ぜぇ", "ずい", [], ["adj-i"]),
        suffix("っぜぇ", "ずい", [], ["adj-i"]),
        rewrite("れぇ", "らい", [], ["adj-i"]),
        rewrite("でぇ", "どい", [], ["adj-i"]),
        rewrite("れぇ", "れい", [], ["adj-i"]),
        rewrite("べぇ", "ばい", [], ["adj-i"]),
        rewrite("てぇ", "たい", [], ["adj-i"]),
    ], description=(
        "Slang. A sound change of i-adjectives.\n"
        "ai: やばい → やべぇ, ui: さむい → さみぃ/さめぇ, oi: すごい → すげぇ"
    )),
    transform("n-slang", [
        rewrite("んなさい", "りなさい", [], ["-なさい"]),
        rewrite("らんない", "られない", ["adj-i"], ["adj-i"]),
        rewrite("んない", "らない", ["adj-i"], ["adj-i"]),
        rewrite("んなきゃ", "らなきゃ", [], ["-ゃ"]),
        rewrite("んなきゃ", "れなきゃ", [], ["-ゃ"]),
    ], description=(
        "Slang sound change of r-column syllables to n (when before an n-sound, "
        "usually の or な)."
    )),
    transform("imperative negative slang", [
        suffix("んな", "る", [], ["v"]),
    ], description="Slang negative imperative: ～るな contracted to ～んな."),
    transform("kansai-ben negative", [
        rewrite("へん", "ない", [], ["adj-i"]),
        rewrite("ひん", "ない", [], ["adj-i"]),
        suffix("せえへん", "しない", [], ["adj-i"]),
        suffix("へんかった", "なかった", ["-た"], ["-た"]),
        suffix("ひんかった", "なかった", ["-た"], ["-た"]),
        rewrite("うてへん", "ってない", [], ["adj-i"]),
    ], description="Negative form of kansai-ben verbs."),
    transform("kansai-ben -て", [
        rewrite("うて", "って", ["-て"], ["-て"]),
        rewrite("おうて", "あって", ["-て"], ["-て"]),
        rewrite("こうて", "かって", ["-て"], ["-て"]),
        rewrite("ごうて", "がって", ["-て"], ["-て"]),
        rewrite("そうて", "さって", ["-て"], ["-て"]),
        rewrite("ぞうて", "ざって", ["-て"], ["-て"]),
        rewrite("とうて", "たって", ["-て"], ["-て"]),
        rewrite("どうて", "だって", ["-て"], ["-て"]),
        rewrite("のうて", "なって", ["-て"], ["-て"]),
        rewrite("ほうて", "はって", ["-て"], ["-て"]),
        rewrite("ぼうて", "ばって", ["-て"], ["-て"]),
        rewrite("もうて", "まって", ["-て"], ["-て"]),
        rewrite("ろうて", "らって", ["-て"], ["-て"]),
        rewrite("ようて", "やって", ["-て"], ["-て"]),
        rewrite("ゆうて", "いって", ["-て"], ["-て"]),
    ], description="-て form of kansai-ben verbs."),
    transform("kansai-ben -た", [
        rewrite("うた", "った", ["-た"], ["-た"]),
        rewrite("おうた", "あった", ["-た"], ["-た"]),
        rewrite("こうた", "かった", ["-た"], ["-た"]),
        rewrite("ごうた", "がった", ["-た"], ["-た"]),
        rewrite("そうた", "さった", ["-た"], ["-た"]),
        rewrite("ぞうた", "ざった", ["-た"], ["-た"]),
        rewrite("とうた", "たった", ["-た"], ["-た"]),
        rewrite("どうた", "だった", ["-た"], ["-た"]),
        rewrite("のうた", "なった", ["-た"], ["-た"]),
        rewrite("ほうた", "はった", ["-た"], ["-た"]),
        rewrite("ぼうた", "ばった", ["-た"], ["-た"]),
        rewrite("もうた", "まった", ["-た"], ["-た"]),
        rewrite("ろうた", "らった", ["-た"], ["-た"]),
        rewrite("ようた", "やった", ["-た"], ["-た"]),
        rewrite("ゆうた", "いった", ["-た"], ["-た"]),
    ], description="-た form of kansai-ben terms."),
    transform("kansai-ben -たら", [
        rewrite("うたら", "ったら", [], []),
        rewrite("おうたら", "あったら", [], []),
        rewrite("こうたら", "かったら", [], []),
        rewrite("ごうたら", "がったら", [], []),
        rewrite("そうたら", "さったら", [], []),
        rewrite("ぞうたら", "ざったら", [], []),
        rewrite("とうたら", "たったら", [], []),
        rewrite("どうたら", "だったら", [], []),
        rewrite("のうたら", "なったら", [], []),
        rewrite("ほうたら", "はったら", [], []),
        rewrite("ぼうたら", "ばったら", [], []),
        rewrite("もうたら", "まったら", [], []),
        rewrite("ろうたら", "らったら", [], []),
        rewrite("ようたら", "やったら", [], []),
        rewrite("ゆうたら", "いったら", [], []),
    ], description="-たら form of kansai-ben terms."),
    transform("kansai-ben -たり", [
        rewrite("うたり", "ったり", [], []),
        rewrite("おうたり", "あったり", [], []),
        rewrite("こうたり", "かったり", [], []),
        rewrite("ごうたり", "がったり", [], []),
        rewrite("そうたり", "さったり", [], []),
        rewrite("ぞうたり", "ざったり", [], []),
        rewrite("とうたり", "たったり", [], []),
        rewrite("どうたり", "だったり", [], []),
        rewrite("のうたり", "なったり", [], []),
        rewrite("ほうたり", "はったり", [], []),
        rewrite("ぼうたり", "ばったり", [], []),
        rewrite("もうたり", "まったり", [], []),
        rewrite("ろうたり", "らったり", [], []),
        rewrite("ようたり", "やったり", [], []),
        rewrite("ゆうたり", "いったり", [], []),
    ], description="-たり form of kansai-ben terms."),
    transform("kansai-ben -く", [
        rewrite("う", "く", [], ["-く"]),
        rewrite("こう", "かく", [], ["-く"]),
        rewrite("ごう", "がく", [], ["-く"]),
        rewrite("そう", "さく", [], ["-く"]),
        rewrite("とう", "たく", [], ["-く"]),
        rewrite("のう", "なく", [], ["-く"]),
        rewrite("ぼう", "ばく", [], ["-く"]),
        rewrite("もう", "まく", [], ["-く"]),
        rewrite("ろう", "らく", [], ["-く"]),
        rewrite("よう", "よく", [], ["-く"]),
        suffix("しゅう", "しく", [], ["-く"]),
    ], description="-く stem of kansai-ben adjectives."),
    transform("kansai-ben adjective -て", [
        rewrite("うて", "くて", ["-て"], ["-て"]),
        rewrite("こうて", "かくて", ["-て"], ["-て"]),
        rewrite("ごうて", "がくて", ["-て"], ["-て"]),
        rewrite("そうて", "さくて", ["-て"], ["-て"]),
        rewrite("とうて", "たくて", ["-て"], ["-て"]),
        rewrite("のうて", "なくて", ["-て"], ["-て"]),
        rewrite("ぼうて", "ばくて", ["-て"], ["-て"]),
        rewrite("もうて", "まくて", ["-て"], ["-て"]),
        rewrite("ろうて", "らくて", ["-て"], ["-て"]),
        rewrite("ようて", "よくて", ["-て"], ["-て"]),
        suffix("しゅうて", "しくて", ["-て"], ["-て"]),
    ], description="-て form of kansai-ben adjectives."),
    transform("kansai-ben adjective negative", [
        rewrite("うない", "くない", ["adj-i"], ["adj-i"]),
        rewrite("こうない", "かくない", ["adj-i"], ["adj-i"]),
        rewrite("ごうない", "がくない", ["adj-i"], ["adj-i"]),
        rewrite("そうない", "さくない", ["adj-i"], ["adj-i"]),
        rewrite("とうない", "たくない", ["adj-i"], ["adj-i"]),
        rewrite("のうない", "なくない", ["adj-i"], ["adj-i"]),
        rewrite("ぼうない", "ばくない", ["adj-i"], ["adj-i"]),
        rewrite("もうない", "まくない", ["adj-i"], ["adj-i"]),
        rewrite("ろうない", "らくない", ["adj-i"], ["adj-i"]),
        rewrite("ようない", "よくない", ["adj-i"], ["adj-i"]),
        suffix("しゅうない", "しくない", ["adj-i"], ["adj-i"]),
    ], description="Negative form of kansai-ben adjectives."),
]

DESCRIPTOR = LanguageDescriptor(
    language="ja",
    name="Japanese",
    conditions=CONDITIONS,
    transforms=TRANSFORMS,
    example_text="読め",
)
