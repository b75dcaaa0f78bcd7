"""
Spanish deinflection table.

Noun plurals, feminine adjectives, and the regular verb tenses for -ar, -er
and -ir verbs, plus the irregular stems that can be told apart by their
ending alone (mantuvimos → mantener, propondremos → proponer).

Endings that are shorter than the infinitive ending they replace
(hablo → hablar, comí → comer) would lengthen the word and are left out,
as are stem changes (duermo → dormir) and whole-word irregulars
(soy → ser).  Those belong in the dictionary.
"""

from deinflector.descriptor import (
    LanguageDescriptor,
    rewrite_inflection as rewrite,
    suffix_inflection as suffix,
    transform,
)

ACCENTED = {"a": "á", "e": "é", "i": "í", "o": "ó", "u": "ú"}

CONDITIONS = {
    "n": {"name": "Noun", "is_dictionary_form": True, "sub_conditions": ["ns", "np"]},
    "np": {"name": "Noun plural"},
    "ns": {"name": "Noun singular"},
    "v": {"name": "Verb", "is_dictionary_form": True, "sub_conditions": ["v_ar", "v_er", "v_ir"]},
    "v_ar": {"name": "-ar verb"},
    "v_er": {"name": "-er verb"},
    "v_ir": {"name": "-ir verb"},
    "adj": {"name": "Adjective", "is_dictionary_form": True},
}


def strong_preterite(stem, infinitive, third_plural="ieron"):
    """hic-iste → hacer, dij-eron → decir: preterites built on an irregular stem.

    Only the forms longer than the infinitive are listed; hice, hizo and
    similar are dictionary entries.
    """
    return [
        suffix(f"{stem}{ending}", infinitive, ["v"], ["v"])
        for ending in ("iste", "imos", "isteis", third_plural)
    ]


def irregular_future(stem, infinitive):
    """pondr-é → poner: futures built on a contracted stem."""
    return [
        suffix(f"{stem}{ending}", infinitive, ["v"], ["v"])
        for ending in ("é", "ás", "á", "emos", "éis", "án")
    ]


def imperfect_subjunctive(vowel, infinitive_ending, conditions):
    """Both the -ra and the -se series for one verb class."""
    accented = ACCENTED[vowel[-1]]
    return [
        suffix(f"{vowel}{ending}", infinitive_ending, conditions, conditions)
        for ending in ("ra", "se", "ras", "ses", "rais", "seis", "ran", "sen")
    ] + [
        suffix(f"{vowel[:-1]}{accented}{ending}", infinitive_ending, conditions, conditions)
        for ending in ("ramos", "semos")
    ]


TRANSFORMS = [
    transform("plural", [
        suffix("s", "", ["np"], ["ns"]),  # gatos
        suffix("es", "", ["np"], ["ns"]),  # ciudades
        suffix("ces", "z", ["np"], ["ns"]),  # luces
        *[suffix(f"{v}ses", f"{ACCENTED[v]}s", ["np"], ["ns"]) for v in "aeiou"],  # autobuses
        *[suffix(f"{v}nes", f"{ACCENTED[v]}n", ["np"], ["ns"]) for v in "aeiou"],  # canciones
    ], description="Plural form of a noun"),
    transform("feminine adjective", [
        rewrite("a", "o", ["adj"], ["adj"]),  # roja
        suffix("a", "", ["adj"], ["adj"]),  # española
        *[suffix(f"{v}na", f"{ACCENTED[v]}n", ["adj"], ["adj"]) for v in "aeio"],  # dormilona
        *[suffix(f"{v}sa", f"{ACCENTED[v]}s", ["adj"], ["adj"]) for v in "aeio"],  # francesa
    ], description="Feminine form of an adjective"),
    transform("present indicative", [
        rewrite("as", "ar", ["v_ar"], ["v_ar"]),
        suffix("amos", "ar", ["v_ar"], ["v_ar"]),
        suffix("áis", "ar", ["v_ar"], ["v_ar"]),
        rewrite("an", "ar", ["v_ar"], ["v_ar"]),
        rewrite("es", "er", ["v_er"], ["v_er"]),
        suffix("emos", "er", ["v_er"], ["v_er"]),
        suffix("éis", "er", ["v_er"], ["v_er"]),
        rewrite("en", "er", ["v_er"], ["v_er"]),
        rewrite("es", "ir", ["v_ir"], ["v_ir"]),
        suffix("imos", "ir", ["v_ir"], ["v_ir"]),
        rewrite("ís", "ir", ["v_ir"], ["v_ir"]),
        rewrite("en", "ir", ["v_ir"], ["v_ir"]),
        # i → y (incluir, construir)
        rewrite("uyo", "uir", ["v_ir"], ["v_ir"]),
        suffix("uyes", "uir", ["v_ir"], ["v_ir"]),
        rewrite("uye", "uir", ["v_ir"], ["v_ir"]),
        suffix("uyen", "uir", ["v_ir"], ["v_ir"]),
        # tener and its compounds
        rewrite("tengo", "tener", ["v"], ["v"]),
        suffix("tienes", "tener", ["v"], ["v"]),
        rewrite("tiene", "tener", ["v"], ["v"]),
        suffix("tenemos", "tener", ["v"], ["v"]),
        suffix("tenéis", "tener", ["v"], ["v"]),
        suffix("tienen", "tener", ["v"], ["v"]),
        suffix("oigo", "oír", ["v"], ["v"]),
        suffix("oyes", "oír", ["v"], ["v"]),
        rewrite("oye", "oír", ["v"], ["v"]),
        suffix("oímos", "oír", ["v"], ["v"]),
        rewrite("oís", "oír", ["v"], ["v"]),
        suffix("oyen", "oír", ["v"], ["v"]),
        rewrite("vengo", "venir", ["v"], ["v"]),
        suffix("vienes", "venir", ["v"], ["v"]),
        rewrite("viene", "venir", ["v"], ["v"]),
        suffix("venimos", "venir", ["v"], ["v"]),
        rewrite("venís", "venir", ["v"], ["v"]),
        suffix("vienen", "venir", ["v"], ["v"]),
        # irregular first person
        suffix("aigo", "aer", ["v"], ["v"]),  # traigo
        rewrite("zco", "cer", ["v"], ["v"]),  # conozco
        rewrite("zco", "cir", ["v"], ["v"]),  # conduzco
        rewrite("pongo", "poner", ["v"], ["v"]),
        rewrite("lgo", "lir", ["v"], ["v"]),  # salgo
        rewrite("lgo", "ler", ["v"], ["v"]),  # valgo
    ], description="Present indicative form of a verb"),
    transform("preterite", [
        suffix("aste", "ar", ["v_ar"], ["v_ar"]),
        suffix("amos", "ar", ["v_ar"], ["v_ar"]),
        suffix("asteis", "ar", ["v_ar"], ["v_ar"]),
        suffix("aron", "ar", ["v_ar"], ["v_ar"]),
        suffix("iste", "er", ["v_er"], ["v_er"]),
        rewrite("ió", "er", ["v_er"], ["v_er"]),
        suffix("imos", "er", ["v_er"], ["v_er"]),
        suffix("isteis", "er", ["v_er"], ["v_er"]),
        suffix("ieron", "er", ["v_er"], ["v_er"]),
        suffix("iste", "ir", ["v_ir"], ["v_ir"]),
        rewrite("ió", "ir", ["v_ir"], ["v_ir"]),
        suffix("imos", "ir", ["v_ir"], ["v_ir"]),
        suffix("isteis", "ir", ["v_ir"], ["v_ir"]),
        suffix("ieron", "ir", ["v_ir"], ["v_ir"]),
        rewrite("qué", "car", ["v"], ["v"]),  # busqué
        rewrite("gué", "gar", ["v"], ["v"]),  # llegué
        *strong_preterite("hic", "hacer"),
        *strong_preterite("pus", "poner"),
        *strong_preterite("dij", "decir", third_plural="eron"),
        *strong_preterite("vin", "venir"),
        *strong_preterite("tuv", "tener"),
    ], description="Preterite (past) form of a verb"),
    transform("imperfect", [
        suffix("aba", "ar", ["v_ar"], ["v_ar"]),
        suffix("abas", "ar", ["v_ar"], ["v_ar"]),
        suffix("ábamos", "ar", ["v_ar"], ["v_ar"]),
        suffix("abais", "ar", ["v_ar"], ["v_ar"]),
        suffix("aban", "ar", ["v_ar"], ["v_ar"]),
        rewrite("ía", "er", ["v_er"], ["v_er"]),
        suffix("ías", "er", ["v_er"], ["v_er"]),
        suffix("íamos", "er", ["v_er"], ["v_er"]),
        suffix("íais", "er", ["v_er"], ["v_er"]),
        suffix("ían", "er", ["v_er"], ["v_er"]),
        rewrite("ía", "ir", ["v_ir"], ["v_ir"]),
        suffix("ías", "ir", ["v_ir"], ["v_ir"]),
        suffix("íamos", "ir", ["v_ir"], ["v_ir"]),
        suffix("íais", "ir", ["v_ir"], ["v_ir"]),
        suffix("ían", "ir", ["v_ir"], ["v_ir"]),
        # reír, sonreír
        rewrite("eía", "eír", ["v_ir"], ["v_ir"]),
        suffix("eías", "eír", ["v_ir"], ["v_ir"]),
        suffix("eíamos", "eír", ["v_ir"], ["v_ir"]),
        suffix("eíais", "eír", ["v_ir"], ["v_ir"]),
        suffix("eían", "eír", ["v_ir"], ["v_ir"]),
    ], description="Imperfect form of a verb"),
    transform("progressive", [
        suffix("ando", "ar", ["v_ar"], ["v_ar"]),
        suffix("iendo", "er", ["v_er"], ["v_er"]),
        suffix("iendo", "ir", ["v_ir"], ["v_ir"]),
        suffix("ayendo", "aer", ["v_er"], ["v_er"]),  # cayendo
        suffix("eyendo", "eer", ["v_er"], ["v_er"]),  # leyendo
        suffix("uyendo", "uir", ["v_ir"], ["v_ir"]),  # construyendo
    ], description="Progressive form of a verb"),
    transform("imperative", [
        # affirmative
        suffix("emos", "ar", ["v_ar"], ["v_ar"]),
        rewrite("ad", "ar", ["v_ar"], ["v_ar"]),
        suffix("amos", "er", ["v_er"], ["v_er"]),
        rewrite("ed", "er", ["v_er"], ["v_er"]),
        suffix("amos", "ir", ["v_ir"], ["v_ir"]),
        rewrite("id", "ir", ["v_ir"], ["v_ir"]),
        # negative
        rewrite("es", "ar", ["v_ar"], ["v_ar"]),
        suffix("éis", "ar", ["v_ar"], ["v_ar"]),
        rewrite("as", "er", ["v_er"], ["v_er"]),
        suffix("áis", "er", ["v_er"], ["v_er"]),
        rewrite("as", "ir", ["v_ir"], ["v_ir"]),
        suffix("áis", "ir", ["v_ir"], ["v_ir"]),
    ], description="Imperative form of a verb"),
    transform("conditional", [
        suffix("ía", "", ["v"], ["v"]),
        suffix("ías", "", ["v"], ["v"]),
        suffix("íamos", "", ["v"], ["v"]),
        suffix("íais", "", ["v"], ["v"]),
        suffix("ían", "", ["v"], ["v"]),
    ], description="Conditional form of a verb"),
    transform("future", [
        suffix("é", "", ["v"], ["v"]),
        suffix("ás", "", ["v"], ["v"]),
        suffix("á", "", ["v"], ["v"]),
        suffix("emos", "", ["v"], ["v"]),
        suffix("éis", "", ["v"], ["v"]),
        suffix("án", "", ["v"], ["v"]),
        rewrite("dirás", "decir", ["v"], ["v"]),
        suffix("diremos", "decir", ["v"], ["v"]),
        suffix("diréis", "decir", ["v"], ["v"]),
        rewrite("dirán", "decir", ["v"], ["v"]),
        *irregular_future("pondr", "poner"),
        *irregular_future("tendr", "tener"),
        *irregular_future("vendr", "venir"),
    ], description="Future form of a verb"),
    transform("present subjunctive", [
        rewrite("es", "ar", ["v_ar"], ["v_ar"]),
        suffix("emos", "ar", ["v_ar"], ["v_ar"]),
        suffix("éis", "ar", ["v_ar"], ["v_ar"]),
        rewrite("en", "ar", ["v_ar"], ["v_ar"]),
        rewrite("as", "er", ["v_er"], ["v_er"]),
        suffix("amos", "er", ["v_er"], ["v_er"]),
        suffix("áis", "er", ["v_er"], ["v_er"]),
        rewrite("an", "er", ["v_er"], ["v_er"]),
        rewrite("as", "ir", ["v_ir"], ["v_ir"]),
        suffix("amos", "ir", ["v_ir"], ["v_ir"]),
        suffix("áis", "ir", ["v_ir"], ["v_ir"]),
        rewrite("an", "ir", ["v_ir"], ["v_ir"]),
    ], description="Present subjunctive form of a verb"),
    transform("imperfect subjunctive", [
        *imperfect_subjunctive("a", "ar", ["v_ar"]),
        *imperfect_subjunctive("ie", "er", ["v_er"]),
        *imperfect_subjunctive("ie", "ir", ["v_ir"]),
    ], description="Imperfect subjunctive form of a verb"),
    transform("participle", [
        suffix("ado", "ar", ["adj"], ["v_ar"]),
        suffix("ido", "er", ["adj"], ["v_er"]),
        suffix("ido", "ir", ["adj"], ["v_ir"]),
        suffix("oído", "oír", ["adj"], ["v"]),
    ], description="Participle form of a verb"),
    transform("reflexive", [
        suffix("arse", "ar", ["v_ar"], ["v_ar"]),
        suffix("erse", "er", ["v_er"], ["v_er"]),
        suffix("irse", "ir", ["v_ir"], ["v_ir"]),
    ], description="Reflexive form of a verb"),
    transform("pronoun substitution", [
        rewrite("arme", "arse", ["v_ar"], ["v_ar"]),
        rewrite("arte", "arse", ["v_ar"], ["v_ar"]),
        suffix("arnos", "arse", ["v_ar"], ["v_ar"]),
        rewrite("erme", "erse", ["v_er"], ["v_er"]),
        rewrite("erte", "erse", ["v_er"], ["v_er"]),
        suffix("ernos", "erse", ["v_er"], ["v_er"]),
        rewrite("irme", "irse", ["v_ir"], ["v_ir"]),
        rewrite("irte", "irse", ["v_ir"], ["v_ir"]),
        suffix("irnos", "irse", ["v_ir"], ["v_ir"]),
    ], description="Substituted pronoun of a reflexive verb"),
]

DESCRIPTOR = LanguageDescriptor(
    language="es",
    name="Spanish",
    conditions=CONDITIONS,
    transforms=TRANSFORMS,
    example_text="hablamos",
)
