"""Static rule tables for English noun inflection.

Both tables are ordered longest suffix first and evaluated first match wins,
so ``parties`` reaches the ``-ies`` rule before the plain ``-s`` rule. A rule
whose singular and plural suffixes are equal leaves the word untouched; in
the singularisation table such a rule marks endings that only look plural.

The data is read-only. :class:`wordforms.inflector.Inflector` compiles the
patterns once at construction time.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

from .models import InflectionRule

# Stems taking ``-oes`` in the plural. Everything else ending in ``o`` gets
# a plain ``-s`` (photos, pianos, videos).
_OES_STEMS = (
    "buffal|carg|desperad|domin|ech|embarg|grott|her|mang|mosquit|mott|"
    "potat|tomat|torped|tornad|vet|volcan"
)

# Stems whose ``-f`` becomes ``-ves``.
_VES_F_STEMS = "cal|dwar|el|hal|hoo|lea|loa|scar|sel|shea|shel|thie|whar|wol"

# Greek ``-sis`` nouns recognised when singularising ``-ses``. ``bases`` is
# left to the plain ``-s`` rule because ``base`` is far more common.
_SIS_STEMS = (
    "^cri|^oa|[^e]e|y|cirrho|diagno|ellip|empha|hypno|ia|metamorpho|neuro|"
    "osmo|progno|psycho|sta|synop|thrombo"
)

# ``-xis`` nouns recognised when singularising ``-xes``.
_XIS_STEMS = "pra|phyla"

# Plurals of ``-use`` words after a consonant. Other ``-uses`` after a
# consonant come from ``-us`` (apparatuses, lotuses); ``fuse`` and its
# compounds are excluded by the pattern itself.
_USE_PLURALS = frozenset(
    {
        "abuses", "accuses", "amuses", "bemuses", "cayuses", "contuses",
        "disabuses", "disuses", "excuses", "hypotenuses", "misuses",
        "muses", "peruses", "recluses", "recuses", "ruses",
    }
)

_IE_PLURALS = frozenset(
    {
        "aunties", "birdies", "bookies", "boogies", "brownies", "budgies",
        "calories", "collies", "cookies", "coteries", "cuties", "dies",
        "eyries", "foodies", "freebies", "genies", "goalies", "groupies",
        "hippies", "hoodies", "indies", "junkies", "lies", "lingeries",
        "magpies", "menageries", "movies", "newbies", "oldies", "pies",
        "pixies", "prairies", "quickies", "reveries", "rookies",
        "rotisseries", "selfies", "smoothies", "sorties", "sweeties",
        "talkies", "techies", "ties", "veggies", "yuppies", "zombies",
    }
)

_ACHE_PLURALS = frozenset(
    {
        "aches", "avalanches", "backaches", "caches", "cliches", "creches",
        "douches", "earaches", "headaches", "heartaches", "microfiches",
        "moustaches", "mustaches", "niches", "panaches", "psyches",
        "quiches", "stomachaches", "toothaches",
    }
)

_MAN_SINGULARS = frozenset(
    {
        "caiman", "cayman", "doberman", "dolman", "german", "human",
        "ottoman", "roman", "shaman", "talisman", "walkman",
    }
)

_MEN_SINGULARS = frozenset(
    {
        "abdomen", "acumen", "albumen", "amen", "bitumen", "cerumen",
        "cyclamen", "dolmen", "foramen", "germen", "gravamen", "hymen",
        "lumen", "omen", "ramen", "regimen", "rumen", "semen", "specimen",
        "stamen", "tegmen", "yemen",
    }
)

PLURAL_RULES: Tuple[InflectionRule, ...] = (
    InflectionRule(r"itis", "itis", "itis"),
    InflectionRule(r"sis", "sis", "ses"),
    InflectionRule(r"xis", "xis", "xes"),
    InflectionRule(r"man", "man", "men", _MAN_SINGULARS),
    InflectionRule(r"ous", "ous", "ous"),
    InflectionRule(r"(?:kni|wi|li)fe", "fe", "ves", frozenset({"wildlife"})),
    InflectionRule(
        r"ch",
        "ch",
        "ches",
        frozenset(
            {
                "czech", "epoch", "eunuch", "loch", "matriarch", "monarch",
                "oligarch", "patriarch", "stomach", "tech",
            }
        ),
    ),
    InflectionRule(r"sh", "sh", "shes"),
    InflectionRule(r"ss", "ss", "sses"),
    InflectionRule(r"zz", "zz", "zzes"),
    InflectionRule(r"tz", "tz", "tzes"),
    InflectionRule(r"us", "us", "uses"),
    InflectionRule(r"(?:[^aeiouy]|qu)y", "y", "ies"),
    InflectionRule(r"(?:%s)f" % _VES_F_STEMS, "f", "ves", frozenset({"behalf"})),
    InflectionRule(r"(?:%s)o" % _OES_STEMS, "o", "oes"),
    InflectionRule(r"x", "x", "xes"),
    InflectionRule(r"", "", "s"),
)

SINGULAR_RULES: Tuple[InflectionRule, ...] = (
    InflectionRule(r"itis", "itis", "itis"),
    InflectionRule(r"sses", "ss", "sses"),
    InflectionRule(r"shes", "sh", "shes"),
    InflectionRule(r"ches", "ch", "ches", _ACHE_PLURALS),
    InflectionRule(r"zzes", "zz", "zzes"),
    InflectionRule(r"tzes", "tz", "tzes"),
    InflectionRule(r"[^aefo]uses", "us", "uses", _USE_PLURALS),
    InflectionRule(
        r"(?:%s)ses" % _SIS_STEMS, "sis", "ses", frozenset({"dioceses"})
    ),
    InflectionRule(r"(?:%s)xes" % _XIS_STEMS, "xis", "xes"),
    InflectionRule(r"(?:%s)oes" % _OES_STEMS, "o", "oes"),
    InflectionRule(r"(?:%s)ves" % _VES_F_STEMS, "f", "ves"),
    InflectionRule(r"(?:kni|wi|li)ves", "fe", "ves", frozenset({"olives"})),
    InflectionRule(r"(?:[^aeiouy]|qu)ies", "y", "ies", _IE_PLURALS),
    InflectionRule(r"xes", "x", "xes"),
    InflectionRule(r"men", "man", "men", _MEN_SINGULARS),
    InflectionRule(r"ous", "ous", "ous"),
    InflectionRule(r"sis", "sis", "sis"),
    InflectionRule(r"xis", "xis", "xis"),
    InflectionRule(r"ss", "ss", "ss"),
    InflectionRule(r"us", "us", "us"),
    InflectionRule(r"s", "", "s"),
)

IRREGULARS: Dict[str, str] = {
    "alias": "aliases",
    "alumnus": "alumni",
    "appendix": "appendices",
    "atlas": "atlases",
    "axis": "axes",
    "bacterium": "bacteria",
    "bayou": "bayous",
    "bias": "biases",
    "bonus": "bonuses",
    "bureau": "bureaus",
    "bus": "buses",
    "cactus": "cacti",
    "campus": "campuses",
    "canvas": "canvases",
    "census": "censuses",
    "child": "children",
    "chorus": "choruses",
    "circus": "circuses",
    "corpus": "corpora",
    "criterion": "criteria",
    "curriculum": "curricula",
    "emu": "emus",
    "fez": "fezzes",
    "focus": "foci",
    "foot": "feet",
    "fungus": "fungi",
    "gas": "gases",
    "genius": "geniuses",
    "genus": "genera",
    "gnu": "gnus",
    "go": "goes",
    "goose": "geese",
    "guru": "gurus",
    "iris": "irises",
    "lens": "lenses",
    "louse": "lice",
    "man": "men",
    "matrix": "matrices",
    "medium": "media",
    "memorandum": "memoranda",
    "menu": "menus",
    "millennium": "millennia",
    "mouse": "mice",
    "nucleus": "nuclei",
    "octopus": "octopuses",
    "ox": "oxen",
    "person": "people",
    "phenomenon": "phenomena",
    "quiz": "quizzes",
    "radius": "radii",
    "sinus": "sinuses",
    "snafu": "snafus",
    "status": "statuses",
    "stimulus": "stimuli",
    "stratum": "strata",
    "syllabus": "syllabi",
    "taxi": "taxis",
    "thesaurus": "thesauri",
    "tiramisu": "tiramisus",
    "tooth": "teeth",
    "tutu": "tutus",
    "vertex": "vertices",
    "virus": "viruses",
    "walrus": "walruses",
    "woman": "women",
    "zebu": "zebus",
}

IRREGULAR_SINGULARS: Dict[str, str] = {
    plural: singular for singular, plural in IRREGULARS.items()
}

# Nouns whose singular and plural coincide. They answer ``True`` to both
# ``is_singular`` and ``is_plural``.
INVARIANT_NOUNS: FrozenSet[str] = frozenset(
    {
        "advice", "aircraft", "arthritis", "athletics", "baggage",
        "barracks", "bison", "caribou", "chaos", "chassis", "cod", "corps",
        "crossroads", "data", "deer",
        "economics", "equipment", "ethics", "evidence", "feedback",
        "firmware", "fish", "furniture", "gallows", "gymnastics",
        "hardware", "headquarters", "homework", "hovercraft", "information",
        "jeans", "knowledge", "kudos", "linguistics", "livestock",
        "luggage", "mathematics", "means", "money", "moose", "music",
        "news", "offspring", "pants", "physics", "police", "politics",
        "research", "rice", "salmon", "scissors", "series", "sheep",
        "shrimp", "software", "spacecraft", "species", "squid", "swine",
        "tennis", "traffic", "trousers", "trout", "tuna", "weather",
        "wildlife",
    }
)

# Function words never inflect, whatever their spelling suggests.
CLOSED_CLASS_WORDS: FrozenSet[str] = frozenset(
    {
        "a", "across", "afterwards", "although", "always", "am", "an",
        "are", "as", "at", "be", "because", "been", "being", "besides",
        "by", "does", "downstairs", "else", "for", "from", "has", "he",
        "her", "here", "hers", "him", "his", "how", "i", "in", "indoors",
        "into", "is", "it", "its", "less", "me", "minus", "my", "no",
        "nowadays", "of", "on", "onto", "our", "ours", "outdoors",
        "perhaps", "plus", "she", "since", "sometimes", "than", "that",
        "the", "their", "theirs", "them", "then", "there", "these", "they",
        "this", "those", "though", "thus", "to", "towards", "unless",
        "until", "upon", "upstairs", "us", "various", "was", "we", "were",
        "what", "when", "where", "whereas", "whether", "which", "while",
        "who", "whom", "whose", "why", "with", "yes", "you", "your",
        "yours",
    }
)

# English nouns without any of a, e, i, o, u. Every other vowelless token
# (numbers, acronyms, nonsense) is left uninflected.
VOWELLESS_WORDS: FrozenSet[str] = frozenset(
    {
        "cry", "crypt", "cyst", "fly", "fry", "glyph", "gym", "gypsy",
        "hymn", "lymph", "lynx", "myth", "nymph", "ply", "psych", "pygmy",
        "rhythm", "sky", "spy", "sty", "sylph", "synth", "tryst",
    }
)
