"""Static lookup tables shared read-only by every transformation.

All tables are collected into one :class:`LookupTables` instance by
:func:`default_tables`. Mappings are wrapped in ``MappingProxyType`` and
sequences are tuples, so nothing can be mutated after construction.

Ranked tables (leetspeak, homoglyphs) list replacements best-first; the
weights are static ranking weights, not measured confusion rates.
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import NamedTuple

from domfuzz.domain.names import SECOND_LEVEL_DOMAINS
from domfuzz.domain.types import KeyboardLayout


class Glyph(NamedTuple):
    """A lookalike character from another script."""

    char: str
    script: str
    weight: float


# --- Character-level ---------------------------------------------------------

_LEETSPEAK: dict[str, tuple[str, ...]] = {
    "a": ("4",),
    "b": ("6", "8", "d"),
    "d": ("b", "cl"),
    "e": ("3",),
    "g": ("9", "q"),
    "h": ("n",),
    "i": ("1", "l"),
    "l": ("1", "i"),
    "m": ("rn", "n"),
    "n": ("m",),
    "o": ("0", "q"),
    "p": ("q",),
    "q": ("9", "p", "o"),
    "r": ("n",),
    "s": ("5", "z"),
    "t": ("7",),
    "u": ("v",),
    "v": ("u",),
    "w": ("vv",),
    "z": ("2", "s"),
    "0": ("o",),
    "1": ("l", "i"),
    "2": ("z",),
    "3": ("e",),
    "4": ("a",),
    "5": ("s",),
    "6": ("b",),
    "7": ("t",),
    "8": ("b",),
    "9": ("g",),
}

_CYRILLIC = "cyrillic"
_GREEK = "greek"
_ARMENIAN = "armenian"
_LATIN = "latin"

_HOMOGLYPHS: dict[str, tuple[Glyph, ...]] = {
    "a": (Glyph("а", _CYRILLIC, 0.98), Glyph("ɑ", _LATIN, 0.85), Glyph("α", _GREEK, 0.8)),
    "b": (Glyph("ь", _CYRILLIC, 0.55), Glyph("β", _GREEK, 0.5)),
    "c": (Glyph("с", _CYRILLIC, 0.98), Glyph("ϲ", _GREEK, 0.95), Glyph("ƈ", _LATIN, 0.6)),
    "d": (Glyph("ԁ", _CYRILLIC, 0.95), Glyph("ɗ", _LATIN, 0.6)),
    "e": (Glyph("е", _CYRILLIC, 0.98), Glyph("ė", _LATIN, 0.7), Glyph("ε", _GREEK, 0.6)),
    "f": (Glyph("ƒ", _LATIN, 0.6),),
    "g": (Glyph("ɡ", _LATIN, 0.95), Glyph("ԍ", _CYRILLIC, 0.7), Glyph("ġ", _LATIN, 0.7)),
    "h": (Glyph("һ", _CYRILLIC, 0.97), Glyph("հ", _ARMENIAN, 0.85), Glyph("η", _GREEK, 0.5)),
    "i": (Glyph("і", _CYRILLIC, 0.98), Glyph("ı", _LATIN, 0.85), Glyph("ι", _GREEK, 0.7)),
    "j": (Glyph("ј", _CYRILLIC, 0.98), Glyph("ʝ", _LATIN, 0.5)),
    "k": (Glyph("κ", _GREEK, 0.8), Glyph("к", _CYRILLIC, 0.7), Glyph("ķ", _LATIN, 0.6)),
    "l": (Glyph("ӏ", _CYRILLIC, 0.95), Glyph("ɩ", _LATIN, 0.7), Glyph("ļ", _LATIN, 0.6)),
    "m": (Glyph("м", _CYRILLIC, 0.6), Glyph("ṃ", _LATIN, 0.6)),
    "n": (Glyph("ո", _ARMENIAN, 0.85), Glyph("ń", _LATIN, 0.6), Glyph("п", _CYRILLIC, 0.5)),
    "o": (
        Glyph("о", _CYRILLIC, 0.99),
        Glyph("ο", _GREEK, 0.99),
        Glyph("օ", _ARMENIAN, 0.95),
        Glyph("ᴏ", _LATIN, 0.6),
    ),
    "p": (Glyph("р", _CYRILLIC, 0.99), Glyph("ρ", _GREEK, 0.9)),
    "q": (Glyph("ԛ", _CYRILLIC, 0.97), Glyph("գ", _ARMENIAN, 0.6)),
    "r": (Glyph("г", _CYRILLIC, 0.6), Glyph("ṛ", _LATIN, 0.6)),
    "s": (Glyph("ѕ", _CYRILLIC, 0.98), Glyph("ʂ", _LATIN, 0.6)),
    "t": (Glyph("τ", _GREEK, 0.6), Glyph("ţ", _LATIN, 0.6), Glyph("т", _CYRILLIC, 0.55)),
    "u": (Glyph("ս", _ARMENIAN, 0.9), Glyph("υ", _GREEK, 0.85), Glyph("ü", _LATIN, 0.6)),
    "v": (Glyph("ν", _GREEK, 0.95), Glyph("ѵ", _CYRILLIC, 0.9)),
    "w": (Glyph("ԝ", _CYRILLIC, 0.97), Glyph("ω", _GREEK, 0.6), Glyph("ѡ", _CYRILLIC, 0.6)),
    "x": (Glyph("х", _CYRILLIC, 0.99), Glyph("χ", _GREEK, 0.8)),
    "y": (Glyph("у", _CYRILLIC, 0.97), Glyph("ү", _CYRILLIC, 0.8), Glyph("γ", _GREEK, 0.6)),
    "z": (Glyph("ᴢ", _LATIN, 0.8), Glyph("ż", _LATIN, 0.6)),
}

_KEYBOARD_ROWS: dict[KeyboardLayout, tuple[str, ...]] = {
    KeyboardLayout.QWERTY: ("1234567890", "qwertyuiop", "asdfghjkl", "zxcvbnm"),
    KeyboardLayout.QWERTZ: ("1234567890", "qwertzuiop", "asdfghjkl", "yxcvbnm"),
    KeyboardLayout.AZERTY: ("1234567890", "azertyuiop", "qsdfghjklm", "wxcvbn"),
}

VOWELS = "aeiou"
BITFLIP_ALPHABET = frozenset(string.ascii_letters + string.digits + "-")

# --- Phonetic / semantic -----------------------------------------------------

_HOMOPHONES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("to", ("too", "two")),
    ("there", ("their", "theyre")),
    ("your", ("youre",)),
    ("hear", ("here",)),
    ("buy", ("by", "bye")),
    ("site", ("sight", "cite")),
    ("right", ("write", "rite")),
    ("four", ("for", "fore")),
    ("one", ("won",)),
    ("son", ("sun",)),
    ("no", ("know",)),
    ("sea", ("see",)),
    ("be", ("bee",)),
    ("mail", ("male",)),
    ("sale", ("sail",)),
    ("peace", ("piece",)),
    ("break", ("brake",)),
    ("cell", ("sell",)),
    ("blue", ("blew",)),
    ("ate", ("eight",)),
    ("week", ("weak",)),
    ("meet", ("meat",)),
    ("fair", ("fare",)),
    ("pair", ("pear", "pare")),
    ("bear", ("bare",)),
    ("dear", ("deer",)),
    ("flour", ("flower",)),
    ("hour", ("our",)),
    ("knight", ("night",)),
    ("knew", ("new",)),
    ("tail", ("tale",)),
    ("wait", ("weight",)),
    ("way", ("weigh",)),
    ("would", ("wood",)),
    ("hole", ("whole",)),
    ("role", ("roll",)),
    ("soul", ("sole",)),
    ("steal", ("steel",)),
    ("heal", ("heel",)),
    ("real", ("reel",)),
    ("read", ("red",)),
    ("lead", ("led",)),
    ("threw", ("through",)),
    ("plain", ("plane",)),
    ("rain", ("reign",)),
    ("main", ("mane",)),
    ("pain", ("pane",)),
    ("vain", ("vane",)),
)

_COGNITIVE_CONFUSIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("amazon", ("amazom", "amazone", "amazn")),
    ("google", ("gogle", "googel", "googlle")),
    ("microsoft", ("mircosoft", "microsooft", "microsft")),
    ("facebook", ("facbook", "facebok", "faceboook")),
    ("paypal", ("payball", "paypall", "paypaul")),
    ("apple", ("aple", "applle", "aplle")),
    ("twitter", ("twiter", "twittr", "twittter")),
    ("linkedin", ("linkdin", "linkin", "linkedinn")),
    ("secure", ("secur", "securee", "secuure")),
    ("support", ("suport", "supportt", "supp0rt")),
    ("service", ("servic", "servicee", "servise")),
    ("account", ("acount", "accont", "accountt")),
    ("login", ("loginn", "log1n", "l0gin")),
    ("portal", ("portall", "p0rtal", "porttal")),
    ("center", ("centre", "centr", "centerr")),
    ("office", ("offic", "officee", "0ffice")),
    ("corp", ("corporate", "company", "inc")),
    ("inc", ("incorporated", "corp", "company")),
    ("company", ("corp", "inc", "co")),
    ("group", ("grp", "groupe", "groupp")),
    ("tech", ("technology", "tec", "techno")),
    ("solutions", ("solution", "solve", "solutionz")),
    ("systems", ("system", "sys", "systemz")),
    ("services", ("service", "servs", "servicez")),
    ("concordium", ("consordium", "consortium", "concardium")),
    ("consortium", ("consordium", "concordium", "consortum")),
    ("foundation", ("fundation", "foundtion", "foundaton")),
    ("enterprise", ("enterprize", "enterpise", "enterpris")),
    ("international", ("internacional", "internation", "intl")),
    ("development", ("developement", "developmnt", "develop")),
    ("management", ("managment", "managem", "manage")),
    ("consulting", ("consultng", "consult", "consultancy")),
    ("financial", ("finance", "finacial", "financ")),
    ("research", ("reserch", "researh", "resarch")),
    ("laboratory", ("lab", "laborat", "laboratry")),
    ("institute", ("institut", "institu", "instit")),
    ("university", ("univrsity", "univ", "universty")),
    ("college", ("colege", "coleg", "collegee")),
    ("academy", ("acadmy", "academ", "academie")),
    ("network", ("netwrk", "net", "nework")),
    ("security", ("securty", "sec", "securit")),
    ("technology", ("technlogy", "tech", "tecnology")),
    ("innovation", ("inovation", "innov", "innovaton")),
    ("intelligence", ("inteligence", "intel", "intelligenc")),
    ("analytics", ("analytic", "anlytics", "analytix")),
    ("communications", ("communication", "comm", "comunications")),
)

_PHONETIC_DIGRAPHS: tuple[tuple[str, str], ...] = (
    ("ph", "f"),
    ("f", "ph"),
    ("ck", "k"),
    ("k", "ck"),
    ("c", "k"),
    ("k", "c"),
    ("s", "z"),
    ("z", "s"),
    ("i", "y"),
    ("y", "i"),
    ("er", "or"),
    ("or", "er"),
    ("an", "en"),
    ("en", "an"),
    ("tion", "sion"),
    ("sion", "tion"),
)

_COMPOUND_SPLITS: dict[str, tuple[str, ...]] = {
    "facebook": ("face-book", "faceb00k"),
    "youtube": ("you-tube", "youtub3"),
    "linkedin": ("linked-in", "link3din"),
    "instagram": ("insta-gram", "instagr4m"),
    "microsoft": ("micro-soft", "micr0soft"),
    "whatsapp": ("whats-app", "whatsap"),
    "dropbox": ("drop-box", "dr0pbox"),
    "github": ("git-hub", "g1thub"),
}

_BUSINESS_SYNONYMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("bank", ("banking", "banc", "finansial")),
    ("pay", ("payment", "payments", "paying")),
    ("shop", ("shopping", "store", "market")),
    ("mail", ("email", "post", "message")),
    ("cloud", ("server", "hosting", "storage")),
    ("data", ("database", "info", "information")),
    ("web", ("website", "site", "online")),
    ("mobile", ("app", "application", "phone")),
    ("digital", ("cyber", "online", "virtual")),
    ("crypto", ("blockchain", "bitcoin", "coin")),
)

_IRREGULAR_PLURALS: dict[str, str] = {
    "child": "children",
    "person": "people",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
    "goose": "geese",
    "tooth": "teeth",
    "foot": "feet",
    "index": "indices",
    "matrix": "matrices",
    "datum": "data",
    "medium": "media",
    "analysis": "analyses",
    "life": "lives",
    "knife": "knives",
    "leaf": "leaves",
}

# --- Numeric ------------------------------------------------------------------

_CARDINALS: tuple[tuple[str, str], ...] = (
    ("0", "zero"),
    ("1", "one"),
    ("2", "two"),
    ("3", "three"),
    ("4", "four"),
    ("5", "five"),
    ("6", "six"),
    ("7", "seven"),
    ("8", "eight"),
    ("9", "nine"),
    ("10", "ten"),
    ("11", "eleven"),
    ("12", "twelve"),
    ("20", "twenty"),
    ("30", "thirty"),
    ("40", "forty"),
    ("50", "fifty"),
    ("100", "hundred"),
)

_ORDINALS: tuple[tuple[str, str], ...] = (
    ("1st", "first"),
    ("2nd", "second"),
    ("3rd", "third"),
    ("4th", "fourth"),
    ("5th", "fifth"),
    ("6th", "sixth"),
    ("7th", "seventh"),
    ("8th", "eighth"),
    ("9th", "ninth"),
    ("10th", "tenth"),
    ("11th", "eleventh"),
    ("12th", "twelfth"),
    ("20th", "twentieth"),
    ("21st", "twentyfirst"),
    ("30th", "thirtieth"),
    ("100th", "hundredth"),
)

# --- Extensions ------------------------------------------------------------------

_TLDS: tuple[str, ...] = (
    "com", "net", "org", "info", "biz", "us", "co", "io", "me", "app", "dev", "tech",
    "online", "site", "store", "shop", "uk", "ca", "de", "fr", "ru", "cn", "jp", "au",
    "br", "tk", "ml", "ga", "cf",
)  # fmt: skip

_GENERIC_TLDS: tuple[str, ...] = ("com", "net", "org")

_IDN_TLDS: dict[str, tuple[str, ...]] = {
    "com": ("ком", "كوم", "公司", "コム", "컴", "κομ", "קום", "คอม", "कॉम"),
    "net": ("нет", "شبكة", "网络", "ネット", "넷", "δικτυο", "רשת", "เน็ต", "नेट"),
    "org": ("орг", "منظمة", "组织", "オルグ", "οργ", "ארג", "संगठन"),
    "cn": ("中国",),
    "kr": ("한국",),
    "gr": ("ελ",),
    "th": ("ไทย",),
    "in": ("भारत",),
}

_DOMAIN_PREFIXES: tuple[str, ...] = (
    "www", "mail", "secure", "admin", "test", "dev", "api", "cdn", "auth", "login",
    "support", "help", "shop", "store", "my", "portal", "mobile", "app", "service",
    "cloud", "server", "vpn", "security", "monitor", "beta",
)  # fmt: skip

_DOMAIN_SUFFIXES: tuple[str, ...] = (
    "app", "site", "web", "online", "pro", "plus", "premium", "club", "group", "tech",
    "service", "platform", "security", "media", "shop", "store", "finance", "health",
    "gaming", "demo", "beta",
)  # fmt: skip

_AUTHORITY_PREFIXES: tuple[str, ...] = ("www", "secure", "official", "my", "admin", "portal", "app")
_AUTHORITY_SUFFIXES: tuple[str, ...] = ("app", "online", "portal", "center", "pro", "plus", "secure")
_INJECTION_WORDS: tuple[str, ...] = ("login", "secure", "account", "verify", "support", "auth")


def _adjacency(rows: tuple[str, ...]) -> dict[str, str]:
    """Derive key neighbours from staggered keyboard rows.

    Neighbour order: same row (left, right), row above, row below.
    """
    neighbours: dict[str, str] = {}
    for r, row in enumerate(rows):
        for i, key in enumerate(row):
            near: list[str] = []
            if i > 0:
                near.append(row[i - 1])
            if i + 1 < len(row):
                near.append(row[i + 1])
            if r > 0:
                above = rows[r - 1]
                near.extend(above[j] for j in (i, i + 1) if j < len(above))
            if r + 1 < len(rows):
                below = rows[r + 1]
                near.extend(below[j] for j in (i - 1, i) if 0 <= j < len(below))
            neighbours[key] = "".join(near)
    return neighbours


def _ranked(glyphs: tuple[Glyph, ...]) -> tuple[Glyph, ...]:
    return tuple(sorted(glyphs, key=lambda g: -g.weight))


@dataclass(frozen=True)
class LookupTables:
    """Every static table the transformation algorithms read."""

    leetspeak: Mapping[str, tuple[str, ...]]
    homoglyphs: Mapping[str, tuple[Glyph, ...]]
    keyboards: Mapping[KeyboardLayout, Mapping[str, str]]
    homophones: tuple[tuple[str, tuple[str, ...]], ...]
    cognitive: tuple[tuple[str, tuple[str, ...]], ...]
    phonetic: tuple[tuple[str, str], ...]
    compounds: Mapping[str, tuple[str, ...]]
    business: tuple[tuple[str, tuple[str, ...]], ...]
    irregular_plurals: Mapping[str, str]
    cardinals: tuple[tuple[str, str], ...]
    ordinals: tuple[tuple[str, str], ...]
    tlds: tuple[str, ...]
    generic_tlds: tuple[str, ...]
    idn_tlds: Mapping[str, tuple[str, ...]]
    second_level: Mapping[str, tuple[str, ...]]
    domain_prefixes: tuple[str, ...]
    domain_suffixes: tuple[str, ...]
    authority_prefixes: tuple[str, ...]
    authority_suffixes: tuple[str, ...]
    injection_words: tuple[str, ...]

    def neighbours(self, ch: str, layouts: tuple[KeyboardLayout, ...]) -> str:
        """Union of *ch*'s adjacent keys over *layouts*, first-seen order."""
        seen: dict[str, None] = {}
        for layout in layouts:
            for near in self.keyboards[layout].get(ch, ""):
                seen.setdefault(near, None)
        return "".join(seen)

    def lookalike_pairs(self) -> frozenset[tuple[str, str]]:
        """Unordered visual-confusion pairs drawn from leetspeak and homoglyph tables."""
        pairs: set[tuple[str, str]] = set()
        for ch, replacements in self.leetspeak.items():
            pairs.update((ch, r) for r in replacements if len(r) == 1)
        for ch, glyphs in self.homoglyphs.items():
            pairs.update((ch, g.char) for g in glyphs)
        return frozenset(pairs | {(b, a) for a, b in pairs})


def default_tables() -> LookupTables:
    """Build the immutable table set used by the default registry."""
    return LookupTables(
        leetspeak=MappingProxyType(dict(_LEETSPEAK)),
        homoglyphs=MappingProxyType({ch: _ranked(g) for ch, g in _HOMOGLYPHS.items()}),
        keyboards=MappingProxyType(
            {layout: MappingProxyType(_adjacency(rows)) for layout, rows in _KEYBOARD_ROWS.items()}
        ),
        homophones=_HOMOPHONES,
        cognitive=_COGNITIVE_CONFUSIONS,
        phonetic=_PHONETIC_DIGRAPHS,
        compounds=MappingProxyType(dict(_COMPOUND_SPLITS)),
        business=_BUSINESS_SYNONYMS,
        irregular_plurals=MappingProxyType(dict(_IRREGULAR_PLURALS)),
        cardinals=_CARDINALS,
        ordinals=_ORDINALS,
        tlds=_TLDS,
        generic_tlds=_GENERIC_TLDS,
        idn_tlds=MappingProxyType(dict(_IDN_TLDS)),
        second_level=MappingProxyType(dict(SECOND_LEVEL_DOMAINS)),
        domain_prefixes=_DOMAIN_PREFIXES,
        domain_suffixes=_DOMAIN_SUFFIXES,
        authority_prefixes=_AUTHORITY_PREFIXES,
        authority_suffixes=_AUTHORITY_SUFFIXES,
        injection_words=_INJECTION_WORDS,
    )
