"""Krovetz-style English stemmer producing readable stems."""

from __future__ import annotations

from collections.abc import Callable

_VOWELS = frozenset("aeiou")

_IRREGULAR: dict[str, str] = {
    # irregular plurals
    "mice": "mouse",
    "geese": "goose",
    "teeth": "tooth",
    "feet": "foot",
    "children": "child",
    "men": "man",
    "women": "woman",
    "oxen": "ox",
    "people": "person",
    "leaves": "leaf",
    "lives": "life",
    "knives": "knife",
    "wives": "wife",
    "halves": "half",
    "wolves": "wolf",
    "shelves": "shelf",
    "loaves": "loaf",
    "thieves": "thief",
    # irregular verbs
    "ran": "run",
    "went": "go",
    "gone": "go",
    "saw": "see",
    "seen": "see",
    "took": "take",
    "taken": "take",
    "gave": "give",
    "given": "give",
    "came": "come",
    "wrote": "write",
    "written": "write",
    "drove": "drive",
    "driven": "drive",
    "spoke": "speak",
    "spoken": "speak",
    "broke": "break",
    "broken": "break",
    "chose": "choose",
    "chosen": "choose",
    "froze": "freeze",
    "frozen": "freeze",
    "woke": "wake",
    "woken": "wake",
    "knew": "know",
    "known": "know",
    "grew": "grow",
    "grown": "grow",
    "threw": "throw",
    "thrown": "throw",
    "drew": "draw",
    "drawn": "draw",
    "flew": "fly",
    "flown": "fly",
    "blew": "blow",
    "blown": "blow",
    "fell": "fall",
    "fallen": "fall",
    "began": "begin",
    "begun": "begin",
    "sang": "sing",
    "sung": "sing",
    "swam": "swim",
    "swum": "swim",
    "rang": "ring",
    "rung": "ring",
    "drank": "drink",
    "drunk": "drink",
    "sank": "sink",
    "sunk": "sink",
    "shook": "shake",
    "shaken": "shake",
    "forgot": "forget",
    "forgotten": "forget",
    "got": "get",
    "gotten": "get",
    "hid": "hide",
    "hidden": "hide",
    "rode": "ride",
    "ridden": "ride",
    "rose": "rise",
    "risen": "rise",
    "tore": "tear",
    "torn": "tear",
    "wore": "wear",
    "worn": "wear",
    "bore": "bear",
    "borne": "bear",
    "bit": "bite",
    "bitten": "bite",
    "ate": "eat",
    "eaten": "eat",
    "lay": "lie",
    "lain": "lie",
    "sat": "sit",
    "stood": "stand",
    "held": "hold",
    "told": "tell",
    "sold": "sell",
    "found": "find",
    "bound": "bind",
    "wound": "wind",
    "ground": "grind",
    "hung": "hang",
    "stuck": "stick",
    "struck": "strike",
    "slept": "sleep",
    "kept": "keep",
    "swept": "sweep",
    "wept": "weep",
    "crept": "creep",
    "felt": "feel",
    "dealt": "deal",
    "meant": "mean",
    "leapt": "leap",
    "dreamt": "dream",
    "burnt": "burn",
    "learnt": "learn",
    "built": "build",
    "sent": "send",
    "spent": "spend",
    "lent": "lend",
    "bent": "bend",
    "lost": "lose",
    "shot": "shoot",
    "led": "lead",
    "fed": "feed",
    "bred": "breed",
    "bled": "bleed",
    "fled": "flee",
    "sped": "speed",
    "met": "meet",
    "said": "say",
    "paid": "pay",
    "laid": "lay",
    "made": "make",
    "thought": "think",
    "brought": "bring",
    "bought": "buy",
    "caught": "catch",
    "fought": "fight",
    "sought": "seek",
    "taught": "teach",
    "had": "have",
    "was": "be",
    "were": "be",
    "been": "be",
    "did": "do",
    "done": "do",
}


def lookup_irregular(word: str) -> str | None:
    """Return the base form of a common irregular English word, if known."""
    return _IRREGULAR.get(word)


def _is_vowel(ch: str) -> bool:
    return ch in _VOWELS


def needs_e(stem: str) -> bool:
    """Tell whether *stem* ends consonant-vowel-consonant and wants a final 'e'."""
    if len(stem) < 2:
        return False
    last, prev = stem[-1], stem[-2]
    return (
        not _is_vowel(last)
        and _is_vowel(prev)
        and (len(stem) < 3 or not _is_vowel(stem[-3]))
    )


def _is_doubled_consonant(first: str, second: str) -> bool:
    return first == second and not _is_vowel(first) and first not in "lsz"


def _restore_e(stem: str) -> str:
    return stem + "e" if needs_e(stem) else stem


def _plurals(word: str) -> str | None:
    n = len(word)
    if n < 4:
        return None
    if word.endswith("ies") and n > 4:
        return word[:-3] + "y"
    if word.endswith("es") and n > 3:
        if word.endswith(("sses", "shes", "ches", "xes", "zes")):
            return word[:-2]
        stem = word[:-2]
        if len(stem) >= 3:
            return stem
    if word[-1] == "s" and word[-2] != "s" and n > 3:
        return word[:-1]
    return None


def _past_tense(word: str) -> str | None:
    n = len(word)
    if not word.endswith("ed") or n < 5:
        return None
    if word.endswith("ied"):
        return word[:-3] + "y"
    if word.endswith("eed"):
        return word[:-1]
    if _is_doubled_consonant(word[-3], word[-4]):
        return word[:-3]
    stem = word[:-2]
    if len(stem) >= 3:
        return _restore_e(stem)
    return None


def _aspect(word: str) -> str | None:
    n = len(word)
    if not word.endswith("ing") or n < 5:
        return None
    if n > 5 and _is_doubled_consonant(word[-4], word[-5]):
        return word[:-4]
    stem = word[:-3]
    if len(stem) >= 3:
        return _restore_e(stem)
    return None


def _simple_suffix(suffix: str, min_len: int) -> Callable[[str], str | None]:
    def handler(word: str) -> str | None:
        if word.endswith(suffix) and len(word) > min_len:
            stem = word[: -len(suffix)]
            if len(stem) >= 3:
                return stem
        return None

    return handler


def _ness(word: str) -> str | None:
    if word.endswith("ness") and len(word) > 6:
        stem = word[:-4]
        if stem.endswith("i"):
            stem = stem[:-1] + "y"
        if len(stem) >= 3:
            return stem
    return None


def _tion(word: str) -> str | None:
    if word.endswith("tion") and len(word) > 6 and len(word) - 4 >= 3:
        if word.endswith("ation") and len(word) > 7:
            return word[:-5] + "ate"
        return word[:-4] + "t"
    return None


def _ble(word: str) -> str | None:
    return _simple_suffix("able", 6)(word) or _simple_suffix("ible", 6)(word)


def _ive(word: str) -> str | None:
    if word.endswith("ive") and len(word) > 5 and len(word) - 3 >= 3:
        if word.endswith("ative") and len(word) > 7:
            return word[:-5] + "ate"
        return word[:-3]
    return None


def _ize(word: str) -> str | None:
    if word.endswith(("ize", "ise")) and len(word) > 5:
        stem = word[:-3]
        if len(stem) >= 3:
            return stem
    return None


def _al(word: str) -> str | None:
    if word.endswith("al") and len(word) > 5 and not word.endswith("ial"):
        stem = word[:-2]
        if len(stem) >= 3:
            return stem
    return None


def _er(word: str) -> str | None:
    if not word.endswith("er") or len(word) < 5:
        return None
    if _is_doubled_consonant(word[-3], word[-4]):
        return word[:-3]
    stem = word[:-2]
    if len(stem) >= 3:
        return _restore_e(stem)
    return None


_RULES: tuple[Callable[[str], str | None], ...] = (
    _plurals,
    _past_tense,
    _aspect,
    _simple_suffix("ity", 5),
    _ness,
    _tion,
    _simple_suffix("ment", 6),
    _ble,
    _simple_suffix("ly", 4),
    _simple_suffix("ful", 5),
    _simple_suffix("ous", 5),
    _ive,
    _ize,
    _al,
    _er,
)


def kstem(word: str) -> str | None:
    """Return the stem of *word*, or None when it needs no change.

    The word is lowercased first; a word that only differs from its
    lowercase form yields that lowercase form.
    """
    lower = word.lower()
    irregular = lookup_irregular(lower)
    if irregular is not None:
        return irregular
    for rule in _RULES:
        result = rule(lower)
        if result is not None:
            return result
    return lower if lower != word else None


class KStemFilter:
    """Token filter applying the Krovetz-style stemmer."""

    def filter(self, term: str) -> str:
        """Return the stemmed form of *term*; short terms are left as they are."""
        if len(term.encode("utf-8")) < 3:
            return term
        stemmed = kstem(term)
        return term if stemmed is None else stemmed

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, KStemFilter)

    def __hash__(self) -> int:
        return hash(type(self))