import pytest

from englishstem.stem import KStemFilter, kstem, lookup_irregular, needs_e


def stem(word):
    return KStemFilter().filter(word)


def test_plurals():
    assert stem("ponies") == "pony"
    assert stem("cats") == "cat"


def test_past_tense():
    assert stem("agreed") == "agree"
    assert stem("studied") == "study"


def test_ing():
    assert stem("running") == "run"
    assert stem("making") == "make"


def test_ness():
    assert stem("happiness") == "happy"
    assert stem("darkness") == "dark"


def test_short_words_unchanged():
    assert stem("go") == "go"
    assert stem("an") == "an"


@pytest.mark.parametrize(
    "word, expected",
    [
        ("mice", "mouse"),
        ("MICE", "mouse"),
        ("children", "child"),
        ("were", "be"),
        ("done", "do"),
        ("thought", "think"),
    ],
)
def test_irregulars(word, expected):
    assert stem(word) == expected


@pytest.mark.parametrize(
    "word, expected",
    [
        ("boxes", "box"),
        ("classes", "class"),
        ("ties", "tie"),
        ("stopped", "stop"),
        ("creation", "create"),
        ("quickly", "quick"),
        ("careful", "care"),
        ("runner", "run"),
        ("kindness", "kind"),
    ],
)
def test_suffix_rules(word, expected):
    assert stem(word) == expected


def test_uppercase_is_lowered():
    assert stem("Cats") == "cat"
    assert stem("Hello") == "hello"


def test_kstem_returns_none_when_unchanged():
    assert kstem("cat") is None


def test_kstem_returns_lowercase_when_only_case_differs():
    assert kstem("CAT") == "cat"


def test_lookup_irregular():
    assert lookup_irregular("geese") == "goose"
    assert lookup_irregular("teeth") == "tooth"
    assert lookup_irregular("table") is None


@pytest.mark.parametrize(
    "value, expected",
    [
        ("mak", True),
        ("run", True),
        ("ab", True),
        ("a", False),
        ("rain", False),
        ("tree", False),
    ],
)
def test_needs_e(value, expected):
    assert needs_e(value) is expected


def test_filter_is_stable_on_stem_of_short_word():
    assert stem("ox") == "ox"
    assert stem("ran") == "run"


def test_filter_lowercases_before_irregular_lookup():
    assert KStemFilter().filter("Ran") == "run"