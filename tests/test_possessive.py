import pytest

from englishstem.possessive import EnglishPossessiveFilter, strip_possessive


def test_possessive():
    assert EnglishPossessiveFilter().filter("John's") == "John"


def test_no_possessive():
    assert EnglishPossessiveFilter().filter("hello") == "hello"


def test_right_single_quotation_mark():
    assert strip_possessive("cat\u2019s") == "cat"


@pytest.mark.parametrize(
    "term, expected",
    [
        ("a's", "a"),
        ("'s", "'s"),
        ("\u2019s", ""),
        ("is", "is"),
        ("cats", "cats"),
        ("dog's", "dog"),
        ("", ""),
    ],
)
def test_strip_possessive_cases(term, expected):
    assert strip_possessive(term) == expected


def test_filter_matches_function():
    f = EnglishPossessiveFilter()
    for term in ["Mary's", "books", "x\u2019s"]:
        assert f.filter(term) == strip_possessive(term)


def test_only_one_suffix_removed_per_pass():
    f = EnglishPossessiveFilter()
    once = f.filter("John's's")
    assert once == "John's"
    assert f.filter(once) == "John"