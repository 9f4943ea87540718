# englishstem

Small token filters for English text analysis. They need nothing outside the standard library.

- `englishstem.possessive` removes a trailing possessive `'s` or `’s`.
- `englishstem.stem` is a light Krovetz-style stemmer. It handles common irregular forms, plurals, `-ed`, `-ing` and several derivational suffixes. Its stems are usually real English words.

## Installation

```
pip install englishstem
```

## Usage

```python
from englishstem.possessive import EnglishPossessiveFilter, strip_possessive
from englishstem.stem import KStemFilter, kstem

possessive = EnglishPossessiveFilter()
possessive.filter("John's")      # "John"
strip_possessive("cat’s")        # "cat"

stemmer = KStemFilter()
stemmer.filter("ponies")         # "pony"
stemmer.filter("running")        # "run"
stemmer.filter("happiness")      # "happy"
stemmer.filter("go")             # "go"
```

Both filters take one term string and return the filtered string. A term shorter than three bytes in UTF-8 comes back unchanged.

### `englishstem.possessive`

- `strip_possessive(term)` removes a final `'s` or `’s` (right single quotation mark).
- `EnglishPossessiveFilter().filter(term)` does the same thing as a filter object.

### `englishstem.stem`

- `kstem(word)` lowercases the word and stems it. It returns the stem. If no rule applies, it returns the lowercased word when that differs from the input, and `None` when the word is already its own stem.
- `KStemFilter().filter(term)` returns the result of `kstem`, or the term itself when `kstem` gives `None`.
- `lookup_irregular(word)` returns the base form of a common irregular word, or `None`. For example, `"mice"` gives `"mouse"` and `"went"` gives `"go"`.
- `needs_e(stem)` reports whether a stem ends consonant–vowel–consonant and so takes a final `e` back after a suffix is removed. For example, `"mak"` becomes `"make"`.

The stemmer first looks the word up in the irregular forms. It then tries these rules in order and uses the first that applies:

1. plurals
2. `-ed`
3. `-ing`
4. `-ity`
5. `-ness`
6. `-tion`
7. `-ment`
8. `-able` and `-ible`
9. `-ly`
10. `-ful`
11. `-ous`
12. `-ive`
13. `-ize` and `-ise`
14. `-al`
15. `-er`

## What this package does not do

The package provides only the two filters. It has no tokenizer, no stop-word list and no complete analyzer. To process running English text, split it into lowercase tokens yourself, then apply `EnglishPossessiveFilter`, your own stop-word removal and `KStemFilter` to each token.

## Running the tests

```
pip install -e .[test]
pytest
```