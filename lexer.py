import re
from collections import namedtuple
from functools import lru_cache


LOWER_LETTERS = 'abcdefghijklmnopqrstuvwxyzäöå'
UPPER_LETTERS = LOWER_LETTERS.upper()
ALPHABET = frozenset(LOWER_LETTERS)

LOWER_CASE = 'lower'
UPPER_CASE = 'upper'
CAPITALIZED = 'capitalized'

Word = namedtuple('Word', ['text', 'capitalization'])
Other = namedtuple('Other', ['text'])


@lru_cache(maxsize=None)
def _special_character_pattern():
    return re.compile('[^{} ]'.format(LOWER_LETTERS))


@lru_cache(maxsize=None)
def _segment_pattern():
    letters = LOWER_LETTERS + UPPER_LETTERS
    return re.compile('([{0}]+)|([^{0}]+)'.format(letters))


def is_word_letter(c):
    return c in ALPHABET


def preprocess_text(text):
    """Lowercase ``text`` and drop everything but alphabet letters and spaces."""
    return _special_character_pattern().sub('', text.lower())


def determine_capitalization(word):
    if word == word.lower():
        return LOWER_CASE
    elif word == word.upper():
        return UPPER_CASE
    else:
        return CAPITALIZED


def capitalize(word, capitalization):
    if capitalization == UPPER_CASE:
        return word.upper()
    elif capitalization == CAPITALIZED:
        return word[:1].upper() + word[1:]
    return word


def lex(text):
    """Split ``text`` into ``Word`` and ``Other`` segments.

    Word segments carry the lowercased word and the capitalization of the
    original spelling, so that ``''.join`` of the re-capitalized words and
    the other segments reproduces the stripped input.
    """
    tokens = []
    for m in _segment_pattern().finditer(text.strip()):
        word, other = m.groups()
        if word:
            tokens.append(Word(word.lower(), determine_capitalization(word)))
        else:
            tokens.append(Other(other))
    return tokens


def render(tokens, replace):
    """Join ``tokens`` back into text, passing every word through ``replace``."""
    out = []
    for token in tokens:
        if isinstance(token, Word):
            out.append(capitalize(replace(token.text), token.capitalization))
        else:
            out.append(token.text)
    return ''.join(out)
