"""Split source-code tokens into natural-language words.

Each stage maps one fragment to zero or more smaller fragments and the
pipeline flat-maps them in order:

    whitespace/punctuation -> digits -> unicode words -> snake_case
    -> camelCase/PascalCase -> lowercase -> length filter

Digits are removed before case splitting, so "PascalCase123" becomes
"pascal", "case" and never "case123".
"""

import re
from typing import Callable, Iterable, List

MIN_WORD_LENGTH = 3

# Apostrophes and periods are left for the unicode word stage to resolve
BOUNDARY_RE = re.compile(r"[^\w'’.]+")
DIGITS_RE = re.compile(r"[0-9]+")
# A single apostrophe or period between word characters does not break a word
UNICODE_WORD_RE = re.compile(r"\w+(?:['’.]\w+)*")

Stage = Callable[[str], Iterable[str]]


def split_boundaries(text: str) -> List[str]:
    """Split on unicode whitespace and punctuation."""
    return [fragment for fragment in BOUNDARY_RE.split(text) if fragment]


def split_digits(text: str) -> List[str]:
    """Treat runs of ASCII digits as separators."""
    return [fragment for fragment in DIGITS_RE.split(text) if fragment]


def split_unicode_words(text: str) -> List[str]:
    """Re-tokenize a fragment into unicode words."""
    return UNICODE_WORD_RE.findall(text)


def split_snake_case(text: str) -> List[str]:
    """Split on underscores."""
    return [fragment for fragment in text.split("_") if fragment]


def split_camel_case(text: str) -> List[str]:
    """Split camelCase and PascalCase, keeping acronyms together.

    Only cased letters build words, anything else ends the current word.
    An uppercase letter opens a new word after a lowercase letter, or when
    it is the last capital of an acronym run followed by lowercase.

        >>> split_camel_case("XMLParser")
        ['XML', 'Parser']
        >>> split_camel_case("IInterfaceCat")
        ['I', 'Interface', 'Cat']
    """
    words = []
    current: List[str] = []

    for index, char in enumerate(text):
        if char.isupper():
            following = text[index + 1 : index + 2]
            if current and (current[-1].islower() or following.islower()):
                words.append("".join(current))
                current = []
            current.append(char)
        elif char.islower():
            current.append(char)
        elif current:
            words.append("".join(current))
            current = []

    if current:
        words.append("".join(current))

    return words


PIPELINE: List[Stage] = [
    split_boundaries,
    split_digits,
    split_unicode_words,
    split_snake_case,
    split_camel_case,
]


def extract_words(text: str) -> List[str]:
    """Run the splitting stages and lowercase the result, without length filtering."""
    fragments = [text]
    for stage in PIPELINE:
        fragments = [part for fragment in fragments for part in stage(fragment)]
    return [fragment.lower() for fragment in fragments]


def segment(token: str) -> List[str]:
    """Decompose a token into lowercase words of at least MIN_WORD_LENGTH.

    Never returns an empty list: if every word is too short the short
    words are returned, and if the token holds no letters at all it is
    returned unchanged.

        >>> segment("hello_world_test")
        ['hello', 'world', 'test']
        >>> segment("fn isTheCatInTheDog")
        ['the', 'cat', 'the', 'dog']
    """
    fragments = extract_words(token)
    words = [fragment for fragment in fragments if len(fragment) >= MIN_WORD_LENGTH]
    if words:
        return words
    if fragments:
        return fragments
    return [token]
