"""Recursive typo classification of tokens."""

from typing import List

from dictionary import Dictionary
from models import TokenReport
from word_segmenter import MIN_WORD_LENGTH, segment


class TypoClassifier:
    """Decide whether a token is a misspelling.

    A token is clean when it is too short to judge, is a known word, or
    every word it decomposes into is clean. An unknown token that
    segments into a single part is a typo.
    """

    def __init__(self, dictionary: Dictionary):
        """Initialize classifier.

        Args:
            dictionary: Shared read-only set of known words
        """
        self.dictionary = dictionary

    def is_typo(self, token: str) -> bool:
        """Return True if the token, or any word inside it, is unknown.

        Args:
            token: Raw span text or a sub-word

        Returns:
            True if a typo was found
        """
        if len(token) < MIN_WORD_LENGTH:
            return False

        if token in self.dictionary:
            return False

        parts = segment(token)

        # Could not be decomposed any further
        if len(parts) == 1:
            return True

        return any(self.is_typo(part.lower()) for part in parts)

    def report(self, token: str) -> TokenReport:
        """Classify a token and keep its segmentation for display."""
        return TokenReport(token=token, parts=segment(token), is_typo=self.is_typo(token))

    def find_typo_words(self, token: str) -> List[str]:
        """List the unknown words inside a token, in order of appearance."""
        if not self.is_typo(token):
            return []
        parts = segment(token)
        if len(parts) == 1:
            return [token]
        words: List[str] = []
        for part in parts:
            words.extend(self.find_typo_words(part.lower()))
        return words


def is_typo(token: str, dictionary: Dictionary) -> bool:
    """Classify a single token against a dictionary."""
    return TypoClassifier(dictionary).is_typo(token)
