"""Known-words dictionary loading."""

import glob
import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List

from errors import DictionaryLoadError

logger = logging.getLogger(__name__)

Dictionary = FrozenSet[str]


def build_dictionary(words: Iterable[str]) -> Dictionary:
    """Build an immutable dictionary from an iterable of words.

    Blank entries are dropped. Words are kept exactly as given, membership
    is case-sensitive.
    """
    return frozenset(word for word in words if word)


def read_word_list(path: str) -> List[str]:
    """Read one word list file.

    Args:
        path: Path to a text file with one word per line

    Returns:
        Words in file order. Blank lines and lines starting with '#' are skipped.

    Raises:
        DictionaryLoadError: If the file cannot be read as UTF-8 text
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Failed to read word list: {e}", path) from e

    words = []
    for line in content.splitlines():
        word = line.strip()
        if word and not word.startswith("#"):
            words.append(word)
    return words


def load_dictionary(pattern: str) -> Dictionary:
    """Load and merge every word list matching a glob pattern.

    Args:
        pattern: Glob pattern, e.g. 'dictionaries/*'

    Returns:
        Deduplicated, read-only set of known words

    Raises:
        DictionaryLoadError: If nothing matches, a file is unreadable, or no
            words were loaded at all
    """
    paths = sorted(p for p in glob.glob(pattern, recursive=True) if Path(p).is_file())
    if not paths:
        raise DictionaryLoadError(f"No dictionary files match '{pattern}'")

    words: List[str] = []
    for path in paths:
        file_words = read_word_list(path)
        logger.debug("Loaded %d words from %s", len(file_words), path)
        words.extend(file_words)

    dictionary = build_dictionary(words)
    if not dictionary:
        raise DictionaryLoadError(f"Dictionary files matching '{pattern}' are empty")

    logger.info("Dictionary ready: %d words from %d files", len(dictionary), len(paths))
    return dictionary
