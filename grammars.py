"""Tree-sitter grammar registry and parsing."""

import logging
import threading
from pathlib import Path
from typing import Callable, Dict, Optional

import tree_sitter_javascript as tsjavascript
import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Parser, Tree

from errors import ParseError

logger = logging.getLogger(__name__)

# Grammar name -> function returning the compiled language pointer
GRAMMAR_LOADERS: Dict[str, Callable[[], object]] = {
    "typescript": tstypescript.language_typescript,
    "tsx": tstypescript.language_tsx,
    "javascript": tsjavascript.language,
}

EXTENSION_GRAMMARS: Dict[str, str] = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
}

DEFAULT_GRAMMAR = "typescript"

_languages: Dict[str, Language] = {}
_languages_lock = threading.Lock()


def get_language(name: str) -> Language:
    """Return the tree-sitter Language for a grammar name.

    Raises:
        ParseError: If the grammar is unknown or fails to load
    """
    language = _languages.get(name)
    if language is not None:
        return language

    loader = GRAMMAR_LOADERS.get(name)
    if loader is None:
        known = ", ".join(sorted(GRAMMAR_LOADERS))
        raise ParseError(f"Unknown grammar '{name}'. Known grammars: {known}")

    # Worker threads race to fill the cache on their first file
    with _languages_lock:
        if name not in _languages:
            try:
                _languages[name] = Language(loader())
            except (TypeError, ValueError) as e:
                raise ParseError(f"Could not load grammar '{name}': {e}") from e
        return _languages[name]


def grammar_for_path(path: str, default: Optional[str] = DEFAULT_GRAMMAR) -> str:
    """Pick a grammar name from a file extension.

    Args:
        path: Source file path
        default: Grammar used for unknown extensions; None makes them an error

    Raises:
        ParseError: If the extension is unknown and no default is given
    """
    grammar = EXTENSION_GRAMMARS.get(Path(path).suffix.lower(), default)
    if grammar is None:
        raise ParseError("No grammar registered for this file type", path)
    return grammar


def parse_source(source: bytes, grammar: str) -> Tree:
    """Parse source bytes with a fresh parser.

    A new Parser is built per call, parsers are never shared between files.

    Raises:
        ParseError: If the parser cannot be set up or produces no tree
    """
    language = get_language(grammar)
    try:
        parser = Parser(language)
        tree = parser.parse(source)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Failed to parse with grammar '{grammar}': {e}") from e

    if tree is None:
        raise ParseError(f"Parser for '{grammar}' returned no tree")

    if tree.root_node.has_error:
        logger.debug("Syntax errors in tree parsed with '%s'", grammar)

    return tree
