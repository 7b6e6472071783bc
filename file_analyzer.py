"""Per-file typo analysis and the parallel scan across files."""

import glob
import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, List, Optional

from dictionary import Dictionary
from errors import ExtractError, ReadError, TypoScanError
from grammars import DEFAULT_GRAMMAR, grammar_for_path, parse_source
from models import FileResult, RunSummary
from syntax_walker import iter_candidate_spans
from typo_classifier import TypoClassifier

logger = logging.getLogger(__name__)


def find_files(patterns: Iterable[str]) -> List[str]:
    """Expand glob patterns into a sorted list of unique file paths.

    Args:
        patterns: Glob patterns such as 'src/**/*.ts'; '**' matches recursively

    Returns:
        Paths of regular files matched by any pattern
    """
    paths = set()
    for pattern in patterns:
        for match in glob.glob(pattern, recursive=True):
            if Path(match).is_file():
                paths.add(match)
    return sorted(paths)


def read_source(path: str) -> bytes:
    """Read a source file and make sure it is UTF-8 text.

    Raises:
        ReadError: If the file cannot be read or is not valid UTF-8
    """
    try:
        source = Path(path).read_bytes()
    except OSError as e:
        raise ReadError(f"Failed to read file: {e.strerror or e}", path) from e

    try:
        source.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ReadError(f"File is not valid UTF-8: {e.reason}", path) from e

    return source


class FileAnalyzer:
    """Count typos in source files using one shared dictionary."""

    def __init__(
        self,
        dictionary: Dictionary,
        grammar: Optional[str] = None,
        default_grammar: Optional[str] = DEFAULT_GRAMMAR,
    ):
        """Initialize file analyzer.

        Args:
            dictionary: Fully loaded known-words set, shared read-only by workers
            grammar: Force this grammar for every file
            default_grammar: Grammar for files with an unrecognised extension,
                None to reject them
        """
        self.dictionary = dictionary
        self.classifier = TypoClassifier(dictionary)
        self.grammar = grammar
        self.default_grammar = default_grammar

    def analyze_source(self, source: bytes, grammar: str, path: str = "<source>") -> FileResult:
        """Count typos in already loaded source bytes.

        Every candidate span counts toward total, flagged spans toward found.
        """
        tree = parse_source(source, grammar)
        result = FileResult(path=path)

        try:
            for span in iter_candidate_spans(tree, source):
                result.total += 1
                if self.classifier.is_typo(span.text):
                    result.found += 1
                    result.typos.append(span)
        except ExtractError as e:
            e.path = path
            raise

        return result

    def analyze_file(self, path: str) -> FileResult:
        """Read, parse and count typos in one file.

        Raises:
            ReadError, ParseError, ExtractError: The file's result is unusable
        """
        source = read_source(path)
        grammar = self.grammar or grammar_for_path(path, self.default_grammar)
        try:
            result = self.analyze_source(source, grammar, path)
        except TypoScanError as e:
            e.path = e.path or path
            raise

        logger.debug("%s: %d typos in %d words", path, result.found, result.total)
        return result

    def run_scan(self, paths: List[str], max_workers: Optional[int] = None) -> RunSummary:
        """Analyze files in parallel and sum their counts.

        A file that fails is logged and recorded in the summary, it does not
        stop the other files.

        Args:
            paths: Files to analyze
            max_workers: Thread pool size, None for the executor default

        Returns:
            RunSummary with summed found/total and elapsed wall time
        """
        summary = RunSummary()
        start = time.perf_counter()
        logger.info("Scanning %d files with %s workers", len(paths), max_workers or "default")

        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = {pool.submit(self.analyze_file, path): path for path in paths}
            for future in as_completed(futures):
                path = futures[future]
                try:
                    result = future.result()
                except TypoScanError as e:
                    logger.warning("Skipping %s: %s", path, e.message)
                    summary.add_failure(path, e.message)
                    continue
                summary.add(result)

        # as_completed order is arbitrary
        summary.files.sort(key=lambda r: r.path)
        summary.failed.sort(key=lambda f: f.path)
        summary.elapsed_seconds = time.perf_counter() - start

        logger.info(
            "Scan finished: %d typos in %d words across %d files (%d failed) in %.2fs",
            summary.found,
            summary.total,
            summary.files_processed,
            len(summary.failed),
            summary.elapsed_seconds,
        )
        return summary
