#!/usr/bin/env python3
"""Main CLI interface for the code typo scanner."""

import json
import sys
from typing import List, Optional

import click

from config import Config
from dictionary import Dictionary, build_dictionary, load_dictionary
from errors import DictionaryLoadError
from file_analyzer import FileAnalyzer, find_files
from grammars import EXTENSION_GRAMMARS, GRAMMAR_LOADERS
from models import RunSummary, TokenReport
from typo_classifier import TypoClassifier
from word_segmenter import segment


class TypoScanner:
    """Main application class for scanning source files."""

    def __init__(self, config: Config):
        """Initialize typo scanner.

        Args:
            config: Configuration object
        """
        self.config = config

    def load_dictionary(self, pattern: Optional[str] = None) -> Dictionary:
        """Load the dictionary from a glob, falling back to the configured one.

        Raises:
            DictionaryLoadError: If no words could be loaded
        """
        return load_dictionary(pattern or self.config.dictionary_path)

    def scan(
        self,
        patterns: List[str],
        dictionary: Dictionary,
        grammar: Optional[str] = None,
        workers: Optional[int] = None,
    ) -> Optional[RunSummary]:
        """Scan every file matched by the patterns.

        Args:
            patterns: Glob patterns of source files
            dictionary: Loaded known-words set
            grammar: Force a grammar for all files
            workers: Thread count, defaults to the configured value

        Returns:
            RunSummary, or None if no files matched
        """
        paths = find_files(patterns)
        if not paths:
            return None

        analyzer = FileAnalyzer(
            dictionary,
            grammar=grammar,
            default_grammar=self.config.default_grammar,
        )
        return analyzer.run_scan(paths, max_workers=workers or self.config.max_workers)

    def check_tokens(self, tokens: List[str], dictionary: Dictionary) -> List[TokenReport]:
        """Classify literal tokens."""
        classifier = TypoClassifier(dictionary)
        return [classifier.report(token) for token in tokens]


def _print_summary(summary: RunSummary, show_typos: bool) -> None:
    """Print a run summary in human readable form."""
    if show_typos:
        for result in summary.files:
            for span in result.typos:
                click.echo(
                    f"{result.path}:{span.line}:{span.column} {span.kind} {span.text!r}"
                )
        if summary.found:
            click.echo()

    if summary.failed:
        click.echo(f"⚠️  Skipped {len(summary.failed)} files:")
        for failure in summary.failed:
            click.echo(f"   • {failure.path}: {failure.error}")
        click.echo()

    click.echo(
        f"✅ Done with {summary.files_processed} files in {summary.elapsed_seconds:.2f}s"
    )
    click.echo(f"🔍 Found {summary.found} typos in {summary.total} words")
    if summary.typo_ratio is not None:
        click.echo(f"   Typo ratio: {summary.typo_ratio:.2%}")


# CLI Interface
@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose: bool):
    """Code Typo Scanner - Find misspelled words in identifiers, comments and strings."""
    if ctx.invoked_subcommand is None:
        click.echo("🔤 Code Typo Scanner")
        click.echo("=" * 40)
        click.echo("Find misspelled words in identifiers, comments and strings\n")

        click.echo("📋 Most Common Commands:")
        click.echo("  typo-scanner scan 'src/**/*.ts'")
        click.echo("  typo-scanner scan 'src/**/*.ts' --show-typos")
        click.echo("  typo-scanner check 'parseJsonRespnse'")
        click.echo("  typo-scanner segment 'XMLHttpRequest'")
        click.echo("\n🔧 Utility Commands:")
        click.echo("  typo-scanner grammars                 # List supported grammars")
        click.echo("\n💡 Use --help to see all commands and options")
        return

    config = Config()
    config.configure_logging(verbose)

    # Dictionary is checked when a command loads it, --dictionary may override it
    validation = config.validate_required_settings(check_dictionary=False)

    if not validation.is_valid:
        click.echo("❌ Configuration errors:")
        for error in validation.errors:
            click.echo(f"   • {error}")
        sys.exit(1)

    if validation.warnings:
        click.echo("⚠️  Configuration warnings:")
        for warning in validation.warnings:
            click.echo(f"   • {warning}")
        click.echo()

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["scanner"] = TypoScanner(config)


def _load_dictionary_or_exit(scanner: TypoScanner, pattern: Optional[str]) -> Dictionary:
    try:
        return scanner.load_dictionary(pattern)
    except DictionaryLoadError as e:
        click.echo(f"❌ Could not load dictionary: {e}")
        sys.exit(1)


@cli.command()
@click.argument("patterns", nargs=-1, required=True)
@click.option("--dictionary", "-d", help="Glob of word list files")
@click.option(
    "--grammar",
    "-g",
    type=click.Choice(sorted(GRAMMAR_LOADERS)),
    help="Parse every file with this grammar",
)
@click.option("--workers", "-w", type=click.IntRange(min=1), help="Number of worker threads")
@click.option("--show-typos", is_flag=True, help="List every flagged span")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.pass_context
def scan(
    ctx,
    patterns,
    dictionary: str = None,
    grammar: str = None,
    workers: int = None,
    show_typos: bool = False,
    as_json: bool = False,
):
    """Scan source files matching glob PATTERNS, e.g. 'src/**/*.ts'."""
    scanner = ctx.obj["scanner"]

    words = _load_dictionary_or_exit(scanner, dictionary)
    if not as_json:
        click.echo(f"📚 Dictionary: {len(words)} words")

    summary = scanner.scan(list(patterns), words, grammar=grammar, workers=workers)
    if summary is None:
        click.echo(f"❌ No files match: {' '.join(patterns)}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(summary.to_dict(), indent=2))
    else:
        _print_summary(summary, show_typos)


@cli.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--dictionary", "-d", help="Glob of word list files")
@click.option("--word", "extra_words", multiple=True, help="Extra known word")
@click.pass_context
def check(ctx, tokens, dictionary: str = None, extra_words=()):
    """Check literal TOKENS and show how they were split."""
    scanner = ctx.obj["scanner"]
    words = _load_dictionary_or_exit(scanner, dictionary)
    if extra_words:
        words = build_dictionary([*words, *extra_words])

    reports = scanner.check_tokens(list(tokens), words)
    for report in reports:
        marker = "❌" if report.is_typo else "✅"
        click.echo(f"{marker} {report.token} -> {', '.join(report.parts)}")

    if any(report.is_typo for report in reports):
        sys.exit(1)


@cli.command(name="segment")
@click.argument("tokens", nargs=-1, required=True)
def segment_tokens(tokens):
    """Print the words each of TOKENS is split into."""
    for token in tokens:
        click.echo(f"{token}: {' '.join(segment(token))}")


@cli.command()
def grammars():
    """List supported grammars and the file extensions mapped to them."""
    click.echo("🌳 Grammars:")
    for name in sorted(GRAMMAR_LOADERS):
        extensions = sorted(ext for ext, grammar in EXTENSION_GRAMMARS.items() if grammar == name)
        click.echo(f"   {name}: {' '.join(extensions)}")


if __name__ == "__main__":
    cli()
