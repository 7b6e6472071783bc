"""Configuration management for the code typo scanner."""

import glob
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from grammars import DEFAULT_GRAMMAR, GRAMMAR_LOADERS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ValidationResult:
    """Result of configuration validation."""

    is_valid: bool
    errors: list[str]
    warnings: list[str]


class Config:
    """Configuration manager for the typo scanner."""

    def __init__(self, env_file: Optional[str] = None):
        """Initialize configuration.

        Args:
            env_file: Optional path to .env file. If None, looks for .env in
                current directory.
        """
        self.env_file = env_file or ".env"
        self.load_env()

    def load_env(self) -> None:
        """Load environment variables from .env file."""
        if os.path.exists(self.env_file):
            load_dotenv(self.env_file)

    @property
    def dictionary_path(self) -> str:
        """Get glob pattern of dictionary word lists."""
        return os.getenv("TYPO_DICTIONARY_PATH", "dictionaries/*")

    @property
    def max_workers(self) -> int:
        """Get number of worker threads used to scan files."""
        return int(os.getenv("TYPO_MAX_WORKERS", str(os.cpu_count() or 1)))

    @property
    def log_level(self) -> str:
        """Get logging level name."""
        return os.getenv("TYPO_LOG_LEVEL", "WARNING").upper()

    @property
    def default_grammar(self) -> str:
        """Get grammar used for files with an unrecognised extension."""
        return os.getenv("TYPO_DEFAULT_GRAMMAR", DEFAULT_GRAMMAR)

    def validate_required_settings(self, check_dictionary: bool = True) -> ValidationResult:
        """Validate that all required configuration is present and valid.

        Args:
            check_dictionary: Also require the dictionary glob to match files

        Returns:
            ValidationResult with validation status and any errors/warnings.
        """
        errors = []
        warnings = []

        if check_dictionary and not glob.glob(self.dictionary_path, recursive=True):
            errors.append(
                f"No dictionary files match '{self.dictionary_path}'. "
                "Set TYPO_DICTIONARY_PATH or pass --dictionary."
            )

        try:
            workers = self.max_workers
        except ValueError:
            errors.append("TYPO_MAX_WORKERS must be an integer.")
        else:
            if workers <= 0:
                errors.append("TYPO_MAX_WORKERS must be greater than 0.")
            elif workers > 64:
                warnings.append(
                    f"TYPO_MAX_WORKERS is set to {workers}. "
                    f"Most runs will not benefit from that many threads."
                )

        if self.log_level not in LOG_LEVELS:
            errors.append(
                f"TYPO_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}."
            )

        if self.default_grammar not in GRAMMAR_LOADERS:
            errors.append(
                f"TYPO_DEFAULT_GRAMMAR '{self.default_grammar}' is not a known grammar."
            )

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )

    def configure_logging(self, verbose: bool = False) -> None:
        """Configure root logging from the configured level."""
        level = logging.DEBUG if verbose else getattr(logging, self.log_level, logging.WARNING)
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    def __str__(self) -> str:
        """String representation of configuration."""
        return f"""Config:
  Dictionary Path: {self.dictionary_path}
  Max Workers: {os.getenv("TYPO_MAX_WORKERS", "auto")}
  Log Level: {self.log_level}
  Default Grammar: {self.default_grammar}"""
