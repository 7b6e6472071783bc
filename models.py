"""Data models for the code typo scanner."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional


@dataclass
class CandidateSpan:
    """A slice of source text produced by a syntax node worth spell checking."""

    text: str
    kind: str
    line: int = 0  # 1-based, only used for reporting
    column: int = 0

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "text": self.text,
            "kind": self.kind,
            "line": self.line,
            "column": self.column,
        }


@dataclass
class FileResult:
    """Typo counts for a single analyzed file."""

    path: str
    found: int = 0
    total: int = 0
    typos: List[CandidateSpan] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path,
            "found": self.found,
            "total": self.total,
            "typos": [span.to_dict() for span in self.typos],
        }


@dataclass
class FailedFile:
    """A file whose analysis was dropped."""

    path: str
    error: str

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {"path": self.path, "error": self.error}


@dataclass
class RunSummary:
    """Aggregated result of scanning a set of files."""

    found: int = 0
    total: int = 0
    files: List[FileResult] = field(default_factory=list)
    failed: List[FailedFile] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    started_at: datetime = field(default_factory=datetime.now)

    @property
    def files_processed(self) -> int:
        """Number of files that were fully analyzed."""
        return len(self.files)

    @property
    def typo_ratio(self) -> Optional[float]:
        """Share of checked spans flagged as typos, None when nothing was checked."""
        if self.total == 0:
            return None
        return self.found / self.total

    def add(self, result: FileResult) -> None:
        """Fold a file result into the summary."""
        self.files.append(result)
        self.found += result.found
        self.total += result.total

    def add_failure(self, path: str, error: str) -> None:
        """Record a file that contributed nothing to the counts."""
        self.failed.append(FailedFile(path=path, error=error))

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "found": self.found,
            "total": self.total,
            "files_processed": self.files_processed,
            "files_failed": len(self.failed),
            "elapsed_seconds": round(self.elapsed_seconds, 4),
            "started_at": self.started_at.isoformat(),
            "files": [result.to_dict() for result in self.files],
            "failed": [failure.to_dict() for failure in self.failed],
        }


@dataclass
class TokenReport:
    """Classification of a literal token, used by the check command."""

    token: str
    parts: List[str]
    is_typo: bool
