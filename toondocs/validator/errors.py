# toondocs/validator/errors.py
"""Diagnostic collection for a single validation run."""

from __future__ import annotations

from typing import Any, Dict, List

# Source label for a fenced block inside a Markdown file
BLOCK_SOURCE_TEMPLATE = "{path}:{line_num} (toon block #{block_index})"


class Diagnostic:
    """One failed unit or one failed artifact check."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return (self.source, self.message) == (other.source, other.message)

    def __repr__(self) -> str:
        return f"Diagnostic(source={self.source!r}, message={self.message!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert diagnostic to dictionary for JSON serialization."""
        return {"source": self.source, "message": self.message}


def block_source(path: str, line_num: int, block_index: int) -> str:
    """Build the diagnostic source for an embedded block."""
    return BLOCK_SOURCE_TEMPLATE.format(
        path=path, line_num=line_num, block_index=block_index
    )


class RunTally:
    """Counts and diagnostics accumulated over one validation run.

    Diagnostics keep discovery order; they are never sorted.
    """

    def __init__(self):
        self.total_files = 0
        self.total_blocks = 0
        self.errors: List[Diagnostic] = []
        self.warnings: List[Diagnostic] = []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RunTally):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def add_error(self, diagnostic: Diagnostic) -> None:
        """Add an error diagnostic."""
        self.errors.append(diagnostic)

    def add_warning(self, diagnostic: Diagnostic) -> None:
        """Add a warning diagnostic (reported, never fails the run)."""
        self.warnings.append(diagnostic)

    def extend(self, other: "RunTally") -> None:
        """Merge counts and diagnostics from another tally."""
        self.total_files += other.total_files
        self.total_blocks += other.total_blocks
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if any warnings were collected."""
        return len(self.warnings) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert tally to dictionary for JSON serialization."""
        return {
            "total_files": self.total_files,
            "total_blocks": self.total_blocks,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
            "status": "FAIL" if self.has_errors() else "PASS",
        }
