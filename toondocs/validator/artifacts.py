"""Existence checks for generated documentation artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from toondocs.validator.errors import Diagnostic

logger = logging.getLogger(__name__)

STATUS_PRESENT = "present"
STATUS_ERROR = "error"
STATUS_WARNING = "warning"


@dataclass(frozen=True)
class ArtifactSpec:
    """One expected output file, relative to the project directory."""

    path: str
    label: str
    required: bool = True


@dataclass(frozen=True)
class ArtifactCheck:
    """Outcome for a single manifest entry."""

    spec: ArtifactSpec
    status: str
    chars: int = 0
    diagnostic: Optional[Diagnostic] = None


@dataclass
class ArtifactCheckResult:
    """Outcome of checking every manifest entry, in manifest order."""

    checks: List[ArtifactCheck] = field(default_factory=list)

    @property
    def errors(self) -> List[Diagnostic]:
        return [c.diagnostic for c in self.checks if c.status == STATUS_ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [c.diagnostic for c in self.checks if c.status == STATUS_WARNING]

    @property
    def present_count(self) -> int:
        return sum(1 for c in self.checks if c.status == STATUS_PRESENT)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return {
            "checks": [
                {
                    "path": c.spec.path,
                    "label": c.spec.label,
                    "required": c.spec.required,
                    "status": c.status,
                    "chars": c.chars,
                    "message": c.diagnostic.message if c.diagnostic else None,
                }
                for c in self.checks
            ],
            "present_count": self.present_count,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }


def _check_one(root: Path, spec: ArtifactSpec) -> ArtifactCheck:
    target = root / spec.path

    if not target.exists():
        if spec.required:
            logger.warning("Required artifact missing: %s", spec.path)
            return ArtifactCheck(
                spec, STATUS_ERROR,
                diagnostic=Diagnostic(spec.path, f"Required file missing ({spec.label})"),
            )
        logger.debug("Optional artifact missing: %s", spec.path)
        return ArtifactCheck(
            spec, STATUS_WARNING,
            diagnostic=Diagnostic(spec.path, f"Optional file missing ({spec.label})"),
        )

    try:
        content = target.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        return ArtifactCheck(
            spec, STATUS_ERROR,
            diagnostic=Diagnostic(spec.path, f"File could not be read ({spec.label}): {e}"),
        )

    if not content:
        return ArtifactCheck(
            spec, STATUS_ERROR,
            diagnostic=Diagnostic(spec.path, f"File exists but is empty ({spec.label})"),
        )

    logger.info("Artifact present: %s (%d chars)", spec.path, len(content))
    return ArtifactCheck(spec, STATUS_PRESENT, chars=len(content))


def check_artifacts(
    project_dir: Union[str, Path],
    manifest: Sequence[ArtifactSpec],
) -> ArtifactCheckResult:
    """
    Check that each manifest entry exists and is not blank.

    Only emptiness is inspected; contents are never decoded. Every entry is
    checked even after a failure.

    Args:
        project_dir: Directory the manifest paths are relative to
        manifest: Expected artifacts

    Returns:
        ArtifactCheckResult with one ArtifactCheck per manifest entry
    """
    root = Path(project_dir)
    result = ArtifactCheckResult()
    for spec in manifest:
        result.checks.append(_check_one(root, spec))
    return result
