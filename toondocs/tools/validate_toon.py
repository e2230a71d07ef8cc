#!/usr/bin/env python3
"""
validate_toon.py - TOON documentation validator

Validates TOON syntax wherever it appears in a documentation tree, and
optionally checks that the generated documentation artifacts exist.

## What It Validates

**Standalone files**: every `*.toon` file under the docs directory is decoded
in strict mode.

**Embedded blocks**: every ```toon fenced block in `*.md` files under the docs
directory is decoded in strict mode. Fences must start at column 0.

**Artifacts** (`--all` only): AGENTS.md, CLAUDE.md and the L1 index must exist
and be non-empty; tool-specific rule files are optional (warnings only).
The manifest lives in toondocs/config/validation.yaml.

## CLI Usage

Validate the default docs directory (.claude/docs, or $TOON_DOCS_DIR):
  validate-toon

Validate a specific docs directory:
  validate-toon path/to/docs

Full check of a project (TOON + generated artifacts):
  validate-toon --all [project-dir]

## Exit Codes

0   No errors (warnings allowed)
1   One or more errors
2   Fatal error (bad configuration, unexpected failure)
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from toondocs import __version__
from toondocs.config.validation_config import (
    ConfigError,
    get_artifact_manifest,
    get_default_docs_dir,
    get_docs_subpath,
)
from toondocs.validator.artifacts import (
    STATUS_ERROR,
    STATUS_PRESENT,
    ArtifactCheckResult,
    check_artifacts,
)
from toondocs.validator.errors import RunTally
from toondocs.validator.runner import run_validation

logger = logging.getLogger(__name__)

# Exit codes per contract
EXIT_SUCCESS = 0
EXIT_VALIDATION_FAILED = 1
EXIT_FATAL_ERROR = 2


# ============================================================================
# Console Reporting
# ============================================================================

def merge_results(tally: RunTally, artifact_result: Optional[ArtifactCheckResult]) -> RunTally:
    """Combine TOON diagnostics with artifact diagnostics (TOON first)."""
    combined = RunTally()
    combined.extend(tally)
    if artifact_result is not None:
        for error in artifact_result.errors:
            combined.add_error(error)
        for warning in artifact_result.warnings:
            combined.add_warning(warning)
    return combined


def print_artifact_checks(artifact_result: ArtifactCheckResult) -> None:
    """Print one line per manifest entry."""
    for check in artifact_result.checks:
        if check.status == STATUS_PRESENT:
            print(f"✓ {check.spec.path} ({check.spec.label}, {check.chars} chars)")
        elif check.status == STATUS_ERROR:
            print(f"✗ {check.spec.path} ({check.diagnostic.message})")
        else:
            print(f"⚠ {check.spec.path} ({check.diagnostic.message})")
    print()


def print_warnings(result: RunTally) -> None:
    """Print warnings in discovery order."""
    print(f"{len(result.warnings)} warning(s):\n")
    for warning in result.warnings:
        print(f"  WARN {warning.source}")
        print(f"    {warning.message}\n")


def print_errors(result: RunTally) -> None:
    """Print errors in discovery order."""
    print(f"Found {len(result.errors)} error(s):\n")
    for error in result.errors:
        print(f"  ERROR in {error.source}")
        print(f"    {error.message}\n")


def report(
    tally: RunTally,
    artifact_result: Optional[ArtifactCheckResult] = None,
    docs_dir: str = "",
) -> int:
    """
    Print the run to stdout and return the exit code.

    TOON-only mode is selected by passing no artifact_result.

    Args:
        tally: Result of run_validation
        artifact_result: Result of check_artifacts (--all mode only)
        docs_dir: Docs directory as given on the command line

    Returns:
        EXIT_SUCCESS if there are no errors, EXIT_VALIDATION_FAILED otherwise
    """
    all_mode = artifact_result is not None

    if not all_mode and tally.total_files == 0:
        print(f"No TOON content found in {docs_dir}")
        return EXIT_SUCCESS

    if all_mode:
        print_artifact_checks(artifact_result)

    result = merge_results(tally, artifact_result)

    print(f"Validated {result.total_blocks} block(s) across {result.total_files} file(s)\n")

    if result.has_warnings():
        print_warnings(result)

    if not result.has_errors():
        print("All checks passed." if all_mode else "All TOON blocks are valid.")
        return EXIT_SUCCESS

    print_errors(result)
    return EXIT_VALIDATION_FAILED


# ============================================================================
# JSON Output for Machine-Readable Results
# ============================================================================

def build_report_json(
    tally: RunTally,
    artifact_result: Optional[ArtifactCheckResult],
    docs_dir: str,
) -> Dict[str, Any]:
    """Build machine-readable report for CI consumption."""
    result = merge_results(tally, artifact_result)
    output = {
        "mode": "all" if artifact_result is not None else "toon",
        "docs_dir": docs_dir,
        **result.to_dict(),
    }
    if artifact_result is not None:
        output["artifacts"] = artifact_result.to_dict()["checks"]
    return output


# ============================================================================
# CLI and Main
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="validate-toon",
        description="Validate TOON files and ```toon blocks in a documentation tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0 - No errors (warnings allowed)
  1 - One or more errors
  2 - Fatal error (bad configuration, unexpected failure)

Examples:
  validate-toon
  validate-toon docs/
  validate-toon --all
  validate-toon --all path/to/project --json
        """
    )

    parser.add_argument(
        "directory",
        nargs="?",
        help="Docs directory (TOON-only mode) or project directory (--all mode)"
    )

    parser.add_argument(
        "--all",
        action="store_true",
        help="Also check that generated documentation artifacts exist"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Output machine-readable JSON instead of text"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on stderr"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"validate-toon {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    artifact_result: Optional[ArtifactCheckResult] = None
    try:
        if args.all:
            project_dir = args.directory or "."
            docs_dir = os.path.join(project_dir, get_docs_subpath())
            tally = run_validation(docs_dir)
            artifact_result = check_artifacts(project_dir, get_artifact_manifest())
        else:
            docs_dir = args.directory or get_default_docs_dir()
            tally = run_validation(docs_dir)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(EXIT_FATAL_ERROR)
    except Exception as e:
        print(f"ERROR: Unexpected error during validation: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc(file=sys.stderr)
        sys.exit(EXIT_FATAL_ERROR)

    if args.json:
        output = build_report_json(tally, artifact_result, docs_dir)
        print(json.dumps(output, indent=2))
        sys.exit(EXIT_SUCCESS if output["status"] == "PASS" else EXIT_VALIDATION_FAILED)

    sys.exit(report(tally, artifact_result, docs_dir))


if __name__ == "__main__":
    main()
