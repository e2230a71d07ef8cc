"""
Test fixtures and utilities for TOON documentation validator tests.

This module provides reusable fixtures for testing the validator, including
temporary project trees, a deterministic fake decoder, an in-process CLI
runner, and assertion helpers.
"""

from pathlib import Path
from typing import List, NamedTuple, Optional

import pytest

from toondocs.config import validation_config
from toondocs.tools.validate_toon import main

# Decodes under the real toon_format decoder
VALID_TOON = "name: Alice\nage: 30\n"

# Unterminated quoted string: rejected by the real toon_format decoder
INVALID_TOON = 'name: "Alice\n'

# Marker understood by fake_decoder
FAKE_BAD_MARKER = "!!bad"


# ============================================================================
# Configuration Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Reset cached config and drop TOON_DOCS_DIR around every test."""
    monkeypatch.delenv(validation_config.DOCS_DIR_ENV, raising=False)
    validation_config.reset_config()
    yield
    validation_config.reset_config()


# ============================================================================
# Decoder Fixtures
# ============================================================================


def _fake_decode(content: str):
    if FAKE_BAD_MARKER in content:
        raise ValueError(f"Unexpected token on line {content.count(chr(10)) or 1}")
    return {"raw": content}


@pytest.fixture
def fake_decoder():
    """
    Decoder stand-in that fails when content contains FAKE_BAD_MARKER.

    Keeps orchestration tests independent of the real TOON grammar.
    """
    return _fake_decode


# ============================================================================
# Temporary Tree Fixtures
# ============================================================================


@pytest.fixture
def temp_project(tmp_path):
    """
    Create an empty project directory.

    Returns a Path to the project root. The docs directory (.claude/docs)
    is NOT created; tests create it when they need it.
    """
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def docs_dir(temp_project):
    """Create and return <project>/.claude/docs."""
    docs = temp_project / ".claude" / "docs"
    docs.mkdir(parents=True)
    return docs


def write_file(path: Path, content: str) -> Path:
    """Write content to path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def toon_fence(content: str) -> str:
    """Wrap content in a ```toon fence."""
    if not content.endswith("\n"):
        content += "\n"
    return f"```toon\n{content}```\n"


def write_markdown(path: Path, *blocks: str, heading: str = "# Doc") -> Path:
    """
    Write a Markdown file with one paragraph before each ```toon block.

    Layout per block (3 prose lines, then the fence):
        <blank>
        Some text.
        <blank>
        ```toon
    """
    parts = [heading + "\n"]
    for block in blocks:
        parts.append("\nSome text.\n\n")
        parts.append(toon_fence(block))
    return write_file(path, "".join(parts))


def write_artifacts(project: Path, skip: Optional[List[str]] = None) -> None:
    """Write every default manifest artifact except the paths in skip."""
    skip = skip or []
    contents = {
        "AGENTS.md": "# Agents\n\nUniversal instructions.\n",
        "CLAUDE.md": "# Claude\n\nAssistant instructions.\n",
        ".claude/docs/index.toon": VALID_TOON,
        ".cursor/rules/auto-docs.mdc": "Cursor rules.\n",
        ".github/copilot-instructions.md": "Copilot instructions.\n",
    }
    for rel, content in contents.items():
        if rel not in skip:
            write_file(project / rel, content)


# ============================================================================
# CLI Runner
# ============================================================================


class ValidatorRun(NamedTuple):
    returncode: int
    stdout: str
    stderr: str


@pytest.fixture
def run_validator(monkeypatch, capsys):
    """
    Fixture that returns a function to run the validator CLI in-process.

    Returns:
        Function(cwd, flags=[]) -> ValidatorRun
    """
    def _run(cwd: Path, flags: Optional[List[str]] = None) -> ValidatorRun:
        monkeypatch.chdir(cwd)
        capsys.readouterr()
        with pytest.raises(SystemExit) as exc_info:
            main(flags or [])
        captured = capsys.readouterr()
        return ValidatorRun(exc_info.value.code, captured.out, captured.err)

    return _run


# ============================================================================
# Assertion Helpers
# ============================================================================


def assert_validator_passed(result: ValidatorRun):
    """Assert that validator passed (exit code 0)."""
    assert result.returncode == 0, f"Validator failed with stdout: {result.stdout}\nstderr: {result.stderr}"


def assert_validator_failed(result: ValidatorRun):
    """Assert that validator failed with validation errors (exit code 1)."""
    assert result.returncode == 1, f"Expected exit code 1, got {result.returncode}. Stdout: {result.stdout}"


def assert_output_contains(stdout: str, expected_text: str):
    """Assert that stdout contains expected text."""
    assert expected_text in stdout, f"Expected '{expected_text}' in stdout. Got: {stdout}"
