"""Validation configuration registry.

Loads ``validation.yaml`` next to this module. Environment variables take
precedence over YAML config.

Usage:
    from toondocs.config.validation_config import (
        get_artifact_manifest,
        get_default_docs_dir,
    )

    docs_dir = get_default_docs_dir()  # ".claude/docs" unless TOON_DOCS_DIR is set
    manifest = get_artifact_manifest()  # List[ArtifactSpec]
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from toondocs.validator.artifacts import ArtifactSpec

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path(__file__).parent / "validation.yaml"
_cached_config: Optional[Dict[str, Any]] = None

DOCS_DIR_ENV = "TOON_DOCS_DIR"


class ConfigError(ValueError):
    """Raised when validation.yaml is unreadable or malformed."""


def _load_config() -> Dict[str, Any]:
    """Load validation.yaml configuration, with caching."""
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    if _CONFIG_PATH.exists():
        try:
            with open(_CONFIG_PATH, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load {_CONFIG_PATH}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"{_CONFIG_PATH} must contain a mapping")
        _cached_config = {**_default_config(), **loaded}
    else:
        logger.debug("No %s found, using built-in defaults", _CONFIG_PATH)
        _cached_config = _default_config()

    return _cached_config


def _default_config() -> Dict[str, Any]:
    """Return default configuration if validation.yaml doesn't exist."""
    return {
        "version": "1.0",
        "docs_subpath": ".claude/docs",
        "format_extension": ".toon",
        "markdown_extension": ".md",
        "artifacts": [
            {"path": "AGENTS.md", "label": "Universal (many tools)", "required": True},
            {"path": "CLAUDE.md", "label": "Primary assistant tool", "required": True},
            {"path": "{docs_root}/index.toon", "label": "Primary tool (L1 index)", "required": True},
            {"path": ".cursor/rules/auto-docs.mdc", "label": "Secondary tool", "required": False},
            {"path": ".github/copilot-instructions.md", "label": "Third-party tool", "required": False},
        ],
    }


def load_config() -> Dict[str, Any]:
    """Return the effective configuration mapping."""
    return _load_config()


def reset_config() -> None:
    """Reset cached config (for testing)."""
    global _cached_config
    _cached_config = None


def get_docs_subpath() -> str:
    """Docs root relative to a project directory (used by --all)."""
    return str(_load_config()["docs_subpath"])


def get_default_docs_dir() -> str:
    """Default docs directory for TOON-only runs."""
    return os.environ.get(DOCS_DIR_ENV) or get_docs_subpath()


def get_format_extension() -> str:
    return str(_load_config()["format_extension"])


def get_markdown_extension() -> str:
    return str(_load_config()["markdown_extension"])


def get_artifact_manifest() -> List[ArtifactSpec]:
    """
    Build the artifact manifest from config.

    Returns:
        ArtifactSpec list in manifest order, with {docs_root} expanded

    Raises:
        ConfigError: If an entry is not a mapping, lacks path/label, or has a
            non-boolean required flag
    """
    entries = _load_config().get("artifacts") or []
    docs_root = get_docs_subpath()

    manifest: List[ArtifactSpec] = []
    for i, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict) or not entry.get("path") or not entry.get("label"):
            raise ConfigError(f"artifacts[{i}] must be a mapping with 'path' and 'label'")
        required = entry.get("required", True)
        if not isinstance(required, bool):
            raise ConfigError(f"artifacts[{i}].required must be true or false, got {required!r}")
        manifest.append(
            ArtifactSpec(
                path=str(entry["path"]).replace("{docs_root}", docs_root),
                label=str(entry["label"]),
                required=required,
            )
        )
    return manifest
