"""TOON documentation validation core."""

from toondocs.validator.artifacts import (
    ArtifactCheck,
    ArtifactCheckResult,
    ArtifactSpec,
    check_artifacts,
)
from toondocs.validator.blocks import ToonBlock, extract_blocks
from toondocs.validator.decoder import DecodeResult, decode_strict, validate
from toondocs.validator.errors import Diagnostic, RunTally, block_source
from toondocs.validator.runner import ValidatorRunner, run_validation
from toondocs.validator.walker import walk

__all__ = [
    "ArtifactCheck",
    "ArtifactCheckResult",
    "ArtifactSpec",
    "DecodeResult",
    "Diagnostic",
    "RunTally",
    "ToonBlock",
    "ValidatorRunner",
    "block_source",
    "check_artifacts",
    "decode_strict",
    "extract_blocks",
    "run_validation",
    "validate",
    "walk",
]
