# toondocs/validator/runner.py
"""Validation orchestrator: walk a docs tree and decode every TOON unit."""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import List, Optional, Union

from toondocs.validator.blocks import extract_blocks
from toondocs.validator.decoder import Decoder, validate
from toondocs.validator.errors import RunTally, block_source
from toondocs.validator.walker import walk

logger = logging.getLogger(__name__)


class ValidatorRunner:
    """
    Runs TOON validation over one documentation tree.

    Standalone files are validated first, then Markdown files, each pass in
    walker order. A failed unit never stops the run.

    Counting differs between the two passes: a standalone file adds to
    total_blocks only when it decodes, while an embedded block adds to
    total_blocks before it is decoded.

    Attributes:
        docs_dir: Root of the documentation tree
        decoder: Decoder capability (None = toon_format)
        cwd: Directory diagnostic paths are relative to (None = process cwd)
    """

    def __init__(
        self,
        docs_dir: Union[str, Path],
        decoder: Optional[Decoder] = None,
        cwd: Optional[Union[str, Path]] = None,
        format_extension: Optional[str] = None,
        markdown_extension: Optional[str] = None,
    ):
        self.docs_dir = Path(docs_dir)
        self.decoder = decoder
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        # Lazy import: validation_config imports toondocs.validator.artifacts
        from toondocs.config.validation_config import (
            get_format_extension,
            get_markdown_extension,
        )

        self.format_extension = format_extension or get_format_extension()
        self.markdown_extension = markdown_extension or get_markdown_extension()

    def _relative(self, path: Path) -> str:
        return os.path.relpath(path, self.cwd)

    def run_all(self) -> RunTally:
        """
        Validate every standalone file and embedded block under docs_dir.

        Returns:
            RunTally for this run
        """
        start_time = time.time()
        files = walk(self.docs_dir)
        logger.debug("Found %d files under %s", len(files), self.docs_dir)

        tally = RunTally()
        tally.extend(self.run_standalone(files))
        tally.extend(self.run_markdown(files))

        elapsed = time.time() - start_time
        logger.debug(
            "Validated %d block(s) across %d file(s) in %.3fs",
            tally.total_blocks, tally.total_files, elapsed,
        )
        return tally

    def run_standalone(self, files: List[Path]) -> RunTally:
        """Validate whole files ending in the format extension."""
        tally = RunTally()
        for path in files:
            if not path.name.endswith(self.format_extension):
                continue
            tally.total_files += 1
            content = path.read_text(encoding="utf-8", errors="replace")
            diagnostic = validate(content, self._relative(path), self.decoder)
            if diagnostic is None:
                tally.total_blocks += 1
            else:
                tally.add_error(diagnostic)
        logger.debug("Standalone pass: %d file(s), %d error(s)", tally.total_files, len(tally.errors))
        return tally

    def run_markdown(self, files: List[Path]) -> RunTally:
        """Validate ```toon blocks embedded in Markdown files."""
        tally = RunTally()
        for path in files:
            if not path.name.endswith(self.markdown_extension):
                continue
            blocks = extract_blocks(path.read_text(encoding="utf-8", errors="replace"))
            if not blocks:
                continue
            tally.total_files += 1
            rel = self._relative(path)
            for block in blocks:
                tally.total_blocks += 1
                diagnostic = validate(
                    block.content,
                    block_source(rel, block.line_num, block.block_index),
                    self.decoder,
                )
                if diagnostic is not None:
                    tally.add_error(diagnostic)
        logger.debug("Markdown pass: %d file(s), %d error(s)", tally.total_files, len(tally.errors))
        return tally


def run_validation(
    docs_dir: Union[str, Path],
    decoder: Optional[Decoder] = None,
    cwd: Optional[Union[str, Path]] = None,
) -> RunTally:
    """
    Run TOON validation over docs_dir.

    This is a thin wrapper around ValidatorRunner.

    Args:
        docs_dir: Root of the documentation tree (may not exist)
        decoder: Decoder capability (None = toon_format)
        cwd: Directory diagnostic paths are relative to (None = process cwd)

    Returns:
        RunTally with counts and diagnostics
    """
    return ValidatorRunner(docs_dir, decoder=decoder, cwd=cwd).run_all()
