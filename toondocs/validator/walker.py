"""Recursive file discovery under a documentation root."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


def walk(root_dir: Union[str, Path]) -> List[Path]:
    """
    Return every regular file under root_dir, depth-first.

    Order follows the directory listing at each level; nothing is sorted.
    A missing or unreadable directory contributes no files (the docs root
    may not have been generated yet).

    Args:
        root_dir: Directory to walk

    Returns:
        List of file paths, each joined onto root_dir
    """
    root = Path(root_dir)
    files: List[Path] = []

    try:
        entries = list(root.iterdir())
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", root, e)
        return files

    for entry in entries:
        if entry.is_dir():
            files.extend(walk(entry))
        elif entry.is_file():
            files.append(entry)

    return files
