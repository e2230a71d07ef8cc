"""Extraction of ```toon fenced blocks from Markdown text.

This is a narrow pattern match over raw text, not a Markdown parser. Both the
opening ```toon line and the closing ``` line must start at column 0, so
fences nested in indented content (list items, blockquotes) are not matched.
Blocks do not nest: scanning resumes after each closing fence.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

TOON_FENCE_PATTERN = re.compile(
    r"^```toon\s*\n(.*?)^```\s*$",
    re.MULTILINE | re.DOTALL,
)


@dataclass(frozen=True)
class ToonBlock:
    """A fenced TOON block found in a Markdown document."""

    content: str
    block_index: int  # 1-based ordinal within the file
    line_num: int  # 1-based line of the opening fence


def extract_blocks(markdown_text: str) -> List[ToonBlock]:
    """
    Find all ```toon blocks in document order.

    Args:
        markdown_text: Full Markdown document

    Returns:
        List of ToonBlock, empty when no tagged fence is present
    """
    blocks: List[ToonBlock] = []
    for block_index, match in enumerate(TOON_FENCE_PATTERN.finditer(markdown_text), start=1):
        line_num = markdown_text.count("\n", 0, match.start()) + 1
        blocks.append(
            ToonBlock(content=match.group(1), block_index=block_index, line_num=line_num)
        )
    return blocks
