"""Fenced code block handler."""

from __future__ import annotations

from collections.abc import Sequence

from mdpage.nodes import CodeBlock
from mdpage.parsing.lines import fence_language, is_fence
from mdpage.utils.logger import get_logger

logger = get_logger(__name__)


def parse_code_block(lines: Sequence[str], start: int) -> tuple[CodeBlock, int]:
    """Consume a fenced code block starting at ``lines[start]``.

    Interior lines are kept exactly as written (no trimming, no re-indenting).
    The block ends at the next line whose trimmed form starts with a fence, or
    at the end of ``lines`` when the fence is never closed.

    Args:
        lines: Document lines
        start: Index of the opening fence

    Returns:
        The code block and the index of the first line after it
    """
    language = fence_language(lines[start])

    body: list[str] = []
    index = start + 1
    while index < len(lines):
        line = lines[index]
        if is_fence(line):
            return CodeBlock(language=language, body=tuple(body)), index + 1
        body.append(line)
        index += 1

    logger.debug("Unterminated code fence at line %d runs to end of input", start + 1)
    return CodeBlock(language=language, body=tuple(body)), index
