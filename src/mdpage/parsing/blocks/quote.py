"""Block quote handler.

Quote lines are dequoted first; fenced code inside the quote is then pulled
out with the ordinary code handler, run over the dequoted lines. Because that
list stops where the quote stops, an unclosed fence inside a quote ends with
the quote rather than running to the end of the document.
"""

from __future__ import annotations

from collections.abc import Sequence

from mdpage.nodes import CodeBlock, QuoteBlock
from mdpage.parsing.blocks.code import parse_code_block
from mdpage.parsing.lines import dequote, is_fence, is_quote_line


def parse_quote(lines: Sequence[str], start: int) -> tuple[QuoteBlock, int]:
    """Consume the run of quote lines starting at ``lines[start]``.

    Args:
        lines: Document lines
        start: Index of the first quote line

    Returns:
        The quote block and the index of the first non-quote line
    """
    end = start
    while end < len(lines) and is_quote_line(lines[end]):
        end += 1

    interior = [dequote(line) for line in lines[start:end]]

    items: list[str | CodeBlock] = []
    index = 0
    while index < len(interior):
        if is_fence(interior[index]):
            code, index = parse_code_block(interior, index)
            items.append(code)
        else:
            items.append(interior[index])
            index += 1

    return QuoteBlock(lines=tuple(items)), end
