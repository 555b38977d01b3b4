"""Fenced code block protection.

Code fences are lifted out of the text before any rewriting and put back
afterwards, so table conversion, whitespace collapsing and HTML rendering
never touch code.
"""

from __future__ import annotations

import re

from tg_prep.config import FENCE_PLACEHOLDER_PREFIX, FENCE_PLACEHOLDER_SUFFIX, FenceBlock
from tg_prep.utils import escape_html

# ``` or ~~~, optional language tag, body, then whatever separates the body
# from a closing fence of the same kind (newline, indentation, or nothing when
# the fence closes on the code line). Trailing spaces after the closer are
# left in the text.
FENCE_RE = re.compile(
    r'(```|~~~)(\w*)\n(.*?)(\n?[ \t]*)\1(?=[ \t]*$)', re.MULTILINE | re.DOTALL
)


def placeholder(index: int) -> str:
    """Build the placeholder that stands in for the block at `index`."""
    return f'{FENCE_PLACEHOLDER_PREFIX}{index}{FENCE_PLACEHOLDER_SUFFIX}'


def extract_fenced_blocks(text: str) -> tuple[str, list[FenceBlock]]:
    """Replace every fenced block with a positional placeholder.

    Unterminated fences are not matched and stay in the text as-is.

    Args:
        text: Input text

    Returns:
        Tuple of (guarded text, extracted blocks in left-to-right order)
    """
    blocks: list[FenceBlock] = []

    def _lift(match: re.Match[str]) -> str:
        blocks.append(FenceBlock(lang=match[2], body=match[3], fence=match[1], close=match[4]))
        return placeholder(len(blocks) - 1)

    return FENCE_RE.sub(_lift, text), blocks


def render_block(block: FenceBlock, to_html: bool = False) -> str:
    """Render a single block back as fenced markdown or as <pre><code>."""
    if to_html:
        lang_attr = f' class="language-{block.lang}"' if block.lang else ''
        return f'<pre><code{lang_attr}>{escape_html(block.body)}</code></pre>'
    return f'{block.fence}{block.lang}\n{block.body}{block.close}{block.fence}'


def restore_fenced_blocks(text: str, blocks: list[FenceBlock], to_html: bool = False) -> str:
    """Put extracted blocks back in place of their placeholders.

    Args:
        text: Guarded text produced by extract_fenced_blocks()
        blocks: Blocks returned alongside the guarded text
        to_html: Render blocks as HTML-escaped <pre><code> instead of fences

    Returns:
        Text with all placeholders replaced
    """
    out = text
    for i, block in enumerate(blocks):
        out = out.replace(placeholder(i), render_block(block, to_html))
    return out
