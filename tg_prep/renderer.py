"""Conservative markdown to Telegram HTML rendering.

Only a narrow subset is converted:
- ``## Heading`` lines become bold (Telegram has no heading sizes)
- ``**bold**`` spans
- single-backtick inline code

Underscore and single-asterisk italics are deliberately not supported:
agent output is full of identifiers like ``foo_bar_baz`` that must not turn
half-italic. Links, lists and blockquotes pass through as escaped text.
"""

from __future__ import annotations

import re

from tg_prep.fences import extract_fenced_blocks, restore_fenced_blocks
from tg_prep.utils import escape_html

HEADING_RE = re.compile(r'^##[ \t]+(.+)$', re.MULTILINE)
# Bounded length keeps a stray ** from swallowing half the message
BOLD_RE = re.compile(r'\*\*([^*\n]{1,80})\*\*')
INLINE_CODE_RE = re.compile(r'(?<!\w)`([^`]+)`(?!\w)')


def markdown_to_html(text: str) -> str:
    """Escape text and convert the supported markdown subset to HTML.

    Args:
        text: Fence-free markdown text

    Returns:
        Telegram-compatible HTML
    """
    out = escape_html(text)
    out = HEADING_RE.sub(r'<b>\1</b>', out)
    out = BOLD_RE.sub(r'<b>\1</b>', out)
    return INLINE_CODE_RE.sub(r'<code>\1</code>', out)


def render_chunk(chunk: str) -> str:
    """Render one already-split chunk as HTML.

    Fences are extracted again per chunk because a split may have separated
    an opening fence from its closer; such halves are escaped as plain text.
    """
    guarded, blocks = extract_fenced_blocks(chunk)
    return restore_fenced_blocks(markdown_to_html(guarded), blocks, to_html=True)
