"""Main preprocessing pipeline for Telegram messages.

Stages:
1. Protect fenced code blocks behind placeholders
2. Normalize whitespace and rewrite tables as bullet lists
3. Restore the fenced blocks verbatim
4. Split into boundary-safe chunks
5. Optionally render each chunk as conservative HTML

HTML rendering runs after splitting so the chunker only ever measures the
source text, and each chunk is rendered independently.
"""

from __future__ import annotations

import logging

from aiogram.enums import ParseMode

from tg_prep.chunker import split_chunks_safe
from tg_prep.config import (
    HTML_STYLE,
    PLAIN_STYLE,
    TELEGRAM_MAX_LENGTH,
    PreprocessResult,
    Style,
)
from tg_prep.fences import extract_fenced_blocks, restore_fenced_blocks
from tg_prep.renderer import render_chunk
from tg_prep.whitespace import convert_tables_to_bullets

LOGGER = logging.getLogger(__name__)


def preprocess(
    text: object,
    *,
    style: Style | None = None,
    to_html: bool = False,
    max_chunk_length: int = TELEGRAM_MAX_LENGTH,
    split: bool = True,
) -> PreprocessResult:
    """Make agent-style text readable in Telegram.

    Args:
        text: Raw text; anything that is not a str yields a single empty chunk
        style: 'telegram_plain' (default) or 'telegram_html'
        to_html: Legacy switch, selects HTML style when `style` is not given
        max_chunk_length: Preferred maximum chunk length (default 4096)
        split: When False, the whole processed text is returned as one chunk

    Returns:
        PreprocessResult with the chunks and the parse mode to send them with

    Example:
        >>> result = preprocess('| A | B |\\n|---|---|\\n| 1 | 2 |', split=False)
        >>> result.chunks
        ['• A: 1 · B: 2']
    """
    if style is None:
        style = HTML_STYLE if to_html else PLAIN_STYLE
    html = style == HTML_STYLE

    if not isinstance(text, str):
        LOGGER.debug('Non-string input of type %s, returning empty chunk', type(text).__name__)
        return PreprocessResult(chunks=[''], parse_mode=None)

    guarded, blocks = extract_fenced_blocks(text)
    content = convert_tables_to_bullets(guarded)
    content = restore_fenced_blocks(content, blocks)

    chunks = split_chunks_safe(content, max_chunk_length) if split else [content]
    if html:
        chunks = [render_chunk(chunk) for chunk in chunks]

    LOGGER.debug(
        'Preprocessed %d chars (%d fenced blocks) into %d chunk(s), style=%s',
        len(text),
        len(blocks),
        len(chunks),
        style,
    )
    return PreprocessResult(chunks=chunks, parse_mode=ParseMode.HTML if html else None)
