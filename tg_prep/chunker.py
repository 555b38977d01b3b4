"""Boundary-safe splitting of text into Telegram-sized chunks.

A cut is never placed inside an HTML entity (``&amp;``), a tag (``<b>``) or a
whole ``<pre>...</pre>`` element, since Telegram rejects a message whose HTML
was bisected. Structural safety wins over the length ceiling: a chunk may run
past `max_len` to the end of the unit it would otherwise split, bounded by the
lookahead window.

Split priority when no unit straddles the cut:
1. Last paragraph break past the window midpoint
2. Last line break past the window midpoint
3. Hard cut at `max_len`
"""

from __future__ import annotations

import re

from tg_prep.config import LOOKAHEAD, TELEGRAM_MAX_LENGTH

ENTITY_RE = re.compile(r'&(?:#\d+|#x[\da-fA-F]+|\w+);')
TAG_RE = re.compile(r'<[^>]+>')
PRE_RE = re.compile(r'<pre[\s>].*?</pre>', re.DOTALL)

_STRUCTURAL_PATTERNS = (ENTITY_RE, TAG_RE, PRE_RE)


def structural_spans(text: str, start: int, end: int) -> list[tuple[int, int]]:
    """Find entities, tags and <pre> elements in text[start:end].

    Args:
        text: Full text
        start: Scan start (absolute)
        end: Scan end (absolute, clamped to len(text))

    Returns:
        (start, end) spans in absolute positions
    """
    segment = text[start:end]
    return [
        (start + m.start(), start + m.end())
        for pattern in _STRUCTURAL_PATTERNS
        for m in pattern.finditer(segment)
    ]


def _push_past_spans(pos: int, spans: list[tuple[int, int]]) -> int:
    """Move pos to the end of every span it falls strictly inside.

    Repeats until stable so a tag nested in a <pre> lands after </pre>.
    """
    moved = True
    while moved:
        moved = False
        for span_start, span_end in spans:
            if span_start < pos < span_end:
                pos = span_end
                moved = True
    return pos


def next_safe_break(text: str, start: int, max_len: int) -> int:
    """Find the end (exclusive) of the chunk starting at `start`.

    Args:
        text: Full text
        start: Position where the chunk begins
        max_len: Preferred maximum chunk length

    Returns:
        Absolute break position, always greater than `start`
    """
    if len(text) - start <= max_len:
        return len(text)

    cut = start + max_len
    spans = structural_spans(text, start, cut + LOOKAHEAD)

    overrun = _push_past_spans(cut, spans)
    if overrun > cut:
        return overrun

    window = text[start:cut]
    midpoint = max_len * 0.5
    last_para = window.rfind('\n\n')
    last_line = window.rfind('\n')
    if last_para > midpoint:
        candidate = start + last_para + 1
    elif last_line > midpoint:
        candidate = start + last_line + 1
    else:
        candidate = cut

    return _push_past_spans(candidate, spans)


def split_chunks_safe(text: str, max_len: int = TELEGRAM_MAX_LENGTH) -> list[str]:
    """Split text into trimmed chunks without breaking HTML structure.

    Args:
        text: Normalized text to split
        max_len: Preferred maximum chunk length (default 4096)

    Returns:
        Non-empty chunks in order; [text] when it already fits

    Raises:
        ValueError: If max_len is less than 1
    """
    if max_len < 1:
        raise ValueError(f'max_len must be positive, got {max_len}')
    if len(text) <= max_len:
        return [text]

    chunks: list[str] = []
    start = 0
    n = len(text)

    while start < n:
        end = next_safe_break(text, start, max_len)
        chunk = text[start:end].strip()
        if chunk:
            chunks.append(chunk)
        start = end
        # Next chunk must not begin with leftover separators
        while start < n and text[start] in '\n ':
            start += 1

    return chunks
