"""Markdown table to bullet list conversion.

Telegram cannot render tables, and pipe-aligned columns fall apart on a
phone screen. A paragraph that is unambiguously a markdown table is rewritten
as one bullet per data row:

    | Name | Price |
    |---|---|        ->   • Name: A · Price: 1
    | A | 1 |

Detection is strict: the separator row must sit directly under the header.
Anything else containing pipes (log lines, shell pipelines) is left alone.
"""

from __future__ import annotations

import re

from tg_prep.config import BULLET, CELL_SEPARATOR, EMPTY_CELL, FENCE_PLACEHOLDER_PREFIX

TABLE_SEPARATOR_RE = re.compile(r'^(?:\|[\s\-:]+)+\|\s*$')


def is_separator_row(line: str) -> bool:
    """Check whether a line is a header separator like |---|:---:|."""
    return TABLE_SEPARATOR_RE.match(line) is not None


def parse_row(line: str) -> list[str]:
    """Split a pipe-delimited row into trimmed cells.

    One leading and one trailing pipe are dropped; empty cells are kept so
    the cell count still lines up with the header.

    Examples:
        >>> parse_row('| a |  | c |')
        ['a', '', 'c']
    """
    trimmed = line.strip()
    if trimmed.startswith('|'):
        trimmed = trimmed[1:]
    if trimmed.endswith('|'):
        trimmed = trimmed[:-1]
    return [cell.strip() for cell in trimmed.split('|')]


def _format_row(headers: list[str], cells: list[str]) -> str:
    display = [cell or EMPTY_CELL for cell in cells]
    if len(headers) == len(display):
        pairs = CELL_SEPARATOR.join(f'{h}: {c}' for h, c in zip(headers, display, strict=True))
        return f'{BULLET} {pairs}'
    # Ragged row: keep the values, skip the labels
    return f'{BULLET} {CELL_SEPARATOR.join(display)}'


def table_to_bullets(block: str) -> str:
    """Render a detected table block as bullet lines.

    Assumes rewrite_if_table() already validated the block. Data rows are the
    pipe-containing lines after the separator; other lines are dropped, except
    fence placeholders which keep their position.

    Args:
        block: Table paragraph (header, separator, data rows)

    Returns:
        Bullet lines joined with newlines
    """
    lines = [line.strip() for line in block.split('\n')]
    headers = parse_row(lines[0])

    out: list[str] = []
    for line in lines[2:]:
        if '|' in line:
            out.append(_format_row(headers, parse_row(line)))
        elif FENCE_PLACEHOLDER_PREFIX in line:
            out.append(line)
    return '\n'.join(out)


def rewrite_if_table(paragraph: str) -> str:
    """Convert a paragraph to bullets if it is a markdown table.

    Args:
        paragraph: Run of non-blank lines

    Returns:
        Bullet text for tables, otherwise the trimmed paragraph unchanged
    """
    trimmed = paragraph.strip()
    if not trimmed:
        return ''

    lines = [line.strip() for line in trimmed.split('\n')]
    if len(lines) < 3 or '|' not in lines[0]:
        return trimmed
    # Separator must be directly under the header, no searching further down
    if not is_separator_row(lines[1]):
        return trimmed
    if not any('|' in line for line in lines[2:]):
        return trimmed

    return table_to_bullets(trimmed)
