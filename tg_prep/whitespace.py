"""Whitespace normalization and per-paragraph table rewriting."""

from __future__ import annotations

import re

from tg_prep.tables import rewrite_if_table

_BLANK_RUN_RE = re.compile(r'\n{3,}')
_PARAGRAPH_SPLIT_RE = re.compile(r'\n\s*\n')


def normalize_whitespace(text: str) -> str:
    """Unify line endings, cap blank lines, trim trailing whitespace.

    Examples:
        >>> normalize_whitespace('a  \\r\\n\\r\\n\\r\\n\\r\\nb\\t')
        'a\\n\\nb'
    """
    text = text.replace('\r\n', '\n').replace('\r', '\n')
    text = _BLANK_RUN_RE.sub('\n\n', text)
    return '\n'.join(line.rstrip() for line in text.split('\n')).strip()


def split_paragraphs(text: str) -> list[str]:
    """Split text on blank-line boundaries."""
    return _PARAGRAPH_SPLIT_RE.split(text)


def convert_tables_to_bullets(text: str) -> str:
    """Normalize whitespace and rewrite every table paragraph as bullets.

    Paragraphs that end up empty are dropped; the rest are joined with a
    single blank line.
    """
    paragraphs = (rewrite_if_table(p) for p in split_paragraphs(normalize_whitespace(text)))
    return '\n\n'.join(p for p in paragraphs if p)
