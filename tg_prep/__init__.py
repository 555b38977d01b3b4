"""Telegram message preprocessor.

This module makes agent-style markdown readable in Telegram's mobile UI:
tables become bullet lists, whitespace is tidied, long text is split into
chunks that never break HTML entities or tags, and an optional conservative
HTML rendering is produced per chunk.

Example:
    >>> from tg_prep import preprocess
    >>> result = preprocess('**Done** with `foo_bar`', style='telegram_html')
    >>> result.chunks
    ['<b>Done</b> with <code>foo_bar</code>']
    >>> result.parse_mode
    <ParseMode.HTML: 'HTML'>
"""

from tg_prep.config import (
    HTML_STYLE,
    PLAIN_STYLE,
    TELEGRAM_MAX_LENGTH,
    FenceBlock,
    PreprocessResult,
    Style,
)
from tg_prep.converter import preprocess

__version__ = '0.1.0'

__all__ = [
    'preprocess',
    'PreprocessResult',
    'FenceBlock',
    'Style',
    'PLAIN_STYLE',
    'HTML_STYLE',
    'TELEGRAM_MAX_LENGTH',
]
