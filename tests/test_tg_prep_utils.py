"""Tests for tg_prep.utils module."""

import pytest

from tg_prep.utils import escape_html

# ============================================================================
# TESTS: escape_html function
# ============================================================================


@pytest.mark.parametrize(
    'text,expected',
    [
        ('', ''),
        ('plain text', 'plain text'),
        ('a < b', 'a &lt; b'),
        ('a > b', 'a &gt; b'),
        ('Tom & Jerry', 'Tom &amp; Jerry'),
        # Already-escaped entities are escaped again (text is raw, not HTML)
        ('&amp;', '&amp;amp;'),
        ('<b>bold</b>', '&lt;b&gt;bold&lt;/b&gt;'),
        # Quotes are not significant for Telegram HTML text
        ('"quoted" \'single\'', '"quoted" \'single\''),
        ('foo_bar_baz', 'foo_bar_baz'),
    ],
)
def test_escape_html_various_inputs(text: str, expected: str) -> None:
    """Only &, < and > are escaped."""
    assert escape_html(text) == expected, f'Failed for: {text!r}'


def test_escape_html_ampersand_first() -> None:
    """& must be escaped before < and > so entities are not double-escaped."""
    assert escape_html('<&>') == '&lt;&amp;&gt;'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
