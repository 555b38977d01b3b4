"""Utility functions for Telegram text preprocessing."""


def escape_html(text: str) -> str:
    """Escape the characters Telegram's HTML parse mode treats as markup.

    Only ``&``, ``<`` and ``>`` are escaped; quotes are left alone because
    Telegram does not require them outside attribute values.

    Args:
        text: Raw text

    Returns:
        Text safe to embed in a Telegram HTML message

    Examples:
        >>> escape_html('a < b && c > d')
        'a &lt; b &amp;&amp; c &gt; d'
    """
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
