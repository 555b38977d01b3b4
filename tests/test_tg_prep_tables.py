"""Tests for tg_prep table rewriter - strict detection and bullet rendering."""

import pytest

from tg_prep.fences import placeholder
from tg_prep.tables import is_separator_row, parse_row, rewrite_if_table

# ============================================================================
# Row parsing
# ============================================================================


@pytest.mark.parametrize(
    'line,expected',
    [
        ('| a | b |', ['a', 'b']),
        ('a | b', ['a', 'b']),
        ('| a |  | c |', ['a', '', 'c']),
        ('|a|b|', ['a', 'b']),
        ('  | padded |  ', ['padded']),
        ('| only leading', ['only leading']),
    ],
)
def test_parse_row(line: str, expected: list[str]) -> None:
    """One outer pipe on each side is dropped, empty cells survive."""
    assert parse_row(line) == expected


@pytest.mark.parametrize(
    'line,expected',
    [
        ('|---|---|', True),
        ('| --- | --- |', True),
        ('|:---|:---:|---:|', True),
        ('|---|---|  ', True),
        ('---|---', False),
        ('| a | b |', False),
        ('|---', False),
        ('', False),
    ],
)
def test_is_separator_row(line: str, expected: bool) -> None:
    """Separator rows need pipes on both ends and only -, : and spaces."""
    assert is_separator_row(line) is expected


# ============================================================================
# Conversion
# ============================================================================


def test_simple_table_to_bullets() -> None:
    """Each data row becomes one labelled bullet line."""
    table = '| Name | Price |\n|---|---|\n| A | 1 |\n| B | 2 |'

    assert rewrite_if_table(table) == '• Name: A · Price: 1\n• Name: B · Price: 2'


def test_empty_cells_render_as_em_dash() -> None:
    """Blank cells are shown as — rather than dropped."""
    table = '| A | B | C |\n|---|---|---|\n| 1 |  | 3 |'

    assert rewrite_if_table(table) == '• A: 1 · B: — · C: 3'


def test_ragged_row_drops_labels() -> None:
    """Rows whose cell count differs from the header render without labels."""
    table = '| A | B |\n|---|---|\n| 1 | 2 | 3 |\n| 4 | 5 |'

    assert rewrite_if_table(table) == '• 1 · 2 · 3\n• A: 4 · B: 5'


def test_alignment_separator_accepted() -> None:
    """Colon-aligned separators still mark a table."""
    table = '| Left | Right |\n|:---|---:|\n| l | r |'

    assert rewrite_if_table(table) == '• Left: l · Right: r'


def test_non_pipe_lines_dropped_from_table() -> None:
    """Lines without a pipe inside a detected table are not carried over."""
    table = '| A | B |\n|---|---|\n| 1 | 2 |\nfootnote without pipes\n| 3 | 4 |'

    assert rewrite_if_table(table) == '• A: 1 · B: 2\n• A: 3 · B: 4'


def test_fence_placeholder_kept_in_table_paragraph() -> None:
    """A code block glued to a table must not be lost."""
    table = f'| A |\n|---|\n| 1 |\n{placeholder(0)}'

    assert rewrite_if_table(table) == f'• A: 1\n{placeholder(0)}'


def test_indented_table_detected() -> None:
    """Leading indentation does not hide a table."""
    table = '  | A | B |\n  |---|---|\n  | 1 | 2 |'

    assert rewrite_if_table(table) == '• A: 1 · B: 2'


# ============================================================================
# Rejection (paragraph returned unchanged)
# ============================================================================


@pytest.mark.parametrize(
    'paragraph',
    [
        # No separator at all
        'some log line | with pipes\nanother | line\nno separator here',
        # Separator not directly under the header
        '| A | B |\n| x | y |\n|---|---|\n| 1 | 2 |',
        # Header and separator only
        '| A | B |\n|---|---|',
        # Separator present but no data row with a pipe
        '| A | B |\n|---|---|\njust a note',
        # First line has no pipe
        'Title\n|---|---|\n| 1 | 2 |',
        # Single line
        '| A | B |',
    ],
)
def test_non_tables_unchanged(paragraph: str) -> None:
    """Anything that is not strictly a table passes through."""
    assert rewrite_if_table(paragraph) == paragraph


def test_blank_paragraph_becomes_empty() -> None:
    """Whitespace-only paragraphs are reduced to an empty string."""
    assert rewrite_if_table('   \n  ') == ''


def test_output_contains_no_pipes() -> None:
    """Converted tables never leak pipe characters."""
    rows = '\n'.join(f'| r{i} | {i} | x{i} |' for i in range(20))
    table = f'| Key | Value | Extra |\n|---|---|---|\n{rows}'

    result = rewrite_if_table(table)

    assert '|' not in result
    assert len(result.split('\n')) == 20


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
