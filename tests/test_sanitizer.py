"""Tests for input sanitizing of recipe and ingredient text."""

from utils import sanitize_ingredient_fields, sanitize_instructions, sanitize_line, sanitize_recipe_name


def test_sanitize_line_collapses_whitespace_and_controls():
    assert sanitize_line('  2\t cups\x00 ', 50) == '2 cups'
    assert sanitize_line('1 ½', 50) == '1 ½'


def test_sanitize_line_empty():
    assert sanitize_line(None, 50) == ''
    assert sanitize_line('   ', 50) == ''


def test_sanitize_line_truncates():
    assert sanitize_line('a' * 300, 200) == 'a' * 200


def test_sanitize_line_keeps_text_unescaped():
    assert sanitize_line('salt & pepper <fresh>', 50) == 'salt & pepper <fresh>'


def test_sanitize_recipe_name():
    assert sanitize_recipe_name('  Grandma\'s\nPancakes ') == "Grandma's Pancakes"
    assert sanitize_recipe_name(None) == ''


def test_sanitize_instructions_keeps_lines():
    assert sanitize_instructions('Mix.\nBake.\x07') == 'Mix.\nBake.'
    assert sanitize_instructions('x' * 10, max_length=5) == 'xxxxx\n...(truncated)'


def test_sanitize_ingredient_fields():
    assert sanitize_ingredient_fields(' flour ', ' 1 1/2 ', ' cups ') == ('flour', '1 1/2', 'cups')
    assert sanitize_ingredient_fields('eggs', None, None) == ('eggs', '', '')
    assert sanitize_ingredient_fields(2, 3) == ('2', '3', '')
