"""
richtag Tags Module

Parsing for HTML-style rich text tags (<b>, </b>, <color=#FF0000FF>).

    Tag         - immutable parsed tag value
    TagScanner  - finds, iterates and strips tags inside display strings
"""

from .rich_text_tag import Tag, CLEAR_COLOR_TAG, parse_tag_type, parse_parameter
from .tag_scanner import (
    TagScanner,
    get_tag_scanner,
    is_opening_delimiter,
    parse_next,
    iter_tags,
    remove_tags_from_string,
    closing_tag_text,
)

__all__ = [
    'Tag',
    'CLEAR_COLOR_TAG',
    'parse_tag_type',
    'parse_parameter',
    'TagScanner',
    'get_tag_scanner',
    'is_opening_delimiter',
    'parse_next',
    'iter_tags',
    'remove_tags_from_string',
    'closing_tag_text',
]
