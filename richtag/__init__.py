"""
richtag - Inline Rich Text Tag Parsing

Scans display strings for HTML-style tags such as <b> or <color=#FF0000FF>,
classifies them as opening or closing, extracts type and parameter, and
strips tags of a given type.

Version: 1.0.0
"""

__version__ = "1.0.0"
__project__ = "richtag"

from pathlib import Path

# Package root directory
PACKAGE_ROOT = Path(__file__).parent

from .core.exceptions import (
    RichTagError,
    TagError,
    InvalidTagFormatError,
    MalformedMarkupError,
)
from .tags import (
    Tag,
    CLEAR_COLOR_TAG,
    TagScanner,
    get_tag_scanner,
    is_opening_delimiter,
    parse_next,
    iter_tags,
    remove_tags_from_string,
    closing_tag_text,
)

__all__ = [
    # Version info
    "__version__",
    "__project__",
    "PACKAGE_ROOT",
    # Errors
    "RichTagError",
    "TagError",
    "InvalidTagFormatError",
    "MalformedMarkupError",
    # Tags
    "Tag",
    "CLEAR_COLOR_TAG",
    "TagScanner",
    "get_tag_scanner",
    "is_opening_delimiter",
    "parse_next",
    "iter_tags",
    "remove_tags_from_string",
    "closing_tag_text",
]
