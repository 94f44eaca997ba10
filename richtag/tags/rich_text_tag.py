"""
richtag Rich Text Tag

Value type for a single HTML-style rich text tag such as <b>, </b> or
<color=#FF0000FF>, as used by rich text display components.
"""

from dataclasses import dataclass, field

from richtag.core.constants import (
    OPENING_DELIMITER,
    CLOSING_DELIMITER,
    END_TAG_DELIMITER,
    PARAMETER_DELIMITER,
    PARAMETER_QUOTE,
    CLEAR_COLOR_TAG_TEXT,
)
from richtag.core.exceptions import InvalidTagFormatError


def parse_tag_type(raw_text: str) -> str:
    """
    Extract the tag type from full tag text.

    "<color=#FFF>" -> "color", "</b>" -> "b"
    """
    # Strip start and end delimiters
    tag_type = raw_text[1:-1]
    tag_type = tag_type.lstrip(END_TAG_DELIMITER)

    # Strip parameter
    parameter_index = tag_type.find(PARAMETER_DELIMITER)
    if parameter_index >= 0:
        tag_type = tag_type[:parameter_index]

    return tag_type


def parse_parameter(raw_text: str) -> str:
    """
    Extract the parameter from full tag text.

    Everything after the first '=' up to the closing '>', with one layer of
    enclosing double quotes removed. Empty when there is no '='.
    """
    parameter_index = raw_text.find(PARAMETER_DELIMITER)
    if parameter_index < 0:
        return ""

    # Skip the '=' and drop the closing '>'
    parameter = raw_text[parameter_index + 1:len(raw_text) - 1]

    if (
        len(parameter) >= 2
        and parameter[0] == PARAMETER_QUOTE
        and parameter[-1] == PARAMETER_QUOTE
    ):
        parameter = parameter[1:-1]

    return parameter


@dataclass(frozen=True)
class Tag:
    """
    A parsed rich text tag.

    All fields are derived from raw_text when the tag is built:
        raw_text:   full tag including delimiters, e.g. <color=#FF0000FF>
        tag_type:   name without delimiters, slash or parameter, e.g. color
        parameter:  value after '=', unquoted; empty if absent
        is_closing: True for tags like </b>
    """
    raw_text: str
    tag_type: str = field(init=False)
    parameter: str = field(init=False)
    is_closing: bool = field(init=False)

    def __post_init__(self):
        raw = self.raw_text
        if (
            not isinstance(raw, str)
            or len(raw) < 2
            or raw[0] != OPENING_DELIMITER
            or raw[-1] != CLOSING_DELIMITER
        ):
            raise InvalidTagFormatError(str(raw))

        object.__setattr__(self, 'tag_type', parse_tag_type(raw))
        object.__setattr__(self, 'parameter', parse_parameter(raw))
        object.__setattr__(self, 'is_closing', len(raw) > 2 and raw[1] == END_TAG_DELIMITER)

    @property
    def is_opening(self) -> bool:
        return not self.is_closing

    @property
    def length(self) -> int:
        """Length of the full tag text."""
        return len(self.raw_text)

    @property
    def closing_tag_text(self) -> str:
        """Text of the matching closing tag. Closing tags return themselves."""
        if self.is_closing:
            return self.raw_text
        return f"{OPENING_DELIMITER}{END_TAG_DELIMITER}{self.tag_type}{CLOSING_DELIMITER}"

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.raw_text


# Shared sentinel used to hide not-yet-revealed text
CLEAR_COLOR_TAG = Tag(CLEAR_COLOR_TAG_TEXT)
