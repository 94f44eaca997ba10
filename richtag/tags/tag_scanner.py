"""
richtag Tag Scanner

Finds and parses rich text tags inside display strings, and strips tags of a
given type. Used by typewriter-style text effects that walk a string one
character at a time and need to hop over embedded markup.
"""

from typing import Iterator, Optional

from richtag.core.constants import OPENING_DELIMITER, CLOSING_DELIMITER
from richtag.core.exceptions import MalformedMarkupError
from richtag.core.logging_config import get_logger
from .rich_text_tag import Tag


class TagScanner:
    """
    Scans text for tags of the form <type>, </type> or <type=parameter>.

    Windows passed to parse_next follow the rich text component convention:
    the searched length is end_index_inclusive - start_index, so the
    character at end_index_inclusive itself is never examined. A tag whose
    '>' sits exactly there is not found.
    """

    def __init__(self):
        self.logger = get_logger("tags.scanner")

    @staticmethod
    def is_opening_delimiter(character: str) -> bool:
        """Check if the character begins a tag."""
        return character == OPENING_DELIMITER

    def parse_next(
        self,
        text: str,
        start_index: int = 0,
        end_index_inclusive: Optional[int] = None
    ) -> Optional[Tag]:
        """
        Parse the text for the next tag.

        Args:
            text: Text to parse
            start_index: Index to start parsing from (inclusive)
            end_index_inclusive: End of the window, defaults to the last index

        Returns:
            The next Tag in the window, or None if it contains no tag

        Raises:
            ValueError: If start_index is outside the text or
                end_index_inclusive is past len(text)
        """
        if end_index_inclusive is None:
            end_index_inclusive = len(text) - 1

        if start_index < 0 or start_index > len(text):
            raise ValueError(f"start_index {start_index} out of range for text of length {len(text)}")
        # len(text) itself is allowed so the last character can fall inside the window
        if end_index_inclusive > len(text):
            raise ValueError(
                f"end_index_inclusive {end_index_inclusive} out of range for text of length {len(text)}"
            )

        length = end_index_inclusive - start_index
        if length <= 0:
            return None
        window_end = start_index + length

        opening_index = text.find(OPENING_DELIMITER, start_index, window_end)
        if opening_index < 0:
            return None

        # Search from the '<' so a stray '>' ahead of it is ignored
        closing_index = text.find(CLOSING_DELIMITER, opening_index, window_end)
        if closing_index < 0:
            return None

        return Tag(text[opening_index:closing_index + 1])

    def iter_tags(self, text: str) -> Iterator[Tag]:
        """
        Yield tags in order of appearance, skipping over each one.

        Stops at the first '<' that does not start a parsable tag.
        """
        i = 0
        while i < len(text):
            if self.is_opening_delimiter(text[i]):
                tag = self.parse_next(text, i, len(text) - 1)
                if tag is None:
                    return
                yield tag
                i += tag.length
                continue
            i += 1

    def remove_tags_from_string(self, text: str, tag_type: str) -> str:
        """
        Remove all copies of tags of the specified type from the text.

        Every occurrence of a matching tag's exact text is removed at once,
        so identical tags elsewhere in the string go with it.

        Args:
            text: Text to remove tags from
            tag_type: Tag type to remove (case sensitive)

        Returns:
            The text without any tag of the specified type

        Raises:
            MalformedMarkupError: If a '<' does not start a parsable tag
        """
        body_without_tags = text
        removed = 0

        i = 0
        while i < len(text):
            if self.is_opening_delimiter(text[i]):
                parsed_tag = self.parse_next(text, i, len(text) - 1)
                if parsed_tag is None:
                    self.logger.error(f"Unclosed tag at index {i} while removing '{tag_type}' tags")
                    raise MalformedMarkupError(text, i)

                if parsed_tag.tag_type == tag_type:
                    body_without_tags = body_without_tags.replace(parsed_tag.raw_text, "")
                    removed += 1

                i += parsed_tag.length
                continue
            i += 1

        if removed:
            self.logger.debug(f"Removed {removed} '{tag_type}' tag(s)")

        return body_without_tags

    @staticmethod
    def closing_tag_text(tag: Tag) -> str:
        """Text for the tag if used as a closing tag. Closing tags are unchanged."""
        return tag.closing_tag_text


# Module-level singleton for convenience
_default_scanner = None


def get_tag_scanner() -> TagScanner:
    """Get the default TagScanner instance."""
    global _default_scanner
    if _default_scanner is None:
        _default_scanner = TagScanner()
    return _default_scanner


def is_opening_delimiter(character: str) -> bool:
    """Check if the character begins a tag."""
    return TagScanner.is_opening_delimiter(character)


def parse_next(
    text: str,
    start_index: int = 0,
    end_index_inclusive: Optional[int] = None
) -> Optional[Tag]:
    """Convenience function to parse the next tag with the default scanner."""
    return get_tag_scanner().parse_next(text, start_index, end_index_inclusive)


def iter_tags(text: str) -> Iterator[Tag]:
    """Convenience function to iterate tags with the default scanner."""
    return get_tag_scanner().iter_tags(text)


def remove_tags_from_string(text: str, tag_type: str) -> str:
    """Convenience function to remove tags with the default scanner."""
    return get_tag_scanner().remove_tags_from_string(text, tag_type)


def closing_tag_text(tag: Tag) -> str:
    """Closing tag text for the tag, see TagScanner.closing_tag_text."""
    return TagScanner.closing_tag_text(tag)
