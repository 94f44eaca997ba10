"""
richtag Custom Exceptions

Custom exception classes for error handling throughout richtag.
"""


class RichTagError(Exception):
    """Base exception for all richtag errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(RichTagError):
    """Raised when there's an issue with configuration."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""
    pass


# =============================================================================
# TAG SYSTEM ERRORS
# =============================================================================

class TagError(RichTagError):
    """Base exception for tag-related errors."""
    pass


class InvalidTagFormatError(TagError):
    """Raised when tag text is not wrapped in '<' and '>'."""

    def __init__(self, tag: str):
        message = f"Invalid tag format: '{tag}'"
        super().__init__(message, {"tag": tag})


class MalformedMarkupError(TagError):
    """Raised when an opening '<' has no tag that can be parsed after it."""

    def __init__(self, text: str, index: int):
        message = f"Malformed tag at index {index}: no closing '>' found"
        details = {
            "index": index,
            "excerpt": text[index:index + 20],
        }
        super().__init__(message, details)
        self.index = index
