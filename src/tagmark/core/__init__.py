"""Message formatting pipeline for tagmark."""

from tagmark.core.formatter import (
    MessageFormatter,
    MessageFormatError,
    MessageTooLongError,
    to_html,
)

__all__ = [
    "MessageFormatter",
    "MessageFormatError",
    "MessageTooLongError",
    "to_html",
]
