"""
Text sanitizing for raw article content.

Strips blank lines and markdown section markers, then removes
parenthetical annotations (dates, pronunciations, translations) so that
sentence detection works on plain prose.
"""

import re
from typing import List

from content_robot.utils.logging import get_logger

logger = get_logger(__name__)

_MULTIPLE_SPACES = re.compile(r" {2,}")


class TextSanitizer:
    """Clean raw article text before sentence segmentation."""

    def __init__(self, markdown_marker: str = "=") -> None:
        """
        Initialize the sanitizer.

        Args:
            markdown_marker: Prefix that identifies section heading lines
        """
        self.markdown_marker = markdown_marker

    def sanitize(self, text: str) -> str:
        """
        Sanitize raw text.

        Args:
            text: Raw article text

        Returns:
            Single-line text without blank lines, section markers or
            parenthetical spans
        """
        if not text:
            return ""

        text = self.remove_blank_lines_and_markdown(text)
        text = self.remove_parentheticals(text)
        text = _MULTIPLE_SPACES.sub(" ", text)

        return text.strip()

    def remove_blank_lines_and_markdown(self, text: str) -> str:
        """Drop empty and heading lines, joining the rest with single spaces."""
        lines = text.split("\n")
        kept: List[str] = []

        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith(self.markdown_marker):
                continue
            kept.append(line)

        logger.debug(f"Kept {len(kept)} of {len(lines)} lines")
        return " ".join(kept)

    def remove_parentheticals(self, text: str) -> str:
        """
        Remove every balanced parenthetical span, whatever its depth.

        A ``)`` with no opener is kept as is. A ``(`` that never closes is
        kept as is, and groups that do close later in the text are still
        removed.
        """
        result: List[str] = []
        # Output offsets of the currently open "(" characters
        open_positions: List[int] = []

        for char in text:
            if char == "(":
                open_positions.append(len(result))
                result.append(char)
            elif char == ")" and open_positions:
                del result[open_positions.pop():]
            else:
                result.append(char)

        return "".join(result)


def sanitize(text: str) -> str:
    """Sanitize text with the default settings."""
    return TextSanitizer().sanitize(text)
