"""
Text Cleaner for Legal Documents
Removes vendor watermarks and boilerplate noise from raw extracted text.

Structural lines (Pasal, ayat, huruf) are never rewritten, so the segmenter
sees the source layout.
"""

import logging
import re
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .pattern_manager import PatternManager

logger = logging.getLogger(__name__)


def _drop_watermark(match: re.Match) -> str:
    # An empty watermark keeps the blanks after it
    return '' if match.group(1) else match.group(0)


@dataclass
class CleaningResult:
    """Result of text cleaning operation."""
    cleaned_text: str
    watermarks_removed: int
    original_length: int
    cleaned_length: int
    processing_time: float


class TextCleaner:
    """Watermark and line-ending normalizer for statute text."""

    def __init__(self, extra_watermarks: Optional[Iterable[str]] = None):
        """
        Args:
            extra_watermarks: Additional vendor watermark regexes
        """
        self.pattern_manager = PatternManager()
        self._watermarks = self.pattern_manager.watermark_patterns(extra_watermarks or ())

    def clean(self, text: str) -> CleaningResult:
        """
        Remove watermarks and trim, reporting what was done.

        Removal repeats until the text is stable, so cleaning an already
        clean text returns it unchanged.
        """
        start_time = time.time()
        original_length = len(text or "")

        cleaned_text = self._normalize_line_endings(text or "")
        removed_total = 0
        while True:
            cleaned_text, removed = self._strip_watermarks(cleaned_text)
            if not removed:
                break
            removed_total += removed
        cleaned_text = cleaned_text.strip()

        processing_time = time.time() - start_time
        logger.debug(
            f"Text cleaning completed: {original_length} -> {len(cleaned_text)} chars, "
            f"{removed_total} watermark(s) removed"
        )

        return CleaningResult(
            cleaned_text=cleaned_text,
            watermarks_removed=removed_total,
            original_length=original_length,
            cleaned_length=len(cleaned_text),
            processing_time=processing_time,
        )

    def remove_watermarks(self, text: str) -> str:
        """Return text with vendor watermarks removed and whitespace trimmed."""
        return self.clean(text).cleaned_text

    def _normalize_line_endings(self, text: str) -> str:
        text = re.sub(r'\r\n', '\n', text)
        return re.sub(r'\r', '\n', text)

    def _strip_watermarks(self, text: str) -> tuple[str, int]:
        removed = 0
        lines: List[str] = []
        for line in text.split('\n'):
            stripped_line = line
            for pattern in self._watermarks:
                hits = sum(1 for match in pattern.finditer(stripped_line) if match.group(1))
                if hits:
                    removed += hits
                    stripped_line = pattern.sub(_drop_watermark, stripped_line)
            # A line that held only a watermark disappears entirely
            if stripped_line != line and not stripped_line.strip():
                continue
            lines.append(stripped_line)
        return '\n'.join(lines), removed


def remove_watermarks(text: str, extra_watermarks: Optional[Iterable[str]] = None) -> str:
    """Module-level shortcut for :meth:`TextCleaner.remove_watermarks`."""
    return TextCleaner(extra_watermarks).remove_watermarks(text)
