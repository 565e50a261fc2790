"""
Heading scanner.

One line-scanning pass per heading kind produces (position, kind,
identifier) tokens; every segmentation strategy is built on top of it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ...utils.pattern_manager import PatternManager, PatternType


class HeadingKind(Enum):
    DECIMAL_ARTICLE = "decimal_article"   # Pasal 1
    ROMAN_ARTICLE = "roman_article"       # Pasal I
    ROMAN_SECTION = "roman_section"       # II.PASAL DEMI PASAL


@dataclass(frozen=True)
class HeadingToken:
    """A heading found in a text span."""
    start: int
    end: int
    kind: HeadingKind
    identifier: str
    header: str


class HeadingScanner:
    """Finds line-anchored headings of a given kind."""

    def __init__(self, pattern_manager: Optional[PatternManager] = None):
        self.pattern_manager = pattern_manager or PatternManager()

    def scan(self, text: str, kind: HeadingKind) -> List[HeadingToken]:
        """Return every heading of ``kind`` in document order."""
        if not text:
            return []

        pattern = self.pattern_manager.get(PatternType.HEADING, kind.value)
        return [
            HeadingToken(
                start=match.start(),
                end=match.end(),
                kind=kind,
                identifier=match.group(1),
                header=match.group(0).strip(),
            )
            for match in pattern.finditer(text)
        ]

    @staticmethod
    def span_of(tokens: List[HeadingToken], index: int, text_length: int) -> tuple[int, int]:
        """Body span of ``tokens[index]``: after its heading up to the next one."""
        end = tokens[index + 1].start if index + 1 < len(tokens) else text_length
        return tokens[index].end, end
