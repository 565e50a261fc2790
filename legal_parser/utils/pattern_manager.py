"""
Pattern Manager for Legal Document Parsing
Centralized regex patterns for Indonesian statutory documents

Every anchor and heading pattern used by the splitter, the scanner and the
clause decomposer lives here so the strategies cannot drift apart.
"""

import re
from enum import Enum
from typing import Dict, Iterable, List, Pattern


class PatternType(Enum):
    """Types of legal document patterns."""
    WATERMARK = "watermark"
    ANCHOR = "anchor"
    HEADING = "heading"
    CLAUSE = "clause"


# Well-formed, non-empty upper-case Roman numeral (I .. MMMCMXCIX)
ROMAN_NUMERAL = r"(?=[IVXLCDM])M{0,3}(?:CM|CD|D?C{0,3})(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3})"

HUKUMONLINE_WATERMARK = r"www\.hukumonline\.com/pusatdata"


class PatternManager:
    """
    Compiled pattern registry.

    Patterns are compiled once per class and shared by every instance.
    """

    _compiled: Dict[str, Dict[str, Pattern[str]]] = {}

    def __init__(self):
        if not PatternManager._compiled:
            PatternManager._compiled = self._compile_patterns()
        self.patterns = PatternManager._compiled

    @staticmethod
    def _compile_patterns() -> Dict[str, Dict[str, Pattern[str]]]:
        return {
            # Group 1 is the watermark itself; trailing blanks go with it
            PatternType.WATERMARK.value: {
                'hukumonline': re.compile(
                    r'(' + HUKUMONLINE_WATERMARK + r')[ \t]*', re.IGNORECASE
                ),
            },
            PatternType.ANCHOR.value: {
                # Enacting clause followed (lazily) by the first Pasal or BAB I line
                'intro': re.compile(
                    r'(Menetapkan\s*:|MEMUTUSKAN\s*:)([\s\S]*?)'
                    r'(?=\n\s*(Pasal\s+(\d+|[IVXLCDM]+)|BAB\s+I))',
                    re.IGNORECASE | re.MULTILINE
                ),
                'menetapkan': re.compile(r'Menetapkan\s*:', re.IGNORECASE),
                'memutuskan': re.compile(r'MEMUTUSKAN\s*:', re.IGNORECASE),
                'penjelasan': re.compile(r'^[ \t]*PENJELASAN(?=\s|$)', re.MULTILINE),
                'penjelasan_pasal': re.compile(r'Penjelasan\s+Pasal', re.IGNORECASE),
                'nomor': re.compile(r'NOMOR\s+\d+', re.IGNORECASE),
            },
            PatternType.HEADING.value: {
                'decimal_article': re.compile(
                    r'^[ \t]*(?i:Pasal)[ \t]+(\d+)[ \t]*[.:]?[ \t]*$', re.MULTILINE
                ),
                'roman_article': re.compile(
                    r'^[ \t]*(?i:Pasal)[ \t]+(' + ROMAN_NUMERAL + r')[ \t]*[.:]?[ \t]*$',
                    re.MULTILINE
                ),
                'roman_section': re.compile(
                    r'^[ \t]*(' + ROMAN_NUMERAL + r')\.(?=\S)', re.MULTILINE
                ),
            },
            PatternType.CLAUSE.value: {
                'ayat': re.compile(r'^[ \t]*\([ \t]*(\d+[a-z]?)[ \t]*\)[ \t]*(.*)$', re.MULTILINE),
                'huruf': re.compile(r'^[ \t]*([a-z])\.[ \t]+(.*)$', re.MULTILINE),
                'angka': re.compile(r'^[ \t]*(\d{1,3})\.[ \t]+(.*)$', re.MULTILINE),
            },
        }

    def get(self, pattern_type: PatternType, name: str) -> Pattern[str]:
        return self.patterns[pattern_type.value][name]

    def watermark_patterns(self, extra: Iterable[str] = ()) -> List[Pattern[str]]:
        """Hukumonline watermark plus any configured vendor patterns."""
        compiled = list(self.patterns[PatternType.WATERMARK.value].values())
        for pattern in extra:
            compiled.append(re.compile(r'(' + pattern + r')[ \t]*', re.IGNORECASE))
        return compiled
