"""
Clause decomposition for article bodies.

Splits an article's text into ayat ``(1)``, huruf ``a.`` and angka ``1.``
children following the Indonesian hierarchy Pasal > ayat > huruf > angka.
Text that precedes the first child marker stays with the parent.
"""

from typing import List, Optional, Pattern, Tuple

from ...schemas.legal_document import Letter, Paragraph, SubNumber
from ...utils.pattern_manager import PatternManager, PatternType


def _split_markers(text: str, pattern: Pattern[str]) -> Tuple[str, List[Tuple[str, str]]]:
    """Return (lead-in text, [(marker id, marker body), ...])."""
    matches = list(pattern.finditer(text))
    if not matches:
        return text.strip(), []

    lead = text[:matches[0].start()].strip()
    items = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        items.append((match.group(1), text[match.start(2):end].strip()))
    return lead, items


class ClauseDecomposer:
    """Builds Paragraph / Letter / SubNumber children from article content."""

    def __init__(self, pattern_manager: Optional[PatternManager] = None):
        pm = pattern_manager or PatternManager()
        self._ayat = pm.get(PatternType.CLAUSE, 'ayat')
        self._huruf = pm.get(PatternType.CLAUSE, 'huruf')
        self._angka = pm.get(PatternType.CLAUSE, 'angka')

    def decompose(self, content: str) -> Tuple[str, Optional[List[Paragraph]]]:
        """
        Split article content into its paragraphs.

        Returns the article's own lead-in text and its paragraphs, or the
        content unchanged and ``None`` when it has no ``(n)`` markers.
        """
        lead, ayat_items = _split_markers(content, self._ayat)
        if not ayat_items:
            return content, None

        paragraphs = []
        for number, body in ayat_items:
            own_text, letters = self._letters(body)
            paragraphs.append(Paragraph(paragraph=number, content=own_text, children=letters))
        return lead, paragraphs

    def _letters(self, text: str) -> Tuple[str, Optional[List[Letter]]]:
        lead, huruf_items = _split_markers(text, self._huruf)
        if not huruf_items:
            return text, None

        letters = []
        for letter, body in huruf_items:
            own_text, numbers = self._sub_numbers(body)
            letters.append(Letter(letter=letter, content=own_text, children=numbers))
        return lead, letters

    def _sub_numbers(self, text: str) -> Tuple[str, Optional[List[SubNumber]]]:
        lead, angka_items = _split_markers(text, self._angka)
        if not angka_items:
            return text, None
        return lead, [SubNumber(number=number, content=body) for number, body in angka_items]
