"""
Section splitting for statute text.

Locates the head (pembukaan), the body (batang tubuh) and the explanatory
annex (penjelasan) from anchor phrases. Every extraction falls back to a
documented value and records a diagnostic instead of failing.
"""

import re
from typing import Optional

from ...schemas.legal_document import DiagnosticKind
from ...utils.logging import get_logger
from ...utils.pattern_manager import PatternManager, PatternType
from .diagnostics import Diagnostics

logger = get_logger(__name__)

UNKNOWN_TITLE = "UNKNOWN TITLE"


class SectionSplitter:
    """Anchor-based span selection over normalized statute text."""

    def __init__(self, pattern_manager: Optional[PatternManager] = None):
        pm = pattern_manager or PatternManager()
        self._intro = pm.get(PatternType.ANCHOR, 'intro')
        self._menetapkan = pm.get(PatternType.ANCHOR, 'menetapkan')
        self._memutuskan = pm.get(PatternType.ANCHOR, 'memutuskan')
        self._penjelasan = pm.get(PatternType.ANCHOR, 'penjelasan')
        self._nomor = pm.get(PatternType.ANCHOR, 'nomor')

    def extract_intro(self, text: str, diagnostics: Diagnostics) -> str:
        """
        Text from the start of the document through the enacting clause.

        The enacting anchor ("Menetapkan:" or "MEMUTUSKAN:") must eventually
        be followed by a Pasal or BAB I line; otherwise the whole text is
        returned.
        """
        match = self._intro.search(text)
        if not match:
            diagnostics.warn(
                DiagnosticKind.ANCHOR_NOT_FOUND,
                "intro",
                "Menetapkan/MEMUTUSKAN diikuti Pasal atau BAB tidak ditemukan. "
                "Mengambil seluruh teks sebagai pembukaan.",
            )
            return text
        return text[:match.end()].strip()

    def extract_body(self, text: str, diagnostics: Diagnostics) -> str:
        """
        Batang tubuh: after the enacting anchor, up to the PENJELASAN line.

        Fallbacks: enacting anchor to end of document, then the whole text.
        """
        anchor = self._enacting_anchor(text)
        if anchor is None:
            diagnostics.warn(
                DiagnosticKind.ANCHOR_NOT_FOUND,
                "body",
                "Menetapkan tidak ditemukan. Mengambil seluruh teks sebagai batang tubuh.",
            )
            return text.strip()

        penjelasan = self._penjelasan.search(text, anchor.end())
        if penjelasan is None:
            diagnostics.warn(
                DiagnosticKind.ANCHOR_NOT_FOUND,
                "body",
                "Penjelasan tidak ditemukan. Mengambil teks setelah Menetapkan sampai akhir "
                "sebagai batang tubuh.",
                offset=anchor.end(),
            )
            return text[anchor.end():].strip()

        return text[anchor.end():penjelasan.start()].strip()

    def extract_penjelasan(self, text: str, diagnostics: Diagnostics) -> str:
        """Text after the PENJELASAN heading word through the end; empty when absent."""
        anchor = self._enacting_anchor(text)
        match = self._penjelasan.search(text, anchor.end() if anchor else 0)
        if match is None:
            diagnostics.warn(
                DiagnosticKind.ANCHOR_NOT_FOUND,
                "penjelasan",
                "Tidak ditemukan bagian 'PENJELASAN' dalam dokumen.",
            )
            return ""
        return text[match.end():].strip()

    def extract_main_title(self, text: str) -> Optional[str]:
        """
        Title lines around the first "NOMOR <n>" line of the first ten lines.

        Takes one line before through four lines after, joined and upper-cased.
        """
        lines = [line.strip() for line in text.split('\n') if line.strip()][:10]
        nomor_index = next((i for i, line in enumerate(lines) if self._nomor.search(line)), None)
        if nomor_index is None:
            logger.debug("Tidak ditemukan baris 'NOMOR <angka>' dalam 10 baris pertama.")
            return None

        title_lines = lines[max(nomor_index - 1, 0):min(nomor_index + 5, len(lines))]
        return re.sub(r'\s+', ' ', ' '.join(title_lines)).upper().strip()

    def _enacting_anchor(self, text: str) -> Optional[re.Match]:
        return self._menetapkan.search(text) or self._memutuskan.search(text)
