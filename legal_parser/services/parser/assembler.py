"""Final composition of the parsed document tree."""

import re
from typing import List, Optional

from ...schemas.legal_document import (
    Article,
    DiagnosticKind,
    LegalBody,
    LegalDocument,
    LegalHead,
)
from .diagnostics import Diagnostics
from .reconstructor import rebuild_body_content
from .section_splitter import UNKNOWN_TITLE, SectionSplitter

# Trailing file suffix such as ".pdf" or ".txt"
_FILE_SUFFIX_RE = re.compile(r'\.[A-Za-z][A-Za-z0-9]{0,4}$')


class DocumentAssembler:
    """Composes head, bodies and title into a ``LegalDocument``."""

    def __init__(self, splitter: Optional[SectionSplitter] = None):
        self.splitter = splitter or SectionSplitter()

    def assemble(
        self,
        source_name: str,
        head: LegalHead,
        body_articles: List[Article],
        penjelasan_articles: List[Article],
        body_text: str,
        penjelasan_text: str,
        normalized_text: str,
        diagnostics: Diagnostics,
    ) -> LegalDocument:
        return LegalDocument(
            title=self.document_title(source_name, normalized_text, diagnostics),
            head=head,
            body=self.build_body(body_articles, body_text),
            penjelasan=self.build_body(penjelasan_articles, penjelasan_text),
        )

    @staticmethod
    def build_body(articles: List[Article], section_text: str) -> LegalBody:
        """Reconstructed content; the raw section text when nothing was segmented."""
        content = rebuild_body_content(articles) if articles else section_text.strip()
        return LegalBody(content=content, children=list(articles))

    def document_title(self, source_name: str, normalized_text: str, diagnostics: Diagnostics) -> str:
        """Upper-cased source name without its file suffix."""
        name = (source_name or "").strip()
        name = _FILE_SUFFIX_RE.sub('', name).strip()
        if name:
            return name.upper()

        title = self.splitter.extract_main_title(normalized_text)
        if title:
            return title

        diagnostics.warn(
            DiagnosticKind.TITLE_NOT_FOUND,
            "assembler",
            "Nama dokumen kosong dan baris 'NOMOR <angka>' tidak ditemukan.",
        )
        return UNKNOWN_TITLE
