"""
Article segmentation.

Splits a body or penjelasan span into ``Article`` nodes. Three strategies
share one heading scanner:

- ENACTMENT: decimal ``Pasal 1`` headings (enactment and revocation acts).
- AMENDMENT_BODY: Roman ``Pasal I`` headings (amending clauses).
- AMENDMENT_PENJELASAN: find the Roman-numbered section holding the
  "Penjelasan Pasal" (article-by-article) explanation, drop everything before
  it, then scan decimal headings in the rest.

No strategy raises on malformed text; a missing structure yields an empty
list plus a diagnostic.
"""

from typing import List, Optional

from ...schemas.legal_document import Article, DiagnosticKind
from ...utils.logging import get_logger
from ...utils.pattern_manager import PatternManager, PatternType
from .classifier import SegmentationStrategy
from .clauses import ClauseDecomposer
from .diagnostics import Diagnostics
from .scanner import HeadingKind, HeadingScanner, HeadingToken

logger = get_logger(__name__)


class ArticleSegmenter:
    """Type-aware splitter of statute text into articles."""

    def __init__(
        self,
        scanner: Optional[HeadingScanner] = None,
        decomposer: Optional[ClauseDecomposer] = None,
        pattern_manager: Optional[PatternManager] = None,
    ):
        """
        Args:
            scanner: Heading scanner; a default one is built if omitted
            decomposer: When given, article content is split into ayat/huruf/angka
            pattern_manager: Shared pattern registry
        """
        self.pattern_manager = pattern_manager or PatternManager()
        self.scanner = scanner or HeadingScanner(self.pattern_manager)
        self.decomposer = decomposer
        self._penjelasan_pasal = self.pattern_manager.get(PatternType.ANCHOR, 'penjelasan_pasal')

    def segment(
        self,
        text: str,
        strategy: SegmentationStrategy,
        diagnostics: Diagnostics,
        location: str = "segmenter",
    ) -> List[Article]:
        """Split ``text`` into articles using ``strategy``."""
        if strategy is SegmentationStrategy.ENACTMENT:
            return self._split(text, HeadingKind.DECIMAL_ARTICLE, diagnostics, location)
        if strategy is SegmentationStrategy.AMENDMENT_BODY:
            return self._split(text, HeadingKind.ROMAN_ARTICLE, diagnostics, location)
        if strategy is SegmentationStrategy.AMENDMENT_PENJELASAN:
            return self._split_amendment_penjelasan(text, diagnostics, location)
        raise ValueError(f"Unknown segmentation strategy: {strategy}")

    def _split(
        self,
        text: str,
        kind: HeadingKind,
        diagnostics: Diagnostics,
        location: str,
    ) -> List[Article]:
        tokens = self.scanner.scan(text, kind)
        if not tokens:
            diagnostics.warn(
                DiagnosticKind.NO_ARTICLES_FOUND,
                location,
                f"Tidak ditemukan pasal ({kind.value}) dalam konten.",
            )
            return []

        articles = [self._build_article(text, tokens, i) for i in range(len(tokens))]
        logger.debug(f"[{location}] {len(articles)} pasal ditemukan ({kind.value})")
        return articles

    def _split_amendment_penjelasan(
        self,
        text: str,
        diagnostics: Diagnostics,
        location: str,
    ) -> List[Article]:
        sections = self.scanner.scan(text, HeadingKind.ROMAN_SECTION)
        if not sections:
            diagnostics.warn(
                DiagnosticKind.NO_ROMAN_SECTIONS,
                location,
                "Tidak ditemukan section romawi pada penjelasan.",
            )
            return []

        section_start = self._find_article_explanation(text, sections)
        if section_start is None:
            diagnostics.warn(
                DiagnosticKind.NO_ARTICLE_EXPLANATION_SECTION,
                location,
                "Tidak ditemukan section 'Penjelasan Pasal Demi Pasal'.",
            )
            return []

        return self._split(text[section_start:], HeadingKind.DECIMAL_ARTICLE, diagnostics, location)

    def _find_article_explanation(self, text: str, sections: List[HeadingToken]) -> Optional[int]:
        """Start offset of the first Roman section mentioning "Penjelasan Pasal"."""
        for i, section in enumerate(sections):
            end = sections[i + 1].start if i + 1 < len(sections) else len(text)
            if self._penjelasan_pasal.search(text, section.start, end):
                return section.start
        return None

    def _build_article(self, text: str, tokens: List[HeadingToken], index: int) -> Article:
        token = tokens[index]
        start, end = HeadingScanner.span_of(tokens, index, len(text))
        content = text[start:end].strip()

        children = None
        if self.decomposer is not None:
            content, children = self.decomposer.decompose(content)

        return Article(
            article=token.identifier,
            header=token.header,
            content=content,
            children=children,
        )
