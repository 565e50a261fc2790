#!/usr/bin/env python3
"""
Legal Document Parser - Orchestrator
Normalizer -> head -> classifier -> segmenter -> facts -> reconstruction -> assembly
"""

import time
from typing import List, Optional

from ...config.settings import settings
from ...schemas.legal_document import Article, LegalHead, ParseResult
from ...utils.logging import get_logger, log_timing
from ...utils.pattern_manager import PatternManager
from ...utils.text_cleaner import TextCleaner
from .assembler import DocumentAssembler
from .classifier import SegmentationPlan, SegmentationStrategy, classify
from .clauses import ClauseDecomposer
from .diagnostics import Diagnostics
from .facts import FactCollaborator, FactDelegator, LLMFactCollaborator
from .head_extractor import HeadExtractor, HeadFieldCollaborator, LLMHeadFieldCollaborator
from .section_splitter import SectionSplitter
from .segmenter import ArticleSegmenter

logger = get_logger(__name__)


class LegalDocumentParser:
    """
    Parses the extracted text of one statute into a ``LegalDocument``.

    Each call to :meth:`parse` is independent; the parser holds no per-parse
    state, so one instance can serve concurrent parses.
    """

    def __init__(
        self,
        head_collaborator: Optional[HeadFieldCollaborator] = None,
        fact_collaborator: Optional[FactCollaborator] = None,
        generate_facts: Optional[bool] = None,
        decompose_clauses: Optional[bool] = None,
        fact_concurrency: Optional[int] = None,
        text_cleaner: Optional[TextCleaner] = None,
    ):
        """
        Args:
            head_collaborator: Head-field extractor; LLM-backed by default
            fact_collaborator: Fact generator; LLM-backed by default
            generate_facts: Run the fact step (defaults to settings.generate_facts)
            decompose_clauses: Split articles into ayat/huruf/angka children
            fact_concurrency: Fact requests in flight at once
            text_cleaner: Watermark normalizer
        """
        pattern_manager = PatternManager()
        self.generate_facts = settings.generate_facts if generate_facts is None else generate_facts
        decompose = settings.decompose_clauses if decompose_clauses is None else decompose_clauses

        self.text_cleaner = text_cleaner or TextCleaner(settings.watermark_patterns)
        self.splitter = SectionSplitter(pattern_manager)
        self.head_extractor = HeadExtractor(
            head_collaborator or LLMHeadFieldCollaborator(),
            splitter=self.splitter,
        )
        self.segmenter = ArticleSegmenter(
            decomposer=ClauseDecomposer(pattern_manager) if decompose else None,
            pattern_manager=pattern_manager,
        )
        self.fact_delegator = (
            FactDelegator(fact_collaborator or LLMFactCollaborator(), concurrency=fact_concurrency)
            if self.generate_facts else None
        )
        self.assembler = DocumentAssembler(self.splitter)

    async def parse(self, content: str, source_name: str) -> ParseResult:
        """
        Parse statute text.

        Args:
            content: Raw extracted text of the document
            source_name: Source document name (e.g. ``uu-4-2009.pdf``)

        Returns:
            The document tree plus every diagnostic raised on the way

        Raises:
            HeadExtractionError: the head could not be extracted
        """
        start_time = time.time()
        diagnostics = Diagnostics()

        text = self.text_cleaner.remove_watermarks(content)

        head = await self.head_extractor.extract(text, diagnostics)

        body_text = self.splitter.extract_body(text, diagnostics)
        penjelasan_text = self.splitter.extract_penjelasan(text, diagnostics)

        plan = classify(head.type, diagnostics)
        body_articles: List[Article] = []
        penjelasan_articles: List[Article] = []
        if plan is None:
            # Unknown type: head only, both bodies empty
            body_text = penjelasan_text = ""
        else:
            body_articles = await self._articles(
                body_text, plan.body, plan, head, diagnostics, "segmenter.body"
            )
            penjelasan_articles = await self._articles(
                penjelasan_text, plan.penjelasan, plan, head, diagnostics, "segmenter.penjelasan"
            )

        document = self.assembler.assemble(
            source_name=source_name,
            head=head,
            body_articles=body_articles,
            penjelasan_articles=penjelasan_articles,
            body_text=body_text,
            penjelasan_text=penjelasan_text,
            normalized_text=text,
            diagnostics=diagnostics,
        )

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"Dokumen diparse: {document.title} ({len(body_articles)} pasal, "
            f"{len(penjelasan_articles)} penjelasan pasal, {len(diagnostics)} diagnostik)",
            extra=log_timing("parse", duration_ms, source_name=source_name),
        )
        return ParseResult(document=document, diagnostics=diagnostics.items)

    async def _articles(
        self,
        text: str,
        strategy: SegmentationStrategy,
        plan: SegmentationPlan,
        head: LegalHead,
        diagnostics: Diagnostics,
        location: str,
    ) -> List[Article]:
        articles = self.segmenter.segment(text, strategy, diagnostics, location)
        if self.fact_delegator is None:
            return articles
        return await self.fact_delegator.attach(
            articles, plan.document_type, head.menetapkan, diagnostics
        )


async def parse_legal_document(content: str, source_name: str, **kwargs) -> ParseResult:
    """Parse with a one-off :class:`LegalDocumentParser` built from ``kwargs``."""
    return await LegalDocumentParser(**kwargs).parse(content, source_name)
