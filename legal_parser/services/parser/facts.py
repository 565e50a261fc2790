"""
Legal-fact delegation.

Every article is sent, with the document type and the Menetapkan clause, to
a fact-generation collaborator. A failing article gets an empty fact list;
the rest of the parse carries on.
"""

import asyncio
from typing import List, Optional, Protocol, Union

from pydantic import BaseModel

from ...config.settings import settings
from ...schemas.legal_document import Article, DiagnosticKind, DocumentType
from ...utils.logging import get_logger, log_error
from ..llm.base import BaseLLMProvider
from ..llm.factory import LLMFactory
from ..llm.prompt.prompt import build_facts_prompt
from ..llm.structured import validate_model
from .diagnostics import Diagnostics
from .reconstructor import render_article

logger = get_logger(__name__)


class FactList(BaseModel):
    facts: List[str]


class FactCollaborator(Protocol):
    async def generate_facts(self, article_text: str, doc_type: str, menetapkan: str) -> List[str]:
        ...


class LLMFactCollaborator:
    """Fact generation backed by an LLM provider."""

    def __init__(self, provider: Optional[BaseLLMProvider] = None, temperature: Optional[float] = None):
        self._provider = provider
        self.temperature = settings.fact_temperature if temperature is None else temperature

    @property
    def provider(self) -> BaseLLMProvider:
        if self._provider is None:
            self._provider = LLMFactory.create_provider()
        return self._provider

    async def generate_facts(self, article_text: str, doc_type: str, menetapkan: str) -> List[str]:
        response = await self.provider.generate(
            build_facts_prompt(article_text, doc_type, menetapkan),
            temperature=self.temperature,
            json_mode=True,
        )
        return validate_model(response.content, FactList).facts


class FactDelegator:
    """Attaches ``listOfFacts`` to articles, preserving source order."""

    def __init__(
        self,
        collaborator: FactCollaborator,
        concurrency: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            collaborator: Fact-generation collaborator
            concurrency: Requests in flight at once (1 = sequential)
            timeout: Per-article timeout in seconds; a timeout counts as a failure
        """
        self.collaborator = collaborator
        self.concurrency = max(1, concurrency or settings.fact_concurrency)
        self.timeout = settings.fact_timeout_seconds if timeout is None else timeout

    async def attach(
        self,
        articles: List[Article],
        doc_type: Union[DocumentType, str],
        menetapkan: str,
        diagnostics: Diagnostics,
    ) -> List[Article]:
        """Return new articles carrying their facts, in the input order."""
        if not articles:
            return []

        type_value = getattr(doc_type, "value", doc_type)
        semaphore = asyncio.Semaphore(self.concurrency)

        async def bounded(article: Article) -> Article:
            async with semaphore:
                facts = await self._facts_for(article, type_value, menetapkan, diagnostics)
            return article.model_copy(update={"listOfFacts": facts})

        # gather keeps input order regardless of completion order
        return list(await asyncio.gather(*(bounded(article) for article in articles)))

    async def _facts_for(
        self,
        article: Article,
        doc_type: str,
        menetapkan: str,
        diagnostics: Diagnostics,
    ) -> List[str]:
        try:
            facts = await asyncio.wait_for(
                self.collaborator.generate_facts(render_article(article), doc_type, menetapkan),
                timeout=self.timeout,
            )
            return [str(fact) for fact in facts]
        except Exception as e:
            logger.error(
                f"Gagal generate fakta hukum untuk {article.header}: {e}",
                extra=log_error(e, stage="facts", article=article.article),
            )
            diagnostics.warn(
                DiagnosticKind.FACT_GENERATION_FAILED,
                "facts",
                f"Fakta hukum untuk {article.header} tidak tersedia: {type(e).__name__}",
                article=article.article,
            )
            return []
