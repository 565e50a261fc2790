"""
Head extraction.

Isolates the pembukaan (title, Menimbang, Mengingat, Menetapkan) and hands
it to a text-to-structure collaborator. The collaborator's field content is
trusted; only the five-field shape is validated.
"""

import asyncio
from typing import Optional, Protocol

from ...config.settings import settings
from ...schemas.legal_document import LegalHead
from ...utils.logging import get_logger, log_error
from ..llm.base import BaseLLMProvider
from ..llm.factory import LLMFactory
from ..llm.prompt.prompt import build_head_prompt
from ..llm.structured import validate_model
from .diagnostics import Diagnostics
from .errors import HeadExtractionError
from .section_splitter import SectionSplitter

logger = get_logger(__name__)


class HeadFieldCollaborator(Protocol):
    async def extract_head(self, intro: str) -> LegalHead:
        ...


class LLMHeadFieldCollaborator:
    """Head-field extraction backed by an LLM provider."""

    def __init__(self, provider: Optional[BaseLLMProvider] = None, temperature: Optional[float] = None):
        self._provider = provider
        self.temperature = settings.head_temperature if temperature is None else temperature

    @property
    def provider(self) -> BaseLLMProvider:
        # Created lazily so a parse without API keys fails at call time
        if self._provider is None:
            self._provider = LLMFactory.create_provider()
        return self._provider

    async def extract_head(self, intro: str) -> LegalHead:
        response = await self.provider.generate(
            build_head_prompt(intro),
            temperature=self.temperature,
            json_mode=True,
        )
        return validate_model(response.content, LegalHead)


class HeadExtractor:
    """Intro span selection plus delegated head-field extraction."""

    def __init__(
        self,
        collaborator: HeadFieldCollaborator,
        splitter: Optional[SectionSplitter] = None,
        timeout: Optional[float] = None,
    ):
        self.collaborator = collaborator
        self.splitter = splitter or SectionSplitter()
        self.timeout = settings.head_timeout_seconds if timeout is None else timeout

    async def extract(self, text: str, diagnostics: Diagnostics) -> LegalHead:
        """
        Build the document head from normalized text.

        Raises:
            HeadExtractionError: collaborator failed, timed out or returned a
                response without the five required fields
        """
        intro = self.splitter.extract_intro(text, diagnostics)
        try:
            head = await asyncio.wait_for(self.collaborator.extract_head(intro), timeout=self.timeout)
        except Exception as e:
            logger.error(f"Gagal mengekstrak kepala dokumen: {e}", extra=log_error(e, stage="head"))
            raise HeadExtractionError(f"Head extraction failed: {e}") from e

        if not isinstance(head, LegalHead):
            raise HeadExtractionError(
                f"Head collaborator returned {type(head).__name__}, expected LegalHead"
            )

        logger.info(f"Kepala dokumen diekstrak: {head.title!r} ({getattr(head.type, 'value', head.type)})")
        return head
