"""
Base LLM provider interface
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel


class LLMResponse(BaseModel):
    """Structured response from LLM"""
    content: str
    usage: Optional[Dict[str, Any]] = None
    model: str
    provider: str


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers"""

    def __init__(self, model: str, api_key: str, **kwargs):
        self.model = model
        self.api_key = api_key
        self.kwargs = kwargs

    @abstractmethod
    async def generate(self, prompt: str, **kwargs) -> LLMResponse:
        """Generate response from LLM.

        Recognized kwargs: ``temperature``, ``max_tokens``, ``system_prompt``,
        ``json_mode`` (ask the API for a bare JSON object) and ``timeout``.
        """
        pass

    @abstractmethod
    def get_model_info(self) -> Dict[str, Any]:
        """Get model information"""
        pass
