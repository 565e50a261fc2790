"""
LLM Provider Factory
Manages different LLM providers (Gemini, OpenAI, Anthropic)
"""

from typing import Any, Dict, Optional

from ...config.settings import settings
from .base import BaseLLMProvider
from .providers.anthropic_ import AnthropicProvider
from .providers.gemini import GeminiProvider
from .providers.openai_ import OpenAIProvider


class LLMFactory:
    """Factory for creating LLM providers"""

    _providers = {
        "gemini": GeminiProvider,
        "openai": OpenAIProvider,
        "anthropic": AnthropicProvider,
    }

    @classmethod
    def create_provider(
        cls,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        **kwargs
    ) -> BaseLLMProvider:
        """
        Create LLM provider instance

        Args:
            provider: Provider name (gemini, openai, anthropic)
            model: Model name; defaults to settings.llm_model
            **kwargs: Additional provider parameters

        Returns:
            LLM provider instance
        """
        provider_name = (provider or settings.llm_provider).lower()

        if provider_name not in cls._providers:
            raise ValueError(f"Unsupported provider: {provider_name}. Available: {list(cls._providers.keys())}")

        provider_class = cls._providers[provider_name]

        api_key = cls._api_keys().get(provider_name)
        if not api_key:
            raise ValueError(f"API key not found for provider: {provider_name}")

        return provider_class(
            model=model or settings.llm_model,
            api_key=api_key,
            **kwargs
        )

    @classmethod
    def get_available_providers(cls) -> Dict[str, Any]:
        """Get list of available providers"""
        keys = cls._api_keys()
        return {
            name: {
                "name": name,
                "available": bool(keys.get(name))
            }
            for name in cls._providers.keys()
        }

    @staticmethod
    def _api_keys() -> Dict[str, Optional[str]]:
        return {
            "gemini": settings.gemini_api_key,
            "openai": settings.openai_api_key,
            "anthropic": settings.anthropic_api_key,
        }
