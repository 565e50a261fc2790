from __future__ import annotations
"""Application settings using environment variables."""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from environment."""

    # LLM collaborators (head-field extraction and legal facts)
    llm_provider: str = Field(default="openai")
    llm_model: str = Field(default="gpt-4o-mini")
    gemini_api_key: str | None = Field(default=None)
    openai_api_key: str | None = Field(default=None)
    anthropic_api_key: str | None = Field(default=None)
    llm_max_tokens: int = Field(default=4000)

    head_temperature: float = Field(default=0.2)
    fact_temperature: float = Field(default=0.3)
    head_timeout_seconds: float = Field(default=120.0)
    fact_timeout_seconds: float = Field(default=120.0)

    # Per-article fact requests in flight; 1 keeps them sequential
    fact_concurrency: int = Field(default=1, ge=1)
    generate_facts: bool = Field(default=True)

    # Split article content into ayat/huruf/angka children
    decompose_clauses: bool = Field(default=False)

    # Extra vendor watermark regexes on top of the hukumonline one
    watermark_patterns: List[str] = Field(default_factory=list)

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # Ignore extra fields from .env file
    )


settings = Settings()
