import json

import httpx
import pytest

from legal_parser.config.settings import settings
from legal_parser.services.llm.factory import LLMFactory
from legal_parser.services.llm.providers.anthropic_ import AnthropicProvider
from legal_parser.services.llm.providers.gemini import GeminiProvider
from legal_parser.services.llm.providers.openai_ import OpenAIProvider


@pytest.fixture
def captured(monkeypatch):
    """Route provider HTTP calls to a MockTransport and record requests."""
    requests = []
    responses = {}
    real_client = httpx.AsyncClient

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=responses["body"])

    def client_factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(handler)
        return real_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", client_factory)
    return requests, responses


@pytest.mark.asyncio
async def test_openai_json_mode(captured):
    requests, responses = captured
    responses["body"] = {
        "choices": [{"message": {"content": '{"facts": []}'}}],
        "usage": {"total_tokens": 10},
    }

    response = await OpenAIProvider(model="gpt-4o-mini", api_key="k").generate(
        "halo", temperature=0.2, json_mode=True, system_prompt="sistem"
    )

    assert response.content == '{"facts": []}'
    assert response.provider == "openai"
    payload = json.loads(requests[0].content)
    assert payload["response_format"] == {"type": "json_object"}
    assert payload["temperature"] == 0.2
    assert payload["messages"][0] == {"role": "system", "content": "sistem"}
    assert requests[0].headers["Authorization"] == "Bearer k"


@pytest.mark.asyncio
async def test_gemini_response_mime_type(captured):
    requests, responses = captured
    responses["body"] = {"candidates": [{"content": {"parts": [{"text": "{}"}]}}]}

    response = await GeminiProvider(model="gemini-2.0-flash", api_key="k").generate("halo", json_mode=True)

    assert response.content == "{}"
    payload = json.loads(requests[0].content)
    assert payload["generationConfig"]["responseMimeType"] == "application/json"
    assert "gemini-2.0-flash:generateContent" in str(requests[0].url)


@pytest.mark.asyncio
async def test_anthropic_text_block(captured):
    requests, responses = captured
    responses["body"] = {"content": [{"type": "text", "text": "{}"}], "usage": {}}

    response = await AnthropicProvider(api_key="k").generate("halo", system_prompt="sistem")

    assert response.content == "{}"
    assert response.provider == "anthropic"
    payload = json.loads(requests[0].content)
    assert payload["system"] == "sistem"
    assert requests[0].headers["x-api-key"] == "k"


@pytest.mark.asyncio
async def test_http_error_propagates(monkeypatch):
    real_client = httpx.AsyncClient

    def client_factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(lambda request: httpx.Response(429))
        return real_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", client_factory)
    with pytest.raises(httpx.HTTPStatusError):
        await OpenAIProvider(api_key="k").generate("halo")


class TestLLMFactory:
    def test_creates_configured_provider(self):
        provider = LLMFactory.create_provider()
        assert isinstance(provider, OpenAIProvider)
        assert provider.model == settings.llm_model

    def test_explicit_provider_and_model(self):
        provider = LLMFactory.create_provider("Gemini", model="gemini-2.0-flash")
        assert isinstance(provider, GeminiProvider)
        assert provider.model_name == "gemini-2.0-flash"

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            LLMFactory.create_provider("cohere")

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "anthropic_api_key", None)
        with pytest.raises(ValueError, match="API key not found"):
            LLMFactory.create_provider("anthropic")
        assert LLMFactory.get_available_providers()["anthropic"]["available"] is False
