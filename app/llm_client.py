"""
LLM client abstraction layer to support multiple providers.

Both OpenAI and Ollama sit behind the same ``chat(model, messages)``
interface.  Every call is made once, with a bounded timeout; provider
failures surface as ``UpstreamCallFailure``.
"""

from __future__ import annotations
import logging
from typing import List, Dict
from abc import ABC, abstractmethod

import httpx
import openai
from ollama import Client as OllamaHTTPClient, ResponseError

import config
from errors import UpstreamCallFailure

logger = logging.getLogger(__name__)


class LLMResponse:
    """Unified response object for LLM responses."""

    def __init__(self, content: str):
        self.message = MessageContent(content)


class MessageContent:
    """Message content wrapper."""

    def __init__(self, content: str):
        self.content = content


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to the LLM provider."""


class OllamaClient(LLMClient):
    """Ollama client implementation."""

    def __init__(self, host: str | None = None, timeout: float | None = None):
        self.client = OllamaHTTPClient(
            host=host or config.OLLAMA_BASE_URL,
            timeout=timeout or config.STRUCTURING_TIMEOUT,
        )

    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to Ollama."""
        params = config.OPENAI_MODEL_PARAMS
        try:
            response = self.client.chat(
                model=model,
                messages=messages,
                options={
                    "temperature": params["temperature"],
                    "num_predict": params["max_tokens"],
                },
            )
        except (ResponseError, httpx.HTTPError, ConnectionError) as exc:
            raise UpstreamCallFailure(f"Ollama request failed: {exc}") from exc
        return LLMResponse(response.message.content or "")


class OpenAIClient(LLMClient):
    """OpenAI client implementation."""

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        # Use provided API key or get from environment
        api_key = api_key or config.OPENAI_API_KEY
        if not api_key:
            raise ValueError("OpenAI API key is required. Set OPENAI_API_KEY environment variable or pass api_key parameter.")

        self.client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout or config.STRUCTURING_TIMEOUT,
            max_retries=0,
        )

    def chat(self, model: str, messages: List[Dict[str, str]]) -> LLMResponse:
        """Send a chat request to OpenAI."""
        params = config.OPENAI_MODEL_PARAMS
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=params["temperature"],
                max_tokens=params["max_tokens"],
            )
        except openai.OpenAIError as exc:
            raise UpstreamCallFailure(f"OpenAI request failed: {exc}") from exc

        return LLMResponse(response.choices[0].message.content or "")


def get_llm_client(provider: str | None = None) -> LLMClient:
    """Factory function to get the appropriate LLM client based on configuration."""
    provider = (provider or config.LLM_PROVIDER).lower()

    if provider == "openai":
        return OpenAIClient()
    elif provider == "ollama":
        return OllamaClient()
    else:
        raise ValueError(f"Unsupported LLM provider: {provider}")


# Create a global client instance
_llm_client = None

def chat(model: str, messages: List[Dict[str, str]]) -> LLMResponse:
    """
    Unified chat function that works with any configured LLM provider.

    The client is created on first use and reused afterwards.
    """
    global _llm_client
    if _llm_client is None:
        _llm_client = get_llm_client()
        logger.debug("Created %s", type(_llm_client).__name__)

    return _llm_client.chat(model, messages)
