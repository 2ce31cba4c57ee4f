"""
LLM Client Factory Module

This module builds the LLM client used by the MCP server from its
configuration.
"""
import logging
from typing import Optional

import httpx

from llm.base_client import BaseLLMClient
from llm.local_llm import LMStudioClient

logger = logging.getLogger(__name__)


class LLMClient:
    """
    Factory class for creating LLM clients based on the selected provider.
    """

    @staticmethod
    def create(
        provider: str = "lmstudio",
        api_url: str = "http://localhost:11434/v1/chat/completions",
        model: str = "llama-3.2-1b-instruct",
        temperature: float = 0.7,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> BaseLLMClient:
        """
        Create an LLM client for the specified provider.

        Args:
            provider: The LLM provider to use ('lmstudio', 'ollama')
            api_url: Chat completion endpoint URL
            model: The default model to use
            temperature: Controls randomness in response generation
            timeout: Timeout for API requests in seconds
            transport: Optional httpx transport override

        Returns:
            An instance of BaseLLMClient for the specified provider
        """
        # Both servers speak the OpenAI chat completion protocol
        if provider.lower() in ("lmstudio", "ollama"):
            logger.info(f"Creating {provider} client for {api_url}")
            return LMStudioClient(
                api_url=api_url,
                model_name=model,
                temperature=temperature,
                timeout=timeout,
                transport=transport
            )

        raise ValueError(f"Unsupported LLM provider: {provider}")
