"""
Local LLM Clients

This module provides the client for OpenAI compatible chat completion servers
running locally, such as LM Studio or Ollama's `/v1/chat/completions` route.
"""
import json
import logging
from typing import Any, List, Optional, Union

import httpx

from llm.base_client import BaseLLMClient
from llm.models import ChatCompletionRequest, LLMError, Message

logger = logging.getLogger(__name__)


class LMStudioClient(BaseLLMClient):
    """
    Client for a chat completion endpoint served by LM Studio

    Every query is a single POST with no retries. Upstream failures are
    returned as LLMError values rather than raised.
    """
    def __init__(
        self,
        api_url: str,
        model_name: str,
        temperature: float = 0.7,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the LM Studio client.

        Args:
            api_url: Full URL of the chat completion endpoint
            model_name: Default model identifier loaded in LM Studio
            temperature: Controls randomness in response generation
            timeout: Timeout for API requests in seconds
            transport: Optional httpx transport, used to stub the server
        """
        super().__init__(model_name, temperature)

        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport

    async def _call_llm(self, messages: List[Message], model: str) -> Union[str, LLMError]:
        payload = ChatCompletionRequest(
            model=model,
            messages=messages,
            temperature=self.temperature
        ).model_dump()

        logger.info(f"Querying LLM at {self.api_url} with model {model}")
        logger.info(f"Messages: {json.dumps(payload['messages'], indent=2)}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers={"Content-Type": "application/json"}
                )
                response.raise_for_status()
                result = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error querying LLM: {str(e)}")
            logger.error(f"LLM Response Status: {e.response.status_code}")
            logger.error(f"LLM Response Data: {e.response.text}")
            return LLMError(
                message=str(e),
                status_code=e.response.status_code,
                body=e.response.text
            )
        except httpx.HTTPError as e:
            logger.error(f"Transport error querying LLM: {str(e) or type(e).__name__}")
            return LLMError(message=str(e) or type(e).__name__)
        except ValueError as e:
            logger.error(f"LLM returned a non-JSON body: {str(e)}")
            return LLMError(message="Invalid LLM response format from LM Studio")

        content = self._extract_content(result)
        if content is None:
            logger.error(f"Unexpected LLM response format: {result}")
            return LLMError(message="Invalid LLM response format from LM Studio")

        logger.info("Received response from LLM.")
        return content

    @staticmethod
    def _extract_content(result: Any) -> Optional[str]:
        """Return choices[0].message.content, or None if the shape is wrong"""
        if not isinstance(result, dict):
            return None

        choices = result.get("choices")
        if not isinstance(choices, list) or not choices:
            return None

        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        if not isinstance(message, dict):
            return None

        content = message.get("content")
        if not isinstance(content, str):
            return None
        return content
