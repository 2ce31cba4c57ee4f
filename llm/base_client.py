"""
Base LLM Client Interface

This module defines the abstract base class for LLM client implementations,
allowing for multiple chat completion backends (LM Studio, Ollama, etc.)
"""
import abc
from typing import List, Optional, Sequence, Union

from llm.models import LLMError, LLMReply, LLMResult, Message

ERROR_PREFIX = "Failed to query LLM"


class BaseLLMClient(abc.ABC):
    """
    Abstract base class for LLM clients.

    Implementations provide `_call_llm` for a specific provider. Callers use
    `query`, which never raises for upstream failures and instead returns an
    `LLMError` value.
    """
    def __init__(self, model: str, temperature: float = 0.7):
        """
        Initialize the base LLM client.

        Args:
            model: The default model identifier to use
            temperature: Controls randomness in response generation
        """
        self.model = model
        self.temperature = temperature

    async def query(
        self,
        messages: Sequence[Union[Message, dict]],
        model: Optional[str] = None
    ) -> LLMResult:
        """
        Send a conversation to the LLM and return its reply.

        Args:
            messages: Ordered conversation, sent exactly as given
            model: Optional model name to override the default

        Returns:
            LLMReply with the assistant text, or LLMError describing the failure
        """
        if not messages:
            return LLMError(message=f"{ERROR_PREFIX}: no messages to send")

        conversation = [
            m if isinstance(m, Message) else Message.model_validate(m)
            for m in messages
        ]
        effective_model = model or self.model

        result = await self._call_llm(conversation, effective_model)
        if isinstance(result, LLMError):
            return LLMError(
                message=f"{ERROR_PREFIX}: {result.message}",
                status_code=result.status_code,
                body=result.body,
            )
        return LLMReply(content=result, model=effective_model)

    @abc.abstractmethod
    async def _call_llm(self, messages: List[Message], model: str) -> Union[str, LLMError]:
        """
        Call the LLM to generate a response. Must be implemented by subclasses.

        Args:
            messages: List of messages representing the conversation
            model: Model identifier to request

        Returns:
            Generated text, or an LLMError without the common prefix
        """
        pass
