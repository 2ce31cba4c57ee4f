"""
LLM client package for OpenAI compatible chat completion servers
"""
from llm.base_client import BaseLLMClient
from llm.llm_client import LLMClient
from llm.local_llm import LMStudioClient
from llm.models import LLMError, LLMReply, LLMResult, Message

__all__ = [
    "BaseLLMClient",
    "LLMClient",
    "LLMError",
    "LLMReply",
    "LLMResult",
    "LMStudioClient",
    "Message",
]
