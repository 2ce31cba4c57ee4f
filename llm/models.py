"""
LLM Client Data Models

This module defines the data models used by the LLM clients.
"""
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field


class Message(BaseModel):
    """Represents a message in the conversation with the LLM"""
    role: Literal["system", "user", "assistant"]
    content: str


class ChatCompletionRequest(BaseModel):
    """Body sent to an OpenAI compatible chat completion endpoint"""
    model: str
    messages: List[Message]
    temperature: float = Field(default=0.7)


class LLMReply(BaseModel):
    """Text returned by the LLM for a successful completion"""
    content: str
    model: str


class LLMError(BaseModel):
    """Failure while querying the LLM, with upstream details when known"""
    message: str
    status_code: Optional[int] = None
    body: Optional[str] = None


LLMResult = Union[LLMReply, LLMError]
