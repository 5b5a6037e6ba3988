"""Pydantic models for chat-completion request/response types."""
from __future__ import annotations
import re
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

class ChatMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: Literal["user", "assistant", "system"]
    content: str

class ChatRequest(BaseModel):
    """Body of ``POST /v1/chat/completions``; unknown keys are passed through."""
    model_config = ConfigDict(extra="allow")

    model: str
    messages: list[ChatMessage]
    temperature: float = 0.7
    max_tokens: int = 10
    top_p: float = 1.0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0

class ChoiceMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    content: str | None = None

class Choice(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: ChoiceMessage | None = None

class ChatResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    choices: list[Choice] = Field(default_factory=list)

    def first_content(self) -> str:
        """Content of the first choice, or an empty string when absent."""
        if not self.choices or self.choices[0].message is None:
            return ""
        return self.choices[0].message.content or ""

# Whole words only: "seven" and "eleven" contain "even".
_ODD_WORD = re.compile(r"\bodd\b")
_EVEN_WORD = re.compile(r"\beven\b")

class Parity(str, Enum):
    ODD = "odd"
    EVEN = "even"
    UNKNOWN = "unknown"

def classify_answer(answer: str) -> Parity:
    """
    Map free-text model output to a parity.

    Args:
        answer: Raw reply; compared case-insensitively after trimming.

    Returns:
        ODD or EVEN when exactly one of the words appears as a whole word, else UNKNOWN.
    """
    text = answer.strip().lower()
    has_odd = _ODD_WORD.search(text) is not None
    has_even = _EVEN_WORD.search(text) is not None
    if has_odd and not has_even:
        return Parity.ODD
    if has_even and not has_odd:
        return Parity.EVEN
    return Parity.UNKNOWN
