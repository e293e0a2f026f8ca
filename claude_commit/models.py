"""Pydantic models for the user configuration and the Messages API.

Contains:
- Config: Persisted API key and model selection
- Message, MessagesRequest: Request body for the Messages API
- ContentBlock, MessagesResponse: The parts of the response body we read
"""

from typing import Optional

from pydantic import BaseModel

from claude_commit.config import DEFAULT_MODEL, MAX_TOKENS


class Config(BaseModel):
    """User configuration stored in ~/.claude-commit/config.yaml."""

    api_key: str = ""
    model: str = DEFAULT_MODEL


class Message(BaseModel):
    """A single chat message."""

    role: str = "user"
    content: str


class MessagesRequest(BaseModel):
    """Request body for POST /v1/messages."""

    model: str
    messages: list[Message]
    max_tokens: int = MAX_TOKENS


class ContentBlock(BaseModel):
    """One content segment of a Messages API response."""

    type: Optional[str] = None
    text: str = ""


class MessagesResponse(BaseModel):
    """Response body of POST /v1/messages (unknown keys are ignored)."""

    content: list[ContentBlock] = []
