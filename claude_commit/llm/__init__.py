"""LLM access for claude-commit.

This package provides the Anthropic Messages API client and the prompt it
is sent.
"""

from claude_commit.exceptions import (
    EmptyResponseError,
    LLMError,
    RemoteError,
    ResponseParseError,
    TransportError,
)
from claude_commit.llm.anthropic_provider import AnthropicProvider
from claude_commit.llm.prompts import build_commit_prompt

__all__ = [
    "AnthropicProvider",
    "LLMError",
    "TransportError",
    "RemoteError",
    "ResponseParseError",
    "EmptyResponseError",
    "build_commit_prompt",
]
