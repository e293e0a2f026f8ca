"""Tests for claude_commit.config module."""

from claude_commit.config import (
    ANTHROPIC_API_URL,
    ANTHROPIC_VERSION,
    AVAILABLE_MODELS,
    COMMIT_TYPES,
    DEFAULT_MODEL,
    MAX_TOKENS,
)


class TestModels:
    """Tests for the supported model list."""

    def test_default_model_is_available(self):
        """Test that DEFAULT_MODEL is one of AVAILABLE_MODELS."""
        assert DEFAULT_MODEL in AVAILABLE_MODELS

    def test_available_models(self):
        """Test the supported models in order."""
        assert AVAILABLE_MODELS == [
            "claude-opus-4-0",
            "claude-sonnet-4-0",
            "claude-3-7-sonnet-latest",
            "claude-3-5-sonnet-latest",
            "claude-3-5-haiku-latest",
            "claude-3-opus-latest",
        ]

    def test_models_are_unique(self):
        """Test that no model is listed twice."""
        assert len(set(AVAILABLE_MODELS)) == len(AVAILABLE_MODELS)


class TestApiSettings:
    """Tests for Messages API constants."""

    def test_endpoint(self):
        """Test the Messages API URL."""
        assert ANTHROPIC_API_URL == "https://api.anthropic.com/v1/messages"

    def test_version_header(self):
        """Test the API version."""
        assert ANTHROPIC_VERSION == "2023-06-01"

    def test_max_tokens(self):
        """Test the output token cap."""
        assert MAX_TOKENS == 100


class TestCommitTypes:
    """Tests for COMMIT_TYPES."""

    def test_has_common_types(self):
        """Test that the usual conventional commit types exist."""
        for name in ("feat", "fix", "docs", "refactor", "test", "chore"):
            assert name in COMMIT_TYPES
