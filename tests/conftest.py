"""Shared test fixtures and configuration."""

import json
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from claude_commit.app import Application
from claude_commit.global_config import ConfigStore
from claude_commit.llm import AnthropicProvider
from claude_commit.output import OutputKind, Printer


class RecordingPrinter(Printer):
    """Printer that keeps every rendered message for assertions."""

    def __init__(self):
        self.messages: list[tuple[OutputKind, str]] = []

    def render(self, kind: OutputKind, text: str) -> None:
        self.messages.append((kind, text))

    def texts(self, kind: OutputKind | None = None) -> list[str]:
        return [text for k, text in self.messages if kind is None or k == kind]

    def contains(self, fragment: str) -> bool:
        return any(fragment in text for text in self.texts())


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def printer():
    """A printer that records output instead of writing to the terminal."""
    return RecordingPrinter()


@pytest.fixture
def config_dir(temp_dir):
    """Per-user configuration directory inside the temp dir."""
    return temp_dir / ".claude-commit"


@pytest.fixture
def config_store(printer, config_dir):
    """ConfigStore writing to the temp config directory."""
    return ConfigStore(printer, config_dir=config_dir)


@pytest.fixture
def saved_config(config_dir):
    """Write a valid config file and return its directory."""
    config_dir.mkdir(parents=True)
    (config_dir / "config.yaml").write_text("api_key: test-key\nmodel: test-model\n")
    return config_dir


@pytest.fixture
def make_response():
    """Factory for fake HTTP responses."""

    def _make(status_code: int = 200, body="") -> MagicMock:
        if not isinstance(body, str):
            body = json.dumps(body)
        response = MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.text = body
        response.content = body.encode()
        return response

    return _make


@pytest.fixture
def session():
    """Fake HTTP session; set session.post.return_value or side_effect."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def provider(session, printer):
    """AnthropicProvider using the fake session."""
    return AnthropicProvider(session, printer)


@pytest.fixture
def git_client():
    """Fake git collaborator with one staged file."""
    git = MagicMock()
    git.get_staged_diff.return_value = "diff --git a/file.py b/file.py\n+print('hi')\n"
    git.get_staged_files.return_value = "file.py\n"
    return git


@pytest.fixture
def application(printer, config_store, provider, git_client):
    """Application wired with test doubles."""
    return Application.create(
        printer=printer,
        config_store=config_store,
        provider=provider,
        git=git_client,
    )
