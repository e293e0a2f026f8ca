"""Tests for claude_commit.llm.prompts module."""

from claude_commit.config import COMMIT_TYPES
from claude_commit.llm.prompts import build_commit_prompt, format_commit_types


class TestBuildCommitPrompt:
    """Tests for build_commit_prompt."""

    def test_contains_instructions(self):
        """Test the prompt carries format, style rules, files and diff."""
        files = "main.py\ntest_main.py"
        diff = "diff --git a/main.py b/main.py"

        prompt = build_commit_prompt(files, diff)

        for element in (
            "conventional commit message",
            "<type>: <description>",
            "feat:",
            "fix:",
            "docs:",
            "imperative mood",
            "lowercase",
            "period",
            "Maximum 50 characters",
            files,
            diff,
        ):
            assert element in prompt

    def test_diff_is_last(self):
        """Test the diff is embedded verbatim at the end."""
        diff = "diff --git a/x b/x\n+line\n"

        assert build_commit_prompt("x", diff).endswith(diff)


class TestFormatCommitTypes:
    """Tests for format_commit_types."""

    def test_one_line_per_type(self):
        """Test every commit type gets its own line."""
        lines = format_commit_types().splitlines()

        assert len(lines) == len(COMMIT_TYPES)
        assert lines[0] == f"- feat: {COMMIT_TYPES['feat']}"
