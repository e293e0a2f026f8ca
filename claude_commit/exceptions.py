"""Exception classes for claude-commit.

Every error raised by the package derives from ClaudeCommitError:
- ValidationError: Required input is missing
- NotConfiguredError: No usable configuration has been saved
- ParseError: Structured text could not be parsed (config or API response)
- ConfigWriteError: The configuration file could not be written
- LLMError: Base exception for remote API failures
- TransportError: The API could not be reached
- RemoteError: The API answered with a non-success status
- EmptyResponseError: The API answered without any content
- FlagParseError: Command-line arguments could not be parsed
- UnknownCommandError: The command-line verb is not known

Git errors live in claude_commit.git.exceptions.
"""


class ClaudeCommitError(Exception):
    """Base exception for all claude-commit errors."""

    pass


class ValidationError(ClaudeCommitError):
    """Raised when required input is missing."""

    pass


class NotConfiguredError(ClaudeCommitError):
    """Raised when no configuration can be loaded."""

    pass


class ParseError(ClaudeCommitError):
    """Raised when structured text is malformed."""

    pass


class ConfigParseError(ParseError):
    """Raised when the configuration file cannot be parsed."""

    pass


class ConfigWriteError(ClaudeCommitError):
    """Raised when the configuration file cannot be written."""

    pass


class LLMError(ClaudeCommitError):
    """Base exception for LLM API errors."""

    pass


class TransportError(LLMError):
    """Raised when the API request cannot be completed."""

    pass


class RemoteError(LLMError):
    """Raised when the API returns a non-success status code."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error (status {status_code}): {body}")


class ResponseParseError(LLMError, ParseError):
    """Raised when the API response body cannot be parsed."""

    pass


class EmptyResponseError(LLMError):
    """Raised when the API response has no content."""

    pass


class FlagParseError(ClaudeCommitError):
    """Raised when command-line arguments are malformed."""

    pass


class UnknownCommandError(FlagParseError):
    """Raised when the command-line verb is not recognised."""

    pass
