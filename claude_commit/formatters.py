"""Display formatting for secrets and the suggested commit command."""

MASK = "****"
FULL_MASK = "********"

# Characters that keep their special meaning inside a double-quoted shell string
_SHELL_ESCAPES = str.maketrans({
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
    "`": "\\`",
})


def mask_api_key(api_key: str) -> str:
    """Mask most of an API key for display.

    Keys of 8 characters or fewer are hidden entirely; longer keys keep
    their first and last 4 characters.

    Example:
        >>> mask_api_key("sk-test1234")
        'sk-t****1234'
    """
    if len(api_key) <= 8:
        return FULL_MASK
    return api_key[:4] + MASK + api_key[-4:]


def sanitize_suggestion(suggestion: str) -> str:
    """Reduce a model suggestion to a single trimmed line."""
    for line in suggestion.strip().splitlines():
        if line.strip():
            return line.strip()
    return ""


def format_commit_command(suggestion: str) -> str:
    """Embed a commit message suggestion into a `git commit -m` command.

    Args:
        suggestion: The commit message suggested by the model.

    Returns:
        The command as a string, quoted so it can be pasted into a shell.
    """
    message = sanitize_suggestion(suggestion).translate(_SHELL_ESCAPES)
    return f'git commit -m "{message}"'
