"""Logging helpers for claude-commit.

User-facing messages go through claude_commit.output; the standard logging
module carries diagnostics, which stay hidden unless --verbose is given.
"""

import logging


def configure_logging(verbosity: int) -> None:
    """Configure the root logger based on a verbosity count.

    verbosity == 0 -> WARNING
    verbosity == 1 -> INFO
    verbosity >= 2 -> DEBUG
    """
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
