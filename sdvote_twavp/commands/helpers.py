"""Shared command helpers and utilities."""

import sys
from typing import Callable

from rich import print as rprint

from sdvote_twavp.shared.exceptions import (
    ConfigurationException,
    NonRetryableException,
    RetryableException,
)


def handle_command_error(
    error: Exception, show_usage_fn: Callable[[], None] = None
) -> None:
    """
    Standard error handling for commands.

    Args:
        error: The exception that occurred
        show_usage_fn: Optional function to display usage instructions
    """
    if isinstance(error, (ValueError, ConfigurationException)):
        rprint(f"[red]Error:[/red] {str(error)}")
    elif isinstance(error, RetryableException):
        rprint(f"[red]RPC error (may succeed on retry):[/red] {str(error)}")
    elif isinstance(error, NonRetryableException):
        rprint(f"[red]Invalid chain data:[/red] {str(error)}")
    else:
        rprint(f"[red]Unexpected error:[/red] {str(error)}")

    if show_usage_fn:
        show_usage_fn()

    sys.exit(1)
