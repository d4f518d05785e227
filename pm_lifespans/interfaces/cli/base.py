"""Shared helpers for CLI commands."""

import functools
import sys

from collections.abc import Callable
from typing import Any

import click

from pydantic import ValidationError

from pm_lifespans.common.logging import get_logger
from pm_lifespans.domain.exceptions import LifespanAnalysisError


logger = get_logger(__name__)


def with_error_handling(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn pipeline and configuration errors into a one-line message and exit 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except LifespanAnalysisError as e:
            logger.debug("command failed", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        except ValidationError as e:
            click.echo(f"Error: invalid configuration: {e}", err=True)
            sys.exit(1)

    return wrapper
