"""CLI error handling utilities with styled output.

All errors use a red "Error:" prefix for visual consistency and exit with
code 1.
"""

import logging
from typing import NoReturn

import click

from dingocli.cli.output import user_output
from dingocli.core.component.errors import ComponentError

logger = logging.getLogger(__name__)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def fail(error_message: str) -> NoReturn:
        """Output styled error and exit.

        Raises:
            SystemExit: Always (with exit code 1)
        """
        user_output(click.style("Error: ", fg="red") + error_message)
        raise SystemExit(1)

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            Ensure.fail(error_message)

    @staticmethod
    def component_error(error: ComponentError) -> NoReturn:
        """Report a component failure raised by the core and exit."""
        logger.debug("Exception caught: %s: %s", type(error).__name__, str(error))
        logger.debug("Exception details:", exc_info=True)
        Ensure.fail(str(error))
