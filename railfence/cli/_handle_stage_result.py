"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("text", "json", "yaml")


def _handle_stage_result(
    func: F,
    display_format: str = "text",
    result_printer: Callable[[dict], None] | None = None,
    suppress_output: bool = False,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as text, JSON or YAML)

    Args:
        func: Function that returns StageResult
        display_format: One of DISPLAY_FORMATS
        result_printer: Printer used for stage 4 in text format
        suppress_output: Hide stages 1-3 (errors are still shown)

    Returns:
        Wrapped function that handles display and exits with appropriate code

    Raises:
        ValueError: If display_format is not one of DISPLAY_FORMATS
    """
    if display_format not in DISPLAY_FORMATS:
        raise ValueError(f"Invalid display_format value: {display_format!r}")

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from railfence.cli.display import CLIDisplay

        display = CLIDisplay()

        # Structured formats always print the full output dict
        printer = result_printer if display_format == "text" else None
        _run_single_execution(func, args, kwargs, display, display_format, printer, suppress_output)

    return wrapper  # type: ignore[return-value]
