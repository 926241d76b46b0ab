"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging


def setup_logging(verbose: bool = False) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def positive_int(value: str) -> int:
    """Parse a positive integer for argparse arguments.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer >= 1.
    """
    try:
        result = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if result < 1:
        raise argparse.ArgumentTypeError(f"expected a value >= 1, got {result}")
    return result
