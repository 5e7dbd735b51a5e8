"""Loguru setup shared by the backend and the CLI.

Modules log through ``logger.bind(component=...)`` so each line carries
the part of the program that emitted it.
"""

from __future__ import annotations

import sys

from loguru import logger

PALETTE = {
    "solver": "green",
    "generator": "blue",
    "gameplay": "magenta",
}

DEFAULT_LEVEL = "WARNING"


def formatter(record) -> str:
    comp = record["extra"].get("component", "")
    colour = PALETTE.get(comp, "white")
    return (
        "{time:HH:mm:ss} | "
        f"<{colour}>{comp:<10}</> | "
        "<level>{message}</level>\n"
    )


def configure(verbose: bool = False) -> None:
    """Replace loguru's default sink with a coloured stderr sink."""
    logger.remove()
    logger.add(
        sys.stderr,
        format=formatter,
        level="DEBUG" if verbose else DEFAULT_LEVEL,
        colorize=True,
    )


def get_logger(component: str):
    return logger.bind(component=component)
