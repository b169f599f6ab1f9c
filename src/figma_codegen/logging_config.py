"""Logging configuration for figma-codegen."""

import sys

from loguru import logger


def log_level(*, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the stderr level; ``verbose`` wins over ``quiet``."""
    if verbose:
        return "DEBUG"
    if quiet:
        return "WARNING"
    return "INFO"


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Configure loguru on stderr so stdout stays free for generated source."""
    logger.remove()
    logger.add(
        sys.stderr, level=log_level(verbose=verbose, quiet=quiet), format="{level.icon} {message}"
    )
