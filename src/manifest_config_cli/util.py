from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
LIBRARY_LOGGER = "manifest_config_core"


def configure_stdio() -> None:
    """Make CLI output robust across Windows console encodings.

    Some Windows terminals use a non-UTF8 encoding (e.g., cp1252). Printing
    Unicode glyphs (✓/✗) would raise UnicodeEncodeError, so configure
    stdout/stderr to replace unencodable characters instead of crashing.
    """

    if os.name != "nt":
        return

    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="replace")


def configure_logging(level: str) -> logging.Logger:
    """Route library diagnostics to stderr at the requested level.

    Only the library logger is touched; a handler installed by an earlier call
    is replaced rather than stacked.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_manifest_config_cli", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._manifest_config_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger
