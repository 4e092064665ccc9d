"""
Lightweight, opt-in logging utilities for the library.

Usage in library code:
    from codedrop._logging import resolve_logger

    def process(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("starting process")  # no-op unless enabled or logger passed
        ...

Library code never prints. Consumers opt in by passing a logger or
setting the enabled flag; importing the package configures nothing.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def _ensure_default_handler(lg: logging.Logger) -> None:
    # Records bubble to the root so pytest's caplog sees them; no handler of our own.
    lg.propagate = True


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger.
    - Else return a NoopLogger that ignores calls.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "codedrop")
        lg.setLevel(level)
        _ensure_default_handler(lg)
        return lg
    return NoopLogger()
