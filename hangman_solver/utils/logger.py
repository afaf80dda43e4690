"""Logging utilities for the hangman solver."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure root logging on stderr.

    Stdout carries the interactive rounds, so diagnostics stay on stderr
    and default to warnings only. Pass ``logging.DEBUG`` to trace the
    candidate counts and rankings of every round.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "hangman_solver")
