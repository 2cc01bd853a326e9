# api_errors/utils/logging.py
# Purpose: Namespaced logger factory for api_errors.
# Notes: Applications own handler/format/level configuration. This module must never print.

from __future__ import annotations

import logging


# Stable logger name prefix so applications can tune the library with one logger.
LOGGER_NAMESPACE = "api_errors"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a namespaced logger. Does NOT configure handlers/levels.
    """
    if not name:
        return logging.getLogger(LOGGER_NAMESPACE)

    # __name__ of our own modules is already namespaced ("api_errors.registry").
    if name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(name)

    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
