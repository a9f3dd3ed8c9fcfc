# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import os

LOGGER_NAME = "credauth"


def setup_logger() -> logging.Logger:
    """Configure and return the package logger (idempotent)."""
    logger = logging.getLogger(LOGGER_NAME)
    level = os.getenv("AUTH_LOG_LEVEL", "INFO").strip().upper()
    logger.setLevel(getattr(logging, level, logging.INFO))

    # Prevent adding multiple handlers if called more than once
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)

    return logger
