"""Loguru setup driven by the ``logging.*`` config section.

``logging.level`` sets the stderr threshold. ``logging.file`` adds a
rotating file sink; a bare file name lands in ``paths.log_dir``.
"""

from __future__ import annotations

import os
import sys

from loguru import logger

from bankey.core.config import Config

_CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"


def resolve_log_file(config: Config) -> str | None:
    """Return the log file path, or None when file logging is off."""
    log_file = config.get("logging.file") or ""
    if not log_file:
        return None
    log_file = os.path.expanduser(str(log_file))
    if os.path.dirname(log_file):
        return log_file
    return os.path.join(os.path.expanduser(config.get("paths.log_dir", ".")), log_file)


def setup_logging(config: Config, level: str | None = None) -> str | None:
    """Point loguru at stderr and, if configured, a rotating file.

    Args:
        config: Source of ``logging.level``, ``logging.file``,
            ``logging.rotation`` and ``logging.retention``.
        level: Overrides ``logging.level`` (e.g. from ``--log-level``).

    Returns:
        The file sink path, if one was added.
    """
    level = str(level or config.get("logging.level", "WARNING")).upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT)

    log_file = resolve_log_file(config)
    if log_file:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        logger.add(
            log_file,
            level=level,
            format=_FILE_FORMAT,
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
        )
    return log_file
