"""Logging setup for command-line use.

The library modules only create loggers; handlers are installed here, by
the entrypoint, never on import.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'

ANSI_RESET = '\x1b[0m'
ANSI_COLORS = {
  logging.DEBUG: '\x1b[36m',
  logging.INFO: '\x1b[32m',
  logging.WARNING: '\x1b[33m',
  logging.ERROR: '\x1b[31m',
  logging.CRITICAL: '\x1b[35m',
}


class ColorFormatter(logging.Formatter):
  """Formatter that adds ANSI colors to log levels."""

  def __init__(self, fmt: str, use_color: bool = True) -> None:
    super().__init__(fmt)
    self._use_color = use_color

  def format(self, record: logging.LogRecord) -> str:
    original_levelname = record.levelname
    if self._use_color:
      color = ANSI_COLORS.get(record.levelno)
      if color:
        record.levelname = f'{color}{record.levelname}{ANSI_RESET}'
    try:
      return super().format(record)
    finally:
      record.levelname = original_levelname


def configure_logging(level: str = 'WARNING', stream: Optional[TextIO] = None) -> logging.Logger:
  """Attach one stream handler to the ``ask_services`` logger."""
  stream = stream or sys.stderr
  logger = logging.getLogger('ask_services')
  logger.setLevel(level.upper())

  for handler in list(logger.handlers):
    if getattr(handler, '_ask_services_handler', False):
      logger.removeHandler(handler)

  handler = logging.StreamHandler(stream)
  handler.setFormatter(ColorFormatter(LOG_FORMAT, use_color=stream.isatty()))
  handler._ask_services_handler = True  # type: ignore[attr-defined]
  logger.addHandler(handler)
  logger.propagate = False
  return logger
