from __future__ import annotations

import logging


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
  logger = logging.getLogger("gantt")
  logger.setLevel(level.upper() if isinstance(level, str) else level)
  logger.handlers.clear()
  handler = logging.StreamHandler()
  handler.setFormatter(
    logging.Formatter(
      fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
      datefmt="%Y-%m-%d %H:%M:%S",
    )
  )
  logger.addHandler(handler)
  logger.propagate = False
  return logger
