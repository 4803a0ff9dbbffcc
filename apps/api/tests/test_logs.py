from __future__ import annotations

import logging

from gantt.logs import setup_logging


def test_setup_logging_installs_single_handler() -> None:
  setup_logging("debug")
  logger = setup_logging("debug")
  assert logger.name == "gantt"
  assert logger.level == logging.DEBUG
  assert len(logger.handlers) == 1
  assert logging.getLogger("gantt.ordering.state").getEffectiveLevel() == logging.DEBUG
