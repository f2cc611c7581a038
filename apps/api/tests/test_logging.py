from __future__ import annotations

import logging

from eduai.core.logging import configure_logging, handler


def test_configure_logging_is_idempotent():
    logger = logging.getLogger("eduai")

    configure_logging("debug")
    configure_logging("warning")

    assert logger.handlers.count(handler) == 1
    assert logger.level == logging.WARNING
