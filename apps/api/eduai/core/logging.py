from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger("eduai")
    root.setLevel(level.upper())
    if handler not in root.handlers:
        root.addHandler(handler)
