"""
Logging setup for the fleet API.

What the service logs:

* record writes (create, update, delete) at INFO from
  ``services.record_service``, naming the entity label and id;
* filters that cannot match and dashboard sizes at DEBUG;
* internal errors at ERROR and unexpected faults with their traceback
  via ``logger.exception`` from ``core.errors``.

``setup_logging`` is driven by ``LOG_LEVEL`` and ``LOG_FILE`` and only
touches the root logger the first time it finds it bare, so building
several applications in one process (the test suite does) keeps a
single set of handlers.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    ``level`` is a level name in any case; unknown names mean INFO.
    The directory of ``logfile`` is created when missing.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
