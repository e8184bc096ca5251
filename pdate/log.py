"""Logging helpers for pdate entry points."""

import logging

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with a terse format.

    Library modules never call this; they only use ``logging.getLogger(__name__)``.
    Pass ``force=True`` to reconfigure during tests or from another entry point.
    """

    logging.basicConfig(
        level=level,
        format=DEFAULT_FORMAT,
        datefmt=DEFAULT_DATEFMT,
        force=force,
    )
