"""Shared logging setup for the reconciliation runner."""

from __future__ import annotations

import logging


def configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with a terse CLI-friendly format.

    ``level`` accepts a ``logging`` constant or its name (``"DEBUG"``). Pass
    ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=level.upper() if isinstance(level, str) else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
