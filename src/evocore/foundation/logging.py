from __future__ import annotations

import logging


def configure_evocore_logging(*, level: int = logging.INFO) -> None:
    """
    Configure a minimal console logger for evocore.

    Notes:
        - This is opt-in (library code must not call logging.basicConfig()).
        - The handler is only attached if neither the root logger nor the "evocore" logger has handlers.
    """
    root = logging.getLogger()
    evocore_logger = logging.getLogger("evocore")

    # If the user already configured logging, don't interfere.
    if root.handlers or evocore_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    evocore_logger.addHandler(handler)
    evocore_logger.setLevel(level)
    evocore_logger.propagate = False


__all__ = ["configure_evocore_logging"]
