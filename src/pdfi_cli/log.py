# src/pdfi_cli/log.py

import logging
import sys

from .config import CliConfig

_HANDLER_NAME = "pdfi_cli"


def configure_logging(config: CliConfig) -> None:
    """Attach a stderr handler to the package and pdfminer loggers.

    Safe to call repeatedly: a handler installed by an earlier call is replaced,
    so it always writes to the current ``sys.stderr``.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    levels = {
        "pdfi_cli": logging.DEBUG if config.verbose else logging.WARNING,
        # pdfminer is very chatty at DEBUG
        "pdfminer": logging.INFO if config.verbose else logging.WARNING,
    }
    for name, level in levels.items():
        logger = logging.getLogger(name)
        for existing in list(logger.handlers):
            if existing.get_name() == _HANDLER_NAME:
                logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(level)
        # root handlers would print every record a second time
        logger.propagate = False
