# src/xyzchem/utils/logging_config.py

import logging


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Set up logging for command-line use.

    Replaces any handler installed by an earlier call so repeated calls
    write to the current stderr.
    """
    logger = logging.getLogger("xyzchem")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    return logger
