import logging
import os

# SHOCKTUBE_LOG_LEVEL=DEBUG also lists every species missing from the mechanism
LOG_LEVEL = getattr(logging, os.getenv("SHOCKTUBE_LOG_LEVEL", "INFO").upper(), logging.INFO)


def get_logger(name):
    """Named logger at LOG_LEVEL. Handlers are left to cli.main."""
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    return logger
