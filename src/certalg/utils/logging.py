import logging
import sys

from ..config import get_settings


def get_logger():
    logger = logging.getLogger("certalg")
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s %(message)s")
        h.setFormatter(fmt)
        logger.addHandler(h)
        logger.setLevel(get_settings().log_level)
    return logger
