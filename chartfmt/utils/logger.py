import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "CHARTFMT_LOG_LEVEL"


def get_logger(name: str, level: Optional[str] = None):
    """
    Namespaced logger ("chartfmt.<name>") with a single stream handler.

    Level: explicit `level`, else $CHARTFMT_LOG_LEVEL, else INFO.
    Unknown level names fall back to INFO.
    """
    logger = logging.getLogger(f"chartfmt.{name}")
    if logger.handlers:
        return logger

    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    resolved = logging.getLevelName(level_name)
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s - %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
