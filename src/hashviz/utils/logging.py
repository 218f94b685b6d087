"""Logger factory for experiments, benchmarks and scripts."""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: Union[int, str] = logging.INFO,
) -> logging.Logger:
    """Get a configured logger.

    Attaches a stream handler (and a file handler when log_file is given)
    the first time a name is requested; later calls reuse the handlers.

    Args:
        name: Logger name
        log_file: Optional path of a log file to append to
        level: Logging level (int or name such as "DEBUG")

    Returns:
        logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_file is not None:
        log_path = Path(log_file).resolve()
        has_file = any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path
            for h in logger.handlers
        )
        if not has_file:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
