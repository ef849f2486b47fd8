import logging
from typing import Union

from uvicorn.logging import DefaultFormatter

FORMAT = "%(levelprefix)s %(asctime)s [%(name)s] %(message)s"


def get_logger(
    name: str = "price_alert", level: Union[int, str] = logging.INFO
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = DefaultFormatter(FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
