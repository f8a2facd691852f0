# Logging setup

import logging

_HANDLER_NAME = "_merchant_stream_handler"
LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(message)s"


def get_logger(name="merchant", level=logging.WARNING):
    """
    Returns the named logger with a single console handler attached.
    Calling it again only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in logger.handlers:
        if getattr(handler, _HANDLER_NAME, False):
            handler.setLevel(level)
            return logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    setattr(handler, _HANDLER_NAME, True)
    logger.addHandler(handler)
    return logger
