"""
Console logging setup for the command line.
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: int = logging.DEBUG) -> logging.Logger:
    """
    Configures the root logger to write to stderr.

    Calling it more than once does not add duplicate handlers. File handlers
    and other StreamHandler subclasses do not count as a console handler.

    :param level: Level for the root logger and its console handler.
    :return: The root logger.
    """
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(type(h) is logging.StreamHandler for h in root_logger.handlers):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        console.setLevel(level)
        root_logger.addHandler(console)

    return root_logger
