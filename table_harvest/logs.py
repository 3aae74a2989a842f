import sys

from loguru import logger

CONSOLE_FORMAT = "{message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(log_file=None, verbose=False):
    """
    Progress goes to stdout, errors to stderr. With a log file, everything
    down to DEBUG is also written there.
    """
    logger.remove()

    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level="DEBUG" if verbose else "INFO",
        filter=lambda record: record["level"].no < logger.level("ERROR").no,
        colorize=False,
    )
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level="ERROR", colorize=False)

    if log_file:
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level="DEBUG",
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
        )
