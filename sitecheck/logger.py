import logging
import sys
from datetime import datetime, timezone

from sitecheck.config import LOG_FILE


class SiteCheckFormatter(logging.Formatter):
    """
    Formats records as:
    [ Tue Jan 06 05:32:41 AM UTC 2026 ] : INFO : root : Message
    """
    def format(self, record):
        dt = datetime.fromtimestamp(record.created, timezone.utc)
        timestamp = dt.strftime("%a %b %d %I:%M:%S %p UTC %Y")

        # Either 'root' or the stage that logged it (css, html, build)
        context = getattr(record, "context", "root")

        return f"[ {timestamp} ] : {record.levelname} : {context} : {record.getMessage()}"


def setup_logger(name="sitecheck", log_file=None, level=logging.INFO):
    """Sets up a logger with the project's console format."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers if setup_logger is called multiple times
    if logger.handlers:
        return logger

    # Child loggers propagate to the root 'sitecheck' logger
    if name != "sitecheck":
        logger.propagate = True
        setup_logger("sitecheck", log_file=log_file, level=level)
        return logger

    formatter = SiteCheckFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Only the root 'sitecheck' logger gets a FileHandler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# Global logger instance
logger = setup_logger(log_file=LOG_FILE)
