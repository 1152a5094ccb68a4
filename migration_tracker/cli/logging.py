"""
Logging configuration for the migration tracker CLI.
Provides consistent logging setup across all commands.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

class DebugFormatter(logging.Formatter):
    """Console formatter showing timestamp, level and source."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with timestamp and source."""
        message = f"[{record.created:.3f}] {record.levelname:<7} {record.name}: {record.getMessage()}"
        if record.exc_info and record.levelno >= logging.ERROR:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        # Add color if output is to terminal
        if sys.stderr.isatty():
            color = '\033[0;31m' if record.levelno >= logging.WARNING else '\033[0;36m'
            reset = '\033[0m'
            return f"{color}{message}{reset}"
        return message

def setup_logging(debug: bool = False, log_level: str = 'INFO', log_file: Optional[Path] = None) -> None:
    """Setup logging configuration.

    Args:
        debug: Enable debug logging, overriding ``log_level``
        log_level: Level name used when debug is off
        log_file: Optional file that receives a plain-text copy of the log
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else getattr(logging, log_level.upper(), logging.INFO))

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(DebugFormatter())
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
        root_logger.addHandler(file_handler)

    # Always keep SQLAlchemy logging at WARNING level
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.pool').setLevel(logging.WARNING)

def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    return logging.getLogger(name)
