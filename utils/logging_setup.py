"""loguru sinks for test runs."""

import sys
from datetime import datetime
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "{extra[trial]} | <cyan>{name}</cyan> - <level>{message}</level>"
)


def get_log_folder_path(logs_root: Path, now: datetime | None = None) -> Path:
    """Create and return the run folder ``YYYY/YYYY MM/YYYY MM DD/YYYY-MM-DD HH MM``."""
    now = now or datetime.now()
    log_path = (
        Path(logs_root)
        / now.strftime("%Y")
        / now.strftime("%Y %m")
        / now.strftime("%Y %m %d")
        / now.strftime("%Y-%m-%d %H %M")
    )
    log_path.mkdir(parents=True, exist_ok=True)
    return log_path


def setup_logging(log_folder_path: Path, console_level: str = "INFO") -> None:
    """Configure loguru with a console sink plus debug and info file sinks.

    Args:
        log_folder_path: Directory where log files will be saved
        console_level: Minimum level echoed to stderr
    """
    timestamp = datetime.now().strftime("%Y-%m-%d %H %M")
    debug_path = Path(log_folder_path) / f"debug_{timestamp}.log"
    info_path = Path(log_folder_path) / f"info_{timestamp}.log"

    logger.remove()
    logger.configure(extra={"trial": "-"})
    logger.add(sys.stderr, level=console_level, format=CONSOLE_FORMAT)
    logger.add(
        debug_path,
        rotation="5 MB",
        level="DEBUG",
        backtrace=True,
        diagnose=True,
        retention="3 days",
        compression="zip",
    )
    logger.add(
        info_path,
        rotation="5 MB",
        level="INFO",
        retention="3 days",
        compression="zip",
    )
