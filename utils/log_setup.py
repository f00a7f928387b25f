import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] <%(module)s> %(levelname)s:  %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_FILE = "expense_tracker.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3


def resolve_level(level) -> int:
    """Accept a logging constant or a level name such as 'debug'."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Invalid logging level: {level!r}")
    return resolved


def setup_logging(level="INFO", log_dir: Path | None = None) -> logging.Logger:
    """Configure the root logger once: console output plus an optional rotating file."""
    root_logger = logging.getLogger()
    try:
        root_logger.setLevel(resolve_level(level))
    except ValueError:
        root_logger.setLevel(logging.INFO)

    # Prevent adding handlers multiple times
    if root_logger.handlers:
        return root_logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_dir / LOG_FILE,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError:
            root_logger.warning("Could not open log file in %s; logging to console only.", log_dir)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    # matplotlib and urllib3 are chatty at DEBUG
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return root_logger
