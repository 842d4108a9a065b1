# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

def setup_logger(log_dir="data/logs"):
    """
    Configure the "cafe" logger for the cart manager.

    - Daily rotating log file (cafe.log, 7 days kept)
    - Console + file output
    - Library modules log through "cafe.<area>" children and
      never add handlers themselves; only main() calls this.
    """

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "cafe.log"

    logger = logging.getLogger("cafe")
    logger.setLevel(logging.INFO)

    # calling setup_logger() twice must not double every line
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    # Console only shows problems, the menu prints its own messages
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("Logger initialized (daily rotation enabled)")
    return logger
