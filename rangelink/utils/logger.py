import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..api.config.get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure the rotating ``rangelink.log`` file handler.

    Args:
        home: RangeLink home directory. If None, the same directory that holds
            ``config.json`` (see ``get_home_dir``).
        level: Level name for the ``rangelink`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    home = home or get_home_dir()
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "rangelink.log"

    root_logger = logging.getLogger("rangelink")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
