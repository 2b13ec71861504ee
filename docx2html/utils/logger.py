"""
Handles configuration of logging for the application process.
"""
import logging
import sys
import os
from pathlib import Path
from datetime import datetime

# Define a consistent log directory
LOG_DIR = Path("./logs")
MAX_LOG_FILES = 20
LOGGER_NAME = "docx2html"
CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"
FILE_LOG_FORMAT = (
    "%(asctime)s [%(thread)d] %(levelname)s - [%(module)s:%(lineno)d] - %(message)s"
)


def _rotate_logs(log_dir: Path, keep: int):
    """Removes the oldest log files so that at most `keep` remain."""
    logs = sorted(
        [p for p in log_dir.glob("docx2html_*.log") if p.is_file()],
        key=os.path.getmtime,
    )
    files_to_remove = len(logs) - keep
    if files_to_remove > 0:
        for log_file in logs[:files_to_remove]:
            try:
                log_file.unlink()
            except OSError:
                pass  # file may be locked by another instance


def setup_main_logger(console_level=logging.ERROR, log_dir: Path = LOG_DIR) -> logging.Logger:
    """
    Configures the application logger.

    Console output goes to stdout at the specified level,
    file output goes to a new, unique log file at DEBUG level.
    Old log files are rotated out.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)  # Capture all levels

    # Avoid adding duplicate handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    # --- Console Handler ---
    try:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
        logger.addHandler(console_handler)
    except Exception as e:
        # stdout may be missing in windowed builds
        print(f"Warning: Could not set up console logger: {e}")

    # --- File Handler (Rotation and New File) ---
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        _rotate_logs(log_dir, MAX_LOG_FILES - 1)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        new_log_path = log_dir / f"docx2html_{timestamp}.log"

        file_handler = logging.FileHandler(new_log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        file_formatter = logging.Formatter(FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        logger.info(
            "Main logger initialized. Console level: %s, File level: DEBUG. Logging to: %s",
            logging.getLevelName(console_level),
            new_log_path,
        )
    except Exception:
        logger.error("CRITICAL: Failed to set up file logging.", exc_info=True)

    return logger
