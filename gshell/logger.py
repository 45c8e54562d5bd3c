import logging
import os

from rich.logging import RichHandler
from rich.console import Console
from logging.handlers import RotatingFileHandler

from .config import Config

LOG_FILE_NAME = "gshell.log"


def setup_logging(config: Config):
    """Set up logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO if config.verbose else logging.WARNING)

    # Console handler (with Rich)
    console = Console(stderr=True)
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True
    )
    rich_handler.setLevel(logging.INFO)
    root_logger.addHandler(rich_handler)

    # File handler (Rotating)
    try:
        os.makedirs(config.log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(config.log_dir, LOG_FILE_NAME),
            maxBytes=10*1024*1024, backupCount=5  # 10 MB per file, 5 backups
        )
    except OSError as e:
        logging.getLogger(__name__).warning(f"File logging disabled, cannot write to {config.log_dir}: {e}")
    else:
        file_handler.setLevel(logging.INFO)
        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    # The Google client libraries are chatty at INFO
    for name in ("urllib3", "google", "grpc"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logger initialized. Logs will be stored in {config.log_dir}")
