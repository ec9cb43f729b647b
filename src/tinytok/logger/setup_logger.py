import os
import sys
import logging
from tinytok.configs.config import AppConfig


# -------------------------- Logger Configuration --------------------------
def setup_logger(cfg: AppConfig, name: str = "tinytok") -> logging.Logger:
    """
    Configure the package logger for an interactive session:
    - Console handler on stdout
    - Optional file handler under cfg.log_dir (append mode, kept across runs)
    - Logs include timestamps, logger name, and severity
    """
    # Create logger
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, cfg.log_level.upper(), logging.INFO))
    logger.propagate = False  # Avoid duplicate logging

    # Clear existing handlers (prevent duplicates on re-setup)
    if logger.handlers:
        logger.handlers.clear()

    # Define log format (timestamp | logger | level | message)
    log_format = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # 1. Console Handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_format)
    logger.addHandler(console_handler)

    # 2. File Handler
    if cfg.log_to_file:
        os.makedirs(cfg.log_dir, exist_ok=True)
        log_file_path = os.path.join(cfg.log_dir, "{}.log".format(name))
        file_handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
        file_handler.setFormatter(log_format)
        logger.addHandler(file_handler)

    # Suppress chatty HTTP client logs during corpus downloads
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)

    return logger
