"""
Structured logging for the onboarding service
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(service: str, log_level: str = 'INFO') -> logging.Logger:
    """
    Configure the root logger with a single stdout handler

    Args:
        service: Service name used for the returned logger
        log_level: Level name (e.g., 'INFO', 'DEBUG')

    Returns:
        Logger named after the service
    """
    root = logging.getLogger()
    root.setLevel(log_level.upper())

    if not any(getattr(h, '_onboarding_handler', False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._onboarding_handler = True
        root.addHandler(handler)

    return logging.getLogger(service)
