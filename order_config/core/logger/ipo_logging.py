# Path: order_config/core/logger/ipo_logging.py
"""
IPO-Aware Logging for order_config

Input-Process-Output separated logging for the manifest resolver.

Loggers are named by layer prefix:
- input.*   table source, table loader, table merger
- process.* specificity scoring, manifest matching, value resolution
- output.*  table dumps and the command line front end

When a log directory is configured, each layer also gets its own file
next to a combined full_activity.log.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ...constants import LogCategory


LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
CONSOLE_FORMAT = '[%(levelname)s] %(name)s - %(message)s'

FULL_ACTIVITY_LOG = 'full_activity.log'


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for one layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name == self.layer or record.name.startswith(f'{self.layer}.')


def setup_ipo_logging(
    log_level: str = 'INFO',
    log_dir: Optional[Path] = None,
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for order_config.

    Without a log directory only the console handler is installed.
    With one, creates:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files, or None for console only
        console_output: Also log to stderr

    Example:
        setup_ipo_logging(
            log_level='DEBUG',
            log_dir=Path('/var/log/order_config'),
        )
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        full_handler = logging.FileHandler(log_dir / FULL_ACTIVITY_LOG)
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for category in LogCategory:
            handler = logging.FileHandler(log_dir / f'{category.value}_activity.log')
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            handler.addFilter(IPOFilter(category.value))
            root_logger.addHandler(handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'table_loader', 'table_source')

    Returns:
        Logger configured for INPUT layer
    """
    return logging.getLogger(f'{LogCategory.INPUT.value}.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer (matching engine).

    Args:
        name: Logger name (e.g., 'matcher.manifest_matcher')

    Returns:
        Logger configured for PROCESS layer
    """
    return logging.getLogger(f'{LogCategory.PROCESS.value}.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'table_formatter', 'cli')

    Returns:
        Logger configured for OUTPUT layer
    """
    return logging.getLogger(f'{LogCategory.OUTPUT.value}.{name}')


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
