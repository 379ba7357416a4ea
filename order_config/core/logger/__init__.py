# Path: order_config/core/logger/__init__.py
"""
order_config Logger Package

IPO-aware logging for the manifest resolver.

Provides separate log streams for:
- INPUT layer (table source, loader, merger)
- PROCESS layer (scoring, matching, resolution)
- OUTPUT layer (table dumps, command line)
"""

from .ipo_logging import (
    IPOFilter,
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
