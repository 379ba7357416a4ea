# Path: order_config/core/__init__.py
"""
order_config Core Package

Core utilities for the manifest resolver.

Submodules:
    - logger: IPO-aware logging system
"""

from .logger import setup_ipo_logging

__all__ = [
    'setup_ipo_logging',
]
