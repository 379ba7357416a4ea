# Path: order_config/__init__.py
"""
order_config - Manifest Configuration Resolver

Resolves typed configuration values for trading orders from a table
of manifests. Each manifest matches order attributes exactly or by
wildcard; when several apply, the most specific one wins.

Example:
    from order_config import ConfigService, Order

    service = ConfigService.from_files('manifest.csv', 'cfgs.csv')
    service.get_int_config(
        Order(strategy='VWAP', aggression='P'),
        'CloseAuction', 'SendTimeOffsetSeconds', 23400,
    )
"""

from .constants import DataType, ResolutionStatus
from .exceptions import LoadError, MalformedRowError
from .process.matcher import (
    ConfigService,
    Order,
    ResolvedValue,
    ScoredManifest,
    Table,
    Tiebreaker,
    TiebreakerType,
)

__version__ = '1.0.0'

__all__ = [
    'ConfigService',
    'Order',
    'ResolvedValue',
    'ScoredManifest',
    'Table',
    'Tiebreaker',
    'TiebreakerType',
    'DataType',
    'ResolutionStatus',
    'LoadError',
    'MalformedRowError',
]
