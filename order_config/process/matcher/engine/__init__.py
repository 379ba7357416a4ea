# Path: order_config/process/matcher/engine/__init__.py
"""
Matching Engine Components

- ManifestMatcher: Finds and scores applicable manifests
- ValueResolver: Picks the value from the best manifest defining a request
- ConfigService: Public entry point with typed accessors
"""

from .manifest_matcher import ManifestMatcher, matchable_headers
from .value_resolver import ValueResolver
from .config_service import ConfigService, ManifestSnapshot, build_snapshot

__all__ = [
    'ManifestMatcher',
    'matchable_headers',
    'ValueResolver',
    'ConfigService',
    'ManifestSnapshot',
    'build_snapshot',
]
