# Path: order_config/constants.py
"""
System-Wide Constants for order_config

Central repository for the constant values used across the system.
Table column names, the wildcard marker, scoring steps and display
formatting all live here.

Constants are organized by category:
- Table Conventions
- Matchable Order Fields
- Payload Columns
- Data Types
- Resolution Status
- Display Formatting
- Logging Categories
"""

from enum import Enum
from typing import Final


# ==============================================================================
# TABLE CONVENTIONS
# ==============================================================================

# Header token naming the identity column (case-sensitive)
IDENTITY_COLUMN: Final[str] = 'Manifest'

# Normalized form of an empty cell; matches any order value
WILDCARD: Final[str] = '*'

# Cell delimiter of the raw tables
CELL_DELIMITER: Final[str] = ','

# Weight difference between two adjacent header positions
WEIGHT_STEP: Final[int] = 10


# ==============================================================================
# MATCHABLE ORDER FIELDS
# ==============================================================================

class OrderField(str, Enum):
    """
    Order attributes a manifest can match on.

    Declaration order is the canonical order; the weight of a field
    comes from the manifest header, not from this list.
    """
    STRATEGY = 'Strategy'
    AGGRESSION = 'Aggression'
    COUNTRY = 'Country'
    ASSET_TYPE = 'AssetType'
    ACCOUNT = 'Account'
    TRADER_ID = 'TraderId'


MATCHABLE_FIELDS: Final[tuple[str, ...]] = tuple(f.value for f in OrderField)


# ==============================================================================
# PAYLOAD COLUMNS
# ==============================================================================

class PayloadColumns:
    """
    Column names read by the value resolver.

    Never used for matching.
    """
    SECTION: Final[str] = 'ParamSection'
    KEY: Final[str] = 'ParamKey'
    DATA_TYPE: Final[str] = 'DataType'
    VALUE: Final[str] = 'Value'


# ==============================================================================
# DATA TYPES
# ==============================================================================

class DataType(str, Enum):
    """Type tags stored in the DataType column."""
    INT = 'int'
    DECIMAL = 'decimal'
    STRING = 'string'


# ==============================================================================
# RESOLUTION STATUS
# ==============================================================================

class ResolutionStatus(str, Enum):
    """Outcome of resolving one (section, key, type) request."""
    FOUND = 'found'
    NO_MANIFEST = 'no_manifest'
    NOT_DEFINED = 'not_defined'


# ==============================================================================
# DISPLAY FORMATTING
# ==============================================================================

MENU_WIDTH: Final[int] = 60
MENU_SEPARATOR: Final[str] = '-' * MENU_WIDTH
MENU_HEADER: Final[str] = '=' * MENU_WIDTH

# Status indicators (ASCII only)
STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_WARN: Final[str] = '[WARN]'
STATUS_INFO: Final[str] = '[INFO]'


# ==============================================================================
# LOGGING CATEGORIES
# ==============================================================================

class LogCategory(str, Enum):
    """
    IPO logging categories for order_config.
    """
    INPUT = 'input'
    PROCESS = 'process'
    OUTPUT = 'output'


# ==============================================================================
# EXPORTS
# ==============================================================================

__all__ = [
    # Enums
    'OrderField',
    'DataType',
    'ResolutionStatus',
    'LogCategory',

    # Table conventions
    'IDENTITY_COLUMN',
    'WILDCARD',
    'CELL_DELIMITER',
    'WEIGHT_STEP',
    'MATCHABLE_FIELDS',

    # Key classes
    'PayloadColumns',

    # Display
    'MENU_WIDTH',
    'MENU_SEPARATOR',
    'MENU_HEADER',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_WARN',
    'STATUS_INFO',
]
