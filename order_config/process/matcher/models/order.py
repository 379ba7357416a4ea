# Path: order_config/process/matcher/models/order.py
"""
Order Model

The attributes of a trading order that manifests match against.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from ....constants import OrderField


# Upper-cased column name -> dataclass attribute
_FIELD_ATTRIBUTES: dict[str, str] = {
    f.value.upper(): f.name.lower() for f in OrderField
}


def _field_key(name: str) -> str:
    """Fold 'AssetType', 'asset_type' and 'ASSETTYPE' onto one key."""
    return name.replace('_', '').upper()


@dataclass(frozen=True)
class Order:
    """
    Immutable order descriptor.

    Every attribute may be None or empty; both compare as the empty
    string. Comparison against manifests is case-insensitive.

    Attributes:
        strategy: Execution strategy (e.g., VWAP, TWAP)
        aggression: Aggression level (e.g., P, M, A)
        country: Country of the listing
        asset_type: Asset class
        account: Client account identifier
        trader_id: Trader identifier
    """
    strategy: Optional[str] = None
    aggression: Optional[str] = None
    country: Optional[str] = None
    asset_type: Optional[str] = None
    account: Optional[str] = None
    trader_id: Optional[str] = None

    @staticmethod
    def is_order_field(name: str) -> bool:
        """Check if a column name designates an order attribute."""
        return _field_key(name) in _FIELD_ATTRIBUTES

    def value_for(self, name: str) -> str:
        """
        Get the normalized value of an attribute by column name.

        Args:
            name: Column name, any case (e.g., 'AssetType')

        Returns:
            Upper-cased value, or '' when absent

        Raises:
            KeyError: If name is not an order attribute
        """
        raw = getattr(self, _FIELD_ATTRIBUTES[_field_key(name)])
        return raw.upper() if raw else ''

    @classmethod
    def from_mapping(cls, values: Mapping[str, Optional[str]]) -> 'Order':
        """
        Build an order from a mapping keyed by column or attribute names.

        Args:
            values: e.g. {'Strategy': 'VWAP', 'asset_type': 'EQ'}

        Returns:
            Order instance

        Raises:
            ValueError: If a key is not an order attribute
        """
        kwargs = {}
        for name, value in values.items():
            attribute = _FIELD_ATTRIBUTES.get(_field_key(name))
            if attribute is None:
                raise ValueError(f"Unknown order attribute: {name}")
            kwargs[attribute] = value
        return cls(**kwargs)


__all__ = ['Order']
