"""
Domain models and value objects.

Contains fundamental domain entities like AssetUnit, AssetPair, ConversionOutcome.
"""

from assetconv.core.domain.asset import (
    ASSET_PAIRS,
    ASSETS,
    AssetPair,
    AssetUnit,
    get_asset,
    get_asset_pair,
)
from assetconv.core.domain.outcome import (
    ConversionOutcome,
    PreciseConversionResult,
    create_precise_conversion_result,
)

__all__ = [
    # Asset module
    "ASSETS",
    "ASSET_PAIRS",
    "AssetUnit",
    "AssetPair",
    "get_asset",
    "get_asset_pair",
    # Outcome module
    "ConversionOutcome",
    "PreciseConversionResult",
    "create_precise_conversion_result",
]
