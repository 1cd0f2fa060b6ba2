"""
Contract Validation Module

Модуль для валидации JSON контрактов assetconv.
"""

from .validators import (
    AssetUnitValidator,
    ContractValidator,
    ConversionOutcomeValidator,
    SchemaLoader,
    validate_asset_unit,
    validate_conversion_outcome,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionOutcomeValidator",
    "AssetUnitValidator",
    # Functions
    "validate_conversion_outcome",
    "validate_asset_unit",
]
