"""
Core math modules для assetconv

Fixed-point арифметика с гарантией точности: без binary float, только int.
"""

# Input Validation
from assetconv.core.math.input_validation import (
    MAX_INPUT_AMOUNT,
    InputValidationResult,
    ensure_valid_amount_input,
    validate_amount_input,
)

# Fixed-Point Codec
from assetconv.core.math.fixed_point import (
    DECIMAL_SEPARATOR,
    digits_to_int,
    format_asset_amount,
    int_to_digits,
    is_representable,
    parse_asset_amount,
    split_decimal,
    validate_decimals,
)

# Cross-Asset Conversion
from assetconv.core.math.conversion import (
    PRICE_DECIMALS,
    ConversionDirection,
    convert_amount,
    convert_to_base_asset,
    convert_to_quote_asset,
    encode_price,
    scaled_to_base,
    scaled_to_quote,
)

# Display Formatter
from assetconv.core.math.display import (
    DUST_EXPONENT,
    FIAT_DECIMALS,
    SCIENTIFIC_FRACTION_DIGITS,
    format_asset_amount_for_display,
    format_fiat,
    format_scientific,
    is_dust,
)

__all__ = [
    # Input Validation
    "MAX_INPUT_AMOUNT",
    "InputValidationResult",
    "ensure_valid_amount_input",
    "validate_amount_input",
    # Fixed-Point Codec
    "DECIMAL_SEPARATOR",
    "digits_to_int",
    "format_asset_amount",
    "int_to_digits",
    "is_representable",
    "parse_asset_amount",
    "split_decimal",
    "validate_decimals",
    # Cross-Asset Conversion — Constants
    "PRICE_DECIMALS",
    # Cross-Asset Conversion — Types
    "ConversionDirection",
    # Cross-Asset Conversion — Functions
    "convert_amount",
    "convert_to_base_asset",
    "convert_to_quote_asset",
    "encode_price",
    "scaled_to_base",
    "scaled_to_quote",
    # Display Formatter
    "DUST_EXPONENT",
    "FIAT_DECIMALS",
    "SCIENTIFIC_FRACTION_DIGITS",
    "format_asset_amount_for_display",
    "format_fiat",
    "format_scientific",
    "is_dust",
]
