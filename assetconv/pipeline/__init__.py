"""Pipeline — безопасная конверсия ввода пользователя.

validate → encode price → convert → format → ConversionOutcome
"""

from .conversion_pipeline import ConversionConfig, ConversionPipeline, perform_conversion

__all__ = [
    "ConversionConfig",
    "ConversionPipeline",
    "perform_conversion",
]
