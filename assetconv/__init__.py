"""
assetconv — Fixed-point конверсия между активами разной точности

Пакет содержит:
- core/      : ошибки, математика fixed-point, доменные модели, контракты
- pipeline/  : безопасная конверсия ввода пользователя (ConversionOutcome)
"""

__version__ = "0.1.0"
