"""Conversion Pipeline — безопасная конверсия ввода пользователя.

Поток данных (в одну сторону, без состояния между вызовами):
    raw string → validate_amount_input → encode_price → convert_amount
               → format_asset_amount_for_display → ConversionOutcome

Порядок проверок:
1. Пустой ввод → AMOUNT_REQUIRED
2. Ошибка валидатора → код валидатора (NOT_A_NUMBER, NON_POSITIVE_AMOUNT, ...)
3. Перекодирование float-цены в строку с config.price_decimals знаками
4. Конверсия по явному направлению (BASE_TO_QUOTE / QUOTE_TO_BASE)
5. Презентационное форматирование

Ни одно исключение ConversionError не выходит за пределы pipeline:
каждый путь отказа даёт типизированный ConversionOutcome. Единственное
исключение наружу: ValueError для неизвестного direction (ошибка вызывающего
кода).
"""

import logging
from dataclasses import dataclass

from assetconv.core.domain.asset import AssetUnit
from assetconv.core.domain.outcome import ConversionOutcome
from assetconv.core.errors import ConversionError, ConversionErrorCode, InvalidPriceError
from assetconv.core.math.conversion import (
    PRICE_DECIMALS,
    ConversionDirection,
    PriceInput,
    convert_amount,
    encode_price,
)
from assetconv.core.math.display import format_asset_amount_for_display
from assetconv.core.math.input_validation import MAX_INPUT_AMOUNT, validate_amount_input

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConversionConfig:
    """Конфигурация pipeline.

    price_decimals — контрактная точность перекодирования float-цены.
    max_input_amount — верхняя граница ввода (исключительно).
    """

    price_decimals: int = PRICE_DECIMALS
    max_input_amount: int = MAX_INPUT_AMOUNT

    def __post_init__(self) -> None:
        if self.price_decimals < 0:
            raise ValueError(f"price_decimals must be non-negative, got {self.price_decimals}")
        if self.max_input_amount <= 0:
            raise ValueError(f"max_input_amount must be positive, got {self.max_input_amount}")


# =============================================================================
# PIPELINE
# =============================================================================


class ConversionPipeline:
    """Безопасная конверсия ввода пользователя между двумя активами.

    Класс не хранит изменяемого состояния: один экземпляр можно
    использовать из нескольких потоков одновременно.
    """

    def __init__(self, config: ConversionConfig | None = None):
        """Инициализация pipeline.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or ConversionConfig()

    def evaluate(
        self,
        input_value: str,
        input_asset: AssetUnit,
        output_asset: AssetUnit,
        price: PriceInput,
        direction: ConversionDirection,
    ) -> ConversionOutcome:
        """Конверсия ввода пользователя.

        Args:
            input_value: сырая строка из UI
            input_asset: актив ввода
            output_asset: актив результата
            price: цена из price feed (base за 1 quote), float / int / Decimal
            direction: BASE_TO_QUOTE или QUOTE_TO_BASE

        Returns:
            ConversionOutcome (is_valid=False при любой ошибке ввода или цены)

        Raises:
            ValueError: direction не является ConversionDirection и не его
                значением. Это ошибка вызывающего кода, а не пользовательского
                ввода, поэтому она не превращается в ConversionOutcome.
        """
        # 1. Пустой ввод
        if not input_value.strip():
            return ConversionOutcome.failure(ConversionErrorCode.AMOUNT_REQUIRED)

        # 2. Numeric sanity
        validation = validate_amount_input(
            input_value, max_amount=self.config.max_input_amount
        )
        if not validation.is_valid:
            logger.debug(
                "input rejected: %s (%r)", validation.error.value, input_value
            )
            return ConversionOutcome.failure(validation.error, validation.message)

        # 3-5. Цена, конверсия, форматирование
        try:
            price_str = encode_price(price, self.config.price_decimals)
            amount = convert_amount(
                input_value.strip(),
                direction,
                input_asset.decimals,
                price_str,
                self.config.price_decimals,
                output_asset.decimals,
            )
        except InvalidPriceError as exc:
            logger.warning(
                "price rejected for %s -> %s: %s",
                input_asset.symbol,
                output_asset.symbol,
                exc,
            )
            return ConversionOutcome.failure(exc.code, exc.user_message)
        except ConversionError as exc:
            logger.debug("conversion rejected: %s (%s)", exc.code.value, exc)
            return ConversionOutcome.failure(exc.code, exc.user_message)

        formatted = format_asset_amount_for_display(amount, output_asset.decimals)
        logger.debug(
            "converted %s %s -> %s %s (%s)",
            input_value.strip(),
            input_asset.symbol,
            formatted,
            output_asset.symbol,
            ConversionDirection(direction).value,
        )
        return ConversionOutcome.success(amount, formatted)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def perform_conversion(
    input_value: str,
    input_asset: AssetUnit,
    output_asset: AssetUnit,
    price: PriceInput,
    direction: ConversionDirection,
    config: ConversionConfig | None = None,
) -> ConversionOutcome:
    """Безопасная конверсия с конфигурацией по умолчанию.

    Examples:
        >>> from assetconv.core.domain import ASSETS
        >>> outcome = perform_conversion(
        ...     "100", ASSETS["USD"], ASSETS["WBTC"], 50000.0,
        ...     ConversionDirection.BASE_TO_QUOTE,
        ... )
        >>> outcome.amount, outcome.formatted
        (200000, '0.002')
    """
    return ConversionPipeline(config).evaluate(
        input_value, input_asset, output_asset, price, direction
    )
