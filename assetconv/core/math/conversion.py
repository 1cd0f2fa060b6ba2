"""
Cross-Asset Conversion — Конверсия между активами в scaled integer арифметике

Модуль вычисляет количество выходного актива по количеству входного и цене:
- BASE_TO_QUOTE: quote = base / price   (сколько токена покупает сумма в фиате)
- QUOTE_TO_BASE: base  = quote * price  (сколько фиата стоит количество токена)

Цена означает "1 единица quote актива стоит price единиц base актива" и
передаётся как decimal-строка с явной точностью price_decimals.

ФОРМУЛЫ (все операнды — int произвольной точности):
    to_quote: numerator   = base_int * 10^(quote_decimals + price_decimals)
              denominator = price_int * 10^base_decimals
    to_base:  numerator   = quote_int * price_int * 10^base_decimals
              denominator = 10^price_decimals * 10^quote_decimals
    result = numerator // denominator

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одного шага в binary float внутри конвертера
2. Единственное округление: финальное целочисленное деление (truncation к нулю)
3. Нулевая/отрицательная цена → InvalidPriceError / DivisionByZeroError,
   никогда не молчаливый ноль
4. Результат >= 0 для валидных неотрицательных входов

КОНТРАКТ ЦЕНЫ:
Float-цена от внешнего price feed перекодируется вызывающей стороной в
строку с фиксированной точностью PRICE_DECIMALS (encode_price) ДО вызова
конвертера. Конвертер float не принимает.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum
from typing import Final, Union

from assetconv.core.errors import (
    DivisionByZeroError,
    InvalidPriceError,
    MalformedAmountError,
    UnrepresentableAmountError,
)
from assetconv.core.math.fixed_point import parse_asset_amount, validate_decimals

# =============================================================================
# CONSTANTS
# =============================================================================

# Точность перекодирования float-цены в decimal-строку (контрактная константа)
PRICE_DECIMALS: Final[int] = 8


# =============================================================================
# ТИПЫ
# =============================================================================


class ConversionDirection(str, Enum):
    """Направление конверсии внутри пары base/quote"""

    BASE_TO_QUOTE = "BASE_TO_QUOTE"
    QUOTE_TO_BASE = "QUOTE_TO_BASE"

    @property
    def reversed(self) -> "ConversionDirection":
        """Обратное направление"""
        if self is ConversionDirection.BASE_TO_QUOTE:
            return ConversionDirection.QUOTE_TO_BASE
        return ConversionDirection.BASE_TO_QUOTE


PriceInput = Union[float, int, Decimal]


# =============================================================================
# PRICE RE-ENCODING
# =============================================================================


def encode_price(price: PriceInput, decimals: int = PRICE_DECIMALS) -> str:
    """
    Перекодирование цены из price feed в decimal-строку фиксированной точности.

    Float кодируется через точное десятичное разложение его двоичного
    значения с округлением до decimals знаков. Decimal квантуется ROUND_HALF_UP.

    Args:
        price: Цена (base за 1 quote), float / int / Decimal
        decimals: Количество знаков (default: PRICE_DECIMALS = 8)

    Returns:
        Строка ровно с decimals дробными знаками ("50000.00000000")

    Raises:
        InvalidPriceError: NaN/Inf, нечисловой тип или цена <= 0 после кодирования
        ValueError: Некорректный decimals

    Examples:
        >>> encode_price(50000)
        '50000.00000000'
        >>> encode_price(0.1)
        '0.10000000'
    """
    validate_decimals(decimals)

    if isinstance(price, bool) or not isinstance(price, (float, int, Decimal)):
        raise InvalidPriceError(f"Price must be a number, got {price!r}")

    if isinstance(price, float):
        if not math.isfinite(price):
            raise InvalidPriceError(f"Price must be finite, got {price}")
        encoded = f"{price:.{decimals}f}"
    else:
        value = Decimal(price)
        if not value.is_finite():
            raise InvalidPriceError(f"Price must be finite, got {price}")
        quantum = Decimal(1).scaleb(-decimals)
        # quantize требует, чтобы все цифры результата помещались в prec контекста
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
            encoded = f"{value.quantize(quantum, rounding=ROUND_HALF_UP):f}"

    if encoded.startswith("-") or parse_asset_amount(encoded, decimals) == 0:
        raise InvalidPriceError(
            f"Price must be positive at {decimals} decimal places, got {price!r}"
        )

    return encoded


def _parse_price(price: str, price_decimals: int) -> int:
    """
    Разбор строки цены в scaled integer.

    Ошибки кодека для цены поднимаются как InvalidPriceError: для вызывающей
    стороны это проблема цены, а не количества.
    """
    try:
        return parse_asset_amount(price, price_decimals)
    except (MalformedAmountError, UnrepresentableAmountError) as exc:
        raise InvalidPriceError(f"Invalid price {price!r}: {exc}") from exc


# =============================================================================
# SCALED INTEGER CONVERSION
# =============================================================================


def scaled_to_quote(
    base_amount: int,
    base_decimals: int,
    price: int,
    price_decimals: int,
    quote_decimals: int,
) -> int:
    """
    base → quote на уже разобранных scaled integers.

    Args:
        base_amount: Количество base актива (scaled, >= 0)
        base_decimals: Точность base актива
        price: Цена (scaled по price_decimals)
        price_decimals: Точность цены
        quote_decimals: Точность quote актива

    Returns:
        Количество quote актива (scaled по quote_decimals)

    Raises:
        DivisionByZeroError: price == 0
        InvalidPriceError: price < 0
        ValueError: base_amount < 0 или некорректная точность
    """
    for decimals in (base_decimals, price_decimals, quote_decimals):
        validate_decimals(decimals)
    if base_amount < 0:
        raise ValueError(f"base_amount must be non-negative, got {base_amount}")
    if price < 0:
        raise InvalidPriceError(f"Price must be positive, got scaled {price}")
    if price == 0:
        raise DivisionByZeroError("Price is zero: cannot divide base amount by price")

    numerator = base_amount * 10 ** (quote_decimals + price_decimals)
    denominator = price * 10**base_decimals

    return numerator // denominator


def scaled_to_base(
    quote_amount: int,
    quote_decimals: int,
    price: int,
    price_decimals: int,
    base_decimals: int,
) -> int:
    """
    quote → base на уже разобранных scaled integers.

    Args:
        quote_amount: Количество quote актива (scaled, >= 0)
        quote_decimals: Точность quote актива
        price: Цена (scaled по price_decimals)
        price_decimals: Точность цены
        base_decimals: Точность base актива

    Returns:
        Количество base актива (scaled по base_decimals)

    Raises:
        InvalidPriceError: price <= 0
        ValueError: quote_amount < 0 или некорректная точность
    """
    for decimals in (quote_decimals, price_decimals, base_decimals):
        validate_decimals(decimals)
    if quote_amount < 0:
        raise ValueError(f"quote_amount must be non-negative, got {quote_amount}")
    if price <= 0:
        raise InvalidPriceError(f"Price must be positive, got scaled {price}")

    numerator = quote_amount * price * 10**base_decimals
    denominator = 10**price_decimals * 10**quote_decimals

    return numerator // denominator


# =============================================================================
# STRING ENTRY POINTS
# =============================================================================


def convert_to_quote_asset(
    base_amount: str,
    base_decimals: int,
    price: str,
    price_decimals: int,
    quote_decimals: int,
) -> int:
    """
    Конверсия base → quote: base_amount / price.

    Example:
        $100 по $50,000 за единицу = 0.002 токена
        >>> convert_to_quote_asset("100", 2, "50000", 8, 8)
        200000

    Raises:
        MalformedAmountError / UnrepresentableAmountError: некорректное количество
        InvalidPriceError / DivisionByZeroError: некорректная цена
    """
    base_int = parse_asset_amount(base_amount, base_decimals)
    price_int = _parse_price(price, price_decimals)
    return scaled_to_quote(base_int, base_decimals, price_int, price_decimals, quote_decimals)


def convert_to_base_asset(
    quote_amount: str,
    quote_decimals: int,
    price: str,
    price_decimals: int,
    base_decimals: int,
) -> int:
    """
    Конверсия quote → base: quote_amount * price.

    Example:
        0.002 токена по $50,000 за единицу = $100
        >>> convert_to_base_asset("0.002", 8, "50000", 8, 2)
        10000

    Raises:
        MalformedAmountError / UnrepresentableAmountError: некорректное количество
        InvalidPriceError: некорректная цена
    """
    quote_int = parse_asset_amount(quote_amount, quote_decimals)
    price_int = _parse_price(price, price_decimals)
    return scaled_to_base(quote_int, quote_decimals, price_int, price_decimals, base_decimals)


def convert_amount(
    amount: str,
    direction: ConversionDirection,
    input_decimals: int,
    price: str,
    price_decimals: int,
    output_decimals: int,
) -> int:
    """
    Конверсия с явным направлением.

    Args:
        amount: Количество входного актива (строка)
        direction: BASE_TO_QUOTE или QUOTE_TO_BASE
        input_decimals: Точность входного актива
        price: Цена (строка, base за 1 quote)
        price_decimals: Точность цены
        output_decimals: Точность выходного актива

    Returns:
        Количество выходного актива (scaled по output_decimals)

    Raises:
        ValueError: Неизвестное направление
    """
    direction = ConversionDirection(direction)

    if direction is ConversionDirection.BASE_TO_QUOTE:
        return convert_to_quote_asset(
            amount, input_decimals, price, price_decimals, output_decimals
        )
    return convert_to_base_asset(
        amount, input_decimals, price, price_decimals, output_decimals
    )
