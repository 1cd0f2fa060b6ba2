"""
Display Formatter — Презентационное форматирование scaled integer

Правила зависят от класса актива, определяемого по decimals:

FIAT (decimals == 2):
    Разделители тысяч и ровно два дробных знака: 123456789 → "1,234,567.89"

TOKEN (decimals != 2):
    - 0 → "0"
    - 0 < value < 10^-8 (dust) → научная нотация, 2 дробных знака мантиссы
    - иначе → полная точность без хвостовых нулей дробной части

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Фиат всегда показывает центы
2. Положительный dust никогда не отображается как "0"
3. Форматирование точное (int), float не участвует
"""

from typing import Final

from assetconv.core.math.fixed_point import (
    format_asset_amount,
    int_to_digits,
    validate_decimals,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Точность фиатных активов (USD, EUR): класс актива определяется по ней
FIAT_DECIMALS: Final[int] = 2

# Значения меньше 10^-DUST_EXPONENT показываются в научной нотации
DUST_EXPONENT: Final[int] = 8

# Количество дробных знаков мантиссы в научной нотации
SCIENTIFIC_FRACTION_DIGITS: Final[int] = 2


# =============================================================================
# HELPERS
# =============================================================================


def is_dust(amount: int, decimals: int) -> bool:
    """
    Проверка, что количество положительно, но меньше 10^-8 единицы.

    amount / 10^decimals < 10^-8  ⇔  amount * 10^8 < 10^decimals
    """
    return 0 < amount and amount * 10**DUST_EXPONENT < 10**decimals


def format_scientific(amount: int, decimals: int) -> str:
    """
    Научная нотация для положительного scaled integer.

    Мантисса округляется half-up до SCIENTIFIC_FRACTION_DIGITS знаков,
    экспонента со знаком и без дополнения нулями.

    Args:
        amount: Scaled integer (> 0)
        decimals: Точность актива

    Returns:
        Строка вида "1.23e-15"

    Examples:
        >>> format_scientific(1234, 18)
        '1.23e-15'
        >>> format_scientific(9999, 18)
        '1.00e-14'
    """
    if amount <= 0:
        raise ValueError(f"amount must be positive, got {amount}")

    significant = SCIENTIFIC_FRACTION_DIGITS + 1
    digits = int_to_digits(amount)
    exponent = len(digits) - 1 - decimals

    mantissa = int(digits[:significant].ljust(significant, "0"))
    rest = digits[significant:]
    if rest and rest[0] >= "5":
        mantissa += 1

    # Перенос при округлении: 9.995 → 10.00 → 1.00e+1
    if mantissa == 10**significant:
        mantissa //= 10
        exponent += 1

    scale = 10**SCIENTIFIC_FRACTION_DIGITS
    head, tail = divmod(mantissa, scale)
    return f"{head}.{tail:0{SCIENTIFIC_FRACTION_DIGITS}d}e{exponent:+d}"


def format_fiat(amount: int, decimals: int = FIAT_DECIMALS) -> str:
    """Фиатное форматирование: разделители тысяч и ровно decimals знаков"""
    scale = 10**decimals
    integer, fraction = divmod(amount, scale)

    # Группы по три цифры через divmod: f"{integer:,}" упирается в лимит цифр
    groups = []
    while integer >= 1000:
        integer, group = divmod(integer, 1000)
        groups.append(f"{group:03d}")
    grouped = ",".join([str(integer), *reversed(groups)])

    if decimals == 0:
        return grouped
    return f"{grouped}.{int_to_digits(fraction).rjust(decimals, '0')}"


# =============================================================================
# DISPLAY
# =============================================================================


def format_asset_amount_for_display(amount: int, decimals: int) -> str:
    """
    Форматирование количества для отображения пользователю.

    Args:
        amount: Scaled integer (>= 0)
        decimals: Точность актива

    Returns:
        Строка для UI

    Raises:
        ValueError: Если amount отрицательный или decimals некорректен

    Examples:
        >>> format_asset_amount_for_display(123456789, 2)
        '1,234,567.89'
        >>> format_asset_amount_for_display(100000000, 8)
        '1'
        >>> format_asset_amount_for_display(1234, 8)
        '0.00001234'
        >>> format_asset_amount_for_display(1234, 18)
        '1.23e-15'
    """
    validate_decimals(decimals)
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"amount must be an integer, got {amount!r}")
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")

    if decimals == FIAT_DECIMALS:
        return format_fiat(amount, decimals)

    if amount == 0:
        return "0"

    if is_dust(amount, decimals):
        return format_scientific(amount, decimals)

    return format_asset_amount(amount, decimals)
