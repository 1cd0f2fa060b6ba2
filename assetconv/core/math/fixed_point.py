"""
Fixed-Point Codec — Точное преобразование decimal-строка ↔ scaled integer

Модуль обеспечивает точное представление количеств активов целыми числами:
    value = scaled_amount / 10^decimals

- parse_asset_amount: строка → scaled integer (без потери точности)
- format_asset_amount: scaled integer → каноническая строка
- is_representable: проверка представимости без исключений
- digits_to_int / int_to_digits: int ↔ str без лимита на число цифр

ГРАММАТИКА ВВОДА (знак исключён, отрицательных количеств в домене нет):
    amount   := integer [ "." fraction ] | "." fraction
    integer  := DIGIT+
    fraction := DIGIT*

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нарушение грамматики → MalformedAmountError
2. Значимые дробные цифры сверх decimals → UnrepresentableAmountError
   (никогда не отбрасываются молча)
3. Round-trip: parse_asset_amount(format_asset_amount(x, d), d) == x
4. Только int (arbitrary precision), никаких float
"""

import re
from typing import Final

from assetconv.core.errors import MalformedAmountError, UnrepresentableAmountError

# =============================================================================
# CONSTANTS
# =============================================================================

# Десятичный разделитель (единственный допустимый)
DECIMAL_SEPARATOR: Final[str] = "."

# Только ASCII-цифры: \d в Python совпадает и с не-ASCII цифрами Unicode
_AMOUNT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<integer>[0-9]*)(?:\.(?P<fraction>[0-9]*))?"
)

# Размер блока цифр для int ↔ str: CPython ограничивает прямое
# преобразование 4300 цифрами (sys.get_int_max_str_digits)
_DIGIT_CHUNK: Final[int] = 1000
_CHUNK_BASE: Final[int] = 10**_DIGIT_CHUNK


# =============================================================================
# HELPERS
# =============================================================================


def digits_to_int(digits: str) -> int:
    """
    Строка ASCII-цифр → int без ограничения на количество цифр.

    Examples:
        >>> digits_to_int("007")
        7
    """
    value = 0
    for start in range(0, len(digits), _DIGIT_CHUNK):
        chunk = digits[start:start + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_digits(value: int) -> str:
    """
    Неотрицательный int → строка цифр без ограничения на количество цифр.

    Examples:
        >>> int_to_digits(1234)
        '1234'
    """
    if value < _CHUNK_BASE:
        return str(value)
    high, low = divmod(value, _CHUNK_BASE)
    return int_to_digits(high) + str(low).rjust(_DIGIT_CHUNK, "0")


def validate_decimals(decimals: int) -> None:
    """
    Проверка параметра точности актива.

    Raises:
        ValueError: Если decimals не целое неотрицательное число
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValueError(f"decimals must be an integer, got {decimals!r}")
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")


def split_decimal(raw: str) -> tuple[str, str]:
    """
    Разбор строки по грамматике на целую и дробную части.

    Args:
        raw: Строка количества (например, "12.34", "5.", ".5")

    Returns:
        (integer_digits, fraction_digits); ведущие нули целой части
        удаляются, пустая целая часть заменяется на "0"

    Raises:
        MalformedAmountError: Если строка не соответствует грамматике

    Examples:
        >>> split_decimal("12.34")
        ('12', '34')
        >>> split_decimal(".5")
        ('0', '5')
    """
    if not isinstance(raw, str):
        raise MalformedAmountError(f"Invalid amount: {raw!r} is not a string")

    match = _AMOUNT_PATTERN.fullmatch(raw)
    if match is None:
        raise MalformedAmountError(f"Invalid amount: {raw!r}")

    integer = match.group("integer")
    fraction = match.group("fraction") or ""

    # Хотя бы одна цифра: "" и "." не являются числами
    if not integer and not fraction:
        raise MalformedAmountError(f"Invalid amount: {raw!r}")

    return integer.lstrip("0") or "0", fraction


# =============================================================================
# PARSE / FORMAT
# =============================================================================


def parse_asset_amount(raw: str, decimals: int) -> int:
    """
    Конверсия человекочитаемой строки в scaled integer.

    Дробная часть дополняется нулями справа до decimals. Лишние дробные
    цифры допускаются только если все они нули (значение представимо точно).

    Args:
        raw: Строка количества ("12.34")
        decimals: Количество десятичных знаков актива

    Returns:
        Scaled integer (>= 0)

    Raises:
        MalformedAmountError: Нарушение грамматики
        UnrepresentableAmountError: Значимых дробных цифр больше decimals
        ValueError: Некорректный decimals

    Examples:
        >>> parse_asset_amount("12.34", 2)
        1234
        >>> parse_asset_amount("12.34", 18)
        12340000000000000000
        >>> parse_asset_amount("1", 8)
        100000000
    """
    validate_decimals(decimals)
    integer, fraction = split_decimal(raw)

    if len(fraction) > decimals:
        excess = fraction[decimals:]
        if excess.strip("0"):
            raise UnrepresentableAmountError(
                f"Amount {raw!r} has {len(fraction.rstrip('0'))} fractional digits, "
                f"asset allows at most {decimals}"
            )
        fraction = fraction[:decimals]

    try:
        return digits_to_int(integer + fraction.ljust(decimals, "0"))
    except ValueError as exc:
        raise MalformedAmountError(f"Invalid amount: {raw!r}") from exc


def format_asset_amount(amount: int, decimals: int) -> str:
    """
    Каноническое форматирование scaled integer.

    Разделитель вставляется на позиции decimals справа, короткие числа
    дополняются нулями слева. Хвостовые нули дробной части и висячий
    разделитель удаляются.

    Args:
        amount: Scaled integer (>= 0)
        decimals: Количество десятичных знаков актива

    Returns:
        Каноническая строка ("100.5", "0.00001234", "1")

    Raises:
        ValueError: Если amount отрицательный или decimals некорректен

    Examples:
        >>> format_asset_amount(10050, 2)
        '100.5'
        >>> format_asset_amount(1234, 8)
        '0.00001234'
        >>> format_asset_amount(100000000, 8)
        '1'
    """
    validate_decimals(decimals)
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"amount must be an integer, got {amount!r}")
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")

    if decimals == 0:
        return int_to_digits(amount)

    digits = int_to_digits(amount).rjust(decimals + 1, "0")
    integer = digits[:-decimals]
    fraction = digits[-decimals:].rstrip("0")

    if not fraction:
        return integer
    return f"{integer}{DECIMAL_SEPARATOR}{fraction}"


def is_representable(raw: str, decimals: int) -> bool:
    """
    Проверка, что строка разбирается и точно представима с decimals знаками.

    Args:
        raw: Строка количества
        decimals: Количество десятичных знаков актива

    Returns:
        True если parse_asset_amount(raw, decimals) завершится успешно
    """
    try:
        parse_asset_amount(raw, decimals)
    except (MalformedAmountError, UnrepresentableAmountError):
        return False
    return True
