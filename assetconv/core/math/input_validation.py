"""
Input Validation — Numeric sanity проверка пользовательского ввода

Проверяет сырую строку до того, как она попадёт в fixed-point pipeline:
- Пустой ввод → valid-but-inactive (нейтральное состояние "ещё ничего не введено")
- Более одного разделителя → INVALID_DECIMAL_FORMAT
- Не число → NOT_A_NUMBER
- Значение <= 0 → NON_POSITIVE_AMOUNT
- Значение >= MAX_INPUT_AMOUNT → AMOUNT_TOO_LARGE

Валидатор НЕ проверяет лимит знаков актива: это задача кодека
(валидатор отвечает за численную разумность, кодек за представимость).

Все сравнения выполняются через decimal.Decimal: float не участвует.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Final, Optional

from assetconv.core.errors import (
    ERROR_MESSAGES,
    ConversionErrorCode,
    InputValidationError,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Верхняя граница ввода: защита от переполнения и патологического UI-ввода
MAX_INPUT_AMOUNT: Final[int] = 10**15

# Числовая грамматика валидатора шире грамматики кодека: знак и экспонента
# допускаются, чтобы "-5" дал NON_POSITIVE_AMOUNT, а не NOT_A_NUMBER
_NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class InputValidationResult:
    """Результат валидации ввода."""

    is_valid: bool
    is_empty: bool
    error: Optional[ConversionErrorCode] = None
    message: Optional[str] = None

    @property
    def is_active(self) -> bool:
        """Ввод валиден и не пуст: можно запускать конверсию"""
        return self.is_valid and not self.is_empty


_EMPTY_RESULT: Final[InputValidationResult] = InputValidationResult(
    is_valid=True, is_empty=True
)
_ACTIVE_RESULT: Final[InputValidationResult] = InputValidationResult(
    is_valid=True, is_empty=False
)


def _rejected(code: ConversionErrorCode) -> InputValidationResult:
    return InputValidationResult(
        is_valid=False,
        is_empty=False,
        error=code,
        message=ERROR_MESSAGES[code],
    )


# =============================================================================
# VALIDATION
# =============================================================================


def validate_amount_input(
    raw: str,
    max_amount: int = MAX_INPUT_AMOUNT,
) -> InputValidationResult:
    """
    Валидация пользовательского ввода количества.

    Порядок проверок:
    1. Пустой / только пробелы → valid-but-inactive
    2. Количество разделителей
    3. Разбор как вещественного числа
    4. Положительность
    5. Верхняя граница (строго меньше max_amount)

    Args:
        raw: Сырая строка из UI
        max_amount: Верхняя граница (исключительно), default: 10^15

    Returns:
        InputValidationResult

    Examples:
        >>> validate_amount_input("").is_empty
        True
        >>> validate_amount_input("1.2.3").error
        <ConversionErrorCode.INVALID_DECIMAL_FORMAT: 'INVALID_DECIMAL_FORMAT'>
    """
    text = raw.strip()
    if not text:
        return _EMPTY_RESULT

    if text.count(".") > 1:
        return _rejected(ConversionErrorCode.INVALID_DECIMAL_FORMAT)

    if _NUMBER_PATTERN.fullmatch(text) is None:
        return _rejected(ConversionErrorCode.NOT_A_NUMBER)

    try:
        value = Decimal(text)
    except InvalidOperation:
        return _rejected(ConversionErrorCode.NOT_A_NUMBER)

    if value <= 0:
        return _rejected(ConversionErrorCode.NON_POSITIVE_AMOUNT)

    if value >= max_amount:
        return _rejected(ConversionErrorCode.AMOUNT_TOO_LARGE)

    return _ACTIVE_RESULT


def ensure_valid_amount_input(raw: str, max_amount: int = MAX_INPUT_AMOUNT) -> str:
    """
    Валидация с исключением вместо результата.

    Args:
        raw: Сырая строка из UI
        max_amount: Верхняя граница (исключительно)

    Returns:
        Строка без окружающих пробелов

    Raises:
        InputValidationError: Ввод пуст (AMOUNT_REQUIRED) или невалиден
    """
    result = validate_amount_input(raw, max_amount=max_amount)
    if result.is_empty:
        raise InputValidationError(
            "Amount is required", code=ConversionErrorCode.AMOUNT_REQUIRED
        )
    if not result.is_valid:
        raise InputValidationError(f"{result.message}: {raw!r}", code=result.error)
    return raw.strip()
