"""
Conversion Errors — Таксономия ошибок конверсии

Единый набор кодов ошибок для всех слоёв ядра конверсии:
- Валидатор ввода (NOT_A_NUMBER, INVALID_DECIMAL_FORMAT, NON_POSITIVE_AMOUNT, AMOUNT_TOO_LARGE)
- Fixed-point кодек (MALFORMED_AMOUNT, UNREPRESENTABLE_AMOUNT)
- Конвертер (INVALID_PRICE, DIVISION_BY_ZERO)
- Pipeline (AMOUNT_REQUIRED)

Все ошибки восстановимы вызывающей стороной и никогда не фатальны для процесса.
Нижние слои поднимают максимально конкретное исключение, pipeline превращает
его в типизированный ConversionOutcome.
"""

from enum import Enum


# =============================================================================
# ERROR CODES
# =============================================================================


class ConversionErrorCode(str, Enum):
    """Код ошибки конверсии"""

    AMOUNT_REQUIRED = "AMOUNT_REQUIRED"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    INVALID_DECIMAL_FORMAT = "INVALID_DECIMAL_FORMAT"
    NON_POSITIVE_AMOUNT = "NON_POSITIVE_AMOUNT"
    AMOUNT_TOO_LARGE = "AMOUNT_TOO_LARGE"
    MALFORMED_AMOUNT = "MALFORMED_AMOUNT"
    UNREPRESENTABLE_AMOUNT = "UNREPRESENTABLE_AMOUNT"
    INVALID_PRICE = "INVALID_PRICE"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"


# Сообщения для пользователя (presentation layer показывает их как есть)
ERROR_MESSAGES: dict[ConversionErrorCode, str] = {
    ConversionErrorCode.AMOUNT_REQUIRED: "Amount is required",
    ConversionErrorCode.NOT_A_NUMBER: "Please enter a valid number",
    ConversionErrorCode.INVALID_DECIMAL_FORMAT: "Invalid decimal format",
    ConversionErrorCode.NON_POSITIVE_AMOUNT: "Amount must be greater than zero",
    ConversionErrorCode.AMOUNT_TOO_LARGE: "Amount is too large",
    ConversionErrorCode.MALFORMED_AMOUNT: "Invalid amount",
    ConversionErrorCode.UNREPRESENTABLE_AMOUNT: "Too many decimal places for this asset",
    ConversionErrorCode.INVALID_PRICE: "Price is unavailable or invalid",
    ConversionErrorCode.DIVISION_BY_ZERO: "Price must be greater than zero",
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConversionError(Exception):
    """
    Базовое исключение ядра конверсии.

    Каждый подкласс фиксирует свой ConversionErrorCode, чтобы pipeline мог
    построить типизированный результат без разбора текста сообщения.
    """

    code: ConversionErrorCode = ConversionErrorCode.MALFORMED_AMOUNT

    def __init__(self, detail: str, code: ConversionErrorCode | None = None):
        super().__init__(detail)
        if code is not None:
            self.code = code
        self.detail = detail

    @property
    def user_message(self) -> str:
        """Сообщение для пользователя, соответствующее коду ошибки"""
        return ERROR_MESSAGES[self.code]


class InputValidationError(ConversionError):
    """
    Ввод пользователя не прошёл numeric sanity проверку.

    Код берётся из результата валидатора (NOT_A_NUMBER, NON_POSITIVE_AMOUNT, ...)
    и обязателен: у ошибки валидации нет осмысленного кода по умолчанию.
    """

    def __init__(self, detail: str, code: ConversionErrorCode):
        super().__init__(detail, code=code)


class MalformedAmountError(ConversionError):
    """Строка не соответствует грамматике `digits ['.' digits]`"""

    code = ConversionErrorCode.MALFORMED_AMOUNT


class UnrepresentableAmountError(ConversionError):
    """Значимых дробных цифр больше, чем позволяет точность актива"""

    code = ConversionErrorCode.UNREPRESENTABLE_AMOUNT


class InvalidPriceError(ConversionError):
    """Цена отсутствует, нечисловая, отрицательная или NaN/Inf"""

    code = ConversionErrorCode.INVALID_PRICE


class DivisionByZeroError(InvalidPriceError):
    """Нулевая цена дошла до шага деления"""

    code = ConversionErrorCode.DIVISION_BY_ZERO
