"""
Outcome — Результаты конверсии

Immutable Pydantic модели:
- ConversionOutcome: результат одной попытки конверсии (для presentation layer)
- PreciseConversionResult: количество + актив + обе строковые формы

Полная совместимость с JSON Schema (contracts/schema/conversion_outcome.json):
amount сериализуется в JSON как строка цифр, чтобы потребители на double
не теряли точность.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer, model_validator

from assetconv.core.domain.asset import AssetUnit
from assetconv.core.errors import ERROR_MESSAGES, ConversionErrorCode
from assetconv.core.math.display import format_asset_amount_for_display
from assetconv.core.math.fixed_point import format_asset_amount


# =============================================================================
# CONVERSION OUTCOME
# =============================================================================


class ConversionOutcome(BaseModel):
    """
    Результат попытки конверсии.

    Immutable модель (frozen=True). Инварианты:
    - is_valid == False → amount == 0, formatted == "0", error задан
    - is_valid == True → error отсутствует
    Частичных результатов вместе с ошибкой не бывает.
    """

    is_valid: bool = Field(..., description="Конверсия выполнена успешно")
    amount: int = Field(0, ge=0, description="Количество выходного актива (scaled integer)")
    formatted: str = Field("0", description="Строка для отображения")
    error: Optional[ConversionErrorCode] = Field(None, description="Код ошибки (nullable)")
    message: Optional[str] = Field(None, description="Сообщение для пользователя (nullable)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "ConversionOutcome":
        """Проверка согласованности is_valid / amount / error"""
        if self.is_valid:
            if self.error is not None:
                raise ValueError(f"valid outcome must not carry an error, got {self.error}")
        else:
            if self.error is None:
                raise ValueError("invalid outcome must carry an error code")
            if self.amount != 0 or self.formatted != "0":
                raise ValueError("invalid outcome must carry zero amount and '0' formatted")
        return self

    @field_serializer("amount", when_used="json")
    def serialize_amount(self, amount: int) -> str:
        return str(amount)

    @classmethod
    def success(cls, amount: int, formatted: str) -> "ConversionOutcome":
        """Успешный результат"""
        return cls(is_valid=True, amount=amount, formatted=formatted)

    @classmethod
    def failure(
        cls,
        code: ConversionErrorCode,
        message: Optional[str] = None,
    ) -> "ConversionOutcome":
        """
        Неуспешный результат с безопасными нулевыми значениями.

        Args:
            code: Код ошибки
            message: Сообщение (default: стандартное сообщение для кода)
        """
        return cls(
            is_valid=False,
            amount=0,
            formatted="0",
            error=code,
            message=message or ERROR_MESSAGES[code],
        )

    def to_contract(self) -> dict[str, Any]:
        """Сериализация в dict по контракту conversion_outcome"""
        return self.model_dump(mode="json")


# =============================================================================
# PRECISE CONVERSION RESULT
# =============================================================================


class PreciseConversionResult(BaseModel):
    """
    Количество актива вместе с обеими строковыми формами.

    - formatted: презентационная форма (разделители тысяч, научная нотация)
    - human_readable: каноническая форма (без хвостовых нулей)
    """

    amount: int = Field(..., ge=0, description="Scaled integer")
    asset: AssetUnit = Field(..., description="Актив количества")
    formatted: str = Field(..., description="Строка для отображения")
    human_readable: str = Field(..., description="Каноническая строка")

    model_config = {"frozen": True}


def create_precise_conversion_result(amount: int, asset: AssetUnit) -> PreciseConversionResult:
    """
    Построение PreciseConversionResult для количества актива.

    Args:
        amount: Scaled integer (>= 0)
        asset: Актив

    Returns:
        PreciseConversionResult

    Examples:
        >>> usd = AssetUnit(symbol="USD", decimals=2)
        >>> create_precise_conversion_result(123456, usd).formatted
        '1,234.56'
    """
    return PreciseConversionResult(
        amount=amount,
        asset=asset,
        formatted=format_asset_amount_for_display(amount, asset.decimals),
        human_readable=format_asset_amount(amount, asset.decimals),
    )
