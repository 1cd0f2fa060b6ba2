"""
Тесты для модуля Display Formatter

Проверяет:
1. Фиатное форматирование (разделители тысяч, ровно 2 знака)
2. Токены: полная точность без хвостовых нулей
3. Dust: научная нотация, никогда не "0"
4. Округление мантиссы с переносом
"""

import pytest

from assetconv.core.math.display import (
    DUST_EXPONENT,
    FIAT_DECIMALS,
    format_asset_amount_for_display,
    format_fiat,
    format_scientific,
    is_dust,
)


class TestFiatDisplay:
    """Тесты фиатного форматирования (decimals == 2)"""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (123_456_789, "1,234,567.89"),
            (10_000, "100.00"),
            (0, "0.00"),
            (5, "0.05"),
            (123_450, "1,234.50"),
            (100_000_000_000, "1,000,000,000.00"),
        ],
    )
    def test_fiat(self, amount: int, expected: str) -> None:
        """Центы показываются всегда"""
        assert format_asset_amount_for_display(amount, FIAT_DECIMALS) == expected

    def test_format_fiat_zero_decimals(self) -> None:
        """Без дробной части"""
        assert format_fiat(1_234_567, 0) == "1,234,567"

    def test_format_fiat_group_boundaries(self) -> None:
        """Группы внутри целой части дополняются нулями"""
        assert format_fiat(100_000) == "1,000.00"
        assert format_fiat(99_999) == "999.99"
        assert format_fiat(100_000_500) == "1,000,005.00"

    def test_fiat_beyond_int_str_digit_limit(self) -> None:
        """Фиат с тысячами цифр форматируется без лимита str(int)"""
        shown = format_asset_amount_for_display(10**5000, FIAT_DECIMALS)
        assert shown == "1" + ",000" * 1666 + ".00"


class TestTokenDisplay:
    """Тесты форматирования токенов (decimals != 2)"""

    @pytest.mark.parametrize(
        "amount,decimals,expected",
        [
            (100_000_000, 8, "1"),
            (1_234, 8, "0.00001234"),
            (200_000, 8, "0.002"),
            (0, 8, "0"),
            (0, 18, "0"),
            (1, 8, "0.00000001"),
            (1_000_000_000, 8, "10"),
            (5 * 10**16, 18, "0.05"),
            (10**10, 18, "0.00000001"),
            (42, 0, "42"),
            (1_500_000_000, 9, "1.5"),
        ],
    )
    def test_token(self, amount: int, decimals: int, expected: str) -> None:
        """Полная точность, хвостовые нули дробной части удалены"""
        assert format_asset_amount_for_display(amount, decimals) == expected

    def test_integer_zeros_kept(self) -> None:
        """'10' не превращается в '1'"""
        assert format_asset_amount_for_display(1_000_000_000, 8) == "10"
        assert format_asset_amount_for_display(10**20, 18) == "100"


class TestDustDisplay:
    """Тесты научной нотации для dust"""

    @pytest.mark.parametrize(
        "amount,decimals,expected",
        [
            (1_234, 18, "1.23e-15"),
            (1_235, 18, "1.24e-15"),
            (1, 18, "1.00e-18"),
            (9_999, 18, "1.00e-14"),
            (9_999_999_999, 18, "1.00e-8"),
            (1, 9, "1.00e-9"),
        ],
    )
    def test_dust(self, amount: int, decimals: int, expected: str) -> None:
        """Положительный dust никогда не отображается как '0'"""
        assert format_asset_amount_for_display(amount, decimals) == expected

    def test_is_dust(self) -> None:
        """Граница dust: строго меньше 10^-8"""
        assert DUST_EXPONENT == 8
        assert is_dust(1, 18)
        assert is_dust(10**10 - 1, 18)
        assert not is_dust(10**10, 18)
        assert not is_dust(0, 18)
        assert not is_dust(1, 8)

    def test_format_scientific_rejects_zero(self) -> None:
        """Научная нотация только для положительных значений"""
        with pytest.raises(ValueError, match="amount must be positive"):
            format_scientific(0, 18)

    def test_format_scientific_positive_exponent(self) -> None:
        """Экспонента со знаком '+'"""
        assert format_scientific(123_456, 2) == "1.23e+3"

    def test_format_scientific_huge_amount(self) -> None:
        """Мантисса берётся из первых цифр без лимита str(int)"""
        assert format_scientific(10**5000, 0) == "1.00e+5000"
        assert format_scientific(1, 6000) == "1.00e-6000"


class TestDisplayValidation:
    """Тесты валидации аргументов"""

    def test_negative_amount_raises(self) -> None:
        """Отрицательные количества вне домена"""
        with pytest.raises(ValueError, match="amount must be non-negative"):
            format_asset_amount_for_display(-1, 8)

    def test_float_amount_raises(self) -> None:
        """Float не принимается"""
        with pytest.raises(ValueError, match="amount must be an integer"):
            format_asset_amount_for_display(1.0, 8)  # type: ignore[arg-type]

    def test_negative_decimals_raises(self) -> None:
        """Некорректная точность"""
        with pytest.raises(ValueError):
            format_asset_amount_for_display(1, -1)
