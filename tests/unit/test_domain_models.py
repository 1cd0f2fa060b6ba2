"""
Тесты для доменных моделей assetconv

Проверяет:
1. AssetUnit: валидация, immutability
2. Реестр активов и пар
3. ConversionOutcome: инварианты успеха/отказа, сериализация
4. PreciseConversionResult
"""

import pytest
from pydantic import ValidationError

from assetconv.core.domain import (
    ASSET_PAIRS,
    ASSETS,
    AssetPair,
    AssetUnit,
    ConversionOutcome,
    create_precise_conversion_result,
    get_asset,
    get_asset_pair,
)
from assetconv.core.errors import ConversionErrorCode

# =============================================================================
# ASSET UNIT
# =============================================================================


class TestAssetUnit:
    """Тесты модели AssetUnit"""

    def test_minimal_asset(self) -> None:
        """Достаточно символа и точности"""
        asset = AssetUnit(symbol="DAI", decimals=18)
        assert asset.decimals == 18
        assert asset.contract_address is None
        assert not asset.is_fiat_like

    def test_fiat_like(self) -> None:
        """Точность 2 знака — фиатный класс"""
        assert AssetUnit(symbol="EUR", decimals=2).is_fiat_like

    def test_immutable(self) -> None:
        """Точность нельзя изменить после создания"""
        asset = AssetUnit(symbol="DAI", decimals=18)
        with pytest.raises(ValidationError):
            asset.decimals = 6  # type: ignore[misc]

    def test_negative_decimals_rejected(self) -> None:
        """Отрицательная точность"""
        with pytest.raises(ValidationError):
            AssetUnit(symbol="BAD", decimals=-1)

    @pytest.mark.parametrize("symbol", ["", "US D", " USD", "USD\n"])
    def test_invalid_symbol_rejected(self, symbol: str) -> None:
        """Пустой символ или символ с пробелами"""
        with pytest.raises(ValidationError):
            AssetUnit(symbol=symbol, decimals=2)

    def test_invalid_contract_address_rejected(self) -> None:
        """Адрес контракта — 0x + 40 hex"""
        with pytest.raises(ValidationError):
            AssetUnit(symbol="TKN", decimals=18, contract_address="0x1234")


# =============================================================================
# REGISTRY
# =============================================================================


class TestAssetRegistry:
    """Тесты статического реестра"""

    def test_registered_decimals(self) -> None:
        """Точности зарегистрированных активов"""
        assert ASSETS["USD"].decimals == 2
        assert ASSETS["WBTC"].decimals == 8
        assert ASSETS["ETH"].decimals == 18
        assert ASSETS["SOL"].decimals == 9

    def test_wbtc_metadata(self) -> None:
        """Метаданные wBTC"""
        wbtc = ASSETS["WBTC"]
        assert wbtc.symbol == "wBTC"
        assert wbtc.api_id == "bitcoin"
        assert wbtc.network == "Ethereum"
        assert wbtc.contract_address == "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599"

    def test_native_assets_without_contract(self) -> None:
        """Нативные активы без адреса контракта"""
        assert ASSETS["ETH"].contract_address is None
        assert ASSETS["SOL"].contract_address is None

    def test_unique_asset_ids(self) -> None:
        """Идентификаторы уникальны"""
        ids = [asset.asset_id for asset in ASSETS.values()]
        assert len(set(ids)) == len(ids) == 4

    def test_get_asset_case_insensitive(self) -> None:
        """Поиск без учёта регистра"""
        assert get_asset("wbtc") is ASSETS["WBTC"]
        assert get_asset("Usd") is ASSETS["USD"]

    def test_get_unknown_asset(self) -> None:
        """Незарегистрированный актив"""
        with pytest.raises(KeyError, match="Unknown asset"):
            get_asset("DOGE")

    def test_pairs(self) -> None:
        """Зарегистрированные пары номинированы в USD"""
        assert set(ASSET_PAIRS) == {"USD_WBTC", "USD_ETH", "USD_SOL"}
        for pair_id, pair in ASSET_PAIRS.items():
            assert pair.pair_id == pair_id
            assert pair.base is ASSETS["USD"]

    def test_get_asset_pair(self) -> None:
        """Поиск пары"""
        pair = get_asset_pair("usd_eth")
        assert pair.quote.decimals == 18
        with pytest.raises(KeyError, match="Unknown asset pair"):
            get_asset_pair("USD_DOGE")

    def test_pair_requires_distinct_assets(self) -> None:
        """Пара из одного актива запрещена"""
        with pytest.raises(ValidationError):
            AssetPair(base=ASSETS["USD"], quote=AssetUnit(symbol="usd", decimals=2))


# =============================================================================
# CONVERSION OUTCOME
# =============================================================================


class TestConversionOutcome:
    """Тесты модели ConversionOutcome"""

    def test_success(self) -> None:
        """Успешный результат без ошибки"""
        outcome = ConversionOutcome.success(200_000, "0.002")
        assert outcome.is_valid
        assert outcome.amount == 200_000
        assert outcome.error is None
        assert outcome.message is None

    def test_failure_defaults(self) -> None:
        """Отказ с безопасными нулевыми значениями и стандартным сообщением"""
        outcome = ConversionOutcome.failure(ConversionErrorCode.NOT_A_NUMBER)
        assert not outcome.is_valid
        assert outcome.amount == 0
        assert outcome.formatted == "0"
        assert outcome.error == ConversionErrorCode.NOT_A_NUMBER
        assert outcome.message == "Please enter a valid number"

    def test_failure_custom_message(self) -> None:
        """Сообщение можно переопределить"""
        outcome = ConversionOutcome.failure(ConversionErrorCode.INVALID_PRICE, "Feed offline")
        assert outcome.message == "Feed offline"

    def test_failure_with_partial_amount_rejected(self) -> None:
        """Частичный результат вместе с ошибкой невозможен"""
        with pytest.raises(ValidationError):
            ConversionOutcome(is_valid=False, amount=5, error=ConversionErrorCode.NOT_A_NUMBER)

    def test_failure_without_code_rejected(self) -> None:
        """Отказ без кода ошибки"""
        with pytest.raises(ValidationError):
            ConversionOutcome(is_valid=False)

    def test_success_with_error_rejected(self) -> None:
        """Успех с кодом ошибки"""
        with pytest.raises(ValidationError):
            ConversionOutcome(
                is_valid=True,
                amount=1,
                formatted="1",
                error=ConversionErrorCode.NOT_A_NUMBER,
            )

    def test_negative_amount_rejected(self) -> None:
        """Отрицательное количество"""
        with pytest.raises(ValidationError):
            ConversionOutcome(is_valid=True, amount=-1, formatted="-1")

    def test_immutable(self) -> None:
        """Результат неизменяем"""
        outcome = ConversionOutcome.success(1, "1")
        with pytest.raises(ValidationError):
            outcome.amount = 2  # type: ignore[misc]

    def test_contract_amount_is_string(self) -> None:
        """В JSON amount — строка цифр, без потери точности"""
        amount = 12_340_000_000_000_000_000_000
        data = ConversionOutcome.success(amount, "12340").to_contract()
        assert data["amount"] == str(amount)
        assert data["error"] is None

    def test_contract_error_is_code_string(self) -> None:
        """Код ошибки сериализуется значением enum"""
        data = ConversionOutcome.failure(ConversionErrorCode.AMOUNT_TOO_LARGE).to_contract()
        assert data == {
            "is_valid": False,
            "amount": "0",
            "formatted": "0",
            "error": "AMOUNT_TOO_LARGE",
            "message": "Amount is too large",
        }

    def test_python_dump_keeps_int(self) -> None:
        """В python-режиме amount остаётся int"""
        assert ConversionOutcome.success(7, "7").model_dump()["amount"] == 7


# =============================================================================
# PRECISE CONVERSION RESULT
# =============================================================================


class TestPreciseConversionResult:
    """Тесты create_precise_conversion_result"""

    def test_token_result(self) -> None:
        """0.002 wBTC: обе формы совпадают"""
        result = create_precise_conversion_result(200_000, ASSETS["WBTC"])
        assert result.amount == 200_000
        assert result.asset == ASSETS["WBTC"]
        assert result.formatted == "0.002"
        assert result.human_readable == "0.002"

    def test_fiat_result(self) -> None:
        """Фиат: formatted с разделителями, human_readable канонический"""
        result = create_precise_conversion_result(123_456, ASSETS["USD"])
        assert result.formatted == "1,234.56"
        assert result.human_readable == "1234.56"

    def test_dust_result(self) -> None:
        """Dust: научная нотация только в formatted"""
        result = create_precise_conversion_result(1_234, ASSETS["ETH"])
        assert result.formatted == "1.23e-15"
        assert result.human_readable == "0.000000000000001234"
