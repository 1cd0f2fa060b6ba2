"""
Asset — Модель актива и статический реестр активов/пар

Immutable Pydantic модели:
- AssetUnit: актив с фиксированной точностью (decimals)
- AssetPair: пара base/quote (цена = base за 1 quote)

Точность актива фиксирована на всё время жизни его идентичности и никогда
не меняется посреди конверсии. Ядро только читает её.
"""

from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator

from assetconv.core.math.display import FIAT_DECIMALS


# =============================================================================
# ASSET MODEL
# =============================================================================


class AssetUnit(BaseModel):
    """
    Актив с фиксированной десятичной точностью.

    Immutable модель (frozen=True): точность не может быть изменена.
    """

    # Идентификация
    symbol: str = Field(..., min_length=1, description="Символ актива (например, 'USD', 'wBTC')")
    decimals: int = Field(..., ge=0, description="Количество десятичных знаков")

    # Метаданные (не участвуют в арифметике)
    asset_id: Optional[str] = Field(None, min_length=1, description="Идентификатор актива")
    name: Optional[str] = Field(None, description="Полное имя актива")
    contract_address: Optional[str] = Field(
        None,
        pattern="^0x[a-fA-F0-9]{40}$",
        description="Адрес контракта токена (nullable для нативных активов)",
    )
    network: Optional[str] = Field(None, description="Сеть (nullable)")
    api_id: Optional[str] = Field(None, description="Идентификатор для price API (nullable)")

    model_config = {"frozen": True}

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Символ без пробельных символов"""
        if any(ch.isspace() for ch in v):
            raise ValueError(f"symbol must not contain whitespace, got {v!r}")
        return v

    @property
    def is_fiat_like(self) -> bool:
        """Актив с точностью фиата (2 знака)"""
        return self.decimals == FIAT_DECIMALS


# =============================================================================
# ASSET PAIR MODEL
# =============================================================================


class AssetPair(BaseModel):
    """
    Пара активов: цена означает "1 quote стоит price base".

    Immutable модель (frozen=True).
    """

    base: AssetUnit = Field(..., description="Base актив (в нём номинирована цена)")
    quote: AssetUnit = Field(..., description="Quote актив (оцениваемый)")

    model_config = {"frozen": True}

    @field_validator("quote")
    @classmethod
    def validate_distinct_assets(cls, v: AssetUnit, info) -> AssetUnit:
        """Base и quote должны различаться"""
        if "base" in info.data and info.data["base"].symbol.upper() == v.symbol.upper():
            raise ValueError(f"base and quote must differ, got {v.symbol} for both")
        return v

    @property
    def pair_id(self) -> str:
        """Идентификатор пары: '<BASE>_<QUOTE>'"""
        return f"{self.base.symbol.upper()}_{self.quote.symbol.upper()}"


# =============================================================================
# REGISTRY
# =============================================================================

ASSETS: Final[dict[str, AssetUnit]] = {
    "USD": AssetUnit(
        asset_id="usd",
        symbol="USD",
        name="US Dollar",
        decimals=2,
    ),
    "WBTC": AssetUnit(
        asset_id="wrapped-bitcoin",
        symbol="wBTC",
        name="Wrapped Bitcoin",
        decimals=8,
        contract_address="0x2260fac5e5542a773aa44fbcfedf7c193bc2c599",
        network="Ethereum",
        api_id="bitcoin",
    ),
    "ETH": AssetUnit(
        asset_id="ethereum",
        symbol="ETH",
        name="Ethereum",
        decimals=18,
        api_id="ethereum",
    ),
    "SOL": AssetUnit(
        asset_id="solana",
        symbol="SOL",
        name="Solana",
        decimals=9,
        api_id="solana",
    ),
}

ASSET_PAIRS: Final[dict[str, AssetPair]] = {
    "USD_WBTC": AssetPair(base=ASSETS["USD"], quote=ASSETS["WBTC"]),
    "USD_ETH": AssetPair(base=ASSETS["USD"], quote=ASSETS["ETH"]),
    "USD_SOL": AssetPair(base=ASSETS["USD"], quote=ASSETS["SOL"]),
}


def get_asset(symbol: str) -> AssetUnit:
    """
    Поиск актива в реестре (без учёта регистра).

    Raises:
        KeyError: Если актив не зарегистрирован
    """
    key = symbol.upper()
    if key not in ASSETS:
        raise KeyError(f"Unknown asset: {symbol!r}. Known: {sorted(ASSETS)}")
    return ASSETS[key]


def get_asset_pair(pair_id: str) -> AssetPair:
    """
    Поиск пары в реестре (без учёта регистра).

    Raises:
        KeyError: Если пара не зарегистрирована
    """
    key = pair_id.upper()
    if key not in ASSET_PAIRS:
        raise KeyError(f"Unknown asset pair: {pair_id!r}. Known: {sorted(ASSET_PAIRS)}")
    return ASSET_PAIRS[key]
