from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenBalance(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", alias="contractName", description="Token or contract name")
    symbol: str = Field(default="", description="Token symbol (e.g. USDC)")
    balance: float = Field(description="Balance adjusted by the token's decimals")
    decimals: int = Field(default=0, description="Token decimal places")
    usd_value: float = Field(default=0.0, alias="quote", description="Total value in USD")


class NativeHolding(BaseModel):
    """Native coin as reported inline by a token data provider."""

    balance: float = Field(description="Native balance in whole coins")
    usd_value: Optional[float] = Field(default=None, description="Provider's USD valuation of the balance")


class TokenPortfolio(BaseModel):
    tokens: List[TokenBalance] = Field(default_factory=list, description="Non-native token balances")
    portfolio_value_usd: float = Field(default=0.0, description="Sum of non-native token USD values")
    native: Optional[NativeHolding] = Field(
        default=None,
        description="Native coin reported by the provider, kept out of tokens to avoid double counting",
    )
