from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .portfolio import TokenBalance
from .transactions import TransactionRecord

# Solana signature entries are passed through untouched; a plain mapping is
# tried first so they never get coerced into a TransactionRecord.
TransactionEntry = Annotated[
    Union[Dict[str, Any], TransactionRecord],
    Field(union_mode="left_to_right"),
]


class BalancesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    network: str = Field(description="Network identifier")
    address: str = Field(description="Wallet address")
    native_balance: Optional[float] = Field(
        default=None, alias="nativeBalance", description="Native coin balance"
    )
    native_symbol: str = Field(alias="nativeSymbol", description="Native coin symbol")
    native_value_usd: Optional[float] = Field(
        default=None, alias="nativeValueUsd", description="Native balance valued in USD"
    )
    token_balances: Optional[List[TokenBalance]] = Field(
        default=None,
        alias="tokenBalances",
        description="Token balances, null when no provider supplied data",
    )
    token_portfolio_value_usd: Optional[float] = Field(
        default=None,
        alias="tokenPortfolioValueUsd",
        description="Total USD value of token balances",
    )


class TransactionsResponse(BaseModel):
    network: str = Field(description="Network identifier")
    address: str = Field(description="Wallet address")
    transactions: Optional[List[TransactionEntry]] = Field(
        default=None,
        description="Most recent transactions first, null when history is unobtainable",
    )


class ErrorResponse(BaseModel):
    error: str = Field(description="Error message")
