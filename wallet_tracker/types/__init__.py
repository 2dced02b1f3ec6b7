from .portfolio import NativeHolding, TokenBalance, TokenPortfolio
from .responses import BalancesResponse, ErrorResponse, TransactionsResponse
from .transactions import TransactionRecord

__all__ = [
    "TokenBalance",
    "NativeHolding",
    "TokenPortfolio",
    "TransactionRecord",
    "BalancesResponse",
    "TransactionsResponse",
    "ErrorResponse",
]
