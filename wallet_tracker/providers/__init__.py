"""Upstream data source adapters."""

from .base import Provider, TokenDataProvider
from .coingecko import CoingeckoProvider
from .covalent import CovalentProvider
from .evm_rpc import EvmRpcProvider
from .moralis import MoralisProvider
from .solana import SolanaRpcProvider

__all__ = [
    "Provider",
    "TokenDataProvider",
    "EvmRpcProvider",
    "SolanaRpcProvider",
    "MoralisProvider",
    "CovalentProvider",
    "CoingeckoProvider",
]
