"""
Balance and transaction aggregation across RPC nodes and data providers.

Native balances always come from the network's public RPC node first; the
token data provider is only a fallback for that figure. Token detail and EVM
transaction history come from exactly one provider per request: the first in
preference order that is configured and serves the network. Providers are
never merged with each other.
"""

from __future__ import annotations

import asyncio
import logging
import math
from functools import lru_cache
from typing import List, Optional, Sequence

from ..config import Settings, settings as default_settings
from ..providers.base import TokenDataProvider
from ..providers.coingecko import CoingeckoProvider
from ..providers.covalent import CovalentProvider
from ..providers.evm_rpc import EvmRpcProvider
from ..providers.moralis import MoralisProvider
from ..providers.solana import SolanaRpcProvider
from ..types import BalancesResponse, TokenPortfolio, TransactionsResponse
from .networks import NetworkDescriptor, resolve

logger = logging.getLogger(__name__)


def _is_usable(value: Optional[float]) -> bool:
    return value is not None and not math.isnan(value)


class Aggregator:
    """Answers balance and transaction queries for one network/address pair.

    Configuration is fixed at construction: pass a ``Settings`` instance, or
    inject adapters directly. Providers are listed in preference order.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        *,
        evm_rpc: Optional[EvmRpcProvider] = None,
        solana_rpc: Optional[SolanaRpcProvider] = None,
        prices: Optional[CoingeckoProvider] = None,
        providers: Optional[Sequence[TokenDataProvider]] = None,
    ) -> None:
        if config is None:
            config = default_settings
        timeout_s = config.request_timeout_seconds

        self.signature_limit = config.solana_signature_limit
        self.evm_rpc = evm_rpc or EvmRpcProvider(timeout_s=timeout_s)
        self.solana_rpc = solana_rpc or SolanaRpcProvider(timeout_s=timeout_s)
        self.prices = prices or CoingeckoProvider(
            api_key=config.coingecko_api_key, timeout_s=timeout_s
        )
        if providers is None:
            providers = [
                MoralisProvider(api_key=config.moralis_api_key, timeout_s=timeout_s),
                CovalentProvider(api_key=config.covalent_api_key, timeout_s=timeout_s),
            ]
        self.providers: List[TokenDataProvider] = list(providers)

    async def select_balance_provider(
        self, network: NetworkDescriptor
    ) -> Optional[TokenDataProvider]:
        for provider in self.providers:
            if await provider.ready() and provider.supports_balances(network):
                return provider
        return None

    async def select_transaction_provider(
        self, network: NetworkDescriptor
    ) -> Optional[TokenDataProvider]:
        for provider in self.providers:
            if await provider.ready() and provider.supports_transactions(network):
                return provider
        return None

    async def fetch_native_balance(self, network: NetworkDescriptor, address: str) -> Optional[float]:
        if network.is_evm:
            return await self.evm_rpc.fetch_native_balance(
                network.rpc_url, address, decimals=network.native_decimals
            )
        return await self.solana_rpc.fetch_balance(
            network.rpc_url, address, decimals=network.native_decimals
        )

    async def fetch_token_portfolio(
        self, network: NetworkDescriptor, address: str
    ) -> Optional[TokenPortfolio]:
        provider = await self.select_balance_provider(network)
        if provider is None:
            return None
        return await provider.fetch_token_balances(network, address)

    async def get_balances(self, network_id: str, address: str) -> BalancesResponse:
        network = resolve(network_id)

        native_balance, portfolio, price = await asyncio.gather(
            self.fetch_native_balance(network, address),
            self.fetch_token_portfolio(network, address),
            self.prices.fetch_usd_price(network.price_id),
        )

        native_value_usd = None
        if _is_usable(native_balance) and price is not None:
            native_value_usd = native_balance * price

        provider_native = portfolio.native if portfolio is not None else None
        if provider_native is not None:
            if not _is_usable(native_balance):
                logger.info("Using provider native balance for %s on %s", address, network.id)
                native_balance = provider_native.balance
            if native_value_usd is None and provider_native.usd_value is not None:
                native_value_usd = provider_native.usd_value

        return BalancesResponse(
            network=network.id,
            address=address,
            native_balance=native_balance if _is_usable(native_balance) else None,
            native_symbol=network.native_symbol,
            native_value_usd=native_value_usd,
            token_balances=portfolio.tokens if portfolio is not None else None,
            token_portfolio_value_usd=portfolio.portfolio_value_usd if portfolio is not None else None,
        )

    async def get_transactions(self, network_id: str, address: str) -> TransactionsResponse:
        network = resolve(network_id)

        if not network.is_evm:
            transactions = await self.solana_rpc.fetch_signatures(
                network.rpc_url, address, limit=self.signature_limit
            )
            return TransactionsResponse(network=network.id, address=address, transactions=transactions)

        provider = await self.select_transaction_provider(network)
        if provider is None:
            # History is unobtainable without a provider: null, not an empty list
            return TransactionsResponse(network=network.id, address=address, transactions=None)

        transactions = await provider.fetch_transactions(network, address)
        return TransactionsResponse(network=network.id, address=address, transactions=transactions)


@lru_cache(maxsize=1)
def get_aggregator() -> Aggregator:
    """Process-wide aggregator built from the global settings."""

    return Aggregator(default_settings)


__all__ = ["Aggregator", "get_aggregator"]
