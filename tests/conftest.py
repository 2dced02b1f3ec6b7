from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import httpx
import pytest

from wallet_tracker.providers.base import TokenDataProvider
from wallet_tracker.types import TokenPortfolio, TransactionRecord


class FakeAsyncClient:
    """Stands in for ``httpx.AsyncClient`` and replays queued outcomes.

    Each queued outcome is a ``(status, payload)`` pair, a ready-made
    ``httpx.Response`` or an exception to raise.
    """

    requests: List[Dict[str, Any]] = []
    outcomes: List[Any] = []

    def __init__(self, *_, **kwargs):
        self.kwargs = kwargs

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def get(self, url, params=None, headers=None):
        return self._reply("GET", url, params=params, headers=headers)

    async def post(self, url, json=None, headers=None):
        return self._reply("POST", url, json=json, headers=headers)

    def _reply(self, method, url, **kwargs):
        cls = type(self)
        cls.requests.append({"method": method, "url": url, **kwargs})
        outcome = cls.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        request = httpx.Request(method, url)
        if isinstance(outcome, httpx.Response):
            outcome.request = request
            return outcome
        status, payload = outcome
        return httpx.Response(status, json=payload, request=request)


@pytest.fixture
def fake_http(monkeypatch):
    """Route every ``httpx.AsyncClient`` through a fresh FakeAsyncClient."""

    client_cls = type("FakeClient", (FakeAsyncClient,), {"requests": [], "outcomes": []})
    monkeypatch.setattr(httpx, "AsyncClient", client_cls)
    return client_cls


class StubEvmRpc:
    name = "evm_rpc"

    def __init__(self, balance: Optional[float]):
        self.balance = balance
        self.calls: List[tuple] = []
        self.decimals: List[int] = []

    async def fetch_native_balance(self, rpc_url, address, decimals=18):
        self.decimals.append(decimals)
        self.calls.append((rpc_url, address))
        return self.balance

    async def health_check(self):
        return {"status": "configured", "auth": "none"}


class StubSolanaRpc:
    name = "solana_rpc"

    def __init__(self, balance: Optional[float] = None, signatures: Optional[list] = None):
        self.balance = balance
        self.signatures = signatures
        self.calls: List[tuple] = []
        self.decimals: List[int] = []

    async def fetch_balance(self, rpc_url, address, decimals=9):
        self.decimals.append(decimals)
        self.calls.append(("getBalance", rpc_url, address))
        return self.balance

    async def fetch_signatures(self, rpc_url, address, limit=20):
        self.calls.append(("getSignaturesForAddress", rpc_url, address, limit))
        return self.signatures

    async def health_check(self):
        return {"status": "configured", "auth": "none"}


class StubPrices:
    name = "coingecko"

    def __init__(self, price: Optional[float]):
        self.price = price
        self.calls: List[str] = []

    async def fetch_usd_price(self, price_id):
        self.calls.append(price_id)
        return self.price

    async def health_check(self):
        return {"status": "configured", "auth": "public"}


class StubTokenProvider(TokenDataProvider):
    """Token data provider returning canned results and recording calls."""

    def __init__(
        self,
        name: str,
        api_key: str = "key",
        *,
        evm_only: bool = False,
        portfolio: Optional[TokenPortfolio] = None,
        transactions: Optional[List[TransactionRecord]] = None,
    ):
        super().__init__(api_key=api_key)
        self.name = name
        self.evm_only = evm_only
        self.portfolio = portfolio
        self.transactions = transactions
        self.balance_calls: List[tuple] = []
        self.transaction_calls: List[tuple] = []

    def supports_balances(self, network):
        return network.is_evm or not self.evm_only

    def supports_transactions(self, network):
        return network.is_evm

    async def fetch_token_balances(self, network, address):
        self.balance_calls.append((network.id, address))
        return self.portfolio

    async def fetch_transactions(self, network, address):
        self.transaction_calls.append((network.id, address))
        return self.transactions


@pytest.fixture
def stubs():
    """Canned stand-ins for every upstream adapter the aggregator uses."""

    return SimpleNamespace(
        EvmRpc=StubEvmRpc,
        SolanaRpc=StubSolanaRpc,
        Prices=StubPrices,
        TokenProvider=StubTokenProvider,
    )
