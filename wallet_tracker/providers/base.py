import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from ..services.networks import NetworkDescriptor
from ..types import TokenPortfolio, TransactionRecord

# Anything an upstream can throw at us while we fetch and parse a payload.
# Adapters turn these into ``None`` instead of failing the request.
UPSTREAM_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError)

DEFAULT_TIMEOUT_S = 30


def describe_error(exc: Exception) -> str:
    """Short, key-free description of an upstream failure for the logs."""

    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    if isinstance(exc, httpx.HTTPError):
        # Transport messages can echo the request URL, which may carry a key
        return type(exc).__name__
    return f"{type(exc).__name__}: {exc}"


def scale_amount(raw: Any, decimals: int) -> float:
    """Convert an integer amount in base units into whole units."""

    return int(str(raw)) / 10 ** int(decimals)


class Provider(ABC):
    """Base provider interface"""

    name: str
    timeout_s: float = DEFAULT_TIMEOUT_S

    def __init__(self, timeout_s: float = DEFAULT_TIMEOUT_S) -> None:
        self.timeout_s = timeout_s
        self.logger = logging.getLogger(type(self).__module__)

    @abstractmethod
    async def ready(self) -> bool:
        """Check if provider is ready to serve requests"""
        pass

    async def health_check(self) -> Dict[str, Any]:
        """Report configuration state without calling the upstream."""
        if not await self.ready():
            return {"status": "unavailable", "reason": "API key not configured"}
        return {"status": "configured"}

    def _unavailable(self, operation: str, exc: Exception) -> None:
        self.logger.warning(
            "%s %s failed: %s", self.name, operation, describe_error(exc)
        )
        return None


class JsonRpcProvider(Provider):
    """Provider talking JSON-RPC 2.0 over HTTP POST to a public node."""

    async def ready(self) -> bool:
        # Public endpoints need no credentials
        return True

    async def health_check(self) -> Dict[str, Any]:
        return {"status": "configured", "auth": "none"}

    async def _call(self, rpc_url: str, method: str, params: List[Any]) -> Any:
        """POST one JSON-RPC request and return its ``result`` member."""
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": method,
            "params": params,
        }

        async with httpx.AsyncClient(timeout=self.timeout_s) as client:
            response = await client.post(
                rpc_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
            data = response.json()

        if "error" in data:
            raise ValueError(f"{method} error: {data['error']}")
        return data.get("result")


class TokenDataProvider(Provider):
    """Optional third-party API for token balances and transaction history.

    Implementations never raise for upstream problems: a missing API key, a
    transport error, a non-success status or a malformed payload all come
    back as ``None`` so the aggregator can degrade the response instead.
    """

    def __init__(self, api_key: str = "", timeout_s: float = DEFAULT_TIMEOUT_S) -> None:
        super().__init__(timeout_s)
        self.api_key = api_key

    async def ready(self) -> bool:
        return bool(self.api_key)

    @abstractmethod
    def supports_balances(self, network: NetworkDescriptor) -> bool:
        """Whether token balances can be served for ``network``"""

    @abstractmethod
    def supports_transactions(self, network: NetworkDescriptor) -> bool:
        """Whether transaction history can be served for ``network``"""

    @abstractmethod
    async def fetch_token_balances(
        self, network: NetworkDescriptor, address: str
    ) -> Optional[TokenPortfolio]:
        """Token holdings for ``address``, or None when unavailable"""

    @abstractmethod
    async def fetch_transactions(
        self, network: NetworkDescriptor, address: str
    ) -> Optional[List[TransactionRecord]]:
        """Recent transactions for ``address``, or None when unavailable"""

    async def _get_json(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout_s) as client:
            response = await client.get(url, params=params, headers=headers)
            response.raise_for_status()
            return response.json()
