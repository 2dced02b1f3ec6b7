"""Native coin balances straight from a public EVM JSON-RPC node."""

from typing import Optional

from .base import UPSTREAM_ERRORS, JsonRpcProvider

WEI_DECIMALS = 18


class EvmRpcProvider(JsonRpcProvider):
    """``eth_getBalance`` against any EVM-compatible endpoint."""

    name = "evm_rpc"

    async def fetch_native_balance(
        self, rpc_url: str, address: str, decimals: int = WEI_DECIMALS
    ) -> Optional[float]:
        """Balance of ``address`` in whole native coins, or None."""
        try:
            result = await self._call(rpc_url, "eth_getBalance", [address, "latest"])
            if not result:
                return None
            balance_wei = int(result, 16)
        except UPSTREAM_ERRORS as exc:
            return self._unavailable("eth_getBalance", exc)

        return balance_wei / 10 ** decimals
