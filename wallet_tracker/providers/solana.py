"""Solana JSON-RPC access: SOL balances and recent signatures."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .base import UPSTREAM_ERRORS, JsonRpcProvider

LAMPORT_DECIMALS = 9
DEFAULT_SIGNATURE_LIMIT = 20


class SolanaRpcProvider(JsonRpcProvider):
    """Public Solana RPC node; no API key involved."""

    name = "solana_rpc"

    async def fetch_balance(
        self, rpc_url: str, address: str, decimals: int = LAMPORT_DECIMALS
    ) -> Optional[float]:
        """SOL held by ``address``, or None when the node can't tell us."""
        try:
            result = await self._call(rpc_url, "getBalance", [address])
            lamports = (result or {}).get("value")
            if lamports is None:
                return None
            return int(lamports) / 10 ** decimals
        except UPSTREAM_ERRORS as exc:
            return self._unavailable("getBalance", exc)

    async def fetch_signatures(
        self,
        rpc_url: str,
        address: str,
        limit: int = DEFAULT_SIGNATURE_LIMIT,
    ) -> Optional[List[Dict[str, Any]]]:
        """Most recent signature entries for ``address``, newest first.

        Entries are returned exactly as the node sent them (``signature``,
        ``slot``, ``blockTime``, ``err``, ...). Anything in the list that is
        not an object is dropped.
        """
        try:
            result = await self._call(
                rpc_url,
                "getSignaturesForAddress",
                [address, {"limit": limit}],
            )
        except UPSTREAM_ERRORS as exc:
            return self._unavailable("getSignaturesForAddress", exc)

        if result is None:
            return []
        if not isinstance(result, list):
            self.logger.warning("solana_rpc getSignaturesForAddress returned %s", type(result).__name__)
            return None

        entries = [entry for entry in result if isinstance(entry, dict)]
        if len(entries) != len(result):
            self.logger.warning(
                "solana_rpc dropped %d malformed signature entries", len(result) - len(entries)
            )
        return entries
