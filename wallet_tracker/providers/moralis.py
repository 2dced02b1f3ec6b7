from typing import Any, Dict, List, Optional

from ..config import settings
from ..services.networks import NetworkDescriptor
from ..types import NativeHolding, TokenBalance, TokenPortfolio, TransactionRecord
from .base import UPSTREAM_ERRORS, TokenDataProvider, scale_amount


class MoralisProvider(TokenDataProvider):
    """Moralis Web3 Data API: wallet tokens and history across chains"""

    name = "moralis"
    base_url = "https://deep-index.moralis.io/api/v2.2"
    history_limit = 50

    def __init__(self, api_key: Optional[str] = None, timeout_s: Optional[float] = None) -> None:
        super().__init__(
            api_key=settings.moralis_api_key if api_key is None else api_key,
            timeout_s=timeout_s or settings.request_timeout_seconds,
        )

    def _headers(self) -> Dict[str, str]:
        return {"accept": "application/json", "X-API-Key": self.api_key}

    def supports_balances(self, network: NetworkDescriptor) -> bool:
        return True

    def supports_transactions(self, network: NetworkDescriptor) -> bool:
        # Solana history comes from the RPC signature list instead
        return network.is_evm

    async def fetch_token_balances(
        self, network: NetworkDescriptor, address: str
    ) -> Optional[TokenPortfolio]:
        """Non-zero token holdings, with the native coin reported separately."""
        if not await self.ready():
            return None

        try:
            payload = await self._get_json(
                f"{self.base_url}/wallets/{address}/tokens",
                params={
                    "chain": network.moralis_chain,
                    "exclude_spam": "true",
                    "currency": "usd",
                },
                headers=self._headers(),
            )
            return self._parse_tokens(payload.get("result") or [])
        except UPSTREAM_ERRORS as exc:
            return self._unavailable("token balances", exc)

    def _parse_tokens(self, items: List[Dict[str, Any]]) -> TokenPortfolio:
        tokens: List[TokenBalance] = []
        portfolio_value_usd = 0.0
        native: Optional[NativeHolding] = None

        for item in items:
            raw_balance = item.get("balance") or "0"
            if str(raw_balance) == "0":
                continue

            try:
                decimals = int(item.get("decimals") or 0)
                try:
                    balance = scale_amount(raw_balance, decimals)
                except ValueError:
                    # Some chains report an already formatted amount
                    balance = float(raw_balance)
                usd_value = float(item.get("usd_value") or 0)
            except (ValueError, TypeError) as exc:
                self.logger.warning(
                    "moralis skipping token %s: %s", item.get("symbol") or "?", exc
                )
                continue
            if balance == 0:
                continue

            if item.get("native_token"):
                # Kept out of the token list so the native value is counted once
                native = NativeHolding(balance=balance, usd_value=usd_value)
                continue

            portfolio_value_usd += usd_value
            tokens.append(TokenBalance(
                name=item.get("name") or item.get("token_address") or "",
                symbol=item.get("symbol") or "",
                balance=balance,
                decimals=decimals,
                usd_value=usd_value,
            ))

        return TokenPortfolio(
            tokens=tokens,
            portfolio_value_usd=portfolio_value_usd,
            native=native,
        )

    async def fetch_transactions(
        self, network: NetworkDescriptor, address: str
    ) -> Optional[List[TransactionRecord]]:
        if not await self.ready() or not self.supports_transactions(network):
            return None

        try:
            payload = await self._get_json(
                f"{self.base_url}/wallets/{address}/history",
                params={
                    "chain": network.moralis_chain,
                    "order": "DESC",
                    "limit": self.history_limit,
                },
                headers=self._headers(),
            )
            return [self._parse_transaction(tx) for tx in payload.get("result") or []]
        except UPSTREAM_ERRORS as exc:
            return self._unavailable("transactions", exc)

    @staticmethod
    def _parse_transaction(tx: Dict[str, Any]) -> TransactionRecord:
        value_usd = tx.get("value_usd")
        receipt_status = tx.get("receipt_status")
        return TransactionRecord(
            hash=tx.get("hash") or tx.get("transaction_hash") or "",
            from_address=tx.get("from_address") or tx.get("from") or "",
            to_address=tx.get("to_address") or tx.get("to") or "",
            value=float(tx.get("value") or 0),
            value_quote=float(value_usd) if value_usd else None,
            timestamp=tx.get("block_timestamp") or tx.get("block_signed_at") or "",
            successful=receipt_status is None or str(receipt_status) not in {"0", "false", "False"},
        )
