from typing import Any, Dict, List, Optional

from ..config import settings
from ..services.networks import NetworkDescriptor
from ..types import TokenBalance, TokenPortfolio, TransactionRecord
from .base import UPSTREAM_ERRORS, TokenDataProvider, scale_amount


class CovalentProvider(TokenDataProvider):
    """Covalent unified API, addressed by numeric EVM chain id"""

    name = "covalent"
    base_url = "https://api.covalenthq.com/v1"

    def __init__(self, api_key: Optional[str] = None, timeout_s: Optional[float] = None) -> None:
        super().__init__(
            api_key=settings.covalent_api_key if api_key is None else api_key,
            timeout_s=timeout_s or settings.request_timeout_seconds,
        )

    def supports_balances(self, network: NetworkDescriptor) -> bool:
        return network.is_evm and network.covalent_chain_id is not None

    def supports_transactions(self, network: NetworkDescriptor) -> bool:
        return self.supports_balances(network)

    async def fetch_token_balances(
        self, network: NetworkDescriptor, address: str
    ) -> Optional[TokenPortfolio]:
        if not await self.ready() or not self.supports_balances(network):
            return None

        try:
            payload = await self._get_json(
                f"{self.base_url}/{network.covalent_chain_id}/address/{address}/balances_v2/",
                params={
                    "quote-currency": "USD",
                    "format": "JSON",
                    "nft": "false",
                    "no-nft-fetch": "true",
                    "key": self.api_key,
                },
            )
            items = (payload.get("data") or {}).get("items") or []
            return self._parse_balances(items)
        except UPSTREAM_ERRORS as exc:
            return self._unavailable("token balances", exc)

    def _parse_balances(self, items: List[Dict[str, Any]]) -> TokenPortfolio:
        tokens: List[TokenBalance] = []
        portfolio_value_usd = 0.0

        for item in items:
            # Dust with an explicit zero quote is dropped along with empty balances
            if str(item.get("balance")) == "0" or item.get("quote") == 0:
                continue

            try:
                decimals = int(item.get("contract_decimals") or 0)
                balance = scale_amount(item.get("balance") or "0", decimals)
                quote = float(item.get("quote") or 0)
            except (ValueError, TypeError) as exc:
                self.logger.warning(
                    "covalent skipping token %s: %s",
                    item.get("contract_ticker_symbol") or "?",
                    exc,
                )
                continue
            if balance == 0:
                continue

            portfolio_value_usd += quote
            tokens.append(TokenBalance(
                name=item.get("contract_name") or "",
                symbol=item.get("contract_ticker_symbol") or "",
                balance=balance,
                decimals=decimals,
                usd_value=quote,
            ))

        return TokenPortfolio(tokens=tokens, portfolio_value_usd=portfolio_value_usd)

    async def fetch_transactions(
        self, network: NetworkDescriptor, address: str
    ) -> Optional[List[TransactionRecord]]:
        """First page (up to 100 entries) of transactions, newest first."""
        if not await self.ready() or not self.supports_transactions(network):
            return None

        try:
            payload = await self._get_json(
                f"{self.base_url}/{network.covalent_chain_id}/address/{address}/transactions_v3/page/0/",
                params={"quote-currency": "USD", "format": "JSON", "key": self.api_key},
            )
            items = (payload.get("data") or {}).get("items") or []
            return [
                TransactionRecord(
                    hash=tx.get("tx_hash") or "",
                    from_address=tx.get("from_address") or "",
                    to_address=tx.get("to_address"),
                    value=_optional_float(tx.get("value")),
                    value_quote=_optional_float(tx.get("value_quote")),
                    gas_spent=_optional_float(tx.get("gas_spent")),
                    gas_quote=_optional_float(tx.get("gas_quote")),
                    successful=bool(tx.get("successful")),
                    timestamp=tx.get("block_signed_at"),
                )
                for tx in items
            ]
        except UPSTREAM_ERRORS as exc:
            return self._unavailable("transactions", exc)


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)
