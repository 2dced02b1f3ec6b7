from typing import Any, Dict, Optional

import httpx

from ..config import settings
from .base import DEFAULT_TIMEOUT_S, UPSTREAM_ERRORS, Provider


class CoingeckoProvider(Provider):
    """Coingecko API provider for native coin prices"""

    name = "coingecko"
    base_url = "https://api.coingecko.com/api/v3"

    def __init__(self, api_key: Optional[str] = None, timeout_s: float = DEFAULT_TIMEOUT_S) -> None:
        super().__init__(timeout_s)
        self.api_key = settings.coingecko_api_key if api_key is None else api_key

    def _build_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["X-CG-Demo-API-Key"] = self.api_key
        return headers

    async def ready(self) -> bool:
        return True  # API key is optional for basic tier

    async def health_check(self) -> Dict[str, Any]:
        return {"status": "configured", "auth": "demo-key" if self.api_key else "public"}

    async def fetch_usd_price(self, price_id: str) -> Optional[float]:
        """Current USD price for a Coingecko coin id; one attempt, no cache."""
        params = {"ids": price_id, "vs_currencies": "usd"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                response = await client.get(
                    f"{self.base_url}/simple/price",
                    headers=self._build_headers(),
                    params=params,
                )
                response.raise_for_status()
                data = response.json()

            price = (data.get(price_id) or {}).get("usd")
            return float(price) if price is not None else None
        except UPSTREAM_ERRORS as exc:
            return self._unavailable("price", exc)
