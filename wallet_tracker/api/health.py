from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..services.aggregator import Aggregator, get_aggregator

router = APIRouter()


@router.get("/healthz")
async def health_check(aggregator: Aggregator = Depends(get_aggregator)) -> Dict[str, Any]:
    """Report which upstream sources are configured; no upstream calls are made"""

    provider_status = {}
    for provider in (aggregator.evm_rpc, aggregator.solana_rpc, aggregator.prices, *aggregator.providers):
        provider_status[provider.name] = await provider.health_check()

    # RPC and pricing always work; token data providers are optional
    configured_providers = [
        provider.name for provider in aggregator.providers if await provider.ready()
    ]

    return {
        "status": "healthy" if configured_providers else "degraded",
        "providers": provider_status,
        "token_data_provider": configured_providers[0] if configured_providers else None,
    }
