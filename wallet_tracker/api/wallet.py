from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..services.aggregator import Aggregator, get_aggregator
from ..services.networks import is_supported_network
from ..types import BalancesResponse, ErrorResponse, TransactionsResponse

router = APIRouter(prefix="/api")

INVALID_QUERY = "Missing or invalid network/address"

_ERROR_RESPONSES = {400: {"model": ErrorResponse, "description": INVALID_QUERY}}


def _require_query(network: Optional[str], address: Optional[str]) -> None:
    """Reject absent parameters and networks outside the registry."""
    if not network or not address or not is_supported_network(network):
        raise HTTPException(status_code=400, detail=INVALID_QUERY)


@router.get("/balances", responses=_ERROR_RESPONSES)
async def get_balances_endpoint(
    network: Optional[str] = Query(None, description="Network identifier, e.g. ethereum or solana"),
    address: Optional[str] = Query(None, description="Wallet address to inspect"),
    aggregator: Aggregator = Depends(get_aggregator),
) -> BalancesResponse:
    """Native balance, USD value and token holdings for a wallet"""

    _require_query(network, address)
    return await aggregator.get_balances(network, address)


@router.get("/transactions", responses=_ERROR_RESPONSES)
async def get_transactions_endpoint(
    network: Optional[str] = Query(None, description="Network identifier, e.g. ethereum or solana"),
    address: Optional[str] = Query(None, description="Wallet address to inspect"),
    aggregator: Aggregator = Depends(get_aggregator),
) -> TransactionsResponse:
    """Recent transaction history for a wallet"""

    _require_query(network, address)
    return await aggregator.get_transactions(network, address)
