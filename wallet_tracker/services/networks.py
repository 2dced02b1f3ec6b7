"""Static registry of the networks the tracker serves."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


class UnknownNetworkError(LookupError):
    """Raised when a network identifier is not in the registry."""

    def __init__(self, network_id: Optional[str]):
        super().__init__(f"Unsupported network '{network_id}'")
        self.network_id = network_id


@dataclass(frozen=True)
class NetworkDescriptor:
    """Connection facts for one supported network."""
    id: str
    rpc_url: str
    native_symbol: str
    price_id: str
    moralis_chain: str
    covalent_chain_id: Optional[int]
    native_decimals: int = 18
    is_evm: bool = True


_NETWORKS = {
    descriptor.id: descriptor
    for descriptor in (
        NetworkDescriptor(
            id="ethereum",
            rpc_url="https://cloudflare-eth.com",
            native_symbol="ETH",
            price_id="ethereum",
            moralis_chain="eth",
            covalent_chain_id=1,
        ),
        NetworkDescriptor(
            id="polygon",
            rpc_url="https://polygon-rpc.com",
            native_symbol="MATIC",
            price_id="matic-network",
            moralis_chain="polygon",
            covalent_chain_id=137,
        ),
        NetworkDescriptor(
            id="binance",
            rpc_url="https://bsc-dataseed.binance.org",
            native_symbol="BNB",
            price_id="binancecoin",
            moralis_chain="bsc",
            covalent_chain_id=56,
        ),
        NetworkDescriptor(
            id="base",
            rpc_url="https://mainnet.base.org",
            native_symbol="ETH",
            price_id="ethereum",
            moralis_chain="base",
            covalent_chain_id=8453,
        ),
        NetworkDescriptor(
            id="solana",
            rpc_url="https://api.mainnet-beta.solana.com",
            native_symbol="SOL",
            price_id="solana",
            moralis_chain="solana",
            covalent_chain_id=None,
            native_decimals=9,
            is_evm=False,
        ),
    )
}

NETWORKS: Mapping[str, NetworkDescriptor] = MappingProxyType(_NETWORKS)


def is_supported_network(network_id: Optional[str]) -> bool:
    """Exact match only: no aliases, no case folding."""

    return isinstance(network_id, str) and network_id in NETWORKS


def resolve(network_id: Optional[str]) -> NetworkDescriptor:
    """Return the descriptor for ``network_id`` or raise ``UnknownNetworkError``."""

    if not is_supported_network(network_id):
        raise UnknownNetworkError(network_id)
    return NETWORKS[network_id]


__all__ = [
    "NETWORKS",
    "NetworkDescriptor",
    "UnknownNetworkError",
    "is_supported_network",
    "resolve",
]
