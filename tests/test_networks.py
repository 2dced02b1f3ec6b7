import pytest

from wallet_tracker.services.networks import (
    NETWORKS,
    UnknownNetworkError,
    is_supported_network,
    resolve,
)


@pytest.mark.parametrize("network_id", ["ethereum", "polygon", "binance", "base", "solana"])
def test_resolve_every_supported_network(network_id):
    descriptor = resolve(network_id)
    assert descriptor.id == network_id
    assert descriptor.rpc_url.startswith("https://")


@pytest.mark.parametrize("network_id", ["dogecoin", "Ethereum", "ETH", "eth", "", None, " solana"])
def test_resolve_rejects_everything_else(network_id):
    with pytest.raises(UnknownNetworkError):
        resolve(network_id)
    assert is_supported_network(network_id) is False


def test_unknown_network_is_a_lookup_error():
    with pytest.raises(LookupError, match="dogecoin"):
        resolve("dogecoin")


def test_native_symbols_and_price_ids():
    assert resolve("ethereum").native_symbol == "ETH"
    assert resolve("base").native_symbol == "ETH"
    assert resolve("base").price_id == "ethereum"
    assert resolve("polygon").native_symbol == "MATIC"
    assert resolve("binance").native_symbol == "BNB"
    assert resolve("binance").price_id == "binancecoin"
    assert resolve("solana").native_symbol == "SOL"


def test_solana_is_the_only_non_evm_network():
    solana = resolve("solana")
    assert solana.is_evm is False
    assert solana.native_decimals == 9
    assert solana.covalent_chain_id is None
    evm = [n for n in NETWORKS.values() if n.is_evm]
    assert {n.id for n in evm} == {"ethereum", "polygon", "binance", "base"}
    assert all(n.native_decimals == 18 for n in evm)


def test_provider_chain_identifiers():
    assert resolve("ethereum").moralis_chain == "eth"
    assert resolve("binance").moralis_chain == "bsc"
    assert resolve("ethereum").covalent_chain_id == 1
    assert resolve("polygon").covalent_chain_id == 137
    assert resolve("binance").covalent_chain_id == 56
    assert resolve("base").covalent_chain_id == 8453


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        NETWORKS["dogecoin"] = NETWORKS["ethereum"]
    with pytest.raises(AttributeError):
        resolve("ethereum").rpc_url = "http://localhost"
