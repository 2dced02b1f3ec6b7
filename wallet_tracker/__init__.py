"""Multi-chain wallet balance and transaction aggregation API."""

__version__ = "0.1.0"
