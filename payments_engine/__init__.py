"""Replay a CSV of payment transactions and report client account balances."""

__version__ = "0.1.0"
__all__ = ["account", "transactions", "cli"]