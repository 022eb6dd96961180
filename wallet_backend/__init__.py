"""Wallet and transaction management backend."""

__version__ = "0.1.0"
