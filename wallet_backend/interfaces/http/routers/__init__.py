"""HTTP routers grouped by resource."""

from . import transactions, users, wallets

__all__ = ["transactions", "users", "wallets"]
