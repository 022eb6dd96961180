"""SQLAlchemy-backed repository implementations."""

from .base import AsyncRepository
from .transaction_repository import SqlTransactionRepository
from .user_repository import SqlRoleRepository, SqlUserRepository
from .wallet_repository import SqlWalletRepository

__all__ = [
    "AsyncRepository",
    "SqlRoleRepository",
    "SqlTransactionRepository",
    "SqlUserRepository",
    "SqlWalletRepository",
]
