"""Wallet domain exports"""

from .exceptions import InsufficientFundsError, InvalidTransferError, WalletError
from .repository import WalletRepository
from .service import WalletService

__all__ = [
    "InsufficientFundsError",
    "InvalidTransferError",
    "WalletError",
    "WalletRepository",
    "WalletService",
]
