"""Transaction domain exports"""

from .repository import TransactionRepository
from .service import TransactionService

__all__ = [
    "TransactionRepository",
    "TransactionService",
]
