"""Repository protocol for transaction persistence."""

from __future__ import annotations

from typing import Protocol, Sequence

from wallet_backend.db.models import Transaction as TransactionModel
from wallet_backend.modules.common.pagination import Page, Pageable

SORTABLE_FIELDS = frozenset({"id", "reference_number", "amount", "status", "created_at"})


class TransactionRepository(Protocol):
    async def get_by_id(self, entity_id: int) -> TransactionModel | None:
        ...

    async def get_by_reference_number(self, reference_number: str) -> TransactionModel | None:
        """Transaction whose reference number equals ``reference_number``."""
        ...

    async def list_by_user_id(self, user_id: int) -> Sequence[TransactionModel]:
        """Transactions where ``user_id`` owns the source wallet or the destination wallet, by id."""
        ...

    async def exists_by_wallet_id(self, wallet_id: int) -> bool:
        """Whether any transaction has ``wallet_id`` as its source or destination wallet."""
        ...

    async def find_all(self, pageable: Pageable) -> Page[TransactionModel]:
        ...

    async def add(self, instance: TransactionModel) -> TransactionModel:
        ...
