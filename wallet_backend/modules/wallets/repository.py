"""Repository protocol for wallet operations."""

from __future__ import annotations

from typing import Protocol, Sequence

from wallet_backend.db.models import Wallet as WalletModel
from wallet_backend.modules.common.pagination import Page, Pageable

SORTABLE_FIELDS = frozenset({"id", "iban", "name", "balance", "currency", "created_at"})


class WalletRepository(Protocol):
    async def get_by_id(self, entity_id: int) -> WalletModel | None:
        ...

    async def get_by_iban(self, iban: str) -> WalletModel | None:
        """Wallet whose IBAN equals ``iban``, ignoring case."""
        ...

    async def list_by_user_id(self, user_id: int) -> Sequence[WalletModel]:
        """Wallets owned by ``user_id``, by id."""
        ...

    async def exists_by_iban(self, iban: str, *, exclude_id: int | None = None) -> bool:
        """Whether another wallet (not ``exclude_id``) already uses ``iban``, ignoring case."""
        ...

    async def exists_by_user_and_name(self, user_id: int, name: str, *, exclude_id: int | None = None) -> bool:
        """Whether ``user_id`` already owns a wallet named ``name`` (ignoring case), other than ``exclude_id``."""
        ...

    async def find_all(self, pageable: Pageable) -> Page[WalletModel]:
        ...

    async def add(self, instance: WalletModel) -> WalletModel:
        ...

    async def delete(self, instance: WalletModel) -> None:
        ...
