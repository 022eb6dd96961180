"""SQLAlchemy implementation for wallet domain"""

from __future__ import annotations

from sqlalchemy import func, select

from wallet_backend.db.models import Wallet

from .base import AsyncRepository


class SqlWalletRepository(AsyncRepository[Wallet]):
    model = Wallet

    async def get_by_iban(self, iban: str) -> Wallet | None:
        stmt = select(Wallet).where(func.upper(Wallet.iban) == iban.upper())
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_by_user_id(self, user_id: int) -> list[Wallet]:
        stmt = select(Wallet).where(Wallet.user_id == user_id).order_by(Wallet.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def exists_by_iban(self, iban: str, *, exclude_id: int | None = None) -> bool:
        stmt = select(Wallet.id).where(func.upper(Wallet.iban) == iban.upper())
        if exclude_id is not None:
            stmt = stmt.where(Wallet.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def exists_by_user_and_name(self, user_id: int, name: str, *, exclude_id: int | None = None) -> bool:
        stmt = select(Wallet.id).where(
            Wallet.user_id == user_id,
            func.lower(Wallet.name) == name.lower(),
        )
        if exclude_id is not None:
            stmt = stmt.where(Wallet.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None
