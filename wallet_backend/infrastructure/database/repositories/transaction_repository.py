"""SQLAlchemy implementation for transactions."""

from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.orm import aliased

from wallet_backend.db.models import Transaction, Wallet

from .base import AsyncRepository


class SqlTransactionRepository(AsyncRepository[Transaction]):
    model = Transaction

    async def get_by_reference_number(self, reference_number: str) -> Transaction | None:
        stmt = select(Transaction).where(Transaction.reference_number == reference_number)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_user_id(self, user_id: int) -> list[Transaction]:
        source = aliased(Wallet)
        destination = aliased(Wallet)
        stmt = (
            select(Transaction)
            .join(source, Transaction.from_wallet_id == source.id)
            .join(destination, Transaction.to_wallet_id == destination.id)
            .where(or_(source.user_id == user_id, destination.user_id == user_id))
            .order_by(Transaction.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def exists_by_wallet_id(self, wallet_id: int) -> bool:
        stmt = select(Transaction.id).where(
            or_(Transaction.from_wallet_id == wallet_id, Transaction.to_wallet_id == wallet_id)
        )
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None
