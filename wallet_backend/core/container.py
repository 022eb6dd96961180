"""Explicit wiring of settings, database and domain services."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from wallet_backend.core.config import Settings
from wallet_backend.core.messages import MessageSource
from wallet_backend.db.models import RoleType
from wallet_backend.infrastructure.database.repositories import SqlRoleRepository
from wallet_backend.infrastructure.database.session import (
    TransactionScope,
    build_engine,
    build_session_factory,
    init_db,
)
from wallet_backend.modules.transactions.service import TransactionService
from wallet_backend.modules.users.service import UserService
from wallet_backend.modules.wallets.service import WalletService


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    scope: TransactionScope
    messages: MessageSource
    users: UserService
    wallets: WalletService
    transactions: TransactionService

    @classmethod
    def build(cls, settings: Settings, engine: AsyncEngine | None = None) -> "ApplicationContainer":
        engine = engine or build_engine(settings)
        session_factory = build_session_factory(engine)
        scope = TransactionScope(session_factory)
        messages = MessageSource(settings.locale)
        raise_on_empty = settings.results.empty_collection_raises
        return cls(
            settings=settings,
            engine=engine,
            session_factory=session_factory,
            scope=scope,
            messages=messages,
            users=UserService(scope, messages, raise_on_empty),
            wallets=WalletService(scope, messages, raise_on_empty),
            transactions=TransactionService(scope, messages, raise_on_empty),
        )

    async def init_infrastructure(self) -> None:
        """Create tables and seed roles outside of production; deployments run the migrations instead."""
        if self.settings.environment == "production":
            return
        await init_db(self.engine)
        async with self.scope.read_write() as session:
            await SqlRoleRepository(session).ensure_types(list(RoleType))

    async def shutdown(self) -> None:
        await self.engine.dispose()


__all__ = ["ApplicationContainer"]
