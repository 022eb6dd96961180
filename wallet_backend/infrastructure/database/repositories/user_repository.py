"""SQLAlchemy implementation of the user and role repositories."""

from __future__ import annotations

from typing import Collection, Sequence

from sqlalchemy import func, select

from wallet_backend.db.models import Role, RoleType, User

from .base import AsyncRepository


class SqlUserRepository(AsyncRepository[User]):
    model = User

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()


class SqlRoleRepository(AsyncRepository[Role]):
    model = Role

    async def list_by_types(self, types: Collection[RoleType]) -> Sequence[Role]:
        if not types:
            return []
        stmt = select(Role).where(Role.type.in_(list(types))).order_by(Role.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def ensure_types(self, types: Collection[RoleType]) -> list[Role]:
        """Insert a role for every type in ``types`` that has none yet; returns the inserted roles."""
        existing = {role.type for role in await self.list_by_types(types)}
        created = [Role(type=role_type) for role_type in types if role_type not in existing]
        if created:
            self.session.add_all(created)
            await self.session.flush()
        return created
