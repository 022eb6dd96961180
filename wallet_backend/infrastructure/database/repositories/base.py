"""Generic SQLAlchemy repository with id lookup, writes and paged listing."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_backend.modules.common.pagination import Page, Pageable

ModelT = TypeVar("ModelT")


class AsyncRepository(Generic[ModelT]):
    """Base repository exposing the SQLAlchemy session."""

    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def get_by_id(self, entity_id: int) -> ModelT | None:
        return await self.session.get(self.model, entity_id)

    async def add(self, instance: ModelT) -> ModelT:
        self.session.add(instance)
        await self.session.flush()
        return instance

    async def delete(self, instance: ModelT) -> None:
        await self.session.delete(instance)
        await self.session.flush()

    async def find_all(self, pageable: Pageable) -> Page[ModelT]:
        """All rows, ordered by ``pageable.sort`` or by primary key."""
        return await self._paginate(select(self.model), pageable)

    async def _paginate(self, stmt: Select[Any], pageable: Pageable) -> Page[ModelT]:
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        query = stmt.order_by(*self._order_by(pageable)).offset(pageable.offset).limit(pageable.size)
        result = await self.session.execute(query)
        return Page(content=list(result.scalars().all()), pageable=pageable, total_elements=int(total))

    def _order_by(self, pageable: Pageable) -> list[Any]:
        clauses: list[Any] = []
        for order in pageable.sort:
            column = getattr(self.model, order.property)
            clauses.append(column.desc() if order.direction == "desc" else column.asc())
        # Primary key as the final tie breaker keeps page boundaries stable.
        clauses.append(getattr(self.model, "id").asc())
        return clauses


__all__ = ["AsyncRepository"]
