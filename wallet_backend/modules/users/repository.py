"""Repository protocols for users and roles."""

from __future__ import annotations

from typing import Collection, Protocol, Sequence

from wallet_backend.db.models import Role as RoleModel, RoleType, User as UserModel
from wallet_backend.modules.common.pagination import Page, Pageable

SORTABLE_FIELDS = frozenset({"id", "first_name", "last_name", "username", "email", "created_at"})


class RoleRepository(Protocol):
    async def list_by_types(self, types: Collection[RoleType]) -> Sequence[RoleModel]:
        """Roles whose type is one of ``types``."""
        ...


class UserRepository(Protocol):
    async def get_by_id(self, entity_id: int) -> UserModel | None:
        ...

    async def get_by_username(self, username: str) -> UserModel | None:
        """User whose username equals ``username`` exactly."""
        ...

    async def get_by_email(self, email: str) -> UserModel | None:
        """User whose email equals ``email``, ignoring case."""
        ...

    async def find_all(self, pageable: Pageable) -> Page[UserModel]:
        ...

    async def add(self, instance: UserModel) -> UserModel:
        ...
