"""Domain service for user management."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from wallet_backend.core import message_keys as keys
from wallet_backend.core.exceptions import ElementAlreadyExistsError, NotFoundError
from wallet_backend.core.messages import MessageSource
from wallet_backend.infrastructure.database.repositories.user_repository import (
    SqlRoleRepository,
    SqlUserRepository,
)
from wallet_backend.infrastructure.database.session import TransactionScope
from wallet_backend.modules.common.pagination import Page, Pageable, ensure_sortable
from wallet_backend.modules.common.results import ensure_not_empty
from wallet_backend.schemas import CommandResponse, UserRequest, UserResponse

from . import mapper
from .repository import SORTABLE_FIELDS, RoleRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UserService:
    scope: TransactionScope
    messages: MessageSource
    raise_on_empty: bool = True
    user_repository_factory: Callable[[AsyncSession], UserRepository] = SqlUserRepository
    role_repository_factory: Callable[[AsyncSession], RoleRepository] = SqlRoleRepository

    async def find_by_id(self, user_id: int) -> UserResponse:
        async with self.scope.read_only() as session:
            user = await self.user_repository_factory(session).get_by_id(user_id)
            if user is None:
                raise NotFoundError(self.messages.get(keys.ERROR_USER_NOT_FOUND))
            return mapper.to_response(user)

    async def find_all(self, pageable: Pageable) -> Page[UserResponse]:
        ensure_sortable(pageable, SORTABLE_FIELDS, self.messages)
        async with self.scope.read_only() as session:
            users = await self.user_repository_factory(session).find_all(pageable)
            ensure_not_empty(users, messages=self.messages, raise_on_empty=self.raise_on_empty)
            return users.map(mapper.to_response)

    async def create(self, request: UserRequest) -> CommandResponse:
        async with self.scope.read_write() as session:
            users = self.user_repository_factory(session)
            if await users.get_by_username(request.username) is not None:
                raise ElementAlreadyExistsError(self.messages.get(keys.ERROR_USERNAME_EXISTS, request.username))
            if await users.get_by_email(request.email) is not None:
                raise ElementAlreadyExistsError(self.messages.get(keys.ERROR_EMAIL_EXISTS, request.email))

            roles = await self.role_repository_factory(session).list_by_types(request.roles)
            if {role.type for role in roles} != set(request.roles):
                raise NotFoundError(self.messages.get(keys.ERROR_ROLE_NOT_FOUND))

            user = mapper.request_to_entity(request)
            user.roles = list(roles)
            await users.add(user)
            logger.info(self.messages.get(keys.INFO_USER_CREATED, user.username))
            return CommandResponse(id=user.id)
