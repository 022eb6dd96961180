"""Domain service for transaction lookups and creation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from wallet_backend.core import message_keys as keys
from wallet_backend.core.exceptions import NotFoundError
from wallet_backend.core.messages import MessageSource
from wallet_backend.infrastructure.database.repositories.transaction_repository import SqlTransactionRepository
from wallet_backend.infrastructure.database.repositories.wallet_repository import SqlWalletRepository
from wallet_backend.infrastructure.database.session import TransactionScope
from wallet_backend.modules.common.pagination import Page, Pageable, ensure_sortable
from wallet_backend.modules.common.results import ensure_not_empty
from wallet_backend.modules.wallets.repository import WalletRepository
from wallet_backend.schemas import CommandResponse, TransactionRequest, TransactionResponse

from . import mapper
from .repository import SORTABLE_FIELDS, TransactionRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransactionService:
    """Read operations run in read-only scopes; ``create`` runs in a read-write scope.

    Empty collection and page results raise ``EmptyResultError`` unless
    ``raise_on_empty`` is turned off.
    """

    scope: TransactionScope
    messages: MessageSource
    raise_on_empty: bool = True
    repository_factory: Callable[[AsyncSession], TransactionRepository] = SqlTransactionRepository
    wallet_repository_factory: Callable[[AsyncSession], WalletRepository] = SqlWalletRepository

    async def find_by_id(self, transaction_id: int) -> TransactionResponse:
        async with self.scope.read_only() as session:
            transaction = await self.repository_factory(session).get_by_id(transaction_id)
            if transaction is None:
                raise NotFoundError(self.messages.get(keys.ERROR_TRANSACTION_NOT_FOUND))
            return mapper.to_response(transaction)

    async def find_by_reference_number(self, reference_number: str) -> TransactionResponse:
        async with self.scope.read_only() as session:
            transaction = await self.repository_factory(session).get_by_reference_number(reference_number)
            if transaction is None:
                raise NotFoundError(self.messages.get(keys.ERROR_TRANSACTION_NOT_FOUND))
            return mapper.to_response(transaction)

    async def find_all_by_user_id(self, user_id: int) -> list[TransactionResponse]:
        async with self.scope.read_only() as session:
            transactions = await self.repository_factory(session).list_by_user_id(user_id)
            ensure_not_empty(transactions, messages=self.messages, raise_on_empty=self.raise_on_empty)
            return [mapper.to_response(transaction) for transaction in transactions]

    async def find_all(self, pageable: Pageable) -> Page[TransactionResponse]:
        ensure_sortable(pageable, SORTABLE_FIELDS, self.messages)
        async with self.scope.read_only() as session:
            transactions = await self.repository_factory(session).find_all(pageable)
            ensure_not_empty(transactions, messages=self.messages, raise_on_empty=self.raise_on_empty)
            return transactions.map(mapper.to_response)

    async def create(self, request: TransactionRequest) -> CommandResponse:
        async with self.scope.read_write() as session:
            request_mapper = mapper.TransactionRequestMapper(self.wallet_repository_factory(session), self.messages)
            transaction = await request_mapper.to_entity(request)
            await self.repository_factory(session).add(transaction)
            logger.info(
                self.messages.get(
                    keys.INFO_TRANSACTION_CREATED,
                    transaction.from_wallet.iban,
                    transaction.to_wallet.iban,
                    transaction.amount,
                )
            )
            return CommandResponse(id=transaction.id)
