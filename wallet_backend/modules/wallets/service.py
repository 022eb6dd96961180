"""Wallet domain service"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from wallet_backend.core import message_keys as keys
from wallet_backend.core.exceptions import ElementAlreadyExistsError, ElementInUseError, NotFoundError
from wallet_backend.core.messages import MessageSource
from wallet_backend.db.models import Wallet as WalletModel
from wallet_backend.infrastructure.database.repositories.transaction_repository import SqlTransactionRepository
from wallet_backend.infrastructure.database.repositories.user_repository import SqlUserRepository
from wallet_backend.infrastructure.database.repositories.wallet_repository import SqlWalletRepository
from wallet_backend.infrastructure.database.session import TransactionScope
from wallet_backend.modules.common.pagination import Page, Pageable, ensure_sortable
from wallet_backend.modules.common.results import ensure_not_empty
from wallet_backend.modules.transactions.mapper import TransactionRequestMapper
from wallet_backend.modules.transactions.repository import TransactionRepository
from wallet_backend.modules.users.repository import UserRepository
from wallet_backend.schemas import (
    CommandResponse,
    FundsRequest,
    TransactionRequest,
    WalletRequest,
    WalletResponse,
)

from . import mapper
from .exceptions import InsufficientFundsError, InvalidTransferError
from .repository import SORTABLE_FIELDS, WalletRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WalletService:
    scope: TransactionScope
    messages: MessageSource
    raise_on_empty: bool = True
    repository_factory: Callable[[AsyncSession], WalletRepository] = SqlWalletRepository
    user_repository_factory: Callable[[AsyncSession], UserRepository] = SqlUserRepository
    transaction_repository_factory: Callable[[AsyncSession], TransactionRepository] = SqlTransactionRepository

    async def find_by_id(self, wallet_id: int) -> WalletResponse:
        async with self.scope.read_only() as session:
            wallet = await self._require(self.repository_factory(session), wallet_id)
            return mapper.to_response(wallet)

    async def find_by_iban(self, iban: str) -> WalletResponse:
        async with self.scope.read_only() as session:
            wallet = await self._require_iban(self.repository_factory(session), iban)
            return mapper.to_response(wallet)

    async def find_all_by_user_id(self, user_id: int) -> list[WalletResponse]:
        async with self.scope.read_only() as session:
            wallets = await self.repository_factory(session).list_by_user_id(user_id)
            ensure_not_empty(wallets, messages=self.messages, raise_on_empty=self.raise_on_empty)
            return [mapper.to_response(wallet) for wallet in wallets]

    async def find_all(self, pageable: Pageable) -> Page[WalletResponse]:
        ensure_sortable(pageable, SORTABLE_FIELDS, self.messages)
        async with self.scope.read_only() as session:
            wallets = await self.repository_factory(session).find_all(pageable)
            ensure_not_empty(wallets, messages=self.messages, raise_on_empty=self.raise_on_empty)
            return wallets.map(mapper.to_response)

    async def create(self, request: WalletRequest) -> CommandResponse:
        async with self.scope.read_write() as session:
            repository = self.repository_factory(session)
            await self._check_unique(repository, request)
            request_mapper = mapper.WalletRequestMapper(self.user_repository_factory(session), self.messages)
            wallet = await request_mapper.to_entity(request)
            await repository.add(wallet)
            logger.info(self.messages.get(keys.INFO_WALLET_CREATED, wallet.iban))
            return CommandResponse(id=wallet.id)

    async def update(self, wallet_id: int, request: WalletRequest) -> CommandResponse:
        async with self.scope.read_write() as session:
            repository = self.repository_factory(session)
            wallet = await self._require(repository, wallet_id)
            await self._check_unique(repository, request, exclude_id=wallet.id)
            request_mapper = mapper.WalletRequestMapper(self.user_repository_factory(session), self.messages)
            await request_mapper.apply(request, wallet)
            await session.flush()
            logger.info(self.messages.get(keys.INFO_WALLET_UPDATED, wallet.iban))
            return CommandResponse(id=wallet.id)

    async def delete_by_id(self, wallet_id: int) -> None:
        async with self.scope.read_write() as session:
            repository = self.repository_factory(session)
            wallet = await self._require(repository, wallet_id)
            if await self.transaction_repository_factory(session).exists_by_wallet_id(wallet.id):
                raise ElementInUseError(self.messages.get(keys.ERROR_WALLET_IN_USE, wallet.iban))
            await repository.delete(wallet)
            logger.info(self.messages.get(keys.INFO_WALLET_DELETED, wallet.iban))

    async def transfer_funds(self, request: TransactionRequest) -> CommandResponse:
        """Move ``request.amount`` between two wallets and record the transaction.

        Returns the id of the recorded transaction.
        """
        async with self.scope.read_write() as session:
            request_mapper = TransactionRequestMapper(self.repository_factory(session), self.messages)
            transaction = await request_mapper.to_entity(request)
            source, destination = transaction.from_wallet, transaction.to_wallet
            if source.id == destination.id:
                raise InvalidTransferError(self.messages.get(keys.ERROR_SAME_WALLET_TRANSFER))
            self._debit(source, request.amount)
            destination.balance = destination.balance + request.amount

            await self.transaction_repository_factory(session).add(transaction)
            logger.info(
                self.messages.get(keys.INFO_TRANSACTION_CREATED, source.iban, destination.iban, request.amount)
            )
            return CommandResponse(id=transaction.id)

    async def add_funds(self, request: FundsRequest) -> CommandResponse:
        """Credit one wallet; returns the wallet id."""
        async with self.scope.read_write() as session:
            wallet = await self._require_iban(self.repository_factory(session), request.iban)
            wallet.balance = wallet.balance + request.amount
            await self._record_self_transaction(session, wallet, request)
            logger.info(self.messages.get(keys.INFO_FUNDS_ADDED, wallet.iban, request.amount))
            return CommandResponse(id=wallet.id)

    async def withdraw_funds(self, request: FundsRequest) -> CommandResponse:
        """Debit one wallet; returns the wallet id."""
        async with self.scope.read_write() as session:
            wallet = await self._require_iban(self.repository_factory(session), request.iban)
            self._debit(wallet, request.amount)
            await self._record_self_transaction(session, wallet, request)
            logger.info(self.messages.get(keys.INFO_FUNDS_WITHDRAWN, wallet.iban, request.amount))
            return CommandResponse(id=wallet.id)

    async def _record_self_transaction(self, session: AsyncSession, wallet: WalletModel, request: FundsRequest) -> None:
        transaction = TransactionRequestMapper.build(
            from_wallet=wallet,
            to_wallet=wallet,
            amount=request.amount,
            description=request.description,
        )
        await self.transaction_repository_factory(session).add(transaction)

    def _debit(self, wallet: WalletModel, amount: Decimal) -> None:
        if wallet.balance < amount:
            raise InsufficientFundsError(self.messages.get(keys.ERROR_INSUFFICIENT_FUNDS, wallet.iban))
        wallet.balance = wallet.balance - amount

    async def _check_unique(
        self,
        repository: WalletRepository,
        request: WalletRequest,
        *,
        exclude_id: int | None = None,
    ) -> None:
        if await repository.exists_by_iban(request.iban, exclude_id=exclude_id):
            raise ElementAlreadyExistsError(self.messages.get(keys.ERROR_WALLET_IBAN_EXISTS, request.iban))
        if await repository.exists_by_user_and_name(request.user_id, request.name, exclude_id=exclude_id):
            raise ElementAlreadyExistsError(self.messages.get(keys.ERROR_WALLET_NAME_EXISTS, request.name))

    async def _require(self, repository: WalletRepository, wallet_id: int) -> WalletModel:
        wallet = await repository.get_by_id(wallet_id)
        if wallet is None:
            raise NotFoundError(self.messages.get(keys.ERROR_WALLET_NOT_FOUND))
        return wallet

    async def _require_iban(self, repository: WalletRepository, iban: str) -> WalletModel:
        wallet = await repository.get_by_iban(iban)
        if wallet is None:
            raise NotFoundError(self.messages.get(keys.ERROR_WALLET_NOT_FOUND))
        return wallet
