"""Field mapping between wallet entities and wallet DTOs."""

from __future__ import annotations

from wallet_backend.core import message_keys as keys
from wallet_backend.core.exceptions import NotFoundError
from wallet_backend.core.messages import MessageSource
from wallet_backend.db.models import Wallet
from wallet_backend.modules.users import mapper as user_mapper
from wallet_backend.modules.users.repository import UserRepository
from wallet_backend.schemas import WalletRequest, WalletResponse


def to_response(entity: Wallet) -> WalletResponse:
    return WalletResponse(
        id=entity.id,
        iban=entity.iban,
        name=entity.name,
        balance=entity.balance,
        currency=entity.currency,
        created_at=entity.created_at,
        user=user_mapper.to_response(entity.user) if entity.user is not None else None,
    )


def to_entity(dto: WalletResponse) -> Wallet:
    return Wallet(
        id=dto.id,
        iban=dto.iban,
        name=dto.name,
        balance=dto.balance,
        currency=dto.currency,
        created_at=dto.created_at,
        user=user_mapper.to_entity(dto.user) if dto.user is not None else None,
    )


class WalletRequestMapper:
    """Builds wallet entities from requests, resolving the owner from storage."""

    def __init__(self, users: UserRepository, messages: MessageSource) -> None:
        self._users = users
        self._messages = messages

    async def to_entity(self, request: WalletRequest) -> Wallet:
        wallet = Wallet()
        await self.apply(request, wallet)
        return wallet

    async def apply(self, request: WalletRequest, wallet: Wallet) -> Wallet:
        """Copy request fields onto ``wallet`` in place."""
        user = await self._users.get_by_id(request.user_id)
        if user is None:
            raise NotFoundError(self._messages.get(keys.ERROR_USER_NOT_FOUND))
        wallet.iban = request.iban
        wallet.name = request.name
        wallet.balance = request.balance
        wallet.currency = request.currency
        wallet.user = user
        return wallet


__all__ = ["WalletRequestMapper", "to_entity", "to_response"]
