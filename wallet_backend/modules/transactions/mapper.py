"""Field mapping between transaction entities and transaction DTOs."""

from __future__ import annotations

from wallet_backend.core import message_keys as keys
from wallet_backend.core.exceptions import NotFoundError
from wallet_backend.core.messages import MessageSource
from wallet_backend.db.models import (
    Transaction,
    TransactionStatus,
    Wallet,
    generate_uuid,
    utc_now,
)
from wallet_backend.modules.wallets import mapper as wallet_mapper
from wallet_backend.modules.wallets.repository import WalletRepository
from wallet_backend.schemas import TransactionRequest, TransactionResponse


def to_response(entity: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=entity.id,
        reference_number=entity.reference_number,
        amount=entity.amount,
        description=entity.description,
        status=entity.status,
        created_at=entity.created_at,
        from_wallet=wallet_mapper.to_response(entity.from_wallet) if entity.from_wallet is not None else None,
        to_wallet=wallet_mapper.to_response(entity.to_wallet) if entity.to_wallet is not None else None,
    )


def to_entity(dto: TransactionResponse) -> Transaction:
    return Transaction(
        id=dto.id,
        reference_number=dto.reference_number,
        amount=dto.amount,
        description=dto.description,
        status=dto.status,
        created_at=dto.created_at,
        from_wallet=wallet_mapper.to_entity(dto.from_wallet) if dto.from_wallet is not None else None,
        to_wallet=wallet_mapper.to_entity(dto.to_wallet) if dto.to_wallet is not None else None,
    )


class TransactionRequestMapper:
    """Builds new transactions from requests.

    Both wallets are looked up by IBAN; a missing wallet raises ``NotFoundError``.
    A fresh reference number is assigned on every call.
    """

    def __init__(self, wallets: WalletRepository, messages: MessageSource) -> None:
        self._wallets = wallets
        self._messages = messages

    async def to_entity(self, request: TransactionRequest) -> Transaction:
        from_wallet = await self._resolve_wallet(request.from_wallet_iban)
        to_wallet = await self._resolve_wallet(request.to_wallet_iban)
        return self.build(
            from_wallet=from_wallet,
            to_wallet=to_wallet,
            amount=request.amount,
            description=request.description,
        )

    @staticmethod
    def build(*, from_wallet: Wallet, to_wallet: Wallet, amount, description: str | None) -> Transaction:
        return Transaction(
            reference_number=generate_uuid(),
            amount=amount,
            description=description,
            status=TransactionStatus.SUCCESS,
            created_at=utc_now(),
            from_wallet=from_wallet,
            to_wallet=to_wallet,
        )

    async def _resolve_wallet(self, iban: str) -> Wallet:
        wallet = await self._wallets.get_by_iban(iban)
        if wallet is None:
            raise NotFoundError(self._messages.get(keys.ERROR_WALLET_NOT_FOUND))
        return wallet


__all__ = ["TransactionRequestMapper", "to_entity", "to_response"]
