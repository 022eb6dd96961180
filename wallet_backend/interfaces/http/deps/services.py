"""Service and paging dependency providers."""

from typing import Optional

from fastapi import Depends, HTTPException, Query, Request, status

from wallet_backend.core.container import ApplicationContainer
from wallet_backend.modules.common.pagination import Pageable
from wallet_backend.modules.transactions.service import TransactionService
from wallet_backend.modules.users.service import UserService
from wallet_backend.modules.wallets.service import WalletService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_user_service(container: ApplicationContainer = Depends(get_container)) -> UserService:
    return container.users


def get_wallet_service(container: ApplicationContainer = Depends(get_container)) -> WalletService:
    return container.wallets


def get_transaction_service(container: ApplicationContainer = Depends(get_container)) -> TransactionService:
    return container.transactions


def get_pageable(
    page: int = Query(0, ge=0, description="zero based page index"),
    size: Optional[int] = Query(None, ge=1),
    sort: Optional[list[str]] = Query(None, description="property[,asc|desc]"),
    container: ApplicationContainer = Depends(get_container),
) -> Pageable:
    pagination = container.settings.pagination
    size = min(size or pagination.default_size, pagination.max_size)
    try:
        return Pageable.of(page=page, size=size, sort=sort or ())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


__all__ = [
    "get_container",
    "get_pageable",
    "get_transaction_service",
    "get_user_service",
    "get_wallet_service",
]
