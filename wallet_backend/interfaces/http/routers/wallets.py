"""Wallet endpoints."""

from fastapi import APIRouter, Depends, Response, status

from wallet_backend.interfaces.http.deps import get_pageable, get_wallet_service
from wallet_backend.modules.common.pagination import Pageable
from wallet_backend.modules.wallets.service import WalletService
from wallet_backend.schemas import (
    CommandResponse,
    FundsRequest,
    PageResponse,
    TransactionRequest,
    WalletRequest,
    WalletResponse,
)

from .paging import to_page_response

router = APIRouter()


@router.get("/{wallet_id}", response_model=WalletResponse, summary="Get wallet by id")
async def find_by_id(wallet_id: int, service: WalletService = Depends(get_wallet_service)):
    return await service.find_by_id(wallet_id)


@router.get("/iban/{iban}", response_model=WalletResponse, summary="Get wallet by IBAN")
async def find_by_iban(iban: str, service: WalletService = Depends(get_wallet_service)):
    return await service.find_by_iban(iban)


@router.get("/users/{user_id}", response_model=list[WalletResponse], summary="List wallets of a user")
async def find_all_by_user_id(user_id: int, service: WalletService = Depends(get_wallet_service)):
    return await service.find_all_by_user_id(user_id)


@router.get("/", response_model=PageResponse[WalletResponse], summary="List wallets")
async def find_all(
    pageable: Pageable = Depends(get_pageable),
    service: WalletService = Depends(get_wallet_service),
):
    return to_page_response(await service.find_all(pageable))


@router.post("/", response_model=CommandResponse, status_code=status.HTTP_201_CREATED, summary="Create wallet")
async def create(request: WalletRequest, service: WalletService = Depends(get_wallet_service)):
    return await service.create(request)


@router.put("/{wallet_id}", response_model=CommandResponse, summary="Update wallet")
async def update(wallet_id: int, request: WalletRequest, service: WalletService = Depends(get_wallet_service)):
    return await service.update(wallet_id, request)


@router.delete("/{wallet_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete wallet")
async def delete_by_id(wallet_id: int, service: WalletService = Depends(get_wallet_service)):
    await service.delete_by_id(wallet_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/transfer", response_model=CommandResponse, summary="Transfer funds between wallets")
async def transfer_funds(request: TransactionRequest, service: WalletService = Depends(get_wallet_service)):
    return await service.transfer_funds(request)


@router.post("/addFunds", response_model=CommandResponse, summary="Add funds to a wallet")
async def add_funds(request: FundsRequest, service: WalletService = Depends(get_wallet_service)):
    return await service.add_funds(request)


@router.post("/withdrawFunds", response_model=CommandResponse, summary="Withdraw funds from a wallet")
async def withdraw_funds(request: FundsRequest, service: WalletService = Depends(get_wallet_service)):
    return await service.withdraw_funds(request)
