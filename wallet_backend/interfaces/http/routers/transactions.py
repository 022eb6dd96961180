"""Transaction endpoints."""

from fastapi import APIRouter, Depends, status

from wallet_backend.interfaces.http.deps import get_pageable, get_transaction_service
from wallet_backend.modules.common.pagination import Pageable
from wallet_backend.modules.transactions.service import TransactionService
from wallet_backend.schemas import CommandResponse, PageResponse, TransactionRequest, TransactionResponse

from .paging import to_page_response

router = APIRouter()


@router.get("/{transaction_id}", response_model=TransactionResponse, summary="Get transaction by id")
async def find_by_id(transaction_id: int, service: TransactionService = Depends(get_transaction_service)):
    return await service.find_by_id(transaction_id)


@router.get(
    "/reference/{reference_number}",
    response_model=TransactionResponse,
    summary="Get transaction by reference number",
)
async def find_by_reference_number(
    reference_number: str,
    service: TransactionService = Depends(get_transaction_service),
):
    return await service.find_by_reference_number(reference_number)


@router.get("/users/{user_id}", response_model=list[TransactionResponse], summary="List transactions of a user")
async def find_all_by_user_id(user_id: int, service: TransactionService = Depends(get_transaction_service)):
    return await service.find_all_by_user_id(user_id)


@router.get("/", response_model=PageResponse[TransactionResponse], summary="List transactions")
async def find_all(
    pageable: Pageable = Depends(get_pageable),
    service: TransactionService = Depends(get_transaction_service),
):
    return to_page_response(await service.find_all(pageable))


@router.post("/", response_model=CommandResponse, status_code=status.HTTP_201_CREATED, summary="Create transaction")
async def create(request: TransactionRequest, service: TransactionService = Depends(get_transaction_service)):
    return await service.create(request)
