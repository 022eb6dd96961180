"""User endpoints."""

from fastapi import APIRouter, Depends, status

from wallet_backend.interfaces.http.deps import get_pageable, get_user_service
from wallet_backend.modules.common.pagination import Pageable
from wallet_backend.modules.users.service import UserService
from wallet_backend.schemas import CommandResponse, PageResponse, UserRequest, UserResponse

from .paging import to_page_response

router = APIRouter()


@router.get("/{user_id}", response_model=UserResponse, summary="Get user by id")
async def find_by_id(user_id: int, service: UserService = Depends(get_user_service)):
    return await service.find_by_id(user_id)


@router.get("/", response_model=PageResponse[UserResponse], summary="List users")
async def find_all(
    pageable: Pageable = Depends(get_pageable),
    service: UserService = Depends(get_user_service),
):
    return to_page_response(await service.find_all(pageable))


@router.post("/", response_model=CommandResponse, status_code=status.HTTP_201_CREATED, summary="Create user")
async def create(request: UserRequest, service: UserService = Depends(get_user_service)):
    return await service.create(request)
