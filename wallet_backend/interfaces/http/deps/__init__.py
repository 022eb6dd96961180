"""Reusable FastAPI dependencies."""

from .services import (
    get_container,
    get_pageable,
    get_transaction_service,
    get_user_service,
    get_wallet_service,
)

__all__ = [
    "get_container",
    "get_pageable",
    "get_transaction_service",
    "get_user_service",
    "get_wallet_service",
]
