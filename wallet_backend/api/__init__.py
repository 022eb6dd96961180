from fastapi import APIRouter

from wallet_backend.interfaces.http.routers import transactions, users, wallets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(users.router, prefix="/users", tags=["users"])
    router.include_router(wallets.router, prefix="/wallets", tags=["wallets"])
    router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
    return router


__all__ = [
    "create_api_router",
]
