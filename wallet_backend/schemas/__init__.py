"""Pydantic schemas used across the project."""
from datetime import datetime
from decimal import Decimal
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from wallet_backend.db.models import RoleType, TransactionStatus

T = TypeVar("T")


class CommandResponse(BaseModel):
    """Result of a write operation: the identity of the affected entity."""

    id: int


class PageResponse(BaseModel, Generic[T]):
    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int


class RoleResponse(BaseModel):
    id: Optional[int] = None
    type: RoleType

    model_config = ConfigDict(from_attributes=True)


class UserRequest(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    username: str = Field(..., min_length=3, max_length=50)
    email: str = Field(..., min_length=3, max_length=100, pattern=r"^[^@\s]+@[^@\s]+$")
    roles: set[RoleType] = Field(default_factory=lambda: {RoleType.ROLE_USER}, min_length=1)


class UserResponse(BaseModel):
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    roles: list[RoleResponse] = Field(default_factory=list)


class WalletRequest(BaseModel):
    iban: str = Field(..., min_length=15, max_length=34)
    name: str = Field(..., min_length=1, max_length=50)
    balance: Decimal = Field(default=Decimal("0.00"), ge=0, decimal_places=2)
    currency: str = Field(default="EUR", min_length=3, max_length=3)
    user_id: int


class WalletResponse(BaseModel):
    id: Optional[int] = None
    iban: Optional[str] = None
    name: Optional[str] = None
    balance: Optional[Decimal] = None
    currency: Optional[str] = None
    created_at: Optional[datetime] = None
    user: Optional[UserResponse] = None


class TransactionRequest(BaseModel):
    from_wallet_iban: str = Field(..., min_length=15, max_length=34)
    to_wallet_iban: str = Field(..., min_length=15, max_length=34)
    amount: Decimal = Field(..., gt=0, decimal_places=2)
    description: Optional[str] = Field(default=None, max_length=255)


class FundsRequest(BaseModel):
    """Credit or debit of a single wallet."""

    iban: str = Field(..., min_length=15, max_length=34)
    amount: Decimal = Field(..., gt=0, decimal_places=2)
    description: Optional[str] = Field(default=None, max_length=255)


class TransactionResponse(BaseModel):
    id: Optional[int] = None
    reference_number: Optional[str] = None
    amount: Optional[Decimal] = None
    description: Optional[str] = None
    status: Optional[TransactionStatus] = None
    created_at: Optional[datetime] = None
    from_wallet: Optional[WalletResponse] = None
    to_wallet: Optional[WalletResponse] = None


class ErrorResponse(BaseModel):
    code: str
    message: str
