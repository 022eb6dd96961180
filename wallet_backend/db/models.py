"""SQLAlchemy ORM models."""
import enum
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, Numeric, String, Table
from sqlalchemy.orm import relationship

from wallet_backend.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RoleType(str, enum.Enum):
    ROLE_USER = "ROLE_USER"
    ROLE_ADMIN = "ROLE_ADMIN"


class TransactionStatus(str, enum.Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class Role(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(Enum(RoleType, native_enum=False, length=20), unique=True, nullable=False)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now)

    roles = relationship("Role", secondary=user_roles, lazy="selectin")
    wallets = relationship("Wallet", back_populates="user", cascade="all, delete-orphan")


class Wallet(Base):
    __tablename__ = "wallets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    iban = Column(String(34), unique=True, nullable=False, index=True)
    name = Column(String(50), nullable=False)
    balance = Column(Numeric(19, 2), nullable=False, default=Decimal("0.00"))
    currency = Column(String(3), nullable=False, default="EUR")
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now)

    user = relationship("User", back_populates="wallets", lazy="selectin")


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    reference_number = Column(String(36), unique=True, nullable=False, default=generate_uuid)
    amount = Column(Numeric(19, 2), nullable=False)
    description = Column(String(255))
    status = Column(
        Enum(TransactionStatus, native_enum=False, length=20),
        nullable=False,
        default=TransactionStatus.SUCCESS,
    )
    from_wallet_id = Column(Integer, ForeignKey("wallets.id"), nullable=False, index=True)
    to_wallet_id = Column(Integer, ForeignKey("wallets.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now)

    from_wallet = relationship("Wallet", foreign_keys=[from_wallet_id], lazy="selectin")
    to_wallet = relationship("Wallet", foreign_keys=[to_wallet_id], lazy="selectin")
