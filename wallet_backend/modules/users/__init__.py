"""User domain exports"""

from .repository import RoleRepository, UserRepository
from .service import UserService

__all__ = [
    "RoleRepository",
    "UserRepository",
    "UserService",
]
