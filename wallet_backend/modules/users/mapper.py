"""Field mapping between user/role entities and their DTOs."""

from __future__ import annotations

from wallet_backend.db.models import Role, User
from wallet_backend.schemas import RoleResponse, UserRequest, UserResponse


def role_to_response(entity: Role) -> RoleResponse:
    return RoleResponse(id=entity.id, type=entity.type)


def role_to_entity(dto: RoleResponse) -> Role:
    return Role(id=dto.id, type=dto.type)


def to_response(entity: User) -> UserResponse:
    dto = UserResponse(
        id=entity.id,
        first_name=entity.first_name,
        last_name=entity.last_name,
        username=entity.username,
        email=entity.email,
        created_at=entity.created_at,
        roles=[role_to_response(role) for role in entity.roles],
    )
    set_full_name(dto, entity)
    return dto


def to_entity(dto: UserResponse) -> User:
    # full_name is presentation only and has no column to map back to.
    return User(
        id=dto.id,
        first_name=dto.first_name,
        last_name=dto.last_name,
        username=dto.username,
        email=dto.email,
        created_at=dto.created_at,
        roles=[role_to_entity(role) for role in dto.roles],
    )


def set_full_name(dto: UserResponse, entity: User) -> None:
    """Derive ``full_name`` as first and last name joined by one space, unguarded."""
    dto.full_name = "{0} {1}".format(entity.first_name, entity.last_name)


def request_to_entity(request: UserRequest) -> User:
    """Plain fields only; roles are resolved by the service."""
    return User(
        first_name=request.first_name,
        last_name=request.last_name,
        username=request.username,
        email=request.email,
    )


__all__ = [
    "request_to_entity",
    "role_to_entity",
    "role_to_response",
    "set_full_name",
    "to_entity",
    "to_response",
]
