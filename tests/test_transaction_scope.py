"""Read-only scopes discard writes, read-write scopes commit or roll back."""

import pytest
from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError

from wallet_backend.db.models import User, Wallet
from wallet_backend.infrastructure.database.session import build_engine


def _user(username: str) -> User:
    return User(first_name="A", last_name="B", username=username, email=f"{username}@example.com")


async def _count_users(scope) -> int:
    async with scope.read_only() as session:
        return (await session.execute(select(func.count(User.id)))).scalar_one()


async def test_read_only_scope_discards_writes(container):
    async with container.scope.read_only() as session:
        session.add(_user("ghost"))
        await session.flush()

    assert await _count_users(container.scope) == 0


async def test_read_write_scope_commits(container):
    async with container.scope.read_write() as session:
        session.add(_user("kept"))

    assert await _count_users(container.scope) == 1


async def test_read_write_scope_rolls_back_on_error(container):
    with pytest.raises(RuntimeError):
        async with container.scope.read_write() as session:
            session.add(_user("lost"))
            await session.flush()
            raise RuntimeError("boom")

    assert await _count_users(container.scope) == 0


async def test_sqlite_engine_enforces_foreign_keys(settings):
    engine = build_engine(settings)
    try:
        async with engine.connect() as connection:
            assert (await connection.execute(text("PRAGMA foreign_keys"))).scalar_one() == 1
    finally:
        await engine.dispose()


async def test_write_with_dangling_reference_is_rejected(container):
    with pytest.raises(IntegrityError):
        async with container.scope.read_write() as session:
            session.add(Wallet(iban="GB33BUKB20201555555555", name="Orphan", user_id=999))
            await session.flush()
