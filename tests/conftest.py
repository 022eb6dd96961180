"""Shared fixtures: a fresh in-memory database and wired services per test."""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from helpers import (
    IBAN_ALICE_MAIN,
    IBAN_ALICE_SAVINGS,
    IBAN_BOB_MAIN,
    IBAN_CAROL_MAIN,
    create_user,
    create_wallet,
)
from wallet_backend.core.config import Settings
from wallet_backend.core.container import ApplicationContainer
from wallet_backend.infrastructure.database.session import enable_sqlite_foreign_keys


@pytest.fixture
def settings():
    return Settings(
        environment="test",
        database={"url": "sqlite+aiosqlite:///:memory:"},
    )


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    enable_sqlite_foreign_keys(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def container(settings, engine):
    container = ApplicationContainer.build(settings, engine=engine)
    await container.init_infrastructure()
    return container


@pytest.fixture
def messages(container):
    return container.messages


@pytest.fixture
async def people(container):
    """Three users: alice with two wallets, bob and carol with one each."""
    alice = await create_user(container, "alice", "Alice", "Smith")
    bob = await create_user(container, "bob", "Bob", "Jones")
    carol = await create_user(container, "carol", "Carol", "White")
    await create_wallet(container, alice, IBAN_ALICE_MAIN, "Main")
    await create_wallet(container, alice, IBAN_ALICE_SAVINGS, "Savings")
    await create_wallet(container, bob, IBAN_BOB_MAIN, "Main")
    await create_wallet(container, carol, IBAN_CAROL_MAIN, "Main", balance="0.00")
    return {"alice": alice, "bob": bob, "carol": carol}
