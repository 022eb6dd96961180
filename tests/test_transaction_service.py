"""TransactionService lookups, creation and paging against a real database."""

import logging
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from helpers import IBAN_ALICE_MAIN, IBAN_ALICE_SAVINGS, IBAN_BOB_MAIN, IBAN_CAROL_MAIN
from wallet_backend.core.exceptions import EmptyResultError, InvalidSortPropertyError, NotFoundError
from wallet_backend.db.models import Transaction
from wallet_backend.modules.common.pagination import Pageable
from wallet_backend.modules.transactions.service import TransactionService
from wallet_backend.schemas import TransactionRequest


def _request(source: str, destination: str, amount: str = "25.50", description: str | None = None):
    return TransactionRequest(
        from_wallet_iban=source,
        to_wallet_iban=destination,
        amount=Decimal(amount),
        description=description,
    )


async def _count_rows(container) -> int:
    async with container.scope.read_only() as session:
        return (await session.execute(select(func.count(Transaction.id)))).scalar_one()


async def test_find_by_id_missing_raises_not_found(container):
    with pytest.raises(NotFoundError) as exc_info:
        await container.transactions.find_by_id(404)
    assert exc_info.value.message == "Requested transaction is not found"


async def test_create_persists_one_row_and_returns_its_id(container, people):
    result = await container.transactions.create(_request(IBAN_ALICE_MAIN, IBAN_BOB_MAIN, description="lunch"))

    assert await _count_rows(container) == 1
    found = await container.transactions.find_by_id(result.id)
    assert found.id == result.id
    assert found.from_wallet.iban == IBAN_ALICE_MAIN
    assert found.to_wallet.iban == IBAN_BOB_MAIN
    assert found.amount == Decimal("25.50")
    assert found.description == "lunch"
    assert found.reference_number
    assert found.from_wallet.user.full_name == "Alice Smith"


async def test_create_logs_both_ibans_and_amount(container, people, caplog):
    with caplog.at_level(logging.INFO, logger="wallet_backend.modules.transactions.service"):
        await container.transactions.create(_request(IBAN_ALICE_MAIN, IBAN_BOB_MAIN))

    records = [r for r in caplog.records if r.name == "wallet_backend.modules.transactions.service"]
    assert len(records) == 1
    assert records[0].getMessage() == f"Transaction from {IBAN_ALICE_MAIN} to {IBAN_BOB_MAIN} for amount 25.50 is created"


async def test_create_with_unknown_wallet_writes_nothing(container, people):
    with pytest.raises(NotFoundError):
        await container.transactions.create(_request(IBAN_ALICE_MAIN, "XX00UNKNOWN0000000000"))
    assert await _count_rows(container) == 0


async def test_reference_numbers_are_unique(container, people):
    first = await container.transactions.create(_request(IBAN_ALICE_MAIN, IBAN_BOB_MAIN))
    second = await container.transactions.create(_request(IBAN_ALICE_MAIN, IBAN_BOB_MAIN))

    first_ref = (await container.transactions.find_by_id(first.id)).reference_number
    second_ref = (await container.transactions.find_by_id(second.id)).reference_number
    assert first_ref != second_ref


async def test_find_by_reference_number(container, people):
    created = await container.transactions.create(_request(IBAN_BOB_MAIN, IBAN_ALICE_MAIN))
    reference = (await container.transactions.find_by_id(created.id)).reference_number

    found = await container.transactions.find_by_reference_number(reference)
    assert found.id == created.id

    with pytest.raises(NotFoundError):
        await container.transactions.find_by_reference_number("00000000-0000-0000-0000-000000000000")


async def test_find_all_by_user_id_matches_source_or_destination_owner(container, people):
    outgoing = await container.transactions.create(_request(IBAN_ALICE_MAIN, IBAN_BOB_MAIN))
    incoming = await container.transactions.create(_request(IBAN_BOB_MAIN, IBAN_ALICE_SAVINGS))
    unrelated = await container.transactions.create(_request(IBAN_BOB_MAIN, IBAN_CAROL_MAIN))

    alice_ids = [t.id for t in await container.transactions.find_all_by_user_id(people["alice"])]
    bob_ids = [t.id for t in await container.transactions.find_all_by_user_id(people["bob"])]

    assert alice_ids == [outgoing.id, incoming.id]
    assert bob_ids == [outgoing.id, incoming.id, unrelated.id]


async def test_find_all_by_user_id_without_transactions_is_an_error(container, people):
    # No records is reported as a failure, not as an empty list.
    with pytest.raises(EmptyResultError) as exc_info:
        await container.transactions.find_all_by_user_id(people["carol"])
    assert isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.message == "No records found"


async def test_find_all_by_user_id_returns_empty_list_when_policy_relaxed(container, people):
    service = TransactionService(container.scope, container.messages, raise_on_empty=False)
    assert await service.find_all_by_user_id(people["carol"]) == []


async def test_find_all_on_empty_table_raises(container):
    with pytest.raises(EmptyResultError):
        await container.transactions.find_all(Pageable(page=0, size=10))


async def test_find_all_pages_through_rows(container, people):
    ids = [
        (await container.transactions.create(_request(IBAN_ALICE_MAIN, IBAN_BOB_MAIN, amount=f"{n}.00"))).id
        for n in range(1, 6)
    ]

    first = await container.transactions.find_all(Pageable(page=0, size=2))
    last = await container.transactions.find_all(Pageable(page=2, size=2))

    assert first.total_elements == 5
    assert first.total_pages == 3
    assert [t.id for t in first.content] == ids[:2]
    assert [t.id for t in last.content] == ids[4:]

    with pytest.raises(EmptyResultError):
        await container.transactions.find_all(Pageable(page=3, size=2))


async def test_find_all_sorts_by_requested_property(container, people):
    for amount in ("3.00", "1.00", "2.00"):
        await container.transactions.create(_request(IBAN_ALICE_MAIN, IBAN_BOB_MAIN, amount=amount))

    page = await container.transactions.find_all(Pageable.of(page=0, size=10, sort=["amount,desc"]))
    assert [t.amount for t in page.content] == [Decimal("3.00"), Decimal("2.00"), Decimal("1.00")]


async def test_find_all_rejects_unknown_sort_property(container):
    with pytest.raises(InvalidSortPropertyError) as exc_info:
        await container.transactions.find_all(Pageable.of(sort=["password"]))
    assert "password" in exc_info.value.message


class _EmptyTransactionRepository:
    def __init__(self, session):
        self.session = session

    async def list_by_user_id(self, user_id):
        return []


async def test_empty_policy_applies_to_any_repository(container):
    service = TransactionService(
        container.scope,
        container.messages,
        repository_factory=_EmptyTransactionRepository,
    )
    with pytest.raises(EmptyResultError):
        await service.find_all_by_user_id(1)
