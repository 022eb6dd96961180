"""HTTP surface: routing, status codes and error bodies."""

import pytest
from httpx import ASGITransport, AsyncClient

from helpers import IBAN_ALICE_MAIN, IBAN_BOB_MAIN, IBAN_CAROL_MAIN
from wallet_backend.main import create_app


@pytest.fixture
async def client(container):
    app = create_app(container=container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


async def test_health(client):
    res = await client.get("/health")
    assert res.status_code == 200


async def test_create_and_get_user(client):
    res = await client.post(
        "/api/users/",
        json={"first_name": "Jane", "last_name": "Doe", "username": "jane", "email": "jane@example.com"},
    )
    assert res.status_code == 201
    user_id = res.json()["id"]

    res = await client.get(f"/api/users/{user_id}")
    assert res.status_code == 200
    assert res.json()["full_name"] == "Jane Doe"


async def test_missing_entity_returns_404(client):
    res = await client.get("/api/transactions/42")
    assert res.status_code == 404
    assert res.json() == {"code": "NotFoundError", "message": "Requested transaction is not found"}


async def test_empty_listing_returns_404(client):
    res = await client.get("/api/transactions/")
    assert res.status_code == 404
    assert res.json()["code"] == "EmptyResultError"


async def test_paged_listing(client, people):
    res = await client.get("/api/wallets/", params={"page": 0, "size": 3, "sort": "iban,desc"})
    assert res.status_code == 200
    body = res.json()
    assert body["total_elements"] == 4
    assert body["total_pages"] == 2
    assert body["content"][0]["iban"] == IBAN_BOB_MAIN


async def test_unknown_sort_property_returns_400(client, people):
    res = await client.get("/api/wallets/", params={"sort": "secret"})
    assert res.status_code == 400
    assert res.json()["code"] == "InvalidSortPropertyError"


async def test_duplicate_wallet_returns_409(client, people):
    res = await client.post(
        "/api/wallets/",
        json={"iban": IBAN_BOB_MAIN, "name": "Copy", "user_id": people["carol"]},
    )
    assert res.status_code == 409


async def test_deleting_wallet_with_transactions_returns_409(client, people):
    res = await client.post(
        "/api/transactions/",
        json={"from_wallet_iban": IBAN_ALICE_MAIN, "to_wallet_iban": IBAN_BOB_MAIN, "amount": "5.00"},
    )
    assert res.status_code == 201
    wallet_id = (await client.get(f"/api/wallets/iban/{IBAN_ALICE_MAIN}")).json()["id"]

    res = await client.delete(f"/api/wallets/{wallet_id}")
    assert res.status_code == 409
    assert res.json()["code"] == "ElementInUseError"


async def test_user_without_roles_is_rejected(client):
    res = await client.post(
        "/api/users/",
        json={"first_name": "Jane", "last_name": "Doe", "username": "jane", "email": "jane@example.com", "roles": []},
    )
    assert res.status_code == 422


async def test_transfer_and_lookup_by_reference(client, people):
    res = await client.post(
        "/api/wallets/transfer",
        json={"from_wallet_iban": IBAN_ALICE_MAIN, "to_wallet_iban": IBAN_CAROL_MAIN, "amount": "12.00"},
    )
    assert res.status_code == 200
    transaction_id = res.json()["id"]

    transaction = (await client.get(f"/api/transactions/{transaction_id}")).json()
    res = await client.get(f"/api/transactions/reference/{transaction['reference_number']}")
    assert res.status_code == 200
    assert res.json()["id"] == transaction_id

    res = await client.get(f"/api/transactions/users/{people['carol']}")
    assert [t["id"] for t in res.json()] == [transaction_id]


async def test_insufficient_funds_returns_422(client, people):
    res = await client.post(
        "/api/wallets/withdrawFunds",
        json={"iban": IBAN_CAROL_MAIN, "amount": "1.00"},
    )
    assert res.status_code == 422
    assert res.json()["code"] == "InsufficientFundsError"


async def test_create_transaction_endpoint(client, people):
    res = await client.post(
        "/api/transactions/",
        json={"from_wallet_iban": IBAN_BOB_MAIN, "to_wallet_iban": IBAN_ALICE_MAIN, "amount": "3.50"},
    )
    assert res.status_code == 201
    assert isinstance(res.json()["id"], int)


async def test_delete_wallet(client, people):
    wallet = (await client.get(f"/api/wallets/iban/{IBAN_CAROL_MAIN}")).json()
    res = await client.delete(f"/api/wallets/{wallet['id']}")
    assert res.status_code == 204
    assert (await client.get(f"/api/wallets/{wallet['id']}")).status_code == 404
