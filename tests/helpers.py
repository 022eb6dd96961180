"""Builders for test data created through the public services."""

from decimal import Decimal

from wallet_backend.schemas import UserRequest, WalletRequest

IBAN_ALICE_MAIN = "GB33BUKB20201555555555"
IBAN_ALICE_SAVINGS = "DE89370400440532013000"
IBAN_BOB_MAIN = "NL91ABNA0417164300"
IBAN_CAROL_MAIN = "FR1420041010050500013M02606"


async def create_user(container, username: str, first_name: str = "Test", last_name: str = "User", **extra) -> int:
    request = UserRequest(
        first_name=first_name,
        last_name=last_name,
        username=username,
        email=f"{username}@example.com",
        **extra,
    )
    return (await container.users.create(request)).id


async def create_wallet(container, user_id: int, iban: str, name: str, balance: str = "100.00") -> int:
    request = WalletRequest(iban=iban, name=name, balance=Decimal(balance), user_id=user_id)
    return (await container.wallets.create(request)).id
