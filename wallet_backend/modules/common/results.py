"""Empty collection policy applied by listing operations."""

from __future__ import annotations

from typing import Sized, TypeVar

from wallet_backend.core import message_keys as keys
from wallet_backend.core.exceptions import EmptyResultError
from wallet_backend.core.messages import MessageSource

SizedT = TypeVar("SizedT", bound=Sized)


def ensure_not_empty(result: SizedT, *, messages: MessageSource, raise_on_empty: bool) -> SizedT:
    """Return ``result`` unchanged, or raise ``EmptyResultError`` when it is empty and the policy asks for it."""
    if raise_on_empty and len(result) == 0:
        raise EmptyResultError(messages.get(keys.ERROR_NO_RECORDS))
    return result


__all__ = ["ensure_not_empty"]
