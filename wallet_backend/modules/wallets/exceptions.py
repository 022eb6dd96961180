"""Wallet domain specific exceptions."""

from wallet_backend.core.exceptions import WalletAppError


class WalletError(WalletAppError):
    """Base class for wallet balance rule violations."""


class InsufficientFundsError(WalletError):
    """Raised when a debit exceeds the wallet balance."""


class InvalidTransferError(WalletError):
    """Raised when a transfer names the same wallet on both sides."""
