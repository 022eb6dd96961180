"""Localized message catalog keyed by the identifiers in ``message_keys``.

Lookup order is the configured locale, then ``DEFAULT_LOCALE``, then the key
itself. Templates use positional ``{0}``, ``{1}`` placeholders.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from . import message_keys as keys

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

_CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        keys.ERROR_NO_RECORDS: "No records found",
        keys.ERROR_TRANSACTION_NOT_FOUND: "Requested transaction is not found",
        keys.ERROR_WALLET_NOT_FOUND: "Requested wallet is not found",
        keys.ERROR_WALLET_IBAN_EXISTS: "Wallet with IBAN {0} already exists",
        keys.ERROR_WALLET_NAME_EXISTS: "Wallet with name {0} already exists",
        keys.ERROR_WALLET_IN_USE: "Wallet {0} has transactions and cannot be deleted",
        keys.ERROR_INSUFFICIENT_FUNDS: "Insufficient funds in wallet {0}",
        keys.ERROR_SAME_WALLET_TRANSFER: "Source and destination wallets must differ",
        keys.ERROR_USER_NOT_FOUND: "Requested user is not found",
        keys.ERROR_USERNAME_EXISTS: "Username {0} is already taken",
        keys.ERROR_EMAIL_EXISTS: "Email {0} is already registered",
        keys.ERROR_ROLE_NOT_FOUND: "Requested role is not found",
        keys.ERROR_INVALID_SORT_PROPERTY: "Cannot sort by property {0}",
        keys.INFO_TRANSACTION_CREATED: "Transaction from {0} to {1} for amount {2} is created",
        keys.INFO_WALLET_CREATED: "Wallet {0} is created",
        keys.INFO_WALLET_UPDATED: "Wallet {0} is updated",
        keys.INFO_WALLET_DELETED: "Wallet {0} is deleted",
        keys.INFO_FUNDS_ADDED: "Amount {1} is added to wallet {0}",
        keys.INFO_FUNDS_WITHDRAWN: "Amount {1} is withdrawn from wallet {0}",
        keys.INFO_USER_CREATED: "User {0} is created",
    },
    "zh": {
        keys.ERROR_NO_RECORDS: "未找到任何记录",
        keys.ERROR_TRANSACTION_NOT_FOUND: "交易不存在",
        keys.ERROR_WALLET_NOT_FOUND: "钱包不存在",
        keys.ERROR_WALLET_IBAN_EXISTS: "IBAN 为 {0} 的钱包已存在",
        keys.ERROR_WALLET_NAME_EXISTS: "名称为 {0} 的钱包已存在",
        keys.ERROR_WALLET_IN_USE: "钱包 {0} 存在交易记录, 无法删除",
        keys.ERROR_INSUFFICIENT_FUNDS: "钱包 {0} 余额不足",
        keys.ERROR_SAME_WALLET_TRANSFER: "转出钱包与转入钱包不能相同",
        keys.ERROR_USER_NOT_FOUND: "用户不存在",
        keys.ERROR_USERNAME_EXISTS: "用户名已存在: {0}",
        keys.ERROR_EMAIL_EXISTS: "邮箱已注册: {0}",
        keys.ERROR_ROLE_NOT_FOUND: "角色不存在",
        keys.ERROR_INVALID_SORT_PROPERTY: "不支持按 {0} 排序",
        keys.INFO_TRANSACTION_CREATED: "已创建交易: {0} -> {1}, 金额 {2}",
        keys.INFO_WALLET_CREATED: "钱包 {0} 已创建",
        keys.INFO_WALLET_UPDATED: "钱包 {0} 已更新",
        keys.INFO_WALLET_DELETED: "钱包 {0} 已删除",
        keys.INFO_FUNDS_ADDED: "钱包 {0} 已充值 {1}",
        keys.INFO_FUNDS_WITHDRAWN: "钱包 {0} 已提取 {1}",
        keys.INFO_USER_CREATED: "用户 {0} 已创建",
    },
}


class MessageSource:
    """Resolves message keys to formatted text for one locale."""

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        catalogs: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        self._catalogs = catalogs if catalogs is not None else _CATALOGS
        if locale not in self._catalogs:
            logger.warning("Unknown message locale %s, falling back to %s", locale, DEFAULT_LOCALE)
            locale = DEFAULT_LOCALE
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    def get(self, key: str, *args: Any) -> str:
        template = self._catalogs.get(self._locale, {}).get(key)
        if template is None:
            template = self._catalogs.get(DEFAULT_LOCALE, {}).get(key, key)
        if not args:
            return template
        return template.format(*args)


__all__ = ["DEFAULT_LOCALE", "MessageSource"]
