"""Identifiers of the user-facing and log messages held by the message catalog."""

ERROR_NO_RECORDS = "error.no_records"
ERROR_TRANSACTION_NOT_FOUND = "error.transaction.not_found"
ERROR_WALLET_NOT_FOUND = "error.wallet.not_found"
ERROR_WALLET_IBAN_EXISTS = "error.wallet.iban_exists"
ERROR_WALLET_NAME_EXISTS = "error.wallet.name_exists"
ERROR_WALLET_IN_USE = "error.wallet.in_use"
ERROR_INSUFFICIENT_FUNDS = "error.wallet.insufficient_funds"
ERROR_SAME_WALLET_TRANSFER = "error.wallet.same_wallet_transfer"
ERROR_USER_NOT_FOUND = "error.user.not_found"
ERROR_USERNAME_EXISTS = "error.user.username_exists"
ERROR_EMAIL_EXISTS = "error.user.email_exists"
ERROR_ROLE_NOT_FOUND = "error.role.not_found"
ERROR_INVALID_SORT_PROPERTY = "error.pagination.invalid_sort_property"

INFO_TRANSACTION_CREATED = "info.transaction.created"
INFO_WALLET_CREATED = "info.wallet.created"
INFO_WALLET_UPDATED = "info.wallet.updated"
INFO_WALLET_DELETED = "info.wallet.deleted"
INFO_FUNDS_ADDED = "info.wallet.funds_added"
INFO_FUNDS_WITHDRAWN = "info.wallet.funds_withdrawn"
INFO_USER_CREATED = "info.user.created"
