"""Domain modules: users, wallets and transactions."""
