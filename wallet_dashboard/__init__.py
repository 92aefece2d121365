"""Wallet balances dashboard package."""
