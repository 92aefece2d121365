"""Application layer for wallet balance use cases."""
