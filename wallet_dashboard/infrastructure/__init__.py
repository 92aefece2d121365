"""Infrastructure adapters for the wallet dashboard."""
