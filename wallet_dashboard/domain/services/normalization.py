"""Domain normalization helpers."""


def normalize_currency(currency: str | None) -> str | None:
    """Normalize currency symbols read from external sources.

    Symbols are case-sensitive (stATOM and STATOM are distinct tokens), so
    only surrounding whitespace is removed.

    Args:
        currency: Raw currency symbol.

    Returns:
        str | None: Cleaned symbol, or None when empty.
    """
    if not currency:
        return None
    cleaned = currency.strip()
    return cleaned or None


__all__ = ["normalize_currency"]
