"""Environment-driven settings for choosing the price source."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from wallet_dashboard.infrastructure.logging.logger import get_app_logger
from wallet_dashboard.utils.utils import get_project_root

PRICE_SOURCE_DATABASE = "database"
PRICE_SOURCE_FILE = "file"
PRICE_SOURCES = (PRICE_SOURCE_DATABASE, PRICE_SOURCE_FILE)


def parse_price_source(raw: Optional[str]) -> str:
    """Validate a PRICE_SOURCE value.

    Args:
        raw: Raw value; empty or missing selects the database.

    Returns:
        str: One of PRICE_SOURCES.

    Raises:
        RuntimeError: If the value names an unsupported source.
    """
    cleaned = (raw or "").strip().lower() or PRICE_SOURCE_DATABASE
    if cleaned not in PRICE_SOURCES:
        raise RuntimeError(
            f"Unsupported PRICE_SOURCE '{raw}'. "
            f"Expected one of: {', '.join(PRICE_SOURCES)}."
        )
    return cleaned


def resolve_prices_file(raw_path: Optional[str], logger) -> Optional[Path]:
    """Locate the price list file.

    An explicit path or ``file://`` URI wins; otherwise a lone ``*.json``
    file under ``<project>/data`` is used.

    Args:
        raw_path: Value of PRICES_FILE, if any.
        logger: Logger used for warnings.

    Returns:
        Path | None: Absolute path, or None when nothing can be chosen.
    """
    if raw_path:
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Price file does not exist at {path}")
        return path

    candidates = sorted((get_project_root() / "data").glob("*.json"))
    if len(candidates) > 1:
        logger.warning(
            "Multiple .json files found in data/. "
            "Set PRICES_FILE to choose one."
        )
        return None
    return candidates[0].resolve() if candidates else None


@dataclass(frozen=True)
class WalletSettings:
    """Where the dashboard reads prices from.

    Attributes:
        price_source: One of PRICE_SOURCES.
        prices_file: Price list JSON file, used by the file source only.
    """

    price_source: str = PRICE_SOURCE_DATABASE
    prices_file: Optional[Path] = None

    def __post_init__(self) -> None:
        parse_price_source(self.price_source)

    @property
    def reads_prices_from_file(self) -> bool:
        """Return True when prices come from a JSON file."""
        return self.price_source == PRICE_SOURCE_FILE

    @classmethod
    def from_env(cls) -> "WalletSettings":
        """Build settings from PRICE_SOURCE and PRICES_FILE.

        Returns:
            WalletSettings: Validated settings.

        Raises:
            RuntimeError: If PRICE_SOURCE is not a supported value.
        """
        price_source = parse_price_source(os.getenv("PRICE_SOURCE"))
        if price_source != PRICE_SOURCE_FILE:
            return cls(price_source=price_source)
        prices_file = resolve_prices_file(
            os.getenv("PRICES_FILE"),
            logger=get_app_logger(),
        )
        return cls(price_source=price_source, prices_file=prices_file)


__all__ = [
    "PRICE_SOURCES",
    "PRICE_SOURCE_DATABASE",
    "PRICE_SOURCE_FILE",
    "WalletSettings",
    "parse_price_source",
    "resolve_prices_file",
]
