"""Price source reading a price list JSON document from disk."""

import json
from pathlib import Path

from wallet_dashboard.application.ports.wallet_sources import PriceSourcePort
from wallet_dashboard.domain.models import PriceQuote
from wallet_dashboard.domain.services.prices import parse_price_quotes
from wallet_dashboard.infrastructure.logging.logger import get_app_logger


class JsonPriceFileSource(PriceSourcePort):
    """PriceSourcePort implementation over a price list JSON file."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the source.

        Args:
            path: Location of the price list file.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    def fetch_price_quotes(self) -> list[PriceQuote]:
        """Read and parse the price list.

        Returns:
            list[PriceQuote]: Quotes in file order.

        Raises:
            RuntimeError: If the file is missing or is not valid JSON.
        """
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise RuntimeError(f"Price file not found: {self._path}") from exc
        except json.JSONDecodeError as exc:
            raise RuntimeError(
                f"Price file is not valid JSON: {self._path}"
            ) from exc
        quotes = parse_price_quotes(payload, logger=self._logger)
        self._logger.info(f"Loaded {len(quotes)} price quotes from {self._path}")
        return quotes


__all__ = ["JsonPriceFileSource"]
