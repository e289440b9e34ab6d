"""Shared fixtures for gas tracker tests."""

from decimal import Decimal
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from gas_tracker.config import Settings
from gas_tracker.models.price import PricePoint
from gas_tracker.models.transaction import RawTransaction

ADDRESS = "0x" + "ab" * 20


class FakePriceResolver:
    """Price resolver returning canned prices keyed by timestamp."""

    def __init__(self, prices: dict[int, Any] | None = None, default: Any = None) -> None:
        self.prices = prices or {}
        self.default = default
        self.calls: list[int] = []

    def resolve_price(self, timestamp: int) -> PricePoint | None:
        self.calls.append(timestamp)
        value = self.prices.get(timestamp, self.default)
        if value is None:
            return None
        return PricePoint(symbol="ETH", timestamp=timestamp, value=Decimal(str(value)))


def make_tx(
    hash: str = "0x1",
    gas_used: Any = 21000,
    gas_price: Any = 1,
    timestamp: Any = 1_700_000_000_000,
    **extra: Any,
) -> RawTransaction:
    """Build a RawTransaction using the primary field names."""
    entry = {
        "hash": hash,
        "gasUsed": gas_used,
        "effectiveGasPrice": gas_price,
        "blockTimestamp": timestamp,
    }
    entry.update(extra)
    return RawTransaction.from_api(entry)


def make_response(body: Any = None, status_code: int = 200) -> MagicMock:
    """Build a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.json.return_value = body
    if response.ok:
        response.raise_for_status.return_value = None
    else:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a dummy API key and pacing disabled."""
    return Settings(
        _env_file=None,
        ALCHEMY_API_KEY="test-key",
        PACING_DELAY=0,
        MAX_HISTORY_PAGES=100,
    )


@pytest.fixture
def session() -> MagicMock:
    """Mock requests.Session."""
    return MagicMock()
