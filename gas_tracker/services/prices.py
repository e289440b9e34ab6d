"""Historical native token price resolution"""
import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Optional

from gas_tracker.config import Settings, settings as default_settings
from gas_tracker.models.price import PricePoint
from gas_tracker.models.transaction import EPOCH
from gas_tracker.services.alchemy import AlchemyAPI

logger = logging.getLogger(__name__)

PRICE_WINDOW = timedelta(hours=1)

def to_iso(ts: datetime) -> str:
    """Format a UTC datetime as ISO-8601 with milliseconds and a Z suffix"""
    return ts.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')

class PriceResolver:
    """Looks up the fiat price of the native token at a block timestamp"""

    def __init__(self, api: AlchemyAPI, config: Optional[Settings] = None):
        self.api = api
        self.settings = config or default_settings
        self.symbol = self.settings.PRICE_SYMBOL

    def resolve_price(self, timestamp: int) -> Optional[PricePoint]:
        """
        Get the price for the one-hour window starting at timestamp (ms).

        Returns None when the provider has no data or cannot be reached.
        """
        try:
            start = EPOCH + timedelta(milliseconds=timestamp)
            start_time = to_iso(start)
            end_time = to_iso(start + PRICE_WINDOW)
        except (OverflowError, OSError, ValueError) as e:
            logger.warning(f"Cannot build a price window for timestamp {timestamp}: {e}")
            return None

        data = self.api.get_historical_prices(self.symbol, start_time, end_time, '1h')
        if not data:
            logger.warning(f"No {self.symbol} price data for {start_time}")
            return None

        first = data[0]
        raw_value = first.get('value') if isinstance(first, dict) else None
        try:
            value = Decimal(str(raw_value))
        except (InvalidOperation, ValueError):
            logger.warning(f"Unparsable {self.symbol} price {raw_value!r} for {start_time}")
            return None
        if not value.is_finite():
            logger.warning(f"Non-finite {self.symbol} price {raw_value!r} for {start_time}")
            return None

        return PricePoint(symbol=self.symbol, timestamp=timestamp, value=value)
