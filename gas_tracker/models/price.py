from dataclasses import dataclass
from decimal import Decimal

@dataclass(frozen=True)
class PricePoint:
    symbol: str        # token symbol, e.g. ETH
    timestamp: int     # window start, ms since epoch
    value: Decimal     # fiat price
