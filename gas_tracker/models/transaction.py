"""Domain models for transactions returned by the history provider"""
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union

RawValue = Union[int, float, str, None]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)

def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())

def parse_big_int(value: RawValue) -> int:
    """
    Parse a gas amount into an arbitrary-precision integer.

    Accepts ints, integral floats, decimal strings and 0x-prefixed hex strings.

    Raises:
        ValueError: If the value is not an integer
    """
    if isinstance(value, bool):
        raise ValueError(f"Not an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Not an integer: {value!r}")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith('0x'):
            return int(text, 16)
        return int(text)
    raise ValueError(f"Unsupported value type: {type(value).__name__}")

def parse_timestamp_ms(value: RawValue) -> int:
    """
    Parse a block timestamp into milliseconds since epoch.

    Numbers and numeric strings are taken as milliseconds already; any other
    string is read as an ISO-8601 datetime (naive values are UTC). The result
    always falls within the range of datetime.

    Raises:
        ValueError: If the value cannot be read as a timestamp
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Invalid timestamp: {value!r}")
        return _check_range(int(value))
    if isinstance(value, int):
        return _check_range(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip('+-').isdigit():
            return _check_range(int(text))
        ts =datetime.fromisoformat(text.replace('Z', '+00:00'))
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return (ts - EPOCH) // ONE_MS
    raise ValueError(f"Unsupported timestamp type: {type(value).__name__}")

def _check_range(ms: int) -> int:
    try:
        EPOCH + ms * ONE_MS
    except OverflowError as e:
        raise ValueError(f"Timestamp out of range: {ms}") from e
    return ms

@dataclass(frozen=True)
class RawTransaction:
    """One history entry exactly as the provider returned it"""
    hash: str
    gas_used: RawValue = None
    gas: RawValue = None                    # legacy name for gas used
    effective_gas_price: RawValue = None
    gas_price: RawValue = None              # legacy name for gas price
    block_timestamp: RawValue = None

    @classmethod
    def from_api(cls, entry: Dict[str, Any]) -> 'RawTransaction':
        """Build from a history API entry"""
        return cls(
            hash=str(entry.get('hash', '')),
            gas_used=entry.get('gasUsed'),
            gas=entry.get('gas'),
            effective_gas_price=entry.get('effectiveGasPrice'),
            gas_price=entry.get('gasPrice'),
            block_timestamp=entry.get('blockTimestamp')
        )

    @property
    def gas_used_value(self) -> Optional[RawValue]:
        """Gas used, preferring the primary field over the legacy one"""
        if not _is_absent(self.gas_used):
            return self.gas_used
        if not _is_absent(self.gas):
            return self.gas
        return None

    @property
    def gas_price_value(self) -> Optional[RawValue]:
        """Gas price, preferring the effective price over the legacy one"""
        if not _is_absent(self.effective_gas_price):
            return self.effective_gas_price
        if not _is_absent(self.gas_price):
            return self.gas_price
        return None

    @property
    def timestamp_value(self) -> Optional[RawValue]:
        return None if _is_absent(self.block_timestamp) else self.block_timestamp
