"""Tests for transaction parsing and result models."""

from decimal import Decimal

import pytest

from gas_tracker.models.result import GasCostResult, TransactionCost
from gas_tracker.models.transaction import RawTransaction, parse_big_int, parse_timestamp_ms


class TestParseBigInt:
    """Tests for gas amount parsing."""

    def test_int_passthrough(self) -> None:
        assert parse_big_int(21000) == 21000

    def test_decimal_string(self) -> None:
        assert parse_big_int("21000") == 21000

    def test_hex_string(self) -> None:
        """0x-prefixed strings are read as hex."""
        assert parse_big_int("0x5208") == 21000
        assert parse_big_int("0X5208") == 21000

    def test_integral_float(self) -> None:
        assert parse_big_int(21000.0) == 21000

    def test_exceeds_float_precision(self) -> None:
        """Values beyond 2**53 are kept exact."""
        value = "123456789012345678901234567890"
        assert parse_big_int(value) == 123456789012345678901234567890

    @pytest.mark.parametrize("value", ["21000.5", 1.5, "abc", True, [1]])
    def test_rejects_non_integers(self, value) -> None:
        with pytest.raises(ValueError):
            parse_big_int(value)


class TestParseTimestamp:
    """Tests for block timestamp parsing."""

    def test_numeric_milliseconds(self) -> None:
        assert parse_timestamp_ms(1_700_000_000_000) == 1_700_000_000_000

    def test_numeric_string(self) -> None:
        assert parse_timestamp_ms("1700000000000") == 1_700_000_000_000

    def test_iso_string_with_z(self) -> None:
        assert parse_timestamp_ms("2024-01-01T00:00:00.000Z") == 1_704_067_200_000

    def test_naive_iso_string_is_utc(self) -> None:
        assert parse_timestamp_ms("2024-01-01T00:00:00") == 1_704_067_200_000

    def test_garbage_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_timestamp_ms("yesterday")

    @pytest.mark.parametrize(
        "value",
        [float("inf"), float("-inf"), float("nan"), 10**20, "100000000000000000000"],
        ids=["inf", "-inf", "nan", "huge-int", "huge-string"],
    )
    def test_non_finite_or_out_of_range_raises_value_error(self, value) -> None:
        """Unrepresentable timestamps surface as ValueError, never OverflowError."""
        with pytest.raises(ValueError):
            parse_timestamp_ms(value)

    def test_iso_milliseconds_are_exact(self) -> None:
        assert parse_timestamp_ms("2024-01-01T00:00:00.001Z") == 1_704_067_200_001

    def test_iso_sub_millisecond_is_floored(self) -> None:
        assert parse_timestamp_ms("1970-01-01T00:00:00.000999Z") == 0


class TestRawTransaction:
    """Tests for building RawTransaction from API entries."""

    def test_primary_fields_preferred(self) -> None:
        tx = RawTransaction.from_api({
            "hash": "0xa",
            "gasUsed": "100",
            "gas": "999",
            "effectiveGasPrice": "5",
            "gasPrice": "7",
            "blockTimestamp": "1000",
        })

        assert tx.gas_used_value == "100"
        assert tx.gas_price_value == "5"
        assert tx.timestamp_value == "1000"

    def test_legacy_fields_used_as_fallback(self) -> None:
        tx = RawTransaction.from_api({"hash": "0xa", "gas": 21000, "gasPrice": 3})

        assert tx.gas_used_value == 21000
        assert tx.gas_price_value == 3

    def test_missing_and_empty_fields_are_absent(self) -> None:
        tx = RawTransaction.from_api({"hash": "0xa", "gasUsed": "", "blockTimestamp": " "})

        assert tx.gas_used_value is None
        assert tx.gas_price_value is None
        assert tx.timestamp_value is None

    def test_is_immutable(self) -> None:
        tx = RawTransaction.from_api({"hash": "0xa"})

        with pytest.raises(AttributeError):
            tx.hash = "0xb"  # type: ignore[misc]


class TestGasCostResult:
    """Tests for result serialization."""

    def test_json_dump_keeps_wei_total_as_string(self) -> None:
        result = GasCostResult(
            address="0x1",
            network="eth-mainnet",
            symbol="ETH",
            total_cost_wei=str(10**30 + 1),
            total_cost_native=Decimal("1000000000000.000000000000000001"),
            total_cost_fiat=Decimal("2.5"),
            transaction_costs=[
                TransactionCost(
                    hash="0xa",
                    timestamp=1,
                    cost_native=Decimal("1"),
                    cost_fiat=Decimal("2.5"),
                    gas_used=1,
                    gas_price=10**18,
                    native_price=Decimal("2.5"),
                )
            ],
        )

        dumped = result.model_dump(mode="json")

        assert dumped["total_cost_wei"] == "1000000000000000000000000000001"
        assert dumped["transaction_costs"][0]["hash"] == "0xa"
        assert dumped["statistics"]["total_transactions"] == 0
