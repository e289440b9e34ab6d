"""Gas cost aggregation and statistics"""
import logging
import time
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, List, Optional, Sequence

from gas_tracker.cancellation import CancellationToken, check_cancelled
from gas_tracker.config import Settings, settings as default_settings
from gas_tracker.errors import NoTransactionsError
from gas_tracker.models.result import GasCostResult, GasStatistics, TransactionCost
from gas_tracker.models.transaction import RawTransaction, parse_big_int, parse_timestamp_ms
from gas_tracker.services.prices import PriceResolver

logger = logging.getLogger(__name__)

MS_PER_DAY = 24 * 60 * 60 * 1000

@dataclass
class _RunningTotals:
    """Mutable state of one accumulation run"""
    wei: int = 0
    native: Decimal = Decimal(0)
    fiat: Decimal = Decimal(0)
    last_price: Optional[Decimal] = None
    costs: List[TransactionCost] = field(default_factory=list)

class CostCalculator:
    """Turns raw transactions and historical prices into gas cost totals"""

    def __init__(self, config: Optional[Settings] = None):
        self.settings = config or default_settings
        self.unit_divisor = Decimal(10) ** self.settings.UNIT_EXPONENT
        self.pacing_interval = self.settings.PACING_INTERVAL
        self.pacing_delay = self.settings.PACING_DELAY

    def accumulate(self, transactions: Sequence[RawTransaction], price_resolver: PriceResolver,
                   on_processed: Optional[Callable[[int, int], None]] = None,
                   cancel_token: Optional[CancellationToken] = None,
                   address: str = '') -> GasCostResult:
        """
        Compute per-transaction and total gas costs in fetch order.

        Transactions missing gas fields, a timestamp, or any usable price are
        skipped. A price lookup that fails reuses the last price resolved in
        this run, so the order of processing matters.

        Raises:
            NoTransactionsError: If transactions is empty
            CancelledError: If the token is tripped between transactions
        """
        if not transactions:
            raise NoTransactionsError("No transactions found for this address")

        totals = _RunningTotals()
        total = len(transactions)

        for processed, tx in enumerate(transactions, start=1):
            check_cancelled(cancel_token)
            logger.debug(f"Processing transaction {processed}/{total}: {tx.hash}")

            cost = self._process(tx, price_resolver, totals)
            if cost is not None:
                totals.wei += cost.gas_used * cost.gas_price
                totals.native += cost.cost_native
                totals.fiat += cost.cost_fiat
                totals.costs.append(cost)

            if on_processed:
                on_processed(processed, total)
            if self.pacing_delay and processed % self.pacing_interval == 0:
                time.sleep(self.pacing_delay)

        logger.info(f"Included {len(totals.costs)} of {total} transactions")

        costs = sorted(totals.costs, key=lambda c: c.timestamp, reverse=True)
        return GasCostResult(
            address=address,
            network=self.settings.NETWORK,
            symbol=self.settings.PRICE_SYMBOL,
            total_cost_wei=str(totals.wei),
            total_cost_native=totals.native,
            total_cost_fiat=totals.fiat,
            transaction_costs=costs,
            statistics=self.calculate_statistics(costs)
        )

    def _process(self, tx: RawTransaction, price_resolver: PriceResolver,
                 totals: _RunningTotals) -> Optional[TransactionCost]:
        gas_used_value = tx.gas_used_value
        if gas_used_value is None:
            logger.warning(f"Transaction {tx.hash} missing gasUsed/gas, skipping.")
            return None

        gas_price_value = tx.gas_price_value
        if gas_price_value is None:
            logger.warning(f"Transaction {tx.hash} missing effectiveGasPrice/gasPrice, skipping.")
            return None

        try:
            gas_used = parse_big_int(gas_used_value)
            gas_price = parse_big_int(gas_price_value)
        except ValueError as e:
            logger.warning(f"Transaction {tx.hash} has unparsable gas values, skipping: {e}")
            return None

        cost_wei = gas_used * gas_price
        cost_native = Decimal(cost_wei) / self.unit_divisor

        timestamp_value = tx.timestamp_value
        if timestamp_value is None:
            logger.warning(f"Transaction {tx.hash} missing blockTimestamp, skipping.")
            return None
        try:
            timestamp = parse_timestamp_ms(timestamp_value)
        except ValueError as e:
            logger.warning(f"Transaction {tx.hash} has unparsable blockTimestamp, skipping: {e}")
            return None

        point = price_resolver.resolve_price(timestamp)
        if point is not None:
            price = point.value
            totals.last_price = price
        elif totals.last_price is not None:
            logger.warning(f"Using last valid historical price for transaction {tx.hash}")
            price = totals.last_price
        else:
            logger.warning(f"Skipping transaction {tx.hash} due to missing historical price "
                           f"and no prior price available.")
            return None

        return TransactionCost(
            hash=tx.hash,
            timestamp=timestamp,
            cost_native=cost_native,
            cost_fiat=cost_native * price,
            gas_used=gas_used,
            gas_price=gas_price,
            native_price=price
        )

    def calculate_statistics(self, costs: Sequence[TransactionCost]) -> GasStatistics:
        """Calculate summary statistics; all zero when costs is empty"""
        if not costs:
            return GasStatistics()

        fiat_costs = [c.cost_fiat for c in costs]
        timestamps = [c.timestamp for c in costs]
        oldest = min(timestamps)
        newest = max(timestamps)

        return GasStatistics(
            total_transactions=len(costs),
            most_expensive=max(fiat_costs),
            average_cost=sum(fiat_costs, Decimal(0)) / len(fiat_costs),
            time_range_days=-(-(newest - oldest) // MS_PER_DAY),
            oldest_transaction=oldest,
            newest_transaction=newest
        )
