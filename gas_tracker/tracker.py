"""Gas cost analysis orchestration"""
import logging
import re
from typing import Optional

from gas_tracker.calculator import CostCalculator
from gas_tracker.cancellation import CancellationToken
from gas_tracker.config import Settings, settings as default_settings
from gas_tracker.errors import InvalidInputError, NoTransactionsError
from gas_tracker.models.result import GasCostResult
from gas_tracker.progress import ProgressSink, emit
from gas_tracker.services.alchemy import AlchemyAPI
from gas_tracker.services.history import HistoryFetcher
from gas_tracker.services.prices import PriceResolver

logger = logging.getLogger(__name__)

ADDRESS_PATTERN = re.compile(r'^0x[0-9a-fA-F]{40}$')

class GasTracker:
    """Computes the total gas spent by an address, with historical fiat pricing"""

    def __init__(self, settings: Optional[Settings] = None,
                 history_fetcher: Optional[HistoryFetcher] = None,
                 price_resolver: Optional[PriceResolver] = None,
                 calculator: Optional[CostCalculator] = None):
        """Initialize the pipeline, building Alchemy-backed collaborators unless given"""
        self.settings = settings or default_settings

        api = None
        if history_fetcher is None or price_resolver is None:
            api = AlchemyAPI(self.settings)
        self.history_fetcher = history_fetcher or HistoryFetcher(api, self.settings)
        self.price_resolver = price_resolver or PriceResolver(api, self.settings)
        self.calculator = calculator or CostCalculator(self.settings)
        self.progress_interval = self.settings.PROGRESS_INTERVAL

    def _validate(self, address) -> None:
        if not address or not isinstance(address, str):
            raise InvalidInputError("Valid Ethereum address is required")
        if not ADDRESS_PATTERN.match(address):
            raise InvalidInputError(f"Malformed Ethereum address: {address}")
        if not self.settings.ALCHEMY_API_KEY:
            raise InvalidInputError("Valid Alchemy API key is required")

    def run(self, address: str, progress: Optional[ProgressSink] = None,
            cancel_token: Optional[CancellationToken] = None) -> GasCostResult:
        """
        Calculate total gas costs for an address.

        Args:
            address: Wallet address whose sent transactions are analysed
            progress: Optional callback receiving status messages
            cancel_token: Optional token checked between pages and transactions

        Raises:
            InvalidInputError: If the address or API key is missing or malformed
            TransportError: If the transaction history cannot be fetched
            NoTransactionsError: If the address has no transactions
            CancelledError: If the token is tripped before completion
        """
        self._validate(address)

        try:
            emit(progress, "Starting gas cost analysis...")
            transactions = self.history_fetcher.fetch_history(address, cancel_token)
            if not transactions:
                raise NoTransactionsError("No transactions found for this address")

            emit(progress, "Processing transactions and fetching historical prices...")

            def on_processed(processed: int, total: int) -> None:
                if processed % self.progress_interval == 0:
                    emit(progress, f"Processing transaction {processed} of {total}...")

            result = self.calculator.accumulate(
                transactions,
                self.price_resolver,
                on_processed=on_processed,
                cancel_token=cancel_token,
                address=address
            )

            emit(progress, "Finalizing calculations...")
            emit(progress, "Analysis complete!")
            return result

        except Exception as e:
            logger.error(f"Error calculating gas costs for {address}: {e}")
            emit(progress, f"Error: {e}")
            raise
