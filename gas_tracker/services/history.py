"""Paginated transaction history retrieval"""
import logging
from typing import List, Optional

from gas_tracker.cancellation import CancellationToken, check_cancelled
from gas_tracker.config import Settings, settings as default_settings
from gas_tracker.errors import PaginationLimitError
from gas_tracker.models.transaction import RawTransaction
from gas_tracker.services.alchemy import AlchemyAPI

logger = logging.getLogger(__name__)

class HistoryFetcher:
    """Collects the complete transaction history of an address"""

    def __init__(self, api: AlchemyAPI, config: Optional[Settings] = None):
        self.api = api
        self.settings = config or default_settings
        self.network = self.settings.NETWORK
        self.page_size = self.settings.HISTORY_PAGE_SIZE
        self.max_pages = self.settings.MAX_HISTORY_PAGES

    def fetch_history(self, address: str,
                      cancel_token: Optional[CancellationToken] = None) -> List[RawTransaction]:
        """
        Get all transactions with cursor pagination, in the order received.

        Raises:
            TransportError: If any page request fails
            PaginationLimitError: If the provider is still paging after max_pages
            CancelledError: If the token is tripped between pages
        """
        transactions: List[RawTransaction] = []
        cursor = None
        page = 1

        while True:
            check_cancelled(cancel_token)
            if page > self.max_pages:
                logger.error(f"Stopping history fetch for {address} after {self.max_pages} pages")
                raise PaginationLimitError(self.max_pages)

            logger.info(f"Fetching page {page} with cursor: {cursor or 'none'}")
            entries, after = self.api.get_transaction_history(
                address, self.network, self.page_size, cursor
            )
            transactions.extend(RawTransaction.from_api(entry) for entry in entries)

            if not entries or not after:
                break
            cursor = after
            page += 1

        logger.info(f"Total transactions fetched: {len(transactions)}")
        return transactions
