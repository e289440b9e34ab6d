"""Alchemy Data and Prices API integration"""
import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

from gas_tracker.config import Settings, settings as default_settings
from gas_tracker.errors import TransportError

logger = logging.getLogger(__name__)

class AlchemyAPI:
    """Handles all Alchemy API interactions"""

    def __init__(self, config: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = config or default_settings
        self.session = session or requests.Session()
        endpoints = self.settings.alchemy_endpoints
        self.history_url = endpoints.history_url
        self.prices_url = endpoints.prices_url
        self.timeout = self.settings.REQUEST_TIMEOUT

    def _post(self, url: str, payload: Dict[str, Any]) -> requests.Response:
        return self.session.post(
            url,
            json=payload,
            headers={'Content-Type': 'application/json', 'Accept': 'application/json'},
            timeout=self.timeout
        )

    def get_transaction_history(self, address: str, network: str, limit: int,
                                after: Optional[str] = None) -> Tuple[List[Dict], Optional[str]]:
        """
        Get one page of transaction history for an address.

        Returns:
            Tuple[List[Dict], Optional[str]]: (transactions, continuation cursor)

        Raises:
            TransportError: If the request fails or the body is not a JSON object
        """
        payload: Dict[str, Any] = {
            'addresses': [{'address': address, 'networks': [network]}],
            'limit': limit
        }
        if after:
            payload['after'] = after

        try:
            response = self._post(self.history_url, payload)
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise TransportError(f"Transaction history request failed: {e}") from e
        except ValueError as e:
            raise TransportError(f"Invalid JSON in transaction history response: {e}") from e

        if not isinstance(body, dict):
            raise TransportError(f"Unexpected transaction history response: {type(body).__name__}")

        transactions = body.get('transactions') or []
        if not isinstance(transactions, list):
            raise TransportError(f"Unexpected transactions field: {type(transactions).__name__}")
        return transactions, body.get('after') or None

    def get_historical_prices(self, symbol: str, start_time: str, end_time: str,
                              interval: str = '1h') -> Optional[List[Dict]]:
        """
        Get historical price data points for a symbol.

        Returns None instead of raising when the provider cannot answer.
        """
        payload = {
            'symbol': symbol,
            'startTime': start_time,
            'endTime': end_time,
            'interval': interval
        }

        try:
            response = self._post(self.prices_url, payload)
        except requests.RequestException as e:
            logger.warning(f"Error fetching historical {symbol} price: {e}")
            return None

        if not response.ok:
            logger.warning(f"Failed to fetch price for {start_time}: {response.status_code}")
            return None

        try:
            body = response.json()
        except ValueError as e:
            logger.warning(f"Invalid JSON in price response for {start_time}: {e}")
            return None

        data = body.get('data') if isinstance(body, dict) else None
        if not isinstance(data, list):
            return None
        return data
