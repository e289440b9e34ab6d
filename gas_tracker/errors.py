"""Gas tracker exception hierarchy"""

class GasTrackerError(Exception):
    """Base exception for gas tracker errors"""
    pass

class InvalidInputError(GasTrackerError):
    """Raised when the address or the API credentials are missing or malformed"""
    pass

class TransportError(GasTrackerError):
    """Raised when a transaction history request fails"""
    pass

class PaginationLimitError(TransportError):
    """Raised when the history provider keeps returning cursors past the page bound"""

    def __init__(self, pages: int):
        self.pages = pages
        super().__init__(f"Transaction history did not terminate after {pages} pages")

class NoTransactionsError(GasTrackerError):
    """Raised when an address has no transaction history"""
    pass

class CancelledError(GasTrackerError):
    """Raised when the caller cancels a run before it completes"""
    pass
