"""Result models returned to callers"""
from decimal import Decimal
from typing import List
from pydantic import BaseModel, ConfigDict

class TransactionCost(BaseModel):
    """
    Gas cost of one included transaction.

    Attributes:
        hash: Transaction hash
        timestamp: Block timestamp in milliseconds since epoch
        cost_native: Cost in the display unit of the native token
        cost_fiat: Cost in fiat at the resolved historical price
        gas_used: Gas consumed
        gas_price: Price per gas in the smallest native unit
        native_price: Fiat price of the native token used for the conversion
    """
    model_config = ConfigDict(frozen=True)

    hash: str
    timestamp: int
    cost_native: Decimal
    cost_fiat: Decimal
    gas_used: int
    gas_price: int
    native_price: Decimal

class GasStatistics(BaseModel):
    """Summary statistics over the included transactions"""
    total_transactions: int = 0
    most_expensive: Decimal = Decimal(0)
    average_cost: Decimal = Decimal(0)
    time_range_days: int = 0
    oldest_transaction: int = 0
    newest_transaction: int = 0

class GasCostResult(BaseModel):
    """
    Total gas expenditure of an address.

    total_cost_wei is the exact sum of gas_used * gas_price over the included
    transactions, kept as a string so consumers never round it. The native and
    fiat totals are approximations computed independently of it.
    """
    address: str
    network: str
    symbol: str
    total_cost_wei: str = '0'
    total_cost_native: Decimal = Decimal(0)
    total_cost_fiat: Decimal = Decimal(0)
    transaction_costs: List[TransactionCost] = []
    statistics: GasStatistics = GasStatistics()
