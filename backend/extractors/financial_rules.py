"""
Financial Rules Module
Ledger entry status values and amount display formatting.
"""

from decimal import Decimal
from enum import Enum
from typing import Union


class EntryStatus(Enum):
    """Status flag handed to the ledger along with parsed details."""
    PENDING = "pending"


CURRENCY_SYMBOL = "₹"


def format_amount_display(amount: Union[Decimal, float]) -> str:
    """
    Format amount for display with the rupee symbol.

    150 -> ₹150.00
    0.01 -> ₹0.01

    Args:
        amount: Amount to format

    Returns:
        Formatted string with two decimal places
    """
    return f"{CURRENCY_SYMBOL}{amount:.2f}"
