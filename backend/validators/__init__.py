"""
Validators Module - Transaction details validation.
"""

from .transaction_validator import (
    TransactionValidator,
    ValidationError,
    validate_transaction,
    sanitize_merchant_name,
)

__all__ = [
    'TransactionValidator',
    'ValidationError',
    'validate_transaction',
    'sanitize_merchant_name',
]
