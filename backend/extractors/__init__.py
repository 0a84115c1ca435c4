"""
Extractors Module - Payment SMS classification and field extraction.
"""

from .patterns import (
    UNKNOWN_MERCHANT,
    PatternRule,
    AMOUNT_RULES,
    MERCHANT_RULES,
)

from .signals import (
    is_known_payment_sender,
    has_transaction_keyword,
    has_amount_marker,
    is_transaction,
)

from .amount_extractor import (
    AmountExtractor,
    extract_amount,
    is_amount_only,
)

from .merchant_extractor import (
    MerchantExtractor,
    extract_merchant,
)

from .financial_rules import (
    EntryStatus,
    format_amount_display,
)

from .sms_parser import (
    TransactionDetails,
    TransactionParser,
    parse,
)

__all__ = [
    'UNKNOWN_MERCHANT',
    'PatternRule',
    'AMOUNT_RULES',
    'MERCHANT_RULES',
    'is_known_payment_sender',
    'has_transaction_keyword',
    'has_amount_marker',
    'is_transaction',
    'AmountExtractor',
    'extract_amount',
    'is_amount_only',
    'MerchantExtractor',
    'extract_merchant',
    'EntryStatus',
    'format_amount_display',
    'TransactionDetails',
    'TransactionParser',
    'parse',
]
