"""
SMS Parser Module
Turns an accepted payment SMS into structured transaction details.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .amount_extractor import AmountExtractor
from .financial_rules import format_amount_display
from .merchant_extractor import MerchantExtractor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionDetails:
    """Amount and merchant parsed from a payment SMS."""

    amount: Decimal
    merchant: str

    def __post_init__(self):
        if self.amount is None or self.amount <= 0:
            raise ValueError(f"Amount must be greater than 0, got {self.amount}")
        if not self.merchant or not self.merchant.strip():
            raise ValueError("Merchant must not be blank")

    @property
    def amount_display(self) -> str:
        return format_amount_display(self.amount)

    def to_dict(self) -> dict:
        """Convert details to dictionary."""
        return {
            "amount": float(self.amount),
            "merchant": self.merchant,
            "amount_display": self.amount_display,
        }

    def __repr__(self) -> str:
        return f"TransactionDetails(amount={self.amount_display}, merchant={self.merchant})"


class TransactionParser:
    """
    Extracts amount and merchant from a message body.

    Does not re-check the sender or keywords; callers run is_transaction
    first.
    """

    def __init__(
        self,
        amount_extractor: Optional[AmountExtractor] = None,
        merchant_extractor: Optional[MerchantExtractor] = None
    ):
        self.amount_extractor = amount_extractor or AmountExtractor()
        self.merchant_extractor = merchant_extractor or MerchantExtractor()

    def parse(self, body: str) -> Optional[TransactionDetails]:
        """
        Parse transaction details from message text.

        Args:
            body: SMS message text

        Returns:
            TransactionDetails, or None if no positive amount was found or
            anything went wrong while parsing
        """
        try:
            amount = self.amount_extractor.extract(body)
            if amount is None or amount <= 0:
                logger.debug("No amount found; message not parsed")
                return None

            merchant = self.merchant_extractor.extract(body)
            details = TransactionDetails(amount=amount, merchant=merchant)
            logger.info(f"Parsed transaction: {details}")
            return details

        except Exception as e:
            logger.error(f"Error parsing transaction SMS: {e}", exc_info=True)
            return None


_default_parser = TransactionParser()


def parse(body: str) -> Optional[TransactionDetails]:
    """
    Convenience function to parse an SMS body with the default extractors.

    Args:
        body: SMS message text

    Returns:
        TransactionDetails or None
    """
    return _default_parser.parse(body)
