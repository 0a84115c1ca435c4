"""
Transaction Validator Module
Validates and sanitizes parsed transaction details before they are handed
to the ledger.
"""

import logging
import re
from decimal import Decimal
from typing import Optional, Union

from config import config
from extractors.financial_rules import format_amount_display
from extractors.sms_parser import TransactionDetails

logger = logging.getLogger(__name__)

# Letters, digits, whitespace and & . , ' -
VALID_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s&.,'-]+$")
INVALID_NAME_CHARS = re.compile(r"[^a-zA-Z0-9\s&.,'-]")


class ValidationError(Exception):
    """Custom exception for validation errors."""
    pass


class TransactionValidator:
    """Validates transaction details."""

    def __init__(
        self,
        strict_mode: Optional[bool] = None,
        max_amount: Optional[float] = None,
        min_merchant_length: Optional[int] = None,
        max_merchant_length: Optional[int] = None
    ):
        """
        Initialize validator with configurable settings.

        Args:
            strict_mode: If True, raise ValidationError on invalid data.
                        If False, log warnings and report the errors.
            max_amount: Largest accepted amount.
            min_merchant_length: Minimum characters in merchant name.
            max_merchant_length: Maximum characters in merchant name.

        Unset arguments fall back to the application config.
        """
        self.strict_mode = config.STRICT_MODE if strict_mode is None else strict_mode
        self.max_amount = Decimal(str(config.MAX_TRANSACTION_AMOUNT if max_amount is None else max_amount))
        self.min_merchant_length = (
            config.MIN_MERCHANT_LENGTH if min_merchant_length is None else min_merchant_length
        )
        self.max_merchant_length = (
            config.MAX_MERCHANT_LENGTH if max_merchant_length is None else max_merchant_length
        )

        self.validation_stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> dict:
        return {
            "total_validated": 0,
            "valid": 0,
            "invalid": 0,
            "invalid_amount": 0,
            "invalid_merchant": 0,
        }

    def validate(self, details: TransactionDetails) -> list[str]:
        """
        Validate parsed transaction details.

        Args:
            details: TransactionDetails to validate

        Returns:
            List of error messages; empty if the details are valid

        Raises:
            ValidationError: If strict_mode is True and validation fails
        """
        self.validation_stats["total_validated"] += 1
        errors = []

        amount_error = self.validate_amount(details.amount)
        if amount_error:
            self.validation_stats["invalid_amount"] += 1
            errors.append(amount_error)

        merchant_error = self.validate_merchant(details.merchant)
        if merchant_error:
            self.validation_stats["invalid_merchant"] += 1
            errors.append(merchant_error)

        if not errors:
            self.validation_stats["valid"] += 1
            return errors

        self.validation_stats["invalid"] += 1
        if self.strict_mode:
            raise ValidationError(errors[0])
        logger.warning(f"Invalid transaction {details}: {'; '.join(errors)}")
        return errors

    def is_valid(self, details: TransactionDetails) -> bool:
        """Check details without raising, regardless of strict_mode."""
        return not self.validate_amount(details.amount) and not self.validate_merchant(details.merchant)

    def validate_amount(self, amount: Union[Decimal, float, int, None]) -> Optional[str]:
        """
        Validate amount.

        Must be a number, greater than zero and no larger than max_amount.

        Returns:
            Error message, or None if valid
        """
        if amount is None or isinstance(amount, bool) or not isinstance(amount, (Decimal, float, int)):
            return "Invalid amount format"

        amount = Decimal(str(amount))
        if not amount.is_finite():
            return "Invalid amount format"
        if amount <= 0:
            return "Amount must be greater than 0"
        if amount > self.max_amount:
            return f"Amount cannot exceed {format_amount_display(self.max_amount)}"
        return None

    def validate_merchant(self, merchant: Optional[str]) -> Optional[str]:
        """
        Validate merchant name.

        Must be non-blank, within the configured length bounds, and use only
        letters, digits, whitespace and & . , ' -

        Returns:
            Error message, or None if valid
        """
        if not isinstance(merchant, str) or not merchant.strip():
            return "Merchant is required"

        if len(merchant) < self.min_merchant_length:
            return f"Merchant name must be at least {self.min_merchant_length} characters"

        if len(merchant) > self.max_merchant_length:
            return f"Merchant name cannot exceed {self.max_merchant_length} characters"

        if not VALID_NAME_PATTERN.match(merchant):
            return "Merchant name contains invalid characters"

        return None

    def get_stats(self) -> dict:
        """Get validation statistics."""
        return self.validation_stats.copy()

    def reset_stats(self):
        """Reset validation statistics."""
        self.validation_stats = self._empty_stats()


def sanitize_merchant_name(merchant: str) -> str:
    """
    Clean a merchant name for storage.

    Trims, collapses runs of whitespace and drops characters outside the
    allowed set.

    Args:
        merchant: Raw merchant name

    Returns:
        Sanitized name (may be empty)
    """
    if not merchant:
        return ""
    cleaned = INVALID_NAME_CHARS.sub("", merchant)
    return re.sub(r"\s+", " ", cleaned).strip()


def validate_transaction(details: TransactionDetails, strict_mode: bool = False) -> list[str]:
    """
    Convenience function to validate one set of details.

    Args:
        details: TransactionDetails to validate
        strict_mode: If True, raise ValidationError on invalid data

    Returns:
        List of error messages
    """
    validator = TransactionValidator(strict_mode=strict_mode)
    return validator.validate(details)
