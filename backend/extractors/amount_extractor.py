"""
Amount Extractor Module
Finds the transacted amount in an SMS body using the ordered amount rules.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from .patterns import AMOUNT_FIGURE, AMOUNT_ONLY, AMOUNT_RULES, PatternRule

logger = logging.getLogger(__name__)


class AmountExtractor:
    """
    Tries each amount rule in priority order and parses the first match.

    Only the first rule that matches is used. If its captured value is not
    a positive number the extraction fails; later rules are not consulted.
    """

    def __init__(self, rules: tuple[PatternRule, ...] = AMOUNT_RULES):
        self.rules = rules

    def extract(self, body: str) -> Optional[Decimal]:
        """
        Extract the amount from message text.

        Args:
            body: SMS message text

        Returns:
            Positive Decimal amount, or None if no usable amount was found
        """
        if not body or not isinstance(body, str):
            return None

        for rule in self.rules:
            match = rule.regex.search(body)
            if match is None:
                continue

            amount_str = match.group(1)
            logger.debug(f"Amount rule '{rule.name}' matched '{amount_str}'")
            return self._parse_amount(amount_str)

        logger.debug("No amount rule matched")
        return None

    @staticmethod
    def _parse_amount(amount_str: str) -> Optional[Decimal]:
        """Parse a captured figure; anything not strictly positive is rejected."""
        if not AMOUNT_FIGURE.match(amount_str):
            # "1,200" or "150.5"
            logger.warning(f"Rejected malformed amount '{amount_str}'")
            return None

        try:
            amount = Decimal(amount_str)
        except InvalidOperation:
            logger.warning(f"Cannot parse amount '{amount_str}'")
            return None

        if not amount.is_finite() or amount <= 0:
            logger.warning(f"Rejected non-positive amount: {amount_str}")
            return None

        return amount


_default_extractor = AmountExtractor()


def extract_amount(body: str) -> Optional[Decimal]:
    """
    Convenience function to extract an amount with the default rules.

    Args:
        body: SMS message text

    Returns:
        Positive Decimal amount, or None
    """
    return _default_extractor.extract(body)


def is_amount_only(text: str) -> bool:
    """Check whether text is nothing but a monetary quantity, e.g. '₹500'."""
    if not text or not isinstance(text, str):
        return False
    return AMOUNT_ONLY.match(text.strip()) is not None
