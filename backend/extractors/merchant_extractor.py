"""
Merchant Extractor Module
Finds the counterparty name in an SMS body using the ordered merchant rules.

Each rule anchors on a word such as "to", "at", "paid" or a label such as
"merchant:", and captures the shortest run of text up to "on", "via", "at",
a period or the end of the line. SMS wording varies between senders, so the
capture may carry extra trailing words; that is accepted.
"""

import logging
from typing import Optional

from .amount_extractor import is_amount_only
from .patterns import MERCHANT_RULES, UNKNOWN_MERCHANT, PatternRule

logger = logging.getLogger(__name__)


class MerchantExtractor:
    """Tries each merchant rule in priority order; never fails."""

    def __init__(self, rules: tuple[PatternRule, ...] = MERCHANT_RULES):
        self.rules = rules

    def extract(self, body: str) -> str:
        """
        Extract the merchant name from message text.

        Args:
            body: SMS message text

        Returns:
            Merchant name, or UNKNOWN_MERCHANT if no rule produced one
        """
        if not body or not isinstance(body, str):
            return UNKNOWN_MERCHANT

        for rule in self.rules:
            match = rule.regex.search(body)
            if match is None:
                continue

            merchant = self._clean(match.group(1))
            if self._is_acceptable(merchant):
                logger.debug(f"Merchant rule '{rule.name}' matched '{merchant}'")
                return merchant

            logger.debug(f"Merchant rule '{rule.name}' capture rejected: '{merchant}'")

        return UNKNOWN_MERCHANT

    @staticmethod
    def _clean(capture: str) -> str:
        """Trim whitespace and trailing periods/commas."""
        return capture.strip().rstrip(".,").strip()

    @staticmethod
    def _is_acceptable(merchant: Optional[str]) -> bool:
        # "spent ₹500." anchors on "spent" but captures only the amount
        if not merchant or len(merchant) <= 1:
            return False
        return not is_amount_only(merchant)


_default_extractor = MerchantExtractor()


def extract_merchant(body: str) -> str:
    """
    Convenience function to extract a merchant with the default rules.

    Args:
        body: SMS message text

    Returns:
        Non-blank merchant name
    """
    return _default_extractor.extract(body)
