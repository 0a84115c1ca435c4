"""
Signals Module
Sender and keyword checks, and the classifier that combines them into an
accept/reject decision for an inbound SMS.
"""

import logging

from .patterns import AMOUNT_MARKERS, SENDER_IDENTIFIERS, TRANSACTION_KEYWORDS

logger = logging.getLogger(__name__)


def is_known_payment_sender(sender: str) -> bool:
    """
    Check whether the sender id looks like a bank, wallet or UPI app.

    Matching is a case-insensitive substring test, so routed codes such as
    "VK-UPI" or "AD-HDFCBK" are recognised.
    """
    if not sender or not isinstance(sender, str):
        return False

    sender_upper = sender.upper()
    return any(identifier in sender_upper for identifier in SENDER_IDENTIFIERS)


def has_transaction_keyword(body: str) -> bool:
    """Check whether the body contains debit/credit/payment vocabulary."""
    if not body or not isinstance(body, str):
        return False

    body_upper = body.upper()
    return any(keyword in body_upper for keyword in TRANSACTION_KEYWORDS)


def has_amount_marker(body: str) -> bool:
    """Check whether the body contains a currency marker (case-sensitive)."""
    if not body or not isinstance(body, str):
        return False

    return any(marker in body for marker in AMOUNT_MARKERS)


def is_transaction(sender: str, body: str) -> bool:
    """
    Decide whether an SMS describes a payment transaction.

    The sender must be a known payment sender, and the body must carry
    either transaction vocabulary or a currency marker:

        known_sender AND (keyword OR amount_marker)

    Args:
        sender: Sender id the SMS claims as its origin
        body: Message text

    Returns:
        True if the message should go on to parsing
    """
    if not is_known_payment_sender(sender):
        logger.debug(f"Rejected: unrecognised sender '{sender}'")
        return False

    if has_transaction_keyword(body) or has_amount_marker(body):
        return True

    logger.debug(f"Rejected: no transaction keyword or currency marker from '{sender}'")
    return False
