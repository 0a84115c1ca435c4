"""
Pattern Tables
Static, read-only lookup tables used to classify payment SMS and extract fields.

Ordering of AMOUNT_RULES and MERCHANT_RULES is significant: rules are tried
top to bottom and the first one that matches wins.
"""

import re
from typing import NamedTuple


class PatternRule(NamedTuple):
    """A named, compiled regex. Group 1 holds the captured value."""
    name: str
    regex: re.Pattern


# Fallback merchant returned when no merchant rule yields a usable capture
UNKNOWN_MERCHANT = "Unknown Merchant"

# Sender codes of banks, wallets and UPI apps (substring match, case-folded).
# Carrier routing adds prefixes such as "VK-" or "AD-", hence substrings.
SENDER_IDENTIFIERS = (
    "VK-UPI", "UPI", "BHIM", "PAYTM", "PHONEPE", "GPAY", "GOOGLEPAY",
    "AMAZONPAY", "AMAZON", "CRED", "FREECHARGE", "MOBIKWIK", "JIO",
    "AIRTEL", "VODAFONE", "IDEA", "BSNL", "MTNL", "HDFC", "ICICI",
    "SBI", "AXIS", "KOTAK", "YES", "INDUS", "PNB", "BOI", "CANARA",
)

# Debit/credit/payment vocabulary (substring match, case-folded)
TRANSACTION_KEYWORDS = (
    "DEBITED", "PAID", "SPENT", "TRANSACTION", "UPI", "PAYMENT",
    "RS.", "₹", "INR", "SUCCESSFUL", "COMPLETED", "TRANSFERRED",
    "SENT", "RECEIVED", "CREDIT", "DEBIT",
)

# Currency markers, matched against the original-case body
AMOUNT_MARKERS = ("₹", "Rs.", "INR", "rupees")

# The whole figure after a marker, separators and any fraction included.
# AmountExtractor rejects anything but digits with an optional two-digit
# fraction, so "₹1,200" ends extraction instead of matching a later rule.
_NUMBER = r"(\d(?:[\d,]*\d)?(?:\.\d+)?)"

# Same, for notations where the number comes first and must not start
# in the middle of a longer figure such as "1,200".
_LEADING_NUMBER = r"(?<![\d,.])" + _NUMBER

AMOUNT_RULES = (
    PatternRule("currency_symbol", re.compile(r"₹\s*" + _NUMBER)),
    PatternRule("currency_abbreviation", re.compile(r"\bRs\.?\s*" + _NUMBER, re.IGNORECASE)),
    PatternRule("currency_code", re.compile(r"\bINR\s*" + _NUMBER, re.IGNORECASE)),
    PatternRule("currency_word_suffix", re.compile(_LEADING_NUMBER + r"\s*rupees?\b", re.IGNORECASE)),
    PatternRule("abbreviation_suffix", re.compile(_LEADING_NUMBER + r"\s*rs\b", re.IGNORECASE)),
    PatternRule("symbol_suffix", re.compile(_LEADING_NUMBER + r"\s*₹")),
    PatternRule("amount_label", re.compile(r"\bamount\s*:?\s*" + _NUMBER, re.IGNORECASE)),
)

# Strict figure accepted as an amount
AMOUNT_FIGURE = re.compile(r"^\d+(?:\.\d{2})?$")

# A capture that is nothing but a monetary quantity, e.g. "₹500" or "300 rupees".
# A bare number such as a payee's mobile number needs a marker to qualify.
_FIGURE = r"\d(?:[\d,]*\d)?(?:\.\d+)?"
AMOUNT_ONLY = re.compile(
    r"^(?:(?:₹|Rs\.?|INR)\s*" + _FIGURE + r"(?:\s*(?:rupees?|rs|₹))?"
    r"|" + _FIGURE + r"\s*(?:rupees?|rs|₹))$",
    re.IGNORECASE,
)


def _merchant_rule(name: str, anchor: str, stop_words: tuple[str, ...]) -> PatternRule:
    # Shortest run after the anchor, up to a stop word, a period or end of line
    terminator = r"(?:\s+(?:" + "|".join(stop_words) + r")\b|\.|$)"
    return PatternRule(
        name,
        re.compile(anchor + r"(.+?)" + terminator, re.IGNORECASE | re.MULTILINE),
    )


_STOP_WORDS = ("on", "via", "at")
_STOP_WORDS_AFTER_AT = ("on", "via")

MERCHANT_RULES = (
    _merchant_rule("to", r"\bto\s+", _STOP_WORDS),
    _merchant_rule("at", r"\bat\s+", _STOP_WORDS_AFTER_AT),
    _merchant_rule("paid", r"\bpaid\s+", _STOP_WORDS),
    _merchant_rule("spent", r"\bspent\s+", _STOP_WORDS),
    _merchant_rule("merchant_label", r"\bmerchant:\s*", _STOP_WORDS),
    _merchant_rule("vendor_label", r"\bvendor:\s*", _STOP_WORDS),
    _merchant_rule("shop_label", r"\bshop:\s*", _STOP_WORDS),
    _merchant_rule("store_label", r"\bstore:\s*", _STOP_WORDS),
)
