"""
End-to-end checks of classification plus parsing on representative UPI SMS.
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from extractors import (
    UNKNOWN_MERCHANT,
    EntryStatus,
    TransactionDetails,
    TransactionParser,
    format_amount_display,
    is_transaction,
    parse,
)


class TestScenarios:

    def test_accepted_messages(self, scenario_messages):
        for sender, body, amount, merchant in scenario_messages:
            assert is_transaction(sender, body), body
            result = parse(body)
            assert result is not None, body
            assert result.amount == amount
            assert result.merchant == merchant

    def test_no_merchant_uses_sentinel(self):
        result = parse("You have spent ₹500.")
        assert result == TransactionDetails(amount=Decimal("500"), merchant=UNKNOWN_MERCHANT)

    def test_decimal_amount_with_multi_word_merchant(self):
        result = parse("You have spent Rs. 350.50 at The Corner Bistro.")
        assert result.amount == Decimal("350.50")
        assert result.merchant == "The Corner Bistro"

    def test_unknown_sender_rejected(self):
        assert not is_transaction("RANDOM", "Your account balance is low.")

    def test_non_transactional_message_not_parsed(self):
        assert parse("Your account balance is low.") is None

    def test_missing_amount_suppresses_result(self):
        body = "Transaction to Amazon failed."
        assert is_transaction("UPI", body)
        assert parse(body) is None


class TestParseProperties:

    @pytest.mark.parametrize("body", [
        "₹0 debited to Shop.",
        "Rs.0.00 paid to Uber.",
        "₹0 debited, INR 500 pending",
        "Rs.1,200 debited to Landlord.",
        "₹1,200 paid to Zara. amount: 20",
    ])
    def test_never_returns_non_positive_amount(self, body):
        assert parse(body) is None

    def test_smallest_amount(self):
        assert parse("₹0.01 debited to Test Merchant.").amount == Decimal("0.01")

    def test_idempotent(self):
        body = "Rs.250 paid to Uber via PhonePe. Transaction ID: 987654321098"
        assert parse(body) == parse(body)

    @pytest.mark.parametrize("body", [None, "", 12345, b"\xe2\x82\xb9150 debited"])
    def test_bad_input_returns_none(self, body):
        assert parse(body) is None

    def test_internal_failure_returns_none(self):
        class BrokenExtractor:
            def extract(self, body):
                raise RuntimeError("regex engine failure")

        parser = TransactionParser(amount_extractor=BrokenExtractor())
        assert parser.parse("₹150 debited to Cafe.") is None

    def test_merchant_failure_returns_none(self):
        class BrokenExtractor:
            def extract(self, body):
                raise UnicodeError("bad encoding")

        parser = TransactionParser(merchant_extractor=BrokenExtractor())
        assert parser.parse("₹150 debited to Cafe.") is None


class TestTransactionDetails:

    def test_rejects_non_positive_amount(self):
        with pytest.raises(ValueError):
            TransactionDetails(amount=Decimal("0"), merchant="Uber")
        with pytest.raises(ValueError):
            TransactionDetails(amount=Decimal("-5"), merchant="Uber")

    def test_rejects_blank_merchant(self):
        with pytest.raises(ValueError):
            TransactionDetails(amount=Decimal("5"), merchant="   ")

    def test_is_immutable(self):
        details = TransactionDetails(amount=Decimal("5"), merchant="Uber")
        with pytest.raises(FrozenInstanceError):
            details.merchant = "Ola"

    def test_to_dict(self):
        details = TransactionDetails(amount=Decimal("150"), merchant="Cafe Coffee Day")
        assert details.to_dict() == {
            "amount": 150.0,
            "merchant": "Cafe Coffee Day",
            "amount_display": "₹150.00",
        }


@pytest.mark.parametrize("amount, expected", [
    (Decimal("150"), "₹150.00"),
    (Decimal("0.01"), "₹0.01"),
    (0.5, "₹0.50"),
])
def test_format_amount_display(amount, expected):
    assert format_amount_display(amount) == expected


def test_entries_are_handed_over_as_pending():
    assert [status.value for status in EntryStatus] == ["pending"]
