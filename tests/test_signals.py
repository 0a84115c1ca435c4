import pytest

from extractors.signals import (
    has_amount_marker,
    has_transaction_keyword,
    is_known_payment_sender,
    is_transaction,
)


class TestSenderSignal:

    @pytest.mark.parametrize("sender", [
        "VK-UPI", "UPI", "PHONEPE", "HDFC", "AD-HDFCBK", "JM-SBIINB", "gpay", "Paytm",
    ])
    def test_known_senders(self, sender):
        assert is_known_payment_sender(sender)

    @pytest.mark.parametrize("sender", ["RANDOM", "FRIEND", "+919876543210", "", None])
    def test_unknown_senders(self, sender):
        assert not is_known_payment_sender(sender)


class TestKeywordSignal:

    def test_keyword_is_case_insensitive(self):
        assert has_transaction_keyword("Amount DEBITED from account")
        assert has_transaction_keyword("amount debited from account")

    def test_no_keyword(self):
        assert not has_transaction_keyword("Your account balance is low.")
        assert not has_transaction_keyword("")

    @pytest.mark.parametrize("body", ["₹500 Netflix", "Rs.20 cashback", "INR 40", "500 rupees"])
    def test_amount_markers(self, body):
        assert has_amount_marker(body)

    def test_amount_marker_is_case_sensitive(self):
        assert not has_amount_marker("inr 100")
        assert not has_amount_marker("rs 100")
        assert not has_amount_marker(None)


class TestTransactionClassifier:
    """Pins known_sender AND (keyword OR amount_marker)."""

    def test_known_sender_with_keyword_and_marker(self):
        assert is_transaction("VK-UPI", "UPI: ₹150 debited from A/c **1234 to Cafe Coffee Day.")

    def test_known_sender_with_keyword_only(self):
        assert not has_amount_marker("Payment done")
        assert is_transaction("HDFC", "Payment done")

    def test_known_sender_with_marker_only(self):
        body = "500 rupees Netflix"
        assert not has_transaction_keyword(body)
        assert is_transaction("HDFC", body)

    def test_known_sender_without_either_signal(self):
        assert not is_transaction("HDFC", "Hello, your statement is ready")

    @pytest.mark.parametrize("body", [
        "₹500 debited from your account to Netflix.",
        "Rs.250 paid to Uber via PhonePe.",
        "Your account balance is low.",
    ])
    def test_unknown_sender_always_rejected(self, body):
        assert not is_transaction("RANDOM", body)

    def test_non_transactional_message(self):
        assert not is_transaction("RANDOM", "Your account balance is low.")

    def test_failed_transaction_message_is_accepted_by_keyword(self):
        assert is_transaction("UPI", "Transaction to Amazon failed.")

    def test_bad_input_types(self):
        assert not is_transaction(None, "₹100 debited")
        assert not is_transaction("UPI", None)
