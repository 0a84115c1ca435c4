"""
UPI SMS Transaction Parser - Message Pipeline
Runs an inbound SMS through classification, parsing and validation, then
hands the result to the ledger store and notifier supplied by the host.
"""

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Optional

from extractors.financial_rules import EntryStatus
from extractors.patterns import UNKNOWN_MERCHANT
from extractors.signals import is_transaction
from extractors.sms_parser import TransactionDetails, parse
from logging_config import setup_logging
from validators.transaction_validator import TransactionValidator, ValidationError, sanitize_merchant_name

logger = logging.getLogger(__name__)

# store(details, status) -> entry id
EntryStore = Callable[[TransactionDetails, str], Any]
# notifier(details, entry_id)
Notifier = Callable[[TransactionDetails, Any], None]

PARSE_FAILURE_MESSAGE = "Could not parse transaction details from SMS"

SAMPLE_MESSAGES = [
    ("VK-UPI", "UPI: ₹150 debited from A/c **1234 to Cafe Coffee Day. UPI Ref: 123456789012"),
    ("PHONEPE", "Rs.250 paid to Uber via PhonePe. Transaction ID: 987654321098"),
    ("AD-ICICIB", "INR 1200 spent at Big Bazaar. UPI Ref: 112233445566"),
    ("HDFC", "₹500 debited from your account to Netflix. Transaction successful."),
    ("GPAY", "Rs.75 paid to Local Store via GPay. Ref: 556677889900"),
    ("SBIUPI", "INR 300 transferred to Restaurant. UPI transaction completed."),
    ("PAYTM", "₹120 spent at Metro Station via Paytm. Transaction ID: 334455667788"),
    ("AXISBK", "Rs.450 debited to Gas Station. UPI Ref: 778899001122"),
    ("KOTAK", "INR 200 paid to Coffee Shop. Transaction successful."),
    ("VM-UPI", "₹800 debited from A/c **5678 to Apollo Pharmacy. UPI Ref: 990011223344"),
]


class ProcessingStatus(Enum):
    """Outcome of processing one SMS."""
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"
    INVALID = "invalid"


@dataclass
class ProcessingResult:
    """Result handed back to whoever delivered the SMS."""

    status: ProcessingStatus
    message: str
    details: Optional[TransactionDetails] = None
    entry_id: Any = None
    errors: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == ProcessingStatus.SUCCESS

    def to_dict(self) -> dict:
        """Convert result to dictionary."""
        return {
            "status": self.status.value,
            "message": self.message,
            "entry_id": self.entry_id,
            "transaction": self.details.to_dict() if self.details else None,
            "errors": list(self.errors),
        }


class MessageProcessor:
    """
    Processes inbound SMS messages one at a time.

    Keeps no message history, so a redelivered SMS is simply processed
    again.
    """

    def __init__(
        self,
        store: Optional[EntryStore] = None,
        notifier: Optional[Notifier] = None,
        validator: Optional[TransactionValidator] = None
    ):
        self.store = store
        self.notifier = notifier
        self.validator = validator or TransactionValidator(strict_mode=False)
        self.stats = {status.value: 0 for status in ProcessingStatus}
        self.stats["processed"] = 0

    def process(self, sender: str, body: str) -> ProcessingResult:
        """
        Process a single SMS.

        Args:
            sender: Sender id of the SMS
            body: Message text

        Returns:
            ProcessingResult describing the outcome
        """
        result = self._process(sender, body)
        self.stats["processed"] += 1
        self.stats[result.status.value] += 1
        return result

    def _process(self, sender: str, body: str) -> ProcessingResult:
        if not sender or not body:
            logger.warning("Missing sender or message body")
            return ProcessingResult(ProcessingStatus.FAILED, "Missing sender or message body")

        logger.debug(f"Processing SMS from: {sender}")

        if not is_transaction(sender, body):
            logger.info(f"Skipping non-transaction SMS from {sender}")
            return ProcessingResult(ProcessingStatus.SKIPPED, "Not a transaction message")

        details = parse(body)
        if details is None:
            logger.info(f"{PARSE_FAILURE_MESSAGE} (sender: {sender})")
            return ProcessingResult(ProcessingStatus.FAILED, PARSE_FAILURE_MESSAGE)

        details = self._sanitize(details)

        try:
            errors = self.validator.validate(details)
        except ValidationError as e:
            errors = [str(e)]
        if errors:
            return ProcessingResult(
                ProcessingStatus.INVALID,
                "Transaction details failed validation",
                details=details,
                errors=errors
            )

        entry_id = None
        if self.store is not None:
            try:
                entry_id = self.store(details, EntryStatus.PENDING.value)
            except Exception as e:
                logger.error(f"Failed to store transaction {details}: {e}", exc_info=True)
                return ProcessingResult(
                    ProcessingStatus.FAILED,
                    f"Failed to store transaction: {e}",
                    details=details
                )
            logger.info(f"Pending entry created with ID: {entry_id}")

        if self.notifier is not None:
            try:
                self.notifier(details, entry_id)
            except Exception as e:
                logger.warning(f"Notification failed for entry {entry_id}: {e}")

        return ProcessingResult(
            ProcessingStatus.SUCCESS,
            "Transaction recorded",
            details=details,
            entry_id=entry_id
        )

    @staticmethod
    def _sanitize(details: TransactionDetails) -> TransactionDetails:
        merchant = sanitize_merchant_name(details.merchant) or UNKNOWN_MERCHANT
        if merchant == details.merchant:
            return details
        logger.debug(f"Sanitized merchant '{details.merchant}' -> '{merchant}'")
        return TransactionDetails(amount=details.amount, merchant=merchant)

    def process_many(self, messages: Iterable[tuple[str, str]]) -> list[ProcessingResult]:
        """
        Process a batch of (sender, body) pairs in order.

        Args:
            messages: Iterable of (sender, body) tuples

        Returns:
            One ProcessingResult per message
        """
        return [self.process(sender, body) for sender, body in messages]

    def get_stats(self) -> dict:
        """Get processing statistics."""
        return self.stats.copy()

    def _print_summary(self):
        """Print processing summary."""
        logger.info("=" * 80)
        logger.info("PROCESSING SUMMARY")
        logger.info("=" * 80)
        logger.info(f"Messages processed:   {self.stats['processed']}")
        logger.info(f"Transactions stored:  {self.stats['success']}")
        logger.info(f"Skipped:              {self.stats['skipped']}")
        logger.info(f"Failed:               {self.stats['failed']}")
        logger.info(f"Invalid:              {self.stats['invalid']}")
        logger.info("=" * 80)


def main():
    """Main entry point - runs the sample messages through the pipeline."""
    setup_logging()

    entries = []

    def store(details: TransactionDetails, status: str) -> int:
        entries.append((details, status))
        return len(entries)

    processor = MessageProcessor(store=store)

    try:
        results = processor.process_many(SAMPLE_MESSAGES)
    except Exception as e:
        logger.error(f"Processing failed: {e}", exc_info=True)
        print(f"\n❌ Error: {e}")
        sys.exit(1)

    for (sender, body), result in zip(SAMPLE_MESSAGES, results):
        if result.details:
            print(f"[{result.status.value}] {sender}: {result.details.amount_display} -> {result.details.merchant}")
        else:
            print(f"[{result.status.value}] {sender}: {result.message}")

    processor._print_summary()
    print(f"\n✅ {len(entries)} pending entries created from {len(results)} messages")


if __name__ == "__main__":
    main()
