"""Shared pytest configuration for the project test suite."""
import sys
from pathlib import Path

import pytest


# Make the flat ``backend`` modules (config, extractors, ...) importable.
ROOT = Path(__file__).resolve().parent.parent
BACKEND = ROOT / "backend"
for path in (ROOT, BACKEND):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture
def scenario_messages():
    """(sender, body, expected amount, expected merchant) for accepted UPI SMS."""
    return [
        ("VK-UPI", "UPI: ₹150 debited from A/c **1234 to Cafe Coffee Day. UPI Ref: 123456789012",
         150, "Cafe Coffee Day"),
        ("PHONEPE", "Rs.250 paid to Uber via PhonePe. Transaction ID: 987654321098",
         250, "Uber"),
        ("HDFC", "₹500 debited from your account to Netflix. Transaction successful.",
         500, "Netflix"),
        ("UPI", "You have spent ₹500.",
         500, "Unknown Merchant"),
    ]
