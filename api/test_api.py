"""
Tests for the UPI SMS Transaction Parser API
"""

import pytest
from fastapi.testclient import TestClient

from main import app, entry_store


@pytest.fixture
def client():
    return TestClient(app)


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root_lists_endpoints(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "POST /messages" in response.json()["endpoints"]
    assert response.json()["config"]["max_merchant_length"] == 100


def test_classify(client):
    response = client.post("/classify", json={
        "sender": "VK-UPI",
        "body": "UPI: ₹150 debited from A/c **1234 to Cafe Coffee Day. UPI Ref: 123456789012"
    })
    assert response.status_code == 200
    assert response.json() == {"is_transaction": True}


def test_classify_unknown_sender(client):
    response = client.post("/classify", json={"sender": "RANDOM", "body": "Your account balance is low."})
    assert response.json() == {"is_transaction": False}


def test_classify_requires_fields(client):
    response = client.post("/classify", json={"body": "₹150 debited"})
    assert response.status_code == 422


def test_parse(client):
    response = client.post("/parse", json={"body": "Rs.250 paid to Uber via PhonePe. Transaction ID: 987654321098"})
    assert response.status_code == 200
    assert response.json() == {
        "parsed": True,
        "transaction": {"amount": 250.0, "merchant": "Uber", "amount_display": "₹250.00"}
    }


def test_parse_without_amount(client):
    response = client.post("/parse", json={"body": "Transaction to Amazon failed."})
    assert response.json() == {"parsed": False, "transaction": None}


def test_process_message_creates_pending_entry(client):
    body = {"sender": "HDFC", "body": "₹500 debited from your account to Netflix. Transaction successful."}
    response = client.post("/messages", json=body)
    assert response.status_code == 200
    result = response.json()
    assert result["status"] == "success"
    assert result["transaction"]["merchant"] == "Netflix"
    assert isinstance(result["entry_id"], int)

    again = client.post("/messages", json=body).json()
    assert again["entry_id"] == result["entry_id"] + 1


def test_entry_store_only_counts_ids(client):
    client.post("/messages", json={"sender": "PAYTM", "body": "Rs.250 paid to Uber via PhonePe."})
    assert vars(entry_store).keys() == {"_ids"}


def test_process_message_skipped(client):
    response = client.post("/messages", json={"sender": "RANDOM", "body": "₹500 debited to Netflix."})
    result = response.json()
    assert result["status"] == "skipped"
    assert result["entry_id"] is None
    assert result["transaction"] is None


def test_samples(client):
    response = client.get("/samples")
    assert response.status_code == 200
    samples = response.json()
    assert len(samples) == 10
    assert all(sample["is_transaction"] for sample in samples)
    assert samples[0]["transaction"]["merchant"] == "Cafe Coffee Day"
