"""Shared fixtures: fake credentials and a recording provider, no network."""

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from checkout_server.core.config import Settings
from checkout_server.main import create_app
from checkout_server.services.payments import OrderOptions, PaymentsProvider


TEST_KEY_ID = "rzp_test_abc123xyz"
TEST_KEY_SECRET = "s3cr3t"
TEST_WEBHOOK_SECRET = "whsec_test_secret123"


class RecordingProvider(PaymentsProvider):
    """remembers every OrderOptions; optionally raises from a queue of errors first."""

    name = "recording"

    def __init__(self, errors: List[Exception] | None = None):
        self.calls: List[OrderOptions] = []
        self.errors = list(errors or [])

    def create_order(self, options: OrderOptions) -> Dict[str, Any]:
        self.calls.append(options)
        if self.errors:
            raise self.errors.pop(0)
        payload = options.to_payload()
        return {
            "id": "order_ABC",
            "entity": "order",
            "amount": payload["amount"],
            "currency": payload["currency"],
            "receipt": payload["receipt"],
            "status": "created",
            "attempts": 0,
        }

    def health_check(self) -> Dict[str, str]:
        return {"status": "ok", "provider": self.name}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        APP_ENV="test",
        RAZORPAY_KEY_ID=TEST_KEY_ID,
        RAZORPAY_KEY_SECRET=TEST_KEY_SECRET,
        RAZORPAY_WEBHOOK_SECRET=TEST_WEBHOOK_SECRET,
        PAYMENTS_PROVIDER="mock",
        DEFAULT_ORDER_AMOUNT=500,
        ORDER_CURRENCY="INR",
        PAYMENT_CAPTURE=1,
        PROVIDER_TIMEOUT_SECONDS=2.0,
        PROVIDER_RETRIES=1,
        ALLOWED_ORIGINS=["*"],
    )


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def client(settings, provider) -> TestClient:
    return TestClient(create_app(settings, provider))
