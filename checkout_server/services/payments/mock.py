import uuid
from typing import Any, Dict

from .base import OrderOptions, PaymentsProvider


class MockPayments(PaymentsProvider):
    """offline stand-in; echoes the options back the way razorpay shapes an order."""

    name = "mock"

    def create_order(self, options: OrderOptions) -> Dict[str, Any]:
        payload = options.to_payload()
        return {
            "id": f"order_mock{uuid.uuid4().hex[:10]}",
            "entity": "order",
            "amount": payload["amount"],
            "amount_paid": 0,
            "amount_due": payload["amount"],
            "currency": payload["currency"],
            "receipt": payload["receipt"],
            "status": "created",
            "attempts": 0,
            "notes": payload.get("notes", {}),
        }

    def health_check(self) -> Dict[str, str]:
        return {"status": "ok", "provider": self.name}
