import time
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict


class PaymentsProviderError(Exception):
    """provider rejected the call or could not be reached."""


class TransientProviderError(PaymentsProviderError):
    """timeouts, dropped connections and provider 5xx; safe to retry once."""


def to_minor_units(amount: int | float | Decimal | str) -> int:
    """major currency units -> minor units, half-up on the decimal value.

    10.00 -> 1000, 10.005 -> 1001, 10.004 -> 1000
    """
    minor = Decimal(str(amount)) * 100
    if not minor.is_finite():
        raise ValueError(f"Amount must be a finite number, got {amount!r}")
    return int(minor.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def make_receipt(now_ms: int | None = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"rcpt_{now_ms}"


@dataclass
class OrderOptions:
    """what we ask the provider to create."""
    amount: int  # minor units (paise)
    currency: str = "INR"
    receipt: str = field(default_factory=make_receipt)
    payment_capture: int = 1  # 1=auto-capture, 0=authorize only
    notes: Dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "amount": self.amount,
            "currency": self.currency,
            "receipt": self.receipt,
            "payment_capture": self.payment_capture,
        }
        if self.notes:
            payload["notes"] = dict(self.notes)
        return payload


class PaymentsProvider:
    """base payments provider interface."""

    name = "base"

    def create_order(self, options: OrderOptions) -> Dict[str, Any]:  # pragma: no cover
        raise NotImplementedError

    def health_check(self) -> Dict[str, str]:  # pragma: no cover
        return {"status": "unknown", "provider": self.name}
