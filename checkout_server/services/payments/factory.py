from checkout_server.core.config import Settings

from .base import PaymentsProvider
from .mock import MockPayments
from .razorpay_provider import RazorpayPayments


def get_payments_provider(settings: Settings) -> PaymentsProvider:
    provider = (settings.PAYMENTS_PROVIDER or "razorpay").lower()
    if provider == "mock":
        return MockPayments()
    if provider != "razorpay":
        raise ValueError(f"Unknown PAYMENTS_PROVIDER: {settings.PAYMENTS_PROVIDER}")
    return RazorpayPayments(settings.RAZORPAY_KEY_ID, settings.RAZORPAY_KEY_SECRET)
