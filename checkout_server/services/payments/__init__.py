"""
Payments services package.

This package contains:
- Provider adapters (razorpay SDK, offline mock) and the factory picking one
- Order creation with a bounded timeout and a single retry
- HMAC signature checks for checkout callbacks and webhooks
"""

from .base import (
    OrderOptions,
    PaymentsProvider,
    PaymentsProviderError,
    TransientProviderError,
    to_minor_units,
)
from .factory import get_payments_provider
from .orders import create_order

__all__ = [
    'OrderOptions',
    'PaymentsProvider',
    'PaymentsProviderError',
    'TransientProviderError',
    'to_minor_units',
    'get_payments_provider',
    'create_order',
]
