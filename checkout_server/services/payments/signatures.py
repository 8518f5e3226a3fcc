"""HMAC-SHA256 helpers for Razorpay checkout and webhook signatures.

Checkout signatures cover the string ``"{order_id}|{payment_id}"`` keyed by the
API key secret. Webhook signatures cover the exact raw request body keyed by the
webhook secret. Both are lowercase hex digests and are always compared with
``hmac.compare_digest``.
"""
import hmac
import hashlib


def compute_hmac(secret: str, message: bytes | str) -> str:
    if isinstance(message, str):
        message = message.encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def checkout_signature(order_id: str, payment_id: str, secret: str) -> str:
    return compute_hmac(secret, f"{order_id}|{payment_id}")


def signatures_match(expected: str, supplied: str | None) -> bool:
    if not supplied:
        return False
    try:
        return hmac.compare_digest(expected, supplied)
    except TypeError:
        # non-ascii str input
        return False


def verify_checkout_signature(order_id: str, payment_id: str, signature: str, secret: str) -> bool:
    return signatures_match(checkout_signature(order_id, payment_id, secret), signature)


def verify_webhook_signature(body: bytes, signature: str | None, secret: str | None) -> bool:
    """check a webhook delivery; ``body`` must be the untouched request bytes."""
    if not secret:
        return False
    return signatures_match(compute_hmac(secret, body), signature)
