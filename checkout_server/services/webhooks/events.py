"""
Razorpay webhook event dispatch.

Handlers are registered per event type at import time and receive the parsed
envelope. Nothing is persisted and deliveries are not deduplicated: razorpay
retries until it gets a 2xx, so a redelivered event runs its handler again.
"""
import logging
from typing import Callable, Dict

from checkout_server.schemas.webhooks import WebhookEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[WebhookEvent], None]

_handlers: Dict[str, EventHandler] = {}


def on_event(event_type: str) -> Callable[[EventHandler], EventHandler]:
    def register(fn: EventHandler) -> EventHandler:
        _handlers[event_type] = fn
        return fn
    return register


def registered_events() -> list:
    return sorted(_handlers)


def dispatch(event: WebhookEvent) -> str:
    """run the handler for ``event.event``; returns handled|skipped|error."""
    handler = _handlers.get(event.event)
    if handler is None:
        logger.info(f"No handler for webhook event {event.event}, skipping")
        return "skipped"
    try:
        handler(event)
    except Exception:
        # still acknowledged; a non-2xx would only make razorpay redeliver
        logger.exception(f"Webhook handler for {event.event} failed")
        return "error"
    return "handled"


@on_event("payment.authorized")
def _payment_authorized(event: WebhookEvent) -> None:
    payment = event.entity_of("payment")
    logger.info(f"Payment authorized: {payment.get('id')} order={payment.get('order_id')} amount={payment.get('amount')}")


@on_event("payment.captured")
def _payment_captured(event: WebhookEvent) -> None:
    payment = event.entity_of("payment")
    # TODO: mark the order paid once orders are stored somewhere
    logger.info(f"Payment captured: {payment.get('id')} order={payment.get('order_id')} amount={payment.get('amount')}")


@on_event("payment.failed")
def _payment_failed(event: WebhookEvent) -> None:
    payment = event.entity_of("payment")
    logger.warning(
        f"Payment failed: {payment.get('id')} order={payment.get('order_id')} "
        f"code={payment.get('error_code')} reason={payment.get('error_description')}"
    )


@on_event("order.paid")
def _order_paid(event: WebhookEvent) -> None:
    order = event.entity_of("order")
    logger.info(f"Order paid: {order.get('id')} amount_paid={order.get('amount_paid')}")


@on_event("refund.processed")
def _refund_processed(event: WebhookEvent) -> None:
    refund = event.entity_of("refund")
    logger.info(f"Refund processed: {refund.get('id')} payment={refund.get('payment_id')} amount={refund.get('amount')}")
