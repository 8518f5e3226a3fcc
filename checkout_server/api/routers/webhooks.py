import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from checkout_server.api.deps import get_settings
from checkout_server.core.config import Settings
from checkout_server.schemas.webhooks import WebhookEvent
from checkout_server.services.payments.signatures import verify_webhook_signature
from checkout_server.services.webhooks.events import dispatch

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhooks"])

SIGNATURE_HEADER = "x-razorpay-signature"
EVENT_ID_HEADER = "x-razorpay-event-id"


@router.post("/webhook", response_class=PlainTextResponse)
async def razorpay_webhook(request: Request, settings: Settings = Depends(get_settings)):
    """
    Razorpay webhook deliveries.

    The signature covers the exact bytes razorpay sent, so read the raw body
    (don't call request.json()) and only parse after the check passes.
    """
    payload_bytes = await request.body()
    signature = request.headers.get(SIGNATURE_HEADER)

    if not settings.RAZORPAY_WEBHOOK_SECRET:
        logger.error("RAZORPAY_WEBHOOK_SECRET not configured, rejecting webhook")
    if not verify_webhook_signature(payload_bytes, signature, settings.RAZORPAY_WEBHOOK_SECRET):
        logger.warning(f"Webhook signature mismatch from {request.client.host if request.client else 'unknown'}")
        return PlainTextResponse("invalid signature", status_code=400)

    try:
        event = WebhookEvent.model_validate(json.loads(payload_bytes))
    except (ValueError, ValidationError):
        logger.warning("Signed webhook body is not a valid event envelope")
        return PlainTextResponse("invalid payload", status_code=400)

    logger.info(f"Webhook event: {event.event} id={request.headers.get(EVENT_ID_HEADER)}")
    dispatch(event)
    return PlainTextResponse("ok", status_code=200)
