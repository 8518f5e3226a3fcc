import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from checkout_server.api.deps import get_settings
from checkout_server.core.config import Settings
from checkout_server.schemas.payments import VerifyPaymentRequest, VerifyPaymentResponse
from checkout_server.services.payments.signatures import verify_checkout_signature

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payments"])


@router.post(
    "/verify-payment",
    response_model=VerifyPaymentResponse,
    response_model_exclude_none=True,
    responses={400: {"model": VerifyPaymentResponse}},
)
def verify_payment(payload: VerifyPaymentRequest | None = None, settings: Settings = Depends(get_settings)):
    if payload is None or not payload.is_complete():
        return JSONResponse(status_code=400, content={"verified": False, "error": "missing_parameters"})

    if not settings.RAZORPAY_KEY_SECRET:
        logger.error("RAZORPAY_KEY_SECRET not configured, cannot verify payments")
        return JSONResponse(status_code=500, content={"verified": False, "error": "not_configured"})

    verified = verify_checkout_signature(
        payload.razorpay_order_id,
        payload.razorpay_payment_id,
        payload.razorpay_signature,
        settings.RAZORPAY_KEY_SECRET,
    )
    if not verified:
        # a negative answer, not a failed request
        logger.warning(f"Signature mismatch for payment {payload.razorpay_payment_id} order={payload.razorpay_order_id}")
        return VerifyPaymentResponse(verified=False, error="signature_mismatch")

    # TODO: mark the order paid once orders are stored somewhere
    logger.info(f"Payment verified: {payload.razorpay_payment_id} order={payload.razorpay_order_id}")
    return VerifyPaymentResponse(verified=True)
