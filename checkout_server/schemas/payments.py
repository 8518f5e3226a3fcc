from pydantic import BaseModel, ConfigDict


class VerifyPaymentRequest(BaseModel):
    """fields razorpay checkout hands to the success callback.

    all optional here so a missing one turns into ``missing_parameters``
    instead of a validation error; unknown fields are still rejected.
    """
    model_config = ConfigDict(extra="forbid")

    razorpay_order_id: str | None = None
    razorpay_payment_id: str | None = None
    razorpay_signature: str | None = None

    def is_complete(self) -> bool:
        return bool(self.razorpay_order_id and self.razorpay_payment_id and self.razorpay_signature)


class VerifyPaymentResponse(BaseModel):
    verified: bool
    error: str | None = None  # missing_parameters|signature_mismatch
