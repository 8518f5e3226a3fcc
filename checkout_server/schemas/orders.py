from typing import Annotated, Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator

from checkout_server.services.payments.base import to_minor_units

# razorpay accepts at most 15 note pairs of up to 256 chars each
MAX_NOTES = 15
MAX_NOTE_LENGTH = 256


class OrderCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # major currency units (rupees); omitted -> DEFAULT_ORDER_AMOUNT
    amount: Annotated[float, Field(strict=True, gt=0, allow_inf_nan=False)] | None = None
    notes: Dict[str, str] | None = None

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        # anything under half a paisa rounds to a zero-value order
        if v is not None and to_minor_units(v) < 1:
            raise ValueError("Amount must be at least 0.01")
        return v

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v):
        if v is None:
            return v
        if len(v) > MAX_NOTES:
            raise ValueError(f"At most {MAX_NOTES} notes allowed")
        for key, value in v.items():
            if len(key) > MAX_NOTE_LENGTH or len(value) > MAX_NOTE_LENGTH:
                raise ValueError(f"Notes are limited to {MAX_NOTE_LENGTH} characters")
        return v


class OrderOut(BaseModel):
    """the provider's order, passed through verbatim."""
    model_config = ConfigDict(extra="allow")

    id: str
    amount: int
    currency: str
    receipt: str | None = None
    status: str | None = None


class OrderErrorResponse(BaseModel):
    error: str
    details: str | None = None
