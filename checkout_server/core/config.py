import os
from decimal import Decimal, ROUND_HALF_UP
from typing import List
from dotenv import load_dotenv

# grab env vars from .env file
load_dotenv()


def _split_csv(raw: str | None) -> List[str]:
    return [o.strip() for o in (raw or "").split(",") if o.strip()]


class Settings:
    """process configuration, built once at startup and handed to the app.

    values come from the environment; keyword overrides win, which is how
    tests build an app with fake credentials.
    """

    def __init__(self, **overrides):
        # app settings
        self.APP_ENV: str = os.getenv("APP_ENV", "dev")
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "3000"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

        # CORS stuff
        self.ALLOWED_ORIGINS: List[str] = _split_csv(os.getenv("ALLOWED_ORIGINS", "*")) or ["*"]

        # razorpay credentials
        self.RAZORPAY_KEY_ID: str | None = os.getenv("RAZORPAY_KEY_ID")
        self.RAZORPAY_KEY_SECRET: str | None = os.getenv("RAZORPAY_KEY_SECRET")
        self.RAZORPAY_WEBHOOK_SECRET: str | None = os.getenv("RAZORPAY_WEBHOOK_SECRET")

        # order defaults
        self.PAYMENTS_PROVIDER: str = os.getenv("PAYMENTS_PROVIDER", "razorpay")
        self.DEFAULT_ORDER_AMOUNT: float = float(os.getenv("DEFAULT_ORDER_AMOUNT", "500"))
        self.ORDER_CURRENCY: str = os.getenv("ORDER_CURRENCY", "INR")
        # 1 = auto-capture, 0 = authorize only
        self.PAYMENT_CAPTURE: int = int(os.getenv("PAYMENT_CAPTURE", "1"))

        # outbound provider calls
        self.PROVIDER_TIMEOUT_SECONDS: float = float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "10"))
        self.PROVIDER_RETRIES: int = int(os.getenv("PROVIDER_RETRIES", "1"))

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise TypeError(f"Unknown setting: {key}")
            setattr(self, key, value)

        if self.PAYMENT_CAPTURE not in (0, 1):
            raise ValueError("PAYMENT_CAPTURE must be 0 or 1")
        minor = Decimal(str(self.DEFAULT_ORDER_AMOUNT)) * 100
        if not minor.is_finite() or minor.quantize(Decimal("1"), rounding=ROUND_HALF_UP) < 1:
            raise ValueError("DEFAULT_ORDER_AMOUNT must be a finite amount of at least 0.01")

    @property
    def razorpay_configured(self) -> bool:
        return bool(self.RAZORPAY_KEY_ID and self.RAZORPAY_KEY_SECRET)

    def __repr__(self) -> str:
        # never print secrets
        key_id = (self.RAZORPAY_KEY_ID or "")[:8]
        return f"Settings(env={self.APP_ENV!r}, port={self.PORT}, provider={self.PAYMENTS_PROVIDER!r}, key_id={key_id!r}...)"
