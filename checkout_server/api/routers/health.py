from fastapi import APIRouter, Depends

from checkout_server.api.deps import get_provider, get_settings
from checkout_server.core.config import Settings
from checkout_server.services.payments import PaymentsProvider

router = APIRouter(tags=["health"])


@router.get("/health")
def health(settings: Settings = Depends(get_settings), provider: PaymentsProvider = Depends(get_provider)):
    return {
        "status": "ok",
        "env": settings.APP_ENV,
        "payments": provider.health_check(),
        "webhook_secret_configured": bool(settings.RAZORPAY_WEBHOOK_SECRET),
    }
