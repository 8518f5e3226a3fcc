import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from checkout_server.api.deps import get_provider, get_settings
from checkout_server.core.config import Settings
from checkout_server.schemas.orders import OrderCreateRequest, OrderErrorResponse, OrderOut
from checkout_server.services.payments import PaymentsProvider, create_order as create_provider_order

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orders"])


@router.post(
    "/create-order",
    responses={200: {"model": OrderOut}, 500: {"model": OrderErrorResponse}},
)
async def create_order(
    payload: OrderCreateRequest | None = None,
    settings: Settings = Depends(get_settings),
    provider: PaymentsProvider = Depends(get_provider),
):
    """create a provider order for the checkout page.

    the client-supplied amount is trusted here; a real shop computes it from the cart.
    """
    amount = payload.amount if payload else None
    notes = payload.notes if payload else None
    try:
        order = await create_provider_order(provider, settings, amount, notes)
    except Exception as e:
        logger.exception(f"Order creation failed via {provider.name}")
        return JSONResponse(
            status_code=500,
            content={"error": "order_creation_failed", "details": str(e)},
        )
    return order
