from fastapi import APIRouter

from checkout_server.api.routers import health as health_router
from checkout_server.api.routers import orders as orders_router
from checkout_server.api.routers import payments as payments_router
from checkout_server.api.routers import webhooks as webhooks_router

router = APIRouter()

# checkout flow
router.include_router(orders_router.router)
router.include_router(payments_router.router)

# webhook routes
router.include_router(webhooks_router.router)

router.include_router(health_router.router)
