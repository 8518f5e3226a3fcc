from fastapi import Request

from checkout_server.core.config import Settings
from checkout_server.services.payments import PaymentsProvider


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_provider(request: Request) -> PaymentsProvider:
    return request.app.state.payments_provider
