"""
Order creation against the payments provider.

The SDK call is blocking, so it runs in the default executor and is bounded by
PROVIDER_TIMEOUT_SECONDS. Transient failures get PROVIDER_RETRIES more
attempts after a short jittered pause; anything else surfaces immediately.

The amount may come from the client. That is fine for a demo checkout page
but a real shop must price the cart server-side and never charge what the
browser asks for.
"""
import asyncio
import logging
from typing import Any, Dict

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
    wait_random,
)

from checkout_server.core.config import Settings

from .base import OrderOptions, PaymentsProvider, TransientProviderError, to_minor_units

logger = logging.getLogger(__name__)

RETRY_BASE_DELAY = 0.25


def build_order_options(settings: Settings, amount: float | None = None, notes: Dict[str, str] | None = None) -> OrderOptions:
    if amount is None:
        amount = settings.DEFAULT_ORDER_AMOUNT
    return OrderOptions(
        amount=to_minor_units(amount),
        currency=settings.ORDER_CURRENCY,
        payment_capture=settings.PAYMENT_CAPTURE,
        notes=dict(notes or {}),
    )


async def _create_once(provider: PaymentsProvider, options: OrderOptions, timeout: float) -> Dict[str, Any]:
    loop = asyncio.get_running_loop()
    try:
        # the executor future is dropped on timeout; the SDK call itself cannot be interrupted
        return await asyncio.wait_for(loop.run_in_executor(None, provider.create_order, options), timeout=timeout)
    except asyncio.TimeoutError as e:
        raise TransientProviderError(f"{provider.name} did not answer within {timeout}s") from e


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    delay = retry_state.next_action.sleep if retry_state.next_action else 0
    logger.warning(f"Order creation attempt {retry_state.attempt_number} failed ({error}), retrying in {delay:.2f}s")


async def create_order(
    provider: PaymentsProvider,
    settings: Settings,
    amount: float | None = None,
    notes: Dict[str, str] | None = None,
) -> Dict[str, Any]:
    options = build_order_options(settings, amount, notes)
    retrying = AsyncRetrying(
        stop=stop_after_attempt(1 + max(settings.PROVIDER_RETRIES, 0)),
        wait=wait_fixed(RETRY_BASE_DELAY) + wait_random(0, RETRY_BASE_DELAY),
        retry=retry_if_exception_type(TransientProviderError),
        before_sleep=_log_retry,
        reraise=True,
    )
    async for attempt in retrying:
        with attempt:
            order = await _create_once(provider, options, settings.PROVIDER_TIMEOUT_SECONDS)
    return order
