import logging
from typing import Any, Dict

import razorpay
import requests
from razorpay.errors import BadRequestError, GatewayError, ServerError

from .base import OrderOptions, PaymentsProvider, PaymentsProviderError, TransientProviderError

logger = logging.getLogger(__name__)


class RazorpayPayments(PaymentsProvider):
    """orders through the official razorpay SDK (blocking, requests-based)."""

    name = "razorpay"

    def __init__(self, key_id: str | None, key_secret: str | None, client: razorpay.Client | None = None):
        self.key_id = key_id
        self.key_secret = key_secret
        self._client = client

    @property
    def client(self) -> razorpay.Client:
        if self._client is None:
            if not self.key_id or not self.key_secret:
                raise PaymentsProviderError("Razorpay key id/secret not configured")
            self._client = razorpay.Client(auth=(self.key_id, self.key_secret))
        return self._client

    def create_order(self, options: OrderOptions) -> Dict[str, Any]:
        payload = options.to_payload()
        try:
            order = self.client.order.create(data=payload)
        except BadRequestError as e:
            # bad credentials and validation failures both land here
            raise PaymentsProviderError(str(e)) from e
        except (ServerError, GatewayError) as e:
            raise TransientProviderError(str(e)) from e
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise TransientProviderError(f"Razorpay unreachable: {e}") from e
        logger.info(f"Razorpay order created: {order.get('id')} amount={order.get('amount')} receipt={payload['receipt']}")
        return order

    def health_check(self) -> Dict[str, str]:
        if not self.key_id:
            return {"status": "misconfigured", "reason": "missing_key_id"}
        if not self.key_secret:
            return {"status": "misconfigured", "reason": "missing_key_secret"}
        # test keys start with rzp_test_, live keys with rzp_live_
        if not self.key_id.startswith("rzp_"):
            return {"status": "misconfigured", "reason": "invalid_key_id_format"}
        return {"status": "configured", "provider": self.name, "key_id_prefix": self.key_id[:12] + "..."}
