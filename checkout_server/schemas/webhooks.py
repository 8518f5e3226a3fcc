from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict


class WebhookEvent(BaseModel):
    """razorpay webhook envelope; only ``event`` is required."""
    model_config = ConfigDict(extra="allow")

    entity: str | None = None
    account_id: str | None = None
    event: str
    contains: List[str] = []
    payload: Dict[str, Any] = {}
    created_at: int | None = None

    def entity_of(self, kind: str) -> Dict[str, Any]:
        """``payload.<kind>.entity`` or an empty dict."""
        wrapper = self.payload.get(kind) or {}
        if not isinstance(wrapper, dict):
            return {}
        entity = wrapper.get("entity") or {}
        return entity if isinstance(entity, dict) else {}
