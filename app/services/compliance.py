"""
Legal & compliance: checklist items, progress, static guides and the legal assistant.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, List, Optional

from app.models.database_models import ComplianceItem, User
from app.services import prompts
from app.services.ai_gateway import GeminiGateway
from app.services.catalog_seed import LEGAL_GUIDES, SAMPLE_COMPLIANCE_ITEMS
from app.services.response_normalizer import normalize_compliance_items
from app.services.results import Failure, FailureKind, Result, Success
from app.store import Store

logger = logging.getLogger(__name__)

DEFAULT_BUSINESS_TYPE = "Other"
DEFAULT_STATE = "All"

# camelCase keys from the model response -> ORM columns
_ITEM_FIELDS = {
    "title": "title",
    "description": "description",
    "category": "category",
    "priority": "priority",
    "applicableBusinessTypes": "applicable_business_types",
    "applicableStates": "applicable_states",
    "dueDate": "due_date",
    "link": "link",
    "status": "status",
    "steps": "steps",
    "fees": "fees",
    "helpfulLinks": "helpful_links",
    "templateUrl": "template_url",
}


@dataclasses.dataclass
class GeneratedItems:
    items: List[ComplianceItem]
    is_existing: bool

    @property
    def message(self) -> str:
        if self.is_existing:
            return "Found existing compliance items"
        return "Generated and saved compliance items successfully"


async def seed_compliance_items(store: Store) -> int:
    return await store.seed_if_empty(ComplianceItem, SAMPLE_COMPLIANCE_ITEMS)


async def list_items(
    store: Store,
    user: User,
    business_type: Optional[str] = None,
    state: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Items applicable to a business type and state.

    Missing query values fall back to the user's business profile, then to
    "Other" / "All". Values that were given are remembered on the profile.
    """
    profile = user.business_profile or {}
    resolved_type = business_type or profile.get("type") or DEFAULT_BUSINESS_TYPE
    resolved_state = state or profile.get("state") or DEFAULT_STATE

    if business_type or state:
        await store.update_business_profile(user, type=business_type, state=state)

    items = await store.list_compliance_items(resolved_type, resolved_state)
    return {
        "items": items,
        "completed_items": list(user.completed_compliance_items or []),
        "business_type": resolved_type,
        "state": resolved_state,
    }


def _to_item(data: Dict[str, Any]) -> ComplianceItem:
    values = {column: data.get(key) for key, column in _ITEM_FIELDS.items() if data.get(key) is not None}
    values.setdefault("description", "")
    values.setdefault("category", "General")
    priority = str(values.get("priority", "medium")).lower()
    values["priority"] = priority if priority in ("low", "medium", "high") else "medium"
    values["status"] = values.get("status") if values.get("status") in ("active", "inactive") else "active"
    return ComplianceItem(**values)


async def generate_items(
    store: Store, gateway: GeminiGateway, user: User, business_type: str, state: str
) -> Result[GeneratedItems]:
    """
    Return the existing matches when there are any; otherwise ask the model
    for 5-7 items, normalise them and insert them. Either way the type and
    state are recorded on the user's business profile.
    """
    existing = await store.list_compliance_items(business_type, state)
    if existing:
        await store.update_business_profile(user, type=business_type, state=state)
        return Success(GeneratedItems(existing, is_existing=True))

    raw = await gateway.generate(prompts.build_compliance_items_prompt(business_type, state))
    if isinstance(raw, Failure):
        return raw

    normalized = normalize_compliance_items(raw.value, business_type, state)
    if isinstance(normalized, Failure):
        return normalized

    saved = await store.insert_many(_to_item(item) for item in normalized.value)
    await store.update_business_profile(user, type=business_type, state=state)
    logger.info(
        "Generated %d compliance items for %s in %s", len(saved), business_type, state
    )
    return Success(GeneratedItems(saved, is_existing=False))


async def set_progress(store: Store, user: User, item_id: int, completed: bool) -> List[int]:
    """Mark an item done or not done; the list never holds duplicates."""
    current = list(user.completed_compliance_items or [])
    if completed:
        if item_id not in current:
            current.append(item_id)
    else:
        current = [existing for existing in current if existing != item_id]
    user.completed_compliance_items = current
    await store.save_user(user)
    return current


def list_guides() -> List[Dict[str, str]]:
    return LEGAL_GUIDES


def get_guide(guide_id: str) -> Result[Dict[str, str]]:
    for guide in LEGAL_GUIDES:
        if guide["id"] == guide_id:
            return Success(guide)
    return Failure(FailureKind.NOT_FOUND, "Guide not found")


async def legal_chat(
    gateway: GeminiGateway,
    user: User,
    message: str,
    business_type: Optional[str] = None,
    state: Optional[str] = None,
) -> Result[str]:
    profile = user.business_profile or {}
    context = {
        "type": business_type or profile.get("type"),
        "state": state or profile.get("state"),
        "registrationStatus": profile.get("registrationStatus"),
        "employeeCount": profile.get("employeeCount"),
        "annualRevenue": profile.get("annualRevenue"),
        "sector": profile.get("sector") or profile.get("industry"),
    }
    return await gateway.generate(prompts.build_legal_chat_prompt(message, context), safety=False)
