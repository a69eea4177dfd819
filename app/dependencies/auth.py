"""
Authentication dependencies for FastAPI routes.

Extracts user identity from the X-User-Id header (set by the frontend after
its own sign-in). Requests without it are rejected with 401 before any
store access.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from app.models.database_models import BusinessPlan, User
from app.store import Store, get_store

logger = logging.getLogger(__name__)


async def get_current_user_id(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> str:
    """Extract the authenticated user ID from the request header. Raises 401 if missing."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return x_user_id


async def get_or_create_user(
    user_id: str = Depends(get_current_user_id),
    x_user_email: Optional[str] = Header(None, alias="X-User-Email"),
    x_user_name: Optional[str] = Header(None, alias="X-User-Name"),
    store: Store = Depends(get_store),
) -> User:
    """Ensure the user exists in the local users table. Creates if needed."""
    return await store.get_or_create_user(user_id, email=x_user_email, name=x_user_name)


async def get_authorized_plan(
    plan_id: int,
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
) -> BusinessPlan:
    """
    Verify that the given business plan belongs to the current user.
    Returns the BusinessPlan ORM object or raises 404.
    """
    return await load_authorized_plan(store, user_id, plan_id)


async def load_authorized_plan(store: Store, user_id: str, plan_id: int) -> BusinessPlan:
    """Same ownership check for routes that take the plan id in the request body."""
    plan = await store.get_plan(user_id, plan_id)
    if plan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Business plan not found or unauthorized",
        )
    return plan
