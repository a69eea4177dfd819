"""
Typed persistence operations over one AsyncSession.

Services talk to ``Store`` rather than building queries themselves; routers
obtain it per request through ``get_store``. JSON columns are always
reassigned with fresh list/dict objects so SQLAlchemy sees the change.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Type

from fastapi import Depends
from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base, get_db
from app.models.database_models import (
    BusinessPlan,
    ComplianceItem,
    Course,
    MarketData,
    MarketPlace,
    Mentor,
    Priority,
    User,
    UserProgress,
)

logger = logging.getLogger(__name__)

ALL = "All"

_PRIORITY_RANK = {
    Priority.HIGH.value: 0,
    Priority.MEDIUM.value: 1,
    Priority.LOW.value: 2,
}


class Store:
    """Persistence operations for every UdyamSakhi entity."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    async def _save(self, obj: Base) -> Any:
        """Add, flush and reload so server-side timestamps are populated."""
        self.session.add(obj)
        await self.session.flush()
        await self.session.refresh(obj)
        return obj

    async def count(self, model: Type[Base]) -> int:
        result = await self.session.execute(select(func.count()).select_from(model))
        return result.scalar_one()

    async def insert_many(self, objects: Iterable[Base]) -> List[Any]:
        objects = list(objects)
        self.session.add_all(objects)
        await self.session.flush()
        for obj in objects:
            await self.session.refresh(obj)
        return objects

    async def seed_if_empty(self, model: Type[Base], rows: Sequence[Dict[str, Any]]) -> int:
        """Insert *rows* only when the table holds nothing yet. Returns rows inserted."""
        if await self.count(model) > 0:
            return 0
        await self.insert_many(model(**row) for row in rows)
        logger.info("Seeded %d %s rows", len(rows), model.__tablename__)
        return len(rows)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_user(self, user_id: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_or_create_user(
        self, user_id: str, email: Optional[str] = None, name: Optional[str] = None
    ) -> User:
        user = await self.get_user(user_id)
        if user is None:
            user = User(
                id=user_id,
                email=email or f"{user_id}@udyamsakhi.local",
                name=name,
                business_profile={},
                completed_compliance_items=[],
            )
            await self._save(user)
            logger.info("Created new user: id=%s email=%s", user_id, user.email)
        return user

    async def save_user(self, user: User) -> User:
        return await self._save(user)

    async def update_business_profile(self, user: User, **fields: Any) -> User:
        """Merge non-empty *fields* into the user's business profile."""
        profile = dict(user.business_profile or {})
        for key, value in fields.items():
            if value is not None and value != "":
                profile[key] = value
        user.business_profile = profile
        return await self._save(user)

    # ------------------------------------------------------------------
    # Business plans
    # ------------------------------------------------------------------

    async def list_plans(self, user_id: str) -> List[BusinessPlan]:
        result = await self.session.execute(
            select(BusinessPlan)
            .where(BusinessPlan.user_id == user_id)
            .order_by(BusinessPlan.created_at.desc(), BusinessPlan.id.desc())
        )
        return list(result.scalars().all())

    async def get_plan(self, user_id: str, plan_id: int) -> Optional[BusinessPlan]:
        """Return the plan only when it belongs to *user_id*."""
        result = await self.session.execute(
            select(BusinessPlan).where(
                BusinessPlan.id == plan_id,
                BusinessPlan.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def create_plan(self, plan: BusinessPlan) -> BusinessPlan:
        return await self._save(plan)

    async def save_plan_section(
        self, plan: BusinessPlan, section: str, entry: Dict[str, Any], history_entry: Dict[str, Any]
    ) -> BusinessPlan:
        """Replace one section and append its history entry."""
        sections = dict(plan.sections or {})
        sections[section] = entry
        plan.sections = sections
        plan.version_history = list(plan.version_history or []) + [history_entry]
        return await self._save(plan)

    async def delete_plan(self, plan: BusinessPlan) -> None:
        await self.session.delete(plan)
        await self.session.flush()

    # ------------------------------------------------------------------
    # Market data cache
    # ------------------------------------------------------------------

    async def get_market_data(
        self, user_id: str, plan_id: int, tab_type: str
    ) -> Optional[MarketData]:
        result = await self.session.execute(
            select(MarketData).where(
                MarketData.user_id == user_id,
                MarketData.plan_id == plan_id,
                MarketData.tab_type == tab_type,
            )
        )
        return result.scalar_one_or_none()

    async def upsert_market_data(
        self, user_id: str, plan_id: int, tab_type: str, data: Dict[str, Any]
    ) -> MarketData:
        """
        Insert or wholly replace the cached report for (user, plan, tab_type).

        A single INSERT ... ON CONFLICT DO UPDATE statement, so concurrent
        writers never produce a second row. Last write wins.
        """
        dialect = self.session.get_bind().dialect.name
        insert_fn = pg_insert if dialect == "postgresql" else sqlite_insert

        stmt = insert_fn(MarketData).values(
            user_id=user_id,
            plan_id=plan_id,
            tab_type=tab_type,
            data=data,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[MarketData.user_id, MarketData.plan_id, MarketData.tab_type],
            set_={"data": stmt.excluded.data, "updated_at": func.now()},
        )
        await self.session.execute(stmt)

        result = await self.session.execute(
            select(MarketData)
            .where(
                MarketData.user_id == user_id,
                MarketData.plan_id == plan_id,
                MarketData.tab_type == tab_type,
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

    async def count_market_data(self, user_id: str, plan_id: int, tab_type: str) -> int:
        result = await self.session.execute(
            select(func.count())
            .select_from(MarketData)
            .where(
                MarketData.user_id == user_id,
                MarketData.plan_id == plan_id,
                MarketData.tab_type == tab_type,
            )
        )
        return result.scalar_one()

    # ------------------------------------------------------------------
    # Marketplaces
    # ------------------------------------------------------------------

    async def list_active_marketplaces(self) -> List[MarketPlace]:
        result = await self.session.execute(
            select(MarketPlace).where(MarketPlace.status == "active").order_by(MarketPlace.id)
        )
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Compliance items
    # ------------------------------------------------------------------

    async def list_compliance_items(self, business_type: str, state: str) -> List[ComplianceItem]:
        """
        Active items applicable to *business_type* and *state*, high priority first.

        ``"All"`` in either applicability list matches everything. The lists
        live in JSON columns, so matching happens here rather than in SQL.
        """
        result = await self.session.execute(
            select(ComplianceItem).where(ComplianceItem.status == "active").order_by(ComplianceItem.id)
        )
        items = [
            item
            for item in result.scalars().all()
            if _applies(item.applicable_business_types, business_type)
            and _applies(item.applicable_states, state)
        ]
        items.sort(key=lambda item: _PRIORITY_RANK.get(item.priority, len(_PRIORITY_RANK)))
        return items

    async def get_compliance_item(self, item_id: int) -> Optional[ComplianceItem]:
        return await self.session.get(ComplianceItem, item_id)

    # ------------------------------------------------------------------
    # Skilling
    # ------------------------------------------------------------------

    async def list_courses(self, status: Optional[str] = None) -> List[Course]:
        query = select(Course).order_by(Course.id)
        if status:
            query = query.where(Course.status == status)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_course(self, course_id: int) -> Optional[Course]:
        return await self.session.get(Course, course_id)

    async def list_mentors(self) -> List[Mentor]:
        result = await self.session.execute(select(Mentor).order_by(Mentor.id))
        return list(result.scalars().all())

    async def get_or_create_progress(self, user_id: str) -> UserProgress:
        result = await self.session.execute(
            select(UserProgress).where(UserProgress.user_id == user_id)
        )
        progress = result.scalar_one_or_none()
        if progress is None:
            progress = UserProgress(
                user_id=user_id,
                courses=[],
                mentor_sessions=[],
                learning_path={"currentGoal": None, "recommendedCourses": [], "completedGoals": []},
                achievements=[],
                stats={
                    "totalCoursesEnrolled": 0,
                    "totalCoursesCompleted": 0,
                    "totalMentorSessions": 0,
                    "totalLearningTime": 0,
                },
            )
            await self._save(progress)
        return progress

    async def save_progress(self, progress: UserProgress) -> UserProgress:
        return await self._save(progress)


def _applies(values: Optional[List[str]], wanted: str) -> bool:
    values = values or []
    return wanted in values or ALL in values


async def get_store(db: AsyncSession = Depends(get_db)) -> Store:
    """FastAPI dependency: a Store bound to the request's session."""
    return Store(db)
