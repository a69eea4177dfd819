"""
Skilling centre: course and mentor catalogues plus per-user learning progress.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from app.models.database_models import Course, Mentor, User, UserProgress
from app.services.catalog_seed import SAMPLE_COURSES, SAMPLE_MENTORS
from app.services.results import Failure, FailureKind, Result, Success
from app.store import Store

logger = logging.getLogger(__name__)

ALL_FILTER = "all"
RECOMMENDATION_COUNT = 3


def _active(value: Optional[str]) -> bool:
    return bool(value) and value != ALL_FILTER


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


async def seed_catalogue(store: Store) -> None:
    await store.seed_if_empty(Course, SAMPLE_COURSES)
    await store.seed_if_empty(Mentor, SAMPLE_MENTORS)


async def list_courses(
    store: Store, category: Optional[str] = None, level: Optional[str] = None
) -> List[Course]:
    await seed_catalogue(store)
    courses = await store.list_courses()
    if _active(category):
        courses = [c for c in courses if c.category == category]
    if _active(level):
        courses = [c for c in courses if c.level == level]
    return courses


async def list_mentors(
    store: Store, expertise: Optional[str] = None, language: Optional[str] = None
) -> List[Mentor]:
    await seed_catalogue(store)
    mentors = await store.list_mentors()
    if _active(expertise):
        mentors = [m for m in mentors if expertise in (m.expertise or [])]
    if _active(language):
        mentors = [m for m in mentors if language in (m.languages or [])]
    return mentors


async def get_progress(store: Store, user: User) -> UserProgress:
    return await store.get_or_create_progress(user.id)


def _enrolled_ids(progress: UserProgress) -> List[int]:
    return [int(entry["courseId"]) for entry in progress.courses or []]


async def recommended_courses(store: Store, user: User) -> List[Course]:
    """
    The learning path's recommended courses when set, otherwise the three
    highest-rated published courses the user has not enrolled in.
    """
    await seed_catalogue(store)
    progress = await get_progress(store, user)
    courses = await store.list_courses(status="published")

    wanted = [int(cid) for cid in (progress.learning_path or {}).get("recommendedCourses") or []]
    if wanted:
        by_id = {c.id: c for c in courses}
        return [by_id[cid] for cid in wanted if cid in by_id]

    enrolled = set(_enrolled_ids(progress))
    candidates = [c for c in courses if c.id not in enrolled]
    candidates.sort(key=lambda c: (-(c.rating_average or 0), c.id))
    return candidates[:RECOMMENDATION_COUNT]


async def enroll(store: Store, user: User, course_id: int) -> Result[UserProgress]:
    course = await store.get_course(course_id)
    if course is None:
        return Failure(FailureKind.NOT_FOUND, f"Course {course_id} not found.")

    progress = await get_progress(store, user)
    if course_id in _enrolled_ids(progress):
        return Success(progress)

    now = _now_iso()
    progress.courses = list(progress.courses or []) + [
        {"courseId": course_id, "enrolledAt": now, "lastAccessed": now, "completed": False}
    ]
    stats = dict(progress.stats or {})
    stats["totalCoursesEnrolled"] = stats.get("totalCoursesEnrolled", 0) + 1
    progress.stats = stats
    course.enrollment_count = (course.enrollment_count or 0) + 1

    progress = await store.save_progress(progress)
    logger.info("User %s enrolled in course %d", user.id, course_id)
    return Success(progress)


async def complete(store: Store, user: User, course_id: int) -> Result[UserProgress]:
    """Mark an enrolled course complete; completing twice changes nothing."""
    course = await store.get_course(course_id)
    if course is None:
        return Failure(FailureKind.NOT_FOUND, f"Course {course_id} not found.")

    progress = await get_progress(store, user)
    if course_id not in _enrolled_ids(progress):
        return Failure(FailureKind.VALIDATION, "Not enrolled in this course")

    now = _now_iso()
    entries = []
    newly_completed = False
    for entry in progress.courses or []:
        entry = dict(entry)
        if int(entry["courseId"]) == course_id and not entry.get("completed"):
            entry.update(completed=True, completedAt=now, lastAccessed=now)
            newly_completed = True
        entries.append(entry)

    if not newly_completed:
        return Success(progress)

    progress.courses = entries
    stats = dict(progress.stats or {})
    stats["totalCoursesCompleted"] = stats.get("totalCoursesCompleted", 0) + 1
    stats["totalLearningTime"] = stats.get("totalLearningTime", 0) + (course.duration or 0)
    progress.stats = stats
    progress.achievements = list(progress.achievements or []) + [
        {
            "title": course.title,
            "description": f"Completed the {course.title} course",
            "earnedAt": now,
            "type": "course_completion",
        }
    ]

    progress = await store.save_progress(progress)
    logger.info("User %s completed course %d", user.id, course_id)
    return Success(progress)
