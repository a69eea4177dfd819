"""
Skilling centre endpoints (mounted under /api).

Route summary
-------------
GET  /api/courses                                     — course catalogue
GET  /api/courses/recommended                         — recommended courses
GET  /api/mentors                                     — mentor directory
GET  /api/user-progress                               — caller's progress
POST /api/user-progress/courses/{course_id}           — enrol
POST /api/user-progress/courses/{course_id}/complete  — mark completed
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.dependencies.auth import get_or_create_user
from app.models.database_models import Course, Mentor, User, UserProgress
from app.models.schemas import (
    CourseResponse,
    MentorResponse,
    Rating,
    UserProgressResponse,
)
from app.services import skilling
from app.services.results import unwrap
from app.store import Store, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


def course_response(course: Course) -> CourseResponse:
    return CourseResponse(
        id=course.id,
        title=course.title,
        description=course.description,
        category=course.category,
        level=course.level,
        thumbnail=course.thumbnail,
        duration=course.duration,
        instructor=course.instructor or {},
        tags=course.tags or [],
        prerequisites=course.prerequisites or [],
        learning_outcomes=course.learning_outcomes or [],
        status=course.status,
        language=course.language,
        rating=Rating(average=course.rating_average or 0.0, count=course.rating_count or 0),
        enrollment_count=course.enrollment_count or 0,
        completion_rate=course.completion_rate or 0.0,
        certificate_available=bool(course.certificate_available),
    )


def mentor_response(mentor: Mentor) -> MentorResponse:
    return MentorResponse(
        id=mentor.id,
        name=mentor.name,
        title=mentor.title,
        bio=mentor.bio,
        avatar=mentor.avatar,
        expertise=mentor.expertise or [],
        industries=mentor.industries or [],
        languages=mentor.languages or [],
        experience=mentor.experience or {},
        mentee_capacity=mentor.mentee_capacity or {},
        rating=Rating(average=mentor.rating_average or 0.0, count=mentor.rating_count or 0),
        sessions_done=mentor.sessions_done or 0,
        status=mentor.status,
    )


def progress_response(progress: UserProgress) -> UserProgressResponse:
    return UserProgressResponse(
        id=progress.id,
        user_id=progress.user_id,
        courses=progress.courses or [],
        mentor_sessions=progress.mentor_sessions or [],
        learning_path=progress.learning_path or {},
        achievements=progress.achievements or [],
        stats=progress.stats or {},
    )


@router.get("/courses", response_model=List[CourseResponse])
async def list_courses(
    category: Optional[str] = Query(None),
    level: Optional[str] = Query(None),
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> List[CourseResponse]:
    """Courses filtered by category and level; ``all`` disables a filter."""
    return [course_response(c) for c in await skilling.list_courses(store, category, level)]


@router.get("/courses/recommended", response_model=List[CourseResponse])
async def list_recommended_courses(
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> List[CourseResponse]:
    return [course_response(c) for c in await skilling.recommended_courses(store, user)]


@router.get("/mentors", response_model=List[MentorResponse])
async def list_mentors(
    expertise: Optional[str] = Query(None),
    language: Optional[str] = Query(None),
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> List[MentorResponse]:
    return [mentor_response(m) for m in await skilling.list_mentors(store, expertise, language)]


@router.get("/user-progress", response_model=UserProgressResponse)
async def get_user_progress(
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> UserProgressResponse:
    return progress_response(await skilling.get_progress(store, user))


@router.post("/user-progress/courses/{course_id}", response_model=UserProgressResponse)
async def enroll_in_course(
    course_id: int,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> UserProgressResponse:
    progress = unwrap(await skilling.enroll(store, user, course_id))
    return progress_response(progress)


@router.post("/user-progress/courses/{course_id}/complete", response_model=UserProgressResponse)
async def complete_course(
    course_id: int,
    user: User = Depends(get_or_create_user),
    store: Store = Depends(get_store),
) -> UserProgressResponse:
    progress = unwrap(await skilling.complete(store, user, course_id))
    return progress_response(progress)
