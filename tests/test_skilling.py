"""Tests for courses, mentors and learning progress."""
import pytest
from httpx import AsyncClient

from tests.conftest import AUTH_HEADERS


async def _courses(client: AsyncClient, **params):
    resp = await client.get("/api/courses", params=params, headers=AUTH_HEADERS)
    assert resp.status_code == 200
    return resp.json()


async def _course_id(client: AsyncClient, title: str) -> int:
    return next(c["id"] for c in await _courses(client) if c["title"] == title)


@pytest.mark.asyncio
async def test_courses_seeded_and_filtered(client: AsyncClient):
    assert len(await _courses(client)) == 6
    assert len(await _courses(client)) == 6  # seeding happens once

    finance = await _courses(client, category="Finance")
    assert [c["title"] for c in finance] == ["Financial Management for Small Businesses"]
    assert finance[0]["rating"] == {"average": 4.7, "count": 128}
    assert finance[0]["certificateAvailable"] is True

    beginner = await _courses(client, level="Beginner")
    assert {c["level"] for c in beginner} == {"Beginner"}
    assert len(beginner) == 3

    assert len(await _courses(client, category="all", level="all")) == 6


@pytest.mark.asyncio
async def test_mentors_filtered(client: AsyncClient):
    resp = await client.get("/api/mentors", headers=AUTH_HEADERS)
    assert resp.status_code == 200
    assert len(resp.json()) == 6

    resp = await client.get("/api/mentors", params={"expertise": "Finance"}, headers=AUTH_HEADERS)
    mentors = resp.json()
    assert mentors
    assert all("Finance" in m["expertise"] for m in mentors)
    assert mentors[0]["menteeCapacity"] == {"current": 3, "maximum": 5}

    resp = await client.get("/api/mentors", params={"language": "Klingon"}, headers=AUTH_HEADERS)
    assert resp.json() == []


@pytest.mark.asyncio
async def test_new_user_progress_is_empty(client: AsyncClient):
    resp = await client.get("/api/user-progress", headers=AUTH_HEADERS)
    assert resp.status_code == 200
    progress = resp.json()
    assert progress["userId"] == "test-user-1"
    assert progress["courses"] == []
    assert progress["stats"]["totalCoursesEnrolled"] == 0
    assert progress["learningPath"]["recommendedCourses"] == []


@pytest.mark.asyncio
async def test_enroll_is_idempotent(client: AsyncClient):
    course_id = await _course_id(client, "Digital Marketing for Women Entrepreneurs")
    before = next(c for c in await _courses(client) if c["id"] == course_id)["enrollmentCount"]

    for _ in range(2):
        resp = await client.post(f"/api/user-progress/courses/{course_id}", headers=AUTH_HEADERS)
        assert resp.status_code == 200

    progress = resp.json()
    assert [c["courseId"] for c in progress["courses"]] == [course_id]
    assert progress["courses"][0]["completed"] is False
    assert progress["stats"]["totalCoursesEnrolled"] == 1

    after = next(c for c in await _courses(client) if c["id"] == course_id)["enrollmentCount"]
    assert after == before + 1


@pytest.mark.asyncio
async def test_complete_requires_enrolment(client: AsyncClient):
    course_id = await _course_id(client, "Digital Marketing for Women Entrepreneurs")
    resp = await client.post(
        f"/api/user-progress/courses/{course_id}/complete", headers=AUTH_HEADERS
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Not enrolled in this course"


@pytest.mark.asyncio
async def test_complete_updates_stats_once(client: AsyncClient):
    course_id = await _course_id(client, "Digital Marketing for Women Entrepreneurs")
    await client.post(f"/api/user-progress/courses/{course_id}", headers=AUTH_HEADERS)

    for _ in range(2):
        resp = await client.post(
            f"/api/user-progress/courses/{course_id}/complete", headers=AUTH_HEADERS
        )
        assert resp.status_code == 200

    progress = resp.json()
    assert progress["courses"][0]["completed"] is True
    assert "completedAt" in progress["courses"][0]
    assert progress["stats"]["totalCoursesCompleted"] == 1
    assert progress["stats"]["totalLearningTime"] == 300
    assert len(progress["achievements"]) == 1
    assert progress["achievements"][0]["type"] == "course_completion"


@pytest.mark.asyncio
async def test_unknown_course_returns_404(client: AsyncClient):
    resp = await client.post("/api/user-progress/courses/9999", headers=AUTH_HEADERS)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_recommended_courses_skip_enrolled(client: AsyncClient):
    resp = await client.get("/api/courses/recommended", headers=AUTH_HEADERS)
    assert resp.status_code == 200
    assert [c["title"] for c in resp.json()] == [
        "Digital Marketing for Women Entrepreneurs",
        "Leadership Skills for Women Entrepreneurs",
        "Financial Management for Small Businesses",
    ]

    course_id = await _course_id(client, "Digital Marketing for Women Entrepreneurs")
    await client.post(f"/api/user-progress/courses/{course_id}", headers=AUTH_HEADERS)

    resp = await client.get("/api/courses/recommended", headers=AUTH_HEADERS)
    assert [c["title"] for c in resp.json()] == [
        "Leadership Skills for Women Entrepreneurs",
        "Financial Management for Small Businesses",
        "Technology Tools for Business Efficiency",
    ]
