"""Database and schema models for UdyamSakhi."""
from app.models.database_models import (
    User,
    BusinessPlan,
    MarketData,
    ComplianceItem,
    MarketPlace,
    Course,
    Mentor,
    UserProgress,
    Industry,
    PlanSection,
    PlanStatus,
    ReportType,
    Priority,
)
from app.models.schemas import (
    BusinessPlanCreate,
    BusinessPlanResponse,
    ComplianceItemResponse,
    CourseResponse,
    MentorResponse,
    UserProfileResponse,
    HealthCheckResponse,
)

__all__ = [
    # Database models
    "User",
    "BusinessPlan",
    "MarketData",
    "ComplianceItem",
    "MarketPlace",
    "Course",
    "Mentor",
    "UserProgress",
    "Industry",
    "PlanSection",
    "PlanStatus",
    "ReportType",
    "Priority",
    # Pydantic schemas
    "BusinessPlanCreate",
    "BusinessPlanResponse",
    "ComplianceItemResponse",
    "CourseResponse",
    "MentorResponse",
    "UserProfileResponse",
    "HealthCheckResponse",
]
