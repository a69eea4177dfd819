"""
Pydantic schemas for request/response validation.

Field names are snake_case in Python and camelCase on the wire, matching
the JSON contract the frontend already speaks.
"""
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any
from datetime import datetime
from enum import Enum

from app.models.database_models import Industry, PlanSection


class CamelModel(BaseModel):
    """Base schema serialising to camelCase and accepting either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BusinessStage(str, Enum):
    IDEATION = "Ideation"
    STARTUP = "Startup"
    GROWTH = "Growth"
    MATURE = "Mature"


class UploadType(str, Enum):
    AVATAR = "avatar"
    DOCUMENT = "document"


class MessageResponse(BaseModel):
    message: str


# ---------------------------------------------------------------------------
# Business plans
# ---------------------------------------------------------------------------

class BusinessPlanCreate(CamelModel):
    """Fields the user fills in before the first generation."""

    business_name: str = Field(..., min_length=1, max_length=255)
    industry: Industry
    business_idea: str = Field(..., min_length=50)
    target_market: str = Field(..., min_length=1)
    products_services: Optional[str] = None
    competition: Optional[str] = None
    market_size: Optional[str] = None
    unique_value: Optional[str] = None
    challenges: Optional[str] = None


class RegenerateSectionRequest(CamelModel):
    plan_id: int
    section: PlanSection


class PlanSectionResponse(CamelModel):
    content: str
    last_updated: datetime
    version: int


class VersionHistoryEntry(CamelModel):
    version: int
    updated_at: datetime
    changes: str


class BusinessPlanResponse(CamelModel):
    id: int
    business_name: str
    industry: str
    business_idea: str
    target_market: str
    products_services: Optional[str] = None
    competition: Optional[str] = None
    market_size: Optional[str] = None
    unique_value: Optional[str] = None
    challenges: Optional[str] = None
    sections: Dict[str, PlanSectionResponse] = {}
    status: str
    version_history: List[VersionHistoryEntry] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BusinessPlanGenerateResponse(BaseModel):
    message: str
    plan: BusinessPlanResponse


class SectionRegenerateResponse(BaseModel):
    message: str
    section: PlanSectionResponse


# ---------------------------------------------------------------------------
# Market access
# ---------------------------------------------------------------------------

class PlanReportRequest(CamelModel):
    """Body shared by every per-plan generation endpoint."""

    plan_id: int


class MarketReportResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]


class MarketDataResponse(BaseModel):
    data: Optional[Dict[str, Any]] = None


# ---------------------------------------------------------------------------
# Funding
# ---------------------------------------------------------------------------

class ForecastResponse(BaseModel):
    message: str = "Forecast generated successfully"
    forecast: Dict[str, Any]


# ---------------------------------------------------------------------------
# Legal & compliance
# ---------------------------------------------------------------------------

class ComplianceItemResponse(CamelModel):
    id: int
    title: str
    description: str
    category: str
    priority: str
    applicable_business_types: List[str] = []
    applicable_states: List[str] = []
    due_date: Optional[str] = None
    link: Optional[str] = None
    status: str = "active"
    steps: List[Dict[str, Any]] = []
    fees: Optional[Dict[str, Any]] = None
    helpful_links: List[Dict[str, Any]] = []
    template_url: Optional[str] = None


class ComplianceListResponse(CamelModel):
    items: List[ComplianceItemResponse]
    completed_items: List[int]
    business_type: str
    state: str


class ComplianceGenerateRequest(CamelModel):
    business_type: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)


class ComplianceGenerateResponse(CamelModel):
    success: bool = True
    items: List[ComplianceItemResponse]
    message: str
    is_existing: bool = False


class ComplianceProgressRequest(CamelModel):
    item_id: int
    completed: bool


class ComplianceProgressResponse(CamelModel):
    completed_items: List[int]


class LegalGuide(CamelModel):
    id: str
    title: str
    description: str
    content: str
    last_updated: str
    category: str


class LegalGuideListResponse(BaseModel):
    guides: List[LegalGuide]


class LegalGuideResponse(BaseModel):
    guide: LegalGuide


class LegalChatRequest(CamelModel):
    message: str = Field(..., min_length=1, max_length=4000)
    business_type: Optional[str] = None
    state: Optional[str] = None


class LegalChatResponse(BaseModel):
    response: str


# ---------------------------------------------------------------------------
# Skilling centre
# ---------------------------------------------------------------------------

class Rating(BaseModel):
    average: float = 0.0
    count: int = 0


class CourseResponse(CamelModel):
    id: int
    title: str
    description: str
    category: str
    level: str
    thumbnail: Optional[str] = None
    duration: int
    instructor: Dict[str, Any]
    tags: List[str] = []
    prerequisites: List[str] = []
    learning_outcomes: List[str] = []
    status: str
    language: str
    rating: Rating
    enrollment_count: int = 0
    completion_rate: float = 0.0
    certificate_available: bool = False


class MentorResponse(CamelModel):
    id: int
    name: str
    title: str
    bio: str
    avatar: Optional[str] = None
    expertise: List[str] = []
    industries: List[str] = []
    languages: List[str] = []
    experience: Dict[str, Any]
    mentee_capacity: Dict[str, int]
    rating: Rating
    sessions_done: int = 0
    status: str


class UserProgressResponse(CamelModel):
    id: int
    user_id: str
    courses: List[Dict[str, Any]] = []
    mentor_sessions: List[Dict[str, Any]] = []
    learning_path: Dict[str, Any] = {}
    achievements: List[Dict[str, Any]] = []
    stats: Dict[str, Any] = {}


# ---------------------------------------------------------------------------
# User profile & dashboard
# ---------------------------------------------------------------------------

class UserProfileResponse(CamelModel):
    id: str
    name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    avatar: Optional[Dict[str, Any]] = None
    business_profile: Dict[str, Any] = {}
    completed_compliance_items: List[int] = []


class UserProfileUpdate(CamelModel):
    name: str = Field(..., min_length=2, max_length=255)
    phone: Optional[str] = Field(None, pattern=r"^\+?[\d\s-]{10,}$")
    address: Optional[str] = None


class BusinessProfileUpdate(CamelModel):
    business_name: Optional[str] = Field(None, min_length=2, max_length=255)
    industry: Optional[Industry] = None
    stage: Optional[BusinessStage] = None
    type: Optional[str] = None
    state: Optional[str] = None
    udyam_number: Optional[str] = Field(None, pattern=r"^UDYAM-[A-Z]{2}-\d{2}-\d{7}$")


class DashboardStats(CamelModel):
    profile_completion: int
    documents_count: int


class DashboardResponse(CamelModel):
    user: Dict[str, Any]
    business_profile: Dict[str, Any]
    stats: DashboardStats
    recommendations: List[str]


class UploadResponse(BaseModel):
    url: str
    public_id: str


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

class HealthCheckResponse(BaseModel):
    """Schema for health check response."""

    status: str
    database: str
    ai: str
    timestamp: datetime
