"""
SQLAlchemy ORM models for the UdyamSakhi database.
Nested, document-shaped fields are stored in JSON columns.
"""
from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    ForeignKey,
    Float,
    Boolean,
    JSON,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import enum

from app.database import Base


# Enums
class Industry(str, enum.Enum):
    """Industries a business plan can be filed under."""

    MANUFACTURING = "Manufacturing"
    SERVICES = "Services"
    RETAIL = "Retail"
    TECHNOLOGY = "Technology"
    AGRICULTURE = "Agriculture"
    OTHER = "Other"


class PlanSection(str, enum.Enum):
    """Generated narrative sections of a business plan."""

    EXECUTIVE_SUMMARY = "executiveSummary"
    MARKET_ANALYSIS = "marketAnalysis"
    OPERATIONS = "operations"
    MARKETING = "marketing"
    FINANCIAL_PROJECTIONS = "financialProjections"


class PlanStatus(str, enum.Enum):
    DRAFT = "draft"
    GENERATED = "generated"
    REVIEWED = "reviewed"
    FINAL = "final"


class ReportType(str, enum.Enum):
    """Kinds of cached market report (MarketData.tab_type)."""

    ANALYSIS = "analysis"
    RECOMMENDATIONS = "recommendations"
    STRATEGIES = "strategies"


class Priority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Models
class User(Base):
    """User account (synced from the frontend identity provider)."""

    __tablename__ = "users"

    id = Column(String(255), primary_key=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)
    address = Column(Text, nullable=True)
    avatar = Column(JSON, nullable=True)  # {url, public_id}
    # businessName, industry, stage, type, state, udyamNumber, documents[]
    business_profile = Column(JSON, nullable=True)
    completed_compliance_items = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    # Relationships
    business_plans = relationship("BusinessPlan", back_populates="user", cascade="all, delete-orphan")


class BusinessPlan(Base):
    """A user's venture description plus its five AI-generated sections."""

    __tablename__ = "business_plans"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    business_name = Column(String(255), nullable=False)
    industry = Column(String(50), nullable=False)
    business_idea = Column(Text, nullable=False)
    target_market = Column(Text, nullable=False)

    # Optional free text used by the market prompts and the matcher
    products_services = Column(Text, nullable=True)
    competition = Column(Text, nullable=True)
    market_size = Column(Text, nullable=True)
    unique_value = Column(Text, nullable=True)
    challenges = Column(Text, nullable=True)

    # {section_name: {content, lastUpdated, version}}
    sections = Column(JSON, nullable=False, default=dict)
    status = Column(String(20), nullable=False, default=PlanStatus.DRAFT.value, index=True)
    # [{version, updatedAt, changes}]
    version_history = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    # Relationships
    user = relationship("User", back_populates="business_plans")


class MarketData(Base):
    """Cached market report, one row per (user, plan, tab_type)."""

    __tablename__ = "market_data"
    __table_args__ = (
        UniqueConstraint("user_id", "plan_id", "tab_type", name="uq_market_data_user_plan_tab"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # No FK: deleting a plan does not cascade to its cached reports
    plan_id = Column(Integer, nullable=False, index=True)
    tab_type = Column(String(32), nullable=False)
    data = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class ComplianceItem(Base):
    """Legal / tax requirement matched to users by business type and state."""

    __tablename__ = "compliance_items"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    priority = Column(String(10), nullable=False)
    # "All" matches every business type / state
    applicable_business_types = Column(JSON, nullable=False, default=list)
    applicable_states = Column(JSON, nullable=False, default=list)
    due_date = Column(String(255), nullable=True)
    link = Column(String(512), nullable=True)
    status = Column(String(20), nullable=False, default="active", index=True)
    steps = Column(JSON, nullable=False, default=list)  # [{order, description, estimatedTime, requiredDocuments}]
    fees = Column(JSON, nullable=True)  # {amount, description}
    helpful_links = Column(JSON, nullable=False, default=list)  # [{title, url}]
    template_url = Column(String(512), nullable=True)


class MarketPlace(Base):
    """Selling channel catalogue entry."""

    __tablename__ = "marketplaces"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    logo = Column(String(512), nullable=False)
    website = Column(String(512), nullable=False)
    industries = Column(JSON, nullable=False, default=list)
    product_types = Column(JSON, nullable=False, default=list)
    target_market = Column(JSON, nullable=False, default=list)
    commission_rate = Column(Float, nullable=False)
    average_rating = Column(Float, nullable=True, default=0.0)
    review_count = Column(Integer, nullable=False, default=0)
    features = Column(JSON, nullable=False, default=list)  # [{title, description}]
    requirements = Column(JSON, nullable=False, default=list)
    onboarding_steps = Column(JSON, nullable=False, default=list)  # [{order, title, description}]
    status = Column(String(20), nullable=False, default="active", index=True)
    supported_regions = Column(JSON, nullable=False, default=lambda: ["All India"])
    payment_methods = Column(JSON, nullable=False, default=lambda: ["Bank Transfer"])
    shipping_options = Column(JSON, nullable=False, default=lambda: ["Standard"])
    minimum_order_value = Column(Float, nullable=False, default=0)
    maximum_order_value = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class Course(Base):
    """Skilling-centre course."""

    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(50), nullable=False, index=True)
    level = Column(String(20), nullable=False)
    thumbnail = Column(String(512), nullable=True)
    duration = Column(Integer, nullable=False)  # minutes
    instructor = Column(JSON, nullable=False)  # {name, bio, avatar}
    tags = Column(JSON, nullable=False, default=list)
    prerequisites = Column(JSON, nullable=False, default=list)
    learning_outcomes = Column(JSON, nullable=False, default=list)
    status = Column(String(20), nullable=False, default="draft")
    language = Column(String(10), nullable=False, default="en")
    rating_average = Column(Float, nullable=False, default=0.0)
    rating_count = Column(Integer, nullable=False, default=0)
    enrollment_count = Column(Integer, nullable=False, default=0)
    completion_rate = Column(Float, nullable=False, default=0.0)
    certificate_available = Column(Boolean, nullable=False, default=False)


class Mentor(Base):
    """Mentor profile."""

    __tablename__ = "mentors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    bio = Column(Text, nullable=False)
    avatar = Column(String(512), nullable=True)
    expertise = Column(JSON, nullable=False, default=list)
    industries = Column(JSON, nullable=False, default=list)
    languages = Column(JSON, nullable=False, default=list)
    experience = Column(JSON, nullable=False)  # {years, currentRole, company}
    mentee_capacity = Column(JSON, nullable=False)  # {current, maximum}
    rating_average = Column(Float, nullable=False, default=0.0)
    rating_count = Column(Integer, nullable=False, default=0)
    sessions_done = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default="pending")


class UserProgress(Base):
    """Per-user learning progress."""

    __tablename__ = "user_progress"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    courses = Column(JSON, nullable=False, default=list)
    mentor_sessions = Column(JSON, nullable=False, default=list)
    learning_path = Column(JSON, nullable=False, default=dict)
    achievements = Column(JSON, nullable=False, default=list)
    stats = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
