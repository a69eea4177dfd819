"""
Rank selling marketplaces against a business plan.

Pure and deterministic: no I/O, no clock, no randomness. Plans and
marketplaces are read by attribute so ORM rows and plain objects both work.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Dict, Iterable, List, Optional

from app.config import settings
from app.utils.helpers import round_half_up


@dataclasses.dataclass(frozen=True)
class MatchWeights:
    industry: int = 30
    product_type: int = 25
    target_market: int = 20
    rating_multiplier: float = 5.0
    excellent_threshold: int = 75
    good_threshold: int = 50
    result_limit: int = 5

    @classmethod
    def from_settings(cls) -> "MatchWeights":
        return cls(
            industry=settings.MATCH_INDUSTRY_WEIGHT,
            product_type=settings.MATCH_PRODUCT_TYPE_WEIGHT,
            target_market=settings.MATCH_TARGET_MARKET_WEIGHT,
            rating_multiplier=settings.MATCH_RATING_MULTIPLIER,
            excellent_threshold=settings.MATCH_EXCELLENT_THRESHOLD,
            good_threshold=settings.MATCH_GOOD_THRESHOLD,
            result_limit=settings.MATCH_RESULT_LIMIT,
        )


def _any_tag_in(tags: Optional[Iterable[str]], text: Optional[str]) -> bool:
    """True when any tag is a case-insensitive substring of *text*."""
    if not text:
        return False
    haystack = text.lower()
    return any(tag and tag.lower() in haystack for tag in (tags or []))


def raw_score(plan: Any, marketplace: Any, weights: MatchWeights) -> float:
    score = 0.0
    if plan.industry in (marketplace.industries or []):
        score += weights.industry
    if _any_tag_in(marketplace.product_types, plan.products_services):
        score += weights.product_type
    if _any_tag_in(marketplace.target_market, plan.target_market):
        score += weights.target_market
    score += (marketplace.average_rating or 0) * weights.rating_multiplier
    return score


def _fit_reason(score: float, weights: MatchWeights) -> str:
    if score >= weights.excellent_threshold:
        return "Excellent match for your business type and products"
    if score >= weights.good_threshold:
        return "Good potential fit with some alignment to your business"
    return "Potential opportunity but may require adaptation"


def _rating_reason(rating: Optional[float]) -> str:
    if rating is None:
        return "Platform rating: N/A/5"
    return f"Platform rating: {rating:.1f}/5"


def match_marketplaces(
    plan: Any,
    marketplaces: Iterable[Any],
    weights: Optional[MatchWeights] = None,
) -> List[Dict[str, Any]]:
    """
    Score every marketplace against *plan* and return the best matches.

    Ordered by match score then average rating, both descending; at most
    ``weights.result_limit`` entries.
    """
    weights = weights or MatchWeights.from_settings()
    scored: List[Dict[str, Any]] = []

    for marketplace in marketplaces:
        score = raw_score(plan, marketplace, weights)
        industry_match = plan.industry in (marketplace.industries or [])
        scored.append(
            {
                "id": marketplace.id,
                "name": marketplace.name,
                "logo": marketplace.logo,
                "website": marketplace.website,
                "features": list(marketplace.features or [])[:3],
                "averageRating": marketplace.average_rating,
                "commissionRate": marketplace.commission_rate,
                "matchScore": round_half_up(score),
                "reasons": [
                    _fit_reason(score, weights),
                    "Industry-specific platform"
                    if industry_match
                    else "Diverse marketplace accepting various industries",
                    _rating_reason(marketplace.average_rating),
                ],
            }
        )

    # sorted() is stable, so equal (score, rating) keep catalogue order
    scored.sort(key=lambda m: (-m["matchScore"], -(m["averageRating"] or 0)))
    return scored[: weights.result_limit]
