"""Unit tests for marketplace scoring and ranking."""
from types import SimpleNamespace

from app.services.marketplace_matcher import MatchWeights, match_marketplaces, raw_score

WEIGHTS = MatchWeights()


def _plan(**overrides):
    fields = dict(
        industry="Retail",
        products_services="Handmade clothing",
        target_market="B2C shoppers",
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def _marketplace(id, rating=4.0, industries=(), product_types=(), target_market=(), features=()):
    return SimpleNamespace(
        id=id,
        name=f"Market {id}",
        logo=f"https://logo/{id}",
        website=f"https://site/{id}",
        industries=list(industries),
        product_types=list(product_types),
        target_market=list(target_market),
        average_rating=rating,
        commission_rate=10,
        features=list(features),
    )


def test_full_match_scores_100():
    market = _marketplace(1, rating=5.0, industries=["Retail"], product_types=["Clothing"], target_market=["b2c"])
    assert raw_score(_plan(), market, WEIGHTS) == 100

    [result] = match_marketplaces(_plan(), [market], WEIGHTS)
    assert result["matchScore"] == 100
    assert result["reasons"] == [
        "Excellent match for your business type and products",
        "Industry-specific platform",
        "Platform rating: 5.0/5",
    ]


def test_no_match_scores_zero():
    market = _marketplace(1, rating=0.0, industries=["Books"], product_types=["Books"], target_market=["B2B"])
    [result] = match_marketplaces(_plan(), [market], WEIGHTS)
    assert result["matchScore"] == 0
    assert result["reasons"] == [
        "Potential opportunity but may require adaptation",
        "Diverse marketplace accepting various industries",
        "Platform rating: 0.0/5",
    ]


def test_missing_rating_reads_na():
    market = _marketplace(1, rating=None)
    [result] = match_marketplaces(_plan(), [market], WEIGHTS)
    assert result["reasons"][2] == "Platform rating: N/A/5"


def test_missing_plan_text_matches_no_tags():
    market = _marketplace(1, rating=0.0, product_types=["Clothing"], target_market=["B2C"])
    plan = _plan(products_services=None, target_market="")
    assert raw_score(plan, market, WEIGHTS) == 0


def test_half_point_rounds_up():
    # 30 + 4.5 * 5 = 52.5
    market = _marketplace(1, rating=4.5, industries=["Retail"])
    [result] = match_marketplaces(_plan(), [market], WEIGHTS)
    assert result["matchScore"] == 53
    assert result["reasons"][0] == "Good potential fit with some alignment to your business"


def test_equal_scores_ordered_by_rating():
    weights = MatchWeights(rating_multiplier=0.0)
    lower = _marketplace(1, rating=4.2, industries=["Retail"])
    higher = _marketplace(2, rating=4.5, industries=["Retail"])

    results = match_marketplaces(_plan(), [lower, higher], weights)
    assert [r["matchScore"] for r in results] == [30, 30]
    assert [r["averageRating"] for r in results] == [4.5, 4.2]


def test_returns_at_most_five():
    markets = [_marketplace(i, rating=i / 2) for i in range(1, 8)]
    results = match_marketplaces(_plan(), markets, WEIGHTS)
    assert len(results) == 5
    assert [r["id"] for r in results] == [7, 6, 5, 4, 3]


def test_result_is_deterministic():
    markets = [
        _marketplace(1, rating=4.0, industries=["Retail"]),
        _marketplace(2, rating=4.0, industries=["Retail"]),
        _marketplace(3, rating=3.0, product_types=["clothing"]),
    ]
    first = match_marketplaces(_plan(), markets, WEIGHTS)
    second = match_marketplaces(_plan(), markets, WEIGHTS)
    assert first == second
    # Ties keep catalogue order
    assert [r["id"] for r in first] == [1, 2, 3]


def test_features_truncated_to_three():
    market = _marketplace(1, features=[{"title": str(i)} for i in range(5)])
    [result] = match_marketplaces(_plan(), [market], WEIGHTS)
    assert [f["title"] for f in result["features"]] == ["0", "1", "2"]
