"""
Turn raw model text into schema-conformant report objects.

Extraction is deliberately simple: slice from the first opening bracket to
the last closing one, parse strictly, and reject anything that does not
carry the keys the caller needs. There is no JSON repair; a failure here
must never reach the store.
"""
from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Dict, List, Sequence, Union

from app.services.results import Failure, FailureKind, Result, Success
from app.utils.helpers import compact_json, strip_code_fences, truncate_text

logger = logging.getLogger(__name__)

ANALYSIS_REQUIRED = ("marketSize", "competitiveLandscape")
ANALYSIS_ARRAYS = ("marketOpportunities", "marketThreats", "recommendations")

STRATEGIES_REQUIRED = ("shortTerm", "longTerm")
STRATEGIES_ARRAYS = ("keyMetrics", "riskMitigation")

FORECAST_REQUIRED = ("startupCosts", "monthlyProjections", "keyMetrics", "fundingNeeds")


def _parse_failure(message: str, raw: str) -> Failure:
    logger.error("%s. Raw response: %s", message, truncate_text(raw or "", 300))
    return Failure(FailureKind.PARSE_FAILED, message)


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

def extract_json_text(raw: str, expect_array: bool = False) -> str:
    """
    Slice the candidate JSON out of *raw*.

    From the first ``{`` to the last ``}`` (``[``/``]`` when an array is
    expected). With no such span, fall back to the fence-stripped text.
    """
    open_b, close_b = ("[", "]") if expect_array else ("{", "}")
    start = raw.find(open_b)
    end = raw.rfind(close_b)
    if start != -1 and end > start:
        return raw[start:end + 1]
    return strip_code_fences(raw)


def parse_json(raw: str, expect_array: bool = False) -> Result[Any]:
    text = extract_json_text(raw or "", expect_array=expect_array)
    try:
        return Success(json.loads(text))
    except ValueError as exc:
        return _parse_failure(f"AI response was not valid JSON: {exc}", raw)


def _parse_object(raw: str, required: Sequence[str], label: str) -> Result[Dict[str, Any]]:
    parsed = parse_json(raw)
    if isinstance(parsed, Failure):
        return Failure(parsed.kind, f"Failed to parse {label} from AI. The response was not valid JSON.")
    data = parsed.value
    if not isinstance(data, dict):
        return _parse_failure(f"Failed to parse {label} from AI. Expected a JSON object.", raw)
    missing = [key for key in required if data.get(key) is None]
    if missing:
        return _parse_failure(
            f"Failed to parse {label} from AI. Missing keys: {', '.join(missing)}", raw
        )
    return Success(data)


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _ensure_arrays(data: Dict[str, Any], keys: Sequence[str]) -> None:
    for key in keys:
        if not isinstance(data.get(key), list):
            data[key] = []


# ---------------------------------------------------------------------------
# Risk mitigation entries
# ---------------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class RiskStatement:
    text: str

    def to_json(self) -> str:
        return self.text


@dataclasses.dataclass(frozen=True)
class RiskRecord:
    risk: Any
    mitigation: Any

    def to_json(self) -> Dict[str, Any]:
        return {"risk": self.risk, "mitigation": self.mitigation}


@dataclasses.dataclass(frozen=True)
class OpaqueRisk:
    text: str

    def to_json(self) -> str:
        return self.text


RiskEntry = Union[RiskStatement, RiskRecord, OpaqueRisk]


def classify_risk(item: Any) -> RiskEntry:
    """
    Resolve one riskMitigation element.

    Strings are kept, objects with both ``risk`` and ``mitigation`` keep
    just those two fields, and anything else is kept as compact JSON text.
    """
    if isinstance(item, str):
        return RiskStatement(item)
    if isinstance(item, dict) and "risk" in item and "mitigation" in item:
        return RiskRecord(item["risk"], item["mitigation"])
    return OpaqueRisk(compact_json(item))


def normalize_risk_mitigation(items: Any) -> List[Any]:
    if not isinstance(items, list):
        return []
    return [classify_risk(item).to_json() for item in items]


# ---------------------------------------------------------------------------
# Per-report normalisers
# ---------------------------------------------------------------------------

def normalize_market_analysis(raw: str) -> Result[Dict[str, Any]]:
    result = _parse_object(raw, ANALYSIS_REQUIRED, "market analysis")
    if isinstance(result, Failure):
        return result
    data = result.value
    _ensure_arrays(data, ANALYSIS_ARRAYS)
    return Success(data)


def normalize_growth_strategies(raw: str) -> Result[Dict[str, Any]]:
    result = _parse_object(raw, STRATEGIES_REQUIRED, "growth strategies")
    if isinstance(result, Failure):
        return result
    data = result.value
    _ensure_arrays(data, STRATEGIES_ARRAYS)
    data["riskMitigation"] = normalize_risk_mitigation(data["riskMitigation"])
    return Success(data)


def normalize_financial_forecast(raw: str) -> Result[Dict[str, Any]]:
    return _parse_object(raw, FORECAST_REQUIRED, "financial forecast")


def normalize_compliance_items(
    raw: str, business_type: str, state: str
) -> Result[List[Dict[str, Any]]]:
    """
    Parse a JSON array of compliance items for one business type and state.

    An item whose type or state list lacks the requested value gets a
    list of just that value. ``steps`` and ``helpfulLinks`` default to
    empty lists.
    """
    parsed = parse_json(raw, expect_array=True)
    if isinstance(parsed, Failure):
        return Failure(parsed.kind, "Failed to parse compliance items from AI response")
    items = parsed.value
    if not isinstance(items, list):
        return _parse_failure("Failed to parse compliance items from AI response: not an array", raw)

    normalized: List[Dict[str, Any]] = []
    for item in items:
        if not isinstance(item, dict) or not item.get("title"):
            return _parse_failure(
                "Failed to parse compliance items from AI response: item without a title", raw
            )
        item = dict(item)
        if business_type not in _as_list(item.get("applicableBusinessTypes")):
            item["applicableBusinessTypes"] = [business_type]
        if state not in _as_list(item.get("applicableStates")):
            item["applicableStates"] = [state]
        for key in ("steps", "helpfulLinks"):
            if not isinstance(item.get(key), list):
                item[key] = []
        normalized.append(item)
    return Success(normalized)
