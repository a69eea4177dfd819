"""
Success / Failure values passed along the generation chain.

Services never raise for expected failures (AI unavailable, unparseable
output, missing records). They return a ``Failure`` and the request
boundary converts it to an HTTP error in exactly one place.
"""
from __future__ import annotations

import dataclasses
import enum
import logging
from typing import Any, Generic, TypeVar, Union

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FailureKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    AI_UNAVAILABLE = "ai_unavailable"
    PARSE_FAILED = "parse_failed"


_STATUS_BY_KIND = {
    FailureKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.AI_UNAVAILABLE: status.HTTP_502_BAD_GATEWAY,
    FailureKind.PARSE_FAILED: status.HTTP_502_BAD_GATEWAY,
}


@dataclasses.dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclasses.dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success[T], Failure]


def unwrap(result: "Result[Any]") -> Any:
    """Return the success value, or raise the HTTP error for a failure."""
    if isinstance(result, Failure):
        raise_for_failure(result)
    return result.value


def raise_for_failure(failure: Failure) -> None:
    """Map a failure kind to its HTTP status and raise."""
    status_code = _STATUS_BY_KIND[failure.kind]
    logger.warning("Request failed (%s): %s", failure.kind.value, failure.message)
    raise HTTPException(status_code=status_code, detail=failure.message)
