"""Dataclasses describing a search request and what the page showed in response."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

DateInput = Union[date, str]


def format_date(value: DateInput) -> str:
    """Render ``value`` in the ``YYYY-MM-DD`` form used by HTML date inputs."""
    if isinstance(value, date):
        return value.isoformat()
    return value.strip()


@dataclass(slots=True, frozen=True)
class SearchCriteria:
    """Filters a user enters in the homestay search form."""

    district: str
    guests: int
    check_in: Optional[date] = None
    check_out: Optional[date] = None

    def __post_init__(self) -> None:
        if not self.district or not self.district.strip():
            raise ValueError("district must not be blank")
        if self.guests <= 0:
            raise ValueError("guests must be positive")

    def to_dict(self) -> dict[str, object]:
        return {
            "district": self.district,
            "guests": self.guests,
            "check_in": self.check_in.isoformat() if self.check_in else None,
            "check_out": self.check_out.isoformat() if self.check_out else None,
        }


@dataclass(slots=True, frozen=True)
class SearchResultPage:
    """Snapshot of the results page taken right after submission."""

    current_url: str
    results_visible: bool
    pagination_visible: bool
    first_result_visible: bool
    result_count: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "current_url": self.current_url,
            "results_visible": self.results_visible,
            "pagination_visible": self.pagination_visible,
            "first_result_visible": self.first_result_visible,
            "result_count": self.result_count,
        }


@dataclass(slots=True, frozen=True)
class ValidationAlert:
    """A native ``alert()`` raised by the page's client-side date validation."""

    message: str
    acknowledged: bool = False

    def mentions(self, text: str) -> bool:
        return text in self.message

    def to_dict(self) -> dict[str, object]:
        return {"message": self.message, "acknowledged": self.acknowledged}


@dataclass(slots=True, frozen=True)
class SearchOutcome:
    """Either a results page or the alert that blocked the search."""

    results: Optional[SearchResultPage] = None
    alert: Optional[ValidationAlert] = None

    def __post_init__(self) -> None:
        if (self.results is None) == (self.alert is None):
            raise ValueError("SearchOutcome needs exactly one of results or alert")

    @property
    def rejected(self) -> bool:
        return self.alert is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "results": self.results.to_dict() if self.results else None,
            "alert": self.alert.to_dict() if self.alert else None,
        }
