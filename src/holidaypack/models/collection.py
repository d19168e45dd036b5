"""
HolidayPack Holiday Collection

Output aggregate for one provider+year: holiday records keyed by id, with a
date-ordered view. Ids are unique; a duplicate insert is an error. Records
dated outside the bound year are rejected unless flagged cross_year.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Iterator, Optional, Union

from ..exceptions import DuplicateIdError, YearMismatchError
from .holiday import HolidayRecord

DateLike = Union[date, datetime]


def _as_day(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


class HolidayCollection:
    """
    Holiday records for one provider and year.

    Usage:
        collection = HolidayCollection(year=2023, provider_id="CA")
        collection.insert(record)
        collection.get("canadaDay")
    """

    def __init__(self, year: int, provider_id: Optional[str] = None):
        self.year = year
        self.provider_id = provider_id
        self._records: dict[str, HolidayRecord] = {}

    def insert(self, record: HolidayRecord) -> None:
        """
        Add a record.

        Raises:
            DuplicateIdError: If a record with the same id is present
            YearMismatchError: If the record falls outside the bound year
                and is not cross_year
        """
        if not record.cross_year and record.day.year != self.year:
            raise YearMismatchError(
                message=f"Holiday '{record.id}' resolved to {record.day.isoformat()}, "
                        f"outside {self.year}, and is not marked cross_year",
                details={"holiday_id": record.id, "year": self.year, "date": record.day.isoformat()},
                provider_id=self.provider_id,
            )
        if record.id in self._records:
            raise DuplicateIdError(
                message=f"Duplicate holiday id '{record.id}'",
                details={
                    "holiday_id": record.id,
                    "year": self.year,
                    "existing_date": self._records[record.id].day.isoformat(),
                    "new_date": record.day.isoformat(),
                },
                provider_id=self.provider_id,
            )
        self._records[record.id] = record

    def get(self, holiday_id: str) -> Optional[HolidayRecord]:
        """Record by id, or None if absent."""
        return self._records.get(holiday_id)

    def all(self) -> list[HolidayRecord]:
        """Records ordered by date ascending, ties broken by id."""
        return sorted(self._records.values(), key=lambda r: r.sort_key)

    def contains(self, day: DateLike) -> bool:
        """True if any holiday falls on the given calendar date."""
        target = _as_day(day)
        return any(r.day == target for r in self._records.values())

    def on(self, day: DateLike) -> list[HolidayRecord]:
        """Holidays falling on the given calendar date."""
        target = _as_day(day)
        return [r for r in self.all() if r.day == target]

    def between(
        self,
        start: DateLike,
        end: DateLike,
        inclusive: bool = True,
    ) -> list[HolidayRecord]:
        """Holidays dated within [start, end] (or (start, end) if not inclusive)."""
        lo, hi = _as_day(start), _as_day(end)
        if lo > hi:
            raise ValueError(f"Start date {lo} is after end date {hi}")
        if inclusive:
            return [r for r in self.all() if lo <= r.day <= hi]
        return [r for r in self.all() if lo < r.day < hi]

    def ids(self) -> list[str]:
        return [r.id for r in self.all()]

    def dates(self) -> list[date]:
        return [r.day for r in self.all()]

    def names(self) -> dict[str, str]:
        """Holiday id -> display name, in date order."""
        return {r.id: r.name for r in self.all()}

    def __getitem__(self, holiday_id: str) -> HolidayRecord:
        return self._records[holiday_id]

    def __contains__(self, holiday_id: object) -> bool:
        return holiday_id in self._records

    def __iter__(self) -> Iterator[HolidayRecord]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HolidayCollection):
            return NotImplemented
        return self.year == other.year and self.all() == other.all()

    def __repr__(self) -> str:
        return (
            f"HolidayCollection(provider_id={self.provider_id!r}, "
            f"year={self.year}, holidays={len(self)})"
        )
