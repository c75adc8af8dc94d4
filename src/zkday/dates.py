"""Date strings for the daily note and its neighbours."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta


def get_date_string(offset_days: int, *, today: date | None = None) -> str:
    """Return the local calendar date shifted by ``offset_days`` as YYYY-MM-DD."""
    base = today or datetime.now().date()
    # isoformat pads the year to four digits; strftime does not on glibc
    return (base + timedelta(days=offset_days)).isoformat()


@dataclass(frozen=True)
class DailyDates:
    """Today's date string plus the two days it links to."""

    today: str
    yesterday: str
    tomorrow: str

    @classmethod
    def for_day(cls, day: date | None = None) -> DailyDates:
        # One clock reading so the three strings agree across midnight
        day = day or datetime.now().date()
        return cls(
            today=get_date_string(0, today=day),
            yesterday=get_date_string(-1, today=day),
            tomorrow=get_date_string(1, today=day),
        )
