from __future__ import annotations

import calendar
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection

    from ..entities.document import Document


def add_months(moment: datetime, months: int) -> datetime:
    """Shift ``moment`` by whole calendar months.

    The day is clamped to the last day of the target month, so
    2024-01-31 plus one month is 2024-02-29.
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def check_format(document: Document, accepted_formats: Collection[str]) -> bool:
    return document.format is not None and document.format in accepted_formats


def check_actual(document: Document, *, now: datetime, max_age_months: int) -> bool:
    return add_months(document.created, max_age_months) > now
