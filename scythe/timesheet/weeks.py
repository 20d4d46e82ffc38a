from datetime import date, timedelta
from typing import List

from .dates import MONDAY, find_end_date, week_label
from .models import Week


def partition(start: date, end: date) -> List[Week]:
    """Split [start, end) into Monday anchored weeks.

    The walk stops as soon as the cursor reaches ``end``, so a week starting
    on ``end`` itself is never emitted.
    """
    weeks = []
    cursor = start
    while cursor < end:
        if cursor.weekday() == MONDAY:
            weeks.append(Week(start=cursor, end=find_end_date(cursor), label=week_label(cursor)))
        cursor += timedelta(days=1)
    return weeks
