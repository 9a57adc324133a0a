# app/services/temporal_query.py
"""
Date-window predicates shared by listings, stats and financial reports.

Windows are whole calendar days and inclusive on both ends: a start date
begins at 00:00:00 and an end date runs up to, but not including, the
following midnight. The upper bound is exclusive so that no timestamp,
whatever its sub-second precision, falls between two adjacent windows.
Every builder returns a list of SQLAlchemy clauses meant to be splatted
into ``.where(*filters)``; an empty list matches everything.
"""
from datetime import date, datetime, time, timedelta
from typing import List, Optional


def day_start(day: date) -> datetime:
    return datetime.combine(day, time.min)


def day_after(day: date) -> datetime:
    """ Midnight that closes `day` (exclusive upper bound) """
    return day_start(day + timedelta(days=1))


def range_filter(column, start_date: Optional[date], end_date: Optional[date]) -> List:
    """
    column within [start 00:00, end + 1 day 00:00).
    Only applied when both bounds are given; a lone start date matches everything.
    """
    if start_date and end_date:
        return [column >= day_start(start_date), column < day_after(end_date)]
    return []


def existence_filter(column, end_date: Optional[date]) -> List:
    """ Records that existed by the end of end_date """
    if not end_date:
        return []
    return [column < day_after(end_date)]


def window_filter(column, start_date: Optional[date], end_date: Optional[date]) -> List:
    """
    Range when both bounds are given, existence when only end_date is,
    otherwise no restriction.
    """
    if start_date and end_date:
        return range_filter(column, start_date, end_date)
    return existence_filter(column, end_date)


def predates(end_date: Optional[date], moment: Optional[datetime]) -> bool:
    """ True when the window closes before `moment` (e.g. the first agent was created) """
    if not end_date or moment is None:
        return False
    return day_start(end_date) < moment
