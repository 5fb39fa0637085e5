"""Whole-year age as of a given date."""

from __future__ import annotations

from datetime import date


def _years_before(day: date, years: int) -> date:
    """Shift a date back by whole years; Feb 29 lands on Feb 28 in non-leap years."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def calculate_age(date_of_birth: date, as_of: date | None = None) -> int:
    """Age in whole years on ``as_of`` (today by default).

    The age increments on the birthday itself. A Feb 29 birthday is completed
    on Mar 1 in non-leap years. Birth dates after ``as_of`` give a negative age;
    callers are expected to reject those upstream.
    """
    if as_of is None:
        as_of = date.today()
    age = as_of.year - date_of_birth.year
    if date_of_birth > _years_before(as_of, age):
        age -= 1
    return age
