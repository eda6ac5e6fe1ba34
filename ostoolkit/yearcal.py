"""Print a twelve-month calendar for a chosen year."""

from __future__ import annotations

_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)
_MONTH_NAMES = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN",
                "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_GREEN = "\x1b[1;32m"
_WEEK_HEADER = f"{_GREEN}  Sun  Mon  Tue  Wed  Thu  Fri  Sat\n"


def day_number(day: int, month: int, year: int) -> int:
    """Weekday of a date, 0 for Sunday through 6 for Saturday; month is 1-12."""
    if month < 3:
        year -= 1
    return (year + year // 4 - year // 100 + year // 400
            + _OFFSETS[month - 1] + day) % 7


def _is_leap(year: int) -> bool:
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(month_index: int, year: int) -> int:
    """Days in the month ``month_index`` (0 for January); 0 if out of range."""
    if not 0 <= month_index < 12:
        return 0
    if month_index == 1 and _is_leap(year):
        return 29
    return _MONTH_LENGTHS[month_index]


def render_year(year: int) -> str:
    """Return the full calendar text for ``year``."""
    parts = [f"{_GREEN}\tCalendar for {year}\n"]
    column = day_number(1, 1, year)
    for index, name in enumerate(_MONTH_NAMES):
        parts.append(f"{name}\n")
        parts.append(_WEEK_HEADER)
        parts.append("    " * column)
        for day in range(1, days_in_month(index, year) + 1):
            parts.append(f"{day:4d}")
            column += 1
            if column > 6:
                column = 0
                parts.append("\n")
        if column:
            parts.append("\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Ask for years and print their calendars until input ends."""
    while True:
        try:
            raw = input("Enter Year:")
        except EOFError:
            return 0
        try:
            year = int(raw.strip())
        except ValueError:
            print("Invalid year.")
            continue
        print(render_year(year), end="")