"""Season calendar helpers."""

from datetime import date, timedelta


def calculate_week_dates(start_date: str, num_weeks: int) -> list[tuple[int, str]]:
    """
    Dates for each week of a season, seven days apart.

    Args:
        start_date: First week's date (YYYY-MM-DD)
        num_weeks: Number of weeks

    Returns:
        List of (week_number, YYYY-MM-DD) tuples
    """
    start = date.fromisoformat(start_date)
    return [
        (i + 1, (start + timedelta(weeks=i)).isoformat())
        for i in range(num_weeks)
    ]
