from datetime import date, datetime, timezone

from src.common.utils.constants import DISPLAY_DATE_FORMAT


def from_iso_string(value: str) -> datetime:
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        raise ValueError("Stored datetime must be timezone-aware")
    return dt.astimezone(timezone.utc)


def to_iso_string(value: datetime) -> str:
    if value.tzinfo is None:
        raise ValueError("Datetime must be timezone-aware")
    return value.astimezone(timezone.utc).isoformat()


def parse_date(value) -> date:
    """Accept a date, a datetime, an ISO date or the DD-MM-YYYY display format."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError("date is required")

    text = value.strip()
    for parser in (date.fromisoformat, _from_display):
        try:
            return parser(text)
        except ValueError:
            continue
    raise ValueError(f"'{text}' is not a valid date (use YYYY-MM-DD or DD-MM-YYYY)")


def _from_display(value: str) -> date:
    return datetime.strptime(value, DISPLAY_DATE_FORMAT).date()
