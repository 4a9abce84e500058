from __future__ import annotations

from datetime import datetime, timezone


def parse_rfc3339(value: str) -> datetime:
    """
    Parse RFC3339 timestamp string into tz-aware UTC datetime.

    Accepts strings like:
      - 2020-01-01T12:34:56Z
      - 2020-01-01T12:34:56.123Z
      - 2020-01-01T12:34:56.1234567Z  (OneDrive uses up to 7 fraction digits)
      - 2020-01-01T12:34:56+09:00
    """
    if not isinstance(value, str) or not value:
        raise ValueError("RFC3339 value must be a non-empty string")

    s = value.strip()
    # Python's fromisoformat doesn't accept 'Z' in 3.9/3.10, so normalize.
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    s = _normalize_fraction(s)

    dt = datetime.fromisoformat(s)  # raises ValueError if invalid
    dt = normalize_dt(dt)
    return dt.astimezone(timezone.utc)


def to_rfc3339(dt: datetime) -> str:
    """Convert tz-aware datetime to RFC3339 (UTC, with 'Z')."""
    dt = normalize_dt(dt).astimezone(timezone.utc)
    s = dt.isoformat(timespec="microseconds")
    return s.replace("+00:00", "Z")


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt


def _normalize_fraction(s: str) -> str:
    # fromisoformat before 3.11 only takes exactly 3 or 6 fraction digits.
    dot = s.find(".")
    if dot == -1:
        return s
    end = dot + 1
    while end < len(s) and s[end].isdigit():
        end += 1
    digits = s[dot + 1:end]
    return s[:dot + 1] + digits[:6].ljust(6, "0") + s[end:]
