from datetime import date
import re

MONTH_KEY_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def month_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def validate_month_key(v: str) -> str:
    v = (v or "").strip()
    if not MONTH_KEY_RE.match(v):
        raise ValueError("month must be YYYY-MM")
    return v


def _prev_month_start(d: date) -> date:
    if d.month == 1:
        return date(d.year - 1, 12, 1)
    return date(d.year, d.month - 1, 1)


def recent_months(n: int, end: date | None = None) -> list[str]:
    """Month keys for the ``n`` months ending with ``end``'s month, oldest first."""
    ref = end or date.today()
    cur = date(ref.year, ref.month, 1)
    out: list[str] = []
    for _ in range(max(0, n)):
        out.append(month_key(cur))
        cur = _prev_month_start(cur)
    out.reverse()
    return out
