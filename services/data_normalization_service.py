#File: services/data_normalization_service.py
import logging
from datetime import date
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def split_terms(raw: Optional[str], separator: str = ";") -> List[str]:
    """
    Splits a delimited term string, trims each segment and drops empties.
    Source order is preserved.
    """
    if not raw:
        return []
    return [term.strip() for term in raw.split(separator) if term.strip()]


def split_contact_pi_name(name: str) -> Tuple[str, str]:
    """
    "Last, First" -> (family, given), split on the first comma only.
    Without a comma the whole string is the family name.
    """
    family, sep, given = name.partition(",")
    if not sep:
        return name, ""
    return family.strip(), given.strip()


def format_mesh_subject(descriptor: str, major_topic: Optional[str], qualifiers: Iterable[Optional[str]]) -> str:
    """
    Folds a MeSH heading into one string: "*Descriptor/qualifier1/qualifier2".
    The leading "*" marks a major topic (flag "Y").
    """
    subject = f"*{descriptor}" if major_topic == "Y" else descriptor
    for qualifier in qualifiers:
        if qualifier:
            subject += f"/{qualifier}"
    return subject


def join_present(parts: Sequence[Optional[str]], separator: str = ", ") -> Optional[str]:
    """Joins the non-empty parts; an empty join collapses to None."""
    joined = separator.join(p for p in parts if p)
    return joined or None


def first_present(items: Iterable[T], getter: Callable[[T], Any]) -> Any:
    """First non-empty value of `getter(item)` in source order, else None."""
    for item in items:
        value = getter(item)
        if value:
            return value
    return None


def _to_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    value = str(value).strip()
    if not value.isdigit():
        return None
    return int(value)


def partial_date_to_date(year: Optional[str], month: Optional[str] = None, day: Optional[str] = None) -> Optional[date]:
    """
    Builds a calendar date from year/month/day parts.
    Year is required; a missing month or day defaults to 1.
    Impossible dates (month 13, Feb 30) yield None.
    """
    y = _to_int(year)
    if not y:
        return None
    m = _to_int(month) or 1
    d = _to_int(day) or 1
    try:
        return date(y, m, d)
    except ValueError:
        logger.warning(f"Ignoring impossible date parts: year={year} month={month} day={day}")
        return None


def partial_date_to_iso(year: Optional[str], month: Optional[str] = None, day: Optional[str] = None) -> Optional[str]:
    """
    Formats date parts keeping only the precision supplied:
    "2015", "2015-09" or "2015-09-01".
    """
    y = _to_int(year)
    if not y:
        return None
    m = _to_int(month)
    if not m:
        return f"{y:04d}"
    d = _to_int(day)
    if not d:
        return f"{y:04d}-{m:02d}"
    return f"{y:04d}-{m:02d}-{d:02d}"


def email_sort_key(primary: Optional[bool], verified: Optional[bool]) -> Tuple[int, int]:
    """Primary first, then verified. Use with a stable sort."""
    return (0 if primary else 1, 0 if verified else 1)
