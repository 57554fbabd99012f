# utils/id_normalization.py
import re
from typing import Optional

ORCID_URL_PREFIX = re.compile(r"^(?:https?://)?(?:www\.)?(?:sandbox\.)?orcid\.org/", re.IGNORECASE)
ORCID_PATTERN = re.compile(r"^\d{4}-\d{4}-\d{4}-\d{3}[\dX]$")


def normalize_orcid_id(raw_id: Optional[str]) -> Optional[str]:
    """
    Accepts a bare ORCID iD or its orcid.org URL form and returns the bare iD.
    The check digit is uppercased; nothing else is rewritten.
    """
    if not raw_id or not raw_id.strip():
        return None
    orcid = ORCID_URL_PREFIX.sub("", raw_id.strip()).strip("/")
    if orcid.endswith("x"):
        orcid = orcid[:-1] + "X"
    return orcid or None


def is_orcid_id(value: Optional[str]) -> bool:
    return bool(value) and bool(ORCID_PATTERN.match(value))


def is_orcid_type(identifier_type: Optional[str]) -> bool:
    """True when a declared identifier type names ORCID, ignoring case."""
    return bool(identifier_type) and identifier_type.upper() == "ORCID"
