# utils/sanitization.py
from typing import Any, Dict, Optional
import re
from urllib.parse import quote, quote_plus

CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x0c\x0e-\x1f\x7f-\x9f]")
WHITESPACE = re.compile(r"\s+")

# Query/body keys that carry registry credentials.
SECRET_PARAMS = {"key", "subscription-key", "api_key"}
MASK = "***"


def clean_text(value: Optional[str]) -> str:
    """Strips control characters and collapses all whitespace runs to one space."""
    if value is None:
        return ""
    return WHITESPACE.sub(" ", CONTROL_CHARS.sub("", value)).strip()


def is_nonempty_text(value: Optional[str]) -> bool:
    return bool(clean_text(value))


def redact(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Copy of `params` safe to log or attach to an error."""
    if not params:
        return {}
    return {k: (MASK if k in SECRET_PARAMS else v) for k, v in params.items()}


def scrub_secrets(text: str, params: Optional[Dict[str, Any]]) -> str:
    """Masks every credential value of `params` found in `text`, raw or URL-encoded."""
    for key, value in (params or {}).items():
        if key not in SECRET_PARAMS or not value:
            continue
        value = str(value)
        for form in {value, quote_plus(value), quote(value, safe="")}:
            text = text.replace(form, MASK)
    return text
