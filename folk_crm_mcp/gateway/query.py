"""Query-string construction for Folk list endpoints."""

from typing import Any, Mapping
from urllib.parse import urlencode


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(fields: Mapping[str, Any]) -> str:
    """Build a URL query string from optional filter fields.
    
    Fields are emitted in mapping order; fields whose value is None are
    skipped entirely rather than sent as ``key=``.
    
    Args:
        fields: Filter name to value mapping.
        
    Returns:
        ``""`` when nothing remains, otherwise ``"?"`` followed by the
        form-encoded pairs.
    """
    pairs = [(key, _stringify(value)) for key, value in fields.items() if value is not None]
    if not pairs:
        return ""
    return "?" + urlencode(pairs)
