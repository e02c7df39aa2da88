"""
Argument checks and sanitization applied before anything is sent upstream.
The Baseline API validates payloads itself; these helpers only guard the
shape of what we forward and strip characters we never want in a request.
"""

import re
from typing import Any, Mapping, Optional, Sequence, Union

from baseline_mcp.errors import ValidationError

MAX_TEXT_LENGTH = 1000

_UNSAFE_CHARS = re.compile(r"[<>\"'&]")


def require_fields(args: Optional[Mapping[str, Any]], fields: Sequence[str]) -> None:
    """Fail on the first field that is absent or None, in the given order."""
    for field in fields:
        if not args or args.get(field) is None:
            raise ValidationError(f"Missing required argument: {field}")


def require_identifier(args: Mapping[str, Any], field: str) -> str:
    require_fields(args, [field])
    value = args[field]
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} must be a non-empty string")
    return value


def require_identifiers(args: Mapping[str, Any], first: str, second: str) -> tuple:
    require_fields(args, [first, second])
    values = (args[first], args[second])
    if any(not isinstance(value, str) or not value.strip() for value in values):
        raise ValidationError(f"{first} and {second} must be non-empty strings")
    return values


def require_object(args: Optional[Mapping[str, Any]], field: str) -> Mapping[str, Any]:
    """Return args[field] if it is a mapping.

    An absent key is reported as missing; a present value of any other type
    (including None) is reported as not being an object.
    """
    if not args or field not in args:
        raise ValidationError(f"Missing required argument: {field}")
    value = args[field]
    if not isinstance(value, Mapping):
        raise ValidationError(f"{field} must be an object")
    return value


def check_page(args: Optional[Mapping[str, Any]]) -> Optional[Union[int, float]]:
    """Validate the optional pagination argument.

    Returns:
        The page number, or None when it was not given
    """
    page = (args or {}).get("page")
    if page is None:
        return None
    if isinstance(page, bool) or not isinstance(page, (int, float)) or page < 0:
        raise ValidationError("page must be a non-negative number")
    if isinstance(page, float) and page.is_integer():
        page = int(page)
    return page


def sanitize_text(value: Any) -> str:
    """Trim, drop < > " ' & and cap the length of a string."""
    if not isinstance(value, str):
        raise ValidationError("Input must be a string")
    return _UNSAFE_CHARS.sub("", value.strip())[:MAX_TEXT_LENGTH]


def _sanitize_value(value: Any) -> Any:
    if isinstance(value, str):
        return sanitize_text(value)
    if isinstance(value, Mapping):
        return {key: _sanitize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_sanitize_value(item) for item in value]
    return value


def sanitize_structure(value: Any) -> dict:
    """Sanitize every string leaf of a mapping, keeping its shape."""
    if not isinstance(value, Mapping):
        raise ValidationError("Input must be an object")
    return _sanitize_value(value)
