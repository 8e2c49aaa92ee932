"""
Built-in validator catalog.

Each validator is a pure predicate taking `(value, params)` and returning
True when the value is valid. `None` fails every built-in check; missing
numeric bounds in `params` are treated as open.
"""

import math
import re
import unicodedata
from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal
from functools import lru_cache
from re import Pattern
from typing import Any
from urllib.parse import urlsplit

from . import rule_types

Validator = Callable[[Any, Mapping[str, Any]], bool]

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_DECIMAL_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")
_DIGITS_ONLY = re.compile(r"[0-9]+")
_AMOUNT_PATTERN = re.compile(r"\s?[0-9]+(,[0-9]{3})*(\.[0-9]{1,2})?")
_EAN_PATTERN = re.compile(r"[0-9]{8}|[0-9]{13}")
_ISBN_PATTERN = re.compile(r"(97[89])?[0-9]{9}[0-9X]")
_SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

# Schemes that require an authority (host) component
_HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _to_number(value: Any) -> int | float | Decimal | None:
    """
    Convert a value to a number for comparison.

    Returns None when the value has no numeric interpretation.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, Decimal):
        return None if value.is_nan() else value
    if isinstance(value, str):
        text = value.strip()
        # float() accepts digit separators such as "1_000"
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        return None if math.isnan(number) else number
    return None


def _length(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return len(value)
    except TypeError:
        return None


@lru_cache(maxsize=256)
def _compile(regex: str, flags: int) -> Pattern:
    return re.compile(regex, flags)


def _within(number, lower, upper) -> bool:
    lower = _to_number(lower)
    upper = _to_number(upper)
    if lower is not None and number < lower:
        return False
    if upper is not None and number > upper:
        return False
    return True


def not_null(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Value is not None."""
    return value is not None


def not_empty(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Value is not None and has a length greater than zero."""
    length = _length(value)
    return length is not None and length > 0


def not_blank(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Value is not None and its stripped string form is not empty."""
    return value is not None and str(value).strip() != ""


def email(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Value looks like local@domain.tld."""
    text = _as_text(value)
    return text is not None and _EMAIL_PATTERN.fullmatch(text) is not None


def pattern(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """
    Value contains a match of params["regex"].

    The regex may be a string or a compiled pattern; params["flags"] is
    applied to string patterns. An invalid regex raises re.error.
    """
    params = params or {}
    regex = params.get("regex")
    text = _as_text(value)
    if text is None or regex is None:
        return False

    if isinstance(regex, Pattern):
        compiled = regex
    else:
        compiled = _compile(str(regex), params.get("flags", 0))

    return compiled.search(text) is not None


def min_value(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Numeric value is greater than or equal to params["min"]."""
    number = _to_number(value)
    if number is None:
        return False
    return _within(number, (params or {}).get("min"), None)


def max_value(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Numeric value is less than or equal to params["max"]."""
    number = _to_number(value)
    if number is None:
        return False
    return _within(number, None, (params or {}).get("max"))


def in_range(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Numeric value is within [params["min"], params["max"]] inclusive."""
    params = params or {}
    number = _to_number(value)
    if number is None:
        return False
    return _within(number, params.get("min"), params.get("max"))


def size(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Length is within [params["min"] (default 0), params["max"] (default unbounded)]."""
    params = params or {}
    length = _length(value)
    if length is None:
        return False
    return _within(length, params.get("min") or 0, params.get("max"))


def digits(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """
    Value is a non-negative decimal with bounded integer and fraction digits.

    params["integer"] limits the digits before the decimal point and
    params["fraction"] the digits after it; a missing limit is unbounded.
    """
    params = params or {}
    text = _as_text(value)
    if text is None or _DECIMAL_PATTERN.fullmatch(text) is None:
        return False

    int_part, _, frac_part = text.partition(".")
    max_integer = params.get("integer")
    max_fraction = params.get("fraction")

    if max_integer is not None and len(int_part) > max_integer:
        return False
    if max_fraction is not None and len(frac_part) > max_fraction:
        return False
    return True


def credit_card_number(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """All-digit value passing the Luhn checksum."""
    if isinstance(value, bool):
        return False
    text = _as_text(value)
    if text is None or _DIGITS_ONLY.fullmatch(text) is None:
        return False

    total = 0
    for position, char in enumerate(reversed(text)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def unique_elements(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Value is a sequence (not a string) without duplicate elements."""
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        return False

    try:
        return len(set(value)) == len(value)
    except TypeError:
        # Unhashable elements: fall back to equality comparison
        seen: list[Any] = []
        for item in value:
            if item in seen:
                return False
            seen.append(item)
        return True


def url(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Value is a well-formed absolute URL."""
    if not isinstance(value, str) or not value:
        return False
    if any(char.isspace() for char in value):
        return False

    try:
        parts = urlsplit(value)
        parts.port  # raises ValueError for a malformed port
    except ValueError:
        return False

    if not parts.scheme or _SCHEME_PATTERN.fullmatch(parts.scheme) is None:
        return False
    if parts.scheme in _HIERARCHICAL_SCHEMES:
        return bool(parts.hostname)

    remainder = value[len(parts.scheme) + 1:]
    return remainder != ""


def currency(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Decimal amount with an optional leading currency symbol, e.g. "$1,000.00"."""
    text = _as_text(value)
    if text is None:
        return False
    if text and unicodedata.category(text[0]) == "Sc":
        text = text[1:]
    return _AMOUNT_PATTERN.fullmatch(text) is not None


def ean(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """Exactly 8 or 13 digits."""
    text = _as_text(value)
    return text is not None and _EAN_PATTERN.fullmatch(text) is not None


def isbn(value: Any, params: Mapping[str, Any] | None = None) -> bool:
    """ISBN-10 or ISBN-13 structure; the check character may be a digit or X."""
    text = _as_text(value)
    return text is not None and _ISBN_PATTERN.fullmatch(text) is not None


BUILTIN_VALIDATORS: dict[str, Validator] = {
    rule_types.NOT_NULL: not_null,
    rule_types.NOT_EMPTY: not_empty,
    rule_types.NOT_BLANK: not_blank,
    rule_types.EMAIL: email,
    rule_types.PATTERN: pattern,
    rule_types.MIN: min_value,
    rule_types.MAX: max_value,
    rule_types.RANGE: in_range,
    rule_types.SIZE: size,
    rule_types.LENGTH: size,
    rule_types.DIGITS: digits,
    rule_types.CREDIT_CARD_NUMBER: credit_card_number,
    rule_types.UNIQUE_ELEMENTS: unique_elements,
    rule_types.URL: url,
    rule_types.CURRENCY: currency,
    rule_types.EAN: ean,
    rule_types.ISBN: isbn,
}
