"""
Display and validation helpers for Zoho Books values.

Currency and date formatting go through Babel so the output follows CLDR
locale data rather than hand-built patterns.
"""
import re
import secrets
import string
from datetime import date, datetime
from typing import Any, Optional, Union

from babel import dates, numbers

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\+?[1-9]\d{0,15}$")
PHONE_STRIP_RE = re.compile(r"[\s\-()]")

DEFAULT_LOCALE = "en_US"


def _normalize_locale(locale: str) -> str:
    # Accept BCP-47 style tags ("en-US") as well as POSIX ones ("en_US").
    return locale.replace("-", "_")


def format_currency(amount: float, currency_code: str = "USD", locale: str = DEFAULT_LOCALE) -> str:
    """
    Format a monetary amount for display.

    Args:
        amount: Numeric amount, e.g. ``1234.5``.
        currency_code: ISO 4217 code such as ``USD`` or ``INR``.
        locale: Locale tag, e.g. ``en_US`` or ``de-DE``.

    Returns:
        str: Localized string, e.g. ``$1,234.50``.
    """
    return numbers.format_currency(amount, currency_code, locale=_normalize_locale(locale))


def format_date(
    value: Union[str, date, datetime],
    locale: str = DEFAULT_LOCALE,
    format: str = "medium",
) -> str:
    """
    Format a date for display. Strings are parsed as ISO-8601 (``2024-01-15``).
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        value = value.date()
    return dates.format_date(value, format=format, locale=_normalize_locale(locale))


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email or ""))


def is_valid_phone(phone: str) -> bool:
    return bool(PHONE_RE.match(PHONE_STRIP_RE.sub("", phone or "")))


def generate_random_string(length: int = 10) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def get_nested_property(obj: Any, path: str, default: Optional[Any] = None) -> Any:
    """Walk a dotted path through nested dicts, e.g. ``"contact.billing_address.city"``."""
    current = obj
    for key in path.split("."):
        if not isinstance(current, dict) or current.get(key) is None:
            return default
        current = current[key]
    return current
