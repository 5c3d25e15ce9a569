"""
Form helpers: derived-field computation and input coercion.

Admin forms submit every value as a string. These helpers turn them into
native types and recompute the fields that are derived from others
(slug from title or name, savings from a price pair). The same rules are
mirrored in static/js/admin.js for live preview; these are authoritative.
"""

import json
import math
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP


def slugify(text: str) -> str:
    """
    Build a URL slug from free text.

    "Grand Opening!" -> "grand-opening"

    Args:
        text: Title or name

    Returns:
        Lowercase slug with only a-z, 0-9 and single hyphens
    """
    if not text:
        return ''

    slug = text.lower()
    slug = re.sub(r'[^a-z0-9 -]', '', slug)
    slug = re.sub(r'\s+', '-', slug)
    slug = re.sub(r'-+', '-', slug)
    return slug.strip().strip('-')


def calculate_savings(original_price, offer_price) -> tuple:
    """
    Derive savings amount and percent from a price pair.

    Args:
        original_price: Price before the offer (may be None)
        offer_price: Discounted price

    Returns:
        Tuple (savings_amount, savings_percent), or (None, None) when the
        original price is missing or not above the offer price
    """
    original = to_decimal(original_price)
    offer = to_decimal(offer_price) or Decimal('0')

    if not original or original <= offer:
        return None, None

    amount = original - offer
    percent = (amount / original * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    return float(amount), int(percent)


# =============================================================================
# COERCION
# =============================================================================

def blank_to_none(value):
    """Return None for empty/whitespace strings, stripped string otherwise."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def to_decimal(value):
    """Convert to Decimal, None for blanks, invalid or non-finite input."""
    value = blank_to_none(value)
    if value is None:
        return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def parse_int(value, default=None):
    """Parse an integer form value."""
    value = blank_to_none(value)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def parse_decimal(value, default=None):
    """Parse a money/number form value as float."""
    number = to_decimal(value)
    if number is None:
        return default
    # Finite decimals such as 1e400 still overflow a float
    number = float(number)
    return number if math.isfinite(number) else default


def parse_date(value):
    """
    Parse a YYYY-MM-DD form value.

    Args:
        value: String, date, datetime or None

    Returns:
        date or None
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    value = blank_to_none(value)
    if value is None:
        return None
    try:
        return datetime.strptime(value[:10], '%Y-%m-%d').date()
    except ValueError:
        return None


def parse_datetime(value):
    """
    Parse a datetime-local form value (YYYY-MM-DDTHH:MM) or DB timestamp.

    Returns:
        naive datetime or None
    """
    if isinstance(value, datetime):
        return value

    value = blank_to_none(value)
    if value is None:
        return None

    for fmt in ('%Y-%m-%dT%H:%M', '%Y-%m-%dT%H:%M:%S', '%Y-%m-%d %H:%M:%S', '%Y-%m-%d %H:%M'):
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_list(value) -> list:
    """
    Parse a comma/newline separated list.

    Items are trimmed, blanks dropped and duplicates removed keeping the
    first occurrence.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        items = value
    else:
        items = re.split(r'[,\n]', str(value))

    result = []
    for item in items:
        item = str(item).strip()
        if item and item not in result:
            result.append(item)
    return result


def parse_bool(value) -> int:
    """Checkbox values to 0/1."""
    if isinstance(value, str):
        return 1 if value.strip().lower() in ('1', 'true', 'on', 'yes') else 0
    return 1 if value else 0


def dump_json(value) -> str:
    """Serialize a list/dict column."""
    return json.dumps(value if value is not None else [])


def load_json(value, default=None):
    """Decode a JSON column, tolerating NULL and garbage."""
    if default is None:
        default = []
    if not value:
        return default
    if isinstance(value, (list, dict)):
        return value
    try:
        return json.loads(value)
    except (TypeError, ValueError):
        return default
