"""
Miscellaneous utility helper functions.
Provides common functionality used across the application.
"""

import random
import string
from datetime import date, datetime
from urllib.parse import quote


def format_date(value, format_str: str = '%b %d, %Y') -> str:
    """
    Format a date for display.

    Args:
        value: date, datetime or YYYY-MM-DD string
        format_str: Output format (default: Jan 05, 2026)

    Returns:
        Formatted date string or original if invalid
    """
    if not value:
        return ''
    if isinstance(value, (date, datetime)):
        return value.strftime(format_str)
    try:
        date_obj = datetime.strptime(value[:10], '%Y-%m-%d')
        return date_obj.strftime(format_str)
    except (ValueError, TypeError):
        return value


def format_datetime(value, format_str: str = '%b %d, %Y %H:%M') -> str:
    """
    Format a datetime for display.

    Args:
        value: datetime or timestamp string
        format_str: Output format

    Returns:
        Formatted datetime string or original if invalid
    """
    if not value:
        return ''
    if isinstance(value, datetime):
        return value.strftime(format_str)

    for input_format in ['%Y-%m-%d %H:%M:%S', '%Y-%m-%d %H:%M:%S.%f', '%Y-%m-%dT%H:%M']:
        try:
            return datetime.strptime(value, input_format).strftime(format_str)
        except (ValueError, TypeError):
            continue

    return value


def format_currency(amount, currency: str = 'PHP') -> str:
    """
    Format a money amount.

    Args:
        amount: Number or None
        currency: ISO currency code

    Returns:
        e.g. 'PHP 1,234.50'
    """
    if amount is None or amount == '':
        return ''
    try:
        return f'{currency} {float(amount):,.2f}'
    except (TypeError, ValueError):
        return str(amount)


def status_label(status: str) -> str:
    """CHECKED_IN -> Checked In."""
    if not status:
        return ''
    return status.replace('_', ' ').title()


def generate_unique_code(prefix: str = '', length: int = 8) -> str:
    """
    Generate unique code for reservations, etc.

    Args:
        prefix: Optional prefix (e.g., 'RES')
        length: Length of random part

    Returns:
        Unique code string
    """
    random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))

    if prefix:
        return f'{prefix}-{random_part}'

    return random_part


def build_map_embed_url(latitude, longitude, name: str = '', api_key: str = None) -> str:
    """
    Google Maps iframe URL for a location card.

    Uses the Embed API when a key is configured, otherwise the keyless
    maps?output=embed form.

    Args:
        latitude: Latitude or None
        longitude: Longitude or None
        name: Place label for the marker
        api_key: Google Maps API key

    Returns:
        Embed URL, or '' without coordinates
    """
    if latitude is None or longitude is None:
        return ''

    if api_key:
        return (f'https://www.google.com/maps/embed/v1/place?key={quote(api_key)}'
                f'&q={quote(name or f"{latitude},{longitude}")}'
                f'&center={latitude},{longitude}&zoom=15')
    return f'https://maps.google.com/maps?q={latitude},{longitude}&z=15&output=embed'
