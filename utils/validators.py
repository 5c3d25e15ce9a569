"""
Input validation helper functions.
Provides validation for common input types.
"""

import re


def validate_email(email: str) -> bool:
    """
    Validate email format.

    Args:
        email: Email address to validate

    Returns:
        True if valid email format
    """
    if not email:
        return False

    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return bool(re.match(pattern, email))


def validate_hex_color(color: str) -> bool:
    """
    Validate #RGB / #RRGGBB colors.

    Args:
        color: Color string

    Returns:
        True if valid
    """
    if not color:
        return False
    return bool(re.match(r'^#(?:[0-9a-fA-F]{3}){1,2}$', color))


def validate_coordinates(latitude, longitude) -> bool:
    """
    Validate a latitude/longitude pair. Both missing is valid.

    Args:
        latitude: Latitude or None
        longitude: Longitude or None

    Returns:
        True if valid
    """
    if latitude is None and longitude is None:
        return True
    if latitude is None or longitude is None:
        return False
    return -90 <= float(latitude) <= 90 and -180 <= float(longitude) <= 180


def validate_rating(rating) -> bool:
    """Validate a 1..5 star rating."""
    try:
        return 1 <= int(rating) <= 5
    except (TypeError, ValueError):
        return False
