"""
Tests for input validation utilities.
"""

from utils.validators import (
    validate_email,
    validate_hex_color,
    validate_coordinates,
    validate_rating
)


class TestValidateEmail:
    """Tests for email validation."""

    def test_valid_email(self):
        assert validate_email('user@example.com') is True
        assert validate_email('user.name@example.com') is True
        assert validate_email('user+tag@example.co.uk') is True

    def test_invalid_email(self):
        assert validate_email('') is False
        assert validate_email(None) is False
        assert validate_email('invalid') is False
        assert validate_email('missing@domain') is False
        assert validate_email('@nodomain.com') is False


class TestValidateHexColor:

    def test_valid(self):
        assert validate_hex_color('#1A3A5C') is True
        assert validate_hex_color('#fff') is True

    def test_invalid(self):
        assert validate_hex_color('1A3A5C') is False
        assert validate_hex_color('#12345') is False
        assert validate_hex_color('') is False


class TestValidateCoordinates:

    def test_valid(self):
        assert validate_coordinates(14.55, 121.02) is True
        assert validate_coordinates(None, None) is True

    def test_out_of_range(self):
        assert validate_coordinates(91, 0) is False
        assert validate_coordinates(0, -181) is False

    def test_half_pair(self):
        assert validate_coordinates(14.55, None) is False


class TestValidateRating:

    def test_bounds(self):
        assert validate_rating(1) is True
        assert validate_rating('5') is True
        assert validate_rating(0) is False
        assert validate_rating(6) is False
        assert validate_rating('great') is False
