"""
Tests for derived form fields and input coercion.
"""

import pytest
from datetime import date, datetime

from utils.form_helpers import (
    slugify,
    calculate_savings,
    blank_to_none,
    parse_int,
    parse_decimal,
    parse_date,
    parse_datetime,
    parse_list,
    parse_bool,
    load_json
)


class TestSlugify:
    """Tests for slug generation."""

    def test_basic_title(self):
        assert slugify('Grand Opening!') == 'grand-opening'

    def test_collapses_whitespace_and_hyphens(self):
        assert slugify('  Summer   --  Escape ') == 'summer-escape'

    def test_drops_non_ascii(self):
        assert slugify('Café Niño 2026') == 'caf-nio-2026'

    def test_empty(self):
        assert slugify('') == ''
        assert slugify(None) == ''
        assert slugify('!!!') == ''


class TestCalculateSavings:
    """Tests for offer savings."""

    def test_discount(self):
        assert calculate_savings(1000, 750) == (250.0, 25)

    def test_rounds_half_up(self):
        # 125 / 1000 = 12.5% -> 13
        assert calculate_savings(1000, 875) == (125.0, 13)

    def test_string_inputs(self):
        assert calculate_savings('12000', '9000') == (3000.0, 25)

    def test_no_original_price(self):
        assert calculate_savings(None, 750) == (None, None)
        assert calculate_savings('', 750) == (None, None)

    def test_original_not_above_offer(self):
        assert calculate_savings(500, 500) == (None, None)
        assert calculate_savings(400, 500) == (None, None)


class TestDeriveSlug:
    """Tests for the slug stored on save."""

    def test_blank_slug_uses_source_field(self):
        from blueprints.admin.services.common import derive_slug

        assert derive_slug({'title': 'Full Moon Party', 'slug': ''}, 'title') == 'full-moon-party'
        assert derive_slug({'name': 'Makati City Hotel'}, 'name') == 'makati-city-hotel'

    def test_manual_slug_is_normalised(self):
        from blueprints.admin.services.common import derive_slug

        data = {'title': 'Summer Escape', 'slug': 'My Custom Slug'}
        assert derive_slug(data, 'title') == 'my-custom-slug'

    def test_no_usable_slug(self):
        from blueprints.admin.services.common import derive_slug

        with pytest.raises(ValueError):
            derive_slug({'title': '!!!', 'slug': ''}, 'title')


class TestCoercion:
    """Tests for form value coercion."""

    def test_blank_to_none(self):
        assert blank_to_none('') is None
        assert blank_to_none('   ') is None
        assert blank_to_none(' a ') == 'a'
        assert blank_to_none(0) == 0

    def test_parse_int(self):
        assert parse_int('42') == 42
        assert parse_int('') is None
        assert parse_int('abc', default=0) == 0

    def test_parse_decimal(self):
        assert parse_decimal('1234.50') == 1234.5
        assert parse_decimal('') is None
        assert parse_decimal('n/a', default=0.4) == 0.4

    def test_parse_decimal_rejects_non_finite(self):
        for value in ('nan', 'NaN', 'Infinity', '-inf', '1e400'):
            assert parse_decimal(value) is None

    def test_parse_date(self):
        assert parse_date('2026-03-01') == date(2026, 3, 1)
        assert parse_date(datetime(2026, 3, 1, 10, 0)) == date(2026, 3, 1)
        assert parse_date('01/03/2026') is None
        assert parse_date('') is None

    def test_parse_datetime(self):
        assert parse_datetime('2026-03-01T14:30') == datetime(2026, 3, 1, 14, 30)
        assert parse_datetime('2026-03-01 14:30:00') == datetime(2026, 3, 1, 14, 30)
        assert parse_datetime('tomorrow') is None

    def test_parse_list(self):
        assert parse_list('Filipino, Seafood\nFilipino,, ') == ['Filipino', 'Seafood']
        assert parse_list(['a', ' a', 'b']) == ['a', 'b']
        assert parse_list(None) == []

    def test_parse_bool(self):
        assert parse_bool('on') == 1
        assert parse_bool('true') == 1
        assert parse_bool('0') == 0
        assert parse_bool(None) == 0
        assert parse_bool(True) == 1

    def test_load_json(self):
        assert load_json('["a"]') == ['a']
        assert load_json(None) == []
        assert load_json('not json', default={}) == {}
