"""
Restaurant data access functions.
Handles restaurant CRUD, public listings and view counting.
"""

import logging

from database import get_db
from database.queries import insert_row, update_row, toggle_flag, delete_row
from utils.form_helpers import dump_json, load_json

logger = logging.getLogger(__name__)

RESTAURANT_TYPES = ['FINE_DINING', 'CASUAL_DINING', 'CAFE', 'BAR', 'BUFFET', 'ROOM_SERVICE']

RESTAURANT_FIELDS = [
    'business_unit_id', 'name', 'slug', 'description', 'short_desc', 'type',
    'cuisine', 'location', 'phone', 'email', 'operating_hours', 'features',
    'price_range', 'average_meal', 'currency', 'is_active', 'is_published',
    'is_featured', 'sort_order'
]

JSON_LIST_FIELDS = ('cuisine', 'features')

_SELECT = '''
    SELECT r.*, bu.display_name as business_unit_name, bu.slug as business_unit_slug
    FROM restaurants r
    JOIN business_units bu ON r.business_unit_id = bu.id
'''

_PUBLISHED = 'r.is_published = 1 AND r.is_active = 1'


def _decode(row) -> dict:
    """Row to dict with JSON columns decoded."""
    restaurant = dict(row)
    for field in JSON_LIST_FIELDS:
        restaurant[field] = load_json(restaurant.get(field))
    restaurant['operating_hours'] = load_json(restaurant.get('operating_hours'), default={})
    return restaurant


def _encode(data: dict) -> dict:
    """Serialize list/dict fields before writing."""
    encoded = dict(data)
    for field in JSON_LIST_FIELDS:
        if field in encoded:
            encoded[field] = dump_json(encoded[field])
    if 'operating_hours' in encoded:
        hours = encoded['operating_hours']
        encoded['operating_hours'] = dump_json(hours) if hours else None
    return encoded


def get_all_restaurants(business_unit_id: int = None) -> list:
    """
    Get restaurants for the admin list.

    Args:
        business_unit_id: Optional property filter

    Returns:
        List of restaurant dicts with property name
    """
    db = get_db()
    cursor = db.cursor()

    query = _SELECT
    params = []
    if business_unit_id:
        query += ' WHERE r.business_unit_id = ?'
        params.append(business_unit_id)
    query += ' ORDER BY bu.sort_order, r.sort_order, r.name'

    cursor.execute(query, params)
    return [_decode(row) for row in cursor.fetchall()]


def get_published_restaurants(business_unit_id: int = None) -> list:
    """Published, active restaurants of published properties, featured first."""
    db = get_db()
    cursor = db.cursor()

    query = _SELECT + f' WHERE {_PUBLISHED} AND bu.is_published = 1 AND bu.is_active = 1'
    params = []
    if business_unit_id:
        query += ' AND r.business_unit_id = ?'
        params.append(business_unit_id)
    query += ' ORDER BY r.is_featured DESC, r.sort_order, r.name'

    cursor.execute(query, params)
    return [_decode(row) for row in cursor.fetchall()]


def get_featured_restaurants(limit: int = None) -> list:
    """Published restaurants flagged as featured."""
    restaurants = [r for r in get_published_restaurants() if r['is_featured']]
    return restaurants[:limit] if limit else restaurants


def get_restaurants_by_cuisine(cuisine: str) -> list:
    """
    Published restaurants serving a cuisine (case-insensitive).

    Args:
        cuisine: Cuisine name, e.g. 'Filipino'

    Returns:
        List of restaurant dicts
    """
    wanted = (cuisine or '').strip().lower()
    return [
        r for r in get_published_restaurants()
        if wanted in [c.lower() for c in r['cuisine']]
    ]


def get_cuisines() -> list:
    """Distinct cuisines across published restaurants, sorted."""
    cuisines = set()
    for restaurant in get_published_restaurants():
        cuisines.update(restaurant['cuisine'])
    return sorted(cuisines)


def get_restaurant_by_id(restaurant_id: int) -> dict:
    """
    Get restaurant by ID.

    Args:
        restaurant_id: Restaurant ID

    Returns:
        Restaurant dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(_SELECT + ' WHERE r.id = ?', (restaurant_id,))
    row = cursor.fetchone()
    return _decode(row) if row else None


def get_restaurant_by_slug(slug: str) -> dict:
    """Published restaurant by slug (first match across properties)."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute(_SELECT + f' WHERE r.slug = ? AND {_PUBLISHED} ORDER BY r.id LIMIT 1', (slug,))
    row = cursor.fetchone()
    return _decode(row) if row else None


def slug_exists(business_unit_id: int, slug: str, exclude_id: int = None) -> bool:
    """Slugs are unique per property."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT COUNT(*) as count FROM restaurants
        WHERE business_unit_id = ? AND slug = ? AND id != ?
    ''', (business_unit_id, slug, exclude_id or 0))
    return cursor.fetchone()['count'] > 0


def create_restaurant(**data) -> int:
    """Create a restaurant. Returns new ID."""
    return insert_row('restaurants', _encode(data), RESTAURANT_FIELDS)


def update_restaurant(restaurant_id: int, **kwargs) -> bool:
    """Update restaurant fields. Returns True if updated."""
    return update_row('restaurants', restaurant_id, _encode(kwargs), RESTAURANT_FIELDS)


def delete_restaurant(restaurant_id: int) -> bool:
    """Delete restaurant permanently."""
    return delete_row('restaurants', restaurant_id)


def toggle_restaurant_active(restaurant_id: int):
    """Flip is_active. Returns new value or None if not found."""
    return toggle_flag('restaurants', restaurant_id, 'is_active')


def toggle_restaurant_featured(restaurant_id: int):
    """Flip is_featured. Returns new value or None if not found."""
    return toggle_flag('restaurants', restaurant_id, 'is_featured')


def increment_restaurant_views(restaurant_id: int) -> None:
    """
    Count a public page view.

    A failed counter update must not break the page, so errors are
    logged and swallowed.
    """
    try:
        db = get_db()
        db.execute('UPDATE restaurants SET view_count = view_count + 1 WHERE id = ?',
                   (restaurant_id,))
        db.commit()
    except Exception as e:
        logger.warning(f"Failed to increment views for restaurant {restaurant_id}: {e}")
