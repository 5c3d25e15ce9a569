"""
Business unit (property) data access functions.
Handles property CRUD, public listings and location formatting.
"""

from database import get_db
from database.queries import insert_row, update_row, toggle_flag, delete_row, fetch_one

PROPERTY_TYPES = ['HOTEL', 'RESORT', 'VILLA_COMPLEX', 'APARTMENT_HOTEL', 'BOUTIQUE_HOTEL']

BUSINESS_UNIT_FIELDS = [
    'name', 'display_name', 'description', 'short_description', 'property_type',
    'city', 'state', 'country', 'address', 'latitude', 'longitude',
    'phone', 'email', 'website', 'slug', 'is_active', 'is_published',
    'is_featured', 'sort_order', 'primary_color', 'secondary_color', 'logo'
]

PUBLIC_ORDER = 'ORDER BY is_featured DESC, sort_order, name'


def get_all_business_units() -> list:
    """
    Get every property for the admin list.

    Returns:
        List of property dicts with restaurant, room and reservation counts
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT bu.*,
               (SELECT COUNT(*) FROM restaurants WHERE business_unit_id = bu.id) as restaurant_count,
               (SELECT COUNT(*) FROM rooms WHERE business_unit_id = bu.id) as room_count,
               (SELECT COUNT(*) FROM reservations WHERE business_unit_id = bu.id) as reservation_count
        FROM business_units bu
        ORDER BY bu.sort_order, bu.name
    ''')
    return [dict(row) for row in cursor.fetchall()]


def get_business_units() -> list:
    """
    Get published, active properties for the public site.

    Returns:
        List of property dicts, featured first
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'''
        SELECT * FROM business_units
        WHERE is_published = 1 AND is_active = 1
        {PUBLIC_ORDER}
    ''')
    return [dict(row) for row in cursor.fetchall()]


def get_featured_business_units(limit: int = None) -> list:
    """Published, active and featured properties."""
    db = get_db()
    cursor = db.cursor()

    query = '''
        SELECT * FROM business_units
        WHERE is_published = 1 AND is_active = 1 AND is_featured = 1
        ORDER BY sort_order, name
    '''
    params = []
    if limit:
        query += ' LIMIT ?'
        params.append(limit)

    cursor.execute(query, params)
    return [dict(row) for row in cursor.fetchall()]


def get_business_unit_options() -> list:
    """id/display name pairs for admin select fields."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT id, display_name FROM business_units ORDER BY sort_order, name')
    return [(row['id'], row['display_name']) for row in cursor.fetchall()]


def get_business_unit_by_id(unit_id: int) -> dict:
    """
    Get property by ID.

    Args:
        unit_id: Property ID

    Returns:
        Property dict or None if not found
    """
    return fetch_one('business_units', unit_id)


def get_business_unit_by_slug(slug: str, published_only: bool = True) -> dict:
    """
    Get property by slug.

    Args:
        slug: URL slug
        published_only: Hide unpublished or inactive properties

    Returns:
        Property dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()

    query = 'SELECT * FROM business_units WHERE slug = ?'
    if published_only:
        query += ' AND is_published = 1 AND is_active = 1'

    cursor.execute(query, (slug,))
    row = cursor.fetchone()
    return dict(row) if row else None


def slug_exists(slug: str, exclude_id: int = None) -> bool:
    """Check if another property already uses the slug."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute(
        'SELECT COUNT(*) as count FROM business_units WHERE slug = ? AND id != ?',
        (slug, exclude_id or 0)
    )
    return cursor.fetchone()['count'] > 0


def create_business_unit(**data) -> int:
    """
    Create a property.

    Args:
        **data: Column values (name, display_name, city and slug required)

    Returns:
        New property ID
    """
    return insert_row('business_units', data, BUSINESS_UNIT_FIELDS)


def update_business_unit(unit_id: int, **kwargs) -> bool:
    """
    Update property fields.

    Args:
        unit_id: Property ID
        **kwargs: Fields to update

    Returns:
        True if updated successfully
    """
    return update_row('business_units', unit_id, kwargs, BUSINESS_UNIT_FIELDS)


def get_dependant_counts(unit_id: int) -> dict:
    """Rows in other tables that point at the property."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT
            (SELECT COUNT(*) FROM reservations WHERE business_unit_id = ?) as reservations,
            (SELECT COUNT(*) FROM rooms WHERE business_unit_id = ?) as rooms,
            (SELECT COUNT(*) FROM restaurants WHERE business_unit_id = ?) as restaurants
    ''', (unit_id, unit_id, unit_id))
    return dict(cursor.fetchone())


def delete_business_unit(unit_id: int) -> bool:
    """
    Delete property permanently.
    Only allowed if no reservations, rooms or restaurants reference it.

    Args:
        unit_id: Property ID

    Returns:
        True if deleted successfully

    Raises:
        ValueError if the property still has dependants
    """
    from utils.messages import MESSAGES

    counts = get_dependant_counts(unit_id)
    if any(counts.values()):
        raise ValueError(MESSAGES['property_has_dependants'])

    db = get_db()
    cursor = db.cursor()
    # Content that only decorates the property goes with it
    cursor.execute('DELETE FROM room_types WHERE business_unit_id = ?', (unit_id,))
    cursor.execute('UPDATE special_offers SET business_unit_id = NULL WHERE business_unit_id = ?',
                   (unit_id,))
    cursor.execute('UPDATE guests SET business_unit_id = NULL WHERE business_unit_id = ?',
                   (unit_id,))
    cursor.execute('DELETE FROM events WHERE business_unit_id = ?', (unit_id,))
    db.commit()

    return delete_row('business_units', unit_id)


def toggle_business_unit_active(unit_id: int):
    """Flip is_active. Returns new value or None if not found."""
    return toggle_flag('business_units', unit_id, 'is_active')


def toggle_business_unit_featured(unit_id: int):
    """Flip is_featured. Returns new value or None if not found."""
    return toggle_flag('business_units', unit_id, 'is_featured')


def format_location(unit: dict, default_country: str = 'Philippines') -> str:
    """
    Location line for cards: city, state, country.

    Blank parts are skipped and the home country is left out.

    Args:
        unit: Property dict
        default_country: Country hidden from the string

    Returns:
        e.g. 'Makati, Metro Manila'
    """
    parts = [unit.get('city'), unit.get('state')]
    country = unit.get('country')
    if country and country != default_country:
        parts.append(country)
    return ', '.join(part for part in parts if part)


def format_header_location(unit: dict) -> str:
    """Location line for the property switcher: address, city, state."""
    parts = [unit.get('address'), unit.get('city'), unit.get('state')]
    return ', '.join(part for part in parts if part)
