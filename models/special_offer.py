"""
Special offer data access functions.
"""

from database import get_db
from database.queries import insert_row, update_row, toggle_flag, delete_row

OFFER_TYPES = ['ROOM_DISCOUNT', 'PACKAGE_DEAL', 'EARLY_BIRD', 'LAST_MINUTE', 'SEASONAL', 'LOYALTY']

OFFER_STATUSES = ['ACTIVE', 'INACTIVE', 'EXPIRED', 'SCHEDULED']

SPECIAL_OFFER_FIELDS = [
    'business_unit_id', 'title', 'slug', 'subtitle', 'description', 'short_desc',
    'type', 'status', 'offer_price', 'original_price', 'savings_amount',
    'savings_percent', 'currency', 'valid_from', 'valid_to', 'is_published',
    'is_featured', 'is_pinned', 'sort_order'
]

_SELECT = '''
    SELECT so.*, bu.display_name as business_unit_name, bu.slug as business_unit_slug
    FROM special_offers so
    LEFT JOIN business_units bu ON so.business_unit_id = bu.id
'''


def get_all_special_offers(status: str = None) -> list:
    """
    Get offers for the admin list.

    Args:
        status: Optional status filter

    Returns:
        List of offer dicts (business_unit_name is None for group-wide offers)
    """
    db = get_db()
    cursor = db.cursor()

    query = _SELECT
    params = []
    if status:
        query += ' WHERE so.status = ?'
        params.append(status)
    query += ' ORDER BY so.is_pinned DESC, so.sort_order, so.valid_from DESC'

    cursor.execute(query, params)
    return [dict(row) for row in cursor.fetchall()]


def get_current_offers(today, business_unit_id: int = None, limit: int = None) -> list:
    """
    Offers shown on the public site: published, ACTIVE and valid today.

    Args:
        today: Reference date
        business_unit_id: When given, the property's offers plus group-wide ones
        limit: Max rows

    Returns:
        List of offer dicts
    """
    db = get_db()
    cursor = db.cursor()

    query = _SELECT + '''
        WHERE so.is_published = 1
          AND so.status = 'ACTIVE'
          AND so.valid_from <= ?
          AND so.valid_to >= ?
    '''
    params = [today.isoformat(), today.isoformat()]
    if business_unit_id:
        query += ' AND (so.business_unit_id = ? OR so.business_unit_id IS NULL)'
        params.append(business_unit_id)
    query += ' ORDER BY so.is_pinned DESC, so.is_featured DESC, so.sort_order, so.valid_to'
    if limit:
        query += ' LIMIT ?'
        params.append(limit)

    cursor.execute(query, params)
    return [dict(row) for row in cursor.fetchall()]


def get_special_offer_by_id(offer_id: int) -> dict:
    """
    Get offer by ID.

    Args:
        offer_id: Offer ID

    Returns:
        Offer dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(_SELECT + ' WHERE so.id = ?', (offer_id,))
    row = cursor.fetchone()
    return dict(row) if row else None


def slug_exists(slug: str, exclude_id: int = None) -> bool:
    """Check if another offer already uses the slug."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT COUNT(*) as count FROM special_offers WHERE slug = ? AND id != ?',
                   (slug, exclude_id or 0))
    return cursor.fetchone()['count'] > 0


def create_special_offer(**data) -> int:
    """Create an offer. Returns new ID."""
    return insert_row('special_offers', data, SPECIAL_OFFER_FIELDS)


def update_special_offer(offer_id: int, **kwargs) -> bool:
    """Update offer fields. Returns True if updated."""
    return update_row('special_offers', offer_id, kwargs, SPECIAL_OFFER_FIELDS)


def delete_special_offer(offer_id: int) -> bool:
    """Delete offer permanently."""
    return delete_row('special_offers', offer_id)


def toggle_special_offer_status(offer_id: int):
    """
    Switch an offer between ACTIVE and INACTIVE.

    EXPIRED and SCHEDULED offers are switched to ACTIVE.

    Returns:
        New status, or None if not found
    """
    offer = get_special_offer_by_id(offer_id)
    if not offer:
        return None

    new_status = 'INACTIVE' if offer['status'] == 'ACTIVE' else 'ACTIVE'
    update_row('special_offers', offer_id, {'status': new_status}, ['status'])
    return new_status


def toggle_special_offer_featured(offer_id: int):
    """Flip is_featured. Returns new value or None if not found."""
    return toggle_flag('special_offers', offer_id, 'is_featured')
