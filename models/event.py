"""
Event data access functions.
"""

from database import get_db
from database.queries import insert_row, update_row, toggle_flag, delete_row

EVENT_TYPES = ['WEDDING', 'CONFERENCE', 'MEETING', 'WORKSHOP', 'CELEBRATION',
               'CULTURAL', 'SEASONAL', 'ENTERTAINMENT', 'CORPORATE', 'PRIVATE']

EVENT_STATUSES = ['PLANNING', 'CONFIRMED', 'IN_PROGRESS', 'COMPLETED', 'CANCELLED', 'POSTPONED']

EVENT_FIELDS = [
    'business_unit_id', 'title', 'slug', 'description', 'short_desc', 'type', 'status',
    'start_date', 'end_date', 'start_time', 'end_time', 'venue', 'venue_details',
    'venue_capacity', 'is_free', 'ticket_price', 'currency', 'requires_booking',
    'max_attendees', 'is_published', 'is_featured', 'is_pinned', 'sort_order'
]

_SELECT = '''
    SELECT e.*, bu.display_name as business_unit_name, bu.slug as business_unit_slug
    FROM events e
    JOIN business_units bu ON e.business_unit_id = bu.id
'''


def get_all_events(business_unit_id: int = None, status: str = None) -> list:
    """
    Get events for the admin list, latest start first.

    Args:
        business_unit_id: Optional property filter
        status: Optional status filter

    Returns:
        List of event dicts
    """
    db = get_db()
    cursor = db.cursor()

    query = _SELECT + ' WHERE 1=1'
    params = []
    if business_unit_id:
        query += ' AND e.business_unit_id = ?'
        params.append(business_unit_id)
    if status:
        query += ' AND e.status = ?'
        params.append(status)
    query += ' ORDER BY e.is_pinned DESC, e.start_date DESC, e.title'

    cursor.execute(query, params)
    return [dict(row) for row in cursor.fetchall()]


def get_upcoming_events(today, business_unit_id: int = None, limit: int = None) -> list:
    """
    Published events that have not ended yet, soonest first.

    Args:
        today: Reference date
        business_unit_id: Optional property filter
        limit: Max rows

    Returns:
        List of event dicts
    """
    db = get_db()
    cursor = db.cursor()

    query = _SELECT + '''
        WHERE e.is_published = 1
          AND e.status NOT IN ('CANCELLED', 'COMPLETED')
          AND e.end_date >= ?
    '''
    params = [today.isoformat()]
    if business_unit_id:
        query += ' AND e.business_unit_id = ?'
        params.append(business_unit_id)
    query += ' ORDER BY e.is_pinned DESC, e.start_date, e.sort_order'
    if limit:
        query += ' LIMIT ?'
        params.append(limit)

    cursor.execute(query, params)
    return [dict(row) for row in cursor.fetchall()]


def get_event_by_id(event_id: int) -> dict:
    """
    Get event by ID.

    Args:
        event_id: Event ID

    Returns:
        Event dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(_SELECT + ' WHERE e.id = ?', (event_id,))
    row = cursor.fetchone()
    return dict(row) if row else None


def slug_exists(slug: str, exclude_id: int = None) -> bool:
    """Check if another event already uses the slug."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT COUNT(*) as count FROM events WHERE slug = ? AND id != ?',
                   (slug, exclude_id or 0))
    return cursor.fetchone()['count'] > 0


def create_event(**data) -> int:
    """Create an event. Returns new ID."""
    return insert_row('events', data, EVENT_FIELDS)


def update_event(event_id: int, **kwargs) -> bool:
    """Update event fields. Returns True if updated."""
    return update_row('events', event_id, kwargs, EVENT_FIELDS)


def delete_event(event_id: int) -> bool:
    """Delete event permanently."""
    return delete_row('events', event_id)


def toggle_event_featured(event_id: int):
    """Flip is_featured. Returns new value or None if not found."""
    return toggle_flag('events', event_id, 'is_featured')
