"""
Room data access functions.
"""

from database import get_db
from database.queries import insert_row, update_row, toggle_flag, delete_row, count_where

ROOM_STATUSES = ['AVAILABLE', 'OCCUPIED', 'MAINTENANCE', 'OUT_OF_ORDER', 'CLEANING', 'RESERVED']

ROOM_FIELDS = ['business_unit_id', 'room_type_id', 'room_number', 'floor',
               'status', 'is_active', 'notes']

_SELECT = '''
    SELECT r.*, rt.display_name as room_type_name, rt.base_rate,
           bu.display_name as business_unit_name
    FROM rooms r
    JOIN room_types rt ON r.room_type_id = rt.id
    JOIN business_units bu ON r.business_unit_id = bu.id
'''


def get_all_rooms(business_unit_id: int = None, status: str = None) -> list:
    """
    Get rooms for the admin list.

    Args:
        business_unit_id: Optional property filter
        status: Optional status filter

    Returns:
        List of room dicts with type and property names
    """
    db = get_db()
    cursor = db.cursor()

    query = _SELECT + ' WHERE 1=1'
    params = []
    if business_unit_id:
        query += ' AND r.business_unit_id = ?'
        params.append(business_unit_id)
    if status:
        query += ' AND r.status = ?'
        params.append(status)
    query += ' ORDER BY bu.sort_order, r.floor, r.room_number'

    cursor.execute(query, params)
    return [dict(row) for row in cursor.fetchall()]


def get_room_by_id(room_id: int) -> dict:
    """
    Get room by ID.

    Args:
        room_id: Room ID

    Returns:
        Room dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(_SELECT + ' WHERE r.id = ?', (room_id,))
    row = cursor.fetchone()
    return dict(row) if row else None


def room_number_exists(business_unit_id: int, room_number: str, exclude_id: int = None) -> bool:
    """Room numbers are unique per property."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT COUNT(*) as count FROM rooms
        WHERE business_unit_id = ? AND room_number = ? AND id != ?
    ''', (business_unit_id, room_number, exclude_id or 0))
    return cursor.fetchone()['count'] > 0


def create_room(**data) -> int:
    """Create a room. Returns new ID."""
    return insert_row('rooms', data, ROOM_FIELDS)


def update_room(room_id: int, **kwargs) -> bool:
    """Update room fields. Returns True if updated."""
    return update_row('rooms', room_id, kwargs, ROOM_FIELDS)


def update_room_status(room_id: int, status: str) -> bool:
    """
    Set housekeeping/occupancy status.

    Raises:
        ValueError if status is not a known room status
    """
    from utils.messages import get_message

    if status not in ROOM_STATUSES:
        raise ValueError(get_message('invalid_status', status=status))
    return update_row('rooms', room_id, {'status': status}, ['status'])


def delete_room(room_id: int) -> bool:
    """
    Delete room permanently.

    Raises:
        ValueError if the room is assigned to a reservation
    """
    from utils.messages import MESSAGES

    if count_where('reservation_rooms', 'room_id', room_id) > 0:
        raise ValueError(MESSAGES['room_has_reservations'])
    return delete_row('rooms', room_id)


def toggle_room_active(room_id: int):
    return toggle_flag('rooms', room_id, 'is_active')
