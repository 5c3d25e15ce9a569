"""
Room type data access functions.
"""

from database import get_db
from database.queries import insert_row, update_row, toggle_flag, delete_row, count_where

ROOM_TYPE_TYPES = ['STANDARD', 'DELUXE', 'SUITE', 'VILLA', 'PENTHOUSE', 'FAMILY', 'ACCESSIBLE']

AMENITY_FLAGS = [
    'has_balcony', 'has_ocean_view', 'has_pool_view', 'has_kitchenette',
    'has_living_area', 'smoking_allowed', 'pet_friendly', 'is_accessible'
]

ROOM_TYPE_FIELDS = [
    'business_unit_id', 'name', 'display_name', 'description', 'type',
    'max_occupancy', 'max_adults', 'max_children', 'max_infants',
    'bed_configuration', 'room_size', 'base_rate', 'extra_person_rate',
    'extra_child_rate', 'floor_plan', 'is_active', 'sort_order'
] + AMENITY_FLAGS

_SELECT = '''
    SELECT rt.*, bu.display_name as business_unit_name,
           (SELECT COUNT(*) FROM rooms WHERE room_type_id = rt.id) as room_count
    FROM room_types rt
    JOIN business_units bu ON rt.business_unit_id = bu.id
'''


def get_all_room_types(business_unit_id: int = None, active_only: bool = False) -> list:
    """
    Get room types.

    Args:
        business_unit_id: Optional property filter
        active_only: Only active types

    Returns:
        List of room type dicts with room_count
    """
    db = get_db()
    cursor = db.cursor()

    query = _SELECT + ' WHERE 1=1'
    params = []
    if business_unit_id:
        query += ' AND rt.business_unit_id = ?'
        params.append(business_unit_id)
    if active_only:
        query += ' AND rt.is_active = 1'
    query += ' ORDER BY bu.sort_order, rt.sort_order, rt.base_rate'

    cursor.execute(query, params)
    return [dict(row) for row in cursor.fetchall()]


def get_room_type_options() -> list:
    """id/label pairs (property - room type) for select fields."""
    return [(rt['id'], f"{rt['business_unit_name']} - {rt['display_name']}")
            for rt in get_all_room_types()]


def get_room_type_by_id(room_type_id: int) -> dict:
    """
    Get room type by ID.

    Args:
        room_type_id: Room type ID

    Returns:
        Room type dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(_SELECT + ' WHERE rt.id = ?', (room_type_id,))
    row = cursor.fetchone()
    return dict(row) if row else None


def name_exists(business_unit_id: int, name: str, exclude_id: int = None) -> bool:
    """Room type names are unique per property."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT COUNT(*) as count FROM room_types
        WHERE business_unit_id = ? AND name = ? AND id != ?
    ''', (business_unit_id, name, exclude_id or 0))
    return cursor.fetchone()['count'] > 0


def create_room_type(**data) -> int:
    """Create a room type. Returns new ID."""
    return insert_row('room_types', data, ROOM_TYPE_FIELDS)


def update_room_type(room_type_id: int, **kwargs) -> bool:
    """Update room type fields. Returns True if updated."""
    return update_row('room_types', room_type_id, kwargs, ROOM_TYPE_FIELDS)


def delete_room_type(room_type_id: int) -> bool:
    """
    Delete room type permanently.

    Raises:
        ValueError if rooms or reservations still use it
    """
    from utils.messages import MESSAGES

    if count_where('rooms', 'room_type_id', room_type_id) > 0:
        raise ValueError(MESSAGES['room_type_has_rooms'])
    if count_where('reservation_rooms', 'room_type_id', room_type_id) > 0:
        raise ValueError(MESSAGES['room_type_has_reservations'])
    return delete_row('room_types', room_type_id)


def toggle_room_type_active(room_type_id: int):
    return toggle_flag('room_types', room_type_id, 'is_active')
