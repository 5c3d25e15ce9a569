"""
Guest data access functions.
Handles guest profiles, search and VIP flagging.
"""

from database import get_db
from database.queries import insert_row, update_row, toggle_flag, delete_row, count_where
from utils.form_helpers import dump_json, load_json

GUEST_TITLES = ['Mr.', 'Mrs.', 'Ms.', 'Dr.', 'Prof.']
ID_TYPES = ['PASSPORT', 'DRIVERS_LICENSE', 'NATIONAL_ID', 'UMID', 'SSS', 'OTHER']

GUEST_FIELDS = [
    'business_unit_id', 'title', 'first_name', 'last_name', 'email', 'phone',
    'date_of_birth', 'nationality', 'country', 'address', 'city', 'state',
    'postal_code', 'passport_number', 'passport_expiry', 'id_number', 'id_type',
    'preferences', 'loyalty_number', 'vip_status', 'marketing_opt_in', 'source', 'notes'
]


def _decode(row) -> dict:
    guest = dict(row)
    guest['preferences'] = load_json(guest.get('preferences'))
    guest['full_name'] = f"{guest['first_name']} {guest['last_name']}"
    return guest


def _encode(data: dict) -> dict:
    encoded = dict(data)
    if 'preferences' in encoded:
        encoded['preferences'] = dump_json(encoded['preferences'])
    if encoded.get('email'):
        encoded['email'] = encoded['email'].strip().lower()
    return encoded


def get_all_guests(search: str = None, vip_only: bool = False) -> list:
    """
    Get guests for the admin list.

    Args:
        search: Matches name, email or phone (case-insensitive)
        vip_only: Only VIP guests

    Returns:
        List of guest dicts with reservation_count
    """
    db = get_db()
    cursor = db.cursor()

    query = '''
        SELECT g.*,
               (SELECT COUNT(*) FROM reservations WHERE guest_id = g.id) as reservation_count
        FROM guests g
        WHERE 1=1
    '''
    params = []

    if search:
        pattern = f'%{search.strip().lower()}%'
        query += '''
            AND (LOWER(g.first_name || ' ' || g.last_name) LIKE ?
                 OR LOWER(g.email) LIKE ?
                 OR g.phone LIKE ?)
        '''
        params.extend([pattern, pattern, pattern])

    if vip_only:
        query += ' AND g.vip_status = 1'

    query += ' ORDER BY g.last_name, g.first_name'

    cursor.execute(query, params)
    return [_decode(row) for row in cursor.fetchall()]


def get_guest_by_id(guest_id: int) -> dict:
    """
    Get guest by ID.

    Args:
        guest_id: Guest ID

    Returns:
        Guest dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM guests WHERE id = ?', (guest_id,))
    row = cursor.fetchone()
    return _decode(row) if row else None


def get_guest_with_reservations(guest_id: int, limit: int = 10) -> dict:
    """Guest plus its most recent reservations."""
    guest = get_guest_by_id(guest_id)
    if not guest:
        return None

    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT r.id, r.confirmation_number, r.status, r.check_in_date, r.check_out_date,
               r.total_amount, r.currency, r.payment_status,
               bu.display_name as business_unit_name
        FROM reservations r
        JOIN business_units bu ON r.business_unit_id = bu.id
        WHERE r.guest_id = ?
        ORDER BY r.check_in_date DESC
        LIMIT ?
    ''', (guest_id, limit))
    guest['reservations'] = [dict(row) for row in cursor.fetchall()]
    return guest


def email_exists(email: str, exclude_id: int = None) -> bool:
    """Emails are unique across guests (case-insensitive)."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT COUNT(*) as count FROM guests WHERE LOWER(email) = ? AND id != ?',
                   ((email or '').strip().lower(), exclude_id or 0))
    return cursor.fetchone()['count'] > 0


def create_guest(**data) -> int:
    """Create a guest. Returns new ID."""
    return insert_row('guests', _encode(data), GUEST_FIELDS)


def update_guest(guest_id: int, **kwargs) -> bool:
    """Update guest fields. Returns True if updated."""
    return update_row('guests', guest_id, _encode(kwargs), GUEST_FIELDS)


def delete_guest(guest_id: int) -> bool:
    """
    Delete guest permanently.

    Raises:
        ValueError if the guest has reservations
    """
    from utils.messages import MESSAGES

    if count_where('reservations', 'guest_id', guest_id) > 0:
        raise ValueError(MESSAGES['guest_has_reservations'])
    return delete_row('guests', guest_id)


def toggle_guest_vip(guest_id: int):
    """Flip vip_status. Returns new value or None if not found."""
    return toggle_flag('guests', guest_id, 'vip_status')
