"""
Reservation data access functions.
Handles reservation creation, nested detail queries, dashboard counts and
the confirm/cancel status transitions.
"""

from datetime import date

from database import get_db
from utils.datetime_helpers import to_db_timestamp
from utils.form_helpers import parse_date
from utils.helpers import generate_unique_code


# =============================================================================
# CONSTANTS
# =============================================================================

RESERVATION_STATUSES = ['PENDING', 'PROVISIONAL', 'INQUIRY', 'CONFIRMED', 'CHECKED_IN',
                        'CHECKED_OUT', 'CANCELLED', 'NO_SHOW', 'WALKED_IN']

# Only a provisional hold can be confirmed
CONFIRMABLE_STATUSES = ('PROVISIONAL',)

# Statuses a reservation can no longer be cancelled from
FINAL_STATUSES = ('CANCELLED', 'CHECKED_OUT')

RESERVATION_SOURCES = ['DIRECT', 'WEBSITE', 'PHONE', 'EMAIL', 'WALK_IN', 'OTA', 'CORPORATE']

RESERVATION_PAYMENT_STATUSES = ['PENDING', 'PARTIAL', 'PAID', 'REFUNDED']

# Statuses that do not occupy a room on the arrival/departure boards
INACTIVE_STATUSES = ('CANCELLED', 'NO_SHOW')


def can_confirm(status: str) -> bool:
    return status in CONFIRMABLE_STATUSES


def can_cancel(status: str) -> bool:
    return status not in FINAL_STATUSES


# =============================================================================
# CREATE
# =============================================================================

def calculate_nights(check_in_date, check_out_date) -> int:
    """
    Nights between check-in and check-out.

    Args:
        check_in_date: date or YYYY-MM-DD
        check_out_date: date or YYYY-MM-DD

    Returns:
        Number of nights (may be zero or negative for bad input)
    """
    return (parse_date(check_out_date) - parse_date(check_in_date)).days


def generate_confirmation_number(cursor=None, max_retries: int = 5) -> str:
    """
    Generate a unique confirmation number.

    Format: RES-XXXXXXXX (uppercase letters and digits)

    Args:
        cursor: Active transaction cursor
        max_retries: Max attempts on collision

    Returns:
        str: Unused confirmation number

    Raises:
        ValueError: If unable to generate a unique number
    """
    cur = cursor or get_db().cursor()

    for attempt in range(max_retries):
        number = generate_unique_code('RES', 8)
        cur.execute('SELECT id FROM reservations WHERE confirmation_number = ?', (number,))
        if not cur.fetchone():
            return number

    raise ValueError('Could not generate a unique confirmation number')


def create_reservation(
    business_unit_id: int,
    guest_id: int,
    check_in_date,
    check_out_date,
    rooms: list,
    adults: int = 1,
    children: int = 0,
    status: str = 'PENDING',
    source: str = 'DIRECT',
    currency: str = 'PHP',
    special_requests: str = None,
    internal_notes: str = None
) -> tuple:
    """
    Create a reservation with its room lines.

    Each room line is a dict with room_type_id, optional room_id and
    optional base_rate (defaults to the room type's base rate). Line
    total is base_rate * nights; the reservation total is the sum.

    Args:
        business_unit_id: Property ID
        guest_id: Guest ID
        check_in_date: Arrival date
        check_out_date: Departure date
        rooms: Room line dicts
        adults: Adults count
        children: Children count
        status: Initial status
        source: Booking channel
        currency: Currency code
        special_requests: Guest-facing notes
        internal_notes: Staff-only notes

    Returns:
        tuple: (reservation_id, confirmation_number)

    Raises:
        ValueError: If validations fail
    """
    from utils.messages import MESSAGES, get_message

    check_in = parse_date(check_in_date)
    check_out = parse_date(check_out_date)
    if check_in is None or check_out is None:
        raise ValueError(get_message('field_required', field='Check-in and check-out dates'))

    nights = calculate_nights(check_in, check_out)
    if nights < 1:
        raise ValueError(MESSAGES['reservation_min_nights'])

    if not rooms:
        raise ValueError(MESSAGES['reservation_needs_room'])

    if status not in RESERVATION_STATUSES:
        raise ValueError(get_message('invalid_status', status=status))

    db = get_db()
    cursor = db.cursor()

    try:
        cursor.execute('BEGIN IMMEDIATE')

        lines = []
        for line in rooms:
            base_rate = line.get('base_rate')
            if base_rate is None:
                cursor.execute('SELECT base_rate FROM room_types WHERE id = ?',
                               (line['room_type_id'],))
                room_type = cursor.fetchone()
                if not room_type:
                    raise ValueError(get_message('not_found', entity='Room type'))
                base_rate = room_type['base_rate']
            lines.append((line['room_type_id'], line.get('room_id'),
                          float(base_rate), round(float(base_rate) * nights, 2)))

        total_amount = round(sum(line[3] for line in lines), 2)
        confirmation_number = generate_confirmation_number(cursor)
        confirmed_at = to_db_timestamp() if status == 'CONFIRMED' else None

        cursor.execute('''
            INSERT INTO reservations (
                business_unit_id, guest_id, confirmation_number, status,
                check_in_date, check_out_date, nights, adults, children,
                total_amount, currency, special_requests, internal_notes,
                source, payment_status, confirmed_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, 'PENDING', ?)
        ''', (
            business_unit_id, guest_id, confirmation_number, status,
            check_in.isoformat(), check_out.isoformat(), nights, adults, children,
            total_amount, currency, special_requests, internal_notes,
            source, confirmed_at
        ))

        reservation_id = cursor.lastrowid

        for room_type_id, room_id, base_rate, line_total in lines:
            cursor.execute('''
                INSERT INTO reservation_rooms
                (reservation_id, room_type_id, room_id, base_rate, total_amount)
                VALUES (?, ?, ?, ?, ?)
            ''', (reservation_id, room_type_id, room_id, base_rate, line_total))

        db.commit()
        return reservation_id, confirmation_number

    except Exception:
        db.rollback()
        raise


# =============================================================================
# READ
# =============================================================================

_SELECT = '''
    SELECT r.*,
           g.first_name as guest_first_name, g.last_name as guest_last_name,
           g.email as guest_email, g.phone as guest_phone, g.vip_status as guest_vip_status,
           bu.name as bu_name, bu.display_name as bu_display_name, bu.slug as bu_slug,
           bu.city as bu_city
    FROM reservations r
    JOIN guests g ON r.guest_id = g.id
    JOIN business_units bu ON r.business_unit_id = bu.id
'''


def _nest(row) -> dict:
    """Fold the joined guest/property columns into nested dicts."""
    data = dict(row)
    reservation = {k: v for k, v in data.items()
                   if not k.startswith('guest_') and not k.startswith('bu_')}
    reservation['guest_id'] = data['guest_id']
    reservation['guest'] = {
        'id': data['guest_id'],
        'first_name': data['guest_first_name'],
        'last_name': data['guest_last_name'],
        'full_name': f"{data['guest_first_name']} {data['guest_last_name']}",
        'email': data['guest_email'],
        'phone': data['guest_phone'],
        'vip_status': data['guest_vip_status'],
    }
    reservation['business_unit'] = {
        'id': data['business_unit_id'],
        'name': data['bu_name'],
        'display_name': data['bu_display_name'],
        'slug': data['bu_slug'],
        'city': data['bu_city'],
    }
    reservation['rooms'] = []
    reservation['payments'] = []
    return reservation


def _attach_lines(reservations: list) -> list:
    """Load room lines and payments for a batch of reservations."""
    if not reservations:
        return reservations

    by_id = {r['id']: r for r in reservations}
    ids = list(by_id.keys())
    placeholders = ','.join('?' * len(ids))

    db = get_db()
    cursor = db.cursor()

    cursor.execute(f'''
        SELECT rr.*,
               rt.name as room_type_name, rt.display_name as room_type_display_name,
               rt.type as room_type_type,
               rm.room_number, rm.floor as room_floor, rm.status as room_status
        FROM reservation_rooms rr
        JOIN room_types rt ON rr.room_type_id = rt.id
        LEFT JOIN rooms rm ON rr.room_id = rm.id
        WHERE rr.reservation_id IN ({placeholders})
        ORDER BY rr.id
    ''', ids)

    for row in cursor.fetchall():
        line = dict(row)
        room_type = {
            'id': line['room_type_id'],
            'name': line.pop('room_type_name'),
            'display_name': line.pop('room_type_display_name'),
            'type': line.pop('room_type_type'),
        }
        room_number = line.pop('room_number')
        room_floor = line.pop('room_floor')
        room_status = line.pop('room_status')
        line['room_type'] = room_type
        line['room'] = None
        if line['room_id'] is not None:
            line['room'] = {
                'id': line['room_id'],
                'room_number': room_number,
                'floor': room_floor,
                'status': room_status,
                'room_type': room_type,
            }
        by_id[line['reservation_id']]['rooms'].append(line)

    cursor.execute(f'''
        SELECT * FROM payments
        WHERE reservation_id IN ({placeholders})
        ORDER BY created_at DESC, id DESC
    ''', ids)

    for row in cursor.fetchall():
        payment = dict(row)
        by_id[payment['reservation_id']]['payments'].append(payment)

    return reservations


def get_all_reservations(
    business_unit_id: int = None,
    status: str = None,
    search: str = None,
    limit: int = None
) -> list:
    """
    Get reservations newest first, each with nested guest, property,
    room lines and payments.

    Args:
        business_unit_id: Optional property filter
        status: Optional status filter
        search: Matches confirmation number or guest name/email
        limit: Max rows

    Returns:
        List of nested reservation dicts
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

    if search:
        pattern = f'%{search.strip().lower()}%'
        query += '''
            AND (LOWER(r.confirmation_number) LIKE ?
                 OR LOWER(g.first_name || ' ' || g.last_name) LIKE ?
                 OR LOWER(g.email) LIKE ?)
        '''
        params.extend([pattern, pattern, pattern])

    query += ' ORDER BY r.created_at DESC, r.id DESC'

    if limit:
        query += ' LIMIT ?'
        params.append(limit)

    cursor.execute(query, params)
    return _attach_lines([_nest(row) for row in cursor.fetchall()])


def get_recent_reservations(limit: int = 10) -> list:
    """Latest reservations for the dashboard."""
    return get_all_reservations(limit=limit)


def get_reservation_by_id(reservation_id: int) -> dict:
    """
    Get reservation with nested guest, property, rooms and payments.

    Args:
        reservation_id: Reservation ID

    Returns:
        Reservation dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(_SELECT + ' WHERE r.id = ?', (reservation_id,))
    row = cursor.fetchone()
    if not row:
        return None
    return _attach_lines([_nest(row)])[0]


def get_reservation_counts(today: date) -> dict:
    """
    Sidebar/dashboard counters.

    Args:
        today: Reference date

    Returns:
        Dict with pending, check_ins_today, check_outs_today
    """
    today_str = today.isoformat()
    inactive = ','.join(f"'{status}'" for status in INACTIVE_STATUSES)

    db = get_db()
    cursor = db.cursor()
    cursor.execute(f'''
        SELECT
            (SELECT COUNT(*) FROM reservations WHERE status = 'PENDING') as pending,
            (SELECT COUNT(*) FROM reservations
             WHERE check_in_date = ? AND status NOT IN ({inactive})) as check_ins_today,
            (SELECT COUNT(*) FROM reservations
             WHERE check_out_date = ? AND status NOT IN ({inactive})) as check_outs_today
    ''', (today_str, today_str))
    return dict(cursor.fetchone())


def get_status_counts() -> dict:
    """Reservation totals per status."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT status, COUNT(*) as count FROM reservations GROUP BY status')
    counts = {status: 0 for status in RESERVATION_STATUSES}
    for row in cursor.fetchall():
        counts[row['status']] = row['count']
    return counts


# =============================================================================
# STATUS TRANSITIONS
# =============================================================================

def _get_status(cursor, reservation_id: int) -> str:
    from utils.messages import get_message

    cursor.execute('SELECT status FROM reservations WHERE id = ?', (reservation_id,))
    row = cursor.fetchone()
    if not row:
        raise LookupError(get_message('not_found', entity='Reservation'))
    return row['status']


def confirm_reservation(reservation_id: int) -> str:
    """
    Confirm a reservation.

    Allowed from PROVISIONAL only.

    Args:
        reservation_id: Reservation ID

    Returns:
        Previous status

    Raises:
        LookupError: Reservation not found
        ValueError: Transition not allowed from the current status
    """
    from utils.messages import get_message

    db = get_db()
    cursor = db.cursor()
    current = _get_status(cursor, reservation_id)

    if not can_confirm(current):
        raise ValueError(get_message('reservation_cannot_confirm', status=current))

    cursor.execute('''
        UPDATE reservations
        SET status = 'CONFIRMED', confirmed_at = ?, updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
    ''', (to_db_timestamp(), reservation_id))
    db.commit()
    return current


def cancel_reservation(reservation_id: int, reason: str = None) -> str:
    """
    Cancel a reservation.

    Allowed from every status except CANCELLED and CHECKED_OUT.

    Args:
        reservation_id: Reservation ID
        reason: Cancellation reason

    Returns:
        Previous status

    Raises:
        LookupError: Reservation not found
        ValueError: Transition not allowed from the current status
    """
    from utils.messages import MESSAGES, get_message

    db = get_db()
    cursor = db.cursor()
    current = _get_status(cursor, reservation_id)

    if not can_cancel(current):
        raise ValueError(get_message('reservation_cannot_cancel', status=current))

    cursor.execute('''
        UPDATE reservations
        SET status = 'CANCELLED', cancelled_at = ?, cancellation_reason = ?,
            updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
    ''', (to_db_timestamp(), reason or MESSAGES['cancelled_by_admin'], reservation_id))
    db.commit()
    return current
