"""
Payment data access functions.
Handles payment records, status changes, refunds and keeping the parent
reservation's payment_status in step.
"""

import math

from database import get_db
from utils.datetime_helpers import to_db_timestamp

PAYMENT_STATUSES = ['PENDING', 'PROCESSING', 'SUCCEEDED', 'FAILED', 'CANCELLED',
                    'REFUNDED', 'PARTIAL', 'PAID']

PAYMENT_METHODS = ['CREDIT_CARD', 'DEBIT_CARD', 'BANK_TRANSFER', 'CASH', 'CHECK',
                   'GCASH', 'PAYMAYA', 'GRABPAY', 'ONLINE_BANKING', 'OTHER']

# Money actually collected
SETTLED_STATUSES = ('SUCCEEDED', 'PAID')

# Statuses that can be refunded
REFUNDABLE_STATUSES = ('SUCCEEDED',)

_SELECT = '''
    SELECT p.*,
           r.confirmation_number, r.total_amount as reservation_total,
           r.status as reservation_status, r.check_in_date, r.check_out_date,
           g.first_name || ' ' || g.last_name as guest_name, g.email as guest_email,
           bu.display_name as business_unit_name
    FROM payments p
    JOIN reservations r ON p.reservation_id = r.id
    JOIN guests g ON r.guest_id = g.id
    JOIN business_units bu ON r.business_unit_id = bu.id
'''


def can_refund(status: str) -> bool:
    return status in REFUNDABLE_STATUSES


# =============================================================================
# READ
# =============================================================================

def get_all_payments(status: str = None, method: str = None, search: str = None) -> list:
    """
    Get payments newest first.

    Args:
        status: Optional status filter
        method: Optional method filter
        search: Matches confirmation number, guest name or transaction ID

    Returns:
        List of payment dicts with reservation and guest info
    """
    db = get_db()
    cursor = db.cursor()

    query = _SELECT + ' WHERE 1=1'
    params = []

    if status:
        query += ' AND p.status = ?'
        params.append(status)

    if method:
        query += ' AND p.method = ?'
        params.append(method)

    if search:
        pattern = f'%{search.strip().lower()}%'
        query += '''
            AND (LOWER(r.confirmation_number) LIKE ?
                 OR LOWER(g.first_name || ' ' || g.last_name) LIKE ?
                 OR LOWER(COALESCE(p.transaction_id, '')) LIKE ?)
        '''
        params.extend([pattern, pattern, pattern])

    query += ' ORDER BY p.created_at DESC, p.id DESC'

    cursor.execute(query, params)
    return [dict(row) for row in cursor.fetchall()]


def get_payment_by_id(payment_id: int) -> dict:
    """
    Get payment by ID.

    Args:
        payment_id: Payment ID

    Returns:
        Payment dict or None if not found
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute(_SELECT + ' WHERE p.id = ?', (payment_id,))
    row = cursor.fetchone()
    return dict(row) if row else None


def get_payment_totals() -> dict:
    """Collected and refunded sums for the dashboard."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT
            COALESCE(SUM(CASE WHEN status IN ('SUCCEEDED', 'PAID') THEN amount END), 0) as collected,
            COALESCE(SUM(refund_amount), 0) as refunded,
            COUNT(CASE WHEN status = 'PENDING' THEN 1 END) as pending_count
        FROM payments
    ''')
    return dict(cursor.fetchone())


# =============================================================================
# WRITE
# =============================================================================

def recalculate_reservation_payment_status(reservation_id: int) -> str:
    """
    Derive a reservation's payment_status from its payments.

    paid sum >= total -> PAID; paid sum > 0 -> PARTIAL; refunds and
    nothing paid -> REFUNDED; otherwise PENDING.

    Args:
        reservation_id: Reservation ID

    Returns:
        New payment status
    """
    db = get_db()
    cursor = db.cursor()

    cursor.execute('SELECT total_amount FROM reservations WHERE id = ?', (reservation_id,))
    reservation = cursor.fetchone()
    if not reservation:
        return None

    cursor.execute('''
        SELECT
            COALESCE(SUM(CASE WHEN status IN ('SUCCEEDED', 'PAID') THEN amount END), 0) as paid,
            COUNT(CASE WHEN status = 'REFUNDED' THEN 1 END) as refunds
        FROM payments
        WHERE reservation_id = ?
    ''', (reservation_id,))
    sums = cursor.fetchone()

    paid = round(sums['paid'], 2)
    total = round(reservation['total_amount'] or 0, 2)

    if paid > 0 and paid >= total:
        payment_status = 'PAID'
    elif paid > 0:
        payment_status = 'PARTIAL'
    elif sums['refunds']:
        payment_status = 'REFUNDED'
    else:
        payment_status = 'PENDING'

    cursor.execute('''
        UPDATE reservations SET payment_status = ?, updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
    ''', (payment_status, reservation_id))
    db.commit()
    return payment_status


def create_payment(
    reservation_id: int,
    amount: float,
    method: str = 'CASH',
    status: str = 'PENDING',
    currency: str = 'PHP',
    transaction_id: str = None,
    notes: str = None
) -> int:
    """
    Record a payment against a reservation.

    Args:
        reservation_id: Reservation ID
        amount: Amount (> 0)
        method: Payment method
        status: Initial status
        currency: Currency code
        transaction_id: Gateway/bank reference
        notes: Staff notes

    Returns:
        New payment ID

    Raises:
        ValueError: Invalid amount, method or status
    """
    from utils.messages import MESSAGES, get_message

    if amount is None or not math.isfinite(float(amount)) or float(amount) <= 0:
        raise ValueError(MESSAGES['invalid_amount'])
    if method not in PAYMENT_METHODS:
        raise ValueError(get_message('invalid_status', status=method))
    if status not in PAYMENT_STATUSES:
        raise ValueError(get_message('invalid_status', status=status))

    processed_at = to_db_timestamp() if status in SETTLED_STATUSES else None

    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        INSERT INTO payments (reservation_id, amount, currency, status, method,
                              transaction_id, processed_at, notes)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
    ''', (reservation_id, float(amount), currency, status, method,
          transaction_id, processed_at, notes))
    db.commit()
    payment_id = cursor.lastrowid

    recalculate_reservation_payment_status(reservation_id)
    return payment_id


def update_payment_status(payment_id: int, status: str) -> str:
    """
    Change a payment's status.

    processed_at is stamped when the payment becomes SUCCEEDED or PAID.

    Args:
        payment_id: Payment ID
        status: New status

    Returns:
        Previous status

    Raises:
        LookupError: Payment not found
        ValueError: Unknown status
    """
    from utils.messages import get_message

    if status not in PAYMENT_STATUSES:
        raise ValueError(get_message('invalid_status', status=status))

    payment = get_payment_by_id(payment_id)
    if not payment:
        raise LookupError(get_message('not_found', entity='Payment'))

    db = get_db()
    cursor = db.cursor()
    if status in SETTLED_STATUSES:
        cursor.execute('''
            UPDATE payments
            SET status = ?, processed_at = COALESCE(processed_at, ?), updated_at = CURRENT_TIMESTAMP
            WHERE id = ?
        ''', (status, to_db_timestamp(), payment_id))
    else:
        cursor.execute('''
            UPDATE payments SET status = ?, updated_at = CURRENT_TIMESTAMP
            WHERE id = ?
        ''', (status, payment_id))
    db.commit()

    recalculate_reservation_payment_status(payment['reservation_id'])
    return payment['status']


def refund_payment(payment_id: int, reason: str = None) -> dict:
    """
    Refund a SUCCEEDED payment in full.

    Args:
        payment_id: Payment ID
        reason: Refund reason

    Returns:
        Payment dict as it was before the refund

    Raises:
        LookupError: Payment not found
        ValueError: Payment is not SUCCEEDED
    """
    from utils.messages import get_message

    payment = get_payment_by_id(payment_id)
    if not payment:
        raise LookupError(get_message('not_found', entity='Payment'))

    if not can_refund(payment['status']):
        raise ValueError(get_message('payment_cannot_refund', status=payment['status']))

    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        UPDATE payments
        SET status = 'REFUNDED', refund_amount = ?, refund_reason = ?,
            refunded_at = ?, updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
    ''', (payment['amount'], reason, to_db_timestamp(), payment_id))
    db.commit()

    recalculate_reservation_payment_status(payment['reservation_id'])
    return payment
