"""
Dashboard model.
Summary counters for the admin dashboard.
"""

from datetime import date

from database import get_db


def get_entity_counts() -> dict:
    """
    Row totals per managed entity.

    Returns:
        dict keyed by entity (properties, restaurants, rooms, guests,
        reservations, payments, events, hero_slides, special_offers,
        testimonials, faqs)
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT
            (SELECT COUNT(*) FROM business_units) as properties,
            (SELECT COUNT(*) FROM restaurants) as restaurants,
            (SELECT COUNT(*) FROM rooms) as rooms,
            (SELECT COUNT(*) FROM guests) as guests,
            (SELECT COUNT(*) FROM reservations) as reservations,
            (SELECT COUNT(*) FROM payments) as payments,
            (SELECT COUNT(*) FROM events) as events,
            (SELECT COUNT(*) FROM hero_slides) as hero_slides,
            (SELECT COUNT(*) FROM special_offers) as special_offers,
            (SELECT COUNT(*) FROM testimonials) as testimonials,
            (SELECT COUNT(*) FROM faqs) as faqs
    ''')
    return dict(cursor.fetchone())


def get_room_status_summary() -> dict:
    """Active rooms per status."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT status, COUNT(*) as count FROM rooms
        WHERE is_active = 1
        GROUP BY status
    ''')
    return {row['status']: row['count'] for row in cursor.fetchall()}


def get_dashboard_summary(today: date, recent_limit: int = 10) -> dict:
    """
    Everything the dashboard page renders.

    Args:
        today: Reference date for arrivals/departures
        recent_limit: Number of recent reservations

    Returns:
        dict with counts, reservation_counts, rooms_by_status,
        payment_totals and recent_reservations
    """
    from models.reservation import get_reservation_counts, get_recent_reservations
    from models.payment import get_payment_totals

    return {
        'counts': get_entity_counts(),
        'reservation_counts': get_reservation_counts(today),
        'rooms_by_status': get_room_status_summary(),
        'payment_totals': get_payment_totals(),
        'recent_reservations': get_recent_reservations(limit=recent_limit),
    }
