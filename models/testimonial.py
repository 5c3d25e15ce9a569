"""
Testimonial data access functions.
"""

from database import get_db
from database.queries import insert_row, update_row, toggle_flag, delete_row, fetch_one

TESTIMONIAL_FIELDS = [
    'guest_name', 'guest_title', 'guest_image', 'guest_country', 'content',
    'rating', 'source', 'source_url', 'stay_date', 'review_date',
    'is_active', 'is_featured', 'sort_order'
]


def get_all_testimonials() -> list:
    """Every testimonial for the admin list."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM testimonials ORDER BY sort_order, review_date DESC, id DESC')
    return [dict(row) for row in cursor.fetchall()]


def get_featured_testimonials(limit: int = None) -> list:
    """Active, featured testimonials for the homepage."""
    db = get_db()
    cursor = db.cursor()

    query = '''
        SELECT * FROM testimonials
        WHERE is_active = 1 AND is_featured = 1
        ORDER BY sort_order, review_date DESC
    '''
    params = []
    if limit:
        query += ' LIMIT ?'
        params.append(limit)

    cursor.execute(query, params)
    return [dict(row) for row in cursor.fetchall()]


def get_testimonial_by_id(testimonial_id: int) -> dict:
    """Testimonial by ID or None."""
    return fetch_one('testimonials', testimonial_id)


def create_testimonial(**data) -> int:
    """Create a testimonial. Returns new ID."""
    return insert_row('testimonials', data, TESTIMONIAL_FIELDS)


def update_testimonial(testimonial_id: int, **kwargs) -> bool:
    """Update testimonial fields. Returns True if updated."""
    return update_row('testimonials', testimonial_id, kwargs, TESTIMONIAL_FIELDS)


def delete_testimonial(testimonial_id: int) -> bool:
    return delete_row('testimonials', testimonial_id)


def toggle_testimonial_active(testimonial_id: int):
    return toggle_flag('testimonials', testimonial_id, 'is_active')


def toggle_testimonial_featured(testimonial_id: int):
    return toggle_flag('testimonials', testimonial_id, 'is_featured')
