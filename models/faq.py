"""
FAQ data access functions.
"""

from database import get_db
from database.queries import insert_row, update_row, toggle_flag, delete_row, fetch_one

FAQ_FIELDS = ['question', 'answer', 'category', 'is_active', 'sort_order']


def get_all_faqs() -> list:
    """Every FAQ for the admin list, grouped by category."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM faqs ORDER BY category, sort_order, id')
    return [dict(row) for row in cursor.fetchall()]


def get_active_faqs(category: str = None) -> list:
    """
    Active FAQs for the public page.

    Args:
        category: Optional category filter

    Returns:
        List of FAQ dicts
    """
    db = get_db()
    cursor = db.cursor()

    query = 'SELECT * FROM faqs WHERE is_active = 1'
    params = []
    if category:
        query += ' AND category = ?'
        params.append(category)
    query += ' ORDER BY category, sort_order, id'

    cursor.execute(query, params)
    return [dict(row) for row in cursor.fetchall()]


def get_faq_categories() -> list:
    """Distinct categories of active FAQs."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT DISTINCT category FROM faqs WHERE is_active = 1 ORDER BY category')
    return [row['category'] for row in cursor.fetchall()]


def get_faq_by_id(faq_id: int) -> dict:
    return fetch_one('faqs', faq_id)


def create_faq(**data) -> int:
    """Create a FAQ. Returns new ID."""
    return insert_row('faqs', data, FAQ_FIELDS)


def update_faq(faq_id: int, **kwargs) -> bool:
    return update_row('faqs', faq_id, kwargs, FAQ_FIELDS)


def delete_faq(faq_id: int) -> bool:
    return delete_row('faqs', faq_id)


def toggle_faq_active(faq_id: int):
    return toggle_flag('faqs', faq_id, 'is_active')
