"""
Hero slide data access functions.
Handles the homepage carousel content, its scheduling window and counters.
"""

import logging

from database import get_db
from database.queries import insert_row, update_row, toggle_flag, delete_row, fetch_one
from utils.datetime_helpers import to_db_timestamp
from utils.form_helpers import dump_json, load_json

logger = logging.getLogger(__name__)

DISPLAY_TYPES = ['fullscreen', 'banner', 'split', 'minimal']
TEXT_ALIGNMENTS = ['left', 'center', 'right']
BUTTON_STYLES = ['contained', 'outlined', 'text']

HERO_SLIDE_FIELDS = [
    'title', 'subtitle', 'description', 'button_text', 'button_url',
    'background_image', 'background_video', 'overlay_image', 'is_active',
    'is_featured', 'sort_order', 'display_type', 'text_alignment',
    'overlay_color', 'overlay_opacity', 'text_color',
    'primary_button_text', 'primary_button_url', 'primary_button_style',
    'secondary_button_text', 'secondary_button_url', 'secondary_button_style',
    'show_from', 'show_until', 'target_pages', 'target_audience',
    'alt_text', 'caption'
]

JSON_LIST_FIELDS = ('target_pages', 'target_audience')


def _decode(row) -> dict:
    slide = dict(row)
    for field in JSON_LIST_FIELDS:
        slide[field] = load_json(slide.get(field))
    return slide


def _encode(data: dict) -> dict:
    encoded = dict(data)
    for field in JSON_LIST_FIELDS:
        if field in encoded:
            encoded[field] = dump_json(encoded[field])
    return encoded


def get_all_hero_slides() -> list:
    """Every slide for the admin list, in carousel order."""
    db = get_db()
    cursor = db.cursor()
    cursor.execute('SELECT * FROM hero_slides ORDER BY sort_order, id')
    return [_decode(row) for row in cursor.fetchall()]


def get_hero_slide_by_id(slide_id: int) -> dict:
    """
    Get hero slide by ID.

    Args:
        slide_id: Slide ID

    Returns:
        Slide dict or None if not found
    """
    slide = fetch_one('hero_slides', slide_id)
    return _decode(slide) if slide else None


def get_active_hero_slides(page: str = 'home', now=None) -> list:
    """
    Slides to show on a public page.

    A slide qualifies when it is active, the current time is inside its
    optional show_from/show_until window, and its target_pages list is
    empty (all pages) or contains the page.

    Args:
        page: Page key ('home', 'properties', ...)
        now: Reference datetime (defaults to local now)

    Returns:
        List of slide dicts, featured first then sort order
    """
    now_str = to_db_timestamp(now)

    db = get_db()
    cursor = db.cursor()
    cursor.execute('''
        SELECT * FROM hero_slides
        WHERE is_active = 1
          AND (show_from IS NULL OR show_from <= ?)
          AND (show_until IS NULL OR show_until >= ?)
        ORDER BY is_featured DESC, sort_order, id
    ''', (now_str, now_str))

    slides = []
    for row in cursor.fetchall():
        slide = _decode(row)
        pages = slide['target_pages']
        if not pages or page in pages:
            slides.append(slide)
    return slides


def create_hero_slide(**data) -> int:
    """Create a slide. Returns new ID."""
    return insert_row('hero_slides', _encode(data), HERO_SLIDE_FIELDS)


def update_hero_slide(slide_id: int, **kwargs) -> bool:
    """Update slide fields. Returns True if updated."""
    return update_row('hero_slides', slide_id, _encode(kwargs), HERO_SLIDE_FIELDS)


def delete_hero_slide(slide_id: int) -> bool:
    """Delete slide permanently."""
    return delete_row('hero_slides', slide_id)


def toggle_hero_slide_active(slide_id: int):
    """Flip is_active. Returns new value or None if not found."""
    return toggle_flag('hero_slides', slide_id, 'is_active')


def toggle_hero_slide_featured(slide_id: int):
    """Flip is_featured. Returns new value or None if not found."""
    return toggle_flag('hero_slides', slide_id, 'is_featured')


def _increment(slide_id: int, column: str) -> bool:
    try:
        db = get_db()
        cursor = db.cursor()
        cursor.execute(f'UPDATE hero_slides SET {column} = {column} + 1 WHERE id = ?', (slide_id,))
        db.commit()
        return cursor.rowcount > 0
    except Exception as e:
        logger.warning(f"Failed to increment {column} for hero slide {slide_id}: {e}")
        return False


def increment_hero_views(slide_id: int) -> bool:
    """Count an impression. Returns False if the slide does not exist."""
    return _increment(slide_id, 'view_count')


def increment_hero_clicks(slide_id: int) -> bool:
    """Count a call-to-action click. Returns False if the slide does not exist."""
    return _increment(slide_id, 'click_count')
