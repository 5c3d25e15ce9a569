"""
Server actions for marketing content: events, hero slides, special
offers, testimonials and FAQs.
"""

from models import event as event_model
from models import hero_slide as hero_model
from models import special_offer as offer_model
from models import testimonial as testimonial_model
from models import faq as faq_model
from blueprints.admin.services.common import (derive_slug, require, require_date_range,
                                              not_found, toggle_result)
from utils.api_response import action_result
from utils.audit import log_create, log_update, log_delete, log_status_change
from utils.form_helpers import (calculate_savings, parse_bool, parse_datetime, parse_decimal,
                                parse_int, parse_date, parse_list, blank_to_none)
from utils.messages import get_message
from utils.validators import validate_rating


# =============================================================================
# EVENTS
# =============================================================================

def _event_payload(data: dict) -> dict:
    """Coerce and validate event form values."""
    start_date, end_date = require_date_range(data, 'start_date', 'end_date',
                                              'Start date', 'End date')
    is_free = parse_bool(data.get('is_free', 1))

    payload = {
        'business_unit_id': parse_int(require(data, 'business_unit_id', 'Property')),
        'title': require(data, 'title', 'Title'),
        'slug': derive_slug(data, 'title'),
        'description': blank_to_none(data.get('description')),
        'short_desc': blank_to_none(data.get('short_desc')),
        'type': data.get('type') or 'ENTERTAINMENT',
        'status': data.get('status') or 'PLANNING',
        'start_date': start_date,
        'end_date': end_date,
        'start_time': blank_to_none(data.get('start_time')),
        'end_time': blank_to_none(data.get('end_time')),
        'venue': blank_to_none(data.get('venue')),
        'venue_details': blank_to_none(data.get('venue_details')),
        'venue_capacity': parse_int(data.get('venue_capacity')),
        'is_free': is_free,
        'ticket_price': None if is_free else parse_decimal(data.get('ticket_price')),
        'currency': blank_to_none(data.get('currency')) or 'PHP',
        'requires_booking': parse_bool(data.get('requires_booking')),
        'max_attendees': parse_int(data.get('max_attendees')),
        'is_published': parse_bool(data.get('is_published')),
        'is_featured': parse_bool(data.get('is_featured')),
        'is_pinned': parse_bool(data.get('is_pinned')),
        'sort_order': parse_int(data.get('sort_order'), 0),
    }

    if payload['type'] not in event_model.EVENT_TYPES:
        raise ValueError(get_message('invalid_status', status=payload['type']))
    if payload['status'] not in event_model.EVENT_STATUSES:
        raise ValueError(get_message('invalid_status', status=payload['status']))
    return payload


def create_event(data: dict) -> dict:
    """
    Create an event.

    Args:
        data: Form values

    Returns:
        Action result with the new id
    """
    try:
        payload = _event_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if event_model.slug_exists(payload['slug']):
        return action_result(False, get_message('slug_exists', entity='event', slug=payload['slug']))

    event_id = event_model.create_event(**payload)
    log_create('event', event_id, payload)
    return action_result(True, get_message('created', entity='Event'), id=event_id)


def update_event(event_id: int, data: dict) -> dict:
    """Update an event from form values."""
    before = event_model.get_event_by_id(event_id)
    if not before:
        return not_found('Event')

    try:
        payload = _event_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if event_model.slug_exists(payload['slug'], exclude_id=event_id):
        return action_result(False, get_message('slug_exists', entity='event', slug=payload['slug']))

    event_model.update_event(event_id, **payload)
    log_update('event', event_id, before, payload)
    return action_result(True, get_message('updated', entity='Event'), id=event_id)


def delete_event(event_id: int) -> dict:
    event = event_model.get_event_by_id(event_id)
    if not event:
        return not_found('Event')

    event_model.delete_event(event_id)
    log_delete('event', event_id, event)
    return action_result(True, get_message('deleted', entity='Event'), id=event_id)


def toggle_event_featured(event_id: int) -> dict:
    new_value = event_model.toggle_event_featured(event_id)
    return toggle_result(new_value, 'Event', 'event', event_id,
                         'is_featured', 'featured', 'unfeatured')


# =============================================================================
# HERO SLIDES
# =============================================================================

def _hero_payload(data: dict) -> dict:
    """Coerce and validate hero slide form values."""
    opacity = parse_decimal(data.get('overlay_opacity'), 0.4)
    if opacity < 0 or opacity > 1:
        raise ValueError(get_message('invalid_opacity'))

    show_from = parse_datetime(data.get('show_from'))
    show_until = parse_datetime(data.get('show_until'))
    if show_from and show_until and show_until < show_from:
        raise ValueError(get_message('invalid_date_range', start='Show from', end='Show until'))

    payload = {
        'title': require(data, 'title', 'Title'),
        'show_from': show_from,
        'show_until': show_until,
        'overlay_opacity': opacity,
        'target_pages': parse_list(data.get('target_pages')),
        'target_audience': parse_list(data.get('target_audience')),
        'display_type': data.get('display_type') or 'fullscreen',
        'text_alignment': data.get('text_alignment') or 'center',
        'overlay_color': blank_to_none(data.get('overlay_color')) or '#000000',
        'text_color': blank_to_none(data.get('text_color')) or 'white',
        'primary_button_style': data.get('primary_button_style') or 'contained',
        'secondary_button_style': data.get('secondary_button_style') or 'outlined',
        'is_active': parse_bool(data.get('is_active')),
        'is_featured': parse_bool(data.get('is_featured')),
        'sort_order': parse_int(data.get('sort_order'), 0),
    }

    for field in ('subtitle', 'description', 'button_text', 'button_url', 'background_image',
                  'background_video', 'overlay_image', 'primary_button_text',
                  'primary_button_url', 'secondary_button_text', 'secondary_button_url',
                  'alt_text', 'caption'):
        payload[field] = blank_to_none(data.get(field))

    return payload


def create_hero_slide(data: dict) -> dict:
    try:
        payload = _hero_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    slide_id = hero_model.create_hero_slide(**payload)
    log_create('hero_slide', slide_id, payload)
    return action_result(True, get_message('created', entity='Hero slide'), id=slide_id)


def update_hero_slide(slide_id: int, data: dict) -> dict:
    before = hero_model.get_hero_slide_by_id(slide_id)
    if not before:
        return not_found('Hero slide')

    try:
        payload = _hero_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    hero_model.update_hero_slide(slide_id, **payload)
    log_update('hero_slide', slide_id, before, payload)
    return action_result(True, get_message('updated', entity='Hero slide'), id=slide_id)


def delete_hero_slide(slide_id: int) -> dict:
    slide = hero_model.get_hero_slide_by_id(slide_id)
    if not slide:
        return not_found('Hero slide')

    hero_model.delete_hero_slide(slide_id)
    log_delete('hero_slide', slide_id, slide)
    return action_result(True, get_message('deleted', entity='Hero slide'), id=slide_id)


def toggle_hero_slide_active(slide_id: int) -> dict:
    new_value = hero_model.toggle_hero_slide_active(slide_id)
    return toggle_result(new_value, 'Hero slide', 'hero_slide', slide_id,
                         'is_active', 'activated', 'deactivated')


def toggle_hero_slide_featured(slide_id: int) -> dict:
    new_value = hero_model.toggle_hero_slide_featured(slide_id)
    return toggle_result(new_value, 'Hero slide', 'hero_slide', slide_id,
                         'is_featured', 'featured', 'unfeatured')


# =============================================================================
# SPECIAL OFFERS
# =============================================================================

def _offer_payload(data: dict) -> dict:
    """Coerce and validate offer form values; savings are always recomputed."""
    valid_from, valid_to = require_date_range(data, 'valid_from', 'valid_to',
                                              'Valid from', 'Valid to')

    offer_price = parse_decimal(data.get('offer_price'))
    if offer_price is None:
        raise ValueError(get_message('field_required', field='Offer price'))
    original_price = parse_decimal(data.get('original_price'))
    savings_amount, savings_percent = calculate_savings(original_price, offer_price)

    payload = {
        'business_unit_id': parse_int(data.get('business_unit_id')),
        'title': require(data, 'title', 'Title'),
        'slug': derive_slug(data, 'title'),
        'subtitle': blank_to_none(data.get('subtitle')),
        'description': blank_to_none(data.get('description')),
        'short_desc': blank_to_none(data.get('short_desc')),
        'type': data.get('type') or 'ROOM_DISCOUNT',
        'status': data.get('status') or 'ACTIVE',
        'offer_price': offer_price,
        'original_price': original_price,
        'savings_amount': savings_amount,
        'savings_percent': savings_percent,
        'currency': blank_to_none(data.get('currency')) or 'PHP',
        'valid_from': valid_from,
        'valid_to': valid_to,
        'is_published': parse_bool(data.get('is_published')),
        'is_featured': parse_bool(data.get('is_featured')),
        'is_pinned': parse_bool(data.get('is_pinned')),
        'sort_order': parse_int(data.get('sort_order'), 0),
    }

    if payload['type'] not in offer_model.OFFER_TYPES:
        raise ValueError(get_message('invalid_status', status=payload['type']))
    if payload['status'] not in offer_model.OFFER_STATUSES:
        raise ValueError(get_message('invalid_status', status=payload['status']))
    return payload


def create_special_offer(data: dict) -> dict:
    """
    Create a special offer.

    Args:
        data: Form values

    Returns:
        Action result with the new id
    """
    try:
        payload = _offer_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if offer_model.slug_exists(payload['slug']):
        return action_result(False, get_message('slug_exists', entity='offer', slug=payload['slug']))

    offer_id = offer_model.create_special_offer(**payload)
    log_create('special_offer', offer_id, payload)
    return action_result(True, get_message('created', entity='Special offer'), id=offer_id)


def update_special_offer(offer_id: int, data: dict) -> dict:
    before = offer_model.get_special_offer_by_id(offer_id)
    if not before:
        return not_found('Special offer')

    try:
        payload = _offer_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if offer_model.slug_exists(payload['slug'], exclude_id=offer_id):
        return action_result(False, get_message('slug_exists', entity='offer', slug=payload['slug']))

    offer_model.update_special_offer(offer_id, **payload)
    log_update('special_offer', offer_id, before, payload)
    return action_result(True, get_message('updated', entity='Special offer'), id=offer_id)


def delete_special_offer(offer_id: int) -> dict:
    offer = offer_model.get_special_offer_by_id(offer_id)
    if not offer:
        return not_found('Special offer')

    offer_model.delete_special_offer(offer_id)
    log_delete('special_offer', offer_id, offer)
    return action_result(True, get_message('deleted', entity='Special offer'), id=offer_id)


def toggle_special_offer_status(offer_id: int) -> dict:
    """Switch ACTIVE <-> INACTIVE."""
    before = offer_model.get_special_offer_by_id(offer_id)
    if not before:
        return not_found('Special offer')

    new_status = offer_model.toggle_special_offer_status(offer_id)
    log_status_change('special_offer', offer_id, 'status', before['status'], new_status)
    key = 'activated' if new_status == 'ACTIVE' else 'deactivated'
    return action_result(True, get_message(key, entity='Special offer'),
                         id=offer_id, field='status', value=new_status)


def toggle_special_offer_featured(offer_id: int) -> dict:
    new_value = offer_model.toggle_special_offer_featured(offer_id)
    return toggle_result(new_value, 'Special offer', 'special_offer', offer_id,
                         'is_featured', 'featured', 'unfeatured')


# =============================================================================
# TESTIMONIALS
# =============================================================================

def _testimonial_payload(data: dict) -> dict:
    rating = parse_int(data.get('rating'), 5)
    if not validate_rating(rating):
        raise ValueError(get_message('invalid_rating'))

    return {
        'guest_name': require(data, 'guest_name', 'Guest name'),
        'guest_title': blank_to_none(data.get('guest_title')),
        'guest_image': blank_to_none(data.get('guest_image')),
        'guest_country': blank_to_none(data.get('guest_country')),
        'content': require(data, 'content', 'Content'),
        'rating': rating,
        'source': blank_to_none(data.get('source')),
        'source_url': blank_to_none(data.get('source_url')),
        'stay_date': parse_date(data.get('stay_date')),
        'review_date': parse_date(data.get('review_date')),
        'is_active': parse_bool(data.get('is_active')),
        'is_featured': parse_bool(data.get('is_featured')),
        'sort_order': parse_int(data.get('sort_order'), 0),
    }


def create_testimonial(data: dict) -> dict:
    try:
        payload = _testimonial_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    testimonial_id = testimonial_model.create_testimonial(**payload)
    log_create('testimonial', testimonial_id, payload)
    return action_result(True, get_message('created', entity='Testimonial'), id=testimonial_id)


def update_testimonial(testimonial_id: int, data: dict) -> dict:
    before = testimonial_model.get_testimonial_by_id(testimonial_id)
    if not before:
        return not_found('Testimonial')

    try:
        payload = _testimonial_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    testimonial_model.update_testimonial(testimonial_id, **payload)
    log_update('testimonial', testimonial_id, before, payload)
    return action_result(True, get_message('updated', entity='Testimonial'), id=testimonial_id)


def delete_testimonial(testimonial_id: int) -> dict:
    testimonial = testimonial_model.get_testimonial_by_id(testimonial_id)
    if not testimonial:
        return not_found('Testimonial')

    testimonial_model.delete_testimonial(testimonial_id)
    log_delete('testimonial', testimonial_id, testimonial)
    return action_result(True, get_message('deleted', entity='Testimonial'), id=testimonial_id)


def toggle_testimonial_active(testimonial_id: int) -> dict:
    new_value = testimonial_model.toggle_testimonial_active(testimonial_id)
    return toggle_result(new_value, 'Testimonial', 'testimonial', testimonial_id,
                         'is_active', 'activated', 'deactivated')


def toggle_testimonial_featured(testimonial_id: int) -> dict:
    new_value = testimonial_model.toggle_testimonial_featured(testimonial_id)
    return toggle_result(new_value, 'Testimonial', 'testimonial', testimonial_id,
                         'is_featured', 'featured', 'unfeatured')


# =============================================================================
# FAQS
# =============================================================================

def _faq_payload(data: dict) -> dict:
    return {
        'question': require(data, 'question', 'Question'),
        'answer': require(data, 'answer', 'Answer'),
        'category': require(data, 'category', 'Category'),
        'is_active': parse_bool(data.get('is_active')),
        'sort_order': parse_int(data.get('sort_order'), 0),
    }


def create_faq(data: dict) -> dict:
    try:
        payload = _faq_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    faq_id = faq_model.create_faq(**payload)
    log_create('faq', faq_id, payload)
    return action_result(True, get_message('created', entity='FAQ'), id=faq_id)


def update_faq(faq_id: int, data: dict) -> dict:
    before = faq_model.get_faq_by_id(faq_id)
    if not before:
        return not_found('FAQ')

    try:
        payload = _faq_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    faq_model.update_faq(faq_id, **payload)
    log_update('faq', faq_id, before, payload)
    return action_result(True, get_message('updated', entity='FAQ'), id=faq_id)


def delete_faq(faq_id: int) -> dict:
    faq = faq_model.get_faq_by_id(faq_id)
    if not faq:
        return not_found('FAQ')

    faq_model.delete_faq(faq_id)
    log_delete('faq', faq_id, faq)
    return action_result(True, get_message('deleted', entity='FAQ'), id=faq_id)


def toggle_faq_active(faq_id: int) -> dict:
    new_value = faq_model.toggle_faq_active(faq_id)
    return toggle_result(new_value, 'FAQ', 'faq', faq_id,
                         'is_active', 'activated', 'deactivated')
