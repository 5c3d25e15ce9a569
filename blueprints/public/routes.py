"""
Public marketing site routes.
Home page, property and restaurant listings, events, offers, locations and FAQs.
"""

import logging

from flask import Blueprint, render_template, request, abort, current_app

from models.business_unit import (get_business_units, get_featured_business_units,
                                  get_business_unit_by_slug, format_location, format_header_location)
from utils.datetime_helpers import get_today
from utils.helpers import build_map_embed_url

logger = logging.getLogger(__name__)

public_bp = Blueprint('public', __name__)

NAV_ITEMS = [
    ('Properties', 'public.properties'),
    ('Restaurants', 'public.restaurants'),
    ('Events', 'public.events'),
    ('Offers', 'public.offers'),
    ('Locations', 'public.locations'),
    ('FAQs', 'public.faqs'),
]


def _decorate_unit(unit: dict) -> dict:
    """Add the display location strings used by cards and the switcher."""
    unit['location'] = format_location(unit, current_app.config['DEFAULT_COUNTRY'])
    unit['header_location'] = format_header_location(unit)
    return unit


@public_bp.app_context_processor
def inject_navigation():
    """Header navigation and the property switcher for public templates."""
    if request.blueprint != 'public':
        return {}
    try:
        switcher = [_decorate_unit(unit) for unit in get_business_units()]
    except Exception as e:
        logger.error(f"Error loading property switcher: {e}", exc_info=True)
        switcher = []
    return {
        'nav_items': NAV_ITEMS,
        'switcher_properties': switcher,
        'carousel_interval': current_app.config['CAROUSEL_INTERVAL_MS'],
    }


@public_bp.route('/')
def home():
    """Landing page: hero carousel, featured properties/restaurants, offers, testimonials."""
    from models.hero_slide import get_active_hero_slides, increment_hero_views
    from models.restaurant import get_featured_restaurants
    from models.special_offer import get_current_offers
    from models.testimonial import get_featured_testimonials

    slides = get_active_hero_slides('home')
    # Impressions are counted when the slide is rendered
    for slide in slides:
        increment_hero_views(slide['id'])

    return render_template(
        'public/home.html',
        slides=slides,
        properties=[_decorate_unit(u) for u in get_featured_business_units(limit=6)],
        restaurants=get_featured_restaurants(limit=6),
        offers=get_current_offers(get_today(), limit=6),
        testimonials=get_featured_testimonials(limit=6)
    )


@public_bp.route('/properties')
def properties():
    """All published properties."""
    units = [_decorate_unit(unit) for unit in get_business_units()]
    return render_template('public/properties.html', properties=units)


@public_bp.route('/properties/<slug>')
def property_detail(slug):
    """Property page with its restaurants, upcoming events, offers and room types."""
    from models.restaurant import get_published_restaurants
    from models.event import get_upcoming_events
    from models.special_offer import get_current_offers
    from models.room_type import get_all_room_types

    unit = get_business_unit_by_slug(slug)
    if not unit:
        abort(404)

    today = get_today()
    return render_template(
        'public/property_detail.html',
        property=_decorate_unit(unit),
        restaurants=get_published_restaurants(business_unit_id=unit['id']),
        events=get_upcoming_events(today, business_unit_id=unit['id']),
        offers=get_current_offers(today, business_unit_id=unit['id']),
        room_types=get_all_room_types(business_unit_id=unit['id'], active_only=True)
    )


@public_bp.route('/restaurants')
def restaurants():
    """Published restaurants with the cuisine filter list."""
    from models.restaurant import get_published_restaurants, get_cuisines

    return render_template(
        'public/restaurants.html',
        restaurants=get_published_restaurants(),
        cuisines=get_cuisines(),
        current_cuisine=None
    )


@public_bp.route('/restaurants/cuisine/<cuisine>')
def restaurants_by_cuisine(cuisine):
    from models.restaurant import get_restaurants_by_cuisine, get_cuisines

    return render_template(
        'public/restaurants.html',
        restaurants=get_restaurants_by_cuisine(cuisine),
        cuisines=get_cuisines(),
        current_cuisine=cuisine
    )


@public_bp.route('/restaurants/<slug>')
def restaurant_detail(slug):
    """Restaurant page; each visit bumps the view counter."""
    from models.restaurant import get_restaurant_by_slug, increment_restaurant_views

    restaurant = get_restaurant_by_slug(slug)
    if not restaurant:
        abort(404)

    increment_restaurant_views(restaurant['id'])
    return render_template('public/restaurant_detail.html', restaurant=restaurant)


@public_bp.route('/events')
def events():
    from models.event import get_upcoming_events

    return render_template('public/events.html', events=get_upcoming_events(get_today()))


@public_bp.route('/offers')
def offers():
    from models.special_offer import get_current_offers

    return render_template('public/offers.html', offers=get_current_offers(get_today()))


@public_bp.route('/locations')
def locations():
    """Map cards for every published property with coordinates."""
    api_key = current_app.config.get('GOOGLE_MAPS_API_KEY')
    cards = []
    for unit in get_business_units():
        _decorate_unit(unit)
        unit['map_url'] = build_map_embed_url(unit['latitude'], unit['longitude'],
                                              unit['display_name'], api_key)
        if unit['map_url']:
            cards.append(unit)
    return render_template('public/locations.html', locations=cards)


@public_bp.route('/faqs')
def faqs():
    """FAQ page with optional ?category= filter."""
    from models.faq import get_active_faqs, get_faq_categories

    category = request.args.get('category', '').strip() or None
    return render_template(
        'public/faqs.html',
        faqs=get_active_faqs(category),
        categories=get_faq_categories(),
        current_category=category
    )
