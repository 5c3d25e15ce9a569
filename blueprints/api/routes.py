"""
API routes for JSON endpoints.
Read-only property/restaurant listings, hero slide tracking and
reservation counters for the admin sidebar.
"""

from flask import jsonify, request, Blueprint, current_app
from flask_login import login_required

from extensions import csrf
from utils.api_response import api_success, api_error
from utils.datetime_helpers import get_today

api_bp = Blueprint('api', __name__)


@api_bp.route('/health')
def health_check():
    """
    Health check endpoint (no authentication required).

    Returns:
        JSON with status and version
    """
    return jsonify({
        'status': 'ok',
        'version': current_app.config['APP_VERSION'],
        'app': current_app.config['APP_NAME']
    })


@api_bp.route('/properties')
def api_properties():
    """
    Published properties as JSON.

    Returns:
        JSON list of properties
    """
    from models.business_unit import get_business_units

    return api_success(properties=get_business_units())


@api_bp.route('/restaurants')
def api_restaurants():
    """
    Published restaurants as JSON.

    Query params:
        property_id: Filter by property (optional)
        cuisine: Filter by cuisine (optional)

    Returns:
        JSON list of restaurants
    """
    from models.restaurant import get_published_restaurants, get_restaurants_by_cuisine

    cuisine = request.args.get('cuisine', '').strip()
    if cuisine:
        restaurants = get_restaurants_by_cuisine(cuisine)
    else:
        restaurants = get_published_restaurants(
            business_unit_id=request.args.get('property_id', type=int)
        )
    return api_success(restaurants=restaurants)


@api_bp.route('/hero/<int:slide_id>/view', methods=['POST'])
@csrf.exempt
def hero_view(slide_id):
    """Count a carousel impression."""
    from models.hero_slide import increment_hero_views

    if not increment_hero_views(slide_id):
        return api_error('Hero slide not found', status=404)
    return api_success()


@api_bp.route('/hero/<int:slide_id>/click', methods=['POST'])
@csrf.exempt
def hero_click(slide_id):
    """Count a call-to-action click."""
    from models.hero_slide import increment_hero_clicks

    if not increment_hero_clicks(slide_id):
        return api_error('Hero slide not found', status=404)
    return api_success()


@api_bp.route('/reservations/counts')
@login_required
def reservation_counts():
    """Pending and today's arrival/departure counters."""
    from models.reservation import get_reservation_counts

    return api_success(data=get_reservation_counts(get_today()))
