"""
Content management routes package.
Marketing content shown on the public site: hero slides, events,
special offers, testimonials and FAQs.
"""

from flask import Blueprint

# Create the cms blueprint (nested under admin)
cms_bp = Blueprint('cms', __name__, url_prefix='/cms')

# Import and register routes from submodules
from blueprints.admin.routes.cms import events
from blueprints.admin.routes.cms import hero_slides
from blueprints.admin.routes.cms import special_offers
from blueprints.admin.routes.cms import testimonials
from blueprints.admin.routes.cms import faqs

events.register_routes(cms_bp)
hero_slides.register_routes(cms_bp)
special_offers.register_routes(cms_bp)
testimonials.register_routes(cms_bp)
faqs.register_routes(cms_bp)
