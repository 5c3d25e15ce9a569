"""
Admin blueprint initialization.
Assembles the back-office dashboard, audit log and the cms/operations
sub-blueprints.

Individual route logic is in:
- routes/dashboard.py - Dashboard
- routes/audit.py - Audit log viewer
- routes/cms/ - Hero slides, events, offers, testimonials, FAQs
- routes/operations/ - Properties, restaurants, rooms, guests, reservations, payments
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')

# =============================================================================
# REGISTER SUB-BLUEPRINTS
# =============================================================================

from blueprints.admin.routes.cms import cms_bp
admin_bp.register_blueprint(cms_bp)

from blueprints.admin.routes.operations import operations_bp
admin_bp.register_blueprint(operations_bp)

# =============================================================================
# TOP-LEVEL PAGES
# =============================================================================

from blueprints.admin.routes import dashboard, audit

dashboard.register_routes(admin_bp)
audit.register_routes(admin_bp)
