"""
Operations routes package.
Properties, outlets, rooms, guests and the booking back office.
"""

from flask import Blueprint

# Create the operations blueprint (nested under admin)
operations_bp = Blueprint('operations', __name__, url_prefix='/operations')

# Import and register routes from submodules
from blueprints.admin.routes.operations import properties
from blueprints.admin.routes.operations import restaurants
from blueprints.admin.routes.operations import room_types
from blueprints.admin.routes.operations import rooms
from blueprints.admin.routes.operations import guests
from blueprints.admin.routes.operations import reservations
from blueprints.admin.routes.operations import payments

properties.register_routes(operations_bp)
restaurants.register_routes(operations_bp)
room_types.register_routes(operations_bp)
rooms.register_routes(operations_bp)
guests.register_routes(operations_bp)
reservations.register_routes(operations_bp)
payments.register_routes(operations_bp)
