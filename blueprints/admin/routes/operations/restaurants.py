"""
Restaurant admin routes.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required

from utils.decorators import permission_required
from utils.messages import get_message
from blueprints.admin.forms import RestaurantForm
from blueprints.admin.routes.helpers import handle_form, run_action, action_response, property_choices
from blueprints.admin.services import operations_service

COLUMNS = [
    ('name', 'Restaurant', 'text'),
    ('business_unit_name', 'Property', 'text'),
    ('type', 'Type', 'status'),
    ('cuisine', 'Cuisine', 'list'),
    ('view_count', 'Views', 'text'),
    ('is_published', 'Published', 'flag'),
]

TOGGLES = [
    {'field': 'is_active', 'endpoint': 'admin.operations.restaurants_toggle_active', 'label': 'Active',
     'icon': 'fa-toggle-on'},
    {'field': 'is_featured', 'endpoint': 'admin.operations.restaurants_toggle_featured',
     'label': 'Featured', 'icon': 'fa-star'},
]


def register_routes(bp):
    """Register restaurant routes on the blueprint."""

    @bp.route('/restaurants')
    @login_required
    @permission_required('operations.restaurants.view')
    def restaurants():
        """List restaurants, optionally for one property."""
        from models.restaurant import get_all_restaurants

        business_unit_id = request.args.get('business_unit_id', type=int)
        return render_template(
            'admin/entity_list.html',
            title='Restaurants',
            rows=get_all_restaurants(business_unit_id=business_unit_id),
            columns=COLUMNS,
            toggles=TOGGLES,
            id_param='restaurant_id',
            create_endpoint='admin.operations.restaurants_create',
            edit_endpoint='admin.operations.restaurants_edit',
            delete_endpoint='admin.operations.restaurants_delete',
            manage_permission='operations.restaurants.manage',
            property_options=property_choices(),
            property_filter=business_unit_id
        )

    @bp.route('/restaurants/create', methods=['GET', 'POST'])
    @login_required
    @permission_required('operations.restaurants.manage')
    def restaurants_create():
        form = RestaurantForm()
        form.business_unit_id.choices = property_choices()
        return handle_form(form, operations_service.create_restaurant, (), 'admin/entity_form.html',
                           'admin.operations.restaurants', 'error_create', 'restaurant',
                           title='New Restaurant', slug_source='name')

    @bp.route('/restaurants/<int:restaurant_id>/edit', methods=['GET', 'POST'])
    @login_required
    @permission_required('operations.restaurants.manage')
    def restaurants_edit(restaurant_id):
        from models.restaurant import get_restaurant_by_id

        restaurant = get_restaurant_by_id(restaurant_id)
        if not restaurant:
            flash(get_message('not_found', entity='Restaurant'), 'error')
            return redirect(url_for('admin.operations.restaurants'))

        form = RestaurantForm()
        form.business_unit_id.choices = property_choices()
        if request.method == 'GET':
            form.load(restaurant)
        return handle_form(form, operations_service.update_restaurant, (restaurant_id,),
                           'admin/entity_form.html', 'admin.operations.restaurants',
                           'error_update', 'restaurant',
                           title=f"Edit Restaurant: {restaurant['name']}", slug_source='name')

    @bp.route('/restaurants/<int:restaurant_id>/delete', methods=['POST'])
    @login_required
    @permission_required('operations.restaurants.manage')
    def restaurants_delete(restaurant_id):
        result = run_action(operations_service.delete_restaurant, restaurant_id,
                            error_key='error_delete', entity='restaurant')
        return action_response(result, url_for('admin.operations.restaurants'))

    @bp.route('/restaurants/<int:restaurant_id>/toggle-active', methods=['POST'])
    @login_required
    @permission_required('operations.restaurants.manage')
    def restaurants_toggle_active(restaurant_id):
        result = run_action(operations_service.toggle_restaurant_active, restaurant_id,
                            error_key='error_toggle', entity='restaurant')
        return action_response(result, url_for('admin.operations.restaurants'))

    @bp.route('/restaurants/<int:restaurant_id>/toggle-featured', methods=['POST'])
    @login_required
    @permission_required('operations.restaurants.manage')
    def restaurants_toggle_featured(restaurant_id):
        result = run_action(operations_service.toggle_restaurant_featured, restaurant_id,
                            error_key='error_toggle', entity='restaurant')
        return action_response(result, url_for('admin.operations.restaurants'))
