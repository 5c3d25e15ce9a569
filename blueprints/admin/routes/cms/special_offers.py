"""
Special offer admin routes.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required

from utils.decorators import permission_required
from utils.messages import get_message
from blueprints.admin.forms import SpecialOfferForm
from blueprints.admin.routes.helpers import handle_form, run_action, action_response, property_choices
from blueprints.admin.services import cms_service

COLUMNS = [
    ('title', 'Title', 'text'),
    ('business_unit_name', 'Property', 'text'),
    ('type', 'Type', 'status'),
    ('offer_price', 'Price', 'currency'),
    ('savings_percent', 'Savings %', 'text'),
    ('valid_from', 'Valid from', 'date'),
    ('valid_to', 'Valid to', 'date'),
]

TOGGLES = [
    {'field': 'status', 'endpoint': 'admin.cms.special_offers_toggle_status', 'label': 'Active',
     'icon': 'fa-toggle-on', 'on_value': 'ACTIVE'},
    {'field': 'is_featured', 'endpoint': 'admin.cms.special_offers_toggle_featured', 'label': 'Featured',
     'icon': 'fa-star'},
]


def register_routes(bp):
    """Register special offer routes on the blueprint."""

    @bp.route('/special-offers')
    @login_required
    @permission_required('cms.offers.view')
    def special_offers():
        """List special offers with optional status filter."""
        from models.special_offer import get_all_special_offers, OFFER_STATUSES

        status = request.args.get('status', '').strip() or None
        return render_template(
            'admin/entity_list.html',
            title='Special Offers',
            rows=get_all_special_offers(status=status),
            columns=COLUMNS,
            toggles=TOGGLES,
            id_param='offer_id',
            create_endpoint='admin.cms.special_offers_create',
            edit_endpoint='admin.cms.special_offers_edit',
            delete_endpoint='admin.cms.special_offers_delete',
            manage_permission='cms.offers.manage',
            status_filter=status,
            status_options=OFFER_STATUSES
        )

    @bp.route('/special-offers/create', methods=['GET', 'POST'])
    @login_required
    @permission_required('cms.offers.manage')
    def special_offers_create():
        """Create special offer."""
        form = SpecialOfferForm()
        form.business_unit_id.choices = property_choices(blank_label='All properties')
        return handle_form(form, cms_service.create_special_offer, (), 'admin/entity_form.html',
                           'admin.cms.special_offers', 'error_create', 'special offer',
                           title='New Special Offer', slug_source='title', savings_preview=True)

    @bp.route('/special-offers/<int:offer_id>/edit', methods=['GET', 'POST'])
    @login_required
    @permission_required('cms.offers.manage')
    def special_offers_edit(offer_id):
        """Edit special offer."""
        from models.special_offer import get_special_offer_by_id

        offer = get_special_offer_by_id(offer_id)
        if not offer:
            flash(get_message('not_found', entity='Special offer'), 'error')
            return redirect(url_for('admin.cms.special_offers'))

        form = SpecialOfferForm()
        form.business_unit_id.choices = property_choices(blank_label='All properties')
        if request.method == 'GET':
            form.load(offer)
        return handle_form(form, cms_service.update_special_offer, (offer_id,), 'admin/entity_form.html',
                           'admin.cms.special_offers', 'error_update', 'special offer',
                           title=f"Edit Special Offer: {offer['title']}", slug_source='title',
                           savings_preview=True, record=offer)

    @bp.route('/special-offers/<int:offer_id>/delete', methods=['POST'])
    @login_required
    @permission_required('cms.offers.manage')
    def special_offers_delete(offer_id):
        """Delete special offer."""
        result = run_action(cms_service.delete_special_offer, offer_id,
                            error_key='error_delete', entity='special offer')
        return action_response(result, url_for('admin.cms.special_offers'))

    @bp.route('/special-offers/<int:offer_id>/toggle-active', methods=['POST'])
    @login_required
    @permission_required('cms.offers.manage')
    def special_offers_toggle_status(offer_id):
        """Switch offer between ACTIVE and INACTIVE."""
        result = run_action(cms_service.toggle_special_offer_status, offer_id,
                            error_key='error_toggle', entity='special offer')
        return action_response(result, url_for('admin.cms.special_offers'))

    @bp.route('/special-offers/<int:offer_id>/toggle-featured', methods=['POST'])
    @login_required
    @permission_required('cms.offers.manage')
    def special_offers_toggle_featured(offer_id):
        result = run_action(cms_service.toggle_special_offer_featured, offer_id,
                            error_key='error_toggle', entity='special offer')
        return action_response(result, url_for('admin.cms.special_offers'))
