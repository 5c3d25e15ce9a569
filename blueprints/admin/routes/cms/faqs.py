"""
FAQ admin routes.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_required

from utils.decorators import permission_required
from utils.messages import get_message
from blueprints.admin.forms import FaqForm
from blueprints.admin.routes.helpers import handle_form, run_action, action_response
from blueprints.admin.services import cms_service

COLUMNS = [
    ('question', 'Question', 'text'),
    ('category', 'Category', 'text'),
    ('sort_order', 'Order', 'text'),
]

TOGGLES = [
    {'field': 'is_active', 'endpoint': 'admin.cms.faqs_toggle_active', 'label': 'Active',
     'icon': 'fa-toggle-on'},
]


def register_routes(bp):
    """Register FAQ routes on the blueprint."""

    @bp.route('/faqs')
    @login_required
    @permission_required('cms.faqs.view')
    def faqs():
        from models.faq import get_all_faqs

        return render_template(
            'admin/entity_list.html',
            title='FAQs',
            rows=get_all_faqs(),
            columns=COLUMNS,
            toggles=TOGGLES,
            id_param='faq_id',
            create_endpoint='admin.cms.faqs_create',
            edit_endpoint='admin.cms.faqs_edit',
            delete_endpoint='admin.cms.faqs_delete',
            manage_permission='cms.faqs.manage'
        )

    @bp.route('/faqs/create', methods=['GET', 'POST'])
    @login_required
    @permission_required('cms.faqs.manage')
    def faqs_create():
        form = FaqForm()
        return handle_form(form, cms_service.create_faq, (), 'admin/entity_form.html',
                           'admin.cms.faqs', 'error_create', 'FAQ', title='New FAQ')

    @bp.route('/faqs/<int:faq_id>/edit', methods=['GET', 'POST'])
    @login_required
    @permission_required('cms.faqs.manage')
    def faqs_edit(faq_id):
        from models.faq import get_faq_by_id

        faq = get_faq_by_id(faq_id)
        if not faq:
            flash(get_message('not_found', entity='FAQ'), 'error')
            return redirect(url_for('admin.cms.faqs'))

        form = FaqForm()
        if request.method == 'GET':
            form.load(faq)
        return handle_form(form, cms_service.update_faq, (faq_id,), 'admin/entity_form.html',
                           'admin.cms.faqs', 'error_update', 'FAQ', title='Edit FAQ')

    @bp.route('/faqs/<int:faq_id>/delete', methods=['POST'])
    @login_required
    @permission_required('cms.faqs.manage')
    def faqs_delete(faq_id):
        result = run_action(cms_service.delete_faq, faq_id, error_key='error_delete', entity='FAQ')
        return action_response(result, url_for('admin.cms.faqs'))

    @bp.route('/faqs/<int:faq_id>/toggle-active', methods=['POST'])
    @login_required
    @permission_required('cms.faqs.manage')
    def faqs_toggle_active(faq_id):
        result = run_action(cms_service.toggle_faq_active, faq_id, error_key='error_toggle', entity='FAQ')
        return action_response(result, url_for('admin.cms.faqs'))
