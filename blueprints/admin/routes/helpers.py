"""
Shared plumbing for admin routes.

Server actions return result dicts; these helpers turn them into either a
JSON response (list-page scripts) or a flash + redirect (plain form posts),
and replace unexpected exceptions with the per-screen generic message.
"""

from flask import current_app, flash, redirect, render_template, request, url_for

from utils.api_response import action_result, api_from_result
from utils.messages import get_message


def wants_json() -> bool:
    """True for fetch() calls from the list pages."""
    return request.is_json or request.accept_mimetypes.best == 'application/json'


def run_action(action, *args, error_key: str = 'error_update', entity: str = 'record') -> dict:
    """
    Call a server action at the route boundary.

    Expected failures come back from the action itself; anything raised
    is logged and turned into the generic message for this screen.

    Args:
        action: Service function
        *args: Positional arguments for the action
        error_key: MESSAGES key of the generic fallback
        entity: Entity name used in the fallback message

    Returns:
        Action result dict
    """
    try:
        return action(*args)
    except Exception as e:
        current_app.logger.error(f'Error in {action.__name__}: {e}', exc_info=True)
        from database import get_db
        get_db().rollback()
        return action_result(False, get_message(error_key, entity=entity), unexpected=True)


def action_response(result: dict, redirect_to: str):
    """
    Render an action result for the caller.

    JSON callers get the result body (400/404/500 on failure); form posts
    get a flash and a redirect.
    """
    if wants_json():
        return api_from_result(result)

    flash(result['message'], 'success' if result['success'] else 'error')
    return redirect(redirect_to)


def handle_form(form, action, args: tuple, template: str, list_endpoint: str,
                error_key: str, entity: str, **context):
    """
    Standard create/edit page flow.

    GET renders the form. A valid POST calls the action with the form data:
    success flashes and redirects to the list, failure flashes the action's
    message and re-renders. Invalid input flashes each field error.
    """
    if form.validate_on_submit():
        result = run_action(action, *args, form.to_data(), error_key=error_key, entity=entity)
        if result['success']:
            flash(result['message'], 'success')
            return redirect(url_for(list_endpoint))
        flash(result['message'], 'error')
    elif request.method == 'POST':
        for message in form.error_messages():
            flash(message, 'error')

    return render_template(template, form=form, list_endpoint=list_endpoint, **context)


def property_choices(blank_label: str = None) -> list:
    """Select options for the property field."""
    from models.business_unit import get_business_unit_options

    choices = get_business_unit_options()
    if blank_label is not None:
        choices = [('', blank_label)] + choices
    return choices
