"""
Admin server actions.

Every mutating action returns an action_result dict
({'success': bool, 'message': str, ...}). Expected business failures
come back as success=False with a user-facing message; anything else
propagates to the route, which logs it and shows a generic message.
"""
