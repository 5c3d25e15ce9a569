"""
Centralized UI messages.
All user-facing text for notifications and fallbacks.
"""

MESSAGES = {
    # Auth
    'login_success': 'Welcome back, {name}',
    'logout_success': 'You have been signed out',
    'invalid_credentials': 'Invalid username or password',
    'account_disabled': 'Your account has been disabled. Contact an administrator.',
    'permission_denied': 'You do not have permission to access this page',
    'action_denied': 'You do not have permission to perform this action',

    # Generic outcomes
    'created': '{entity} created successfully',
    'updated': '{entity} updated successfully',
    'deleted': '{entity} deleted successfully',
    'not_found': '{entity} not found',
    'activated': '{entity} activated',
    'deactivated': '{entity} deactivated',
    'featured': '{entity} marked as featured',
    'unfeatured': '{entity} removed from featured',
    'slug_exists': 'Another {entity} already uses the slug "{slug}"',

    # Per-screen fallbacks for unexpected failures
    'error_create': 'An error occurred while creating the {entity}',
    'error_update': 'An error occurred while updating the {entity}',
    'error_delete': 'An error occurred while deleting the {entity}',
    'error_toggle': 'An error occurred while updating the {entity} status',
    'error_load': 'Failed to load {entity} details',
    'error_refund': 'An unexpected error occurred while processing refund',
    'error_reservation_action': 'An unexpected error occurred while updating the reservation',

    # Validation
    'field_required': '{field} is required',
    'invalid_date_range': '{end} must be on or after {start}',
    'invalid_email': 'Invalid email format',
    'invalid_status': 'Invalid status: {status}',
    'invalid_rating': 'Rating must be between 1 and 5',
    'invalid_opacity': 'Overlay opacity must be between 0 and 1',
    'invalid_coordinates': 'Latitude must be within -90..90 and longitude within -180..180',
    'email_exists': 'A guest with email {email} already exists',
    'room_number_exists': 'Room {room_number} already exists for this property',
    'room_type_exists': 'Room type "{name}" already exists for this property',

    # Delete guards
    'property_has_dependants': 'Cannot delete a property that still has reservations, rooms or restaurants',
    'guest_has_reservations': 'Cannot delete a guest with reservations',
    'room_type_has_rooms': 'Cannot delete a room type that still has rooms',
    'room_has_reservations': 'Cannot delete a room assigned to reservations',
    'room_type_has_reservations': 'Cannot delete a room type used by reservations',

    # Reservations
    'reservation_confirmed': 'Reservation confirmed successfully',
    'reservation_cancelled': 'Reservation cancelled successfully',
    'reservation_cannot_confirm': 'Reservation cannot be confirmed from status {status}',
    'reservation_cannot_cancel': 'Reservation cannot be cancelled from status {status}',
    'reservation_needs_room': 'A reservation needs at least one room',
    'reservation_min_nights': 'Check-out must be at least one night after check-in',
    'cancelled_by_admin': 'Cancelled by admin',

    # Payments
    'payment_status_updated': 'Payment status updated to {status}',
    'payment_refunded': 'Payment refunded successfully',
    'payment_cannot_refund': 'Only succeeded payments can be refunded (current: {status})',
    'invalid_amount': 'Amount must be greater than zero',

    # Rooms
    'room_status_updated': 'Room status updated to {status}',

    # Guests
    'vip_granted': 'Guest marked as VIP',
    'vip_revoked': 'VIP status removed',
}


def get_message(key: str, **kwargs) -> str:
    """
    Get message with optional formatting.

    Args:
        key: Message key
        **kwargs: Format parameters

    Returns:
        Formatted message or key if not found
    """
    message = MESSAGES.get(key, key)
    if kwargs:
        return message.format(**kwargs)
    return message
