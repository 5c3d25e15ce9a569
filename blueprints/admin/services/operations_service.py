"""
Server actions for operational records: properties, restaurants,
guests, room types and rooms.
"""

from models import business_unit as unit_model
from models import restaurant as restaurant_model
from models import guest as guest_model
from models import room_type as room_type_model
from models import room as room_model
from blueprints.admin.services.common import derive_slug, require, not_found, toggle_result
from utils.api_response import action_result
from utils.audit import log_create, log_update, log_delete, log_status_change
from utils.form_helpers import blank_to_none, parse_bool, parse_date, parse_decimal, parse_int, parse_list
from utils.messages import get_message
from utils.validators import validate_coordinates, validate_email, validate_hex_color


# =============================================================================
# PROPERTIES
# =============================================================================

def _property_payload(data: dict) -> dict:
    """Coerce and validate property form values."""
    latitude = parse_decimal(data.get('latitude'))
    longitude = parse_decimal(data.get('longitude'))
    if not validate_coordinates(latitude, longitude):
        raise ValueError(get_message('invalid_coordinates'))

    email = blank_to_none(data.get('email'))
    if email and not validate_email(email):
        raise ValueError(get_message('invalid_email'))

    payload = {
        'name': require(data, 'name', 'Name'),
        'display_name': require(data, 'display_name', 'Display name'),
        'slug': derive_slug(data, 'name'),
        'city': require(data, 'city', 'City'),
        'country': blank_to_none(data.get('country')) or 'Philippines',
        'property_type': data.get('property_type') or 'HOTEL',
        'latitude': latitude,
        'longitude': longitude,
        'email': email,
        'is_active': parse_bool(data.get('is_active')),
        'is_published': parse_bool(data.get('is_published')),
        'is_featured': parse_bool(data.get('is_featured')),
        'sort_order': parse_int(data.get('sort_order'), 0),
    }

    for field in ('description', 'short_description', 'state', 'address',
                  'phone', 'website', 'logo'):
        payload[field] = blank_to_none(data.get(field))

    for field in ('primary_color', 'secondary_color'):
        color = blank_to_none(data.get(field))
        if color and not validate_hex_color(color):
            raise ValueError(f'{field.replace("_", " ").capitalize()} must be a hex color')
        payload[field] = color

    if payload['property_type'] not in unit_model.PROPERTY_TYPES:
        raise ValueError(get_message('invalid_status', status=payload['property_type']))
    return payload


def create_property(data: dict) -> dict:
    """
    Create a property (business unit).

    Args:
        data: Form values; slug is generated from the name when blank

    Returns:
        Action result with the new id
    """
    try:
        payload = _property_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if unit_model.slug_exists(payload['slug']):
        return action_result(False, get_message('slug_exists', entity='property', slug=payload['slug']))

    unit_id = unit_model.create_business_unit(**payload)
    log_create('business_unit', unit_id, payload)
    return action_result(True, get_message('created', entity='Property'), id=unit_id)


def update_property(unit_id: int, data: dict) -> dict:
    before = unit_model.get_business_unit_by_id(unit_id)
    if not before:
        return not_found('Property')

    try:
        payload = _property_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if unit_model.slug_exists(payload['slug'], exclude_id=unit_id):
        return action_result(False, get_message('slug_exists', entity='property', slug=payload['slug']))

    unit_model.update_business_unit(unit_id, **payload)
    log_update('business_unit', unit_id, before, payload)
    return action_result(True, get_message('updated', entity='Property'), id=unit_id)


def delete_property(unit_id: int) -> dict:
    """Delete a property unless reservations, rooms or restaurants still use it."""
    unit = unit_model.get_business_unit_by_id(unit_id)
    if not unit:
        return not_found('Property')

    try:
        unit_model.delete_business_unit(unit_id)
    except ValueError as e:
        return action_result(False, str(e))

    log_delete('business_unit', unit_id, unit)
    return action_result(True, get_message('deleted', entity='Property'), id=unit_id)


def toggle_property_active(unit_id: int) -> dict:
    new_value = unit_model.toggle_business_unit_active(unit_id)
    return toggle_result(new_value, 'Property', 'business_unit', unit_id,
                         'is_active', 'activated', 'deactivated')


def toggle_property_featured(unit_id: int) -> dict:
    new_value = unit_model.toggle_business_unit_featured(unit_id)
    return toggle_result(new_value, 'Property', 'business_unit', unit_id,
                         'is_featured', 'featured', 'unfeatured')


# =============================================================================
# RESTAURANTS
# =============================================================================

def _restaurant_payload(data: dict) -> dict:
    email = blank_to_none(data.get('email'))
    if email and not validate_email(email):
        raise ValueError(get_message('invalid_email'))

    hours = data.get('operating_hours')
    payload = {
        'business_unit_id': parse_int(require(data, 'business_unit_id', 'Property')),
        'name': require(data, 'name', 'Name'),
        'slug': derive_slug(data, 'name'),
        'type': data.get('type') or 'CASUAL_DINING',
        'cuisine': parse_list(data.get('cuisine')),
        'features': parse_list(data.get('features')),
        'operating_hours': hours if isinstance(hours, dict) else {},
        'email': email,
        'average_meal': parse_decimal(data.get('average_meal')),
        'currency': blank_to_none(data.get('currency')) or 'PHP',
        'is_active': parse_bool(data.get('is_active')),
        'is_published': parse_bool(data.get('is_published')),
        'is_featured': parse_bool(data.get('is_featured')),
        'sort_order': parse_int(data.get('sort_order'), 0),
    }

    for field in ('description', 'short_desc', 'location', 'phone', 'price_range'):
        payload[field] = blank_to_none(data.get(field))

    if payload['type'] not in restaurant_model.RESTAURANT_TYPES:
        raise ValueError(get_message('invalid_status', status=payload['type']))
    return payload


def create_restaurant(data: dict) -> dict:
    try:
        payload = _restaurant_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if restaurant_model.slug_exists(payload['business_unit_id'], payload['slug']):
        return action_result(False, get_message('slug_exists', entity='restaurant', slug=payload['slug']))

    restaurant_id = restaurant_model.create_restaurant(**payload)
    log_create('restaurant', restaurant_id, payload)
    return action_result(True, get_message('created', entity='Restaurant'), id=restaurant_id)


def update_restaurant(restaurant_id: int, data: dict) -> dict:
    before = restaurant_model.get_restaurant_by_id(restaurant_id)
    if not before:
        return not_found('Restaurant')

    try:
        payload = _restaurant_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if restaurant_model.slug_exists(payload['business_unit_id'], payload['slug'], exclude_id=restaurant_id):
        return action_result(False, get_message('slug_exists', entity='restaurant', slug=payload['slug']))

    restaurant_model.update_restaurant(restaurant_id, **payload)
    log_update('restaurant', restaurant_id, before, payload)
    return action_result(True, get_message('updated', entity='Restaurant'), id=restaurant_id)


def delete_restaurant(restaurant_id: int) -> dict:
    restaurant = restaurant_model.get_restaurant_by_id(restaurant_id)
    if not restaurant:
        return not_found('Restaurant')

    restaurant_model.delete_restaurant(restaurant_id)
    log_delete('restaurant', restaurant_id, restaurant)
    return action_result(True, get_message('deleted', entity='Restaurant'), id=restaurant_id)


def toggle_restaurant_active(restaurant_id: int) -> dict:
    new_value = restaurant_model.toggle_restaurant_active(restaurant_id)
    return toggle_result(new_value, 'Restaurant', 'restaurant', restaurant_id,
                         'is_active', 'activated', 'deactivated')


def toggle_restaurant_featured(restaurant_id: int) -> dict:
    new_value = restaurant_model.toggle_restaurant_featured(restaurant_id)
    return toggle_result(new_value, 'Restaurant', 'restaurant', restaurant_id,
                         'is_featured', 'featured', 'unfeatured')


# =============================================================================
# GUESTS
# =============================================================================

def _guest_payload(data: dict) -> dict:
    email = require(data, 'email', 'Email')
    if not validate_email(email):
        raise ValueError(get_message('invalid_email'))

    id_type = blank_to_none(data.get('id_type'))
    if id_type and id_type not in guest_model.ID_TYPES:
        raise ValueError(get_message('invalid_status', status=id_type))

    payload = {
        'business_unit_id': parse_int(data.get('business_unit_id')),
        'first_name': require(data, 'first_name', 'First name'),
        'last_name': require(data, 'last_name', 'Last name'),
        'email': email.lower(),
        'date_of_birth': parse_date(data.get('date_of_birth')),
        'passport_expiry': parse_date(data.get('passport_expiry')),
        'id_type': id_type,
        'preferences': parse_list(data.get('preferences')),
        'vip_status': parse_bool(data.get('vip_status')),
        'marketing_opt_in': parse_bool(data.get('marketing_opt_in')),
    }

    for field in ('title', 'phone', 'nationality', 'country', 'address', 'city', 'state',
                  'postal_code', 'passport_number', 'id_number', 'loyalty_number',
                  'source', 'notes'):
        payload[field] = blank_to_none(data.get(field))

    return payload


def create_guest(data: dict) -> dict:
    """
    Create a guest profile.

    Returns:
        Action result with the new id; duplicate email is a failure
    """
    try:
        payload = _guest_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if guest_model.email_exists(payload['email']):
        return action_result(False, get_message('email_exists', email=payload['email']))

    guest_id = guest_model.create_guest(**payload)
    log_create('guest', guest_id, payload)
    return action_result(True, get_message('created', entity='Guest'), id=guest_id)


def update_guest(guest_id: int, data: dict) -> dict:
    before = guest_model.get_guest_by_id(guest_id)
    if not before:
        return not_found('Guest')

    try:
        payload = _guest_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if guest_model.email_exists(payload['email'], exclude_id=guest_id):
        return action_result(False, get_message('email_exists', email=payload['email']))

    guest_model.update_guest(guest_id, **payload)
    log_update('guest', guest_id, before, payload)
    return action_result(True, get_message('updated', entity='Guest'), id=guest_id)


def delete_guest(guest_id: int) -> dict:
    guest = guest_model.get_guest_by_id(guest_id)
    if not guest:
        return not_found('Guest')

    try:
        guest_model.delete_guest(guest_id)
    except ValueError as e:
        return action_result(False, str(e))

    log_delete('guest', guest_id, guest)
    return action_result(True, get_message('deleted', entity='Guest'), id=guest_id)


def toggle_guest_vip(guest_id: int) -> dict:
    new_value = guest_model.toggle_guest_vip(guest_id)
    return toggle_result(new_value, 'Guest', 'guest', guest_id,
                         'vip_status', 'vip_granted', 'vip_revoked')


# =============================================================================
# ROOM TYPES
# =============================================================================

def _room_type_payload(data: dict) -> dict:
    base_rate = parse_decimal(data.get('base_rate'))
    if base_rate is None:
        raise ValueError(get_message('field_required', field='Base rate'))

    payload = {
        'business_unit_id': parse_int(require(data, 'business_unit_id', 'Property')),
        'name': require(data, 'name', 'Name'),
        'display_name': require(data, 'display_name', 'Display name'),
        'description': blank_to_none(data.get('description')),
        'type': data.get('type') or 'STANDARD',
        'max_occupancy': parse_int(data.get('max_occupancy'), 2),
        'max_adults': parse_int(data.get('max_adults'), 2),
        'max_children': parse_int(data.get('max_children'), 0),
        'max_infants': parse_int(data.get('max_infants'), 0),
        'bed_configuration': blank_to_none(data.get('bed_configuration')),
        'room_size': parse_decimal(data.get('room_size')),
        'base_rate': base_rate,
        'extra_person_rate': parse_decimal(data.get('extra_person_rate')),
        'extra_child_rate': parse_decimal(data.get('extra_child_rate')),
        'floor_plan': blank_to_none(data.get('floor_plan')),
        'is_active': parse_bool(data.get('is_active')),
        'sort_order': parse_int(data.get('sort_order'), 0),
    }
    for flag in room_type_model.AMENITY_FLAGS:
        payload[flag] = parse_bool(data.get(flag))

    if payload['type'] not in room_type_model.ROOM_TYPE_TYPES:
        raise ValueError(get_message('invalid_status', status=payload['type']))
    return payload


def create_room_type(data: dict) -> dict:
    try:
        payload = _room_type_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if room_type_model.name_exists(payload['business_unit_id'], payload['name']):
        return action_result(False, get_message('room_type_exists', name=payload['name']))

    room_type_id = room_type_model.create_room_type(**payload)
    log_create('room_type', room_type_id, payload)
    return action_result(True, get_message('created', entity='Room type'), id=room_type_id)


def update_room_type(room_type_id: int, data: dict) -> dict:
    before = room_type_model.get_room_type_by_id(room_type_id)
    if not before:
        return not_found('Room type')

    try:
        payload = _room_type_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if room_type_model.name_exists(payload['business_unit_id'], payload['name'], exclude_id=room_type_id):
        return action_result(False, get_message('room_type_exists', name=payload['name']))

    room_type_model.update_room_type(room_type_id, **payload)
    log_update('room_type', room_type_id, before, payload)
    return action_result(True, get_message('updated', entity='Room type'), id=room_type_id)


def delete_room_type(room_type_id: int) -> dict:
    room_type = room_type_model.get_room_type_by_id(room_type_id)
    if not room_type:
        return not_found('Room type')

    try:
        room_type_model.delete_room_type(room_type_id)
    except ValueError as e:
        return action_result(False, str(e))

    log_delete('room_type', room_type_id, room_type)
    return action_result(True, get_message('deleted', entity='Room type'), id=room_type_id)


def toggle_room_type_active(room_type_id: int) -> dict:
    new_value = room_type_model.toggle_room_type_active(room_type_id)
    return toggle_result(new_value, 'Room type', 'room_type', room_type_id,
                         'is_active', 'activated', 'deactivated')


# =============================================================================
# ROOMS
# =============================================================================

def _room_payload(data: dict) -> dict:
    """Room values; the property is taken from the chosen room type."""
    room_type_id = parse_int(require(data, 'room_type_id', 'Room type'))
    room_type = room_type_model.get_room_type_by_id(room_type_id)
    if not room_type:
        raise ValueError(get_message('not_found', entity='Room type'))

    status = data.get('status') or 'AVAILABLE'
    if status not in room_model.ROOM_STATUSES:
        raise ValueError(get_message('invalid_status', status=status))

    return {
        'business_unit_id': room_type['business_unit_id'],
        'room_type_id': room_type_id,
        'room_number': require(data, 'room_number', 'Room number'),
        'floor': parse_int(data.get('floor')),
        'status': status,
        'is_active': parse_bool(data.get('is_active')),
        'notes': blank_to_none(data.get('notes')),
    }


def create_room(data: dict) -> dict:
    try:
        payload = _room_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if room_model.room_number_exists(payload['business_unit_id'], payload['room_number']):
        return action_result(False, get_message('room_number_exists', room_number=payload['room_number']))

    room_id = room_model.create_room(**payload)
    log_create('room', room_id, payload)
    return action_result(True, get_message('created', entity='Room'), id=room_id)


def update_room(room_id: int, data: dict) -> dict:
    before = room_model.get_room_by_id(room_id)
    if not before:
        return not_found('Room')

    try:
        payload = _room_payload(data)
    except ValueError as e:
        return action_result(False, str(e))

    if room_model.room_number_exists(payload['business_unit_id'], payload['room_number'], exclude_id=room_id):
        return action_result(False, get_message('room_number_exists', room_number=payload['room_number']))

    room_model.update_room(room_id, **payload)
    log_update('room', room_id, before, payload)
    return action_result(True, get_message('updated', entity='Room'), id=room_id)


def update_room_status(room_id: int, status: str) -> dict:
    """Set the housekeeping/occupancy status of a room."""
    room = room_model.get_room_by_id(room_id)
    if not room:
        return not_found('Room')

    try:
        room_model.update_room_status(room_id, status)
    except ValueError as e:
        return action_result(False, str(e))

    log_status_change('room', room_id, 'status', room['status'], status)
    return action_result(True, get_message('room_status_updated', status=status),
                         id=room_id, field='status', value=status)


def delete_room(room_id: int) -> dict:
    room = room_model.get_room_by_id(room_id)
    if not room:
        return not_found('Room')

    try:
        room_model.delete_room(room_id)
    except ValueError as e:
        return action_result(False, str(e))

    log_delete('room', room_id, room)
    return action_result(True, get_message('deleted', entity='Room'), id=room_id)


def toggle_room_active(room_id: int) -> dict:
    new_value = room_model.toggle_room_active(room_id)
    return toggle_result(new_value, 'Room', 'room', room_id,
                         'is_active', 'activated', 'deactivated')
