"""
Admin entity forms using Flask-WTF.
Required fields and type coercion live here; derived fields (slug,
savings) and business rules are applied by the services on save.
"""

from flask_wtf import FlaskForm
from wtforms import (StringField, TextAreaField, SelectField, IntegerField,
                     DecimalField, BooleanField, DateField, DateTimeLocalField, FloatField)
from wtforms.validators import DataRequired, Email, Length, NumberRange, Optional, Regexp

from models.business_unit import PROPERTY_TYPES
from models.restaurant import RESTAURANT_TYPES
from models.event import EVENT_TYPES, EVENT_STATUSES
from models.hero_slide import DISPLAY_TYPES, TEXT_ALIGNMENTS, BUTTON_STYLES
from models.special_offer import OFFER_TYPES, OFFER_STATUSES
from models.guest import GUEST_TITLES, ID_TYPES
from models.room_type import ROOM_TYPE_TYPES
from models.room import ROOM_STATUSES
from utils.form_helpers import parse_list
from utils.helpers import status_label

SLUG_PATTERN = r'^[a-z0-9]+(?:-[a-z0-9]+)*$'
HEX_COLOR_PATTERN = r'^#(?:[0-9a-fA-F]{3}){1,2}$'
TIME_PATTERN = r'^([01]\d|2[0-3]):[0-5]\d$'


def enum_choices(values: list) -> list:
    """[('CHECKED_IN', 'Checked In'), ...] for SelectFields."""
    return [(value, status_label(value)) for value in values]


def optional_int(value):
    """SelectField coerce that maps the blank choice to None."""
    if value in (None, '', 'None'):
        return None
    return int(value)


def hours_to_text(hours: dict) -> str:
    """{'Mon-Fri': '7:00-22:00'} -> 'Mon-Fri: 7:00-22:00' lines."""
    if not hours:
        return ''
    return '\n'.join(f'{day}: {time}' for day, time in hours.items())


def text_to_hours(text: str) -> dict:
    """Inverse of hours_to_text; lines without a colon are skipped."""
    hours = {}
    for line in (text or '').splitlines():
        if ':' not in line:
            continue
        day, time = line.split(':', 1)
        if day.strip() and time.strip():
            hours[day.strip()] = time.strip()
    return hours


class EntityForm(FlaskForm):
    """
    Base for admin entity forms.

    LIST_FIELDS are edited as comma/newline separated text and stored as
    lists; HOURS_FIELDS are edited as 'day: time' lines.
    """

    LIST_FIELDS = ()
    HOURS_FIELDS = ()

    def load(self, record: dict):
        """Populate fields from a stored record (GET of an edit page)."""
        for name, field in self._fields.items():
            if name == 'csrf_token' or name not in record:
                continue
            value = record[name]
            if name in self.LIST_FIELDS:
                value = ', '.join(value or [])
            elif name in self.HOURS_FIELDS:
                value = hours_to_text(value)
            elif isinstance(field, BooleanField):
                value = bool(value)
            field.data = value
        return self

    def to_data(self) -> dict:
        """Submitted values as a plain dict for the services."""
        data = {}
        for name, field in self._fields.items():
            if name == 'csrf_token':
                continue
            value = field.data
            if name in self.LIST_FIELDS:
                value = parse_list(value)
            elif name in self.HOURS_FIELDS:
                value = text_to_hours(value)
            elif isinstance(field, BooleanField):
                value = 1 if value else 0
            elif isinstance(value, str):
                value = value.strip() or None
            data[name] = value
        return data

    def error_messages(self) -> list:
        """Flat 'Label: message' list for flashing."""
        messages = []
        for name, errors in self.errors.items():
            label = self._fields[name].label.text if name in self._fields else name
            for error in errors:
                messages.append(f'{label}: {error}')
        return messages


# =============================================================================
# OPERATIONS
# =============================================================================

class BusinessUnitForm(EntityForm):
    name = StringField('Name', validators=[DataRequired(message='Name is required'), Length(max=120)])
    display_name = StringField('Display name', validators=[DataRequired(message='Display name is required'),
                                                           Length(max=120)])
    slug = StringField('Slug', validators=[Optional(), Regexp(SLUG_PATTERN, message='Use lowercase letters, digits and hyphens')])
    description = TextAreaField('Description', validators=[Optional()])
    short_description = StringField('Short description', validators=[Optional(), Length(max=300)])
    property_type = SelectField('Property type', choices=enum_choices(PROPERTY_TYPES), default='HOTEL')
    address = StringField('Address', validators=[Optional()])
    city = StringField('City', validators=[DataRequired(message='City is required')])
    state = StringField('State / Province', validators=[Optional()])
    country = StringField('Country', validators=[Optional()], default='Philippines')
    latitude = FloatField('Latitude', validators=[Optional(), NumberRange(min=-90, max=90)])
    longitude = FloatField('Longitude', validators=[Optional(), NumberRange(min=-180, max=180)])
    phone = StringField('Phone', validators=[Optional()])
    email = StringField('Email', validators=[Optional(), Email(message='Invalid email format')])
    website = StringField('Website', validators=[Optional()])
    primary_color = StringField('Primary color', validators=[Optional(), Regexp(HEX_COLOR_PATTERN)])
    secondary_color = StringField('Secondary color', validators=[Optional(), Regexp(HEX_COLOR_PATTERN)])
    logo = StringField('Logo URL', validators=[Optional()])
    sort_order = IntegerField('Sort order', validators=[Optional()], default=0)
    is_active = BooleanField('Active', default=True)
    is_published = BooleanField('Published')
    is_featured = BooleanField('Featured')


class RestaurantForm(EntityForm):
    LIST_FIELDS = ('cuisine', 'features')
    HOURS_FIELDS = ('operating_hours',)

    business_unit_id = SelectField('Property', coerce=int, validators=[DataRequired(message='Property is required')])
    name = StringField('Name', validators=[DataRequired(message='Name is required'), Length(max=120)])
    slug = StringField('Slug', validators=[Optional(), Regexp(SLUG_PATTERN, message='Use lowercase letters, digits and hyphens')])
    description = TextAreaField('Description', validators=[Optional()])
    short_desc = StringField('Short description', validators=[Optional(), Length(max=300)])
    type = SelectField('Type', choices=enum_choices(RESTAURANT_TYPES), default='CASUAL_DINING')
    cuisine = StringField('Cuisine (comma separated)', validators=[Optional()])
    location = StringField('Location in property', validators=[Optional()])
    phone = StringField('Phone', validators=[Optional()])
    email = StringField('Email', validators=[Optional(), Email(message='Invalid email format')])
    operating_hours = TextAreaField('Operating hours (one "day: hours" per line)', validators=[Optional()])
    features = TextAreaField('Features (comma separated)', validators=[Optional()])
    price_range = StringField('Price range', validators=[Optional(), Length(max=10)])
    average_meal = DecimalField('Average meal', places=2, validators=[Optional(), NumberRange(min=0)])
    currency = StringField('Currency', validators=[Optional(), Length(max=3)], default='PHP')
    sort_order = IntegerField('Sort order', validators=[Optional()], default=0)
    is_active = BooleanField('Active', default=True)
    is_published = BooleanField('Published')
    is_featured = BooleanField('Featured')


class GuestForm(EntityForm):
    LIST_FIELDS = ('preferences',)

    business_unit_id = SelectField('Home property', coerce=optional_int, validators=[Optional()])
    title = SelectField('Title', choices=[('', '-')] + [(t, t) for t in GUEST_TITLES], validators=[Optional()])
    first_name = StringField('First name', validators=[DataRequired(message='First name is required')])
    last_name = StringField('Last name', validators=[DataRequired(message='Last name is required')])
    email = StringField('Email', validators=[DataRequired(message='Email is required'),
                                             Email(message='Invalid email format')])
    phone = StringField('Phone', validators=[Optional()])
    date_of_birth = DateField('Date of birth', validators=[Optional()])
    nationality = StringField('Nationality', validators=[Optional()])
    country = StringField('Country', validators=[Optional()])
    address = StringField('Address', validators=[Optional()])
    city = StringField('City', validators=[Optional()])
    state = StringField('State / Province', validators=[Optional()])
    postal_code = StringField('Postal code', validators=[Optional()])
    passport_number = StringField('Passport number', validators=[Optional()])
    passport_expiry = DateField('Passport expiry', validators=[Optional()])
    id_type = SelectField('ID type', choices=[('', '-')] + enum_choices(ID_TYPES), validators=[Optional()])
    id_number = StringField('ID number', validators=[Optional()])
    preferences = TextAreaField('Preferences (comma separated)', validators=[Optional()])
    loyalty_number = StringField('Loyalty number', validators=[Optional()])
    source = StringField('Source', validators=[Optional()])
    notes = TextAreaField('Notes', validators=[Optional()])
    vip_status = BooleanField('VIP')
    marketing_opt_in = BooleanField('Marketing opt-in')


class RoomTypeForm(EntityForm):
    business_unit_id = SelectField('Property', coerce=int, validators=[DataRequired(message='Property is required')])
    name = StringField('Code name', validators=[DataRequired(message='Name is required'), Length(max=60)])
    display_name = StringField('Display name', validators=[DataRequired(message='Display name is required')])
    description = TextAreaField('Description', validators=[Optional()])
    type = SelectField('Category', choices=enum_choices(ROOM_TYPE_TYPES), default='STANDARD')
    max_occupancy = IntegerField('Max occupancy', validators=[Optional(), NumberRange(min=1)], default=2)
    max_adults = IntegerField('Max adults', validators=[Optional(), NumberRange(min=1)], default=2)
    max_children = IntegerField('Max children', validators=[Optional(), NumberRange(min=0)], default=0)
    max_infants = IntegerField('Max infants', validators=[Optional(), NumberRange(min=0)], default=0)
    bed_configuration = StringField('Bed configuration', validators=[Optional()])
    room_size = DecimalField('Size (sqm)', places=1, validators=[Optional(), NumberRange(min=0)])
    base_rate = DecimalField('Base rate per night', places=2,
                             validators=[DataRequired(message='Base rate is required'), NumberRange(min=0)])
    extra_person_rate = DecimalField('Extra adult rate', places=2, validators=[Optional(), NumberRange(min=0)])
    extra_child_rate = DecimalField('Extra child rate', places=2, validators=[Optional(), NumberRange(min=0)])
    floor_plan = StringField('Floor plan URL', validators=[Optional()])
    sort_order = IntegerField('Sort order', validators=[Optional()], default=0)
    has_balcony = BooleanField('Balcony')
    has_ocean_view = BooleanField('Ocean view')
    has_pool_view = BooleanField('Pool view')
    has_kitchenette = BooleanField('Kitchenette')
    has_living_area = BooleanField('Living area')
    smoking_allowed = BooleanField('Smoking allowed')
    pet_friendly = BooleanField('Pet friendly')
    is_accessible = BooleanField('Accessible')
    is_active = BooleanField('Active', default=True)


class RoomForm(EntityForm):
    room_type_id = SelectField('Room type', coerce=int, validators=[DataRequired(message='Room type is required')])
    room_number = StringField('Room number', validators=[DataRequired(message='Room number is required'),
                                                         Length(max=10)])
    floor = IntegerField('Floor', validators=[Optional()])
    status = SelectField('Status', choices=enum_choices(ROOM_STATUSES), default='AVAILABLE')
    notes = TextAreaField('Notes', validators=[Optional()])
    is_active = BooleanField('Active', default=True)


# =============================================================================
# CMS
# =============================================================================

class EventForm(EntityForm):
    business_unit_id = SelectField('Property', coerce=int, validators=[DataRequired(message='Property is required')])
    title = StringField('Title', validators=[DataRequired(message='Title is required'), Length(max=200)])
    slug = StringField('Slug', validators=[Optional(), Regexp(SLUG_PATTERN, message='Use lowercase letters, digits and hyphens')])
    description = TextAreaField('Description', validators=[Optional()])
    short_desc = StringField('Short description', validators=[Optional(), Length(max=300)])
    type = SelectField('Type', choices=enum_choices(EVENT_TYPES), default='ENTERTAINMENT')
    status = SelectField('Status', choices=enum_choices(EVENT_STATUSES), default='PLANNING')
    start_date = DateField('Start date', validators=[DataRequired(message='Start date is required')])
    end_date = DateField('End date', validators=[DataRequired(message='End date is required')])
    start_time = StringField('Start time', validators=[Optional(), Regexp(TIME_PATTERN, message='Use HH:MM')])
    end_time = StringField('End time', validators=[Optional(), Regexp(TIME_PATTERN, message='Use HH:MM')])
    venue = StringField('Venue', validators=[Optional()])
    venue_details = TextAreaField('Venue details', validators=[Optional()])
    venue_capacity = IntegerField('Venue capacity', validators=[Optional(), NumberRange(min=0)])
    is_free = BooleanField('Free event', default=True)
    ticket_price = DecimalField('Ticket price', places=2, validators=[Optional(), NumberRange(min=0)])
    currency = StringField('Currency', validators=[Optional(), Length(max=3)], default='PHP')
    requires_booking = BooleanField('Requires booking')
    max_attendees = IntegerField('Max attendees', validators=[Optional(), NumberRange(min=0)])
    sort_order = IntegerField('Sort order', validators=[Optional()], default=0)
    is_published = BooleanField('Published')
    is_featured = BooleanField('Featured')
    is_pinned = BooleanField('Pinned')


class HeroSlideForm(EntityForm):
    LIST_FIELDS = ('target_pages', 'target_audience')

    title = StringField('Title', validators=[DataRequired(message='Title is required'), Length(max=200)])
    subtitle = StringField('Subtitle', validators=[Optional()])
    description = TextAreaField('Description', validators=[Optional()])
    button_text = StringField('Button text', validators=[Optional()])
    button_url = StringField('Button URL', validators=[Optional()])
    background_image = StringField('Background image URL', validators=[Optional()])
    background_video = StringField('Background video URL', validators=[Optional()])
    overlay_image = StringField('Overlay image URL', validators=[Optional()])
    display_type = SelectField('Display type', choices=[(v, v.title()) for v in DISPLAY_TYPES], default='fullscreen')
    text_alignment = SelectField('Text alignment', choices=[(v, v.title()) for v in TEXT_ALIGNMENTS], default='center')
    overlay_color = StringField('Overlay color', validators=[Optional(), Regexp(HEX_COLOR_PATTERN)], default='#000000')
    overlay_opacity = FloatField('Overlay opacity', validators=[Optional(), NumberRange(min=0, max=1, message='Overlay opacity must be between 0 and 1')], default=0.4)
    text_color = StringField('Text color', validators=[Optional()], default='white')
    primary_button_text = StringField('Primary button text', validators=[Optional()])
    primary_button_url = StringField('Primary button URL', validators=[Optional()])
    primary_button_style = SelectField('Primary button style', choices=[(v, v.title()) for v in BUTTON_STYLES], default='contained')
    secondary_button_text = StringField('Secondary button text', validators=[Optional()])
    secondary_button_url = StringField('Secondary button URL', validators=[Optional()])
    secondary_button_style = SelectField('Secondary button style', choices=[(v, v.title()) for v in BUTTON_STYLES], default='outlined')
    show_from = DateTimeLocalField('Show from', format='%Y-%m-%dT%H:%M', validators=[Optional()])
    show_until = DateTimeLocalField('Show until', format='%Y-%m-%dT%H:%M', validators=[Optional()])
    target_pages = StringField('Target pages (blank = all)', validators=[Optional()])
    target_audience = StringField('Target audience', validators=[Optional()])
    alt_text = StringField('Alt text', validators=[Optional()])
    caption = StringField('Caption', validators=[Optional()])
    sort_order = IntegerField('Sort order', validators=[Optional()], default=0)
    is_active = BooleanField('Active', default=True)
    is_featured = BooleanField('Featured')


class SpecialOfferForm(EntityForm):
    business_unit_id = SelectField('Property', coerce=optional_int, validators=[Optional()])
    title = StringField('Title', validators=[DataRequired(message='Title is required'), Length(max=200)])
    slug = StringField('Slug', validators=[Optional(), Regexp(SLUG_PATTERN, message='Use lowercase letters, digits and hyphens')])
    subtitle = StringField('Subtitle', validators=[Optional()])
    description = TextAreaField('Description', validators=[Optional()])
    short_desc = StringField('Short description', validators=[Optional(), Length(max=300)])
    type = SelectField('Type', choices=enum_choices(OFFER_TYPES), default='ROOM_DISCOUNT')
    status = SelectField('Status', choices=enum_choices(OFFER_STATUSES), default='ACTIVE')
    offer_price = DecimalField('Offer price', places=2,
                               validators=[DataRequired(message='Offer price is required'), NumberRange(min=0)])
    original_price = DecimalField('Original price', places=2, validators=[Optional(), NumberRange(min=0)])
    currency = StringField('Currency', validators=[Optional(), Length(max=3)], default='PHP')
    valid_from = DateField('Valid from', validators=[DataRequired(message='Valid from is required')])
    valid_to = DateField('Valid to', validators=[DataRequired(message='Valid to is required')])
    sort_order = IntegerField('Sort order', validators=[Optional()], default=0)
    is_published = BooleanField('Published')
    is_featured = BooleanField('Featured')
    is_pinned = BooleanField('Pinned')


class TestimonialForm(EntityForm):
    guest_name = StringField('Guest name', validators=[DataRequired(message='Guest name is required')])
    guest_title = StringField('Guest title', validators=[Optional()])
    guest_image = StringField('Guest image URL', validators=[Optional()])
    guest_country = StringField('Country', validators=[Optional()])
    content = TextAreaField('Testimonial', validators=[DataRequired(message='Content is required')])
    rating = IntegerField('Rating', validators=[DataRequired(message='Rating is required'),
                                                NumberRange(min=1, max=5, message='Rating must be between 1 and 5')],
                          default=5)
    source = StringField('Source', validators=[Optional()])
    source_url = StringField('Source URL', validators=[Optional()])
    stay_date = DateField('Stay date', validators=[Optional()])
    review_date = DateField('Review date', validators=[Optional()])
    sort_order = IntegerField('Sort order', validators=[Optional()], default=0)
    is_active = BooleanField('Active', default=True)
    is_featured = BooleanField('Featured')


class FaqForm(EntityForm):
    question = StringField('Question', validators=[DataRequired(message='Question is required')])
    answer = TextAreaField('Answer', validators=[DataRequired(message='Answer is required')])
    category = StringField('Category', validators=[DataRequired(message='Category is required')])
    sort_order = IntegerField('Sort order', validators=[Optional()], default=0)
    is_active = BooleanField('Active', default=True)
