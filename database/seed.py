"""
Database seed data.
Initial data population for fresh database installations.
"""

from werkzeug.security import generate_password_hash


# (code, name, module, menu_order, icon, url)
MENU_TREE = [
    (('menu.overview', 'Overview', 'overview', 10, 'fa-gauge'), [
        ('admin.dashboard.view', 'Dashboard', 'overview', 11, 'fa-chart-simple', '/admin/'),
    ]),
    (('menu.operations', 'Operations', 'operations', 20, 'fa-hotel'), [
        ('operations.properties.view', 'Properties', 'operations', 21, 'fa-building', '/admin/operations/properties'),
        ('operations.restaurants.view', 'Restaurants', 'operations', 22, 'fa-utensils', '/admin/operations/restaurants'),
        ('operations.room_types.view', 'Room Types', 'operations', 23, 'fa-layer-group', '/admin/operations/room-types'),
        ('operations.rooms.view', 'Rooms', 'operations', 24, 'fa-door-closed', '/admin/operations/rooms'),
        ('operations.guests.view', 'Guests', 'operations', 25, 'fa-users', '/admin/operations/guests'),
        ('operations.reservations.view', 'Reservations', 'operations', 26, 'fa-calendar-check', '/admin/operations/reservations'),
        ('operations.payments.view', 'Payments', 'operations', 27, 'fa-credit-card', '/admin/operations/payments'),
    ]),
    (('menu.cms', 'Content', 'cms', 30, 'fa-pen-ruler'), [
        ('cms.hero.view', 'Hero Slides', 'cms', 31, 'fa-panorama', '/admin/cms/hero'),
        ('cms.events.view', 'Events', 'cms', 32, 'fa-calendar-days', '/admin/cms/events'),
        ('cms.offers.view', 'Special Offers', 'cms', 33, 'fa-tags', '/admin/cms/special-offers'),
        ('cms.testimonials.view', 'Testimonials', 'cms', 34, 'fa-quote-left', '/admin/cms/testimonials'),
        ('cms.faqs.view', 'FAQs', 'cms', 35, 'fa-circle-question', '/admin/cms/faqs'),
    ]),
    (('menu.admin', 'Administration', 'admin', 40, 'fa-shield-halved'), [
        ('admin.audit.view', 'Audit Log', 'admin', 41, 'fa-clipboard-list', '/admin/audit'),
    ]),
]

ACTION_PERMISSIONS = [
    ('operations.properties.manage', 'Manage Properties', 'operations'),
    ('operations.restaurants.manage', 'Manage Restaurants', 'operations'),
    ('operations.room_types.manage', 'Manage Room Types', 'operations'),
    ('operations.rooms.manage', 'Manage Rooms', 'operations'),
    ('operations.guests.manage', 'Manage Guests', 'operations'),
    ('operations.reservations.change_state', 'Confirm/Cancel Reservations', 'operations'),
    ('operations.payments.manage', 'Change Payment Status', 'operations'),
    ('operations.payments.refund', 'Refund Payments', 'operations'),
    ('operations.payments.export', 'Export Payments', 'operations'),
    ('cms.hero.manage', 'Manage Hero Slides', 'cms'),
    ('cms.events.manage', 'Manage Events', 'cms'),
    ('cms.offers.manage', 'Manage Special Offers', 'cms'),
    ('cms.testimonials.manage', 'Manage Testimonials', 'cms'),
    ('cms.faqs.manage', 'Manage FAQs', 'cms'),
]


def seed_database(db):
    """Insert initial seed data."""

    # 1. Create Roles
    roles_data = [
        ('admin', 'Administrator', 'Full system access', 1),
        ('manager', 'Property Manager', 'Operations and content management', 1),
        ('staff', 'Front Desk', 'Daily reservation and guest handling', 1),
        ('readonly', 'Read Only', 'View data without changes', 1)
    ]

    for name, display_name, description, is_system in roles_data:
        db.execute('''
            INSERT INTO roles (name, display_name, description, is_system)
            VALUES (?, ?, ?, ?)
        ''', (name, display_name, description, is_system))

    # 2. Menu permissions (parents first, then children)
    for (code, name, module, menu_order, icon), children in MENU_TREE:
        cursor = db.execute('''
            INSERT INTO permissions (code, name, module, is_menu_item, menu_order, menu_icon)
            VALUES (?, ?, ?, 1, ?, ?)
        ''', (code, name, module, menu_order, icon))
        parent_id = cursor.lastrowid

        for child_code, child_name, child_module, child_order, child_icon, url in children:
            db.execute('''
                INSERT INTO permissions (code, name, module, is_menu_item, menu_order,
                                         menu_icon, menu_url, parent_permission_id)
                VALUES (?, ?, ?, 1, ?, ?, ?, ?)
            ''', (child_code, child_name, child_module, child_order, child_icon, url, parent_id))

    # 3. Non-menu action permissions
    for code, name, module in ACTION_PERMISSIONS:
        db.execute('''
            INSERT INTO permissions (code, name, module, is_menu_item)
            VALUES (?, ?, ?, 0)
        ''', (code, name, module))

    # 4. Assign Permissions to Roles
    role_ids = {
        row[1]: row[0] for row in db.execute('SELECT id, name FROM roles').fetchall()
    }

    grants = {
        'admin': 'SELECT id FROM permissions',
        'manager': '''
            SELECT id FROM permissions
            WHERE code LIKE 'operations.%'
               OR code LIKE 'cms.%'
               OR code LIKE 'menu.%'
               OR code = 'admin.dashboard.view'
        ''',
        'staff': '''
            SELECT id FROM permissions
            WHERE (code LIKE '%.view' AND code != 'admin.audit.view')
               OR code = 'operations.guests.manage'
               OR code = 'operations.reservations.change_state'
               OR code IN ('menu.overview', 'menu.operations', 'menu.cms')
        ''',
        'readonly': '''
            SELECT id FROM permissions
            WHERE (code LIKE '%.view' AND code != 'admin.audit.view')
               OR code IN ('menu.overview', 'menu.operations', 'menu.cms')
        ''',
    }

    for role_name, query in grants.items():
        for perm in db.execute(query).fetchall():
            db.execute('INSERT INTO role_permissions (role_id, permission_id) VALUES (?, ?)',
                       (role_ids[role_name], perm[0]))

    # 5. Create Admin User
    password_hash = generate_password_hash('admin123')
    db.execute('''
        INSERT INTO users (username, email, password_hash, full_name, role_id, active)
        VALUES (?, ?, ?, ?, ?, ?)
    ''', ('admin', 'admin@hotelgroup.local', password_hash, 'System Administrator',
          role_ids['admin'], 1))
