"""
Database schema definitions.
Table creation, indexes, and structure management.
"""


def drop_tables(db):
    """Drop all existing tables."""
    # Disable foreign key constraints before dropping
    db.execute('PRAGMA foreign_keys = OFF')

    tables = [
        'audit_log',
        'payments',
        'reservation_rooms',
        'reservations',
        'rooms',
        'room_types',
        'guests',
        'faqs',
        'testimonials',
        'special_offers',
        'hero_slides',
        'events',
        'restaurants',
        'business_units',
        'role_permissions',
        'permissions',
        'roles',
        'users'
    ]

    for table in tables:
        db.execute(f'DROP TABLE IF EXISTS {table}')

    # Re-enable foreign key constraints
    db.execute('PRAGMA foreign_keys = ON')


def create_tables(db):
    """Create all database tables."""

    # 1. Users & Auth Tables
    db.execute('''
        CREATE TABLE users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT UNIQUE NOT NULL,
            email TEXT UNIQUE NOT NULL,
            password_hash TEXT NOT NULL,
            full_name TEXT,
            role_id INTEGER REFERENCES roles(id),
            active INTEGER DEFAULT 1,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            last_login TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE roles (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT UNIQUE NOT NULL,
            display_name TEXT NOT NULL,
            description TEXT,
            is_system INTEGER DEFAULT 0,
            active INTEGER DEFAULT 1,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE permissions (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            code TEXT UNIQUE NOT NULL,
            name TEXT NOT NULL,
            description TEXT,
            module TEXT NOT NULL,
            parent_permission_id INTEGER REFERENCES permissions(id),
            is_menu_item INTEGER DEFAULT 0,
            menu_order INTEGER DEFAULT 0,
            menu_icon TEXT,
            menu_url TEXT,
            active INTEGER DEFAULT 1
        )
    ''')

    db.execute('''
        CREATE TABLE role_permissions (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            role_id INTEGER NOT NULL REFERENCES roles(id) ON DELETE CASCADE,
            permission_id INTEGER NOT NULL REFERENCES permissions(id) ON DELETE CASCADE,
            granted_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            UNIQUE(role_id, permission_id)
        )
    ''')

    # 2. Properties & Outlets
    db.execute('''
        CREATE TABLE business_units (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            display_name TEXT NOT NULL,
            description TEXT,
            short_description TEXT,
            property_type TEXT NOT NULL DEFAULT 'HOTEL',
            city TEXT NOT NULL,
            state TEXT,
            country TEXT NOT NULL DEFAULT 'Philippines',
            address TEXT,
            latitude REAL,
            longitude REAL,
            phone TEXT,
            email TEXT,
            website TEXT,
            slug TEXT UNIQUE NOT NULL,
            is_active INTEGER DEFAULT 1,
            is_published INTEGER DEFAULT 0,
            is_featured INTEGER DEFAULT 0,
            sort_order INTEGER DEFAULT 0,
            primary_color TEXT,
            secondary_color TEXT,
            logo TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE restaurants (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            business_unit_id INTEGER NOT NULL REFERENCES business_units(id),
            name TEXT NOT NULL,
            slug TEXT NOT NULL,
            description TEXT,
            short_desc TEXT,
            type TEXT NOT NULL DEFAULT 'CASUAL_DINING',
            cuisine TEXT DEFAULT '[]',
            location TEXT,
            phone TEXT,
            email TEXT,
            operating_hours TEXT,
            features TEXT DEFAULT '[]',
            price_range TEXT,
            average_meal REAL,
            currency TEXT DEFAULT 'PHP',
            is_active INTEGER DEFAULT 1,
            is_published INTEGER DEFAULT 0,
            is_featured INTEGER DEFAULT 0,
            sort_order INTEGER DEFAULT 0,
            view_count INTEGER DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            UNIQUE(business_unit_id, slug)
        )
    ''')

    # 3. CMS Content
    db.execute('''
        CREATE TABLE events (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            business_unit_id INTEGER NOT NULL REFERENCES business_units(id),
            title TEXT NOT NULL,
            slug TEXT UNIQUE NOT NULL,
            description TEXT,
            short_desc TEXT,
            type TEXT NOT NULL DEFAULT 'ENTERTAINMENT',
            status TEXT NOT NULL DEFAULT 'PLANNING',
            start_date DATE NOT NULL,
            end_date DATE NOT NULL,
            start_time TEXT,
            end_time TEXT,
            venue TEXT,
            venue_details TEXT,
            venue_capacity INTEGER,
            is_free INTEGER DEFAULT 1,
            ticket_price REAL,
            currency TEXT DEFAULT 'PHP',
            requires_booking INTEGER DEFAULT 0,
            max_attendees INTEGER,
            is_published INTEGER DEFAULT 0,
            is_featured INTEGER DEFAULT 0,
            is_pinned INTEGER DEFAULT 0,
            sort_order INTEGER DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE hero_slides (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            subtitle TEXT,
            description TEXT,
            button_text TEXT,
            button_url TEXT,
            background_image TEXT,
            background_video TEXT,
            overlay_image TEXT,
            is_active INTEGER DEFAULT 1,
            is_featured INTEGER DEFAULT 0,
            sort_order INTEGER DEFAULT 0,
            display_type TEXT DEFAULT 'fullscreen',
            text_alignment TEXT DEFAULT 'center',
            overlay_color TEXT DEFAULT '#000000',
            overlay_opacity REAL DEFAULT 0.4,
            text_color TEXT DEFAULT 'white',
            primary_button_text TEXT,
            primary_button_url TEXT,
            primary_button_style TEXT DEFAULT 'contained',
            secondary_button_text TEXT,
            secondary_button_url TEXT,
            secondary_button_style TEXT DEFAULT 'outlined',
            show_from TIMESTAMP,
            show_until TIMESTAMP,
            target_pages TEXT DEFAULT '[]',
            target_audience TEXT DEFAULT '[]',
            alt_text TEXT,
            caption TEXT,
            view_count INTEGER DEFAULT 0,
            click_count INTEGER DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE special_offers (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            business_unit_id INTEGER REFERENCES business_units(id),
            title TEXT NOT NULL,
            slug TEXT UNIQUE NOT NULL,
            subtitle TEXT,
            description TEXT,
            short_desc TEXT,
            type TEXT NOT NULL DEFAULT 'ROOM_DISCOUNT',
            status TEXT NOT NULL DEFAULT 'ACTIVE',
            offer_price REAL NOT NULL DEFAULT 0,
            original_price REAL,
            savings_amount REAL,
            savings_percent INTEGER,
            currency TEXT DEFAULT 'PHP',
            valid_from DATE NOT NULL,
            valid_to DATE NOT NULL,
            is_published INTEGER DEFAULT 0,
            is_featured INTEGER DEFAULT 0,
            is_pinned INTEGER DEFAULT 0,
            sort_order INTEGER DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE testimonials (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            guest_name TEXT NOT NULL,
            guest_title TEXT,
            guest_image TEXT,
            guest_country TEXT,
            content TEXT NOT NULL,
            rating INTEGER DEFAULT 5,
            source TEXT,
            source_url TEXT,
            stay_date DATE,
            review_date DATE,
            is_active INTEGER DEFAULT 1,
            is_featured INTEGER DEFAULT 0,
            sort_order INTEGER DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE faqs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            question TEXT NOT NULL,
            answer TEXT NOT NULL,
            category TEXT NOT NULL,
            is_active INTEGER DEFAULT 1,
            sort_order INTEGER DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    # 4. Guests & Rooms
    db.execute('''
        CREATE TABLE guests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            business_unit_id INTEGER REFERENCES business_units(id),
            title TEXT,
            first_name TEXT NOT NULL,
            last_name TEXT NOT NULL,
            email TEXT UNIQUE NOT NULL,
            phone TEXT,
            date_of_birth DATE,
            nationality TEXT,
            country TEXT,
            address TEXT,
            city TEXT,
            state TEXT,
            postal_code TEXT,
            passport_number TEXT,
            passport_expiry DATE,
            id_number TEXT,
            id_type TEXT,
            preferences TEXT DEFAULT '[]',
            loyalty_number TEXT,
            vip_status INTEGER DEFAULT 0,
            marketing_opt_in INTEGER DEFAULT 0,
            source TEXT,
            notes TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE room_types (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            business_unit_id INTEGER NOT NULL REFERENCES business_units(id),
            name TEXT NOT NULL,
            display_name TEXT NOT NULL,
            description TEXT,
            type TEXT NOT NULL DEFAULT 'STANDARD',
            max_occupancy INTEGER DEFAULT 2,
            max_adults INTEGER DEFAULT 2,
            max_children INTEGER DEFAULT 0,
            max_infants INTEGER DEFAULT 0,
            bed_configuration TEXT,
            room_size REAL,
            has_balcony INTEGER DEFAULT 0,
            has_ocean_view INTEGER DEFAULT 0,
            has_pool_view INTEGER DEFAULT 0,
            has_kitchenette INTEGER DEFAULT 0,
            has_living_area INTEGER DEFAULT 0,
            smoking_allowed INTEGER DEFAULT 0,
            pet_friendly INTEGER DEFAULT 0,
            is_accessible INTEGER DEFAULT 0,
            base_rate REAL NOT NULL DEFAULT 0,
            extra_person_rate REAL,
            extra_child_rate REAL,
            floor_plan TEXT,
            is_active INTEGER DEFAULT 1,
            sort_order INTEGER DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            UNIQUE(business_unit_id, name)
        )
    ''')

    db.execute('''
        CREATE TABLE rooms (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            business_unit_id INTEGER NOT NULL REFERENCES business_units(id),
            room_type_id INTEGER NOT NULL REFERENCES room_types(id),
            room_number TEXT NOT NULL,
            floor INTEGER,
            status TEXT NOT NULL DEFAULT 'AVAILABLE',
            is_active INTEGER DEFAULT 1,
            notes TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            UNIQUE(business_unit_id, room_number)
        )
    ''')

    # 5. Reservations & Payments
    db.execute('''
        CREATE TABLE reservations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            business_unit_id INTEGER NOT NULL REFERENCES business_units(id),
            guest_id INTEGER NOT NULL REFERENCES guests(id),
            confirmation_number TEXT UNIQUE NOT NULL,
            status TEXT NOT NULL DEFAULT 'PENDING',
            check_in_date DATE NOT NULL,
            check_out_date DATE NOT NULL,
            nights INTEGER NOT NULL,
            adults INTEGER DEFAULT 1,
            children INTEGER DEFAULT 0,
            total_amount REAL NOT NULL DEFAULT 0,
            currency TEXT DEFAULT 'PHP',
            special_requests TEXT,
            internal_notes TEXT,
            source TEXT DEFAULT 'DIRECT',
            payment_status TEXT DEFAULT 'PENDING',
            confirmed_at TIMESTAMP,
            cancelled_at TIMESTAMP,
            cancellation_reason TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE reservation_rooms (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            reservation_id INTEGER NOT NULL REFERENCES reservations(id) ON DELETE CASCADE,
            room_type_id INTEGER NOT NULL REFERENCES room_types(id),
            room_id INTEGER REFERENCES rooms(id),
            base_rate REAL NOT NULL,
            total_amount REAL NOT NULL
        )
    ''')

    db.execute('''
        CREATE TABLE payments (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            reservation_id INTEGER NOT NULL REFERENCES reservations(id),
            amount REAL NOT NULL,
            currency TEXT DEFAULT 'PHP',
            status TEXT NOT NULL DEFAULT 'PENDING',
            method TEXT NOT NULL DEFAULT 'CASH',
            transaction_id TEXT,
            processed_at TIMESTAMP,
            refunded_at TIMESTAMP,
            refund_amount REAL,
            refund_reason TEXT,
            notes TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    # 6. Audit
    db.execute('''
        CREATE TABLE audit_log (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INTEGER REFERENCES users(id),
            action TEXT NOT NULL,
            entity_type TEXT NOT NULL,
            entity_id INTEGER,
            changes TEXT,
            ip_address TEXT,
            user_agent TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')


def create_indexes(db):
    """Create indexes for frequent lookups."""
    indexes = [
        'CREATE INDEX idx_restaurants_unit ON restaurants(business_unit_id)',
        'CREATE INDEX idx_events_unit ON events(business_unit_id)',
        'CREATE INDEX idx_events_dates ON events(start_date, end_date)',
        'CREATE INDEX idx_offers_validity ON special_offers(valid_from, valid_to)',
        'CREATE INDEX idx_rooms_type ON rooms(room_type_id)',
        'CREATE INDEX idx_reservations_unit ON reservations(business_unit_id)',
        'CREATE INDEX idx_reservations_guest ON reservations(guest_id)',
        'CREATE INDEX idx_reservations_status ON reservations(status)',
        'CREATE INDEX idx_reservations_dates ON reservations(check_in_date, check_out_date)',
        'CREATE INDEX idx_reservation_rooms_res ON reservation_rooms(reservation_id)',
        'CREATE INDEX idx_payments_reservation ON payments(reservation_id)',
        'CREATE INDEX idx_payments_status ON payments(status)',
        'CREATE INDEX idx_audit_entity ON audit_log(entity_type, entity_id)',
        'CREATE INDEX idx_audit_created ON audit_log(created_at)',
    ]

    for statement in indexes:
        db.execute(statement)
