"""
SQL queries as constants for better maintainability.

All queries are defined here to avoid SQL string literals scattered
throughout the codebase. The schema mirrors the taxonomy tables of the
planning database: nodes, junctions, and the exception lists (shared
campaigns, overrides, compatibility aliases) kept as data.
"""

# ==================== Schema ====================

CREATE_SCHEMA = """
    CREATE TABLE IF NOT EXISTS business_units (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL UNIQUE
    );

    CREATE TABLE IF NOT EXISTS categories (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL UNIQUE,
        business_unit_id INTEGER REFERENCES business_units(id)
    );

    CREATE TABLE IF NOT EXISTS ranges (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL UNIQUE
    );

    CREATE TABLE IF NOT EXISTS campaigns (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL UNIQUE,
        range_id INTEGER REFERENCES ranges(id)
    );

    CREATE TABLE IF NOT EXISTS category_to_range (
        category_id INTEGER NOT NULL REFERENCES categories(id),
        range_id INTEGER NOT NULL REFERENCES ranges(id),
        PRIMARY KEY (category_id, range_id)
    );

    CREATE TABLE IF NOT EXISTS range_to_campaign (
        range_id INTEGER NOT NULL REFERENCES ranges(id),
        campaign_id INTEGER NOT NULL REFERENCES campaigns(id),
        PRIMARY KEY (range_id, campaign_id)
    );

    CREATE TABLE IF NOT EXISTS shared_campaigns (
        campaign_name TEXT PRIMARY KEY
    );

    CREATE TABLE IF NOT EXISTS campaign_range_overrides (
        campaign_name TEXT NOT NULL,
        range_name TEXT NOT NULL,
        PRIMARY KEY (campaign_name, range_name)
    );

    CREATE TABLE IF NOT EXISTS campaign_compatibility (
        campaign_name TEXT NOT NULL,
        range_name TEXT NOT NULL,
        PRIMARY KEY (campaign_name, range_name)
    );

    CREATE TABLE IF NOT EXISTS category_compatibility (
        category_name TEXT NOT NULL,
        range_name TEXT NOT NULL,
        PRIMARY KEY (category_name, range_name)
    );

    CREATE TABLE IF NOT EXISTS media_types (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL UNIQUE
    );

    CREATE TABLE IF NOT EXISTS media_subtypes (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL,
        media_type_id INTEGER NOT NULL REFERENCES media_types(id),
        UNIQUE (name, media_type_id)
    );

    CREATE TABLE IF NOT EXISTS campaign_archetypes (
        name TEXT PRIMARY KEY
    );
"""

# ==================== Node Queries ====================

SELECT_BUSINESS_UNITS = """
    SELECT id, name FROM business_units ORDER BY name
"""

SELECT_CATEGORIES = """
    SELECT c.id, c.name, bu.name AS business_unit
    FROM categories c
    LEFT JOIN business_units bu ON bu.id = c.business_unit_id
    ORDER BY c.name
"""

SELECT_RANGES = """
    SELECT id, name FROM ranges ORDER BY name
"""

SELECT_CAMPAIGNS = """
    SELECT c.id, c.name, r.name AS range_name
    FROM campaigns c
    LEFT JOIN ranges r ON r.id = c.range_id
    ORDER BY c.name
"""

# ==================== Junction Queries ====================

SELECT_CATEGORY_RANGES = """
    SELECT c.name AS category_name, r.name AS range_name
    FROM category_to_range cr
    JOIN categories c ON c.id = cr.category_id
    JOIN ranges r ON r.id = cr.range_id
    ORDER BY c.name, r.name
"""

SELECT_RANGE_CAMPAIGNS = """
    SELECT r.name AS range_name, c.name AS campaign_name
    FROM range_to_campaign rc
    JOIN ranges r ON r.id = rc.range_id
    JOIN campaigns c ON c.id = rc.campaign_id
    ORDER BY r.name, c.name
"""

# ==================== Exception List Queries ====================

SELECT_SHARED_CAMPAIGNS = """
    SELECT campaign_name FROM shared_campaigns ORDER BY campaign_name
"""

SELECT_CAMPAIGN_OVERRIDES = """
    SELECT campaign_name, range_name FROM campaign_range_overrides
    ORDER BY campaign_name, range_name
"""

SELECT_CAMPAIGN_COMPATIBILITY = """
    SELECT campaign_name, range_name FROM campaign_compatibility
    ORDER BY campaign_name, range_name
"""

SELECT_CATEGORY_COMPATIBILITY = """
    SELECT category_name, range_name FROM category_compatibility
    ORDER BY category_name, range_name
"""

# ==================== Media Queries ====================

SELECT_MEDIA_TYPES = """
    SELECT name FROM media_types ORDER BY name
"""

SELECT_MEDIA_SUBTYPES = """
    SELECT mt.name AS media_name, ms.name AS subtype_name
    FROM media_subtypes ms
    JOIN media_types mt ON mt.id = ms.media_type_id
    ORDER BY mt.name, ms.name
"""

SELECT_CAMPAIGN_ARCHETYPES = """
    SELECT name FROM campaign_archetypes ORDER BY name
"""

# ==================== Inserts ====================

INSERT_BUSINESS_UNIT = """
    INSERT OR IGNORE INTO business_units (name) VALUES (?)
"""

INSERT_CATEGORY = """
    INSERT OR IGNORE INTO categories (name, business_unit_id)
    VALUES (?, (SELECT id FROM business_units WHERE name = ?))
"""

INSERT_RANGE = """
    INSERT OR IGNORE INTO ranges (name) VALUES (?)
"""

INSERT_CAMPAIGN = """
    INSERT OR IGNORE INTO campaigns (name, range_id)
    VALUES (?, (SELECT id FROM ranges WHERE name = ?))
"""

INSERT_CATEGORY_RANGE = """
    INSERT OR IGNORE INTO category_to_range (category_id, range_id)
    SELECT c.id, r.id FROM categories c, ranges r
    WHERE c.name = ? AND r.name = ?
"""

INSERT_RANGE_CAMPAIGN = """
    INSERT OR IGNORE INTO range_to_campaign (range_id, campaign_id)
    SELECT r.id, c.id FROM ranges r, campaigns c
    WHERE r.name = ? AND c.name = ?
"""

INSERT_SHARED_CAMPAIGN = """
    INSERT OR IGNORE INTO shared_campaigns (campaign_name) VALUES (?)
"""

INSERT_CAMPAIGN_OVERRIDE = """
    INSERT OR IGNORE INTO campaign_range_overrides (campaign_name, range_name) VALUES (?, ?)
"""

INSERT_CAMPAIGN_COMPATIBILITY = """
    INSERT OR IGNORE INTO campaign_compatibility (campaign_name, range_name) VALUES (?, ?)
"""

INSERT_CATEGORY_COMPATIBILITY = """
    INSERT OR IGNORE INTO category_compatibility (category_name, range_name) VALUES (?, ?)
"""

INSERT_MEDIA_TYPE = """
    INSERT OR IGNORE INTO media_types (name) VALUES (?)
"""

INSERT_MEDIA_SUBTYPE = """
    INSERT OR IGNORE INTO media_subtypes (name, media_type_id)
    VALUES (?, (SELECT id FROM media_types WHERE name = ?))
"""

INSERT_CAMPAIGN_ARCHETYPE = """
    INSERT OR IGNORE INTO campaign_archetypes (name) VALUES (?)
"""
