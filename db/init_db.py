"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import QueryExecutor
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Customers table: one row per restaurant guest
CREATE TABLE IF NOT EXISTS customers (
    id              SERIAL PRIMARY KEY,
    first_name      TEXT NOT NULL,
    last_name       TEXT NOT NULL,
    phone           TEXT,
    notes           TEXT
);

-- Reservations table: read here only for per-customer lookups and counts
CREATE TABLE IF NOT EXISTS reservations (
    id              SERIAL PRIMARY KEY,
    customer_id     INTEGER NOT NULL REFERENCES customers(id),
    start_at        TIMESTAMP NOT NULL,
    num_guests      INTEGER NOT NULL CHECK (num_guests > 0),
    notes           TEXT
);

-- Indexes for faster queries
CREATE INDEX IF NOT EXISTS idx_reservations_customer ON reservations(customer_id);
CREATE INDEX IF NOT EXISTS idx_customers_name ON customers(last_name, first_name);
"""


def create_tables(db: QueryExecutor) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        db.execute(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import Database
    database = Database.from_config()
    try:
        create_tables(database)
    finally:
        database.close()
    print("Database schema created successfully.")
