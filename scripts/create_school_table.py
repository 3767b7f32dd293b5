"""
Create the school table in PostgreSQL
Run once before starting the web application
"""
import sys

import psycopg2

from schoolfinder.config import Config

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS school (
    id VARCHAR(36) PRIMARY KEY,
    name VARCHAR(255) NOT NULL,
    address TEXT NOT NULL,
    latitude DOUBLE PRECISION NOT NULL,
    longitude DOUBLE PRECISION NOT NULL
);
"""


def create_school_table(db_config):
    """Create the school table if it does not exist"""
    try:
        conn = psycopg2.connect(**db_config)
        print(f"✓ Connected to database: {db_config['database']}")
    except psycopg2.Error as e:
        print(f"✗ Error connecting to database: {e}")
        sys.exit(1)

    cursor = conn.cursor()
    try:
        print("=" * 70)
        print("Creating school table")
        print("=" * 70)

        cursor.execute(CREATE_TABLE_SQL)
        conn.commit()

        cursor.execute("SELECT COUNT(*) FROM school")
        print(f"\n✓ school table ready ({cursor.fetchone()[0]} rows)")
    except psycopg2.Error as e:
        conn.rollback()
        print(f"✗ Error creating table: {e}")
        sys.exit(1)
    finally:
        cursor.close()
        conn.close()


if __name__ == '__main__':
    create_school_table(Config.db_config())
