"""
Application configuration loaded from the environment (and a local .env file)
"""
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables (single place for the app)
load_dotenv()


def convert_to_float(value: Optional[str]) -> Optional[float]:
    return float(value) if value is not None else None


def convert_to_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value is not None else None


class Config:
    # ----- Flask -----
    PORT = convert_to_int(os.getenv('PORT', '8080'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # ----- Mapbox -----
    MAP_TOKEN = os.getenv('MAP_TOKEN')
    MAPBOX_TIMEOUT = convert_to_float(os.getenv('MAPBOX_TIMEOUT', '10'))

    # ----- PostgreSQL -----
    DB_HOST = os.getenv('DB_HOST', 'localhost')
    DB_PORT = convert_to_int(os.getenv('DB_PORT', '5432'))
    DB_NAME = os.getenv('DB_NAME', 'schools_db')
    DB_USER = os.getenv('DB_USER', 'postgres')
    DB_PASSWORD = os.getenv('DB_PASSWORD', '')
    DB_SSL_CA = os.getenv('DB_SSL_CA')
    DB_POOL_MAX = convert_to_int(os.getenv('DB_POOL_MAX', '10'))

    REQUIRED = [
        'MAP_TOKEN',
        'DB_HOST',
        'DB_NAME',
        'DB_USER',
    ]

    @classmethod
    def db_config(cls) -> dict:
        """Keyword arguments for psycopg2.connect"""
        config = {
            'host': cls.DB_HOST,
            'port': cls.DB_PORT,
            'database': cls.DB_NAME,
            'user': cls.DB_USER,
            'password': cls.DB_PASSWORD,
        }
        if cls.DB_SSL_CA:
            config['sslmode'] = 'verify-full'
            config['sslrootcert'] = cls.DB_SSL_CA
        return config

    @classmethod
    def validate(cls) -> None:
        missing = [key for key in cls.REQUIRED if not getattr(cls, key)]
        if missing:
            raise RuntimeError(f"Missing required env vars: {', '.join(missing)}")
