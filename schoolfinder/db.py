"""
PostgreSQL connection pool owned by the application
"""
import logging

import psycopg2
from psycopg2.pool import ThreadedConnectionPool

from .errors import StorageError

logger = logging.getLogger(__name__)


def create_pool(db_config, max_connections=10):
    """
    Create a thread-safe connection pool.

    minconn is 0 so no connection is opened until the first request needs one.
    """
    try:
        pool = ThreadedConnectionPool(0, max_connections, **db_config)
    except psycopg2.Error as e:
        raise StorageError(f'Could not create database pool: {e}') from e
    logger.info(f"Database pool created for {db_config.get('database')} "
                f"at {db_config.get('host')}:{db_config.get('port')}")
    return pool


def close_pool(pool):
    """Close every connection held by the pool"""
    if pool is not None and not pool.closed:
        pool.closeall()
        logger.info('Database pool closed')
