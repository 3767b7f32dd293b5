"""
School record and its PostgreSQL repository
"""
import logging
from contextlib import contextmanager
from dataclasses import asdict, dataclass

import psycopg2
from psycopg2.extras import RealDictCursor

from .errors import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class School:
    """A registered school with its resolved coordinates"""
    id: str
    name: str
    address: str
    latitude: float
    longitude: float

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class SearchResult:
    """A school together with its distance (km) from a searched location"""
    school: School
    distance: float

    def to_dict(self):
        data = self.school.to_dict()
        data['distance'] = self.distance
        return data


@dataclass
class SearchResults:
    location: str
    schools: list

    def to_dict(self):
        return {
            'location': self.location,
            'count': len(self.schools),
            'schools': [result.to_dict() for result in self.schools],
        }


class SchoolRepository:
    """Reads and writes the school table through a psycopg2 connection pool"""

    def __init__(self, pool):
        self.pool = pool

    @contextmanager
    def _connection(self):
        """Borrow a connection from the pool and always hand it back"""
        try:
            conn = self.pool.getconn()
        except psycopg2.Error as e:
            raise StorageError(f'Database connection failed: {e}') from e
        try:
            yield conn
        finally:
            self.pool.putconn(conn)

    @staticmethod
    def _rollback(conn):
        """Roll back if the connection still allows it; a dropped connection cannot"""
        try:
            conn.rollback()
        except psycopg2.Error as e:
            logger.warning(f'Rollback failed: {e}')

    def list_all(self):
        """Return every school; order is not significant"""
        with self._connection() as conn:
            try:
                cursor = conn.cursor(cursor_factory=RealDictCursor)
                cursor.execute("""
                    SELECT id, name, address, latitude, longitude
                    FROM school
                """)
                rows = cursor.fetchall()
                cursor.close()
                conn.commit()
            except psycopg2.Error as e:
                self._rollback(conn)
                raise StorageError(f'Database query failed: {e}') from e

        return [
            School(
                id=row['id'],
                name=row['name'],
                address=row['address'],
                latitude=float(row['latitude']),
                longitude=float(row['longitude']),
            )
            for row in rows
        ]

    def insert(self, school):
        """Persist a fully geocoded school"""
        if school.latitude is None or school.longitude is None:
            raise ValueError(f'School {school.id} has no resolved coordinates')

        with self._connection() as conn:
            try:
                cursor = conn.cursor()
                cursor.execute("""
                    INSERT INTO school (id, name, address, latitude, longitude)
                    VALUES (%s, %s, %s, %s, %s)
                """, (school.id, school.name, school.address,
                      school.latitude, school.longitude))
                conn.commit()
                cursor.close()
            except psycopg2.Error as e:
                self._rollback(conn)
                raise StorageError(f'Database insert failed: {e}') from e

        logger.info(f'Inserted school {school.id} ({school.name})')

    def count(self):
        """Number of stored schools"""
        with self._connection() as conn:
            try:
                cursor = conn.cursor()
                cursor.execute('SELECT COUNT(*) FROM school')
                total = cursor.fetchone()[0]
                cursor.close()
                conn.commit()
            except psycopg2.Error as e:
                self._rollback(conn)
                raise StorageError(f'Database query failed: {e}') from e
        return total
