"""
Error taxonomy shared by the geocoder, the repository and the orchestrators.
HTTP status codes are assigned in routes.py only.
"""
from enum import Enum


class ErrorKind(Enum):
    INVALID_REQUEST = 'invalid_request'
    GEOCODE_NOT_FOUND = 'geocode_not_found'
    GEOCODE_SERVICE_ERROR = 'geocode_service_error'
    STORAGE_ERROR = 'storage_error'


class SchoolFinderError(Exception):
    """Base error carrying a kind and a human-readable message"""

    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    @property
    def is_user_error(self):
        """True when the caller can fix the request and try again"""
        return self.kind in (ErrorKind.INVALID_REQUEST, ErrorKind.GEOCODE_NOT_FOUND)


class InvalidRequest(SchoolFinderError):
    kind = ErrorKind.INVALID_REQUEST


class GeocodeNotFound(SchoolFinderError):
    kind = ErrorKind.GEOCODE_NOT_FOUND


class GeocodeServiceError(SchoolFinderError):
    kind = ErrorKind.GEOCODE_SERVICE_ERROR


class StorageError(SchoolFinderError):
    kind = ErrorKind.STORAGE_ERROR
