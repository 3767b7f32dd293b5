"""
Geocoding Service - Address to Coordinates Conversion
Uses the Mapbox Geocoding v5 API for forward geocoding
"""
import logging
from typing import Optional, Tuple
from urllib.parse import quote

import requests

from .errors import GeocodeNotFound, GeocodeServiceError

logger = logging.getLogger(__name__)


class MapboxGeocoder:
    """Resolves free-text addresses to a (latitude, longitude) pair."""

    BASE_URL = 'https://api.mapbox.com/geocoding/v5/mapbox.places'

    def __init__(self, access_token: Optional[str], timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.access_token = access_token
        self.timeout = timeout
        self.session = session
        if not self.access_token:
            logger.warning('MAP_TOKEN not set - geocoding will not work')

    def forward_geocode(self, address: str) -> Tuple[float, float]:
        """
        Convert an address to coordinates using the single best match.

        Args:
            address: Free-text address or place name

        Returns:
            (latitude, longitude) in degrees

        Raises:
            GeocodeNotFound: the service returned no match
            GeocodeServiceError: the call itself failed (network, auth, quota)
        """
        query = (address or '').strip()
        if not query:
            raise GeocodeNotFound('Empty address')
        if not self.access_token:
            raise GeocodeServiceError('Mapbox access token is not configured')

        url = f"{self.BASE_URL}/{quote(query, safe='')}.json"
        params = {
            'access_token': self.access_token,
            'limit': 1,
        }

        try:
            # one request per call unless a caller supplies its own session
            http = self.session or requests
            response = http.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except requests.HTTPError as e:
            raise GeocodeServiceError(
                f'Mapbox returned HTTP {e.response.status_code} for {query!r}'
            ) from e
        except requests.Timeout as e:
            raise GeocodeServiceError(f'Mapbox request timed out for {query!r}') from e
        except (requests.RequestException, ValueError) as e:
            raise GeocodeServiceError(f'Mapbox request failed: {e}') from e

        features = body.get('features') or []
        if not features:
            logger.info(f'No geocoding results for address: {query}')
            raise GeocodeNotFound(f'No geocoding results for {query!r}')

        return self._coordinates(features[0])

    @staticmethod
    def _coordinates(feature) -> Tuple[float, float]:
        """Pull (latitude, longitude) out of a GeoJSON feature ([lon, lat] order)"""
        geometry = feature.get('geometry') or {}
        coords = geometry.get('coordinates') or feature.get('center') or []
        try:
            longitude, latitude = float(coords[0]), float(coords[1])
        except (IndexError, TypeError, ValueError) as e:
            raise GeocodeServiceError(f'Unparseable Mapbox feature: {feature!r}') from e
        return latitude, longitude
