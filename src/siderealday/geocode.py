"""Place-name lookup — resolves a search string to an ObserverLocation via Nominatim."""

import logging

import httpx

from siderealday.config import nominatim_url, user_agent
from siderealday.models import ObserverLocation

logger = logging.getLogger(__name__)


class GeocodingError(Exception):
    """Geocoder call failure."""


def _search_nominatim(
    query: str, client: httpx.Client
) -> tuple[float, float, str] | None:
    """Nominatim (OpenStreetMap) search. Returns (lat, lng, display_name) or None."""
    params = {"q": query, "format": "json", "limit": 1}
    resp = client.get(
        nominatim_url(),
        params=params,
        headers={"User-Agent": user_agent()},
        timeout=10,
    )
    resp.raise_for_status()
    results = resp.json()
    if not results:
        return None
    r = results[0]
    return float(r["lat"]), float(r["lon"]), r["display_name"]


def geocode_location(query: str, client: httpx.Client | None = None) -> ObserverLocation:
    """Resolve a place name to an observer location.

    Args:
        query: Place name in any language ("Reykjavik", "부산 가야동").
        client: HTTP client to use. A short-lived client is created if None.

    Returns:
        ObserverLocation in radians, named with the geocoder's display name.

    Raises:
        GeocodingError: On HTTP failure or when the place cannot be found.
    """
    logger.info("geocoding %r", query)
    try:
        if client is None:
            with httpx.Client() as owned:
                result = _search_nominatim(query, owned)
        else:
            result = _search_nominatim(query, client)
    except httpx.HTTPError as e:
        logger.warning("geocoder request failed for %r: %s", query, e)
        raise GeocodingError(f"Geocoder request failed: {e}") from e

    if result is None:
        logger.warning("no geocoder result for %r", query)
        raise GeocodingError(f"Place not found: {query}")

    lat, lng, display_name = result
    return ObserverLocation.from_degrees(lat, lng, display_name)
