import math

import httpx
import pytest

from siderealday.geocode import GeocodingError, geocode_location


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_geocode_success(monkeypatch):
    monkeypatch.setenv("SIDEREALDAY_USER_AGENT", "test-agent")

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["q"] == "Reykjavik"
        assert request.url.params["limit"] == "1"
        assert request.headers["User-Agent"] == "test-agent"
        return httpx.Response(
            200,
            json=[{"lat": "64.1466", "lon": "-21.9426", "display_name": "Reykjavík, Iceland"}],
        )

    location = geocode_location("Reykjavik", client=_client(handler))
    assert location.name == "Reykjavík, Iceland"
    assert location.latitude == pytest.approx(math.radians(64.1466))
    assert location.longitude == pytest.approx(math.radians(-21.9426))


def test_geocode_not_found():
    client = _client(lambda request: httpx.Response(200, json=[]))
    with pytest.raises(GeocodingError, match="Place not found"):
        geocode_location("nowhere at all", client=client)


def test_geocode_http_error():
    client = _client(lambda request: httpx.Response(500))
    with pytest.raises(GeocodingError, match="request failed"):
        geocode_location("Reykjavik", client=client)


def test_geocode_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    with pytest.raises(GeocodingError):
        geocode_location("Reykjavik", client=_client(handler))
