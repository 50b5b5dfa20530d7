import math

import pytest

from siderealday.config import (
    PRESET_LOCATIONS,
    UnknownLocationError,
    default_location,
    get_preset_location,
    log_level,
    nominatim_url,
    user_agent,
)


def test_presets_in_radians():
    tokyo = get_preset_location("Tokyo, Japan")
    assert tokyo.latitude == pytest.approx(math.radians(35.68))
    assert tokyo.longitude == pytest.approx(math.radians(139.65))
    for location in PRESET_LOCATIONS.values():
        assert -math.pi / 2 <= location.latitude <= math.pi / 2
        assert -math.pi <= location.longitude <= math.pi


def test_unknown_preset():
    with pytest.raises(UnknownLocationError):
        get_preset_location("Atlantis")
    with pytest.raises(KeyError):
        get_preset_location("Atlantis")


def test_default_location_from_env(monkeypatch):
    monkeypatch.delenv("SIDEREALDAY_DEFAULT_LOCATION", raising=False)
    assert default_location().name == "Equator"
    monkeypatch.setenv("SIDEREALDAY_DEFAULT_LOCATION", "Cairo, Egypt")
    assert default_location() == PRESET_LOCATIONS["Cairo, Egypt"]


def test_log_level_is_upper_cased(monkeypatch):
    monkeypatch.delenv("SIDEREALDAY_LOG_LEVEL", raising=False)
    assert log_level() == "INFO"
    monkeypatch.setenv("SIDEREALDAY_LOG_LEVEL", "debug")
    assert log_level() == "DEBUG"


def test_geocoder_settings(monkeypatch):
    monkeypatch.delenv("SIDEREALDAY_NOMINATIM_URL", raising=False)
    monkeypatch.setenv("SIDEREALDAY_USER_AGENT", "test-agent")
    assert nominatim_url().startswith("https://nominatim.openstreetmap.org")
    assert user_agent() == "test-agent"
