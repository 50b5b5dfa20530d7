from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from siderealday import geocode
from siderealday.i18n import t

APP_PATH = str(Path(__file__).parent.parent / "src" / "siderealday" / "app.py")


@pytest.fixture
def failing_search(monkeypatch):
    def fail(query):
        raise geocode.GeocodingError(f"Place not found: {query}")

    monkeypatch.setattr(geocode, "geocode_location", fail)


def _search(at: AppTest, query: str) -> None:
    at.text_input(key="place_query").set_value(query)
    next(b for b in at.button if b.label == t("btn_search", "en")).click()
    at.run()


def test_failed_search_keeps_location_and_shows_error(failing_search):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    before = at.session_state["location"]

    _search(at, "nowhere")

    assert at.session_state["location"] == before
    assert at.session_state["error_msg"]
    assert len(at.error) == 1


def test_preset_clears_search_error(failing_search):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    _search(at, "nowhere")
    assert at.session_state["error_msg"]

    at.selectbox(key="preset").set_value("Tokyo, Japan").run()

    assert at.session_state["location"].name == "Tokyo, Japan"
    assert at.session_state["error_msg"] is None
    assert len(at.error) == 0


def test_custom_coordinates_clear_search_error(failing_search):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    _search(at, "nowhere")

    at.number_input(key="lat_deg").set_value(45.0).run()

    assert at.session_state["location"].name == t("custom_location", "en")
    assert at.session_state["error_msg"] is None
