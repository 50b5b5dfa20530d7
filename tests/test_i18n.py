from siderealday.i18n import _STRINGS, t


def test_every_key_has_both_languages():
    for key, entry in _STRINGS.items():
        assert set(entry) == {"ko", "en"}, key


def test_lookup_and_fallback():
    assert t("page_title", "en") == "Sidereal vs Solar Day"
    assert t("page_title", "fr") == "Sidereal vs Solar Day"
    assert t("no_such_key", "ko") == "no_such_key"


def test_format_kwargs():
    assert "7" in t("info_day", "en", day=7)
    assert "7" in t("info_day", "ko", day=7)
