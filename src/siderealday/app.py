"""Sidereal vs Solar Day — Streamlit app with an orbital view and a local sky view.

Run with:
    streamlit run src/siderealday/app.py

Each script run is one scheduler tick: the active clock is advanced with
time.monotonic(), both views are computed from that snapshot, and while
playing the script sleeps one frame and reruns.
"""

import logging
import time

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from siderealday.astronomy import (  # noqa: E402
    SOLAR_DAY_SECONDS,
    format_duration,
    format_time_of_day,
    rad2deg,
)
from siderealday.compute import compute_views  # noqa: E402
from siderealday.config import (  # noqa: E402
    FRAME_INTERVAL,
    PRESET_LOCATIONS,
    REDUCED_MOTION_INTERVAL,
    SLIDER_MAX_DAYS,
    default_location,
    log_level,
)
from siderealday.drift import (  # noqa: E402
    cumulative_drift,
    day_count_difference_minutes,
    seconds_to_minutes,
    sidereal_days_elapsed,
    solar_days_elapsed,
)
from siderealday.geocode import GeocodingError, geocode_location  # noqa: E402
from siderealday.i18n import t  # noqa: E402
from siderealday.models import (  # noqa: E402
    DaySpeed,
    ObserverLocation,
    PlaySpeed,
    StepMode,
    VisualOptions,
)
from siderealday.playback import ContinuousClock, SteppedClock, TimeSource  # noqa: E402
from siderealday.renderers.plotly_2d import (  # noqa: E402
    render_orbital_figure,
    render_sky_figure,
)

logging.basicConfig(
    level=log_level(),
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("siderealday.app")

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in, at which point _lang is set correctly.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="✦",
    layout="wide",
)

# --- Session state initialization ---
# The clocks are the only writers of simulation time; views only read snapshots.

if "continuous" not in st.session_state:
    st.session_state.continuous = ContinuousClock(now=time.monotonic())
if "stepped" not in st.session_state:
    st.session_state.stepped = SteppedClock(now=time.monotonic())
if "mode" not in st.session_state:
    st.session_state.mode = "stepped"
if "location" not in st.session_state:
    st.session_state.location = default_location()
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

_MODES = {"stepped": t("mode_stepped", _lang), "continuous": t("mode_continuous", _lang)}


def _active_source() -> TimeSource:
    if st.session_state.mode == "continuous":
        return st.session_state.continuous
    return st.session_state.stepped


def _on_mode_change() -> None:
    # Only one clock runs at a time
    st.session_state.continuous.pause()
    st.session_state.stepped.pause()


def _set_location(location: ObserverLocation) -> None:
    st.session_state.location = location
    st.session_state.lat_deg = round(rad2deg(location.latitude), 2)
    st.session_state.lon_deg = round(rad2deg(location.longitude), 2)
    st.session_state.error_msg = None
    log.info("location set to %s", location.name)


def _on_preset_change() -> None:
    _set_location(PRESET_LOCATIONS[st.session_state.preset])


def _on_custom_coordinates() -> None:
    _set_location(
        ObserverLocation.from_degrees(
            st.session_state.lat_deg,
            st.session_state.lon_deg,
            t("custom_location", _lang),
        )
    )


def _on_search() -> None:
    query = st.session_state.place_query.strip()
    if not query:
        return
    try:
        _set_location(geocode_location(query))
    except GeocodingError as e:
        st.session_state.error_msg = t("error_place", _lang, error=e)


if "lat_deg" not in st.session_state:
    _set_location(st.session_state.location)

source = _active_source()

# --- Scheduler tick ---
tick = source.tick(time.monotonic())
if isinstance(source, ContinuousClock):
    if tick.sidereal_day_completed:
        st.toast(t("toast_sidereal_day", _lang))
    if tick.solar_day_completed:
        st.toast(t("toast_solar_day", _lang))

# --- Sidebar controls ---
with st.sidebar:
    st.radio(
        t("label_mode", _lang),
        options=list(_MODES),
        format_func=_MODES.get,
        key="mode",
        on_change=_on_mode_change,
        horizontal=True,
    )
    source = _active_source()

    col_play, col_reset, col_step = st.columns(3)
    with col_play:
        if source.is_playing:
            st.button(t("btn_pause", _lang), on_click=source.pause, use_container_width=True)
        else:
            st.button(
                t("btn_play", _lang),
                on_click=lambda: source.play(time.monotonic()),
                use_container_width=True,
            )
    with col_reset:
        st.button(t("btn_reset", _lang), on_click=source.reset, use_container_width=True)

    if isinstance(source, SteppedClock):
        with col_step:
            st.button(t("btn_step", _lang), on_click=source.step_forward, use_container_width=True)

        st.radio(
            t("label_step_mode", _lang),
            options=list(StepMode),
            format_func=lambda m: t(f"step_{m.value}", _lang),
            index=list(StepMode).index(source.step_mode),
            key="step_mode",
            on_change=lambda: source.set_step_mode(st.session_state.step_mode),
            horizontal=True,
        )
        st.radio(
            t("label_day_speed", _lang),
            options=list(DaySpeed),
            format_func=lambda s: str(int(s)),
            index=list(DaySpeed).index(source.speed),
            key="day_speed",
            on_change=lambda: source.set_speed(st.session_state.day_speed),
            horizontal=True,
        )
        st.checkbox(
            t("label_animate_within_day", _lang),
            value=source.animate_within_day,
            key="animate_within_day",
            on_change=lambda: source.set_animate_within_day(
                st.session_state.animate_within_day
            ),
        )
        st.session_state.time_of_day_h = source.time_of_day / 3600
        st.slider(
            t("label_time_of_day", _lang),
            min_value=0.0,
            max_value=24.0,
            step=0.25,
            key="time_of_day_h",
            on_change=lambda: source.set_time_of_day(st.session_state.time_of_day_h * 3600),
        )
        st.caption(format_time_of_day(source.time_of_day))
    else:
        with col_step:
            st.button(
                t("btn_plus_hour", _lang),
                on_click=source.jump_forward,
                args=(3600,),
                use_container_width=True,
            )
        st.radio(
            t("label_speed", _lang),
            options=list(PlaySpeed),
            format_func=lambda s: f"{int(s)}x",
            index=list(PlaySpeed).index(source.speed),
            key="play_speed",
            on_change=lambda: source.set_speed(st.session_state.play_speed),
            horizontal=True,
        )
        _slider_max = float(SLIDER_MAX_DAYS * SOLAR_DAY_SECONDS)
        st.session_state.time_slider = min(source.current_time, _slider_max)
        st.slider(
            t("label_time", _lang, duration=format_duration(source.current_time)),
            min_value=0.0,
            max_value=_slider_max,
            step=100.0,
            key="time_slider",
            on_change=lambda: source.set_time(st.session_state.time_slider),
        )
        col_sid, col_sol = st.columns(2)
        with col_sid:
            st.button(
                t("btn_next_sidereal", _lang),
                on_click=source.jump_to_next_sidereal_day,
                use_container_width=True,
            )
        with col_sol:
            st.button(
                t("btn_next_solar", _lang),
                on_click=source.jump_to_next_solar_day,
                use_container_width=True,
            )
        col_day, col_week = st.columns(2)
        with col_day:
            st.button(
                t("btn_plus_day", _lang),
                on_click=source.jump_forward,
                args=(SOLAR_DAY_SECONDS,),
                use_container_width=True,
            )
        with col_week:
            st.button(
                t("btn_plus_week", _lang),
                on_click=source.jump_forward,
                args=(7 * SOLAR_DAY_SECONDS,),
                use_container_width=True,
            )

    st.divider()
    st.subheader(t("label_location", _lang))
    st.selectbox(
        t("label_preset", _lang),
        options=list(PRESET_LOCATIONS),
        index=None,
        placeholder=st.session_state.location.name,
        key="preset",
        on_change=_on_preset_change,
    )
    st.number_input(
        t("label_latitude", _lang),
        min_value=-90.0,
        max_value=90.0,
        step=1.0,
        key="lat_deg",
        on_change=_on_custom_coordinates,
    )
    st.number_input(
        t("label_longitude", _lang),
        min_value=-180.0,
        max_value=180.0,
        step=1.0,
        key="lon_deg",
        on_change=_on_custom_coordinates,
    )
    st.text_input(t("label_place_search", _lang), key="place_query")
    st.button(t("btn_search", _lang), on_click=_on_search)
    if st.session_state.error_msg:
        st.error(st.session_state.error_msg)

    st.divider()
    st.subheader(t("label_options", _lang))
    options = VisualOptions(
        show_labels=st.checkbox(t("opt_labels", _lang), value=True, key="opt_labels"),
        show_grid=st.checkbox(t("opt_grid", _lang), value=True, key="opt_grid"),
        high_contrast=st.checkbox(t("opt_high_contrast", _lang), key="opt_high_contrast"),
        reduce_motion=st.checkbox(t("opt_reduce_motion", _lang), key="opt_reduce_motion"),
        show_markers=st.checkbox(t("opt_markers", _lang), key="opt_markers"),
    )

# --- Views ---
location: ObserverLocation = st.session_state.location
orbital, sky = compute_views(source, location)

st.title(t("page_title", _lang))
st.caption(t("subtitle", _lang))

col_orbital, col_sky = st.columns(2)
with col_orbital:
    st.subheader(t("orbital_title", _lang))
    st.plotly_chart(
        render_orbital_figure(orbital, options),
        use_container_width=True,
        config={"displayModeBar": False},
    )
    st.caption(t("orbital_caption", _lang))
with col_sky:
    st.subheader(t("sky_title", _lang, place=location.name))
    st.plotly_chart(
        render_sky_figure(sky, options),
        use_container_width=True,
        config={"displayModeBar": False},
    )
    st.caption(t("sky_caption", _lang))

# --- Readouts ---
m1, m2, m3 = st.columns(3)
m1.metric(t("info_solar_time", _lang), sky.solar_time_label)
m2.metric(t("info_sidereal_time", _lang), sky.sidereal_time_label)
if isinstance(source, SteppedClock):
    m3.metric(
        t("info_day", _lang, day=source.day_count),
        t(
            "info_stars_drifted",
            _lang,
            minutes=f"{seconds_to_minutes(cumulative_drift(source.day_count)):.1f}",
        ),
    )
else:
    m3.metric(
        t(
            "info_drift",
            _lang,
            minutes=f"{seconds_to_minutes(sky.drift_seconds):.1f}",
        ),
        t(
            "info_difference",
            _lang,
            minutes=f"{day_count_difference_minutes(sky.time):.1f}",
        ),
    )
    d1, d2 = st.columns(2)
    d1.metric(t("info_sidereal_days", _lang), f"{sidereal_days_elapsed(sky.time):.2f}")
    d2.metric(t("info_solar_days", _lang), f"{solar_days_elapsed(sky.time):.2f}")

with st.expander("?"):
    st.write(t("explanation", _lang))

# --- Animation loop ---
if source.is_playing:
    time.sleep(REDUCED_MOTION_INTERVAL if options.reduce_motion else FRAME_INTERVAL)
    st.rerun()
