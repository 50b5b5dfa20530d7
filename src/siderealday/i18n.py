"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "항성일과 태양일",
        "en": "Sidereal vs Solar Day",
    },
    "subtitle": {
        "ko": "항성일(23시간 56분 4초)과 태양일(24시간)이 다른 이유",
        "en": "Why a sidereal day (23h 56m 4s) differs from a solar day (24h 00m 0s)",
    },
    "orbital_title": {
        "ko": "1. 궤도 위에서 내려다보기",
        "en": "View 1: Overhead Orbital View",
    },
    "sky_title": {
        "ko": "2. {place}의 하늘",
        "en": "View 2: Local Sky (from {place})",
    },
    "label_mode": {
        "ko": "시간 방식",
        "en": "Time mode",
    },
    "mode_continuous": {
        "ko": "연속 시계",
        "en": "Continuous clock",
    },
    "mode_stepped": {
        "ko": "하루씩 넘기기",
        "en": "Day stepping",
    },
    "btn_play": {
        "ko": "▶ 재생",
        "en": "▶ Play",
    },
    "btn_pause": {
        "ko": "⏸ 일시정지",
        "en": "⏸ Pause",
    },
    "btn_reset": {
        "ko": "⏹ 초기화",
        "en": "⏹ Reset",
    },
    "btn_step": {
        "ko": "+1일",
        "en": "+1 Day",
    },
    "btn_next_sidereal": {
        "ko": "⏭ 다음 항성일",
        "en": "⏭ Next Sidereal Day",
    },
    "btn_next_solar": {
        "ko": "⏭ 다음 태양일",
        "en": "⏭ Next Solar Day",
    },
    "btn_plus_hour": {
        "ko": "+1시간",
        "en": "+1 hour",
    },
    "btn_plus_day": {
        "ko": "+1일",
        "en": "+1 day",
    },
    "btn_plus_week": {
        "ko": "+1주",
        "en": "+1 week",
    },
    "btn_search": {
        "ko": "찾기",
        "en": "Search",
    },
    "label_speed": {
        "ko": "속도",
        "en": "Speed",
    },
    "label_day_speed": {
        "ko": "속도 (일/초)",
        "en": "Speed (days/s)",
    },
    "label_step_mode": {
        "ko": "한 걸음",
        "en": "Step mode",
    },
    "step_solar": {
        "ko": "태양일",
        "en": "Solar Day",
    },
    "step_sidereal": {
        "ko": "항성일",
        "en": "Sidereal Day",
    },
    "label_animate_within_day": {
        "ko": "하루 안에서도 움직이기",
        "en": "Animate within day",
    },
    "label_time_of_day": {
        "ko": "시각",
        "en": "Time of day",
    },
    "label_time": {
        "ko": "경과 시간: {duration}",
        "en": "Time: {duration}",
    },
    "label_location": {
        "ko": "관측 위치",
        "en": "Observer Location",
    },
    "label_preset": {
        "ko": "미리 정한 위치",
        "en": "Preset",
    },
    "label_latitude": {
        "ko": "위도 (°)",
        "en": "Latitude (°)",
    },
    "label_longitude": {
        "ko": "경도 (°)",
        "en": "Longitude (°)",
    },
    "label_place_search": {
        "ko": "장소 검색",
        "en": "Search a place",
    },
    "custom_location": {
        "ko": "사용자 지정",
        "en": "Custom",
    },
    "label_options": {
        "ko": "표시 옵션",
        "en": "Display Options",
    },
    "opt_labels": {
        "ko": "이름 표시",
        "en": "Labels",
    },
    "opt_grid": {
        "ko": "하늘 격자",
        "en": "Sky grid",
    },
    "opt_high_contrast": {
        "ko": "고대비",
        "en": "High contrast",
    },
    "opt_reduce_motion": {
        "ko": "움직임 줄이기",
        "en": "Reduce motion",
    },
    "opt_markers": {
        "ko": "하루 완료 표시",
        "en": "Show day completion markers",
    },
    "info_day": {
        "ko": "{day}일째",
        "en": "Day: {day}",
    },
    "info_stars_drifted": {
        "ko": "별이 {minutes}분 앞서 움직였어요",
        "en": "Stars drifted {minutes} min",
    },
    "info_solar_time": {
        "ko": "태양시",
        "en": "Solar Time",
    },
    "info_sidereal_time": {
        "ko": "항성시",
        "en": "Sidereal Time",
    },
    "info_drift": {
        "ko": "차이: {minutes}분",
        "en": "Drift: {minutes} minutes ahead",
    },
    "info_sidereal_days": {
        "ko": "지난 항성일",
        "en": "Sidereal days elapsed",
    },
    "info_solar_days": {
        "ko": "지난 태양일",
        "en": "Solar days elapsed",
    },
    "info_difference": {
        "ko": "차이: {minutes}분",
        "en": "Difference: {minutes} minutes",
    },
    "toast_sidereal_day": {
        "ko": "항성일 한 바퀴 완료",
        "en": "Sidereal day completed",
    },
    "toast_solar_day": {
        "ko": "태양일 한 바퀴 완료",
        "en": "Solar day completed",
    },
    "error_place": {
        "ko": "장소를 찾을 수 없어요. ({error})",
        "en": "Place not found. Try a more specific name. ({error})",
    },
    "orbital_caption": {
        "ko": "빨간 핀이 기준 별(파란 점선)과 다시 나란해지면 항성일, 태양과 다시 마주하면 태양일이 지난 거예요.",
        "en": "The pin marks your location. When it realigns with the reference star (blue dashed line), one sidereal day has passed. When it realigns with the Sun, one solar day has passed.",
    },
    "sky_caption": {
        "ko": "별은 항성일 속도로 돌고, 태양은 조금 더 느리게 움직여요.",
        "en": "Stars sweep at the sidereal rate. The Sun moves slightly slower.",
    },
    "explanation": {
        "ko": "지구는 먼 별에 대해 23시간 56분 4초마다 한 바퀴 돕니다. 그동안 공전 궤도를 따라 조금 움직이기 때문에, 태양을 다시 마주하려면 약 1°를 더 돌아야 하고 이 4분이 더해져 24시간 태양일이 됩니다. 1년이면 항성일은 366.24번, 태양일은 365.24번입니다.",
        "en": "Earth completes one rotation relative to distant stars in 23 hours, 56 minutes, 4 seconds. During that rotation it also moves along its orbit, so it must turn about 1° more to face the Sun again. That extra ~4 minutes gives the 24-hour solar day. Over a year there are 366.24 sidereal days but only 365.24 solar days.",
    },
}


def t(key: str, lang: str, **kwargs: object) -> str:
    """Return the translated string for key in lang, formatted with kwargs.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    text = entry.get(lang) or entry.get("en") or key
    return text.format(**kwargs) if kwargs else text
