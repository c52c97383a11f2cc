# src/utils_colors.py
"""Theme lookup tables: time bucket → background, weather effect → overlay."""

TIME_BUCKET_BACKGROUNDS: dict[str, str] = {
    "morning": "linear-gradient(160deg, #f6d365 0%, #fda085 100%)",
    "day": "linear-gradient(160deg, #4facfe 0%, #00c6fb 100%)",
    "evening": "linear-gradient(160deg, #fa709a 0%, #3f2b96 100%)",
    "night": "linear-gradient(160deg, #0f2027 0%, #203a43 50%, #2c5364 100%)",
}

TIME_BUCKET_LABELS: dict[str, str] = {
    "morning": "Good morning",
    "day": "Good day",
    "evening": "Good evening",
    "night": "Good night",
}

WEATHER_EFFECT_ICONS: dict[str, str] = {
    "clear": "☀️",
    "clouds": "☁️",
    "rain": "🌧️",
    "snow": "❄️",
    "other": "🌡️",
}

NEUTRAL_BACKGROUND: str = "linear-gradient(160deg, #2b2b2b 0%, #3a3a3a 100%)"


def background_for(time_bucket: str | None) -> str:
    return TIME_BUCKET_BACKGROUNDS.get(time_bucket or "", NEUTRAL_BACKGROUND)


def effect_class(effect: str | None) -> str:
    """CSS class of the animated overlay; unknown effects get the neutral one."""
    name = effect if effect in WEATHER_EFFECT_ICONS else "other"
    return f"fx-{name}"


def effect_icon(effect: str | None) -> str:
    return WEATHER_EFFECT_ICONS.get(effect or "", WEATHER_EFFECT_ICONS["other"])
