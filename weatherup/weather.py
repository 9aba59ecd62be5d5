"""Mapping of WMO weather codes to display categories and icons."""

_CATEGORY_CODES = {
    "sunny": (0,),
    "cloudy": (1, 2, 3, 45, 48),
    "rainy": (51, 53, 55, 56, 57, 61, 63, 65, 66, 67, 80, 81, 82, 95, 96, 99),
    "snowy": (71, 73, 75, 77, 85, 86),
}

_CATEGORY_BY_CODE = {
    code: category for category, codes in _CATEGORY_CODES.items() for code in codes
}

_ICONS = {
    "sunny": "☀️",
    "cloudy": "☁️",
    "rainy": "🌧️",
    "snowy": "❄️",
}

UNKNOWN_CATEGORY = "unknown"
UNKNOWN_ICON = "❓"


def weather_category(code: int) -> str:
    """Return the category name for a WMO weather code."""
    return _CATEGORY_BY_CODE.get(code, UNKNOWN_CATEGORY)


def weather_icon(category: str) -> str:
    """Return the icon shown for a weather category."""
    return _ICONS.get(category, UNKNOWN_ICON)