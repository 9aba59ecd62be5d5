"""HTML rendering of the page's components."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from html import escape

from .api import DayData, WeeklySummaryData, _format_float
from .dates import weekday_from_string
from .weather import weather_category, weather_icon


class _Theme(Enum):
    """Colour themes and the CSS class suffix each one uses."""

    LIGHT = ""
    DARK = "-dark"

    @classmethod
    def from_flag(cls, is_light: bool) -> _Theme:
        return cls.LIGHT if is_light else cls.DARK


def theme_suffix(is_light: bool) -> str:
    """CSS class suffix for the current theme."""
    theme = _Theme.from_flag(bool(is_light))
    return theme.value


def _th(text: str, suffix: str) -> str:
    return f'<th class="text-table{suffix}">{escape(text)}</th>'


def _td(text: str, suffix: str, colspan: int | None = None) -> str:
    span = f' colspan="{colspan}"' if colspan is not None else ""
    return f'<td{span} class="text-table{suffix}">{escape(text)}</td>'


def _day_row(day: DayData, suffix: str) -> str:
    weekday = weekday_from_string(day.date) or "Invalid"
    cells = (
        _td(f"{day.date} - {weekday}", suffix),
        _td(weather_icon(weather_category(day.weather_code)), suffix),
        _td(f"{day.temp_min:.1f}", suffix),
        _td(f"{day.temp_max:.1f}", suffix),
        _td(f"{day.estimated_energy:.1f}", suffix),
    )
    return "<tr>" + "".join(cells) + "</tr>"


def render_forecast(
    day_data: Iterable[DayData], weekly_data: WeeklySummaryData, is_light: bool
) -> str:
    """Render the forecast table with its weekly summary footer."""
    suffix = theme_suffix(is_light)
    headers = (
        "Date",
        "Weather Code",
        "Min Temp (C)",
        "Max Temp (C)",
        "Estimated Energy (kWh)",
    )
    head = "<thead><tr>" + "".join(_th(h, suffix) for h in headers) + "</tr></thead>"
    body = "<tbody>" + "".join(_day_row(d, suffix) for d in day_data) + "</tbody>"
    labels = (
        "Summary",
        "Min temp (°C)",
        "Max temp (°C)",
        "Average pressusre hPa",
        "Average sunshine hours",
    )
    values = (
        weekly_data.weekly_summary,
        _format_float(weekly_data.min_temperature),
        _format_float(weekly_data.max_temperature),
        _format_float(weekly_data.average_pressure),
        _format_float(weekly_data.average_sunshine_hours),
    )
    foot = (
        "<tfoot>"
        f"<tr>{_td('Week Overview', suffix, 5)}</tr>"
        "<tr>" + "".join(_td(label, suffix, 1) for label in labels) + "</tr>"
        "<tr>" + "".join(_td(value, suffix, 1) for value in values) + "</tr>"
        "</tfoot>"
    )
    return (
        '<div style="width: 100%; display: flex; margin-top:20px; '
        'align-items: center; justify-content: center;">'
        f'<table class="forecast-table{suffix}" '
        'style="width: 95%; border-collapse: collapse;">'
        f"{head}{body}{foot}</table></div>"
    )


def render_navbar(is_light: bool, is_forecast: bool) -> str:
    """Render the header with the view buttons and the theme switch."""
    suffix = theme_suffix(is_light)
    forecast_active = " active" if is_forecast else ""
    map_active = "" if is_forecast else " active"
    checked = " checked" if is_light else ""
    return (
        f'<header class="nav{suffix}" style="display: flex; align-items: center; '
        'justify-content: space-between;">'
        f'<div class="text-title{suffix}" style="margin-top: 0px;">WeatherUp</div>'
        '<nav style="display: flex; justify-content: center; flex: 1; gap:20px;">'
        f'<button class="button{suffix}{forecast_active}">Forecast</button>'
        f'<button class="button{suffix}{map_active}">Map</button>'
        "</nav>"
        '<nav style="display: flex; justify-content: center;">'
        '<div class="theme-switch">'
        f'<input type="checkbox" id="theme-checkbox"{checked}/>'
        '<label for="theme-checkbox"><div></div>'
        "<span>🌙</span><span>☀</span>"
        "</label></div></nav></header>"
    )


def render_map() -> str:
    """Render the container the map is drawn into."""
    return (
        '<div style="margin-left: 15vw; margin-top:5vh;">'
        '<div id="map"></div>'
        "</div>"
    )