"""The home page: location input, forecast table and map view."""

from __future__ import annotations

import argparse
import logging
import sys
from html import escape
from pathlib import Path
from typing import Any

from .api import ApiClient, ApiError, DayData, WeeklySummaryData, _format_float
from .render import render_forecast, render_map, render_navbar, theme_suffix
from .theme import ThemeStore

_log = logging.getLogger(__name__)

NOT_FOUND = "NotFound"


def validate_latitude(value: float) -> str:
    """Return the error shown for a latitude, or an empty string if it is in range."""
    if value < -90.0:
        return "Cannot be less than 90"
    if value > 90.0:
        return "Cannot be greater than 90"
    return ""


def validate_longitude(value: float) -> str:
    """Return the error shown for a longitude, or an empty string if it is in range."""
    if value < -180.0:
        return "Cannot be less than 180"
    if value > 180.0:
        return "Cannot be greater than 180"
    return ""


def _parse_float(text: str) -> float | None:
    if text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


class HomePage:
    """State of the home page and the actions a user can take on it."""

    def __init__(self, client: Any, theme_store: ThemeStore) -> None:
        self.client = client
        self.theme_store = theme_store
        self.is_light = theme_store.is_light()
        self.is_forecast = True
        self.location: tuple[float, float] = (0.0, 0.0)
        self.day_data: list[DayData] = []
        self.weekly_summary = WeeklySummaryData()
        self.lat_input = 0.0
        self.lng_input = 0.0
        self.error_lat: str | None = None
        self.error_lng: str | None = None

    def set_location(self, lat: float, lng: float) -> None:
        """Move to a new location, update the inputs and reload the forecast."""
        self.location = (lat, lng)
        self.lat_input = lat
        self.lng_input = lng
        self.refresh()

    def choose_place(self, lat: float, lng: float) -> None:
        """Handle a place picked on the map: move there and show the forecast."""
        _log.info("Chosen place: lat %s, lng %s", lat, lng)
        self.set_location(lat, lng)
        self.is_forecast = True

    def input_latitude(self, text: str) -> None:
        """Handle typed latitude text; unparsable text is ignored."""
        number = _parse_float(text)
        if number is None:
            return
        self.lat_input = number
        self.error_lat = validate_latitude(number)

    def input_longitude(self, text: str) -> None:
        """Handle typed longitude text; unparsable text is ignored."""
        number = _parse_float(text)
        if number is None:
            return
        self.lng_input = number
        self.error_lng = validate_longitude(number)

    def find(self) -> None:
        """Move to the coordinates typed into the inputs."""
        self.set_location(self.lat_input, self.lng_input)

    def show_forecast(self) -> None:
        self.is_forecast = True

    def show_map(self) -> None:
        self.is_forecast = False

    def set_light(self, is_light: bool) -> None:
        """Switch the theme and remember the choice."""
        self.is_light = is_light
        self.theme_store.set_theme(is_light)

    def refresh(self) -> None:
        """Load the week's data and summary for the current location.

        A failed request is logged and leaves the previous data in place.
        """
        lat, lng = self.location
        try:
            self.day_data = list(self.client.weekly_data(lat, lng))
        except ApiError as exc:
            _log.error("%s", exc)
        try:
            self.weekly_summary = self.client.weekly_summary(lat, lng)
        except ApiError as exc:
            _log.error("%s", exc)

    def _render_inputs(self, suffix: str) -> str:
        lat, lng = self.location
        return (
            '<div style="display: flex; justify-content: center; gap:20px; '
            'width:100vw; margin-top:20px;">'
            '<div style="display: flex; flex-direction: column; align-items: center;">'
            '<input type="number" placeholder="Latitude" required min="-90" max="90" '
            f'step="any" class="input-coordinates{suffix}" '
            f'value="{escape(_format_float(lat))}"/>'
            f'<div class="text-error{suffix}">{escape(self.error_lat or "")}</div>'
            "</div>"
            '<div style="display: flex; flex-direction: column; align-items: center;">'
            '<input type="number" placeholder="Longitude" required min="-180" '
            'max="180" step="any" inputmode="decimal" '
            f'class="input-coordinates{suffix}" '
            f'value="{escape(_format_float(lng))}"/>'
            f'<div class="text-error{suffix}">{escape(self.error_lng or "")}</div>'
            "</div>"
            f'<button class="button-search{suffix}">Find</button>'
            "</div>"
        )

    def render(self) -> str:
        """Render the whole page as HTML."""
        suffix = theme_suffix(self.is_light)
        if self.is_forecast:
            content = self._render_inputs(suffix) + render_forecast(
                self.day_data, self.weekly_summary, self.is_light
            )
        else:
            content = render_map()
        return (
            f'<div class="body{suffix}">'
            f"{render_navbar(self.is_light, self.is_forecast)}"
            '<div style="width: fit-content; height: fit-content;">'
            f"{content}</div></div>"
        )


def render_page(path: str, page: HomePage) -> str:
    """Render the page routed at a path; unknown paths give the fallback."""
    if path == "/":
        return page.render()
    return NOT_FOUND


def main(argv: list[str] | None = None) -> int:
    """Render the home page for a location and print its HTML."""
    parser = argparse.ArgumentParser(
        prog="weatherup", description="Render the weekly weather forecast page."
    )
    parser.add_argument("--base-url", default="http://localhost:8080")
    parser.add_argument(
        "--theme-file", default=str(Path.home() / ".weatherup.json")
    )
    parser.add_argument("--lat", type=float, default=None)
    parser.add_argument("--lng", type=float, default=None)
    parser.add_argument("--path", default="/")
    parser.add_argument("--map", action="store_true", help="show the map view")
    parser.add_argument("--timeout", type=float, default=10.0)
    args = parser.parse_args(argv)

    page = HomePage(
        ApiClient(args.base_url, timeout=args.timeout), ThemeStore(args.theme_file)
    )
    if args.lat is not None or args.lng is not None:
        page.set_location(
            args.lat if args.lat is not None else 0.0,
            args.lng if args.lng is not None else 0.0,
        )
    else:
        page.refresh()
    if args.map:
        page.show_map()
    sys.stdout.write(render_page(args.path, page) + "\n")
    return 0