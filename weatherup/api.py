"""Client for the weather backend and the data it returns."""

from __future__ import annotations

import json
import logging
import math
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

_log = logging.getLogger(__name__)


class ApiError(Exception):
    """A request to the backend failed or returned unusable data."""


def _format_float(value: float) -> str:
    """Format a float the way the backend's paths and the tables expect: 1.0 -> "1"."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _field(data: Any, name: str) -> Any:
    if not isinstance(data, Mapping):
        raise ApiError(f"expected an object, got {type(data).__name__}")
    try:
        return data[name]
    except KeyError:
        raise ApiError(f"missing field `{name}`") from None


def _number(data: Any, name: str) -> float:
    value = _field(data, name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ApiError(f"field `{name}` must be a number")
    return float(value)


def _unsigned(data: Any, name: str) -> int:
    value = _field(data, name)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ApiError(f"field `{name}` must be a non-negative integer")
    return value


def _string(data: Any, name: str) -> str:
    value = _field(data, name)
    if not isinstance(value, str):
        raise ApiError(f"field `{name}` must be a string")
    return value


@dataclass(frozen=True)
class DayData:
    """Forecast for one day."""

    weather_code: int = 0
    date: str = ""
    temp_min: float = 0.0
    temp_max: float = 0.0
    estimated_energy: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> DayData:
        return cls(
            weather_code=_unsigned(data, "weather_code"),
            date=_string(data, "date"),
            temp_min=_number(data, "temp_min"),
            temp_max=_number(data, "temp_max"),
            estimated_energy=_number(data, "estimated_energy"),
        )


@dataclass(frozen=True)
class WeeklySummaryData:
    """Summary of the coming week."""

    average_pressure: float = 0.0
    average_sunshine_hours: float = 0.0
    min_temperature: float = 0.0
    max_temperature: float = 0.0
    weekly_summary: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> WeeklySummaryData:
        return cls(
            average_pressure=_number(data, "average_pressure"),
            average_sunshine_hours=_number(data, "average_sunshine_hours"),
            min_temperature=_number(data, "min_temperature"),
            max_temperature=_number(data, "max_temperature"),
            weekly_summary=_string(data, "weekly_summary"),
        )


class ApiClient:
    """Sends GET requests to the backend's /api routes."""

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get(self, endpoint: str) -> Any:
        """GET /api<endpoint> and return the decoded JSON body."""
        url = f"{self.base_url}/api{endpoint}"
        _log.info("Sending request to: %s", url)
        request = urllib.request.Request(
            url, headers={"Content-Type": "application/json"}, method="GET"
        )
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            body = exc.read()
        except (urllib.error.URLError, OSError) as exc:
            raise ApiError(f"request to {url} failed: {exc}") from exc
        try:
            return json.loads(body)
        except ValueError as exc:
            raise ApiError(f"invalid JSON from {url}: {exc}") from exc

    def weekly_data(self, lat: float, lng: float) -> list[DayData]:
        """Fetch the daily forecast for the week at a location."""
        endpoint = f"/weather/weekly/data/{_format_float(lat)}/{_format_float(lng)}/"
        payload = self.get(endpoint)
        if not isinstance(payload, list):
            raise ApiError("expected a list of days")
        return [DayData.from_dict(item) for item in payload]

    def weekly_summary(self, lat: float, lng: float) -> WeeklySummaryData:
        """Fetch the weekly summary at a location."""
        endpoint = (
            f"/weather/weekly/summary/{_format_float(lat)}/{_format_float(lng)}/"
        )
        return WeeklySummaryData.from_dict(self.get(endpoint))