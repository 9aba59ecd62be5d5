import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer
from types import SimpleNamespace

import pytest

from weatherup.api import ApiClient, ApiError, DayData, WeeklySummaryData

DAY = {
    "weather_code": 61,
    "date": "2024-06-01",
    "temp_min": 10.5,
    "temp_max": 20,
    "estimated_energy": 3.25,
}

SUMMARY = {
    "average_pressure": 1013.2,
    "average_sunshine_hours": 6.5,
    "min_temperature": 8.0,
    "max_temperature": 24.5,
    "weekly_summary": "Mostly sunny",
}


@pytest.fixture
def server():
    routes = {}
    seen = []

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            seen.append((self.path, self.headers.get("Content-Type")))
            status, body = routes.get(self.path, (404, b"not found"))
            self.send_response(status)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, *args):
            pass

    httpd = HTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield SimpleNamespace(
        url=f"http://127.0.0.1:{httpd.server_port}", routes=routes, seen=seen
    )
    httpd.shutdown()
    httpd.server_close()


def test_day_from_dict():
    day = DayData.from_dict(DAY)
    assert day.weather_code == 61
    assert day.date == "2024-06-01"
    assert day.temp_max == 20.0
    assert day.estimated_energy == 3.25


def test_summary_from_dict():
    summary = WeeklySummaryData.from_dict(SUMMARY)
    assert summary.weekly_summary == "Mostly sunny"
    assert summary.average_pressure == 1013.2


@pytest.mark.parametrize("field", sorted(DAY))
def test_day_missing_field(field):
    data = {k: v for k, v in DAY.items() if k != field}
    with pytest.raises(ApiError):
        DayData.from_dict(data)


@pytest.mark.parametrize("code", [-1, 1.0, "1", True])
def test_day_bad_weather_code(code):
    with pytest.raises(ApiError):
        DayData.from_dict({**DAY, "weather_code": code})


def test_summary_bad_types():
    with pytest.raises(ApiError):
        WeeklySummaryData.from_dict({**SUMMARY, "average_pressure": "high"})
    with pytest.raises(ApiError):
        WeeklySummaryData.from_dict({**SUMMARY, "weekly_summary": 5})
    with pytest.raises(ApiError):
        WeeklySummaryData.from_dict([SUMMARY])


def test_defaults():
    assert DayData() == DayData(0, "", 0.0, 0.0, 0.0)
    assert WeeklySummaryData().weekly_summary == ""


def test_weekly_data_request(server):
    server.routes["/api/weather/weekly/data/51.5/0/"] = (
        200,
        json.dumps([DAY, DAY]).encode(),
    )
    days = ApiClient(server.url).weekly_data(51.5, 0.0)
    assert days == [DayData.from_dict(DAY)] * 2
    assert server.seen == [("/api/weather/weekly/data/51.5/0/", "application/json")]


def test_weekly_summary_request(server):
    server.routes["/api/weather/weekly/summary/-33.9/151.2/"] = (
        200,
        json.dumps(SUMMARY).encode(),
    )
    summary = ApiClient(server.url + "/").weekly_summary(-33.9, 151.2)
    assert summary == WeeklySummaryData.from_dict(SUMMARY)


def test_get_returns_json(server):
    server.routes["/api/ping"] = (200, b'{"ok": true}')
    assert ApiClient(server.url).get("/ping") == {"ok": True}


def test_error_status_with_json_body_is_decoded(server):
    server.routes["/api/broken"] = (500, b'{"error": "boom"}')
    assert ApiClient(server.url).get("/broken") == {"error": "boom"}


def test_non_json_body_raises(server):
    with pytest.raises(ApiError):
        ApiClient(server.url).get("/missing")


def test_weekly_data_not_a_list(server):
    server.routes["/api/weather/weekly/data/1/2/"] = (200, b"{}")
    with pytest.raises(ApiError):
        ApiClient(server.url).weekly_data(1.0, 2.0)


def test_connection_failure():
    with pytest.raises(ApiError):
        ApiClient("http://127.0.0.1:1", timeout=2).get("/x")