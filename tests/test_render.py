from weatherup.api import DayData, WeeklySummaryData
from weatherup.render import render_forecast, render_map, render_navbar, theme_suffix


def _days():
    return [
        DayData(0, "2024-06-01", 10.0, 20.0, 3.0),
        DayData(61, "2024-06-02", 11.0, 19.0, 2.0),
        DayData(71, "not-a-date", 1.0, 2.0, 0.5),
    ]


def test_theme_suffix():
    assert theme_suffix(True) == ""
    assert theme_suffix(False) == "-dark"


def test_forecast_row_count():
    html = render_forecast(_days(), WeeklySummaryData(), True)
    body = html.split("<tbody>")[1].split("</tbody>")[0]
    assert body.count("<tr>") == 3


def test_forecast_icons_and_invalid_date():
    html = render_forecast(_days(), WeeklySummaryData(), True)
    assert "☀️" in html
    assert "🌧️" in html
    assert "❄️" in html
    assert "not-a-date - Invalid" in html


def test_forecast_one_decimal():
    day = DayData(0, "2024-06-01", 12.34, 20.0, 3.0)
    html = render_forecast([day], WeeklySummaryData(), True)
    assert ">12.3<" in html


def test_forecast_dark_theme_classes():
    html = render_forecast(_days(), WeeklySummaryData(), False)
    assert 'class="forecast-table-dark"' in html
    assert 'class="text-table"' not in html


def test_forecast_summary_footer_escaped():
    summary = WeeklySummaryData(1013.5, 6.0, 3.0, 24.5, "<b>warm</b>")
    html = render_forecast([], summary, True)
    foot = html.split("<tfoot>")[1]
    assert "&lt;b&gt;warm&lt;/b&gt;" in foot
    assert "<b>" not in foot
    assert ">1013.5<" in foot
    assert ">24.5<" in foot
    assert "Week Overview" in foot


def test_navbar_forecast_active():
    html = render_navbar(True, True)
    assert 'class="button active">Forecast' in html
    assert 'class="button">Map' in html
    assert " checked" in html


def test_navbar_map_active_dark():
    html = render_navbar(False, False)
    assert 'class="button-dark">Forecast' in html
    assert 'class="button-dark active">Map' in html
    assert " checked" not in html
    assert 'class="nav-dark"' in html


def test_map_container():
    html = render_map()
    assert '<div id="map"></div>' in html
    assert html.count("<div") == html.count("</div>")