# weatherup

WeatherUp fetches a seven-day forecast for a latitude and longitude from a
JSON weather API and renders it as an HTML page: a navigation header with a
light/dark theme switch, coordinate inputs, a forecast table with the
estimated energy for each day, and a weekly overview. A map view can be
rendered in place of the forecast.

## Installation

```
pip install .
```

No third-party libraries are needed at run time.

## Command line

```
weatherup --base-url http://localhost:8080 --lat 52.23 --lng 21.01
```

fetches the forecast and writes the page's HTML to standard output.

Options:

- `--base-url` – address of the weather API (default `http://localhost:8080`).
- `--lat`, `--lng` – location to load; a missing one counts as `0`. With
  neither, the location `(0, 0)` is loaded.
- `--theme-file` – JSON file holding the theme choice
  (default `~/.weatherup.json`).
- `--path` – route to render; `/` renders the home page, any other path
  prints `NotFound`.
- `--map` – render the map view instead of the forecast.
- `--timeout` – request timeout in seconds (default `10`).

Failed requests are logged and the page is rendered with empty data.

## Using the library

### Weather codes

```python
from weatherup.weather import weather_category, weather_icon

weather_category(0)                     # "sunny"
weather_category(61)                    # "rainy"
weather_icon(weather_category(71))      # "❄️"
```

Unknown codes map to the category `"unknown"` and the icon `"❓"`.

### Dates

```python
from weatherup.dates import weekday_from_string

weekday_from_string("2024-05-06")   # "Monday"
weekday_from_string("not a date")   # None
```

### Theme preference

`ThemeStore` keeps the light/dark choice under the key `"theme"` in a JSON
file. The light theme is chosen unless `"Dark"` was saved; a missing or
unreadable file counts as light, and failures to write are ignored.

```python
from weatherup.theme import ThemeStore

store = ThemeStore("theme.json")
store.set_theme(False)
store.is_light()    # False
```

### Talking to the API

`ApiClient(base_url, timeout=10.0)` sends GET requests to
`<base_url>/api<endpoint>` and decodes the JSON replies:

- `get(endpoint)` returns the decoded body.
- `weekly_data(lat, lng)` requests `/weather/weekly/data/<lat>/<lng>/` and
  returns a list of `DayData` (`weather_code`, `date`, `temp_min`,
  `temp_max`, `estimated_energy`).
- `weekly_summary(lat, lng)` requests `/weather/weekly/summary/<lat>/<lng>/`
  and returns a `WeeklySummaryData` (`average_pressure`,
  `average_sunshine_hours`, `min_temperature`, `max_temperature`,
  `weekly_summary`).

Connection failures, invalid JSON and missing or mistyped fields raise
`ApiError`. Both records can also be built with `from_dict`.

```python
from weatherup.api import ApiClient

client = ApiClient("http://localhost:8080", 10)
days = client.weekly_data(52.23, 21.01)
summary = client.weekly_summary(52.23, 21.01)
```

### Rendering

`weatherup.render` builds the HTML pieces: `render_forecast(day_data,
weekly_data, is_light)`, `render_navbar(is_light, is_forecast)` and
`render_map()`. `theme_suffix(is_light)` gives `""` for the light theme and
`"-dark"` for the dark one, appended to the CSS class names.

### The home page

`weatherup.home.HomePage(client, theme_store)` holds the page state:

- `set_location(lat, lng)` moves to a location, fills the inputs and calls
  `refresh()`; `choose_place(lat, lng)` does the same and switches to the
  forecast view.
- `input_latitude(text)` and `input_longitude(text)` take typed text,
  ignoring anything that is not a number, and set `error_lat` / `error_lng`
  with `validate_latitude` (±90) and `validate_longitude` (±180).
- `find()` moves to the typed coordinates.
- `show_forecast()`, `show_map()` switch the view; `set_light(is_light)`
  switches the theme and saves it.
- `refresh()` reloads data for the current location; an `ApiError` is logged
  and the previous data is kept.
- `render()` returns the whole page; `render_page(path, page)` routes `/` to
  it and anything else to `NotFound`.

## What it does not do

The output is static HTML. There is no web server and no script behind the
page: the buttons, inputs and theme switch do nothing when clicked in a
browser, and the map view is only an empty `<div id="map">` container with
no map drawn into it. Interaction goes through the `HomePage` methods.

## Running the tests

```
pip install .[test]
pytest
```