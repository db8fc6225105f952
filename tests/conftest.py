"""Shared fixtures: vedur.is style observation feeds"""
import pytest


def build_feed(valid: str = "1", station_id: str = "1475", err: str = "", **elements) -> str:
    """Build an observation feed document with the given measurement elements"""
    body = "".join(f"\n    <{tag}>{value}</{tag}>" for tag, value in elements.items())
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<observations>\n"
        f'  <station valid="{valid}" id="{station_id}">\n'
        "    <name>Reykjavík</name>\n"
        "    <time>2023-01-15 12:00:00</time>\n"
        f"    <err>{err}</err>\n"
        "    <link>https://en.vedur.is/weather/observations/areas/reykjavik/#station=1</link>"
        f"{body}\n"
        "  </station>\n"
        "</observations>\n"
    )


VALID_FEED = build_feed(F="3.0", FX="7.1", FG="9.4", D="NE", T="5.2", W="Clear sky", RH="68")
INVALID_FEED = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<observations>\n"
    '  <station valid="0" id="9999">\n'
    "    <err>station not found</err>\n"
    "  </station>\n"
    "</observations>\n"
)

EXPECTED_EXPOSITION = (
    "# HELP temperature Temperature (degrees C)\n"
    "# TYPE temperature gauge\n"
    "temperature 5.2\n"
    "\n"
    "# HELP wind_speed Wind speed (m/s)\n"
    "# TYPE wind_speed gauge\n"
    "wind_speed 3\n"
    "\n"
    "# HELP wind_speed_max Max wind speed (m/s)\n"
    "# TYPE wind_speed_max gauge\n"
    "wind_speed_max 7.1\n"
    "\n"
    "# HELP wind_speed_gust Wind speed gust (m/s)\n"
    "# TYPE wind_speed_gust gauge\n"
    "wind_speed_gust 9.4"
)


@pytest.fixture
def valid_feed():
    return VALID_FEED


@pytest.fixture
def invalid_feed():
    return INVALID_FEED


@pytest.fixture
def expected_exposition():
    return EXPECTED_EXPOSITION


@pytest.fixture
def feed_builder():
    return build_feed
